# app/formflow/config.py
import os
from dataclasses import dataclass

from formflow.policy import PricingPolicy

DEFAULT_API_BASE_URL = "http://localhost:3000"
DEFAULT_HOME_URL = "/HTML/HomePage.html"


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_BASE_URL
    home_url: str = DEFAULT_HOME_URL
    currency: str = "SAR"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read settings from the environment. Call load_dotenv() first if a
        .env file should be honoured.
        """
        return cls(
            api_base_url=os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
            home_url=os.getenv("HOME_URL", DEFAULT_HOME_URL),
            currency=os.getenv("CURRENCY", "SAR"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def pricing(self) -> PricingPolicy:
        # The ticket price is fixed; only the currency label is configurable.
        return PricingPolicy(CURRENCY=self.currency)
