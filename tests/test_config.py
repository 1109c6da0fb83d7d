from formflow.config import Settings
from formflow.policy import booking_total


def test_defaults(monkeypatch):
    for name in ("API_BASE_URL", "HOME_URL", "CURRENCY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.api_base_url == "http://localhost:3000"
    assert settings.home_url == "/HTML/HomePage.html"
    assert settings.pricing().TICKET_PRICE == 45
    assert settings.pricing().CURRENCY == "SAR"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://cinema.example/")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.api_base_url == "https://cinema.example"
    assert settings.log_level == "DEBUG"


def test_ticket_price_is_not_configurable(monkeypatch):
    monkeypatch.setenv("TICKET_PRICE", "oops")

    settings = Settings.from_env()

    assert settings.pricing().TICKET_PRICE == 45
    assert booking_total(3, settings.pricing()) == 135
