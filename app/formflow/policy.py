from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PricingPolicy:
    TICKET_PRICE: int = 45
    CURRENCY: str = "SAR"
    MIN_TICKETS: int = 1
    MAX_TICKETS: int = 10


DEFAULT_POLICY = PricingPolicy()


def booking_total(tickets: int, policy: Optional[PricingPolicy] = None) -> int:
    policy = policy or DEFAULT_POLICY
    return int(tickets) * policy.TICKET_PRICE
