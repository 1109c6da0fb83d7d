# app/formflow/renderer.py
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple, Union

from formflow.outcomes import Failure, FormPayload, Success
from formflow.policy import DEFAULT_POLICY, PricingPolicy, booking_total

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Error"
HOME_LABEL = "Back to homepage"


@dataclass(frozen=True)
class Action:
    key: str
    label: str


@dataclass(frozen=True)
class ReceiptView:
    """Read-only summary of a payload that the backend accepted."""
    title: str
    rows: Tuple[Tuple[str, str], ...]
    acknowledgement: str
    actions: Tuple[Action, ...]
    home_url: str
    total: Optional[int] = None
    currency: str = ""
    payload: FormPayload = field(default_factory=dict, compare=False)

    @property
    def total_text(self) -> Optional[str]:
        if self.total is None:
            return None
        return f"{self.total} {self.currency}".strip()


@dataclass(frozen=True)
class ErrorView:
    message: str


View = Union[ReceiptView, ErrorView]


class ResultArea:
    """
    The single slot below a form. It holds at most one view; mounting a
    new one drops whatever was there, including its acknowledgement.
    """

    def __init__(self):
        self.view: Optional[View] = None
        self.acknowledged = False

    def replace(self, view: View):
        self.view = view
        self.acknowledged = False

    def clear(self):
        self.view = None
        self.acknowledged = False

    def acknowledge(self):
        if isinstance(self.view, ReceiptView):
            self.acknowledged = True

    @property
    def receipt(self) -> Optional[ReceiptView]:
        return self.view if isinstance(self.view, ReceiptView) else None


def build_receipt(spec, payload: FormPayload, home_url: str,
                  policy: Optional[PricingPolicy] = None) -> ReceiptView:
    policy = policy or DEFAULT_POLICY
    rows = tuple((label, str(payload.get(key, ""))) for key, label in spec.labels)
    total = booking_total(payload.get("tickets") or 0, policy) if spec.priced else None
    return ReceiptView(
        title=spec.receipt_title,
        rows=rows,
        acknowledgement=spec.acknowledgement,
        actions=(Action("confirm", spec.confirm_label), Action("home", HOME_LABEL)),
        home_url=home_url,
        total=total,
        currency=policy.CURRENCY if spec.priced else "",
        payload=dict(payload),
    )


class ResultRenderer:
    def __init__(self, area: ResultArea, navigator: Callable[[str], None],
                 home_url: str, policy: Optional[PricingPolicy] = None):
        self.area = area
        self.navigator = navigator
        self.home_url = home_url
        self.policy = policy or DEFAULT_POLICY

    def render_error(self, message: Optional[str]):
        self.area.replace(ErrorView(message or GENERIC_ERROR))

    def render(self, outcome, payload: FormPayload, spec):
        """The receipt is built from what was sent, not from the server body."""
        if isinstance(outcome, Failure):
            self.render_error(outcome.message)
            return
        if not isinstance(outcome, Success):
            logger.warning("Unknown outcome %r", outcome)
            self.render_error(spec.server_error_message)
            return
        self.area.clear()
        self.area.replace(build_receipt(spec, payload, self.home_url, self.policy))

    def on_action(self, key: str):
        if key == "confirm":
            self.confirm()
        elif key == "home":
            self.go_home()

    def confirm(self):
        self.area.acknowledge()

    def go_home(self):
        self.navigator(self.home_url)
