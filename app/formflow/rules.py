# app/formflow/rules.py
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Sequence

from formflow.outcomes import FormPayload, Invalid, Valid, ValidationResult

logger = logging.getLogger(__name__)

FormState = Mapping[str, str]


@dataclass(frozen=True)
class FieldRule:
    field: str
    predicate: Callable[[FormState], bool]
    message: str

    def passes(self, state: FormState) -> bool:
        # A value the predicate cannot even interpret is a failed rule.
        try:
            return bool(self.predicate(state))
        except (TypeError, ValueError, KeyError):
            return False


def read_state(source, names: Iterable[str]) -> dict:
    """
    Snapshot the raw form values. A field the source does not have reads as "".
    source: anything with read(name) -> str
    """
    state = {}
    for name in names:
        value = source.read(name)
        state[name] = "" if value is None else str(value)
    return state


def first_violation(rules: Sequence[FieldRule], state: FormState):
    for rule in rules:
        if not rule.passes(state):
            return rule
    return None


def validate(rules: Sequence[FieldRule],
             state: FormState,
             build_payload: Callable[[FormState], FormPayload]) -> ValidationResult:
    """
    Fail-fast: rules run in order and the first one that fails is the only
    message returned; later rules are not evaluated. The payload is only
    built once every rule has passed.
    """
    rule = first_violation(rules, state)
    if rule is not None:
        logger.info("Validation failed on field %r", rule.field)
        return Invalid(rule.message)
    return Valid(build_payload(state))
