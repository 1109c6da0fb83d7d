# app/formflow/outcomes.py
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

FormPayload = Dict[str, Any]


@dataclass(frozen=True)
class Valid:
    payload: FormPayload = field(default_factory=dict)


@dataclass(frozen=True)
class Invalid:
    message: str


ValidationResult = Union[Valid, Invalid]


@dataclass(frozen=True)
class Success:
    body: Any = None


@dataclass(frozen=True)
class Failure:
    message: str


@dataclass(frozen=True)
class ApplicationFailure(Failure):
    """2xx response whose envelope says ok: false."""


@dataclass(frozen=True)
class ProtocolFailure(Failure):
    status_code: Optional[int] = None


@dataclass(frozen=True)
class TransportFailure(Failure):
    """No response was obtained at all."""


SubmissionOutcome = Union[Success, ApplicationFailure, ProtocolFailure, TransportFailure]
