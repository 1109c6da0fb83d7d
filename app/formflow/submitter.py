# app/formflow/submitter.py
import logging
from typing import Any, Mapping, Optional

import requests

from formflow.outcomes import (
    ApplicationFailure,
    ProtocolFailure,
    Success,
    SubmissionOutcome,
    TransportFailure,
)

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Submission failed"
DEFAULT_TRANSPORT_MESSAGE = "Server error. Try again."


def _envelope_message(body: Any) -> Optional[str]:
    """The `msg` of a {ok, msg} envelope, if the body has that shape."""
    if isinstance(body, Mapping):
        msg = body.get("msg")
        if isinstance(msg, str) and msg.strip():
            return msg
    return None


class Submitter:
    """
    Posts a payload as JSON and classifies what came back.
    No timeout and no retries: every failure ends the attempt.
    """

    def __init__(self, base_url: str = "", session: Optional[requests.Session] = None):
        self.base_url = (base_url or "").rstrip("/")
        self.session = session or requests.Session()

    def url_for(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def submit(self,
               endpoint: str,
               payload: Mapping[str, Any],
               failure_message: str = DEFAULT_FAILURE_MESSAGE,
               transport_message: str = DEFAULT_TRANSPORT_MESSAGE) -> SubmissionOutcome:
        url = self.url_for(endpoint)
        try:
            resp = self.session.post(url, json=dict(payload))
        except requests.RequestException as e:
            logger.warning("POST %s failed before a response: %s", url, e)
            return TransportFailure(transport_message)

        raw = resp.text or ""
        try:
            body = resp.json()
        except ValueError:
            # error pages and other non-JSON bodies are surfaced as raw text
            body = None

        if not 200 <= resp.status_code < 300:
            logger.info("POST %s -> HTTP %s", url, resp.status_code)
            message = _envelope_message(body) or raw.strip() or failure_message
            return ProtocolFailure(message, status_code=resp.status_code)

        if isinstance(body, Mapping) and body.get("ok") is False:
            logger.info("POST %s -> rejected by application", url)
            return ApplicationFailure(_envelope_message(body) or failure_message)

        logger.info("POST %s -> success", url)
        return Success(body if body is not None else raw)
