# app/formflow/controller.py
import logging
from dataclasses import dataclass

from formflow.outcomes import Invalid, Success

logger = logging.getLogger(__name__)


@dataclass
class SubmitEvent:
    form: str = ""
    default_prevented: bool = False

    def prevent_default(self):
        self.default_prevented = True


class FormController:
    """
    One per form on the page. Owns the form's rules (via spec), the field
    source, the submitter and the renderer, and the in-flight flag.

    fields: anything with read(name) -> str and reset()
    """

    def __init__(self, spec, fields, submitter, renderer):
        self.spec = spec
        self.fields = fields
        self.submitter = submitter
        self.renderer = renderer
        self.in_flight = False

    def on_submit(self, event=None):
        if event is not None:
            event.prevent_default()

        if self.in_flight:
            logger.info("[%s] submit ignored, a submission is already in flight", self.spec.name)
            return None

        self.in_flight = True
        try:
            return self._run()
        except Exception:
            logger.exception("[%s] submit failed unexpectedly", self.spec.name)
            self.renderer.render_error(self.spec.server_error_message)
            return None
        finally:
            self.in_flight = False

    def _run(self):
        result = self.spec.validate(self.fields)
        if isinstance(result, Invalid):
            self.renderer.render_error(result.message)
            return result

        outcome = self.submitter.submit(
            self.spec.endpoint,
            result.payload,
            failure_message=self.spec.failure_message,
            transport_message=self.spec.server_error_message,
        )
        self.renderer.render(outcome, result.payload, self.spec)
        if isinstance(outcome, Success):
            self.fields.reset()
        return outcome
