"""Error types raised when a session cannot be assembled."""

from exam_sampler.core.errors import ExamSamplerError
from exam_sampler.question.domain.question import Domain


class InsufficientQuestionsError(ExamSamplerError):
    """Raised when fewer questions were selected than the session needs."""

    def __init__(self, domain: Domain | None, requested: int, available: int) -> None:
        self.domain = domain
        self.requested = requested
        self.available = available
        scope = f" in domain '{domain}'" if domain else ""
        super().__init__(
            f"Insufficient questions{scope}: requested {requested}, "
            f"but only {available} available"
        )
