"""Error types raised by question infrastructure."""

from exam_sampler.core.errors import ExamSamplerError


class QuestionLoadError(ExamSamplerError):
    """Raised when a question file cannot be read or is not a JSON array."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load questions: {reason}")
