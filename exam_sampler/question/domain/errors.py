"""Error types raised while building Question records."""

from exam_sampler.core.errors import ExamSamplerError


class InvalidQuestionError(ExamSamplerError):
    """Raised when one or more raw question records violate Question invariants."""

    def __init__(self, reasons: list[str]) -> None:
        self.reasons = reasons
        super().__init__(f"Invalid question record: {'; '.join(reasons)}")
