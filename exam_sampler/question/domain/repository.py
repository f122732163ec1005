"""QuestionRepository Protocol: structural interface for the question pool source."""

from typing import Protocol

from exam_sampler.question.domain.question import Question


class QuestionRepository(Protocol):
    """Supplies the read-only pool of validated questions."""

    def find_all(self, lang: str | None = None) -> list[Question]: ...
