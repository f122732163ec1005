"""JSON question repository: reads a question file once and serves the validated pool."""

import json
from pathlib import Path
from typing import Any

from exam_sampler.question.domain.errors import InvalidQuestionError
from exam_sampler.question.domain.factory import build_question
from exam_sampler.question.domain.observer import QuestionObserver
from exam_sampler.question.domain.question import Question
from exam_sampler.question.infrastructure.errors import QuestionLoadError


class JsonQuestionRepository:
    """Loads a JSON array of question records and returns Question value objects.

    The file is read on first use and the resulting pool is cached for the
    lifetime of the repository. Questions are never modified after loading.
    """

    def __init__(self, path: Path, observer: QuestionObserver) -> None:
        self._path = path
        self._observer = observer
        self._questions: list[Question] | None = None

    def find_all(self, lang: str | None = None) -> list[Question]:
        """Return every loaded question, optionally restricted to one language."""
        questions = self._load()
        if lang is None:
            return list(questions)
        return [q for q in questions if q.lang == lang]

    def _load(self) -> list[Question]:
        """
        Read, parse, and validate the question file on first call.

        Collects ALL invalid records before raising a single InvalidQuestionError
        listing every issue found. No partially valid pool is ever cached.

        Raises:
            QuestionLoadError: if the file is missing, is not valid JSON, or is
                not a JSON array of objects.
            InvalidQuestionError: if any record violates Question invariants.
        """
        if self._questions is not None:
            return self._questions

        path_str = str(self._path)
        self._observer.questions_loading_started(path=path_str)

        try:
            records = self._read_records()
        except QuestionLoadError as exc:
            self._observer.questions_loading_failed(path=path_str, reason=str(exc))
            raise

        questions, errors = self._build_questions(records=records)
        if errors:
            self._observer.questions_loading_failed(
                path=path_str, reason="; ".join(errors)
            )
            raise InvalidQuestionError(reasons=errors)

        self._observer.questions_loading_completed(
            path=path_str, total_questions=len(questions)
        )
        self._questions = questions
        return questions

    def _read_records(self) -> list[Any]:
        try:
            with open(self._path, encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError as exc:
            raise QuestionLoadError(f"file not found: {self._path}") from exc
        except json.JSONDecodeError as exc:
            raise QuestionLoadError(f"invalid JSON in {self._path}: {exc}") from exc

        if not isinstance(data, list):
            raise QuestionLoadError(
                f"expected a JSON array of questions in {self._path}"
            )
        return data

    def _build_questions(self, records: list[Any]) -> tuple[list[Question], list[str]]:
        """Validate each record into a Question, collecting errors without aborting early."""
        questions: list[Question] = []
        errors: list[str] = []

        for index, record in enumerate(records):
            if not isinstance(record, dict):
                errors.append(f"record {index}: expected an object")
                continue
            try:
                questions.append(build_question(record))
            except InvalidQuestionError as exc:
                errors.extend(f"record {index}: {reason}" for reason in exc.reasons)

        return questions, errors
