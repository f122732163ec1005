"""Tests for the JSON question repository."""

import json
from pathlib import Path

import pytest

from exam_sampler.question.domain.errors import InvalidQuestionError
from exam_sampler.question.domain.factory import build_question
from exam_sampler.question.domain.question import Domain
from exam_sampler.question.infrastructure.errors import QuestionLoadError
from exam_sampler.question.infrastructure.json_repository import JsonQuestionRepository
from tests.question.fake_observer import FakeQuestionObserver

# __file__ is tests/question/infrastructure/test_json_repository.py
FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _repository(name: str, observer: FakeQuestionObserver) -> JsonQuestionRepository:
    return JsonQuestionRepository(path=FIXTURES / name, observer=observer)


class TestValidQuestionFile:
    def test_loads_every_question(self) -> None:
        questions = _repository("questions.json", FakeQuestionObserver()).find_all()

        assert [q.id for q in questions] == ["q001", "q002", "q003", "q004", "q005"]

    def test_fields_are_typed(self) -> None:
        questions = _repository("questions.json", FakeQuestionObserver()).find_all()

        assert questions[2].domain is Domain.SECURITY
        assert questions[2].choices["B"] == "クラウド内のセキュリティ"

    def test_filters_by_language(self) -> None:
        repository = _repository("questions.json", FakeQuestionObserver())

        assert [q.id for q in repository.find_all(lang="en")] == ["q005"]
        assert len(repository.find_all(lang="jp")) == 4

    def test_unknown_language_returns_empty_list(self) -> None:
        repository = _repository("questions.json", FakeQuestionObserver())

        assert repository.find_all(lang="fr") == []

    def test_file_is_read_once(self) -> None:
        observer = FakeQuestionObserver()
        repository = _repository("questions.json", observer)

        repository.find_all()
        repository.find_all(lang="jp")

        assert len(observer.loading_started) == 1
        assert len(observer.loading_completed) == 1

    def test_returned_list_is_owned_by_caller(self) -> None:
        repository = _repository("questions.json", FakeQuestionObserver())

        first = repository.find_all()
        first.clear()

        assert len(repository.find_all()) == 5


class TestObserverEvents:
    def test_loading_started_and_completed_carry_path_and_count(self) -> None:
        observer = FakeQuestionObserver()
        _repository("questions.json", observer).find_all()

        path = str(FIXTURES / "questions.json")
        assert observer.loading_started[0].path == path
        assert observer.loading_completed[0].path == path
        assert observer.loading_completed[0].total_questions == 5
        assert observer.loading_failed == []


class TestInvalidQuestionFile:
    def test_missing_file_raises_question_load_error(self) -> None:
        observer = FakeQuestionObserver()

        with pytest.raises(QuestionLoadError, match="file not found"):
            _repository("does_not_exist.json", observer).find_all()

        assert len(observer.loading_failed) == 1

    def test_malformed_json_raises_question_load_error(self) -> None:
        with pytest.raises(QuestionLoadError, match="invalid JSON"):
            _repository("malformed.json", FakeQuestionObserver()).find_all()

    def test_top_level_object_raises_question_load_error(self) -> None:
        with pytest.raises(QuestionLoadError, match="JSON array"):
            _repository("not_an_array.json", FakeQuestionObserver()).find_all()

    def test_all_invalid_records_are_reported_together(self) -> None:
        observer = FakeQuestionObserver()

        with pytest.raises(InvalidQuestionError) as exc_info:
            _repository("invalid_questions.json", observer).find_all()

        reasons = exc_info.value.reasons
        assert len(reasons) == 3
        assert reasons[0].startswith("record 0: q001: stem")
        assert reasons[1].startswith("record 1: q002: domain")
        assert reasons[2].startswith("record 2: q003: ")
        assert observer.loading_completed == []
        assert len(observer.loading_failed) == 1

    def test_failed_load_is_not_cached(self) -> None:
        observer = FakeQuestionObserver()
        repository = _repository("invalid_questions.json", observer)

        for _ in range(2):
            with pytest.raises(InvalidQuestionError):
                repository.find_all()

        assert len(observer.loading_started) == 2

    def test_record_reasons_match_the_question_factory(self) -> None:
        records = json.loads(
            (FIXTURES / "invalid_questions.json").read_text(encoding="utf-8")
        )
        expected: list[str] = []
        for index, record in enumerate(records):
            with pytest.raises(InvalidQuestionError) as exc_info:
                build_question(record)
            expected.extend(f"record {index}: {r}" for r in exc_info.value.reasons)

        with pytest.raises(InvalidQuestionError) as repo_exc:
            _repository("invalid_questions.json", FakeQuestionObserver()).find_all()

        assert repo_exc.value.reasons == expected

    def test_non_object_record_is_reported_by_index(self, tmp_path: Path) -> None:
        path = tmp_path / "mixed.json"
        path.write_text('[42, "text"]', encoding="utf-8")
        repository = JsonQuestionRepository(path=path, observer=FakeQuestionObserver())

        with pytest.raises(InvalidQuestionError) as exc_info:
            repository.find_all()

        assert exc_info.value.reasons == [
            "record 0: expected an object",
            "record 1: expected an object",
        ]
