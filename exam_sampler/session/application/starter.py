"""SessionStarter: selects the question set for a new practice or exam session."""

from exam_sampler.config.domain.session import SessionConfig
from exam_sampler.question.domain.question import Question
from exam_sampler.question.domain.repository import QuestionRepository
from exam_sampler.sampling.domain.request import SamplingRequest
from exam_sampler.sampling.domain.sampler import DeduplicatedSampler
from exam_sampler.session.domain.errors import InsufficientQuestionsError
from exam_sampler.session.domain.observer import SessionObserver
from exam_sampler.session.domain.request import ExamMode, SessionRequest


class SessionStarter:
    """Resolves the session size, samples the pool, and enforces the result size.

    The sampler degrades gracefully and may return a short list; this use case
    is where a short list becomes an InsufficientQuestionsError.
    """

    def __init__(
        self,
        repository: QuestionRepository,
        sampler: DeduplicatedSampler,
        config: SessionConfig,
        observer: SessionObserver,
    ) -> None:
        self._repository = repository
        self._sampler = sampler
        self._config = config
        self._observer = observer

    def start(self, request: SessionRequest) -> list[Question]:
        """Return the ordered questions for the session.

        Raises:
            InsufficientQuestionsError: if fewer questions than the session size
                could be selected.
            InvalidQuestionError, QuestionLoadError: propagated from the repository.
        """
        count = self.question_count(request=request)
        pool = self._repository.find_all(lang=request.lang)
        sampling_request = SamplingRequest(
            count=count,
            domain=request.domain,
            lang=request.lang,
            threshold=request.similarity_threshold,
            check_choices=request.check_choices,
        )

        if request.prevent_duplication:
            questions = self._sampler.sample(pool=pool, request=sampling_request)
        else:
            questions = self._sampler.sample_random(pool=pool, request=sampling_request)

        if len(questions) < count:
            self._observer.session_insufficient_questions(
                mode=request.mode.value,
                domain=request.domain.value if request.domain else None,
                requested=count,
                available=len(questions),
            )
            raise InsufficientQuestionsError(
                domain=request.domain, requested=count, available=len(questions)
            )

        self._observer.session_questions_selected(
            mode=request.mode.value,
            requested=count,
            selected=len(questions),
            deduplicated=request.prevent_duplication,
        )
        return questions

    def question_count(self, request: SessionRequest) -> int:
        if request.count is not None:
            return request.count
        if request.mode is ExamMode.FULL_EXAM:
            return self._config.exam_count
        return self._config.practice_count
