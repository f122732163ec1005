"""CLI entrypoint for exam-sampler: typer app with `sample` and `check` commands."""

import random
import sys
from pathlib import Path

import structlog
import typer

from exam_sampler.config.domain.config import SamplerConfig
from exam_sampler.config.infrastructure.observer import StructlogConfigObserver
from exam_sampler.config.infrastructure.yaml_loader import YamlConfigLoader
from exam_sampler.core.errors import ExamSamplerError
from exam_sampler.question.domain.question import Domain, Question
from exam_sampler.question.infrastructure.json_repository import JsonQuestionRepository
from exam_sampler.question.infrastructure.observer import StructlogQuestionObserver
from exam_sampler.sampling.domain.sampler import DeduplicatedSampler
from exam_sampler.sampling.infrastructure.observer import StructlogSamplingObserver
from exam_sampler.session.application.starter import SessionStarter
from exam_sampler.session.domain.request import ExamMode, SessionRequest
from exam_sampler.session.infrastructure.observer import StructlogSessionObserver
from exam_sampler.similarity.domain.audit import find_duplicates

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r} (expected console or json)")
        raise typer.Exit(code=1)

    # Logs go to stderr so stdout carries only the selected questions.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path) -> SamplerConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def _build_starter(config: SamplerConfig) -> SessionStarter:
    repository = JsonQuestionRepository(
        path=config.questions.path,
        observer=StructlogQuestionObserver(),
    )
    sampler = DeduplicatedSampler(
        observer=StructlogSamplingObserver(),
        rng=random.Random(config.sampling.seed),
    )
    return SessionStarter(
        repository=repository,
        sampler=sampler,
        config=config.session,
        observer=StructlogSessionObserver(),
    )


def _print_questions(questions: list[Question]) -> None:
    for number, question in enumerate(questions, start=1):
        typer.echo(f"{number:>3}. [{question.id}] ({question.domain}) {question.stem}")


@app.command()
def sample(
    config_path: Path = typer.Argument(..., help="Path to exam-sampler config YAML"),
    mode: ExamMode = typer.Option(ExamMode.FULL_EXAM, "--mode", help="Exam mode"),
    domain: Domain | None = typer.Option(None, "--domain", help="Domain filter"),
    count: int | None = typer.Option(
        None, "--count", "-n", min=1, help="Number of questions"
    ),
    lang: str | None = typer.Option(None, "--lang", help="Language filter"),
    dedup: bool = typer.Option(
        True, "--dedup/--no-dedup", help="Filter out near-duplicate questions"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Select a question set for a new session and print it."""
    _configure_structlog(log_format=log_format)
    try:
        config = _load_config(config_path=config_path)
        starter = _build_starter(config=config)
        questions = starter.start(
            request=SessionRequest(
                mode=mode,
                domain=domain,
                count=count,
                lang=lang,
                prevent_duplication=dedup,
                similarity_threshold=config.sampling.similarity_threshold,
                check_choices=config.sampling.check_choices,
            )
        )
    except ExamSamplerError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        raise typer.Exit(code=1) from exc

    _print_questions(questions=questions)


@app.command()
def check(
    config_path: Path = typer.Argument(..., help="Path to exam-sampler config YAML"),
    threshold: float | None = typer.Option(
        None,
        "--threshold",
        min=0.0,
        max=1.0,
        min_open=True,
        help="Similarity threshold (defaults to the configured value)",
    ),
    choices: bool | None = typer.Option(
        None,
        "--choices/--no-choices",
        help="Compare choice texts as well as stems (defaults to the configured value)",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Report every near-duplicate pair in the question pool. Exits 1 if any exist."""
    _configure_structlog(log_format=log_format)
    try:
        config = _load_config(config_path=config_path)
        repository = JsonQuestionRepository(
            path=config.questions.path,
            observer=StructlogQuestionObserver(),
        )
        pairs = find_duplicates(
            questions=repository.find_all(),
            threshold=(
                config.sampling.similarity_threshold
                if threshold is None
                else threshold
            ),
            check_choices=(
                config.sampling.check_choices if choices is None else choices
            ),
        )
    except ExamSamplerError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        raise typer.Exit(code=1) from exc

    if not pairs:
        typer.echo("No duplicate questions found.")
        return

    for pair in pairs:
        typer.echo(
            f"{pair.first_id} ~ {pair.second_id}  "
            f"score={pair.similarity_score:.2f}  {pair.second_stem}"
        )
    typer.echo(f"{len(pairs)} duplicate pair(s) found.")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
