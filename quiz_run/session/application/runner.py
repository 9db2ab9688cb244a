"""SessionRunner — drives the interactive question loop and scores the answers."""

from typing import TextIO

import typer

from quiz_run.core.console import InputClosedError, InputReadError, read_line
from quiz_run.dataset.domain.record import QuestionRecord
from quiz_run.session.domain.observer import SessionObserver
from quiz_run.session.domain.result import QuestionOutcome, SessionResult


class SessionRunner:
    """Asks every question once, in order, and reports the final score.

    A failed read never aborts the session: the question is skipped, counted in
    the total, and the loop moves on to the next one.
    """

    def __init__(self, observer: SessionObserver) -> None:
        self._observer = observer

    def run(self, records: list[QuestionRecord], stdin: TextIO) -> SessionResult:
        """Run one quiz session over records, reading answers from stdin."""
        self._observer.session_started(total_questions=len(records))

        outcomes = [
            self._ask(index=index, record=record, stdin=stdin)
            for index, record in enumerate(records)
        ]

        result = SessionResult(
            total_questions=len(records),
            correct_count=sum(1 for outcome in outcomes if outcome.correct),
            outcomes=outcomes,
        )

        self._observer.session_completed(
            total_questions=result.total_questions,
            correct_count=result.correct_count,
            percentage=result.percentage,
        )
        typer.echo(format_score(result=result))
        return result

    def _ask(self, index: int, record: QuestionRecord, stdin: TextIO) -> QuestionOutcome:
        typer.echo(f"{record.prompt}?")

        try:
            answer = read_line(stdin)
        except (InputClosedError, InputReadError) as exc:
            typer.echo(f"Error recording answer: {exc}", err=True)
            self._observer.answer_skipped(index=index, reason=str(exc))
            return QuestionOutcome(
                index=index, prompt=record.prompt, answer=None, correct=False
            )

        correct = answer == record.expected_answer
        self._observer.answer_recorded(index=index, correct=correct)
        return QuestionOutcome(
            index=index, prompt=record.prompt, answer=answer, correct=correct
        )


def format_score(result: SessionResult) -> str:
    """Render the final score line, e.g. 'You got 2 (66.7%) correct!'."""
    return f"You got {result.correct_count} ({result.percentage:.1f}%) correct!"
