"""Tests for SessionResult invariants and the derived percentage."""

import pytest
from pydantic import ValidationError

from quiz_run.session.domain.result import QuestionOutcome, SessionResult


class TestSessionResultInvariants:
    """correct_count must lie between 0 and total_questions."""

    def test_correct_count_above_total_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SessionResult(total_questions=2, correct_count=3)

    def test_negative_counts_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SessionResult(total_questions=-1, correct_count=0)
        with pytest.raises(ValidationError):
            SessionResult(total_questions=1, correct_count=-1)

    def test_all_correct_is_valid(self) -> None:
        assert SessionResult(total_questions=3, correct_count=3).correct_count == 3


class TestPercentage:
    """percentage is correct/total * 100, and 0.0 for an empty session."""

    def test_two_of_three(self) -> None:
        assert SessionResult(total_questions=3, correct_count=2).percentage == pytest.approx(
            66.666, rel=1e-3
        )

    def test_full_marks(self) -> None:
        assert SessionResult(total_questions=3, correct_count=3).percentage == 100.0

    def test_zero_questions_is_zero_percent(self) -> None:
        assert SessionResult(total_questions=0, correct_count=0).percentage == 0.0


class TestQuestionOutcome:
    """A skipped question has no answer."""

    def test_skipped_outcome(self) -> None:
        outcome = QuestionOutcome(index=0, prompt="5+5", answer=None, correct=False)
        assert outcome.answer is None

    def test_skipped_outcome_cannot_be_correct(self) -> None:
        with pytest.raises(ValidationError):
            QuestionOutcome(index=0, prompt="5+5", answer=None, correct=True)

    def test_negative_index_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            QuestionOutcome(index=-1, prompt="5+5", answer="10", correct=True)
