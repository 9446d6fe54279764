"""
Scoring: correctness per question, correct count, percentage and a result summary.
Read once the session is finished; the functions work on any state but only a finished session is stable.
"""
import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional

from quizgen.engine import ExamSession

logger = logging.getLogger(__name__)


def is_correct(session: ExamSession, question_index: int) -> Optional[bool]:
    """
    True/False for an answered question, None when it has no answer.
    Keys are compared exactly (case-sensitive, no trimming).
    """
    session.check_index(question_index)
    selected = session.answer_for(question_index)
    if selected is None:
        return None
    return selected == session.questions[question_index].correct_key


def correct_count(session: ExamSession) -> int:
    """Answered questions whose key matches. Unanswered questions never count."""
    return sum(
        1 for a in session.answers
        if 0 <= a.question_index < len(session.questions)
        and a.selected_key == session.questions[a.question_index].correct_key
    )


def _percentage_decimal(session: ExamSession) -> Decimal:
    total = len(session.questions)
    if total == 0:
        return Decimal("0.0")
    # Half up, so 1 of 16 shows as 6.3
    return Decimal(str(correct_count(session) * 100 / total)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def percentage(session: ExamSession) -> float:
    """correct / total * 100, rounded half up to one decimal. An exam with no questions scores 0.0."""
    return float(_percentage_decimal(session))


def format_percentage(session: ExamSession) -> str:
    return str(_percentage_decimal(session))


@dataclass
class CategoryStats:
    total: int = 0
    answered: int = 0
    correct: int = 0


@dataclass
class ExamResult:
    total_questions: int
    answered: int
    correct: int
    incorrect: int
    unanswered: int
    percentage: float
    finished: bool
    percentage_display: str = "0.0"
    unanswered_questions: List[int] = field(default_factory=list)  # 1-based, as shown to the user
    category_breakdown: Dict[str, CategoryStats] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            "total_questions": self.total_questions,
            "answered": self.answered,
            "correct": self.correct,
            "incorrect": self.incorrect,
            "unanswered": self.unanswered,
            "percentage": self.percentage,
            "finished": self.finished,
            "unanswered_questions": list(self.unanswered_questions),
            "category_breakdown": {
                cat: {"total": s.total, "answered": s.answered, "correct": s.correct}
                for cat, s in self.category_breakdown.items()
            },
        }

    def breakdown_rows(self) -> List[Dict]:
        """One row per category for tabular display."""
        rows = []
        for cat, s in self.category_breakdown.items():
            accuracy = f"{s.correct / s.total * 100:.0f}%" if s.total else "-"
            rows.append({
                "Category": cat,
                "Correct": f"{s.correct}/{s.total}",
                "Answered": s.answered,
                "Accuracy": accuracy,
            })
        return rows


def summarize(session: ExamSession) -> ExamResult:
    """
    Results for the whole exam plus a per-category breakdown.

    Returns:
        ExamResult with counts, percentage and {category: CategoryStats}
    """
    breakdown: Dict[str, CategoryStats] = {}
    answered = 0
    correct = 0
    for i, question in enumerate(session.questions):
        stats = breakdown.setdefault(question.category, CategoryStats())
        stats.total += 1
        outcome = is_correct(session, i)
        if outcome is None:
            continue
        answered += 1
        stats.answered += 1
        if outcome:
            correct += 1
            stats.correct += 1

    total = len(session.questions)
    result = ExamResult(
        total_questions=total,
        answered=answered,
        correct=correct,
        incorrect=answered - correct,
        unanswered=total - answered,
        percentage=percentage(session),
        percentage_display=format_percentage(session),
        unanswered_questions=[i + 1 for i in session.unanswered_indices()],
        finished=session.finished,
        category_breakdown=dict(sorted(breakdown.items())),
    )
    logger.info(f"Exam result: {correct}/{total} correct ({result.percentage_display}%)")
    return result
