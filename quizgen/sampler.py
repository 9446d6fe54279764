"""
Question selection: per-category sampling without replacement, then one shuffle of the whole exam.
"""
import logging
import random
from typing import Iterable, List, Optional, Protocol, Sequence, TypeVar

from quizgen.question_bank import GeneratedQuestion, Option, QuestionBank, RawRow

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with random() -> float in [0, 1). random.Random and the random module both qualify."""

    def random(self) -> float:
        ...


def _source(rng: Optional[RandomSource]) -> RandomSource:
    return random if rng is None else rng


def shuffle(items: Sequence[T], rng: Optional[RandomSource] = None) -> List[T]:
    """Return a uniformly random permutation of items (Fisher-Yates). The input is not modified."""
    rng = _source(rng)
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        # j in [0, i]
        j = min(int(rng.random() * (i + 1)), i)
        out[i], out[j] = out[j], out[i]
    return out


def sample_category(bank: QuestionBank, category: str, count: int, rng: Optional[RandomSource] = None) -> List[RawRow]:
    """
    Pick min(count, population) distinct rows of one category, uniformly at random.

    Unknown or empty categories give []. Asking for more than the population is capped, never padded.
    """
    rows = bank.rows_for(category)
    if count < 1 or not rows:
        return []
    size = min(count, len(rows))
    if size < count:
        logger.warning(f"Only {len(rows)} questions available in '{category}', requested {count}")
    return shuffle(rows, rng)[:size]


def build_question(row: RawRow) -> GeneratedQuestion:
    """Freeze a raw row into a question, dropping option slots whose text is blank."""
    options = tuple(
        Option(key=key, text=text)
        for key, text in row.option_slots()
        if text and text.strip()
    )
    return GeneratedQuestion(
        category=row.category,
        prompt=row.prompt,
        correct_key=row.correct_key,
        options=options,
    )


def generate_questions(
    bank: QuestionBank,
    categories: Iterable[str],
    count_per_category: int,
    rng: Optional[RandomSource] = None,
) -> List[GeneratedQuestion]:
    """
    Build an exam: sample each selected category, convert rows to questions, shuffle the lot once.

    Args:
        bank: Loaded question bank
        categories: Selected category names (any iterable; duplicates are ignored)
        count_per_category: Questions wanted from each category
        rng: Source of randomness; defaults to the process-wide random module

    Returns:
        Questions in exam order; an empty list when nothing is selected
    """
    selected = sorted(set(categories))
    if not selected:
        logger.info("No categories selected; generated an empty exam")
        return []

    questions: List[GeneratedQuestion] = []
    for category in selected:
        rows = sample_category(bank, category, count_per_category, rng)
        questions.extend(build_question(row) for row in rows)

    exam = shuffle(questions, rng)
    logger.info(f"Generated {len(exam)} questions from {len(selected)} categories ({count_per_category} per category)")
    return exam
