import pytest

from quizgen.question_bank import QuestionBank, RawRow


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


def make_row(category: str, n: int, correct_key: str = "a", **options) -> RawRow:
    slots = {"a": f"{category}-{n}-a", "b": f"{category}-{n}-b", "c": f"{category}-{n}-c", "d": "", "e": ""}
    slots.update(options)
    return RawRow(category=category, prompt=f"{category} question {n}", correct_key=correct_key, **slots)


@pytest.fixture
def identity_rng():
    # int(0.999 * (i + 1)) == i for small lists, so Fisher-Yates leaves order untouched
    return FixedRandom(0.999)


@pytest.fixture
def rotate_rng():
    # Always swapping with index 0 rotates the list left by one
    return FixedRandom(0.0)


@pytest.fixture
def bank():
    rows = [make_row("Ch1", i) for i in range(10)] + [make_row("Ch2", i) for i in range(3)]
    return QuestionBank.load(rows)
