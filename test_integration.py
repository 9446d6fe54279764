"""
Integration test: loader + engine + scoring workflow.
Load the bundled CSV, generate an exam, answer some questions right and some wrong, finish, grade.
"""
import logging
import random
from pathlib import Path

import importer
from quizgen.engine import ExamSession
from quizgen.loader import load_bank
from quizgen.scoring import correct_count, is_correct, summarize

logger = logging.getLogger(__name__)

SAMPLE_CSV = Path(__file__).resolve().parent / "data" / "training.csv"


def test_exam_workflow():
    """Full end-to-end run of exam creation, answering, and scoring."""
    bank = load_bank(SAMPLE_CSV)
    rng = random.Random(42)

    exam = ExamSession.unstarted().generate(bank, ["Capitulo 1", "Capitulo 2"], 5, rng)
    assert len(exam) == 9  # 5 of 6 + all 4

    # Right answer for even positions, a wrong key for odd ones
    for idx, q in enumerate(exam.questions):
        if idx % 2 == 0:
            exam = exam.record_answer(idx, q.correct_key)
        else:
            wrong = next(o.key for o in q.options if o.key != q.correct_key)
            exam = exam.record_answer(idx, wrong)
    exam = exam.finish()

    result = summarize(exam)
    logger.info(f"Score: {result.correct}/{result.total_questions} ({result.percentage:.1f}%)")
    assert result.correct == correct_count(exam) == 5
    assert result.incorrect == 4
    assert result.percentage == 55.6
    assert all(is_correct(exam, i) == (i % 2 == 0) for i in range(len(exam)))

    # Answers are frozen now
    assert exam.record_answer(1, exam.questions[1].correct_key).answers == exam.answers

    # Regenerating starts a clean attempt
    again = exam.generate(bank, ["Capitulo 3"], 2, rng)
    assert again.is_active
    assert again.answers == ()
    assert {q.category for q in again.questions} == {"Capitulo 3"}


def test_bundled_options_are_filtered():
    bank = load_bank(SAMPLE_CSV)
    exam = ExamSession.unstarted().generate(bank, ["Capitulo 2"], 10, random.Random(0))
    stack = next(q for q in exam.questions if q.prompt == "Which structure uses LIFO order?")
    assert stack.option_keys() == ("a", "b", "c")


def test_importer_dry_run(capsys):
    assert importer.run(source=str(SAMPLE_CSV), categories=["Capitulo 3"], count=2, dry_run=True, seed=1) == 0
    out = capsys.readouterr().out
    assert "13 questions in 3 categories" in out
    assert "Sample exam (2 questions)" in out


def test_importer_reports_missing_source(tmp_path, capsys):
    assert importer.run(source=str(tmp_path / "missing.csv")) == 1
    assert "Error:" in capsys.readouterr().out
