"""Inspect a question CSV: category counts and, with --dry-run, a sample generated exam."""
import argparse
import logging
import random
import sys

from quizgen import config
from quizgen.engine import ExamSession
from quizgen.errors import EmptyInputError, SourceLoadError
from quizgen.loader import load_bank

logger = logging.getLogger(__name__)


def print_summary(bank) -> None:
    print(f"{len(bank)} questions in {len(bank.categories)} categories")
    for category, n in bank.counts().items():
        print(f"  {category:<30} {n:>5}")


def print_exam(exam: ExamSession) -> None:
    print()
    print(f"Sample exam ({len(exam)} questions):")
    print("-" * 60)
    for i, q in enumerate(exam.questions):
        print(f"  Q{i + 1:2d}  [{q.category}] {q.prompt[:60]}")
        for opt in q.options:
            marker = "*" if opt.key == q.correct_key else " "
            print(f"        {marker} {opt.key}) {opt.text[:60]}")


def run(source=None, categories=None, count=None, dry_run=False, seed=None) -> int:
    try:
        bank = load_bank(source)
    except (SourceLoadError, EmptyInputError) as e:
        print(f"Error: {e}")
        return 1
    print_summary(bank)
    if not dry_run:
        return 0

    selection = categories or list(bank.categories)
    unknown = [c for c in selection if c not in bank.by_category]
    if unknown:
        logger.warning(f"Unknown categories ignored: {', '.join(unknown)}")
    rng = random.Random(seed) if seed is not None else None
    exam = ExamSession.unstarted().generate(bank, selection, count or config.QUESTIONS_PER_CATEGORY, rng)
    print_exam(exam)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s: %(message)s")
    parser = argparse.ArgumentParser(description="Inspect a question CSV and optionally generate a sample exam.")
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help=f"CSV path or http(s) URL (default: {config.CSV_SOURCE})",
    )
    parser.add_argument("--dry-run", action="store_true", help="Also generate and print a sample exam")
    parser.add_argument("--categories", nargs="+", default=None, help="Categories to draw from (default: all)")
    parser.add_argument("--count", type=int, default=None, help=f"Questions per category (default {config.QUESTIONS_PER_CATEGORY})")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a repeatable sample exam")
    args = parser.parse_args()
    sys.exit(run(source=args.source, categories=args.categories, count=args.count, dry_run=args.dry_run, seed=args.seed))
