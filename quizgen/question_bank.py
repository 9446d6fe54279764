"""
Question bank: raw CSV rows grouped by category.
Rows stay raw here; they become GeneratedQuestion values only when an exam is generated.
"""
import logging
from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

OPTION_KEYS = ("a", "b", "c", "d", "e")

# CSV header -> RawRow field. Spanish names are the training.csv headers.
FIELD_ALIASES = {
    "category": ("capitulo", "capítulo", "category", "chapter"),
    "prompt": ("pregunta", "prompt", "question"),
    "correct_key": ("respuesta", "answer", "correct_key"),
}


def _pick(row: Mapping, names: Tuple[str, ...]) -> str:
    for name in names:
        value = row.get(name)
        if value is not None:
            return str(value)
    return ""


@dataclass(frozen=True)
class RawRow:
    """One unprocessed CSV record with five fixed option slots (a..e)."""
    category: str
    prompt: str
    correct_key: str
    a: str = ""
    b: str = ""
    c: str = ""
    d: str = ""
    e: str = ""

    @classmethod
    def from_dict(cls, row: Mapping) -> "RawRow":
        """Build from a csv.DictReader row. Header names are matched case-insensitively; missing fields become ''."""
        lowered = {str(k).strip().lower(): v for k, v in row.items() if k is not None}
        fields = {name: _pick(lowered, aliases) for name, aliases in FIELD_ALIASES.items()}
        for key in OPTION_KEYS:
            value = lowered.get(key)
            fields[key] = "" if value is None else str(value)
        return cls(**fields)

    def option_slots(self) -> Tuple[Tuple[str, str], ...]:
        return tuple((key, getattr(self, key)) for key in OPTION_KEYS)


@dataclass(frozen=True)
class Option:
    key: str
    text: str


@dataclass(frozen=True)
class GeneratedQuestion:
    """A question frozen into an exam. Its position in the exam is its identifier."""
    category: str
    prompt: str
    correct_key: str
    options: Tuple[Option, ...]

    def option_keys(self) -> Tuple[str, ...]:
        return tuple(o.key for o in self.options)


class QuestionBank:
    """Read-only pool of raw rows, grouped by category."""

    def __init__(self, rows: Tuple[RawRow, ...], by_category: Mapping[str, Tuple[RawRow, ...]]):
        self._rows = rows
        self._by_category = MappingProxyType(dict(by_category))
        self._categories = tuple(sorted(self._by_category))

    @classmethod
    def load(cls, rows: Iterable[RawRow]) -> "QuestionBank":
        """
        Group rows by category, keeping each row's relative order inside its group.

        Empty input yields an empty bank; the loader decides whether that is an error.
        """
        rows = tuple(rows)
        grouped: Dict[str, list] = defaultdict(list)
        for row in rows:
            grouped[row.category].append(row)
        if not rows:
            logger.warning("Question bank loaded with zero rows; no categories available")
        else:
            logger.info(f"Question bank loaded: {len(rows)} rows in {len(grouped)} categories")
        return cls(rows, {cat: tuple(items) for cat, items in grouped.items()})

    @property
    def rows(self) -> Tuple[RawRow, ...]:
        return self._rows

    @property
    def categories(self) -> Tuple[str, ...]:
        """Distinct category names, sorted lexicographically."""
        return self._categories

    @property
    def by_category(self) -> Mapping[str, Tuple[RawRow, ...]]:
        return self._by_category

    @property
    def is_empty(self) -> bool:
        return not self._rows

    def rows_for(self, category: str) -> Tuple[RawRow, ...]:
        return self._by_category.get(category, ())

    def count(self, category: Optional[str] = None) -> int:
        if category is None:
            return len(self._rows)
        return len(self.rows_for(category))

    def counts(self) -> Dict[str, int]:
        """{category: number of rows}, in category order."""
        return {cat: len(self._by_category[cat]) for cat in self._categories}

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"QuestionBank(rows={len(self._rows)}, categories={list(self._categories)!r})"
