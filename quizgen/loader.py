"""
CSV acquisition: read the question bank from a file path or an http(s) URL.
Header row required; blank lines are skipped.
"""
import csv
import io
import logging
from pathlib import Path
from typing import List, Optional, Union

import requests

from quizgen import config
from quizgen.errors import EmptyInputError, SourceLoadError
from quizgen.question_bank import QuestionBank, RawRow

logger = logging.getLogger(__name__)

USER_AGENT = "quizgen/0.1"


def is_url(source: Union[str, Path]) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def read_rows(text: str) -> List[RawRow]:
    """Parse CSV text into RawRow values. Rows whose cells are all blank are dropped."""
    text = text.lstrip("\ufeff")
    reader = csv.DictReader(io.StringIO(text))
    rows = []
    for record in reader:
        if not any((v or "").strip() for v in record.values() if isinstance(v, str)):
            continue
        rows.append(RawRow.from_dict(record))
    return rows


def fetch_text(url: str, timeout: Optional[int] = None) -> str:
    timeout = config.HTTP_TIMEOUT if timeout is None else timeout
    logger.info(f"Fetching question CSV from {url}")
    try:
        response = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceLoadError(url, str(e)) from e
    # Servers often omit the charset for text/csv
    if "charset" not in response.headers.get("content-type", "").lower():
        response.encoding = "utf-8"
    return response.text


def read_text(path: Union[str, Path]) -> str:
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceLoadError(str(path), str(e)) from e


def load_rows(source: Union[str, Path, None] = None, timeout: Optional[int] = None) -> List[RawRow]:
    """Read and parse the CSV at source (path or URL). Defaults to config.CSV_SOURCE."""
    source = config.CSV_SOURCE if source is None else source
    text = fetch_text(source, timeout) if is_url(source) else read_text(source)
    try:
        rows = read_rows(text)
    except csv.Error as e:
        raise SourceLoadError(str(source), f"malformed CSV: {e}") from e
    logger.info(f"Parsed {len(rows)} rows from {source}")
    return rows


def load_bank(source: Union[str, Path, None] = None, timeout: Optional[int] = None) -> QuestionBank:
    """
    Load the question bank from a CSV source.

    Raises:
        SourceLoadError: the source could not be read or parsed
        EmptyInputError: the source has a header but no question rows
    """
    rows = load_rows(source, timeout)
    if not rows:
        raise EmptyInputError(f"No questions found in {config.CSV_SOURCE if source is None else source}")
    return QuestionBank.load(rows)
