"""
JSON document reader for consumption record arrays.

Documents are read leniently: ``//`` and ``/* */`` comments and a single
trailing comma before a closing bracket are tolerated.
"""

import json
from pathlib import Path
from typing import Any

from calorie_insights.observability.logger import get_logger
from calorie_insights.observability.metrics import increment_counter, source_fetch_total

from .errors import SourceFetchError, SourceFormatError

logger = get_logger(__name__)


def strip_comments_and_trailing_commas(text: str) -> str:
    """
    Remove comments and trailing commas outside of JSON strings.

    A comma is dropped only when the next significant character closes an
    array or object and the comma follows a value, so "[,]" and "[1,,]"
    are left for the parser to reject.

    Args:
        text: Raw document text

    Returns:
        Text that strict JSON parsing can accept

    Raises:
        SourceFormatError: If a block comment is never closed
    """
    out: list[str] = []
    pending_comma: int | None = None
    last_significant = ""
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch == '"':
            j = i + 1
            while j < n and text[j] != '"':
                j += 2 if text[j] == "\\" else 1
            out.append(text[i:j + 1])
            pending_comma = None
            last_significant = '"'
            i = j + 1
            continue

        if text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end == -1 else end
            continue

        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                raise SourceFormatError("JSON parse error: unterminated comment")
            out.append(" ")
            i = end + 2
            continue

        if ch.isspace():
            out.append(ch)
            i += 1
            continue

        if ch in "]}" and pending_comma is not None:
            out[pending_comma] = ""

        if ch == "," and last_significant not in ("", "[", "{", ","):
            pending_comma = len(out)
        else:
            pending_comma = None

        out.append(ch)
        last_significant = ch
        i += 1

    return "".join(out)


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as strict_error:
        relaxed = strip_comments_and_trailing_commas(text)
        if relaxed == text:
            raise
        try:
            return json.loads(relaxed)
        except json.JSONDecodeError:
            # Positions in the relaxed text would not match the input
            raise strict_error from None


def parse_document(text: str) -> list[Any]:
    """
    Parse a JSON document that must be an array.

    Elements are returned as parsed; per-element problems are left to the
    decoder.

    Args:
        text: Raw JSON text

    Returns:
        The parsed array

    Raises:
        SourceFormatError: If the text is not JSON or not an array
    """
    try:
        document = _loads(text)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError and the integer digit limit,
        # RecursionError covers pathologically nested input
        raise SourceFormatError(f"JSON parse error: {e}") from e

    if not isinstance(document, list):
        raise SourceFormatError(f"Expected a JSON array, got {type(document).__name__}")

    return document


def read_json_file(file_path: str | Path) -> list[Any]:
    """
    Read and parse a JSON array from a file.

    The file must be UTF-8; a leading byte order mark is skipped.

    Args:
        file_path: Path to the JSON file

    Returns:
        The parsed array

    Raises:
        SourceFetchError: If the file cannot be read
        SourceFormatError: If the content is not UTF-8 or not a JSON array
    """
    path = Path(file_path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        increment_counter(source_fetch_total, kind="file", status="failure")
        raise SourceFormatError(f"Input file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        increment_counter(source_fetch_total, kind="file", status="failure")
        raise SourceFetchError(f"Cannot read input file {path}: {e}") from e

    increment_counter(source_fetch_total, kind="file", status="success")
    document = parse_document(text)
    logger.info(f"Read {len(document)} elements from {path}", extra={"path": str(path)})
    return document
