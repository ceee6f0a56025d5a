"""
Stage 1: Parsing
================
Turns raw delimited text into canonical Project records.

Steps:
- Tokenizer: split text into records and records into fields (quote aware)
- Header Resolver: bind header cells to canonical fields via the synonym table
- Record Builder: default-then-override each data row into a Project

Only the header row can make this stage fail (SchemaError). Every data-level
problem falls back to a field default.
"""

import math
import re
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from ..errors import SchemaError
from ..logging_config import get_logger
from ..models.schemas import CanonicalField, HeaderMap, Project, RawRow
from ..config.settings import (
    DIACRITIC_MAP,
    HEADER_SYNONYMS,
    MISSING_VALUE,
    REQUIRED_FIELDS,
)

logger = get_logger(__name__)

BOM = "\ufeff"
QUOTE = '"'
DELIMITER = ","
MAX_QUOTED_LINES = 20

_DIACRITICS = str.maketrans(DIACRITIC_MAP)
_NON_ALNUM = re.compile(r"[^a-z0-9]")
# Leading numeric prefix, the way lenient spreadsheet exports are read
_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


# =============================================================================
# Tokenizer
# =============================================================================

def split_lines(text: str) -> List[str]:
    """Strip BOM, normalize line endings, trim, and split into physical lines"""
    if text.startswith(BOM):
        text = text[1:]
    text = text.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not text:
        return []
    return text.split("\n")


def _scan(line: str) -> Tuple[RawRow, bool]:
    """Split a record into fields and report whether a quote is still open"""
    values: RawRow = []
    current: List[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if char == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    values.append("".join(current).strip())
    return values, in_quotes


def tokenize_row(line: str) -> RawRow:
    """
    Split one record into trimmed fields.

    A quote toggles the in-quotes flag, except a doubled quote inside quotes
    which yields one literal quote. Commas split fields only outside quotes.
    End of line closes any field still in quotes.
    """
    return _scan(line)[0]


def close_quoted_field(
    first: str,
    lines: List[str],
    start: int,
    width: Optional[int],
) -> Tuple[Optional[RawRow], int]:
    """
    Try to close a quote left open by `first` with the lines after it.

    A following line that holds a complete row on its own (at least `width`
    fields) is never absorbed, and at most MAX_QUOTED_LINES are tried.

    Returns:
        (row, lines consumed), or (None, 0) when the quote stays open
    """
    record = first
    for offset, line in enumerate(lines[start:start + MAX_QUOTED_LINES]):
        if width is not None and len(tokenize_row(line)) >= width:
            break
        record = f"{record}\n{line}"
        row, still_open = _scan(record)
        if not still_open:
            return row, offset + 1
    return None, 0


def tokenize_lines(text: str) -> List[RawRow]:
    """
    Tokenize a whole document, skipping empty and whitespace-only lines.

    A quoted field may continue onto following lines when they close it.
    Otherwise the line stands alone and end of line closes the quote.
    """
    lines = split_lines(text)
    rows: List[RawRow] = []
    width: Optional[int] = None
    index = 0

    while index < len(lines):
        line = lines[index]
        index += 1
        if not line.strip():
            continue

        row, still_open = _scan(line)
        if still_open:
            joined, consumed = close_quoted_field(line, lines, index, width)
            if joined is not None:
                row = joined
                index += consumed

        # Header width decides which lines count as complete rows
        if width is None:
            width = len(row)
        rows.append(row)

    return rows


# =============================================================================
# Header Resolver
# =============================================================================

def normalize_header(header: str) -> str:
    """Lowercase, fold Turkish diacritics and drop everything but [a-z0-9]"""
    if not header:
        return ""
    if header.startswith(BOM):
        header = header[1:]
    folded = header.strip().lower().translate(_DIACRITICS)
    return _NON_ALNUM.sub("", folded)


def _build_synonym_index() -> Tuple[Tuple[CanonicalField, frozenset], ...]:
    return tuple(
        (CanonicalField(field), frozenset(normalize_header(s) for s in synonyms))
        for field, synonyms in HEADER_SYNONYMS.items()
    )


# Built once at import, read-only afterwards
SYNONYM_INDEX = _build_synonym_index()


def match_header(header: str) -> Optional[CanonicalField]:
    """Return the first canonical field whose synonyms include this header"""
    normalized = normalize_header(header)
    if not normalized:
        return None
    for field, synonyms in SYNONYM_INDEX:
        if normalized in synonyms:
            return field
    return None


def resolve_headers(header_row: RawRow) -> HeaderMap:
    """
    Bind header columns to canonical fields.

    Args:
        header_row: Tokenized header row

    Returns:
        Immutable column index -> canonical field mapping

    Raises:
        SchemaError: if any required field has no matching column
    """
    bindings: Dict[int, CanonicalField] = {}
    bound = set()

    for index, header in enumerate(header_row):
        field = match_header(header)
        if field is None:
            if header.strip():
                logger.debug("Ignoring unrecognized column %d: %r", index, header)
            continue
        if field in bound:
            logger.debug(
                "Column %d (%r) duplicates %s, keeping the first binding",
                index, header, field.value,
            )
            continue
        bindings[index] = field
        bound.add(field)

    missing = [name for name in REQUIRED_FIELDS if CanonicalField(name) not in bound]
    if missing:
        raise SchemaError(missing)

    return MappingProxyType(bindings)


# =============================================================================
# Record Builder
# =============================================================================

def parse_potential_score(value: str) -> float:
    """Read the leading number of a cell, 0 when there is none"""
    match = _FLOAT_PREFIX.match(value or "")
    if match:
        number = float(match.group())
        if math.isfinite(number):
            return number
    logger.debug("Unparseable potential score %r, defaulting to 0", value)
    return 0.0


def _field_defaults() -> Dict[str, object]:
    return {
        field.value: 0.0 if field is CanonicalField.POTENTIAL_SCORE else MISSING_VALUE
        for field in CanonicalField
    }


def build_record(row: RawRow, header_map: HeaderMap) -> Optional[Project]:
    """
    Build a Project from one data row.

    Bound cells override the defaults (0 for the score, "N/A" for text).
    Rows without a usable project name are discarded (None).
    """
    values = _field_defaults()

    for index, raw in enumerate(row):
        field = header_map.get(index)
        if field is None:
            continue
        if field is CanonicalField.POTENTIAL_SCORE:
            values[field.value] = parse_potential_score(raw)
        else:
            values[field.value] = raw.strip()

    name = values[CanonicalField.PROJECT_NAME.value]
    if not name or name == MISSING_VALUE:
        return None

    return Project(**values)


# =============================================================================
# Stage
# =============================================================================

class ParsingStage:
    """
    Stage 1: Parse raw CSV text into canonical projects.
    """

    def process(self, text: str) -> List[Project]:
        """
        Parse raw text into projects.

        Args:
            text: Full document, header row first

        Returns:
            Projects in input order (empty when there is no header row)

        Raises:
            SchemaError: if required columns cannot be resolved
        """
        rows = tokenize_lines(text)
        if not rows:
            logger.warning("Input has no header row, nothing to parse")
            return []

        header_map = resolve_headers(rows[0])
        logger.debug(
            "Resolved headers: %s",
            {index: field.value for index, field in header_map.items()},
        )

        projects = []
        discarded = 0
        for row in rows[1:]:
            project = build_record(row, header_map)
            if project is None:
                discarded += 1
                continue
            projects.append(project)

        logger.info(
            "Parsed %d projects from %d data rows (%d without a project name)",
            len(projects), len(rows) - 1, discarded,
        )
        return projects
