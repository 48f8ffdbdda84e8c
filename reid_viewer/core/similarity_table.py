"""
Sparse pairwise similarity matrix loaded from a CSV-style table.
"""

import logging
import math
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .errors import ParseError

logger = logging.getLogger(__name__)


class SimilarityTable:
    """Two-level mapping ``row key -> column key -> similarity``.

    The matrix may be asymmetric and sparse: a pair can be stored as
    (A, B), (B, A), both or neither. Values are always finite floats.
    """

    def __init__(self, rows: Optional[Dict[str, Dict[str, float]]] = None,
                 column_keys: Optional[List[str]] = None):
        self._rows: Dict[str, Dict[str, float]] = rows or {}
        self.column_keys: List[str] = list(column_keys or [])
        self._column_set = set(self.column_keys)

    @classmethod
    def from_text(cls, raw_text: str) -> "SimilarityTable":
        """
        Parse table text.

        The first line is the header; its first cell labels the row-key
        column and is ignored. Every following non-blank line holds a row
        key and then one cell per header column. Cells that are not finite
        numbers are skipped, rows with fewer than two cells are skipped, and
        a repeated row key replaces the earlier row.

        Raises:
            ParseError: if the text is empty or has no header row
        """
        if raw_text is None:
            raise ParseError("Similarity table is empty")

        lines = raw_text.splitlines()
        # Leading blank lines do not count as a header
        while lines and not lines[0].strip():
            lines.pop(0)
        if not lines:
            raise ParseError("Similarity table has no header row")

        headers = [token.strip() for token in lines[0].split(',')[1:]]
        logger.debug("Similarity table headers: %s", headers[:10])

        rows: Dict[str, Dict[str, float]] = {}
        for line in lines[1:]:
            line = line.strip()
            if not line:
                continue

            values = line.split(',')
            if len(values) < 2:
                continue

            row_key = values[0].strip()
            similarities = {}
            for col_key, token in zip(headers, values[1:]):
                similarity = _parse_cell(token)
                if similarity is not None:
                    similarities[col_key] = similarity

            rows[row_key] = similarities

        logger.info("Loaded similarity data for %d images", len(rows))
        return cls(rows, headers)

    def lookup(self, row_key: str, col_key: str) -> Optional[float]:
        """Exact lookup of ``(row_key, col_key)``; None when absent."""
        row = self._rows.get(row_key)
        if row is None:
            return None
        return row.get(col_key)

    def lookup_symmetric(self, key_a: str, key_b: str) -> Optional[float]:
        """Look up ``(key_a, key_b)``, falling back to ``(key_b, key_a)``."""
        similarity = self.lookup(key_a, key_b)
        if similarity is None:
            similarity = self.lookup(key_b, key_a)
        return similarity

    def has_row(self, key: str) -> bool:
        return key in self._rows

    def has_key(self, key: str) -> bool:
        """True if ``key`` names a row or a header column."""
        return key in self._rows or key in self._column_set

    def row_keys(self) -> List[str]:
        return list(self._rows.keys())

    def row(self, key: str) -> Dict[str, float]:
        """Copy of one row's entries (empty if the row is absent)."""
        return dict(self._rows.get(key, {}))

    def __contains__(self, key: str) -> bool:
        return self.has_key(key)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)


def _parse_cell(token: str) -> Optional[float]:
    try:
        value = float(token.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def load_similarity_file(csv_path: str, encoding: str = "utf-8") -> SimilarityTable:
    """
    Read and parse a similarity table file.

    Args:
        csv_path: Path to the table file
        encoding: Text encoding of the file

    Returns:
        Parsed SimilarityTable

    Raises:
        OSError: if the file cannot be read
        ParseError: if the file is empty or has no header row
    """
    text = Path(csv_path).read_text(encoding=encoding)
    return SimilarityTable.from_text(text)
