"""Text helpers shared by the parsers, scorer and rule engine."""

import re
from collections import Counter

STOP_WORDS = frozenset(
    {
        "the",
        "and",
        "or",
        "a",
        "an",
        "of",
        "for",
        "to",
        "with",
        "in",
        "on",
        "at",
        "by",
        "from",
        "as",
        "is",
        "are",
        "be",
        "this",
        "that",
        "it",
        "was",
        "were",
        "will",
        "can",
        "should",
        "must",
        "have",
        "has",
        "had",
    }
)

TOKEN_SPLIT_PATTERN = re.compile(r"[^a-z0-9+#]+")
WHITESPACE_PATTERN = re.compile(r"\s+")

# Column heuristics for table-like layouts
TAB_COLUMNS_PATTERN = re.compile(r"\t.+\t")
ALIGNED_COLUMNS_PATTERN = re.compile(r" {3,}\S+ {3,}\S+")


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_whitespace(text: str) -> str:
    """Collapse all whitespace runs (including newlines) to single spaces."""
    return WHITESPACE_PATTERN.sub(" ", _normalize_newlines(text)).strip()


def normalize_for_comparison(text: str) -> str:
    """Whitespace-normalized, lowercased text."""
    return normalize_whitespace(text).lower()


def split_lines(text: str) -> list[str]:
    """Split text into trimmed, non-empty lines."""
    lines = (line.strip() for line in _normalize_newlines(text).split("\n"))
    return [line for line in lines if line]


def tokenize(text: str) -> list[str]:
    """Split text into lowercase tokens, dropping stop words and 1-char tokens.

    ``+`` and ``#`` are kept inside tokens so that ``c++`` and ``c#`` survive.
    """
    tokens = TOKEN_SPLIT_PATTERN.split(normalize_for_comparison(text))
    return [token for token in tokens if len(token) > 1 and token not in STOP_WORDS]


def unique(values: list[str]) -> list[str]:
    """Deduplicate case-insensitively, keeping the first spelling and order."""
    seen: set[str] = set()
    output: list[str] = []
    for value in values:
        lower = value.lower()
        if lower not in seen:
            seen.add(lower)
            output.append(value)
    return output


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)


def count_frequencies(values: list[str]) -> dict[str, int]:
    return dict(Counter(values))


def contains_phrase(text: str, phrase: str) -> bool:
    """Check for ``phrase`` in ``text`` on word boundaries, case-insensitively."""
    phrase = phrase.strip().lower()
    if not phrase:
        return False
    pattern = rf"(?<![a-z0-9]){re.escape(phrase)}(?![a-z0-9+#])"
    return re.search(pattern, text.lower()) is not None


def contains_table_like_structure(text: str) -> bool:
    """Detect tables or multi-column layouts that ATS parsers tend to mangle.

    Returns True when at least two lines show pipe-delimited columns,
    tab-delimited columns, or columns aligned with runs of 3+ spaces.
    """
    table_lines = 0
    for raw_line in _normalize_newlines(text).split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        has_pipe_columns = "|" in line and len(line.split("|")) >= 3
        has_tab_columns = TAB_COLUMNS_PATTERN.search(line) is not None
        has_aligned_spaces = ALIGNED_COLUMNS_PATTERN.search(line) is not None
        if has_pipe_columns or has_tab_columns or has_aligned_spaces:
            table_lines += 1
    return table_lines >= 2
