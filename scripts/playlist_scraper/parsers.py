"""
Parsers for loosely formatted playlist text fields.

Both parsers are total: text that does not match the expected pattern
yields 0 instead of raising.
"""

import re

# "1,234,567 views", "1.2M views", "2.5K view"
VIEWS_PATTERN = re.compile(
    r"(?P<number>\d[\d,]*(?:\.\d+)?)(?P<suffix>[KMB])?\s*views?",
    re.IGNORECASE,
)

# "4 minutes, 32 seconds" (accessible label of the duration badge)
DURATION_PATTERN = re.compile(r"(\d+)\s+minutes,\s+(\d+)\s+seconds")

SUFFIX_MULTIPLIERS = {
    "K": 1_000,
    "M": 1_000_000,
    "B": 1_000_000_000,
}


def parse_views(text: str) -> int:
    """
    Parse a view count like '1,234 views' or '1.2M views'.

    Args:
        text: Raw views text from the entry's info line

    Returns:
        View count, or 0 if the text is not a view count
    """
    if not text:
        return 0

    match = VIEWS_PATTERN.fullmatch(text.strip())
    if not match:
        return 0

    number = match.group("number").replace(",", "")
    suffix = (match.group("suffix") or "").upper()

    if not suffix:
        return int(number.split(".")[0])

    return int(round(float(number) * SUFFIX_MULTIPLIERS[suffix]))


def parse_duration(label: str) -> int:
    """Parse 'N minutes, M seconds' into seconds (0 for any other format)."""
    if not label:
        return 0

    match = DURATION_PATTERN.search(label)
    if not match:
        return 0

    return int(match.group(1)) * 60 + int(match.group(2))
