"""Name and date parsing shared by the importers."""
import re
from typing import List, Optional

from ..core.models import Author, CitationDate

MONTH_ABBREVIATIONS = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

_DATE_PARTS = re.compile(r"\d+")
_LATEX_ESCAPE = re.compile(r"\\([&%$#_{}\\])")


def clean_value(value) -> str:
    """Strip surrounding whitespace, grouping braces and LaTeX escapes from a field value."""
    if value is None:
        return ""
    text = str(value).replace("\\~{}", "~")
    # Grouping braces go; escaped braces survive as literals
    text = re.sub(r"(?<!\\)[{}]", "", text)
    text = _LATEX_ESCAPE.sub(r"\1", text)
    return " ".join(text.split())


def parse_author_name(name: str, braced: bool = False) -> Optional[Author]:
    """Parse one personal or corporate name.

    Accepts ``Last, First``, ``Last, Suffix, First`` and ``First Middle Last``.
    A name that was wrapped in braces as a whole is an organization.

    Args:
        name: Raw name text
        braced: True when the name was brace-protected in the source

    Returns:
        Author, or None for an empty name
    """
    name = clean_value(name)
    if not name:
        return None

    if braced:
        return Author(last_name=name, is_organization=True)

    parts = [p.strip() for p in name.split(",")]
    if len(parts) >= 3:
        return Author(last_name=parts[0], first_name=parts[2] or None, suffix=parts[1] or None)
    if len(parts) == 2:
        return Author(last_name=parts[0], first_name=parts[1] or None)

    words = name.split()
    if len(words) == 1:
        return Author(last_name=words[0])
    return Author(
        last_name=words[-1],
        first_name=words[0],
        middle_name=" ".join(words[1:-1]) or None,
    )


def split_bibtex_names(value: str) -> List[Author]:
    """Split a BibTeX ``author``/``editor`` value on `` and ``."""
    authors = []
    for raw in re.split(r"\s+and\s+", str(value).strip()):
        raw = raw.strip()
        braced = raw.startswith("{") and raw.endswith("}") and "," not in raw
        author = parse_author_name(raw, braced=braced)
        if author is not None:
            authors.append(author)
    return authors


def parse_month(value) -> Optional[int]:
    """Month number from ``3``, ``mar``, ``March`` or ``Mar.``."""
    text = clean_value(value).lower().rstrip(".")
    if not text:
        return None
    if text.isdigit():
        month = int(text)
        return month if 1 <= month <= 12 else None
    if text[:3] in MONTH_ABBREVIATIONS:
        return MONTH_ABBREVIATIONS.index(text[:3]) + 1
    return None


def parse_date(value, separator: str = "-") -> Optional[CitationDate]:
    """Parse ``YYYY``, ``YYYY<sep>MM`` or ``YYYY<sep>MM<sep>DD`` (RIS also allows trailing separators)."""
    text = clean_value(value)
    if not text:
        return None

    numbers = [int(n) for n in _DATE_PARTS.findall(text.split(" ")[0])]
    if separator not in text:
        numbers = numbers[:1]
    if not numbers:
        return None

    year = numbers[0]
    month = numbers[1] if len(numbers) > 1 and 1 <= numbers[1] <= 12 else None
    day = numbers[2] if month and len(numbers) > 2 and 1 <= numbers[2] <= 31 else None
    return CitationDate(year=year, month=month, day=day)
