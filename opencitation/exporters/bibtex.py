"""BibTeX export of citation fields."""
import itertools
import logging
import re
import string
from typing import Any, Dict, List, Optional, Sequence, Set

from ..core.models import Author, CitationDate, CitationFields

logger = logging.getLogger(__name__)

BIBTEX_MONTHS = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

BIBTEX_TYPES = {
    "book": "book",
    "journal": "article",
    "newspaper": "article",
    "website": "online",
    "blog": "online",
    "video": "online",
}

# Field values written without braces (month macros)
BARE_FIELDS = frozenset({"month"})

_NON_LETTERS = re.compile(r"[^a-z]")


def escape_bibtex(text: str) -> str:
    """Escape BibTeX special characters. Backslash goes first."""
    return (
        text.replace("\\", "\\\\")
        .replace("{", "\\{")
        .replace("}", "\\}")
        .replace("&", "\\&")
        .replace("%", "\\%")
        .replace("$", "\\$")
        .replace("#", "\\#")
        .replace("_", "\\_")
        .replace("~", "\\~{}")
    )


def get_bibtex_type(source_type: str) -> str:
    """BibTeX entry type for a source type; ``misc`` when there is no closer match."""
    return BIBTEX_TYPES.get(source_type, "misc")


def generate_bibtex_key(fields: CitationFields) -> str:
    """Citation key: first-author surname + year + first title word, e.g. ``smith2020deep``."""
    author = ""
    if fields.authors:
        author = _NON_LETTERS.sub("", fields.authors[0].last_name.lower())

    date = fields.publication_date
    year = str(date.year) if date is not None and date.year else "nd"

    words = (fields.title or "").split()
    title_word = _NON_LETTERS.sub("", words[0].lower()) if words else ""

    return f"{author or 'unknown'}{year}{title_word or 'untitled'}"


def _format_authors(authors: Sequence[Author]) -> str:
    """Last, First and Last, First and ..."""
    names = []
    for author in authors:
        if author.first_name:
            names.append(f"{author.last_name}, {author.first_name}")
        else:
            names.append(author.last_name)
    return " and ".join(names)


def _full_date(date: Optional[CitationDate]) -> Optional[str]:
    if date is None or not (date.year and date.valid_day):
        return None
    return f"{date.year}-{date.month:02d}-{date.day:02d}"


def fields_to_bibtex_entry(fields: CitationFields, key: Optional[str] = None) -> Dict[str, Any]:
    """Build a bibtexparser-style entry dict (``ENTRYTYPE``, ``ID`` and field values).

    Text values are escaped; unset fields are left out.
    """
    source_type = fields.source_type
    entry: Dict[str, Any] = {
        "ENTRYTYPE": get_bibtex_type(source_type),
        "ID": key or generate_bibtex_key(fields),
    }

    if fields.authors:
        entry["author"] = escape_bibtex(_format_authors(fields.authors))
    if fields.title:
        entry["title"] = escape_bibtex(fields.title)

    date = fields.publication_date
    if date is not None and date.year:
        entry["year"] = str(date.year)
        if date.valid_month:
            entry["month"] = BIBTEX_MONTHS[date.valid_month - 1]

    if source_type == "book":
        if fields.publisher:
            entry["publisher"] = escape_bibtex(fields.publisher)
        if getattr(fields, "isbn", None):
            entry["isbn"] = fields.isbn
        if getattr(fields, "edition", None):
            entry["edition"] = escape_bibtex(fields.edition)

    elif source_type == "journal":
        if getattr(fields, "journal_title", None):
            entry["journal"] = escape_bibtex(fields.journal_title)
        if getattr(fields, "volume", None):
            entry["volume"] = fields.volume
        if getattr(fields, "issue", None):
            entry["number"] = fields.issue
        if getattr(fields, "page_range", None):
            entry["pages"] = fields.page_range

    elif source_type in ("website", "blog"):
        organization = getattr(fields, "site_name", None) or getattr(fields, "blog_name", None)
        if organization:
            entry["organization"] = escape_bibtex(organization)

    elif source_type == "newspaper":
        if getattr(fields, "newspaper_title", None):
            entry["journal"] = escape_bibtex(fields.newspaper_title)

    if fields.url:
        entry["url"] = fields.url
    if fields.doi:
        entry["doi"] = fields.doi

    # Access date for online resources
    if source_type in ("website", "blog") or fields.url:
        urldate = _full_date(fields.access_date)
        if urldate:
            entry["urldate"] = urldate

    return entry


def entry_to_bibtex_string(entry: Dict[str, Any]) -> str:
    """Write one entry dict as BibTeX text."""
    lines = [f"@{entry['ENTRYTYPE']}{{{entry['ID']},"]
    for name, value in entry.items():
        if name in ("ENTRYTYPE", "ID"):
            continue
        value_str = str(value).strip()
        if name in BARE_FIELDS:
            lines.append(f"  {name} = {value_str},")
        else:
            lines.append(f"  {name} = {{{value_str}}},")

    # No comma after the last field
    if len(lines) > 1:
        lines[-1] = lines[-1][:-1]
    lines.append("}")
    return "\n".join(lines)


def to_bibtex(fields: CitationFields, key: Optional[str] = None) -> str:
    """
    Convert citation fields to a BibTeX entry.

    Args:
        fields: Citation fields record
        key: Citation key to use instead of the generated one

    Returns:
        BibTeX entry text
    """
    return entry_to_bibtex_string(fields_to_bibtex_entry(fields, key))


def _key_suffixes():
    """a, b, ..., z, aa, ab, ..."""
    for length in itertools.count(1):
        for letters in itertools.product(string.ascii_lowercase, repeat=length):
            yield "".join(letters)


def _unique_key(key: str, used: Set[str]) -> str:
    if key not in used:
        return key
    for suffix in _key_suffixes():
        candidate = f"{key}{suffix}"
        if candidate not in used:
            return candidate


def to_bibtex_multiple(citation_list: Sequence[CitationFields]) -> str:
    """
    Convert multiple citations to BibTeX, one entry per citation.

    Repeated keys get ``a``, ``b``, ... suffixes so every key in the batch
    is unique. Entries are separated by a blank line.
    """
    used: Set[str] = set()
    entries: List[str] = []
    for fields in citation_list:
        key = _unique_key(generate_bibtex_key(fields), used)
        used.add(key)
        entries.append(to_bibtex(fields, key))

    logger.debug(f"Exported {len(entries)} BibTeX entries")
    return "\n\n".join(entries)
