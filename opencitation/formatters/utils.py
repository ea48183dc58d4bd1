"""Citation formatting utilities shared by all style formatters.

Author names, author lists, dates, titles, URLs/DOIs and HTML helpers.
Every function is pure and returns an empty string (or a style-specific
sentinel) for missing input instead of raising.
"""
import re
from typing import Optional, Sequence

from ..core.models import Author, CitationDate

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTHS_MLA = (
    "Jan.", "Feb.", "Mar.", "Apr.", "May", "June",
    "July", "Aug.", "Sept.", "Oct.", "Nov.", "Dec.",
)

SEASON_NAMES = {
    "spring": "Spring",
    "summer": "Summer",
    "fall": "Fall",
    "winter": "Winter",
}

_DOI_PREFIX = re.compile(r"^doi:\s*", re.IGNORECASE)


def _month_name(date: CitationDate, names: Sequence[str]) -> Optional[str]:
    """Month name for ``date``, or None when the month is unset or out of range."""
    if date.month and 1 <= date.month <= 12:
        return names[date.month - 1]
    return None


def _has_year(date: Optional[CitationDate]) -> bool:
    return date is not None and bool(date.year)


# =============================================================================
# AUTHORS
# =============================================================================

def format_author_apa(author: Author) -> str:
    """Format author name for APA style: Last, F. M."""
    if author.is_organization:
        return author.last_name

    name = author.last_name

    if author.first_name:
        name += f", {author.first_name[0]}."

    if author.middle_name:
        name += f" {author.middle_name[0]}."

    if author.suffix:
        name += f", {author.suffix}"

    return name


def _format_author_inverted(author: Author, is_first: bool) -> str:
    """Last, First Middle for the lead author; First Middle Last afterwards."""
    if author.is_organization:
        return author.last_name

    if is_first:
        name = author.last_name
        if author.first_name:
            name += f", {author.first_name}"
            if author.middle_name:
                name += f" {author.middle_name}"
        if author.suffix:
            name += f", {author.suffix}"
        return name

    name = author.first_name or ""
    if author.middle_name:
        name += f" {author.middle_name}"
    name += f" {author.last_name}"
    if author.suffix:
        name += f" {author.suffix}"
    return name.strip()


def format_author_mla(author: Author, is_first: bool = True) -> str:
    """Format author name for MLA style: Last, First Middle."""
    return _format_author_inverted(author, is_first)


def format_author_chicago(author: Author, is_first: bool = True) -> str:
    """Format author name for Chicago style: Last, First Middle."""
    return _format_author_inverted(author, is_first)


def format_author_harvard(author: Author) -> str:
    """Format author name for Harvard style: Last, F.M."""
    if author.is_organization:
        return author.last_name

    name = author.last_name

    if author.first_name:
        name += f", {author.first_name[0]}."

    if author.middle_name:
        name += f"{author.middle_name[0]}."

    if author.suffix:
        name += f" {author.suffix}"

    return name


def format_authors_apa(authors: Sequence[Author]) -> str:
    """Format multiple authors with proper separators (APA style).

    - 1 author: Smith, J.
    - 2 authors: Smith, J. & Jones, M.
    - 3-20 authors: Smith, J., Jones, M., & Williams, K.
    - 21+ authors: first 19, ..., last
    """
    if not authors:
        return ""

    if len(authors) == 1:
        return format_author_apa(authors[0])

    if len(authors) == 2:
        return f"{format_author_apa(authors[0])} & {format_author_apa(authors[1])}"

    last = format_author_apa(authors[-1])

    if len(authors) <= 20:
        all_but_last = ", ".join(format_author_apa(a) for a in authors[:-1])
        return f"{all_but_last}, & {last}"

    first_19 = ", ".join(format_author_apa(a) for a in authors[:19])
    return f"{first_19}, ... {last}"


def format_authors_mla(authors: Sequence[Author]) -> str:
    """Format multiple authors for MLA style.

    - 1 author: Last, First Middle
    - 2 authors: Last, First, and First Last
    - 3+ authors: Last, First, et al.
    """
    if not authors:
        return ""

    if len(authors) == 1:
        return format_author_mla(authors[0], True)

    if len(authors) == 2:
        return f"{format_author_mla(authors[0], True)}, and {format_author_mla(authors[1], False)}"

    return f"{format_author_mla(authors[0], True)}, et al."


def format_authors_chicago(authors: Sequence[Author]) -> str:
    """Format multiple authors for Chicago style.

    - 2 authors: Last, First and First Last
    - 3 authors: Last, First, First Last, and First Last
    - 4+ authors: Last, First, et al.
    """
    if not authors:
        return ""

    if len(authors) == 1:
        return format_author_chicago(authors[0], True)

    if len(authors) == 2:
        return f"{format_author_chicago(authors[0], True)} and {format_author_chicago(authors[1], False)}"

    if len(authors) == 3:
        first = format_author_chicago(authors[0], True)
        second = format_author_chicago(authors[1], False)
        third = format_author_chicago(authors[2], False)
        return f"{first}, {second}, and {third}"

    return f"{format_author_chicago(authors[0], True)}, et al."


def format_authors_harvard(authors: Sequence[Author]) -> str:
    """Format multiple authors for Harvard style (no serial comma)."""
    if not authors:
        return ""

    if len(authors) == 1:
        return format_author_harvard(authors[0])

    if len(authors) == 2:
        return f"{format_author_harvard(authors[0])} and {format_author_harvard(authors[1])}"

    if len(authors) == 3:
        first = format_author_harvard(authors[0])
        second = format_author_harvard(authors[1])
        third = format_author_harvard(authors[2])
        return f"{first}, {second} and {third}"

    return f"{format_author_harvard(authors[0])} et al."


# =============================================================================
# DATES
# =============================================================================

def format_date_apa(date: Optional[CitationDate] = None) -> str:
    """Format date for APA: (2024, January 15), (2024, Spring), (2024) or (n.d.)."""
    if not _has_year(date):
        return "(n.d.)"

    date_str = f"{date.year}"
    month = _month_name(date, MONTHS)

    if month:
        date_str += f", {month}"
        if date.day:
            date_str += f" {date.day}"
    elif date.season in SEASON_NAMES:
        date_str += f", {SEASON_NAMES[date.season]}"

    return f"({date_str})"


def format_date_mla(date: Optional[CitationDate] = None) -> str:
    """Format date for MLA: Day Mon. Year, Mon. Year or Year."""
    if not _has_year(date):
        return ""

    month = _month_name(date, MONTHS_MLA)

    if date.day and month:
        return f"{date.day} {month} {date.year}"

    if month:
        return f"{month} {date.year}"

    return f"{date.year}"


def format_date_chicago(date: Optional[CitationDate] = None) -> str:
    """Format date for Chicago: Month Day, Year."""
    if not _has_year(date):
        return ""

    month = _month_name(date, MONTHS)

    if month and date.day:
        return f"{month} {date.day}, {date.year}"

    if month:
        return f"{month} {date.year}"

    return f"{date.year}"


def format_date_harvard(date: Optional[CitationDate] = None) -> str:
    """Format date for Harvard: Day Month Year, Month Year, Year or n.d."""
    if not _has_year(date):
        return "n.d."

    month = _month_name(date, MONTHS)

    if date.day and month:
        return f"{date.day} {month} {date.year}"

    if month:
        return f"{month} {date.year}"

    return f"{date.year}"


def format_access_date(date: Optional[CitationDate] = None, style: str = "apa") -> str:
    """Format the access date phrase used by web sources."""
    if not _has_year(date):
        return ""

    if style == "apa":
        return f"Retrieved {format_date_apa(date).strip('()')} from"
    if style == "mla":
        return f"Accessed {format_date_mla(date)}."
    if style == "chicago":
        return f"Accessed {format_date_chicago(date)}."
    if style == "harvard":
        return f"(Accessed: {format_date_harvard(date)})"
    return ""


# =============================================================================
# TEXT
# =============================================================================

def escape_html(text: str) -> str:
    """Escape HTML characters. Ampersand goes first to avoid double escaping."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


def italic(text: str) -> str:
    """Wrap text in italic tags for HTML output."""
    return f"<em>{text}</em>"


def format_url(url: Optional[str] = None) -> str:
    """Clean URL for display by removing one trailing slash."""
    if not url:
        return ""
    return url[:-1] if url.endswith("/") else url


def format_pages(pages: Optional[str] = None, style: str = "apa") -> str:
    """Format a page range; MLA and Harvard prefix it with 'pp.'."""
    if not pages:
        return ""
    if style in ("mla", "harvard"):
        return f"pp. {pages}"
    return pages


def capitalize_first(text: Optional[str]) -> str:
    """Capitalize the first letter of a string."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def to_sentence_case(title: Optional[str]) -> str:
    """Convert title to sentence case (APA style).

    Each colon-delimited segment keeps only its first letter capitalized.
    """
    if not title:
        return ""

    segments = []
    for index, part in enumerate(title.split(":")):
        trimmed = part.strip()
        if not trimmed:
            segments.append("")
            continue
        result = trimmed[0].upper() + trimmed[1:].lower()
        segments.append(result if index == 0 else f" {result}")

    return ":".join(segments)


def add_period(text: str) -> str:
    """Close a sentence without doubling the period of a trailing initial or 'et al.'."""
    if not text or text.endswith("."):
        return text
    return f"{text}."


def format_doi(doi: Optional[str] = None) -> str:
    """Format DOI as a resolver URL. Values already starting with 'http' pass through."""
    if not doi:
        return ""

    if doi.startswith("http"):
        return doi

    return f"https://doi.org/{_DOI_PREFIX.sub('', doi)}"


def join_title(title: Optional[str], subtitle: Optional[str] = None) -> str:
    """Title: Subtitle."""
    title = title or ""
    if subtitle:
        return f"{title}: {subtitle}"
    return title
