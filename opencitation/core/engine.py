"""
Citation engine: style dispatch, batch formatting and in-text citations.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Sequence, Union

from .models import (
    CitationFields,
    CitationStyle,
    FormattedCitation,
    fields_from_dict,
)
from ..formatters.apa import format_apa
from ..formatters.mla import format_mla
from ..formatters.chicago import format_chicago
from ..formatters.harvard import format_harvard

logger = logging.getLogger(__name__)

FieldsInput = Union[CitationFields, Mapping[str, Any]]
StyleInput = Union[CitationStyle, str]
Formatter = Callable[[CitationFields], FormattedCitation]

FORMATTERS: Dict[CitationStyle, Formatter] = {
    CitationStyle.APA: format_apa,
    CitationStyle.MLA: format_mla,
    CitationStyle.CHICAGO: format_chicago,
    CitationStyle.HARVARD: format_harvard,
}

SHORT_TITLE_LENGTH = 30


def _resolve_style(style: StyleInput) -> CitationStyle:
    """Resolve a style tag, falling back to APA when it is not recognized."""
    resolved = CitationStyle.parse(style)
    if resolved is None:
        logger.warning(f"Unknown citation style {style!r}, falling back to APA")
        return CitationStyle.APA
    return resolved


def as_fields(fields: FieldsInput) -> CitationFields:
    """Accept either a fields record or its dict form."""
    if isinstance(fields, CitationFields):
        return fields
    return fields_from_dict(fields)


def get_formatter(style: StyleInput) -> Formatter:
    """
    Get the formatter function for a style.

    Args:
        style: Citation style (enum member or name, case-insensitive)

    Returns:
        A function that formats citation fields in that style
    """
    return FORMATTERS[_resolve_style(style)]


def format_citation(fields: FieldsInput, style: StyleInput = CitationStyle.APA) -> FormattedCitation:
    """
    Format a citation in the specified style.

    Args:
        fields: Citation fields record, or a dict in the JSON field shape
        style: Citation style; unknown styles fall back to APA

    Returns:
        FormattedCitation with both text and HTML versions

    Example:
        >>> format_citation({
        ...     "sourceType": "book",
        ...     "title": "The Great Gatsby",
        ...     "authors": [{"firstName": "F. Scott", "lastName": "Fitzgerald"}],
        ...     "publisher": "Scribner",
        ...     "publicationDate": {"year": 1925},
        ... }, "apa").text
        'Fitzgerald, F. (1925). The great gatsby. Scribner.'
    """
    return get_formatter(style)(as_fields(fields))


def format_citations(
    citation_list: Sequence[FieldsInput],
    style: StyleInput = CitationStyle.APA,
) -> List[FormattedCitation]:
    """Format multiple citations in the same style, preserving order."""
    formatter = get_formatter(style)
    return [formatter(as_fields(fields)) for fields in citation_list]


def format_bibliography(
    citation_list: Sequence[FieldsInput],
    style: StyleInput = CitationStyle.APA,
) -> List[FormattedCitation]:
    """
    Format a reference list: every entry in one style, sorted alphabetically.

    Entries that render empty (unrecognized source types) are left out.

    Args:
        citation_list: Citation fields records
        style: Citation style

    Returns:
        Formatted citations sorted case-insensitively by their plain text
    """
    formatted = [c for c in format_citations(citation_list, style) if c.text]
    logger.debug(f"Bibliography: {len(formatted)} of {len(citation_list)} entries formatted")
    return sorted(formatted, key=lambda c: c.text.lower())


def generate_in_text_citation(fields: FieldsInput, style: StyleInput = CitationStyle.APA) -> str:
    """
    Generate a parenthetical in-text citation such as ``(Smith, 2020)``.

    Without authors, a short title (text before the first colon, at most
    30 characters) is quoted in their place.

    Args:
        fields: Citation fields record, or a dict in the JSON field shape
        style: Citation style; unknown styles fall back to APA

    Returns:
        In-text citation string
    """
    fields = as_fields(fields)
    style = _resolve_style(style)

    date = fields.publication_date
    year = date.year if date is not None and date.year else "n.d."
    authors = fields.authors

    if not authors:
        short_title = fields.title.split(":")[0][:SHORT_TITLE_LENGTH]
        if style == CitationStyle.MLA:
            return f'("{short_title}")'
        return f'("{short_title}", {year})'

    first = authors[0].last_name

    if style == CitationStyle.APA:
        if len(authors) == 1:
            return f"({first}, {year})"
        if len(authors) == 2:
            return f"({first} & {authors[1].last_name}, {year})"
        return f"({first} et al., {year})"

    if style == CitationStyle.MLA:
        if len(authors) == 1:
            return f"({first})"
        if len(authors) == 2:
            return f"({first} and {authors[1].last_name})"
        return f"({first} et al.)"

    if style == CitationStyle.CHICAGO:
        if len(authors) == 1:
            return f"({first} {year})"
        if len(authors) <= 3:
            names = ", ".join(a.last_name for a in authors)
            return f"({names} {year})"
        return f"({first} et al. {year})"

    # Harvard
    if len(authors) == 1:
        return f"({first}, {year})"
    if len(authors) == 2:
        return f"({first} and {authors[1].last_name}, {year})"
    return f"({first} et al., {year})"
