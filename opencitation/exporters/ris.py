"""RIS export of citation fields.

One ``TAG  - value`` line per field, closed by ``ER  - ``. Unset fields
produce no line.
"""
import logging
from typing import List, Optional, Sequence

from ..core.models import Author, CitationDate, CitationFields

logger = logging.getLogger(__name__)

RIS_TYPES = {
    "book": "BOOK",
    "journal": "JOUR",
    "newspaper": "NEWS",
    "website": "ELEC",
    "blog": "ELEC",
    "video": "VIDEO",
    "tv-series": "VIDEO",
    "tv-episode": "VIDEO",
    "film": "MPCT",
    "image": "ART",
}


def get_ris_type(source_type: str) -> str:
    """RIS type code for a source type; ``GEN`` for anything unmapped."""
    return RIS_TYPES.get(source_type, "GEN")


def _tag(tag: str, value) -> str:
    return f"{tag}  - {value}"


def _name(author: Author) -> str:
    if author.first_name:
        return f"{author.last_name}, {author.first_name}"
    return author.last_name


def _ris_date(date: Optional[CitationDate]) -> Optional[str]:
    """YYYY[/MM[/DD]]"""
    if date is None or not date.year:
        return None
    value = str(date.year)
    if date.valid_month:
        value += f"/{date.valid_month:02d}"
        if date.valid_day:
            value += f"/{date.valid_day:02d}"
    return value


def to_ris(fields: CitationFields) -> str:
    """
    Convert citation fields to an RIS record.

    Args:
        fields: Citation fields record

    Returns:
        RIS record text ending with the ``ER`` line
    """
    source_type = fields.source_type
    lines: List[str] = [_tag("TY", get_ris_type(source_type))]

    for author in fields.authors:
        lines.append(_tag("AU", _name(author)))
    for editor in fields.editors:
        lines.append(_tag("ED", _name(editor)))

    if fields.title:
        lines.append(_tag("TI", fields.title))
    if fields.subtitle:
        lines.append(_tag("T2", fields.subtitle))

    published = _ris_date(fields.publication_date)
    if published:
        lines.append(_tag("PY", published))
        lines.append(_tag("Y1", published))

    if source_type == "book":
        if fields.publisher:
            lines.append(_tag("PB", fields.publisher))
        if fields.publication_place:
            lines.append(_tag("CY", fields.publication_place))
        if getattr(fields, "isbn", None):
            lines.append(_tag("SN", fields.isbn))
        if getattr(fields, "edition", None):
            lines.append(_tag("ET", fields.edition))

    elif source_type == "journal":
        journal_title = getattr(fields, "journal_title", None)
        if journal_title:
            lines.append(_tag("JO", journal_title))
            lines.append(_tag("T2", journal_title))
        if getattr(fields, "volume", None):
            lines.append(_tag("VL", fields.volume))
        if getattr(fields, "issue", None):
            lines.append(_tag("IS", fields.issue))
        page_range = getattr(fields, "page_range", None)
        if page_range:
            pages = page_range.split("-")
            if pages[0].strip():
                lines.append(_tag("SP", pages[0].strip()))
            if len(pages) > 1 and pages[1].strip():
                lines.append(_tag("EP", pages[1].strip()))
        if getattr(fields, "issn", None):
            lines.append(_tag("SN", fields.issn))

    elif source_type in ("website", "blog"):
        container = getattr(fields, "site_name", None) or getattr(fields, "blog_name", None)
        if container:
            lines.append(_tag("T2", container))

    elif source_type == "newspaper":
        if getattr(fields, "newspaper_title", None):
            lines.append(_tag("JO", fields.newspaper_title))
        if getattr(fields, "section", None):
            lines.append(_tag("SE", fields.section))

    elif source_type == "video":
        if getattr(fields, "channel_name", None):
            lines.append(_tag("T2", fields.channel_name))
        if getattr(fields, "platform", None):
            lines.append(_tag("PB", fields.platform))

    elif source_type == "film":
        for director in getattr(fields, "directors", ()):
            lines.append(_tag("A2", _name(director)))
        if getattr(fields, "production_company", None):
            lines.append(_tag("PB", fields.production_company))

    if fields.url:
        lines.append(_tag("UR", fields.url))
    if fields.doi:
        lines.append(_tag("DO", fields.doi))

    accessed = fields.access_date
    if accessed is not None and accessed.year and accessed.valid_day:
        lines.append(_tag("Y2", f"{accessed.year}/{accessed.month:02d}/{accessed.day:02d}"))

    if fields.language:
        lines.append(_tag("LA", fields.language))
    if fields.annotation:
        lines.append(_tag("AB", fields.annotation))

    lines.append(_tag("ER", ""))
    return "\n".join(lines)


def to_ris_multiple(citation_list: Sequence[CitationFields]) -> str:
    """Convert multiple citations to RIS, records separated by a blank line."""
    records = [to_ris(fields) for fields in citation_list]
    logger.debug(f"Exported {len(records)} RIS records")
    return "\n\n".join(records)
