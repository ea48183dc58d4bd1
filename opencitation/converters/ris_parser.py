"""RIS import using rispy."""
import logging
from io import StringIO
from typing import Any, Dict, List, Optional

import rispy

from ..core.models import Author, CitationFields, SourceType, fields_from_dict
from ..exceptions import ConversionError
from .names import clean_value, parse_author_name, parse_date

logger = logging.getLogger(__name__)

# RIS type codes back to source types
RIS_SOURCE_TYPES = {
    "JOUR": SourceType.JOURNAL.value,
    "BOOK": SourceType.BOOK.value,
    "NEWS": SourceType.NEWSPAPER.value,
    "ELEC": SourceType.WEBSITE.value,
    "VIDEO": SourceType.VIDEO.value,
    "MPCT": SourceType.FILM.value,
    "ART": SourceType.IMAGE.value,
}


def _first(value: Any) -> Optional[str]:
    """rispy returns list tags as lists and the rest as strings."""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    text = clean_value(value)
    return text or None


def _names(value: Any) -> List[Author]:
    if not value:
        return []
    raw_names = value if isinstance(value, (list, tuple)) else [value]
    authors = []
    for raw in raw_names:
        author = parse_author_name(raw)
        if author is not None:
            authors.append(author)
    return authors


def parse_ris(content: str) -> List[Dict[str, Any]]:
    """Parse RIS content into rispy record dicts.

    Args:
        content: RIS content as string

    Returns:
        List of rispy records (``type_of_reference``, ``authors``, ...)

    Raises:
        ConversionError: If parsing fails
    """
    try:
        entries = rispy.load(StringIO(content))
    except Exception as e:
        logger.error(f"RIS parsing failed: {e}")
        raise ConversionError(f"Failed to parse RIS content: {e}")

    logger.info(f"Successfully parsed {len(entries)} RIS records")
    return entries


def parse_ris_file(file_path: str) -> List[Dict[str, Any]]:
    """Parse an .ris file.

    Raises:
        ConversionError: If the file cannot be read or parsed
    """
    try:
        with open(file_path, 'r', encoding='utf-8', errors='ignore') as f:
            content = f.read()
    except FileNotFoundError:
        raise ConversionError(f"RIS file not found: {file_path}")
    except OSError as e:
        raise ConversionError(f"Failed to read RIS file {file_path}: {e}")
    return parse_ris(content)


def ris_entry_to_fields(entry: Dict[str, Any]) -> CitationFields:
    """Map one rispy record onto the matching citation-fields variant.

    Secondary title (T2) means the journal for articles, the site for
    electronic sources, the channel for videos and the subtitle otherwise.
    """
    ris_type = str(entry.get("type_of_reference", "GEN")).upper()
    source_type = RIS_SOURCE_TYPES.get(ris_type, SourceType.MISCELLANEOUS.value)
    secondary = _first(entry.get("secondary_title"))

    data: Dict[str, Any] = {
        "source_type": source_type,
        "title": _first(entry.get("title") or entry.get("primary_title")) or "",
        "authors": _names(entry.get("authors") or entry.get("first_authors")),
        "editors": _names(entry.get("editor")),
        "publication_date": parse_date(
            entry.get("year") or entry.get("publication_year") or entry.get("date"),
            separator="/",
        ),
        "access_date": parse_date(entry.get("access_date"), separator="/"),
        "url": _first(entry.get("urls") or entry.get("url")),
        "doi": _first(entry.get("doi")),
        "language": _first(entry.get("language")),
        "annotation": _first(entry.get("abstract") or entry.get("notes_abstract")),
        "publisher": _first(entry.get("publisher")),
        "publication_place": _first(entry.get("place_published")),
    }

    if source_type == SourceType.JOURNAL.value:
        start = _first(entry.get("start_page"))
        end = _first(entry.get("end_page"))
        data.update({
            "journal_title": _first(
                entry.get("journal_name")
                or entry.get("alternate_title3")
                or entry.get("alternate_title1")
            ) or secondary or "",
            "volume": _first(entry.get("volume")),
            "issue": _first(entry.get("number")),
            "page_range": f"{start}-{end}" if start and end else start,
            "issn": _first(entry.get("issn")),
        })
    elif source_type == SourceType.BOOK.value:
        data.update({
            "subtitle": secondary,
            "isbn": _first(entry.get("issn")),
            "edition": _first(entry.get("edition")),
        })
    elif source_type == SourceType.NEWSPAPER.value:
        data.update({
            "newspaper_title": _first(entry.get("journal_name")) or secondary or "",
            "section": _first(entry.get("section")),
        })
    elif source_type == SourceType.WEBSITE.value:
        data["site_name"] = secondary
    elif source_type == SourceType.VIDEO.value:
        data.update({
            "channel_name": secondary,
            "platform": data.pop("publisher"),
        })
    elif source_type == SourceType.FILM.value:
        data.update({
            "directors": _names(entry.get("secondary_authors")),
            "production_company": data.pop("publisher"),
        })
    else:
        data["subtitle"] = secondary

    return fields_from_dict(data)


def import_ris(content: str) -> List[CitationFields]:
    """Parse RIS content straight into citation fields."""
    return [ris_entry_to_fields(entry) for entry in parse_ris(content)]


def import_ris_file(file_path: str) -> List[CitationFields]:
    """Parse an .ris file straight into citation fields."""
    return [ris_entry_to_fields(entry) for entry in parse_ris_file(file_path)]
