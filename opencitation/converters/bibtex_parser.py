"""BibTeX import: parse .bib content and map entries to citation fields."""
import logging
from typing import Any, Dict, List, Optional

import bibtexparser
from bibtexparser.bparser import BibTexParser
from bibtexparser.customization import convert_to_unicode

from ..core.models import CitationDate, CitationFields, SourceType, fields_from_dict
from ..exceptions import BibTeXError
from .names import clean_value, parse_date, parse_month, split_bibtex_names

logger = logging.getLogger(__name__)

ENTRY_SOURCE_TYPES = {
    "article": SourceType.JOURNAL.value,
    "book": SourceType.BOOK.value,
    "inbook": SourceType.BOOK.value,
    "online": SourceType.WEBSITE.value,
    "electronic": SourceType.WEBSITE.value,
}


def parse_bibtex(content: str) -> List[Dict[str, Any]]:
    """Parse BibTeX content using bibtexparser library.

    Args:
        content: BibTeX content as string

    Returns:
        List of parsed BibTeX entry dictionaries

    Raises:
        BibTeXError: If parsing fails
    """
    try:
        parser = BibTexParser(common_strings=True)  # jan, feb, ... month macros
        parser.customization = convert_to_unicode
        parser.ignore_nonstandard_types = False  # keep @online entries
        parser.homogenize_fields = True

        bib_database = bibtexparser.loads(content, parser=parser)

        if not bib_database.entries:
            logger.warning("bibtexparser parsed the string but found no valid entries.")
            return []

        logger.info(f"Successfully parsed {len(bib_database.entries)} BibTeX entries")
        return bib_database.entries

    except Exception as e:
        logger.error(f"BibTeX parsing failed: {e}\nContent snippet: {content[:200]}...")
        raise BibTeXError(f"Failed to parse BibTeX content: {e}")


def parse_bibtex_file(file_path: str) -> List[Dict[str, Any]]:
    """Parse a BibTeX file.

    Args:
        file_path: Path to .bib file

    Returns:
        List of parsed BibTeX entries

    Raises:
        BibTeXError: If file reading or parsing fails
    """
    try:
        with open(file_path, 'r', encoding='utf-8', errors='ignore') as f:
            content = f.read()
    except FileNotFoundError:
        raise BibTeXError(f"BibTeX file not found: {file_path}")
    except OSError as e:
        raise BibTeXError(f"Failed to read BibTeX file {file_path}: {e}")
    return parse_bibtex(content)


def _publication_date(entry: Dict[str, Any]) -> Any:
    year = clean_value(entry.get("year"))
    if not year.isdigit():
        # biblatex ``date = {2020-05-12}``
        return parse_date(entry.get("date"))
    month = parse_month(entry.get("month"))
    day = clean_value(entry.get("day"))
    return CitationDate(
        year=int(year),
        month=month,
        day=int(day) if month and day.isdigit() else None,
    )


def _pages(value: Any) -> Optional[str]:
    """``123--145`` (or the en dash unicode conversion leaves) to ``123-145``."""
    text = clean_value(value).replace("--", "-").replace("–", "-")
    return text or None


def bibtex_entry_to_fields(entry: Dict[str, Any]) -> CitationFields:
    """Map one parsed BibTeX entry onto the matching citation-fields variant.

    ``article`` becomes a journal article, ``book``/``inbook`` a book,
    ``online``/``electronic`` a website; every other entry type is
    imported as miscellaneous.
    """
    entry_type = str(entry.get("ENTRYTYPE", "misc")).lower()
    source_type = ENTRY_SOURCE_TYPES.get(entry_type, SourceType.MISCELLANEOUS.value)

    data: Dict[str, Any] = {
        "source_type": source_type,
        "title": clean_value(entry.get("title")),
        "id": entry.get("ID"),
        "publication_date": _publication_date(entry),
        "url": clean_value(entry.get("url")) or None,
        "doi": clean_value(entry.get("doi")) or None,
        "publisher": clean_value(entry.get("publisher")) or None,
        "language": clean_value(entry.get("language")) or None,
        "annotation": clean_value(entry.get("abstract")) or None,
        "access_date": parse_date(entry.get("urldate")),
    }

    if entry.get("author"):
        data["authors"] = split_bibtex_names(entry["author"])
    if entry.get("editor"):
        data["editors"] = split_bibtex_names(entry["editor"])

    if source_type == SourceType.JOURNAL.value:
        data.update({
            "journal_title": clean_value(entry.get("journal") or entry.get("journaltitle")),
            "volume": clean_value(entry.get("volume")) or None,
            "issue": clean_value(entry.get("number") or entry.get("issue")) or None,
            "page_range": _pages(entry.get("pages")),
            "issn": clean_value(entry.get("issn")) or None,
        })
    elif source_type == SourceType.BOOK.value:
        data.update({
            "publication_place": clean_value(entry.get("address") or entry.get("location")) or None,
            "isbn": clean_value(entry.get("isbn")) or None,
            "edition": clean_value(entry.get("edition")) or None,
            "series": clean_value(entry.get("series")) or None,
            "volume": clean_value(entry.get("volume")) or None,
            "page_range": _pages(entry.get("pages")),
        })
    elif source_type == SourceType.WEBSITE.value:
        data["site_name"] = clean_value(entry.get("organization")) or None
    else:
        data["description"] = clean_value(entry.get("howpublished") or entry.get("note")) or None

    return fields_from_dict(data)


def import_bibtex(content: str) -> List[CitationFields]:
    """Parse BibTeX content straight into citation fields."""
    return [bibtex_entry_to_fields(entry) for entry in parse_bibtex(content)]


def import_bibtex_file(file_path: str) -> List[CitationFields]:
    """Parse a .bib file straight into citation fields."""
    return [bibtex_entry_to_fields(entry) for entry in parse_bibtex_file(file_path)]
