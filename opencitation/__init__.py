"""OpenCitation - Citation Formatting Library.

A Python library for turning bibliographic metadata into references:
- APA 7, MLA 9, Chicago 17 and Harvard formatting (plain text and HTML)
- In-text citations
- BibTeX and RIS export
- BibTeX and RIS import
"""

__version__ = "1.0.0"

from .config import Config
from .exceptions import (
    OpenCitationError,
    ConfigurationError,
    ValidationError,
    BibTeXError,
    ConversionError,
)
from .core.models import (
    Author,
    CitationDate,
    CitationFields,
    CitationStyle,
    FormattedCitation,
    SourceType,
    AccessType,
    BookFields,
    JournalFields,
    WebsiteFields,
    BlogFields,
    NewspaperFields,
    VideoFields,
    ImageFields,
    FilmFields,
    TVSeriesFields,
    TVEpisodeFields,
    MiscellaneousFields,
    fields_from_dict,
    fields_to_dict,
)
from .core.engine import (
    format_citation,
    format_citations,
    format_bibliography,
    generate_in_text_citation,
    get_formatter,
)
from .formatters import format_apa, format_mla, format_chicago, format_harvard
from .exporters import to_bibtex, to_bibtex_multiple, to_ris, to_ris_multiple
from .converters import parse_bibtex, import_bibtex, parse_ris, import_ris
from .utils.logging import setup_logging
from .opencitation import OpenCitation

__all__ = [
    "OpenCitation",
    "Config",
    "Author",
    "CitationDate",
    "CitationFields",
    "CitationStyle",
    "FormattedCitation",
    "SourceType",
    "AccessType",
    "BookFields",
    "JournalFields",
    "WebsiteFields",
    "BlogFields",
    "NewspaperFields",
    "VideoFields",
    "ImageFields",
    "FilmFields",
    "TVSeriesFields",
    "TVEpisodeFields",
    "MiscellaneousFields",
    "fields_from_dict",
    "fields_to_dict",
    "format_citation",
    "format_citations",
    "format_bibliography",
    "generate_in_text_citation",
    "get_formatter",
    "format_apa",
    "format_mla",
    "format_chicago",
    "format_harvard",
    "to_bibtex",
    "to_bibtex_multiple",
    "to_ris",
    "to_ris_multiple",
    "parse_bibtex",
    "import_bibtex",
    "parse_ris",
    "import_ris",
    "setup_logging",
    "OpenCitationError",
    "ConfigurationError",
    "ValidationError",
    "BibTeXError",
    "ConversionError",
]
