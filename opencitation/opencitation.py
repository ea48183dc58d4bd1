"""Main OpenCitation class - entry point for the library."""
import os
import logging
from typing import List, Optional, Sequence, Union

from .config import Config
from .core.models import CitationFields, CitationStyle, FormattedCitation
from .core.engine import (
    FieldsInput,
    StyleInput,
    as_fields,
    format_bibliography,
    format_citation,
    format_citations,
    generate_in_text_citation,
)
from .exporters.bibtex import to_bibtex_multiple
from .exporters.ris import to_ris_multiple
from .converters.bibtex_parser import import_bibtex_file
from .converters.ris_parser import import_ris_file
from .exceptions import ConversionError
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("ris", "bibtex")


class OpenCitation:
    """Main entry point for the OpenCitation library.

    Example:
        >>> from opencitation import OpenCitation
        >>> oc = OpenCitation(style="mla")
        >>> oc.format({"sourceType": "book", "title": "Beloved",
        ...            "authors": [{"firstName": "Toni", "lastName": "Morrison"}],
        ...            "publisher": "Knopf", "publicationDate": {"year": 1987}}).text
        'Morrison, Toni. Beloved. Knopf, 1987.'
    """

    def __init__(
        self,
        style: Optional[StyleInput] = None,
        config: Optional[Config] = None,
        log_level: Union[int, str, None] = None,
    ):
        """Initialize OpenCitation.

        Args:
            style: Default citation style (overrides the configured one)
            config: Optional Config object (loaded from the environment if omitted)
            log_level: Logging level (default: the configured level)
        """
        if config is None:
            config = Config.from_env()

        setup_logging(level=log_level if log_level is not None else config.log_level)

        if style is not None:
            resolved = CitationStyle.parse(style)
            if resolved is None:
                logger.warning(f"Unknown citation style {style!r}, keeping {config.default_style}")
            else:
                config.default_style = resolved.value

        self.config = config
        logger.info(f"OpenCitation initialized with {self.config.default_style} style")

    @property
    def style(self) -> CitationStyle:
        return self.config.style

    def _style(self, style: Optional[StyleInput]) -> StyleInput:
        return style if style is not None else self.config.style

    # ==================== Formatting ====================

    def format(self, fields: FieldsInput, style: Optional[StyleInput] = None) -> FormattedCitation:
        """Format one citation.

        Args:
            fields: Citation fields record or dict
            style: Style for this call (default: configured style)

        Returns:
            FormattedCitation with text and HTML
        """
        return format_citation(fields, self._style(style))

    def format_many(
        self,
        citation_list: Sequence[FieldsInput],
        style: Optional[StyleInput] = None,
    ) -> List[FormattedCitation]:
        """Format several citations, preserving order."""
        return format_citations(citation_list, self._style(style))

    def in_text(self, fields: FieldsInput, style: Optional[StyleInput] = None) -> str:
        """Parenthetical in-text citation, e.g. ``(Smith, 2020)``."""
        return generate_in_text_citation(fields, self._style(style))

    def bibliography(
        self,
        citation_list: Sequence[FieldsInput],
        style: Optional[StyleInput] = None,
    ) -> List[FormattedCitation]:
        """Alphabetized reference list.

        Args:
            citation_list: Citation fields records or dicts
            style: Style for this call (default: configured style)

        Returns:
            Sorted formatted citations; entries that render empty are dropped
        """
        logger.info(f"Formatting bibliography of {len(citation_list)} entries")
        return format_bibliography(citation_list, self._style(style))

    # ==================== Export ====================

    def export_ris(self, citation_list: Sequence[FieldsInput]) -> str:
        """RIS records for all citations."""
        return to_ris_multiple([as_fields(f) for f in citation_list])

    def export_bibtex(self, citation_list: Sequence[FieldsInput]) -> str:
        """BibTeX entries for all citations, keys unique within the batch."""
        return to_bibtex_multiple([as_fields(f) for f in citation_list])

    def save_export(
        self,
        citation_list: Sequence[FieldsInput],
        output_path: str,
        export_format: str = "bibtex",
    ) -> str:
        """Write citations to an RIS or BibTeX file.

        Relative paths are resolved against the configured output directory.

        Args:
            citation_list: Citation fields records or dicts
            output_path: Target file path
            export_format: 'ris' or 'bibtex'

        Returns:
            Path to saved file

        Raises:
            ConversionError: If the format is unknown or the file cannot be written
        """
        export_format = export_format.lower()
        if export_format not in EXPORT_FORMATS:
            raise ConversionError(
                f"Unsupported export format: {export_format} "
                f"(expected one of {', '.join(EXPORT_FORMATS)})"
            )

        if not os.path.isabs(output_path):
            output_path = os.path.join(self.config.output_dir, output_path)

        if export_format == "ris":
            content = self.export_ris(citation_list)
        else:
            content = self.export_bibtex(citation_list)

        logger.info(f"Exporting {len(citation_list)} citations to {output_path}")

        try:
            directory = os.path.dirname(output_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(content + "\n")
        except OSError as e:
            logger.error(f"{export_format} export failed: {e}")
            raise ConversionError(f"Failed to write {output_path}: {e}")

        logger.info(f"✓ Exported {export_format} to {output_path}")
        return output_path

    # ==================== Import ====================

    def import_bibtex(self, bib_file_path: str) -> List[CitationFields]:
        """Load citations from a .bib file.

        Raises:
            BibTeXError: If the file cannot be read or parsed
        """
        logger.info(f"Importing BibTeX file: {bib_file_path}")
        citations = import_bibtex_file(bib_file_path)
        logger.info(f"Imported {len(citations)} citations from {bib_file_path}")
        return citations

    def import_ris(self, ris_file_path: str) -> List[CitationFields]:
        """Load citations from an .ris file.

        Raises:
            ConversionError: If the file cannot be read or parsed
        """
        logger.info(f"Importing RIS file: {ris_file_path}")
        citations = import_ris_file(ris_file_path)
        logger.info(f"Imported {len(citations)} citations from {ris_file_path}")
        return citations
