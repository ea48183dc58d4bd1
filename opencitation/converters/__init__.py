"""Importers: BibTeX and RIS to citation fields."""
from .bibtex_parser import (
    bibtex_entry_to_fields,
    import_bibtex,
    import_bibtex_file,
    parse_bibtex,
    parse_bibtex_file,
)
from .ris_parser import (
    import_ris,
    import_ris_file,
    parse_ris,
    parse_ris_file,
    ris_entry_to_fields,
)

__all__ = [
    "bibtex_entry_to_fields",
    "import_bibtex",
    "import_bibtex_file",
    "parse_bibtex",
    "parse_bibtex_file",
    "import_ris",
    "import_ris_file",
    "parse_ris",
    "parse_ris_file",
    "ris_entry_to_fields",
]
