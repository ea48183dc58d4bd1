"""Exchange-format exporters (BibTeX and RIS)."""
from .bibtex import (
    escape_bibtex,
    generate_bibtex_key,
    get_bibtex_type,
    to_bibtex,
    to_bibtex_multiple,
)
from .ris import get_ris_type, to_ris, to_ris_multiple

__all__ = [
    "escape_bibtex",
    "generate_bibtex_key",
    "get_bibtex_type",
    "to_bibtex",
    "to_bibtex_multiple",
    "get_ris_type",
    "to_ris",
    "to_ris_multiple",
]
