"""Citation style formatters: APA, MLA, Chicago and Harvard."""
from .base import BaseFormatter, CitationBuilder, Segment
from .apa import APAFormatter, format_apa
from .mla import MLAFormatter, format_mla
from .chicago import ChicagoFormatter, format_chicago
from .harvard import HarvardFormatter, format_harvard

__all__ = [
    "BaseFormatter",
    "CitationBuilder",
    "Segment",
    "APAFormatter",
    "MLAFormatter",
    "ChicagoFormatter",
    "HarvardFormatter",
    "format_apa",
    "format_mla",
    "format_chicago",
    "format_harvard",
]
