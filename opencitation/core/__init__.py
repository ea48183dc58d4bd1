"""Core data model and engine facade."""
from .models import (
    Author,
    CitationDate,
    CitationFields,
    CitationStyle,
    FormattedCitation,
    SourceType,
    AccessType,
    fields_from_dict,
    fields_to_dict,
)

__all__ = [
    "Author",
    "CitationDate",
    "CitationFields",
    "CitationStyle",
    "FormattedCitation",
    "SourceType",
    "AccessType",
    "fields_from_dict",
    "fields_to_dict",
]
