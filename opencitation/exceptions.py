"""Custom exceptions for OpenCitation.

The formatting engine itself never raises; these are used by the outer
surfaces (configuration, dict conversion, importers and the CLI).
"""


class OpenCitationError(Exception):
    """Base exception for all OpenCitation errors."""

    pass


class ConfigurationError(OpenCitationError):
    """Raised when configuration is invalid or missing."""

    pass


class ValidationError(OpenCitationError):
    """Raised when input data cannot be turned into citation fields."""

    pass


class BibTeXError(OpenCitationError):
    """Raised when BibTeX parsing fails."""

    pass


class ConversionError(OpenCitationError):
    """Raised when RIS parsing or file export fails."""

    pass

