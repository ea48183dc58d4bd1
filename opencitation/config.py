"""Configuration management for OpenCitation."""
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from .core.models import CitationStyle
from .exceptions import ConfigurationError

OUTPUT_FORMATS = ("text", "html")


@dataclass
class Config:
    """OpenCitation configuration.

    Attributes:
        default_style: Citation style used when none is given ('apa', 'mla', 'chicago', 'harvard')
        output_format: Which rendering the CLI prints by default ('text' or 'html')
        log_level: Logging level name
        output_dir: Directory for exported files
    """

    # Formatting
    default_style: str = "apa"
    output_format: str = "text"

    # Logging
    log_level: str = "INFO"

    # Storage
    output_dir: str = "./output"

    def __post_init__(self):
        """Normalize and validate values."""
        self.default_style = self.default_style.strip().lower()
        self.output_format = self.output_format.strip().lower()

        if self.default_style not in CitationStyle.values():
            raise ConfigurationError(
                f"Unsupported citation style: {self.default_style} "
                f"(expected one of {', '.join(CitationStyle.values())})"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unsupported output format: {self.output_format} "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )

    @property
    def style(self) -> CitationStyle:
        """Default style as an enum member."""
        return CitationStyle(self.default_style)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            env_file: Path to .env file (optional)

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a variable holds an unsupported value
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls(
            default_style=os.getenv("OPENCITATION_DEFAULT_STYLE", "apa"),
            output_format=os.getenv("OPENCITATION_OUTPUT_FORMAT", "text"),
            log_level=os.getenv("OPENCITATION_LOG_LEVEL", "INFO"),
            output_dir=os.getenv("OPENCITATION_OUTPUT_DIR", "./output"),
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Load configuration from dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            Config instance
        """
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})
