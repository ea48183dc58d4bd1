"""Tests for configuration loading."""

import logging

import pytest

from opencitation import OpenCitation
from opencitation.config import Config
from opencitation.core.models import CitationStyle
from opencitation.exceptions import ConfigurationError
from opencitation.utils.logging import setup_logging


class TestConfig:
    """Test Config validation and loading."""

    def test_defaults(self):
        config = Config()
        assert config.default_style == "apa"
        assert config.output_format == "text"
        assert config.style is CitationStyle.APA

    def test_style_normalized(self):
        assert Config(default_style=" Harvard ").default_style == "harvard"

    def test_unknown_style_rejected(self):
        with pytest.raises(ConfigurationError):
            Config(default_style="vancouver")

    def test_unknown_output_format_rejected(self):
        with pytest.raises(ConfigurationError):
            Config(output_format="pdf")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENCITATION_DEFAULT_STYLE", "mla")
        monkeypatch.setenv("OPENCITATION_OUTPUT_FORMAT", "html")
        config = Config.from_env()
        assert config.style is CitationStyle.MLA
        assert config.output_format == "html"

    def test_from_env_rejects_unknown_style(self, monkeypatch):
        monkeypatch.setenv("OPENCITATION_DEFAULT_STYLE", "ieee")
        with pytest.raises(ConfigurationError):
            Config.from_env()

    def test_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("OPENCITATION_DEFAULT_STYLE=chicago\nOPENCITATION_OUTPUT_DIR=exports\n")
        config = Config.from_env(str(env_file))
        assert config.default_style == "chicago"
        assert config.output_dir == "exports"

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"default_style": "harvard", "api_key": "x"})
        assert config.default_style == "harvard"


class TestOpenCitation:
    """Test the facade's configuration handling."""

    def test_style_override(self):
        oc = OpenCitation(style="chicago", config=Config(), log_level=logging.WARNING)
        assert oc.style is CitationStyle.CHICAGO

    def test_unknown_style_override_keeps_config(self):
        oc = OpenCitation(style="ieee", config=Config(default_style="mla"), log_level=logging.WARNING)
        assert oc.style is CitationStyle.MLA

    def test_env_default_style(self, monkeypatch, gatsby):
        monkeypatch.setenv("OPENCITATION_DEFAULT_STYLE", "mla")
        oc = OpenCitation(log_level=logging.WARNING)
        assert oc.format(gatsby).text == "Fitzgerald, F. Scott. The Great Gatsby. Scribner, 1925."
        assert oc.in_text(gatsby) == "(Fitzgerald)"

    def test_per_call_style(self, gatsby):
        oc = OpenCitation(config=Config(), log_level=logging.WARNING)
        assert oc.format(gatsby, style="harvard").text.startswith("Fitzgerald, F. (1925)")
        assert len(oc.format_many([gatsby, gatsby])) == 2
        assert oc.bibliography([gatsby])[0].text.startswith("Fitzgerald, F. (1925).")

    def test_export_accepts_dicts(self):
        oc = OpenCitation(config=Config(), log_level=logging.WARNING)
        output = oc.export_ris([{"sourceType": "book", "title": "Beloved"}])
        assert output.startswith("TY  - BOOK")
        assert oc.export_bibtex([{"sourceType": "book", "title": "Beloved"}]).startswith("@book{")


class TestLogging:
    """Test logging setup."""

    def test_repeated_setup_replaces_handlers(self):
        setup_logging("DEBUG")
        logger = setup_logging(logging.WARNING)
        assert logger.name == "opencitation"
        assert logger.level == logging.WARNING
        assert len([h for h in logger.handlers if getattr(h, "_opencitation", False)]) == 1

    def test_unknown_level_name_defaults_to_info(self):
        assert setup_logging("chatty").level == logging.INFO
