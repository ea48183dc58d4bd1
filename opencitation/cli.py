#!/usr/bin/env python3
"""OpenCitation CLI - format and convert citations from the command line.

Usage:
    opencitation format <input.json> [--style S] [--html] [-o OUT]
    opencitation intext <input.json> [--style S]
    opencitation export <input.json> --format {ris,bibtex} [-o OUT]
    opencitation import <input.bib|input.ris> [--format {bibtex,ris}] [-o OUT]
    opencitation styles
    opencitation --version
    opencitation --help

Commands:
    format   Print the full reference for each citation in a JSON file
    intext   Print the in-text citation for each citation in a JSON file
    export   Convert a JSON file of citations to RIS or BibTeX
    import   Convert a .bib or .ris file to citation JSON
    styles   List citation styles and source types

Examples:
    # Format a reading list in MLA
    opencitation format reading.json --style mla

    # Write a BibTeX file
    opencitation export reading.json --format bibtex -o reading.bib

    # Bring an existing .ris library in as JSON
    opencitation import library.ris -o library.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .core.engine import format_citations, generate_in_text_citation
from .core.models import (
    CITATION_STYLE_LABELS,
    SOURCE_TYPE_DESCRIPTIONS,
    SOURCE_TYPE_LABELS,
    CitationFields,
    fields_from_dict,
    fields_to_dict,
)
from .exceptions import ConversionError, OpenCitationError
from .exporters.bibtex import to_bibtex_multiple
from .exporters.ris import to_ris_multiple
from .converters.bibtex_parser import import_bibtex_file
from .converters.ris_parser import import_ris_file
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def get_version():
    """Get package version."""
    from . import __version__
    return __version__


def load_citations(path: str) -> List[CitationFields]:
    """Read a JSON file holding one citation object or a list of them."""
    input_path = Path(path)
    if not input_path.exists():
        raise OpenCitationError(f"Input file not found: {input_path}")

    try:
        data = json.loads(input_path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise OpenCitationError(f"Invalid JSON in {input_path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise OpenCitationError(f"Failed to read {input_path}: {e}")

    items = data if isinstance(data, list) else [data]
    return [fields_from_dict(item) for item in items]


def write_output(content: str, output: Optional[str]) -> None:
    """Print to stdout, or write to ``output`` when given."""
    if output:
        try:
            Path(output).write_text(content + "\n", encoding='utf-8')
        except OSError as e:
            raise ConversionError(f"Failed to write {output}: {e}")
        print(f"Wrote {output}")
    else:
        print(content)


def cmd_format(args, config: Config):
    """Print the full formatted citation for each input record."""
    citations = load_citations(args.input)
    style = args.style or config.default_style
    use_html = args.html or config.output_format == "html"

    results = format_citations(citations, style)
    lines = [r.html if use_html else r.text for r in results]
    write_output("\n".join(lines), args.output)
    return 0


def cmd_intext(args, config: Config):
    """Print the in-text citation for each input record."""
    citations = load_citations(args.input)
    style = args.style or config.default_style

    for fields in citations:
        print(generate_in_text_citation(fields, style))
    return 0


def cmd_export(args, config: Config):
    """Convert JSON citations to RIS or BibTeX."""
    citations = load_citations(args.input)

    if args.format == "ris":
        content = to_ris_multiple(citations)
    else:
        content = to_bibtex_multiple(citations)

    write_output(content, args.output)
    return 0


def cmd_import(args, config: Config):
    """Convert a .bib or .ris file to citation JSON."""
    input_path = Path(args.input)
    import_format = args.format
    if import_format is None:
        import_format = "ris" if input_path.suffix.lower() == ".ris" else "bibtex"

    if import_format == "ris":
        citations = import_ris_file(str(input_path))
    else:
        citations = import_bibtex_file(str(input_path))

    content = json.dumps([fields_to_dict(c) for c in citations], indent=2, ensure_ascii=False)
    write_output(content, args.output)
    return 0


def cmd_styles(args, config: Config):
    """List supported styles and source types."""
    print("Citation styles:")
    for value, label in CITATION_STYLE_LABELS.items():
        marker = " (default)" if value == config.default_style else ""
        print(f"  {value:<10} {label}{marker}")

    print("\nSource types:")
    for value, label in SOURCE_TYPE_LABELS.items():
        print(f"  {value:<14} {label} - {SOURCE_TYPE_DESCRIPTIONS[value]}")
    return 0


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="opencitation",
        description="OpenCitation - citation formatting in APA, MLA, Chicago and Harvard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  opencitation format reading.json --style mla
  opencitation intext reading.json --style harvard
  opencitation export reading.json --format ris -o reading.ris
  opencitation import library.bib -o library.json
        """
    )
    parser.add_argument("--version", action="version", version=f"opencitation {get_version()}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose (debug) logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    style_choices = list(CITATION_STYLE_LABELS)

    # format command
    format_parser = subparsers.add_parser(
        "format",
        help="Format citations from a JSON file",
        description="Print one formatted reference per citation in the input file."
    )
    format_parser.add_argument("input", help="JSON file with a citation object or a list of them")
    format_parser.add_argument("--style", choices=style_choices,
                               help="Citation style (default: configured style)")
    format_parser.add_argument("--html", action="store_true", help="Print HTML instead of plain text")
    format_parser.add_argument("-o", "--output", help="Output file path")

    # intext command
    intext_parser = subparsers.add_parser(
        "intext",
        help="Generate in-text citations",
        description="Print one parenthetical in-text citation per citation in the input file."
    )
    intext_parser.add_argument("input", help="JSON file with a citation object or a list of them")
    intext_parser.add_argument("--style", choices=style_choices,
                               help="Citation style (default: configured style)")

    # export command
    export_parser = subparsers.add_parser(
        "export",
        help="Export citations to RIS or BibTeX",
        description="Convert a JSON file of citations to an exchange format."
    )
    export_parser.add_argument("input", help="JSON file with a citation object or a list of them")
    export_parser.add_argument("--format", choices=["ris", "bibtex"], required=True,
                               help="Export format")
    export_parser.add_argument("-o", "--output", help="Output file path")

    # import command
    import_parser = subparsers.add_parser(
        "import",
        help="Import a .bib or .ris file",
        description="Convert BibTeX or RIS records to citation JSON."
    )
    import_parser.add_argument("input", help="Input .bib or .ris file")
    import_parser.add_argument("--format", choices=["bibtex", "ris"],
                               help="Input format (default: from the file extension)")
    import_parser.add_argument("-o", "--output", help="Output JSON file path")

    # styles command
    subparsers.add_parser(
        "styles",
        help="List citation styles and source types",
        description="Show the supported citation styles and source types."
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    # Dispatch to command handler
    commands = {
        "format": cmd_format,
        "intext": cmd_intext,
        "export": cmd_export,
        "import": cmd_import,
        "styles": cmd_styles,
    }

    try:
        config = Config.from_env()
        return commands[args.command](args, config)
    except OpenCitationError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
