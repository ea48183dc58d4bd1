"""Base formatter class and citation builder.

All style-specific formatters inherit from BaseFormatter, which routes a
citation to the renderer for its source type. Renderers describe a citation
as an ordered list of elements appended to a CitationBuilder; the builder
renders plain text and HTML from that single list, so the two outputs always
carry the same elements and punctuation.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from ..core.models import (
    CitationFields,
    CitationStyle,
    FormattedCitation,
    EMPTY_CITATION,
    FIELDS_BY_SOURCE_TYPE,
    SourceType,
    coerce_fields,
)
from .utils import escape_html, italic

logger = logging.getLogger(__name__)

PLAIN = "plain"
ITALIC = "italic"
LINK = "link"


@dataclass(frozen=True)
class Segment:
    """A run of citation text with its HTML treatment."""

    text: str
    kind: str = PLAIN
    href: Optional[str] = None

    def to_html(self) -> str:
        if self.kind == ITALIC:
            return italic(escape_html(self.text))
        if self.kind == LINK:
            return f'<a href="{escape_html(self.href or self.text)}">{escape_html(self.text)}</a>'
        return escape_html(self.text)


Run = Union[Segment, str]


def em(text: str) -> Segment:
    """Italicized run (titles of standalone works and containers)."""
    return Segment(text, ITALIC)


def link(url: str, label: Optional[str] = None) -> Segment:
    """Hyperlinked run; ``label`` is the visible text when it differs from the URL."""
    return Segment(label if label is not None else url, LINK, href=url)


def sep(runs: List[Run], separator: str) -> str:
    """Separator to put before the next run, or nothing when ``runs`` is empty."""
    return separator if runs else ""


class CitationBuilder:
    """Collects citation elements and renders them as text and HTML.

    Each element is a sequence of runs; elements are joined with a single
    space in both outputs.
    """

    def __init__(self):
        self._elements: List[List[Segment]] = []

    def add(self, *runs: Run) -> "CitationBuilder":
        """Append one element. Empty runs are dropped; an element with no text is skipped."""
        segments = [
            run if isinstance(run, Segment) else Segment(run)
            for run in runs
            if run
        ]
        segments = [s for s in segments if s.text]
        if segments:
            self._elements.append(segments)
        return self

    def terminate(self) -> "CitationBuilder":
        """Turn a trailing comma on the last element into a period."""
        if not self._elements:
            return self

        last = self._elements[-1]
        tail = last[-1]
        if tail.kind != LINK and tail.text.endswith(","):
            last[-1] = Segment(tail.text[:-1] + ".", tail.kind, tail.href)
        return self

    def __len__(self) -> int:
        return len(self._elements)

    def build(self) -> FormattedCitation:
        text = " ".join("".join(s.text for s in element) for element in self._elements)
        html = " ".join("".join(s.to_html() for s in element) for element in self._elements)
        return FormattedCitation(text=text, html=html)


class BaseFormatter(ABC):
    """
    Abstract base class for citation formatters.

    Each formatter must implement one renderer per source type. The base
    class provides:
    - format(): dispatch on ``source_type``
    - an empty result for unrecognized source types
    """

    style: CitationStyle = CitationStyle.APA

    def format(self, fields: CitationFields) -> FormattedCitation:
        """Format a full citation in this formatter's style."""
        renderers: Dict[str, Callable[[CitationFields], CitationBuilder]] = {
            SourceType.BOOK.value: self._format_book,
            SourceType.JOURNAL.value: self._format_journal,
            SourceType.WEBSITE.value: self._format_website,
            SourceType.BLOG.value: self._format_blog,
            SourceType.NEWSPAPER.value: self._format_newspaper,
            SourceType.VIDEO.value: self._format_video,
            SourceType.IMAGE.value: self._format_image,
            SourceType.FILM.value: self._format_film,
            SourceType.TV_SERIES.value: self._format_tv_series,
            SourceType.TV_EPISODE.value: self._format_tv_episode,
            SourceType.MISCELLANEOUS.value: self._format_miscellaneous,
        }

        source_type = getattr(fields, "source_type", None)
        renderer = renderers.get(source_type)
        if renderer is None:
            logger.debug(f"No {self.style.value} renderer for source type {source_type!r}")
            return EMPTY_CITATION

        # A base record tagged with a known type still renders, variant fields empty
        fields = coerce_fields(fields, FIELDS_BY_SOURCE_TYPE[source_type])
        return renderer(fields).build()

    def __call__(self, fields: CitationFields) -> FormattedCitation:
        return self.format(fields)

    @abstractmethod
    def _format_book(self, f) -> CitationBuilder:
        pass

    @abstractmethod
    def _format_journal(self, f) -> CitationBuilder:
        pass

    @abstractmethod
    def _format_website(self, f) -> CitationBuilder:
        pass

    @abstractmethod
    def _format_blog(self, f) -> CitationBuilder:
        pass

    @abstractmethod
    def _format_newspaper(self, f) -> CitationBuilder:
        pass

    @abstractmethod
    def _format_video(self, f) -> CitationBuilder:
        pass

    @abstractmethod
    def _format_image(self, f) -> CitationBuilder:
        pass

    @abstractmethod
    def _format_film(self, f) -> CitationBuilder:
        pass

    @abstractmethod
    def _format_tv_series(self, f) -> CitationBuilder:
        pass

    @abstractmethod
    def _format_tv_episode(self, f) -> CitationBuilder:
        pass

    @abstractmethod
    def _format_miscellaneous(self, f) -> CitationBuilder:
        pass
