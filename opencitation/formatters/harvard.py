"""
opencitation/formatters/harvard.py

Harvard (author-date) citation formatter.
Widely used in UK and Australian universities.
"""

from typing import Optional

from ..core.models import CitationDate, CitationFields, CitationStyle, FormattedCitation
from .base import BaseFormatter, CitationBuilder, em, link
from .utils import (
    add_period,
    format_access_date,
    format_authors_harvard,
    format_date_harvard,
    format_doi,
    format_pages,
    format_url,
    join_title,
)


def _year(date: Optional[CitationDate]) -> str:
    """Year in parentheses, or (n.d.)."""
    if date is not None and date.year:
        return f"({date.year})"
    return "(n.d.)"


class HarvardFormatter(BaseFormatter):
    """
    Harvard formatter.

    Key features:
    - Author surnames with run-together initials (Smith, J.A.)
    - Year in parentheses directly after the author
    - Article titles in single quotes, containers italicized
    - Online sources close with "Available at: URL (Accessed: date)"
    """

    style = CitationStyle.HARVARD

    @staticmethod
    def _add_available(b: CitationBuilder, f) -> None:
        """Available at: URL (Accessed: Day Month Year)."""
        if not f.url:
            return
        accessed = format_access_date(f.access_date, "harvard")
        b.add(
            "Available at: ",
            link(format_url(f.url)),
            f" {accessed}" if accessed else "",
        )

    @staticmethod
    def _platform(f) -> str:
        return f.streaming_service or f.network or ""

    # =========================================================================
    # BOOK
    # =========================================================================

    def _format_book(self, f) -> CitationBuilder:
        """
        Format book.

        Pattern: Author (Year) Title. Edition. Place: Publisher.
        """
        b = CitationBuilder()
        b.add(format_authors_harvard(f.authors))
        b.add(_year(f.publication_date))
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.edition:
            b.add(f"{f.edition}.")

        imprint = f.publication_place or ""
        if f.publisher:
            imprint += f": {f.publisher}" if imprint else f.publisher
        if imprint:
            b.add(f"{imprint}.")
        return b

    # =========================================================================
    # JOURNAL
    # =========================================================================

    def _format_journal(self, f) -> CitationBuilder:
        """
        Format journal article.

        Pattern: Author (Year) 'Article Title', Journal Title, Volume(Issue), pp. Pages. doi: DOI
        """
        b = CitationBuilder()
        b.add(format_authors_harvard(f.authors))
        b.add(_year(f.publication_date))
        b.add(f"'{join_title(f.title, f.subtitle)}',")

        locator = ""
        if f.volume:
            locator += f", {f.volume}"
            if f.issue:
                locator += f"({f.issue})"
        if f.page_range:
            locator += f", {format_pages(f.page_range, 'harvard')}"

        if f.journal_title:
            b.add(em(f.journal_title), locator, ".")
        elif locator:
            b.add(f"{locator[2:]}.")
        else:
            b.terminate()

        # The raw DOI is shown, linked to its resolver URL
        if f.doi:
            b.add("doi: ", link(format_doi(f.doi), label=f.doi))
        return b

    # =========================================================================
    # WEB
    # =========================================================================

    def _format_website(self, f) -> CitationBuilder:
        """
        Format web page. The site name stands in for a missing author.

        Pattern: Author (Year) Title. [Online]. Site Name. Available at: URL (Accessed: Date).
        """
        b = CitationBuilder()
        authors = format_authors_harvard(f.authors)
        b.add(authors or f.site_name)
        b.add(_year(f.publication_date))
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.site_name and authors:
            b.add(f"[Online]. {f.site_name}.")
        else:
            b.add("[Online].")

        self._add_available(b, f)
        return b

    def _format_blog(self, f) -> CitationBuilder:
        """
        Format blog post.

        Pattern: Author (Year) 'Post Title', Blog Name [Blog]. Date. Available at: URL (Accessed: Date).
        """
        b = CitationBuilder()
        b.add(format_authors_harvard(f.authors))
        b.add(_year(f.publication_date))
        b.add(f"'{join_title(f.title, f.subtitle)}',")

        if f.blog_name:
            b.add(em(f.blog_name), " [Blog].")
        else:
            b.add("[Blog].")

        if f.publication_date is not None:
            b.add(f"{format_date_harvard(f.publication_date)}.")

        self._add_available(b, f)
        return b

    def _format_newspaper(self, f) -> CitationBuilder:
        """
        Format newspaper article.

        Pattern: Author (Year) 'Article Title', Newspaper Title, Date, pp. Pages.
        Available at: URL (Accessed: Date)
        """
        b = CitationBuilder()
        b.add(format_authors_harvard(f.authors))
        b.add(_year(f.publication_date))
        b.add(f"'{join_title(f.title, f.subtitle)}',")

        if f.newspaper_title:
            b.add(em(f.newspaper_title), ",")

        pages = format_pages(f.page_range, "harvard")
        if f.publication_date is not None:
            date = format_date_harvard(f.publication_date)
            b.add(f"{date}, {pages}." if pages else f"{date}.")
        elif pages:
            b.add(f"{pages}.")
        b.terminate()

        if f.url:
            b.add("Available at: ", link(format_url(f.url)))
            b.add(format_access_date(f.access_date, "harvard"))
        return b

    # =========================================================================
    # MEDIA
    # =========================================================================

    def _format_video(self, f) -> CitationBuilder:
        """
        Format online video.

        Pattern: Author/Channel (Year) Title. [Video]. Platform. Available at: URL (Accessed: Date).
        """
        b = CitationBuilder()
        b.add(format_authors_harvard(f.authors) or f.channel_name)
        b.add(_year(f.upload_date or f.publication_date))
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.platform:
            b.add(f"[Video]. {f.platform}.")
        else:
            b.add("[Video].")

        self._add_available(b, f)
        return b

    def _format_image(self, f) -> CitationBuilder:
        """
        Format artwork or image.

        Pattern: Artist (Year) Title. [Medium]. Location: Museum. Available at: URL
        """
        b = CitationBuilder()
        b.add(format_authors_harvard(f.authors))
        b.add(_year(f.publication_date))
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.medium:
            b.add(f"[{f.medium}].")

        held = [part for part in (f.location, f.museum or f.collection) if part]
        if held:
            b.add(f"{': '.join(held)}.")

        if f.url:
            b.add("Available at: ", link(format_url(f.url)))
        return b

    def _format_film(self, f) -> CitationBuilder:
        """
        Format film.

        Pattern: Title (Year) Directed by Director. [Film]. Production Company. Available on: Service.
        """
        b = CitationBuilder()
        b.add(em(join_title(f.title, f.subtitle)))
        b.add(_year(f.publication_date))

        if f.directors:
            b.add(add_period(f"Directed by {format_authors_harvard(f.directors)}"))

        b.add("[Film].")

        if f.production_company:
            b.add(f"{f.production_company}.")

        if f.streaming_service:
            b.add(f"Available on: {f.streaming_service}.")
        return b

    def _format_tv_series(self, f) -> CitationBuilder:
        """
        Format TV series.

        Pattern: Title (Year-Year) Created by Creator. [TV Series]. Network.
        """
        b = CitationBuilder()
        b.add(em(join_title(f.title, f.subtitle)))

        if f.year_start:
            b.add(f"({f.year_start}-{f.year_end or 'present'})")
        else:
            b.add(_year(f.publication_date))

        if f.creators:
            b.add(add_period(f"Created by {format_authors_harvard(f.creators)}"))

        b.add("[TV Series].")

        platform = self._platform(f)
        if platform:
            b.add(f"{platform}.")
        return b

    def _format_tv_episode(self, f) -> CitationBuilder:
        """
        Format TV episode.

        Pattern: 'Episode Title' (Year) Series Title, Season X, Episode X. [TV Episode]. Directed by Director. Network.
        """
        b = CitationBuilder()
        b.add(f"'{join_title(f.episode_title or f.title, f.subtitle)}'")
        b.add(_year(f.air_date or f.publication_date))

        numbering = ""
        if f.season:
            numbering += f", Season {f.season}"
        if f.episode_number:
            numbering += f", Episode {f.episode_number}"

        if f.series_title:
            b.add(em(f.series_title), numbering, ".")
        elif numbering:
            b.add(f"{numbering[2:]}.")

        b.add("[TV Episode].")

        if f.directors:
            b.add(add_period(f"Directed by {format_authors_harvard(f.directors)}"))

        platform = self._platform(f)
        if platform:
            b.add(f"{platform}.")
        return b

    # =========================================================================
    # OTHER
    # =========================================================================

    def _format_miscellaneous(self, f) -> CitationBuilder:
        """
        Format any other source.

        Pattern: Author (Year) Title. [Description]. Publisher. Available at: URL (Accessed: Date).
        """
        b = CitationBuilder()
        b.add(format_authors_harvard(f.authors))
        b.add(_year(f.publication_date))
        b.add(em(join_title(f.title, f.subtitle)), ".")

        descriptor = f.description or f.format or f.medium
        if descriptor:
            b.add(f"[{descriptor}].")

        if f.publisher:
            b.add(f"{f.publisher}.")

        self._add_available(b, f)
        return b


_formatter = HarvardFormatter()


def format_harvard(fields: CitationFields) -> FormattedCitation:
    """Format a citation in Harvard style."""
    return _formatter.format(fields)
