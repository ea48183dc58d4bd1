"""
opencitation/formatters/chicago.py

Chicago Manual of Style (17th edition) formatter, notes-bibliography system.
Common in history, literature and the arts.
"""

from typing import List

from ..core.models import CitationFields, CitationStyle, FormattedCitation
from .base import BaseFormatter, CitationBuilder, em, link
from .utils import (
    add_period,
    format_access_date,
    format_authors_chicago,
    format_date_chicago,
    format_doi,
    format_url,
    join_title,
)


class ChicagoFormatter(BaseFormatter):
    """
    Chicago 17th Edition bibliography formatter.

    Key features:
    - Full names, first author inverted
    - Elements separated by periods
    - Publication facts grouped as "Place: Publisher, Year."
    """

    style = CitationStyle.CHICAGO

    @staticmethod
    def _add_authors(b: CitationBuilder, f) -> str:
        authors = format_authors_chicago(f.authors)
        if authors:
            b.add(add_period(authors))
        return authors

    @staticmethod
    def _add_url(b: CitationBuilder, url) -> None:
        if url:
            b.add(link(format_url(url)))

    @staticmethod
    def _year(f) -> str:
        if f.publication_date and f.publication_date.year:
            return str(f.publication_date.year)
        return ""

    @staticmethod
    def _add_group(b: CitationBuilder, parts: List[str]) -> None:
        """Comma-joined group closed with a period."""
        parts = [p for p in parts if p]
        if parts:
            b.add(f"{', '.join(parts)}.")

    # =========================================================================
    # BOOK
    # =========================================================================

    def _format_book(self, f) -> CitationBuilder:
        """
        Format book.

        Pattern: Last, First. Title: Subtitle. Edition. Place: Publisher, Year.
        """
        b = CitationBuilder()
        authors = self._add_authors(b, f)
        b.add(em(join_title(f.title, f.subtitle)), ".")

        # Editors lead only for edited volumes without authors
        if f.editors and not authors:
            b.add(add_period(f"Edited by {format_authors_chicago(f.editors)}"))

        if f.edition:
            b.add(f"{f.edition}.")

        imprint = f.publication_place or ""
        if f.publisher:
            imprint += f": {f.publisher}" if imprint else f.publisher
        year = self._year(f)
        if year:
            imprint += f", {year}" if imprint else year
        if imprint:
            b.add(f"{imprint}.")
        return b

    # =========================================================================
    # JOURNAL
    # =========================================================================

    def _format_journal(self, f) -> CitationBuilder:
        """
        Format journal article.

        Pattern: Last, First. "Article Title." Journal Title Volume, no. Issue (Year): Pages. DOI
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(f'"{join_title(f.title, f.subtitle)}."')

        locator = ""
        if f.volume:
            locator += f" {f.volume}"
        if f.issue:
            locator += f", no. {f.issue}"
        year = self._year(f)
        if year:
            locator += f" ({year})"
        if f.page_range:
            locator += f": {f.page_range}"

        if f.journal_title:
            b.add(em(f.journal_title), locator, ".")
        elif locator:
            b.add(f"{locator.lstrip(', :')}.")

        if f.doi:
            b.add(link(format_doi(f.doi)))
        return b

    # =========================================================================
    # WEB
    # =========================================================================

    def _format_website(self, f) -> CitationBuilder:
        """
        Format web page.

        Pattern: Last, First. "Page Title." Site Name. Month Day, Year. Accessed Month Day, Year. URL
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(f'"{join_title(f.title, f.subtitle)}."')

        if f.site_name:
            b.add(em(f.site_name), ".")

        date = format_date_chicago(f.publication_date)
        if date:
            b.add(f"{date}.")

        b.add(format_access_date(f.access_date, "chicago"))
        self._add_url(b, f.url)
        return b

    def _format_blog(self, f) -> CitationBuilder:
        """
        Format blog post.

        Pattern: Last, First. "Post Title." Blog Name (blog). Month Day, Year. URL
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(f'"{join_title(f.title, f.subtitle)}."')

        if f.blog_name:
            b.add(em(f.blog_name), " (blog).")

        date = format_date_chicago(f.publication_date)
        if date:
            b.add(f"{date}.")

        self._add_url(b, f.url)
        return b

    def _format_newspaper(self, f) -> CitationBuilder:
        """
        Format newspaper article.

        Pattern: Last, First. "Article Title." Newspaper Title, Month Day, Year. Section. URL
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(f'"{join_title(f.title, f.subtitle)}."')

        if f.newspaper_title:
            b.add(em(f.newspaper_title), ",")

        date = format_date_chicago(f.publication_date)
        if date:
            b.add(f"{date}.")
        else:
            b.terminate()

        if f.section:
            b.add(f"{f.section} section.")

        self._add_url(b, f.url)
        return b

    # =========================================================================
    # MEDIA
    # =========================================================================

    def _format_video(self, f) -> CitationBuilder:
        """
        Format online video.

        Pattern: Last, First (or Channel). "Video Title." Platform video, Duration. Month Day, Year. URL
        """
        b = CitationBuilder()
        if not self._add_authors(b, f) and f.channel_name:
            b.add(f"{f.channel_name}.")

        b.add(f'"{join_title(f.title, f.subtitle)}."')

        if f.platform:
            platform = f"{f.platform} video"
            if f.duration:
                platform += f", {f.duration}"
            b.add(f"{platform}.")

        date = format_date_chicago(f.upload_date or f.publication_date)
        if date:
            b.add(f"{date}.")

        self._add_url(b, f.url)
        return b

    def _format_image(self, f) -> CitationBuilder:
        """
        Format artwork or image.

        Pattern: Last, First. Title. Year. Medium, Dimensions. Museum, Location. URL
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(em(join_title(f.title, f.subtitle)), ".")

        year = self._year(f)
        if year:
            b.add(f"{year}.")

        if f.medium:
            self._add_group(b, [f.medium, f.dimensions])

        holder = f.museum or f.collection
        if holder:
            self._add_group(b, [holder, f.location])

        self._add_url(b, f.url)
        return b

    def _format_film(self, f) -> CitationBuilder:
        """
        Format film.

        Pattern: Title. Directed by Director. Production Company, Year. Streaming Service.
        """
        b = CitationBuilder()
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.directors:
            b.add(add_period(f"Directed by {format_authors_chicago(f.directors)}"))

        self._add_group(b, [f.production_company, self._year(f)])

        if f.streaming_service:
            b.add(f"{f.streaming_service}.")
        return b

    def _format_tv_series(self, f) -> CitationBuilder:
        """
        Format TV series.

        Pattern: Title. Created by Creator. Network, Years.
        """
        b = CitationBuilder()
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.creators:
            b.add(add_period(f"Created by {format_authors_chicago(f.creators)}"))

        years = f"{f.year_start}–{f.year_end or ''}" if f.year_start else ""
        self._add_group(b, [f.streaming_service or f.network, years])
        return b

    def _format_tv_episode(self, f) -> CitationBuilder:
        """
        Format TV episode.

        Pattern: "Episode Title." Series Title. Season X, episode X. Directed by Director.
        Written by Writer. Network. Aired Month Day, Year.
        """
        b = CitationBuilder()
        b.add(f'"{join_title(f.episode_title or f.title, f.subtitle)}."')

        if f.series_title:
            b.add(em(f.series_title), ".")

        self._add_group(b, [
            f"Season {f.season}" if f.season else "",
            f"episode {f.episode_number}" if f.episode_number else "",
        ])

        if f.directors:
            b.add(add_period(f"Directed by {format_authors_chicago(f.directors)}"))

        if f.writers:
            b.add(add_period(f"Written by {format_authors_chicago(f.writers)}"))

        platform = f.streaming_service or f.network
        if platform:
            b.add(f"{platform}.")

        date = format_date_chicago(f.air_date or f.publication_date)
        if date:
            b.add(f"Aired {date}.")
        return b

    # =========================================================================
    # OTHER
    # =========================================================================

    def _format_miscellaneous(self, f) -> CitationBuilder:
        """
        Format any other source.

        Pattern: Author. Title. Description. Publisher, Year. URL
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(em(join_title(f.title, f.subtitle)), ".")

        descriptor = f.description or f.format or f.medium
        if descriptor:
            b.add(f"{descriptor}.")

        self._add_group(b, [f.publisher, self._year(f)])
        self._add_url(b, f.url)
        return b


_formatter = ChicagoFormatter()


def format_chicago(fields: CitationFields) -> FormattedCitation:
    """Format a citation in Chicago 17th style."""
    return _formatter.format(fields)
