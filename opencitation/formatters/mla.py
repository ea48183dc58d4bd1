"""
opencitation/formatters/mla.py

MLA (9th edition) citation formatter.

MLA 9 uses a "core elements" approach:
Author. "Title of Source." Title of Container, Other contributors, Version,
Number, Publisher, Publication Date, Location.
"""

from ..core.models import CitationFields, CitationStyle, FormattedCitation
from .base import BaseFormatter, CitationBuilder, em, link
from .utils import (
    add_period,
    format_access_date,
    format_authors_mla,
    format_date_mla,
    format_doi,
    format_pages,
    format_url,
    join_title,
)


class MLAFormatter(BaseFormatter):
    """
    MLA 9th Edition formatter.

    Key features:
    - First author inverted (Last, First), others in natural order
    - Three or more authors collapse to "et al."
    - Contained works in quotes, containers italicized
    - Core elements separated by commas, closed with a period
    """

    style = CitationStyle.MLA

    @staticmethod
    def _add_authors(b: CitationBuilder, f) -> str:
        authors = format_authors_mla(f.authors)
        if authors:
            b.add(add_period(authors))
        return authors

    @staticmethod
    def _add_year(b: CitationBuilder, date) -> None:
        """Close with the publication year, or end the previous element."""
        if date is not None and date.year:
            b.add(f"{date.year}.")
        else:
            b.terminate()

    @staticmethod
    def _add_url(b: CitationBuilder, url) -> None:
        """Close with the URL as the location, or end the previous element."""
        if url:
            b.add(link(format_url(url)), ".")
        else:
            b.terminate()

    @staticmethod
    def _platform(f) -> str:
        return f.streaming_service or f.network or ""

    # =========================================================================
    # BOOK
    # =========================================================================

    def _format_book(self, f) -> CitationBuilder:
        """
        Format book.

        Pattern: Author. Title. Edited by Editor, Edition, Publisher, Year.
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.editors:
            b.add(f"Edited by {format_authors_mla(f.editors)},")

        if f.edition:
            b.add(f"{f.edition},")

        if f.publisher:
            b.add(f"{f.publisher},")

        self._add_year(b, f.publication_date)
        return b

    # =========================================================================
    # JOURNAL
    # =========================================================================

    def _format_journal(self, f) -> CitationBuilder:
        """
        Format journal article.

        Pattern: Author. "Article Title." Journal Title, vol. X, no. X, Year, pp. X-X. DOI
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(f'"{join_title(f.title, f.subtitle)}."')

        if f.journal_title:
            b.add(em(f.journal_title), ",")

        if f.volume:
            b.add(f"vol. {f.volume},")
        if f.issue:
            b.add(f"no. {f.issue},")

        if f.publication_date and f.publication_date.year:
            b.add(f"{f.publication_date.year},")

        if f.page_range:
            b.add(f"{format_pages(f.page_range, 'mla')}.")
        else:
            b.terminate()

        if f.doi:
            b.add(link(format_doi(f.doi)))
        return b

    # =========================================================================
    # WEB
    # =========================================================================

    def _format_website(self, f) -> CitationBuilder:
        """
        Format web page.

        Pattern: Author. "Page Title." Website Name, Day Month Year, URL. Accessed Day Month Year.
        """
        b = CitationBuilder()
        authors = self._add_authors(b, f)
        b.add(f'"{join_title(f.title, f.subtitle)}."')

        # Site name only when it is not already the author
        if f.site_name and f.site_name != authors:
            b.add(em(f.site_name), ",")

        date = format_date_mla(f.publication_date)
        if date:
            b.add(f"{date},")

        self._add_url(b, f.url)

        # Access date is optional in MLA 9
        b.add(format_access_date(f.access_date, "mla"))
        return b

    def _format_blog(self, f) -> CitationBuilder:
        """
        Format blog post.

        Pattern: Author. "Post Title." Blog Name, Day Month Year, URL.
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(f'"{join_title(f.title, f.subtitle)}."')

        if f.blog_name:
            b.add(em(f.blog_name), ",")

        date = format_date_mla(f.publication_date)
        if date:
            b.add(f"{date},")

        self._add_url(b, f.url)
        return b

    def _format_newspaper(self, f) -> CitationBuilder:
        """
        Format newspaper article.

        Pattern: Author. "Article Title." Newspaper Title, Day Month Year, pp. X-X.
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(f'"{join_title(f.title, f.subtitle)}."')

        if f.newspaper_title:
            b.add(em(f.newspaper_title), ",")

        date = format_date_mla(f.publication_date)
        if date:
            b.add(f"{date},")

        # Print location first, then web location
        if f.page_range:
            b.add(f"{format_pages(f.page_range, 'mla')}.")
        else:
            self._add_url(b, f.url)
        return b

    # =========================================================================
    # MEDIA
    # =========================================================================

    def _format_video(self, f) -> CitationBuilder:
        """
        Format online video. The uploader replaces the author element.

        Pattern: "Video Title." Platform, uploaded by Channel Name, Day Month Year, URL.
        """
        b = CitationBuilder()
        b.add(f'"{join_title(f.title, f.subtitle)}."')

        if f.platform:
            b.add(em(f.platform), ",")

        uploader = f.channel_name or format_authors_mla(f.authors)
        if uploader:
            b.add(f"uploaded by {uploader},")

        date = format_date_mla(f.upload_date or f.publication_date)
        if date:
            b.add(f"{date},")

        self._add_url(b, f.url)
        return b

    def _format_image(self, f) -> CitationBuilder:
        """
        Format artwork or image.

        Pattern: Artist. Title. Year. Medium. Museum, Location. URL.
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.publication_date and f.publication_date.year:
            b.add(f"{f.publication_date.year}.")

        if f.medium:
            b.add(f"{f.medium}.")

        holder = f.museum or f.collection
        if holder:
            if f.location:
                holder += f", {f.location}"
            b.add(f"{holder}.")

        if f.url:
            b.add(link(format_url(f.url)), ".")
        return b

    def _format_film(self, f) -> CitationBuilder:
        """
        Format film.

        Pattern: Title. Directed by Director Name, Production Company, Year.
        """
        b = CitationBuilder()
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.directors:
            b.add(f"Directed by {format_authors_mla(f.directors)},")

        if f.production_company:
            b.add(f"{f.production_company},")

        self._add_year(b, f.publication_date)
        return b

    def _format_tv_series(self, f) -> CitationBuilder:
        """
        Format TV series.

        Pattern: Title. Created by Creator Name, Network, Years.
        """
        b = CitationBuilder()
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.creators:
            b.add(f"Created by {format_authors_mla(f.creators)},")

        platform = self._platform(f)
        if platform:
            b.add(f"{platform},")

        if f.year_start:
            b.add(f"{f.year_start}–{f.year_end or ''}.")
        else:
            b.terminate()
        return b

    def _format_tv_episode(self, f) -> CitationBuilder:
        """
        Format TV episode.

        Pattern: "Episode Title." Series Title, written by Writer, directed by Director,
        season X, episode X, Network, Day Month Year.
        """
        b = CitationBuilder()
        b.add(f'"{join_title(f.episode_title or f.title, f.subtitle)}."')

        if f.series_title:
            b.add(em(f.series_title), ",")

        if f.writers:
            b.add(f"written by {format_authors_mla(f.writers)},")

        if f.directors:
            b.add(f"directed by {format_authors_mla(f.directors)},")

        if f.season:
            b.add(f"season {f.season},")
        if f.episode_number:
            b.add(f"episode {f.episode_number},")

        platform = self._platform(f)
        if platform:
            b.add(f"{platform},")

        date = format_date_mla(f.air_date or f.publication_date)
        if date:
            b.add(f"{date}.")
        else:
            b.terminate()
        return b

    # =========================================================================
    # OTHER
    # =========================================================================

    def _format_miscellaneous(self, f) -> CitationBuilder:
        """
        Format any other source.

        Pattern: Author. Title. Description. Publisher, Year. URL.
        """
        b = CitationBuilder()
        self._add_authors(b, f)
        b.add(em(join_title(f.title, f.subtitle)), ".")

        descriptor = f.description or f.format or f.medium
        if descriptor:
            b.add(f"{descriptor}.")

        if f.publisher:
            b.add(f"{f.publisher},")

        self._add_year(b, f.publication_date)

        if f.url:
            b.add(link(format_url(f.url)), ".")
        return b


_formatter = MLAFormatter()


def format_mla(fields: CitationFields) -> FormattedCitation:
    """Format a citation in MLA 9th style."""
    return _formatter.format(fields)
