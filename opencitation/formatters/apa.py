"""
opencitation/formatters/apa.py

APA (7th edition) citation formatter.
Standard for social sciences and psychology.
"""

from ..core.models import CitationFields, CitationStyle, FormattedCitation
from .base import BaseFormatter, CitationBuilder, em, link, sep
from .utils import (
    add_period,
    format_authors_apa,
    format_date_apa,
    format_doi,
    format_url,
    join_title,
    to_sentence_case,
)


class APAFormatter(BaseFormatter):
    """
    APA 7th Edition formatter.

    Key features:
    - Author names: Last, F. M. format
    - Date in parentheses after author, (n.d.) when undated
    - Book and article titles in sentence case
    - Medium descriptors in brackets: [Video], [Film], [TV series]
    - DOI preferred over URL
    """

    style = CitationStyle.APA

    @staticmethod
    def _add_link(b: CitationBuilder, f) -> None:
        """Trailing identifier: DOI if present, otherwise URL."""
        if f.doi:
            b.add(link(format_doi(f.doi)))
        elif f.url:
            b.add(link(format_url(f.url)))

    @staticmethod
    def _platform(f) -> str:
        return f.streaming_service or f.network or ""

    # =========================================================================
    # BOOK
    # =========================================================================

    def _format_book(self, f) -> CitationBuilder:
        """
        Format book.

        Pattern: Author, A. A. (Year). Title of work: Subtitle (edition). Publisher. DOI
        """
        b = CitationBuilder()
        b.add(add_period(format_authors_apa(f.authors)))
        b.add(format_date_apa(f.publication_date), ".")

        title = to_sentence_case(f.title)
        if f.subtitle:
            title += f": {to_sentence_case(f.subtitle)}"
        if f.edition:
            title += f" ({f.edition})"
        b.add(em(title), ".")

        if f.publisher:
            b.add(f"{f.publisher}.")

        self._add_link(b, f)
        return b

    # =========================================================================
    # JOURNAL
    # =========================================================================

    def _format_journal(self, f) -> CitationBuilder:
        """
        Format journal article.

        Pattern: Author, A. A. (Year). Title of article. Journal, volume(issue), pages. DOI
        """
        b = CitationBuilder()
        b.add(add_period(format_authors_apa(f.authors)))
        b.add(format_date_apa(f.publication_date), ".")

        article_title = to_sentence_case(f.title)
        if f.subtitle:
            article_title += f": {to_sentence_case(f.subtitle)}"
        b.add(f"{article_title}.")

        # Journal name and volume italicized, issue and pages roman
        journal = [em(f.journal_title)] if f.journal_title else []
        if f.volume:
            journal += [sep(journal, ", "), em(f.volume)]
            if f.issue:
                journal.append(f"({f.issue})")
        if f.page_range:
            journal += [sep(journal, ", "), f.page_range]
        elif f.article_number:
            journal += [sep(journal, ", "), f"Article {f.article_number}"]
        if journal:
            b.add(*journal, ".")

        # Journal articles take only a DOI
        if f.doi:
            b.add(link(format_doi(f.doi)))
        return b

    # =========================================================================
    # WEB
    # =========================================================================

    def _format_website(self, f) -> CitationBuilder:
        """
        Format web page. The site name stands in for a missing author.

        Pattern: Author, A. A. (Year, Month Day). Title of page. Site Name. URL
        """
        b = CitationBuilder()
        authors = format_authors_apa(f.authors)
        b.add(add_period(authors or f.site_name))
        b.add(format_date_apa(f.publication_date), ".")
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.site_name and authors:
            b.add(f"{f.site_name}.")

        if f.url:
            b.add(link(format_url(f.url)))
        return b

    def _format_blog(self, f) -> CitationBuilder:
        """
        Format blog post.

        Pattern: Author, A. A. (Year, Month Day). Title of post. Blog Name. URL
        """
        b = CitationBuilder()
        b.add(add_period(format_authors_apa(f.authors)))
        b.add(format_date_apa(f.publication_date), ".")
        b.add(em(join_title(f.title, f.subtitle)), ".")

        if f.blog_name:
            b.add(f"{f.blog_name}.")

        if f.url:
            b.add(link(format_url(f.url)))
        return b

    def _format_newspaper(self, f) -> CitationBuilder:
        """
        Format newspaper article.

        Pattern: Author, A. A. (Year, Month Day). Title of article. Newspaper, pages. URL
        """
        b = CitationBuilder()
        b.add(add_period(format_authors_apa(f.authors)))
        b.add(format_date_apa(f.publication_date), ".")
        b.add(f"{join_title(f.title, f.subtitle)}.")

        newspaper = [em(f.newspaper_title)] if f.newspaper_title else []
        if f.page_range:
            newspaper += [sep(newspaper, ", "), f.page_range]
        if newspaper:
            b.add(*newspaper, ".")

        if f.url:
            b.add(link(format_url(f.url)))
        return b

    # =========================================================================
    # MEDIA
    # =========================================================================

    def _format_video(self, f) -> CitationBuilder:
        """
        Format online video.

        Pattern: Author, A. A. [Channel]. (Year, Month Day). Title of video [Video]. Platform. URL
        """
        b = CitationBuilder()
        authors = format_authors_apa(f.authors)
        if authors:
            if f.channel_name and authors != f.channel_name:
                authors += f" [{f.channel_name}]"
            b.add(add_period(authors))
        else:
            b.add(add_period(f.channel_name))

        b.add(format_date_apa(f.upload_date or f.publication_date), ".")
        b.add(em(join_title(f.title, f.subtitle)), " [Video].")

        if f.platform:
            b.add(f"{f.platform}.")

        if f.url:
            b.add(link(format_url(f.url)))
        return b

    def _format_image(self, f) -> CitationBuilder:
        """
        Format artwork or image.

        Pattern: Artist, A. A. (Year). Title of work [Medium]. Museum, Location. URL
        """
        b = CitationBuilder()
        b.add(add_period(format_authors_apa(f.authors)))
        b.add(format_date_apa(f.publication_date), ".")

        medium = f.medium or f.image_type or "Image"
        b.add(em(join_title(f.title, f.subtitle)), f" [{medium}].")

        holder = f.museum or f.collection
        if holder:
            if f.location:
                holder += f", {f.location}"
            b.add(f"{holder}.")

        if f.url:
            b.add(link(format_url(f.url)))
        return b

    def _format_film(self, f) -> CitationBuilder:
        """
        Format film.

        Pattern: Director, D. D. (Director). (Year). Title of film [Film]. Production Company.
        """
        b = CitationBuilder()
        directors = format_authors_apa(f.directors)
        if directors:
            plural = "s" if len(f.directors) > 1 else ""
            b.add(f"{directors} (Director{plural}).")

        b.add(format_date_apa(f.publication_date), ".")
        b.add(em(join_title(f.title, f.subtitle)), " [Film].")

        if f.production_company:
            b.add(f"{f.production_company}.")
        return b

    def _format_tv_series(self, f) -> CitationBuilder:
        """
        Format TV series.

        Pattern: Creator, C. C. (Creator). (Years). Title of series [TV series]. Network.
        """
        b = CitationBuilder()
        credited = f.creators or f.executive_producers
        creators = format_authors_apa(credited)
        if creators:
            role = "Creator" if f.creators else "Executive Producer"
            plural = "s" if len(credited) > 1 else ""
            b.add(f"{creators} ({role}{plural}).")

        if f.year_start:
            end = f.year_end or "present"
            b.add(f"({f.year_start}–{end}).")
        else:
            b.add(format_date_apa(f.publication_date), ".")

        b.add(em(join_title(f.title, f.subtitle)), " [TV series].")

        platform = self._platform(f)
        if platform:
            b.add(f"{platform}.")
        return b

    def _format_tv_episode(self, f) -> CitationBuilder:
        """
        Format TV episode.

        Pattern: Writer, W. W. (Writer), & Director, D. D. (Director). (Year).
        Title of episode (Season X, Episode X) [TV series episode]. In Series title. Network.
        """
        b = CitationBuilder()
        writers = format_authors_apa(f.writers)
        directors = format_authors_apa(f.directors)

        if writers and directors:
            b.add(f"{writers} (Writer), & {directors} (Director).")
        elif writers:
            b.add(f"{writers} (Writer).")
        elif directors:
            b.add(f"{directors} (Director).")

        b.add(format_date_apa(f.air_date or f.publication_date), ".")

        episode = f.episode_title or f.title
        if f.season and f.episode_number:
            episode += f" (Season {f.season}, Episode {f.episode_number})"
        elif f.season:
            episode += f" (Season {f.season})"
        elif f.episode_number:
            episode += f" (Episode {f.episode_number})"
        b.add(f"{episode} [TV series episode].")

        if f.series_title:
            b.add("In ", em(f.series_title), ".")

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

        Pattern: Author, A. A. (Year). Title [Description]. Publisher. URL
        """
        b = CitationBuilder()
        b.add(add_period(format_authors_apa(f.authors)))
        b.add(format_date_apa(f.publication_date), ".")

        descriptor = f.medium or f.format or f.description
        b.add(
            em(join_title(f.title, f.subtitle)),
            f" [{descriptor}]" if descriptor else "",
            ".",
        )

        if f.publisher:
            b.add(f"{f.publisher}.")

        if f.url:
            b.add(link(format_url(f.url)))
        return b


_formatter = APAFormatter()


def format_apa(fields: CitationFields) -> FormattedCitation:
    """Format a citation in APA 7th style."""
    return _formatter.format(fields)
