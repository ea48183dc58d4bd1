"""Tests for the APA 7th edition formatter."""

from dataclasses import replace

from opencitation.core.models import (
    Author,
    BookFields,
    CitationDate,
    CitationFields,
    FilmFields,
    JournalFields,
    TVEpisodeFields,
    TVSeriesFields,
    VideoFields,
)
from opencitation.formatters import format_apa


class TestAPABook:
    """Test APA book citations."""

    def test_basic_book(self, gatsby):
        """Test the standard book pattern with sentence-cased title."""
        result = format_apa(gatsby)
        assert result.text == "Fitzgerald, F. (1925). The great gatsby. Scribner."
        assert result.html == "Fitzgerald, F. (1925). <em>The great gatsby</em>. Scribner."

    def test_subtitle_and_edition(self, gatsby):
        """Test subtitle and edition inside the italic title."""
        book = replace(gatsby, title="Test Book", subtitle="A Subtitle", edition="2nd ed.")
        result = format_apa(book)
        assert "Test book: A subtitle (2nd ed.)." in result.text

    def test_doi_link(self, gatsby):
        """Test DOI rendered as resolver URL and anchor."""
        result = format_apa(replace(gatsby, doi="10.1000/test"))
        assert result.text.endswith("https://doi.org/10.1000/test")
        assert '<a href="https://doi.org/10.1000/test">https://doi.org/10.1000/test</a>' in result.html

    def test_doi_preferred_over_url(self, gatsby):
        result = format_apa(replace(gatsby, doi="10.1000/test", url="https://example.com"))
        assert "example.com" not in result.text

    def test_no_date(self, gatsby):
        result = format_apa(replace(gatsby, publication_date=None))
        assert "(n.d.)." in result.text

    def test_two_authors_ampersand(self, gatsby):
        authors = (Author(last_name="Smith", first_name="John"), Author(last_name="Doe", first_name="Jane"))
        result = format_apa(replace(gatsby, authors=authors))
        assert result.text.startswith("Smith, J. & Doe, J. (1925).")

    def test_twenty_one_authors(self, gatsby):
        authors = tuple(Author(last_name=f"Name{i}", first_name="A") for i in range(1, 22))
        result = format_apa(replace(gatsby, authors=authors))
        assert "Name19, A., ... Name21, A. (1925)." in result.text

    def test_organization_author(self, gatsby, organization):
        result = format_apa(replace(gatsby, authors=(organization,)))
        assert result.text.startswith("World Health Organization. (1925).")
        assert "Ignored" not in result.text


class TestAPAJournal:
    """Test APA journal article citations."""

    def test_full_article(self, journal_article):
        result = format_apa(journal_article)
        assert result.text == (
            "Smith, J. & Doe, J. (2020, March 15). Test article. "
            "Test Journal, 42(3), 123-145. https://doi.org/10.1000/xyz123"
        )
        assert "<em>Test Journal</em>, <em>42</em>(3), 123-145." in result.html

    def test_article_number(self):
        article = JournalFields(title="Test", journal_title="J", volume="1", article_number="e12345")
        assert "Article e12345" in format_apa(article).text

    def test_missing_journal_title(self):
        """Test degraded output when the container is missing."""
        result = format_apa(JournalFields(title="Orphan Article"))
        assert result.text == "(n.d.). Orphan article."


class TestAPAWeb:
    """Test APA web source citations."""

    def test_site_name_replaces_missing_author(self, website):
        result = format_apa(website)
        assert result.text == "Test Site. (2020). Test Page. https://example.com"
        assert '<a href="https://example.com">' in result.html

    def test_site_name_after_title_with_author(self, website):
        page = replace(website, authors=(Author(last_name="Lee", first_name="Ang"),))
        result = format_apa(page)
        assert result.text.startswith("Lee, A. (2020). Test Page. Test Site.")


class TestAPAMedia:
    """Test APA film, TV and video citations."""

    def test_video_channel_as_author(self):
        video = VideoFields(
            title="How it works",
            channel_name="Science Channel",
            platform="YouTube",
            url="https://youtube.com/watch?v=1",
            upload_date=CitationDate(year=2020, month=10, day=2),
        )
        result = format_apa(video)
        assert result.text == (
            "Science Channel. (2020, October 2). How it works [Video]. YouTube. "
            "https://youtube.com/watch?v=1"
        )

    def test_film_director_role(self):
        film = FilmFields(
            title="Alien",
            directors=(Author(last_name="Scott", first_name="Ridley"),),
            production_company="20th Century Fox",
            publication_date=CitationDate(year=1979),
        )
        assert format_apa(film).text == "Scott, R. (Director). (1979). Alien [Film]. 20th Century Fox."

    def test_tv_series_years(self):
        series = TVSeriesFields(
            title="Breaking Bad",
            creators=(Author(last_name="Gilligan", first_name="Vince"),),
            network="AMC",
            year_start=2008,
            year_end=2013,
        )
        assert format_apa(series).text == (
            "Gilligan, V. (Creator). (2008–2013). Breaking Bad [TV series]. AMC."
        )

    def test_tv_series_executive_producers(self):
        series = TVSeriesFields(
            title="Show",
            executive_producers=(Author(last_name="A", first_name="B"), Author(last_name="C", first_name="D")),
            year_start=2020,
        )
        result = format_apa(series).text
        assert "(Executive Producers)" in result
        assert "(2020–present)." in result

    def test_tv_episode(self):
        gilligan = Author(last_name="Gilligan", first_name="Vince")
        episode = TVEpisodeFields(
            title="Pilot",
            series_title="Breaking Bad",
            season=1,
            episode_number=1,
            writers=(gilligan,),
            directors=(gilligan,),
            network="AMC",
            air_date=CitationDate(year=2008, month=1, day=20),
        )
        assert format_apa(episode).text == (
            "Gilligan, V. (Writer), & Gilligan, V. (Director). (2008, January 20). "
            "Pilot (Season 1, Episode 1) [TV series episode]. In Breaking Bad. AMC."
        )


class TestAPAFallbacks:
    """Test unknown source types."""

    def test_unknown_source_type(self):
        result = format_apa(CitationFields(title="Something", source_type="bogus"))
        assert result.text == ""
        assert result.html == ""

    def test_base_record_with_known_tag(self):
        """Test a plain fields record tagged as a book still renders."""
        record = CitationFields(title="Plain Record", source_type="book", publisher="Pub")
        assert format_apa(record).text == "(n.d.). Plain record. Pub."
