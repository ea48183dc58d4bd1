"""Tests for the Chicago 17th edition formatter."""

from dataclasses import replace

from opencitation.core.models import (
    Author,
    BookFields,
    CitationDate,
    FilmFields,
    JournalFields,
    NewspaperFields,
    TVEpisodeFields,
    TVSeriesFields,
)
from opencitation.formatters import format_chicago


class TestChicagoBook:
    """Test Chicago book citations."""

    def test_basic_book(self, gatsby):
        assert format_chicago(gatsby).text == "Fitzgerald, F. Scott. The Great Gatsby. Scribner, 1925."

    def test_imprint_with_place(self, gatsby):
        result = format_chicago(replace(gatsby, publication_place="New York"))
        assert result.text.endswith("New York: Scribner, 1925.")

    def test_editors_lead_without_authors(self):
        book = BookFields(
            title="Collected Essays",
            editors=(Author(last_name="Jones", first_name="Mary"),),
            publisher="Penguin",
        )
        assert format_chicago(book).text == "Collected Essays. Edited by Jones, Mary. Penguin."

    def test_three_and_four_authors(self, gatsby):
        three = tuple(Author(last_name=name, first_name="A") for name in ("One", "Two", "Three"))
        four = three + (Author(last_name="Four", first_name="A"),)
        assert format_chicago(replace(gatsby, authors=three)).text.startswith("One, A, A Two, and A Three.")
        assert format_chicago(replace(gatsby, authors=four)).text.startswith("One, A, et al. The Great Gatsby.")

    def test_organization_author(self, gatsby, organization):
        result = format_chicago(replace(gatsby, authors=(organization,)))
        assert result.text.startswith("World Health Organization. The Great Gatsby.")


class TestChicagoJournal:
    """Test Chicago journal article citations."""

    def test_full_article(self, journal_article):
        assert format_chicago(journal_article).text == (
            'Smith, John and Jane Doe. "Test Article." Test Journal 42, no. 3 (2020): 123-145. '
            "https://doi.org/10.1000/xyz123"
        )

    def test_prefixed_doi_normalized(self, journal_article):
        result = format_chicago(replace(journal_article, doi="doi:10.1000/xyz123"))
        assert result.text.endswith("https://doi.org/10.1000/xyz123")

    def test_missing_journal_title(self):
        article = JournalFields(title="Loose Article", volume="5", publication_date=CitationDate(year=2001))
        assert format_chicago(article).text == '"Loose Article." 5 (2001).'


class TestChicagoOther:
    """Test Chicago web, news and media citations."""

    def test_website(self, website):
        assert format_chicago(website).text == (
            '"Test Page." Test Site. 2020. Accessed January 15, 2024. https://example.com'
        )

    def test_newspaper_without_date(self):
        article = NewspaperFields(title="Headline", newspaper_title="The Daily")
        assert format_chicago(article).text == '"Headline." The Daily.'

    def test_newspaper_with_section(self):
        article = NewspaperFields(
            title="Headline",
            newspaper_title="The Daily",
            section="Metro",
            publication_date=CitationDate(year=2023, month=1, day=5),
        )
        assert format_chicago(article).text == '"Headline." The Daily, January 5, 2023. Metro section.'

    def test_film(self):
        film = FilmFields(
            title="Alien",
            directors=(Author(last_name="Scott", first_name="Ridley"),),
            production_company="20th Century Fox",
            streaming_service="Hulu",
            publication_date=CitationDate(year=1979),
        )
        assert format_chicago(film).text == (
            "Alien. Directed by Scott, Ridley. 20th Century Fox, 1979. Hulu."
        )

    def test_tv_series(self):
        series = TVSeriesFields(
            title="Breaking Bad",
            creators=(Author(last_name="Gilligan", first_name="Vince"),),
            network="AMC",
            year_start=2008,
            year_end=2013,
        )
        assert format_chicago(series).text == "Breaking Bad. Created by Gilligan, Vince. AMC, 2008–2013."

    def test_tv_episode(self):
        episode = TVEpisodeFields(
            title="Pilot",
            series_title="Breaking Bad",
            season=1,
            episode_number=1,
            network="AMC",
            air_date=CitationDate(year=2008, month=1, day=20),
        )
        assert format_chicago(episode).text == (
            '"Pilot." Breaking Bad. Season 1, episode 1. AMC. Aired January 20, 2008.'
        )
