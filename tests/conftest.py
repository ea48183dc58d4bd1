"""Shared fixtures for the OpenCitation tests."""

from bs4 import BeautifulSoup
import pytest

from opencitation.core.models import (
    Author,
    BookFields,
    CitationDate,
    JournalFields,
    WebsiteFields,
    VideoFields,
    FilmFields,
    TVSeriesFields,
    TVEpisodeFields,
    NewspaperFields,
    BlogFields,
    ImageFields,
    MiscellaneousFields,
)

ENV_VARS = (
    "OPENCITATION_DEFAULT_STYLE",
    "OPENCITATION_OUTPUT_FORMAT",
    "OPENCITATION_LOG_LEVEL",
    "OPENCITATION_OUTPUT_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without OPENCITATION_* variables.

    Setting before deleting makes monkeypatch remove anything a test
    (or load_dotenv) adds to the environment afterwards.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def _strip_html(html: str) -> str:
    return BeautifulSoup(html, "html.parser").get_text()


@pytest.fixture
def strip_html():
    """Visible text of an HTML fragment, entities unescaped."""
    return _strip_html


@pytest.fixture
def gatsby():
    return BookFields(
        title="The Great Gatsby",
        authors=(Author(last_name="Fitzgerald", first_name="F. Scott"),),
        publisher="Scribner",
        publication_date=CitationDate(year=1925),
    )


@pytest.fixture
def journal_article():
    return JournalFields(
        title="Test Article",
        authors=(
            Author(last_name="Smith", first_name="John"),
            Author(last_name="Doe", first_name="Jane"),
        ),
        journal_title="Test Journal",
        volume="42",
        issue="3",
        page_range="123-145",
        doi="10.1000/xyz123",
        publication_date=CitationDate(year=2020, month=3, day=15),
    )


@pytest.fixture
def website():
    return WebsiteFields(
        title="Test Page",
        site_name="Test Site",
        url="https://example.com/",
        publication_date=CitationDate(year=2020),
        access_date=CitationDate(year=2024, month=1, day=15),
    )


@pytest.fixture
def organization():
    return Author(last_name="World Health Organization", first_name="Ignored", is_organization=True)


@pytest.fixture
def all_source_types():
    """One reasonably filled record per source type."""
    smith = Author(last_name="Smith", first_name="John", middle_name="Paul")
    lee = Author(last_name="Lee", first_name="Ang")
    return [
        BookFields(
            title="Deep learning: A primer", authors=(smith,), publisher="MIT Press",
            publication_place="Cambridge", edition="2nd ed.",
            publication_date=CitationDate(year=2016), doi="10.1000/book",
        ),
        JournalFields(
            title="Attention & memory", authors=(smith, lee), journal_title="Cognition",
            volume="12", issue="4", page_range="1-20",
            publication_date=CitationDate(year=2019, month=5),
        ),
        WebsiteFields(
            title="About <us>", authors=(lee,), site_name="Example", url="https://example.com/about/",
            publication_date=CitationDate(year=2021, month=2, day=3),
            access_date=CitationDate(year=2024, month=6, day=1),
        ),
        BlogFields(
            title="Notes on \"parsing\"", authors=(smith,), blog_name="Dev Log",
            url="https://blog.example.com/parsing", publication_date=CitationDate(year=2022, month=7, day=9),
        ),
        NewspaperFields(
            title="City budget passes", authors=(lee,), newspaper_title="The Daily",
            page_range="A1-A2", section="Metro", publication_date=CitationDate(year=2023, month=1, day=5),
        ),
        VideoFields(
            title="How it's made", channel_name="Science Channel", platform="YouTube",
            url="https://youtube.com/watch?v=1", upload_date=CitationDate(year=2020, month=10, day=2),
        ),
        ImageFields(
            title="Starry Night", authors=(Author(last_name="van Gogh", first_name="Vincent"),),
            medium="Oil on canvas", museum="Museum of Modern Art", location="New York",
            publication_date=CitationDate(year=1889),
        ),
        FilmFields(
            title="Alien", directors=(Author(last_name="Scott", first_name="Ridley"),),
            production_company="20th Century Fox", streaming_service="Hulu",
            publication_date=CitationDate(year=1979),
        ),
        TVSeriesFields(
            title="Breaking Bad", creators=(Author(last_name="Gilligan", first_name="Vince"),),
            network="AMC", year_start=2008, year_end=2013,
        ),
        TVEpisodeFields(
            title="Pilot", series_title="Breaking Bad", season=1, episode_number=1,
            writers=(Author(last_name="Gilligan", first_name="Vince"),),
            directors=(Author(last_name="Gilligan", first_name="Vince"),),
            network="AMC", air_date=CitationDate(year=2008, month=1, day=20),
        ),
        MiscellaneousFields(
            title="Field recordings", authors=(smith,), description="Audio collection",
            publisher="Archive Press", publication_date=CitationDate(year=2001),
            url="https://archive.example.org/rec",
        ),
    ]
