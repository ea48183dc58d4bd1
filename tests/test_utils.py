"""Tests for the shared formatting utilities."""

import pytest

from opencitation.core.models import Author, CitationDate
from opencitation.formatters.utils import (
    capitalize_first,
    escape_html,
    format_access_date,
    format_author_apa,
    format_author_chicago,
    format_author_harvard,
    format_author_mla,
    format_authors_apa,
    format_authors_chicago,
    format_authors_harvard,
    format_authors_mla,
    format_date_apa,
    format_date_chicago,
    format_date_harvard,
    format_date_mla,
    format_doi,
    format_pages,
    format_url,
    to_sentence_case,
)


def _people(count):
    return [Author(last_name=f"Author{i}", first_name="Alex") for i in range(1, count + 1)]


class TestAuthorNames:
    """Test single author rendering in each style."""

    def test_apa_initials(self):
        author = Author(last_name="Smith", first_name="John", middle_name="Paul", suffix="Jr.")
        assert format_author_apa(author) == "Smith, J. P., Jr."

    def test_harvard_initials_run_together(self):
        author = Author(last_name="Smith", first_name="John", middle_name="Paul")
        assert format_author_harvard(author) == "Smith, J.P."

    def test_mla_position_dependent(self):
        author = Author(last_name="Smith", first_name="John", middle_name="Paul", suffix="Jr.")
        assert format_author_mla(author, True) == "Smith, John Paul, Jr."
        assert format_author_mla(author, False) == "John Paul Smith Jr."

    def test_last_name_only(self):
        author = Author(last_name="Plato")
        assert format_author_apa(author) == "Plato"
        assert format_author_mla(author, False) == "Plato"

    @pytest.mark.parametrize("formatter", [
        format_author_apa,
        format_author_mla,
        format_author_chicago,
        format_author_harvard,
    ])
    def test_organization_verbatim(self, formatter, organization):
        """Organizations ignore first and middle names in every style."""
        assert formatter(organization) == "World Health Organization"


class TestAuthorLists:
    """Test author list joining and truncation."""

    def test_empty_lists(self):
        for formatter in (format_authors_apa, format_authors_mla,
                          format_authors_chicago, format_authors_harvard):
            assert formatter([]) == ""

    def test_apa_two_authors(self):
        assert format_authors_apa(_people(2)) == "Author1, A. & Author2, A."

    def test_apa_twenty_authors_lists_all(self):
        result = format_authors_apa(_people(20))
        assert result.count("Author") == 20
        assert result.endswith(", & Author20, A.")
        assert "..." not in result

    def test_apa_twenty_one_authors_truncates(self):
        result = format_authors_apa(_people(21))
        assert "Author19, A., ... Author21, A." in result
        assert "Author20" not in result
        assert "&" not in result

    def test_mla_two_and_three(self):
        assert format_authors_mla(_people(2)) == "Author1, Alex, and Alex Author2"
        assert format_authors_mla(_people(3)) == "Author1, Alex, et al."

    def test_chicago_three_and_four(self):
        assert format_authors_chicago(_people(3)) == "Author1, Alex, Alex Author2, and Alex Author3"
        assert format_authors_chicago(_people(4)) == "Author1, Alex, et al."

    def test_harvard_no_serial_comma(self):
        assert format_authors_harvard(_people(3)) == "Author1, A., Author2, A. and Author3, A."
        assert format_authors_harvard(_people(4)) == "Author1, A. et al."


class TestDates:
    """Test date formatting and the no-date sentinels."""

    def test_no_date_sentinels(self):
        assert format_date_apa(None) == "(n.d.)"
        assert format_date_harvard(None) == "n.d."
        assert format_date_mla(None) == ""
        assert format_date_chicago(None) == ""

    def test_missing_year_counts_as_no_date(self):
        date = CitationDate(month=5, day=1)
        assert format_date_apa(date) == "(n.d.)"
        assert format_date_mla(date) == ""

    def test_full_dates(self):
        date = CitationDate(year=2020, month=1, day=15)
        assert format_date_apa(date) == "(2020, January 15)"
        assert format_date_mla(date) == "15 Jan. 2020"
        assert format_date_chicago(date) == "January 15, 2020"
        assert format_date_harvard(date) == "15 January 2020"

    def test_mla_september(self):
        assert format_date_mla(CitationDate(year=2020, month=9)) == "Sept. 2020"

    def test_apa_season(self):
        assert format_date_apa(CitationDate(year=2021, season="spring")) == "(2021, Spring)"

    def test_year_only(self):
        date = CitationDate(year=2020)
        assert format_date_apa(date) == "(2020)"
        assert format_date_chicago(date) == "2020"

    def test_access_date_phrases(self):
        date = CitationDate(year=2024, month=1, day=15)
        assert format_access_date(date, "apa") == "Retrieved 2024, January 15 from"
        assert format_access_date(date, "mla") == "Accessed 15 Jan. 2024."
        assert format_access_date(date, "chicago") == "Accessed January 15, 2024."
        assert format_access_date(date, "harvard") == "(Accessed: 15 January 2024)"
        assert format_access_date(None, "mla") == ""


class TestText:
    """Test text helpers."""

    def test_escape_html_ampersand_first(self):
        assert escape_html("<a & 'b'>") == "&lt;a &amp; &#039;b&#039;&gt;"
        assert escape_html('"') == "&quot;"

    def test_sentence_case_segments(self):
        assert to_sentence_case("The Great Gatsby") == "The great gatsby"
        assert to_sentence_case("Deep Learning: A NEW Approach") == "Deep learning: A new approach"
        assert to_sentence_case("") == ""

    def test_capitalize_first(self):
        assert capitalize_first("hello world") == "Hello world"
        assert capitalize_first(None) == ""

    def test_format_url_strips_one_trailing_slash(self):
        assert format_url("https://example.com/") == "https://example.com"
        assert format_url("https://example.com/a") == "https://example.com/a"
        assert format_url(None) == ""

    def test_format_pages(self):
        assert format_pages("1-10", "mla") == "pp. 1-10"
        assert format_pages("1-10", "harvard") == "pp. 1-10"
        assert format_pages("1-10", "apa") == "1-10"
        assert format_pages(None, "mla") == ""


class TestDOI:
    """Test DOI normalization."""

    def test_bare_doi(self):
        assert format_doi("10.1000/test") == "https://doi.org/10.1000/test"

    def test_prefixed_doi(self):
        assert format_doi("doi:10.1000/test") == "https://doi.org/10.1000/test"
        assert format_doi("DOI: 10.1000/test") == "https://doi.org/10.1000/test"

    @pytest.mark.parametrize("doi", [
        "10.1000/test",
        "doi:10.1000/test",
        "https://doi.org/10.1000/test",
        "http://dx.doi.org/10.1000/test",
    ])
    def test_idempotent(self, doi):
        once = format_doi(doi)
        assert format_doi(once) == once

    def test_empty(self):
        assert format_doi(None) == ""
        assert format_doi("") == ""
