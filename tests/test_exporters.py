"""Tests for BibTeX and RIS export."""

import re
from dataclasses import replace

from opencitation.core.models import (
    Author,
    BookFields,
    CitationDate,
    CitationFields,
    FilmFields,
    MiscellaneousFields,
    WebsiteFields,
    fields_from_dict,
)
from opencitation.exporters import (
    escape_bibtex,
    generate_bibtex_key,
    get_bibtex_type,
    get_ris_type,
    to_bibtex,
    to_bibtex_multiple,
    to_ris,
    to_ris_multiple,
)


class TestBibTeXEntries:
    """Test single BibTeX entries."""

    def test_book_entry(self, gatsby):
        entry = to_bibtex(replace(gatsby, isbn="978-0743273565"))
        assert entry.startswith("@book{fitzgerald1925the,")
        assert "  author = {Fitzgerald, F. Scott}," in entry
        assert "  title = {The Great Gatsby}," in entry
        assert "  year = {1925}," in entry
        assert "  publisher = {Scribner}," in entry
        assert "  isbn = {978-0743273565}" in entry
        assert entry.endswith("}")

    def test_last_field_has_no_trailing_comma(self, gatsby):
        lines = to_bibtex(gatsby).splitlines()
        assert not lines[-2].endswith(",")
        assert lines[-1] == "}"

    def test_journal_entry(self, journal_article):
        entry = to_bibtex(journal_article)
        assert entry.startswith("@article{smith2020test,")
        assert "  author = {Smith, John and Doe, Jane}," in entry
        assert "  journal = {Test Journal}," in entry
        assert "  volume = {42}," in entry
        assert "  number = {3}," in entry
        assert "  pages = {123-145}," in entry
        assert "  month = mar," in entry
        assert "  doi = {10.1000/xyz123}" in entry

    def test_website_urldate(self, website):
        entry = to_bibtex(website)
        assert entry.startswith("@online{")
        assert "  organization = {Test Site}," in entry
        assert "  url = {https://example.com/}," in entry
        assert "  urldate = {2024-01-15}" in entry

    def test_special_characters_escaped(self, gatsby):
        entry = to_bibtex(replace(gatsby, title="Costs & Benefits: 50% of $100"))
        assert r"title = {Costs \& Benefits: 50\% of \$100}" in entry

    def test_unset_fields_omitted(self):
        entry = to_bibtex(MiscellaneousFields(title="Untitled Notes"))
        assert entry == "@misc{unknownnduntitled,\n  title = {Untitled Notes}\n}"

    def test_numeric_dict_values(self):
        book = fields_from_dict({"sourceType": "book", "title": "Atlas", "edition": 2, "isbn": 9780000000000})
        entry = to_bibtex(book)
        assert "  edition = {2}" in entry
        assert "  isbn = {9780000000000}" in entry

    def test_out_of_range_month_dropped(self, gatsby):
        entry = to_bibtex(replace(gatsby, publication_date=CitationDate(year=1925, month=13, day=40)))
        assert "  year = {1925}," in entry
        assert "month" not in entry

    def test_custom_key(self, gatsby):
        assert to_bibtex(gatsby, key="gatsby").startswith("@book{gatsby,")

    def test_escape_bibtex_backslash_first(self):
        assert escape_bibtex("a\\b{c}") == "a\\\\b\\{c\\}"


class TestBibTeXKeys:
    """Test citation key generation."""

    def test_key_strips_non_letters(self):
        book = BookFields(
            title="L'Étranger",
            authors=(Author(last_name="O'Brien-Smith", first_name="Pat"),),
            publication_date=CitationDate(year=1999),
        )
        assert generate_bibtex_key(book) == "obriensmith1999ltranger"

    def test_key_fallbacks(self):
        assert generate_bibtex_key(CitationFields(title="")) == "unknownnduntitled"

    def test_keys_unique_in_batch(self, gatsby):
        output = to_bibtex_multiple([gatsby, gatsby, gatsby, replace(gatsby, title="Other")])
        keys = re.findall(r"^@\w+\{([^,]+),", output, flags=re.MULTILINE)
        assert keys == ["fitzgerald1925the", "fitzgerald1925thea", "fitzgerald1925theb", "fitzgerald1925other"]
        assert len(set(keys)) == len(keys)

    def test_entries_separated_by_blank_line(self, gatsby, journal_article):
        output = to_bibtex_multiple([gatsby, journal_article])
        assert "}\n\n@article{" in output

    def test_type_mapping(self):
        assert get_bibtex_type("journal") == "article"
        assert get_bibtex_type("blog") == "online"
        assert get_bibtex_type("film") == "misc"


class TestRIS:
    """Test RIS export."""

    def test_journal_pages_split(self, journal_article):
        record = to_ris(journal_article)
        lines = record.splitlines()
        assert "SP  - 123" in lines
        assert "EP  - 145" in lines
        assert lines[0] == "TY  - JOUR"
        assert lines[-1] == "ER  - "

    def test_journal_tags(self, journal_article):
        lines = to_ris(journal_article).splitlines()
        assert lines[:5] == [
            "TY  - JOUR",
            "AU  - Smith, John",
            "AU  - Doe, Jane",
            "TI  - Test Article",
            "PY  - 2020/03/15",
        ]
        assert "JO  - Test Journal" in lines
        assert "VL  - 42" in lines
        assert "IS  - 3" in lines
        assert "DO  - 10.1000/xyz123" in lines

    def test_book_tags(self, gatsby):
        lines = to_ris(replace(gatsby, publication_place="New York", edition="2nd")).splitlines()
        assert "TY  - BOOK" in lines
        assert "PB  - Scribner" in lines
        assert "CY  - New York" in lines
        assert "ET  - 2nd" in lines
        assert "PY  - 1925" in lines

    def test_access_date_needs_full_date(self, website):
        assert "Y2  - 2024/01/15" in to_ris(website).splitlines()
        partial = replace(website, access_date=CitationDate(year=2024))
        assert not any(line.startswith("Y2") for line in to_ris(partial).splitlines())

    def test_out_of_range_date_parts_dropped(self, website):
        page = replace(
            website,
            publication_date=CitationDate(year=2020, month=13, day=40),
            access_date=CitationDate(year=2024, month=0, day=15),
        )
        lines = to_ris(page).splitlines()
        assert "PY  - 2020" in lines
        assert "Y1  - 2020" in lines
        assert not any(line.startswith("Y2") for line in lines)

    def test_day_dropped_with_valid_month(self, gatsby):
        lines = to_ris(replace(gatsby, publication_date=CitationDate(year=1925, month=4, day=40))).splitlines()
        assert "PY  - 1925/04" in lines

    def test_film_directors(self):
        film = FilmFields(title="Alien", directors=(Author(last_name="Scott", first_name="Ridley"),))
        lines = to_ris(film).splitlines()
        assert lines[0] == "TY  - MPCT"
        assert "A2  - Scott, Ridley" in lines

    def test_unset_fields_omitted(self):
        assert to_ris(MiscellaneousFields(title="Notes")) == "TY  - GEN\nTI  - Notes\nER  - "

    def test_multiple_records(self, gatsby, website):
        output = to_ris_multiple([gatsby, website])
        assert output.count("ER  - ") == 2
        assert "ER  - \n\nTY  - ELEC" in output

    def test_type_mapping(self):
        assert get_ris_type("tv-episode") == "VIDEO"
        assert get_ris_type("image") == "ART"
        assert get_ris_type("bogus") == "GEN"

    def test_website_container(self):
        page = WebsiteFields(title="Page", site_name="Site")
        assert "T2  - Site" in to_ris(page).splitlines()
