"""Data models for OpenCitation.

Citation fields are a tagged union: one frozen dataclass per source type,
all sharing the common fields of :class:`CitationFields` and tagged by
``source_type``. Records are immutable; author sequences are stored as
tuples.
"""
import re
from dataclasses import dataclass, fields as dataclass_fields
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

from ..exceptions import ValidationError


class CitationStyle(Enum):
    """Supported citation styles."""
    APA = "apa"
    MLA = "mla"
    CHICAGO = "chicago"
    HARVARD = "harvard"

    @classmethod
    def values(cls) -> List[str]:
        return [style.value for style in cls]

    @classmethod
    def parse(cls, value: Union["CitationStyle", str, None]) -> Optional["CitationStyle"]:
        """Resolve an enum member or a case-insensitive name; None if unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


class SourceType(Enum):
    """The eleven kinds of work that can be cited."""
    BOOK = "book"
    JOURNAL = "journal"
    WEBSITE = "website"
    BLOG = "blog"
    NEWSPAPER = "newspaper"
    VIDEO = "video"
    IMAGE = "image"
    FILM = "film"
    TV_SERIES = "tv-series"
    TV_EPISODE = "tv-episode"
    MISCELLANEOUS = "miscellaneous"


class AccessType(Enum):
    """How the source was accessed (informational)."""
    WEB = "web"
    PRINT = "print"
    DATABASE = "database"
    APP = "app"
    ARCHIVE = "archive"


CITATION_STYLE_LABELS: Dict[str, str] = {
    "apa": "APA 7th Edition",
    "mla": "MLA 9th Edition",
    "chicago": "Chicago 17th Edition",
    "harvard": "Harvard",
}

SOURCE_TYPE_LABELS: Dict[str, str] = {
    "book": "Book",
    "journal": "Academic Journal",
    "website": "Website",
    "blog": "Blog",
    "newspaper": "Newspaper",
    "video": "Video",
    "image": "Image",
    "film": "Film",
    "tv-series": "TV Series",
    "tv-episode": "TV Episode",
    "miscellaneous": "Miscellaneous",
}

SOURCE_TYPE_DESCRIPTIONS: Dict[str, str] = {
    "book": "Physical and eBooks",
    "journal": "Peer-reviewed articles",
    "website": "General web pages",
    "blog": "Blog posts and articles",
    "newspaper": "News articles",
    "video": "YouTube, Vimeo, online video",
    "image": "Photographs, artwork, graphics",
    "film": "Movies, documentaries",
    "tv-series": "Television shows (whole series)",
    "tv-episode": "Individual TV episodes",
    "miscellaneous": "Other sources",
}

ACCESS_TYPE_LABELS: Dict[str, str] = {
    "web": "Web",
    "print": "Print",
    "database": "Database",
    "app": "App",
    "archive": "Archive",
}

ACCESS_TYPE_DESCRIPTIONS: Dict[str, str] = {
    "web": "Direct website access",
    "print": "Physical copy (book, newspaper, etc.)",
    "database": "Academic database (JSTOR, ProQuest, etc.)",
    "app": "Mobile/desktop application",
    "archive": "Internet Archive, Wayback Machine, etc.",
}

SEASONS = ("spring", "summer", "fall", "winter")


@dataclass(frozen=True)
class Author:
    """A person or organization credited on a work.

    Attributes:
        last_name: Family name, or the full name of an organization
        first_name: Given name (optional)
        middle_name: Middle name (optional)
        suffix: Jr., Sr., III, etc. (optional)
        is_organization: Render ``last_name`` verbatim in every style
    """

    last_name: str
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    suffix: Optional[str] = None
    is_organization: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Author":
        values = _snake_keys(data)
        return cls(
            last_name=_coerce_str(values.get("last_name")) or "",
            first_name=_coerce_str(values.get("first_name")),
            middle_name=_coerce_str(values.get("middle_name")),
            suffix=_coerce_str(values.get("suffix")),
            is_organization=bool(values.get("is_organization", False)),
        )


@dataclass(frozen=True)
class CitationDate:
    """A possibly partial date. Without a year it counts as "no date".

    Attributes:
        year: Four-digit year
        month: Month number 1-12
        day: Day of month
        season: 'spring', 'summer', 'fall' or 'winter' (alternative to month)
        is_approximate: Circa / approximate date
    """

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    season: Optional[str] = None
    is_approximate: bool = False

    @property
    def valid_month(self) -> Optional[int]:
        """The month, or None when it is unset or outside 1-12."""
        return self.month if self.month and 1 <= self.month <= 12 else None

    @property
    def valid_day(self) -> Optional[int]:
        """The day, or None when it is outside 1-31 or the month is not valid."""
        if self.valid_month and self.day and 1 <= self.day <= 31:
            return self.day
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CitationDate":
        values = _snake_keys(data)
        season = values.get("season")
        if isinstance(season, str):
            season = season.strip().lower() or None
        return cls(
            year=_coerce_int(values.get("year")),
            month=_coerce_int(values.get("month")),
            day=_coerce_int(values.get("day")),
            season=season if season in SEASONS else None,
            is_approximate=bool(values.get("is_approximate", False)),
        )


@dataclass(frozen=True)
class FormattedCitation:
    """Result of formatting a citation.

    Attributes:
        text: Plain text version
        html: HTML version (italics, links, escaped text)
    """

    text: str
    html: str

    def to_dict(self) -> Dict[str, str]:
        return {"text": self.text, "html": self.html}


EMPTY_CITATION = FormattedCitation(text="", html="")


@dataclass(frozen=True)
class CitationFields:
    """Fields common to every source type.

    Instantiated directly only for records whose ``source_type`` is not one
    of the known variants; formatters render those as empty output.
    """

    title: str
    source_type: str = ""
    access_type: str = AccessType.WEB.value
    subtitle: Optional[str] = None

    # Authors/Creators
    authors: Tuple[Author, ...] = ()
    editors: Tuple[Author, ...] = ()
    translators: Tuple[Author, ...] = ()

    # Publication info
    publisher: Optional[str] = None
    publication_place: Optional[str] = None
    publication_date: Optional[CitationDate] = None

    # Access info
    url: Optional[str] = None
    access_date: Optional[CitationDate] = None
    doi: Optional[str] = None

    # Additional
    language: Optional[str] = None
    original_publication_date: Optional[CitationDate] = None
    annotation: Optional[str] = None
    id: Optional[str] = None

    def __post_init__(self):
        for f in dataclass_fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                object.__setattr__(self, f.name, tuple(value))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase JSON shape, omitting unset fields."""
        return fields_to_dict(self)


@dataclass(frozen=True)
class BookFields(CitationFields):
    source_type: str = SourceType.BOOK.value
    isbn: Optional[str] = None
    edition: Optional[str] = None
    volume: Optional[str] = None
    volume_title: Optional[str] = None
    series: Optional[str] = None
    series_number: Optional[str] = None
    page_range: Optional[str] = None
    total_pages: Optional[int] = None
    format: Optional[str] = None


@dataclass(frozen=True)
class JournalFields(CitationFields):
    source_type: str = SourceType.JOURNAL.value
    journal_title: str = ""
    volume: Optional[str] = None
    issue: Optional[str] = None
    page_range: Optional[str] = None
    article_number: Optional[str] = None
    issn: Optional[str] = None
    database: Optional[str] = None
    database_accession_number: Optional[str] = None


@dataclass(frozen=True)
class WebsiteFields(CitationFields):
    source_type: str = SourceType.WEBSITE.value
    site_name: Optional[str] = None
    section_title: Optional[str] = None
    last_modified_date: Optional[CitationDate] = None


@dataclass(frozen=True)
class BlogFields(CitationFields):
    source_type: str = SourceType.BLOG.value
    blog_name: str = ""
    post_title: Optional[str] = None


@dataclass(frozen=True)
class NewspaperFields(CitationFields):
    source_type: str = SourceType.NEWSPAPER.value
    newspaper_title: str = ""
    section: Optional[str] = None
    page_range: Optional[str] = None
    edition: Optional[str] = None
    city: Optional[str] = None


@dataclass(frozen=True)
class VideoFields(CitationFields):
    source_type: str = SourceType.VIDEO.value
    channel_name: Optional[str] = None
    platform: Optional[str] = None
    duration: Optional[str] = None
    upload_date: Optional[CitationDate] = None


@dataclass(frozen=True)
class ImageFields(CitationFields):
    source_type: str = SourceType.IMAGE.value
    image_type: Optional[str] = None
    dimensions: Optional[str] = None
    medium: Optional[str] = None
    collection: Optional[str] = None
    museum: Optional[str] = None
    location: Optional[str] = None


@dataclass(frozen=True)
class FilmFields(CitationFields):
    source_type: str = SourceType.FILM.value
    directors: Tuple[Author, ...] = ()
    producers: Tuple[Author, ...] = ()
    production_company: Optional[str] = None
    country: Optional[str] = None
    runtime: Optional[str] = None
    format: Optional[str] = None
    streaming_service: Optional[str] = None


@dataclass(frozen=True)
class TVSeriesFields(CitationFields):
    source_type: str = SourceType.TV_SERIES.value
    creators: Tuple[Author, ...] = ()
    executive_producers: Tuple[Author, ...] = ()
    network: Optional[str] = None
    streaming_service: Optional[str] = None
    year_start: Optional[int] = None
    year_end: Optional[int] = None
    number_of_seasons: Optional[int] = None


@dataclass(frozen=True)
class TVEpisodeFields(CitationFields):
    source_type: str = SourceType.TV_EPISODE.value
    series_title: str = ""
    episode_title: Optional[str] = None
    season: Optional[int] = None
    episode_number: Optional[int] = None
    directors: Tuple[Author, ...] = ()
    writers: Tuple[Author, ...] = ()
    network: Optional[str] = None
    streaming_service: Optional[str] = None
    air_date: Optional[CitationDate] = None
    runtime: Optional[str] = None


@dataclass(frozen=True)
class MiscellaneousFields(CitationFields):
    source_type: str = SourceType.MISCELLANEOUS.value
    description: Optional[str] = None
    medium: Optional[str] = None
    format: Optional[str] = None
    additional_info: Optional[str] = None


FIELDS_BY_SOURCE_TYPE: Dict[str, Type[CitationFields]] = {
    SourceType.BOOK.value: BookFields,
    SourceType.JOURNAL.value: JournalFields,
    SourceType.WEBSITE.value: WebsiteFields,
    SourceType.BLOG.value: BlogFields,
    SourceType.NEWSPAPER.value: NewspaperFields,
    SourceType.VIDEO.value: VideoFields,
    SourceType.IMAGE.value: ImageFields,
    SourceType.FILM.value: FilmFields,
    SourceType.TV_SERIES.value: TVSeriesFields,
    SourceType.TV_EPISODE.value: TVEpisodeFields,
    SourceType.MISCELLANEOUS.value: MiscellaneousFields,
}

AUTHOR_LIST_FIELDS = frozenset({
    "authors", "editors", "translators", "directors", "producers",
    "creators", "executive_producers", "writers",
})

DATE_FIELDS = frozenset({
    "publication_date", "access_date", "original_publication_date",
    "last_modified_date", "upload_date", "air_date",
})

INT_FIELDS = frozenset({
    "season", "episode_number", "year_start", "year_end",
    "number_of_seasons", "total_pages",
})

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _to_camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(word.capitalize() for word in rest)


def _snake_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {_to_snake(str(k)): v for k, v in data.items()}


def _coerce_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _coerce_str(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (Mapping, list, tuple, bool)):
        return None
    text = str(value)
    return text if text.strip() else None


def fields_from_dict(data: Mapping[str, Any]) -> CitationFields:
    """Build the citation-fields variant described by a dictionary.

    Accepts the camelCase JSON shape (``sourceType``, ``journalTitle``,
    ``firstName``...) as well as snake_case keys. Unknown keys are ignored.
    An unrecognized ``sourceType`` yields a plain :class:`CitationFields`
    carrying that tag.

    Args:
        data: Mapping of field names to values

    Returns:
        The matching CitationFields subclass instance

    Raises:
        ValidationError: If ``data`` is not a mapping
    """
    if not isinstance(data, Mapping):
        raise ValidationError(f"Citation fields must be a mapping, got {type(data).__name__}")

    values = _snake_keys(data)
    source_type = str(values.get("source_type") or "")
    cls = FIELDS_BY_SOURCE_TYPE.get(source_type, CitationFields)
    known = {f.name for f in dataclass_fields(cls)}

    kwargs: Dict[str, Any] = {}
    for name, value in values.items():
        if name not in known or value is None:
            continue
        if name in AUTHOR_LIST_FIELDS:
            value = tuple(
                a if isinstance(a, Author) else Author.from_dict(a)
                for a in value
                if isinstance(a, (Author, Mapping))
            )
        elif name in DATE_FIELDS:
            if isinstance(value, Mapping):
                value = CitationDate.from_dict(value)
            elif not isinstance(value, CitationDate):
                continue
        elif name in INT_FIELDS:
            value = _coerce_int(value)
        else:
            value = _coerce_str(value)
            if value is None:
                continue
        kwargs[name] = value

    kwargs["source_type"] = source_type
    kwargs["title"] = str(kwargs.get("title") or "")
    return cls(**kwargs)


def _value_to_json(value: Any) -> Any:
    if isinstance(value, (Author, CitationDate)):
        return {
            _to_camel(f.name): getattr(value, f.name)
            for f in dataclass_fields(value)
            if getattr(value, f.name) not in (None, False)
        }
    if isinstance(value, tuple):
        return [_value_to_json(item) for item in value]
    return value


def fields_to_dict(citation: CitationFields) -> Dict[str, Any]:
    """Convert citation fields to the camelCase JSON shape.

    Unset fields (None, empty sequences) are omitted; ``sourceType`` and
    ``title`` are always present.
    """
    result: Dict[str, Any] = {}
    for f in dataclass_fields(citation):
        value = getattr(citation, f.name)
        if f.name not in ("source_type", "title") and value in (None, (), ""):
            continue
        result[_to_camel(f.name)] = _value_to_json(value)
    return result


def coerce_fields(citation: CitationFields, cls: Type[CitationFields]) -> CitationFields:
    """Rebuild ``citation`` as variant ``cls``, copying the attributes both share.

    Variant-only attributes missing on ``citation`` take their defaults.
    """
    if isinstance(citation, cls):
        return citation
    kwargs = {
        f.name: getattr(citation, f.name)
        for f in dataclass_fields(cls)
        if f.name != "source_type" and hasattr(citation, f.name)
    }
    kwargs["source_type"] = getattr(citation, "source_type", cls.source_type)
    return cls(**kwargs)
