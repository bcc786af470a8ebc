"""Data models for Atom feeds."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime
from typing import BinaryIO

from .timestamps import coerce_timestamp


def _text(value) -> str:
    return str(value)


def _optional_text(value) -> str | None:
    return None if value is None else str(value)


def _optional_timestamp(value) -> datetime | None:
    return None if value is None else coerce_timestamp(value)


@dataclass(frozen=True)
class Person:
    """Represents an Atom person construct (author or contributor)."""

    name: str
    uri: str | None = None
    email: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "name", _text(self.name))
        object.__setattr__(self, "uri", _optional_text(self.uri))
        object.__setattr__(self, "email", _optional_text(self.email))

    def with_uri(self, uri: str) -> "Person":
        return replace(self, uri=uri)

    def with_email(self, email: str) -> "Person":
        return replace(self, email=email)


@dataclass(frozen=True)
class Generator:
    """Represents the agent used to generate a feed."""

    name: str
    uri: str | None = None
    version: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "name", _text(self.name))
        object.__setattr__(self, "uri", _optional_text(self.uri))
        object.__setattr__(self, "version", _optional_text(self.version))

    def with_uri(self, uri: str) -> "Generator":
        return replace(self, uri=uri)

    def with_version(self, version: str) -> "Generator":
        return replace(self, version=version)


@dataclass(frozen=True)
class Entry:
    """Represents a single Atom entry.

    Every ``with_*`` method returns a new Entry; the receiver is left
    untouched. Sequence setters replace the whole sequence.
    """

    title: str
    uri: str | None = None
    published: datetime | None = None
    updated: datetime | None = None
    id: str | None = None
    categories: tuple[str, ...] = ()
    authors: tuple[Person, ...] = ()
    contributors: tuple[Person, ...] = ()
    summary: str | None = None  # written as type="html"
    content: str | None = None  # written as type="html"

    def __post_init__(self):
        object.__setattr__(self, "title", _text(self.title))
        object.__setattr__(self, "uri", _optional_text(self.uri))
        object.__setattr__(self, "id", _optional_text(self.id))
        object.__setattr__(self, "published", _optional_timestamp(self.published))
        object.__setattr__(self, "updated", _optional_timestamp(self.updated))
        object.__setattr__(
            self, "categories", tuple(_text(term) for term in self.categories)
        )
        object.__setattr__(self, "authors", tuple(self.authors))
        object.__setattr__(self, "contributors", tuple(self.contributors))
        object.__setattr__(self, "summary", _optional_text(self.summary))
        object.__setattr__(self, "content", _optional_text(self.content))

    def with_uri(self, uri: str) -> "Entry":
        return replace(self, uri=uri)

    def with_id(self, id: str) -> "Entry":
        return replace(self, id=id)

    def with_published(self, published: datetime | str) -> "Entry":
        return replace(self, published=published)

    def with_updated(self, updated: datetime | str) -> "Entry":
        return replace(self, updated=updated)

    def with_categories(self, categories: Iterable[str]) -> "Entry":
        return replace(self, categories=tuple(categories))

    def with_authors(self, authors: Iterable[Person]) -> "Entry":
        return replace(self, authors=tuple(authors))

    def with_contributors(self, contributors: Iterable[Person]) -> "Entry":
        return replace(self, contributors=tuple(contributors))

    def with_summary(self, summary: str) -> "Entry":
        return replace(self, summary=summary)

    def with_content(self, content: str) -> "Entry":
        return replace(self, content=content)


@dataclass(frozen=True)
class Feed:
    """Represents a complete Atom feed, ready to be serialized.

    Build instances with :class:`FeedBuilder`. ``rights`` is carried on
    the model but is not written by the serializer.
    """

    title: str
    id: str | None = None
    self_uri: str | None = None
    uri: str | None = None
    subtitle: str | None = None
    rights: str | None = None
    published: datetime | None = None
    updated: datetime | None = None
    generator: Generator | None = None
    entries: tuple[Entry, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "title", _text(self.title))
        for name in ("id", "self_uri", "uri", "subtitle", "rights"):
            object.__setattr__(self, name, _optional_text(getattr(self, name)))
        object.__setattr__(self, "published", _optional_timestamp(self.published))
        object.__setattr__(self, "updated", _optional_timestamp(self.updated))
        object.__setattr__(self, "entries", tuple(self.entries))

    @staticmethod
    def builder(title: str) -> "FeedBuilder":
        return FeedBuilder(title)

    def write_to(self, sink: BinaryIO) -> BinaryIO:
        """Serialize this feed into ``sink`` and return the same sink."""
        from .serializer import write_feed

        return write_feed(self, sink)

    def to_bytes(self) -> bytes:
        """Serialize this feed into a new UTF-8 encoded byte string."""
        from .serializer import to_bytes

        return to_bytes(self)


class FeedBuilder:
    """Fluent builder for :class:`Feed`.

    Example:
        feed = (
            FeedBuilder("Release notes")
            .id("urn:example:releases")
            .self_uri("https://example.com/releases.atom")
            .entries([Entry("1.0 released")])
            .build()
        )
    """

    def __init__(self, title: str):
        """Initialize the builder with the mandatory feed title.

        Args:
            title: Feed title, always written as <title>
        """
        self._fields: dict = {"title": title}
        self._entries: list[Entry] = []

    def generator(self, generator: Generator) -> "FeedBuilder":
        self._fields["generator"] = generator
        return self

    def uri(self, uri: str) -> "FeedBuilder":
        self._fields["uri"] = uri
        return self

    def self_uri(self, uri: str) -> "FeedBuilder":
        self._fields["self_uri"] = uri
        return self

    def id(self, id: str) -> "FeedBuilder":
        self._fields["id"] = id
        return self

    def subtitle(self, subtitle: str) -> "FeedBuilder":
        self._fields["subtitle"] = subtitle
        return self

    def rights(self, rights: str) -> "FeedBuilder":
        self._fields["rights"] = rights
        return self

    def published(self, published: datetime | str) -> "FeedBuilder":
        self._fields["published"] = coerce_timestamp(published)
        return self

    def updated(self, updated: datetime | str) -> "FeedBuilder":
        self._fields["updated"] = coerce_timestamp(updated)
        return self

    def entries(self, entries: Iterable[Entry]) -> "FeedBuilder":
        self._entries = list(entries)
        return self

    def add_entry(self, entry: Entry) -> "FeedBuilder":
        self._entries.append(entry)
        return self

    def build(self) -> Feed:
        """Produce the immutable Feed; the builder stays reusable."""
        return Feed(entries=tuple(self._entries), **self._fields)
