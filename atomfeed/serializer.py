"""Atom 1.0 serialization of feed models."""

from io import BytesIO
from typing import BinaryIO
from xml.sax import SAXException

from .exceptions import AtomWriteError
from .logging_config import create_execution_logger
from .models import Entry, Feed, Generator, Person
from .timestamps import format_rfc3339
from .writer import AtomXMLGenerator

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


class FeedSerializer:
    """Writes Feed values as Atom documents.

    The element order below is relied on by Atom consumers and by
    byte-for-byte comparisons; do not reorder.
    """

    def __init__(self, execution_id: str | None = None):
        """Initialize FeedSerializer.

        Args:
            execution_id: Execution ID for logging context
        """
        self.logger = create_execution_logger("serializer", execution_id)

    def write(self, feed: Feed, sink: BinaryIO) -> BinaryIO:
        """Serialize ``feed`` into ``sink``.

        Args:
            feed: Feed to serialize
            sink: Destination accepting sequential writes; never closed here

        Returns:
            The same sink, fully written

        Raises:
            AtomWriteError: If the sink or the XML writer fails. The sink is
                left partially written.
        """
        self.logger.log_execution_start(
            feed_title=feed.title, entries_count=len(feed.entries)
        )

        try:
            writer = AtomXMLGenerator(sink)
            self._write_feed(feed, writer)
            writer.endDocument()
        except (OSError, ValueError, SAXException) as e:
            self.logger.error(
                f"Failed to write feed {feed.title!r}: {e}",
                feed_title=feed.title,
                error=str(e),
            )
            raise AtomWriteError(f"Failed to write Atom feed: {e}", cause=e) from e

        self.logger.log_execution_end(
            success=True, feed_title=feed.title, entries_written=len(feed.entries)
        )
        return sink

    def _write_feed(self, feed: Feed, writer: AtomXMLGenerator) -> None:
        writer.startDocument()
        writer.start("feed", {"xmlns": ATOM_NAMESPACE})

        if feed.generator is not None:
            self._write_generator(feed.generator, writer)

        if feed.self_uri is not None:
            writer.empty(
                "link",
                {
                    "href": feed.self_uri,
                    "rel": "self",
                    "type": "application/atom+xml",
                },
            )

        if feed.uri is not None:
            writer.empty(
                "link", {"href": feed.uri, "rel": "alternate", "type": "text/html"}
            )

        if feed.published is not None:
            writer.text_element("published", format_rfc3339(feed.published))

        if feed.updated is not None:
            writer.text_element("updated", format_rfc3339(feed.updated))

        if feed.id is not None:
            writer.text_element("id", feed.id)

        writer.text_element("title", feed.title)

        if feed.subtitle is not None:
            writer.text_element("subtitle", feed.subtitle)

        # rights is carried on the model only

        for position, entry in enumerate(feed.entries):
            self._write_entry(entry, writer)
            self.logger.log_entry_written(entry.title, position)

        writer.end("feed")

    def _write_generator(self, generator: Generator, writer: AtomXMLGenerator) -> None:
        attrs = {}
        if generator.uri is not None:
            attrs["uri"] = generator.uri
        if generator.version is not None:
            attrs["version"] = generator.version
        writer.text_element("generator", generator.name, attrs)

    def _write_entry(self, entry: Entry, writer: AtomXMLGenerator) -> None:
        writer.start("entry")

        writer.text_element("title", entry.title)

        if entry.uri is not None:
            writer.empty(
                "link",
                {
                    "href": entry.uri,
                    "rel": "alternate",
                    "type": "text/html",
                    "title": entry.title,
                },
            )

        if entry.published is not None:
            writer.text_element("published", format_rfc3339(entry.published))

        if entry.updated is not None:
            writer.text_element("updated", format_rfc3339(entry.updated))

        if entry.id is not None:
            writer.text_element("id", entry.id)

        for author in entry.authors:
            writer.start("author")
            self._write_person(author, writer)
            writer.end("author")

        for contributor in entry.contributors:
            writer.start("contributor")
            self._write_person(contributor, writer)
            writer.end("contributor")

        for term in entry.categories:
            writer.empty("category", {"term": term})

        if entry.summary is not None:
            writer.text_element("summary", entry.summary, {"type": "html"})

        if entry.content is not None:
            writer.text_element("content", entry.content, {"type": "html"})

        writer.end("entry")

    def _write_person(self, person: Person, writer: AtomXMLGenerator) -> None:
        """Write the children of a person construct; the caller wraps them."""
        writer.text_element("name", person.name)

        if person.uri is not None:
            writer.text_element("uri", person.uri)

        if person.email is not None:
            writer.text_element("email", person.email)


def write_feed(
    feed: Feed, sink: BinaryIO, execution_id: str | None = None
) -> BinaryIO:
    """Serialize ``feed`` as Atom into ``sink`` and return ``sink``."""
    return FeedSerializer(execution_id=execution_id).write(feed, sink)


def to_bytes(feed: Feed, execution_id: str | None = None) -> bytes:
    """Serialize ``feed`` into a new byte string."""
    return write_feed(feed, BytesIO(), execution_id=execution_id).getvalue()
