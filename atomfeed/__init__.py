"""
atomfeed

Build Atom 1.0 feeds in memory and serialize them to any byte sink.

Example
-------
from io import BytesIO
from atomfeed import Entry, FeedBuilder, Person, write_feed

feed = (
    FeedBuilder("Test Feed")
    .id("urn:test:1")
    .entries([Entry("Hello").with_authors([Person("Alice")])])
    .build()
)

xml = write_feed(feed, BytesIO()).getvalue()
"""
from .config import Config, LoggingConfig, configure_logging
from .exceptions import AtomWriteError
from .models import Entry, Feed, FeedBuilder, Generator, Person
from .serializer import ATOM_NAMESPACE, FeedSerializer, to_bytes, write_feed
from .timestamps import coerce_timestamp, format_rfc3339

__all__ = [
    "ATOM_NAMESPACE",
    "AtomWriteError",
    "Config",
    "Entry",
    "Feed",
    "FeedBuilder",
    "FeedSerializer",
    "Generator",
    "LoggingConfig",
    "Person",
    "coerce_timestamp",
    "configure_logging",
    "format_rfc3339",
    "to_bytes",
    "write_feed",
]
