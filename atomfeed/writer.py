"""Event-level XML writer used as the sink for Atom serialization."""

from xml.sax.saxutils import XMLGenerator, escape

_TEXT_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_ATTRIBUTE_ENTITIES = {
    '"': "&quot;",
    "'": "&apos;",
    "\n": "&#10;",
    "\r": "&#13;",
    "\t": "&#9;",
}


class AtomXMLGenerator(XMLGenerator):
    """XMLGenerator writing UTF-8 to any byte sink.

    Escaping is owned here, never by callers: ``&``, ``<``, ``>``, ``"``
    and ``'`` are escaped in text and in attribute values, and attribute
    values are always delimited with double quotes. Elements closed
    without any content are written self-closing; an element that
    received text (even empty text) gets an explicit end tag.

    Values that cannot be encoded (lone surrogates) raise
    UnicodeEncodeError instead of being turned into character references.
    """

    def __init__(self, out, encoding: str = "utf-8"):
        """Initialize the writer.

        Args:
            out: Binary stream, object with a ``write(bytes)`` method, or
                text stream
            encoding: Document encoding, also written in the declaration
        """
        super().__init__(out, encoding, short_empty_elements=True)

    def _encodable(self, value: str) -> str:
        value.encode(self._encoding)
        return value

    def startDocument(self):
        self._write('<?xml version="1.0" encoding="%s"?>' % self._encoding)

    def startElement(self, name, attrs):
        self._finish_pending_start_element()
        self._write("<" + name)
        for key, value in attrs.items():
            value = escape(self._encodable(value), _ATTRIBUTE_ENTITIES)
            self._write(' %s="%s"' % (key, value))
        self._pending_start_element = True

    def characters(self, content):
        self._finish_pending_start_element()
        self._write(escape(self._encodable(content), _TEXT_ENTITIES))

    def start(self, name: str, attrs: dict[str, str] | None = None) -> None:
        self.startElement(name, attrs or {})

    def end(self, name: str) -> None:
        self.endElement(name)

    def empty(self, name: str, attrs: dict[str, str]) -> None:
        """Write a self-closing element such as ``<link href="..."/>``."""
        self.startElement(name, attrs)
        self.endElement(name)

    def text_element(
        self, name: str, text: str, attrs: dict[str, str] | None = None
    ) -> None:
        """Write ``<name attrs>text</name>``."""
        self.start(name, attrs)
        self.characters(text)
        self.endElement(name)
