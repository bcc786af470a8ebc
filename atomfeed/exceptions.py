"""Exceptions raised by the Atom serializer."""


class AtomWriteError(Exception):
    """Raised when the feed document cannot be written to its sink.

    Wraps whatever the sink or the XML writer reported (broken pipe, disk
    full, write on a closed file, encoding failure). The original
    exception is available as ``cause`` and is chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
