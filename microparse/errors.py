class MicroparseError(Exception):
    """Base class for every error raised by microparse."""


class ParseError(MicroparseError):
    """The input could not be read or interpreted as HTML."""


class SerializationError(MicroparseError):
    """The extracted microdata tree could not be encoded as JSON."""
