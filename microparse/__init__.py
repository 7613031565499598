"""
microparse: extract HTML microdata into a nested JSON-ready tree.
"""

from microparse.errors import MicroparseError, ParseError, SerializationError
from microparse.parser import Document, MicrodataParser, parse, serialize

__all__ = [
    "Document",
    "MicrodataParser",
    "MicroparseError",
    "ParseError",
    "SerializationError",
    "parse",
    "serialize",
]
