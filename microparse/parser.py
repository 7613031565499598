"""
Document facade: reads the input, builds the HTML tree, prunes it and runs
the microdata extractor. One parser instance handles one input.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from microparse.errors import ParseError, SerializationError
from microparse.extractors.microdata_extractor import MicrodataExtractor
from microparse.extractors.pruner import prune
from microparse.models.item import Item
from microparse.utils.html import make_soup

logger = logging.getLogger(__name__)


@dataclass
class Document:
    items: Item
    base_url: str

    @property
    def microdata(self) -> Dict[str, Any]:
        return self.items.to_dict()

    def json(self) -> bytes:
        return serialize(self)


class MicrodataParser:
    """
    Extracts microdata from an HTML document.

    `source` is markup (str or bytes) or a readable stream over it.
    `base_url` is the absolute URL every relative URL is resolved against.
    """

    def __init__(self, source, base_url: str):
        _require_absolute(base_url)

        self.source = source
        self.base_url = base_url
        self.document: Optional[Document] = None

    @property
    def microdata(self) -> Optional[Dict[str, Any]]:
        return self.document.microdata if self.document else None

    def parse(self) -> Document:
        self.document = None

        html = self._read()
        soup = make_soup(html)

        prune(soup)
        items = MicrodataExtractor(self.base_url).extract_microdata(soup)

        self.document = Document(items=items, base_url=self.base_url)
        logger.info(f"Parsed microdata for {self.base_url}: {len(items)} field(s)")
        return self.document

    def json(self) -> bytes:
        if self.document is None:
            raise SerializationError("Nothing to serialize: parse() has not succeeded")
        return serialize(self.document)

    def _read(self):
        if not hasattr(self.source, "read"):
            return self.source

        try:
            return self.source.read()
        except (OSError, ValueError) as e:
            logger.error(f"Reading HTML input failed: {e}")
            raise ParseError("Reading HTML input failed") from e


# --------------------------------------------------
# Module-level helpers
# --------------------------------------------------

def parse(source, base_url: str) -> Document:
    return MicrodataParser(source, base_url).parse()


def serialize(document: Document) -> bytes:
    try:
        text = json.dumps(
            document.microdata,
            ensure_ascii=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Microdata could not be encoded: {e}") from e

    return text.encode("utf-8")


def _require_absolute(base_url: str) -> None:
    if not isinstance(base_url, str) or not base_url:
        raise ValueError("base_url is required")

    parsed = urlparse(base_url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"base_url must be an absolute URL, got {base_url!r}")
