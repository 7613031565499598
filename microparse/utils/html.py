import re
import logging
from typing import Union
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.dammit import UnicodeDammit

from microparse.errors import ParseError

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


def validate_html(html: Union[str, bytes]) -> Union[str, bytes]:
    """
    Ensures the markup is usable before it reaches the parser.
    Only text or raw bytes are accepted; size is not limited here.
    Empty markup is accepted; it simply carries no microdata.
    """
    if not isinstance(html, (str, bytes)):
        raise ParseError(
            f"Invalid HTML input: expected str or bytes, got {type(html).__name__}"
        )

    return html


def decode_html(html: Union[str, bytes]) -> str:
    """
    Decode raw bytes using the declared charset (BOM, <meta charset>),
    falling back to UTF-8 detection before windows-1252.
    """
    if isinstance(html, str):
        return html

    dammit = UnicodeDammit(html, is_html=True)
    if dammit.unicode_markup is None:
        raise ParseError("HTML input could not be decoded")

    logger.debug(f"Decoded HTML bytes as {dammit.original_encoding}")
    return dammit.unicode_markup


def make_soup(html: Union[str, bytes]) -> BeautifulSoup:
    """
    Create the BeautifulSoup tree for one parse call with the HTML5
    (html5lib) tree builder, so optional end tags are closed and the
    first of a duplicated attribute wins.
    All attribute values are kept as plain strings.
    """
    html = decode_html(validate_html(html))

    try:
        return BeautifulSoup(html, "html5lib", multi_valued_attributes=None)
    except ParserRejectedMarkup as e:
        logger.error(f"BeautifulSoup parse failed: {e}")
        raise ParseError("HTML parsing failed") from e


def minify(text: str) -> str:
    """
    Collapse every run of whitespace into a single space.
    Leading and trailing runs are collapsed too, not removed.
    """
    return _WHITESPACE_RUN.sub(" ", text)
