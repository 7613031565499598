import logging
from typing import List
from bs4 import BeautifulSoup, Tag

from microparse.extractors.value_resolver import resolve_url, resolve_value
from microparse.models.item import (
    Item,
    Nested,
    Scalar,
    UNNAMED_FIELD,
    URL_FIELD,
)

logger = logging.getLogger(__name__)


class MicrodataExtractor:
    """
    Microdata extractor over a pruned tree.

    Elements with child elements become nested items, leaf elements become
    scalar values. Repeated field names are accumulated into arrays.
    """

    def __init__(self, base_url: str):
        self.base_url = base_url

    def extract_microdata(self, soup: BeautifulSoup) -> Item:
        root = Item()

        for node in _child_elements(soup):
            self.extract_item(node, root)

        logger.debug(f"Extracted {len(root)} top-level field(s)")
        return root

    # --------------------------------------------------
    # Recursive extraction
    # --------------------------------------------------

    def extract_item(self, node: Tag, destination: Item) -> None:
        fieldname = field_name(node)
        logger.debug(f"FIELD: {fieldname}")

        children = _child_elements(node)

        if not children:
            value = resolve_value(node, self.base_url)
            destination.accumulate(fieldname, Scalar(value))
            return

        nested = Item()

        href = node.get("href")
        if href is not None:
            logger.debug(f"HREF: {href}")
            url = resolve_url(href, self.base_url)
            if url:
                nested.accumulate(URL_FIELD, Scalar(url))

        for child in children:
            self.extract_item(child, nested)

        destination.accumulate(fieldname, Nested(nested))


def field_name(node: Tag) -> str:
    """
    itemprop verbatim, else the last "/" segment of itemtype.
    """
    itemprop = node.get("itemprop")
    if itemprop is not None:
        return itemprop

    itemtype = node.get("itemtype")
    if itemtype is not None:
        return itemtype.split("/")[-1]

    logger.warning(
        f"<{node.name}> has neither itemprop nor itemtype; "
        f"stored under {UNNAMED_FIELD!r}"
    )
    return UNNAMED_FIELD


def _child_elements(node: Tag) -> List[Tag]:
    return node.find_all(True, recursive=False)
