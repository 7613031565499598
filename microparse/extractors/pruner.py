import logging
from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


def carries_microdata(node: Tag) -> bool:
    return node.has_attr("itemprop") or node.has_attr("itemscope")


def prune(soup: BeautifulSoup) -> BeautifulSoup:
    """
    Reduce the tree, in place, to the structure microdata extraction needs.

    1. Every element that neither carries itemprop/itemscope nor contains
       such an element is removed together with its content.
    2. Every remaining element without itemprop/itemscope is replaced by
       its own children, repeated until none is left.
    """
    removed = 0

    for node in soup.find_all(True):
        if node.decomposed:
            continue

        if carries_microdata(node) or node.find(carries_microdata):
            continue

        node.decompose()
        removed += 1

    unwrapped = 0
    wrappers = _wrappers(soup)

    while wrappers:
        for node in wrappers:
            node.unwrap()
        unwrapped += len(wrappers)
        wrappers = _wrappers(soup)

    logger.debug(f"Pruned tree: removed={removed} unwrapped={unwrapped}")
    return soup


def _wrappers(soup: BeautifulSoup):
    return [node for node in soup.find_all(True) if not carries_microdata(node)]
