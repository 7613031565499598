import pytest
from bs4.builder import ParserRejectedMarkup

from microparse.errors import ParseError
from microparse.utils import html as html_utils
from microparse.utils.html import decode_html, make_soup, minify, validate_html


def test_minify_collapses_whitespace_runs():
    assert minify("  Hello\n\tWorld  ") == " Hello World "


def test_minify_then_strip():
    assert minify("  Hello\n\tWorld  ").strip() == "Hello World"


def test_minify_handles_unicode_whitespace():
    assert minify("a\u00a0\u2003b\u3000c") == "a b c"


def test_minify_leaves_text_without_whitespace_untouched():
    assert minify("Zoë") == "Zoë"


def test_validate_rejects_non_text():
    with pytest.raises(ParseError):
        validate_html(None)


def test_validate_accepts_empty_markup():
    assert validate_html("") == ""


def test_validate_does_not_limit_size(monkeypatch):
    monkeypatch.setenv("MICROPARSE_MAX_HTML_SIZE", "10")
    markup = "<p>" + "x" * 20 + "</p>"

    assert validate_html(markup) == markup


def test_make_soup_keeps_attributes_as_strings():
    soup = make_soup('<span class="a b" itemprop="name alias">Jo</span>')
    assert soup.span["itemprop"] == "name alias"
    assert soup.span["class"] == "a b"


def test_make_soup_turns_rejected_markup_into_parse_error(monkeypatch):
    def reject(*args, **kwargs):
        raise ParserRejectedMarkup("unparseable")

    monkeypatch.setattr(html_utils, "BeautifulSoup", reject)

    with pytest.raises(ParseError):
        make_soup("<p>")


def test_make_soup_closes_optional_end_tags():
    soup = make_soup("<ul><li>a<li>b</ul><p>x<p>y")

    assert [li.get_text() for li in soup.find_all("li")] == ["a", "b"]
    assert [p.get_text() for p in soup.find_all("p")] == ["x", "y"]
    assert soup.li.find("li") is None


def test_make_soup_keeps_first_duplicated_attribute():
    soup = make_soup('<span itemprop="a" itemprop="b">1</span>')
    assert soup.span["itemprop"] == "a"


def test_decode_utf8_bytes_without_declared_charset():
    assert decode_html("<b>Zoë</b>".encode("utf-8")) == "<b>Zoë</b>"


def test_decode_uses_declared_charset():
    markup = '<meta charset="iso-8859-1"><b>Zoë</b>'.encode("iso-8859-1")
    assert "Zoë" in decode_html(markup)


def test_decode_leaves_text_untouched():
    assert decode_html("<p>ok</p>") == "<p>ok</p>"
