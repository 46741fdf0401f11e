import pytest

from   tagcat.exc import TemplateFailure
from   tagcat.markup import Attr, Markup
from   tagcat.stylesheet import css, plain_css, selector_for, Stylesheet

#-------------------------------------------------------------------------------

def test_selector_for():
    assert selector_for(Markup("nav")) == "nav"
    assert selector_for(Markup("nav").modify(Attr("id", "top"))) == "#top"


def test_scoped():
    sheet = css("& a { color: {{ color }}; }", {"color": "red"})
    assert isinstance(sheet, Stylesheet)
    assert sheet.tag == "style"
    assert not sheet.plain
    assert sheet.scope is None
    assert sheet.text == "& a { color: red; }"

    nav = Markup("nav").modify(Attr("id", "top"), sheet)
    assert sheet.scope == "#top"
    assert sheet.text == "#top a { color: red; }"
    assert str(nav) == '<nav id="top"><style>#top a { color: red; }</style></nav>'


def test_scoped_without_id():
    sheet = css("&:hover { color: blue; }")
    Markup("section").modify(sheet)
    assert sheet.text == "section:hover { color: blue; }"


def test_plain():
    sheet = plain_css("body { margin: {{ m }}; }", {"m": 0})
    Markup("head").modify(sheet)
    assert sheet.plain
    assert sheet.scope is None
    assert str(sheet) == "<style>body { margin: 0; }</style>"


def test_extension_text():
    sheet = css(
        "& b { font-weight: bold; }",
        {"font": "Helvetica"},
        "& { font-family: {{ font }}; }",
    )
    assert sheet.rules \
        == "& { font-family: Helvetica; }\n& b { font-weight: bold; }"


def test_extension_sheet():
    base = plain_css("p { color: black; }")
    sheet = plain_css("a { color: blue; }", None, base)
    assert sheet.rules == "p { color: black; }\na { color: blue; }"


def test_format():
    sheet = plain_css("a { }\nb { }")
    assert list(sheet.format()) == ["<style>", " a { }", " b { }", "</style>"]


def test_failure():
    with pytest.raises(TemplateFailure):
        css("& { color: {{ color }}; }", {})


def test_runtime_failure():
    with pytest.raises(TemplateFailure):
        css("& { width: {{ 10 / w }}px; }", {"w": 0})
    with pytest.raises(TemplateFailure):
        plain_css("a { }", None, "b { width: {{ w + 1 }}; }")


