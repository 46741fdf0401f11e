from   pathlib import Path

import pytest

import tagcat.tables
from   tagcat.__main__ import main
from   tagcat.exc import DuplicateNameError, NameDerivationError
from   tagcat.generate import (
    first_sentence, render_tables, scrape_html_index, scrape_svg_index,
    tag_from_text)
from   tagcat.tables import HTML_ELEMENTS, SVG_ELEMENTS

#-------------------------------------------------------------------------------

SVG_INDEX = """
<html><body>
<div class="index"><ul>
<li><a href="/en-US/docs/Web/SVG/Element/circle"
       title="The &lt;circle&gt; SVG element is a basic shape.  It draws circles."
    ><code>&lt;circle&gt;</code></a></li>
<li><a href="/en-US/docs/Web/SVG/Element/altGlyph" title="Old."
    ><code>&lt;altGlyph&gt;</code></a> <i class="icon icon-trash"></i></li>
<li><a href="/en-US/docs/Web/SVG/Element/g" title="Groups."
    ><code>&lt;g&gt;</code></a></li>
<li><a href="/en-US/docs/Web/SVG/Element/circle" title="Again."
    ><code>&lt;circle&gt;</code></a></li>
<li><a href="/en-US/docs/Web/SVG/Element/font-face" title="Font face."
    ><code>&lt;font-face&gt;</code></a></li>
<li><a href="/en-US/docs/Web/SVG/Element/svg" title="Root."
    ><code>&lt;svg&gt;</code></a></li>
<li><a href="/en-US/docs/Web/SVG/Attribute/x" title="Attribute."
    ><code>x</code></a></li>
</ul></div>
<ul><li><a href="/en-US/docs/Web/SVG/Element/rect" title="Not indexed."
    >&lt;rect&gt;</a></li></ul>
</body></html>
"""

HTML_INDEX = """
<html><body>
<nav class="sidebar quick-links"><ul>
<li><a href="/en-US/docs/Web/HTML/Element/html" title="Root."
    ><code>&lt;html&gt;</code></a></li>
<li><a href="/en-US/docs/Web/HTML/Element/div" title="Container."
    >&lt;div&gt;</a></li>
<li><a href="/en-US/docs/Web/HTML/Element/Heading_Elements" title="Headings."
    >Heading elements</a></li>
<li><a href="/en-US/docs/Web/HTML/Element/Heading_Elements" title="Headings."
    >&lt;h1&gt;–&lt;h6&gt;</a></li>
<li><a href="/en-US/docs/Web/HTML/Element/blink" title="Blinks."
    ><code>&lt;blink&gt;</code></a><span class="icon-thumbs-down-alt"></span></li>
<li><a href="/en-US/docs/Web/HTML/Element/input/button" title="Button."
    >&lt;input type="button"&gt;</a></li>
<li><a href="/en-US/docs/Web/HTML/Element/img" title="Image."
    >&lt;img&gt;</a></li>
<li><a href="/en-US/docs/Web/API/HTMLElement" title="API."
    >HTMLElement</a></li>
</ul></nav>
</body></html>
"""

#-------------------------------------------------------------------------------

def test_first_sentence():
    assert first_sentence("One.  Two.") == "One."
    assert first_sentence("No end") == "No end"
    assert first_sentence("  Spread\n  out. More. ") == "Spread out."
    assert first_sentence("") == ""


def test_tag_from_text():
    assert tag_from_text("<circle>") == "circle"
    assert tag_from_text(" <font-face> ") == "font-face"
    assert tag_from_text("Heading elements") == "Heading elements"


def test_scrape_svg():
    entries = list(scrape_svg_index(SVG_INDEX))
    assert entries == [
        ("circle", "The <circle> SVG element is a basic shape.",
         "/en-US/docs/Web/SVG/Element/circle"),
        ("g", "Groups.", "/en-US/docs/Web/SVG/Element/g"),
        ("font-face", "Font face.", "/en-US/docs/Web/SVG/Element/font-face"),
        ("svg", "Root.", "/en-US/docs/Web/SVG/Element/svg"),
    ]


def test_scrape_html():
    entries = list(scrape_html_index(HTML_INDEX))
    assert [ e[0] for e in entries ] \
        == ["div", "h1", "h2", "h3", "h4", "h5", "h6", "img"]
    h4 = entries[4]
    assert h4 == (
        "h4", "Headings.", "/en-US/docs/Web/HTML/Element/Heading_Elements")


#-------------------------------------------------------------------------------

def test_render_tables_matches_module():
    path = Path(tagcat.tables.__file__)
    assert render_tables(SVG_ELEMENTS, HTML_ELEMENTS) \
        == path.read_text(encoding="utf-8")


def test_table_descriptions_are_first_sentences():
    for tag, description in SVG_ELEMENTS + HTML_ELEMENTS:
        assert first_sentence(description) == description, tag


def test_render_tables_deterministic():
    svg = list(scrape_svg_index(SVG_INDEX))
    html = list(scrape_html_index(HTML_INDEX))
    assert render_tables(svg, html) == render_tables(svg, html)


def test_render_tables_loads():
    svg = list(scrape_svg_index(SVG_INDEX))
    html = list(scrape_html_index(HTML_INDEX))
    namespace = {}
    exec(render_tables(svg, html), namespace)
    assert namespace["SVG_ELEMENTS"][0] \
        == ("circle", "The <circle> SVG element is a basic shape.")
    assert len(namespace["HTML_ELEMENTS"]) == 8


def test_render_tables_quotes():
    source = render_tables([("pattern", 'Tiles ("tiled") things.')], [])
    assert '("pattern", "Tiles (\\"tiled\\") things."),' in source


def test_render_tables_errors():
    with pytest.raises(DuplicateNameError):
        render_tables([], [("dfn", "A."), ("Def", "B.")])
    with pytest.raises(NameDerivationError):
        render_tables([], [("foo bar", "Bad.")])


#-------------------------------------------------------------------------------

def _write_indexes(tmp_path):
    svg = tmp_path / "svg.html"
    svg.write_text(SVG_INDEX, encoding="utf-8")
    html = tmp_path / "html.html"
    html.write_text(HTML_INDEX, encoding="utf-8")
    return svg, html


def test_main_output(tmp_path):
    svg, html = _write_indexes(tmp_path)
    out = tmp_path / "tables.py"
    main(["--svg", str(svg), "--html", str(html), "-o", str(out)])
    source = out.read_text(encoding="utf-8")
    assert '("font-face", "Font face."),' in source
    assert '("img", "Image."),' in source


def test_main_stdout(tmp_path, capsys):
    svg, html = _write_indexes(tmp_path)
    main(["--svg", str(svg), "--html", str(html), "--log", "debug"])
    assert "HTML_ELEMENTS = (" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["--svg", str(tmp_path / "nope"), "--html", str(tmp_path / "no")])
    assert info.value.code == 2


