"""
Regenerates `tagcat.tables` from the MDN element reference.

Works from saved copies of the SVG and HTML element index pages:

  https://developer.mozilla.org/en-US/docs/Web/SVG/Element
  https://developer.mozilla.org/en-US/docs/Web/HTML/Element

"""

#-------------------------------------------------------------------------------

import logging
import re

import lxml.html

from   .catalog import build_descriptors, HEADING_TAGS, HTML_DOC_PATH, SVG_DOC_PATH

LOG = logging.getLogger(__name__)

#-------------------------------------------------------------------------------

# Markers MDN puts next to obsolete, deprecated, and non-standard elements.
SKIP_MARKERS = (
    "icon-trash",
    "icon-thumbs-down-alt",
    "icon-warning-sign",
)

# Document structure elements, which aren't built with factories.
HTML_SKIP_TAGS = frozenset({"html", "head", "body"})

# Link texts of the single index entry covering <h1> through <h6>.
HEADING_TEXTS = frozenset({"Heading elements", "<h1>–<h6>"})

_UNWANTED = re.compile(r"[^\w-]")


def _has_class(name):
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"


SVG_LINKS = f"//*[{_has_class('index')}]//ul/li/a"
HTML_LINKS = f"//*[{_has_class('quick-links')}]//a"
_MARKED = ".//*[" + " or ".join( _has_class(m) for m in SKIP_MARKERS ) + "]"

#-------------------------------------------------------------------------------

def first_sentence(text):
    """
    Returns the first sentence of `text`, with whitespace normalized.
    """
    text = " ".join(text.split())
    end = text.find(". ")
    return text if end < 0 else text[: end + 1]


def tag_from_text(text):
    """
    Extracts the tag from link text such as `"<circle>"`.
    """
    text = text.strip()
    if text.startswith("<") and text.endswith(">"):
        text = text[1 : -1]
    return text


def _links(html, xpath, prefix):
    """
    Generates `(text, description, link)` for usable index links.
    """
    doc = lxml.html.fromstring(html)
    for anchor in doc.xpath(xpath):
        link = anchor.get("href", "")
        if not link.startswith(prefix):
            continue

        text = anchor.text_content().strip()
        parent = anchor.getparent()
        if parent is not None and len(parent.xpath(_MARKED)) > 0:
            LOG.debug(f"skipping deprecated: {text}")
            continue

        yield text, first_sentence(anchor.get("title", "")), link


def _accept(tag, seen):
    if tag in seen:
        LOG.debug(f"skipping duplicate: {tag}")
        return False
    if tag == "" or _UNWANTED.search(tag) is not None:
        LOG.debug(f"skipping unusable tag: {tag!r}")
        return False
    seen.add(tag)
    return True


def scrape_svg_index(html):
    """
    Scrapes the SVG element index page.

    @return
      Generates `(tag, description, link)` entries in page order.
    """
    seen = set()
    for text, description, link in _links(html, SVG_LINKS, SVG_DOC_PATH):
        tag = tag_from_text(text)
        if _accept(tag, seen):
            yield tag, description, link


def scrape_html_index(html):
    """
    Scrapes the HTML element index page.

    The heading elements entry expands to one entry per heading level.

    @return
      Generates `(tag, description, link)` entries in page order.
    """
    seen = set()
    for text, description, link in _links(html, HTML_LINKS, HTML_DOC_PATH):
        if text in HEADING_TEXTS:
            tags = HEADING_TAGS
        else:
            tags = (tag_from_text(text), )

        for tag in tags:
            if tag in HTML_SKIP_TAGS:
                continue
            if _accept(tag, seen):
                yield tag, description, link


#-------------------------------------------------------------------------------

HEADER = '''"""
Element tables.

Generated by `python -m tagcat` from the MDN element reference; do not edit.

Documentation source: "SVG element reference" and "HTML element reference"
by Mozilla Contributors, https://developer.mozilla.org/, licensed under
CC-BY-SA 2.5.
"""

# (tag, description) in documentation order.
'''

def _quote(s):
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _format_table(name, entries):
    yield ""
    yield f"{name} = ("
    for tag, description, *_ in entries:
        yield f"    ({_quote(tag)}, {_quote(description)}),"
    yield ")"


def render_tables(svg_entries, html_entries):
    """
    Renders the source of the tables module.

    @raise NameDerivationError
      A tag doesn't produce a valid name.
    @raise DuplicateNameError
      Two tags produce the same name.
    """
    svg_entries = list(svg_entries)
    html_entries = list(html_entries)
    # Fail before writing anything the catalog couldn't load.
    descriptors = build_descriptors(svg_entries, html_entries)
    LOG.info(
        f"{len(svg_entries)} SVG and {len(html_entries)} HTML elements; "
        f"{len(descriptors)} names")

    lines = [HEADER.rstrip("\n")]
    lines.extend(_format_table("SVG_ELEMENTS", svg_entries))
    lines.extend(_format_table("HTML_ELEMENTS", html_entries))
    return "\n".join(lines) + "\n\n"


