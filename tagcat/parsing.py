"""
Parsing markup, templates, and Markdown into markup nodes.
"""

#-------------------------------------------------------------------------------

from   collections.abc import Mapping
from   html import escape
import logging

import jinja2
import lxml.etree
import lxml.html
import markdown

from   .exc import ParseError, TemplateFailure
from   .markup import Markup, Text
from   .names import is_self_closing

LOG = logging.getLogger(__name__)

#-------------------------------------------------------------------------------

MARKDOWN_EXTENSIONS = (
    "codehilite",
    "fenced_code",
)

_TEMPLATES = jinja2.Environment(
    autoescape=False,
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
)

#-------------------------------------------------------------------------------

def _parse_style(style):
    for decl in style.split(";"):
        name, sep, value = decl.partition(":")
        if sep and name.strip():
            yield name.strip(), value.strip()


def _text(text):
    return Text(escape(text, quote=False))


def _convert(element):
    """
    Converts an lxml element to a `Markup` node, recursively.
    """
    tag = element.tag
    node = Markup(tag, self_closing=is_self_closing(tag))
    for name, value in element.attrib.items():
        if name == "style":
            for n, v in _parse_style(value):
                node.set_style(n, v)
        else:
            node[name] = value

    if node.self_closing:
        if element.text or len(element) > 0:
            LOG.warning(f"dropping content of self-closing <{tag}>")
        return node

    if element.text:
        node.append(_text(element.text))
    for child in element:
        # Skip comments and processing instructions, but keep their tails.
        if isinstance(child.tag, str):
            node.append(_convert(child))
        if child.tail:
            node.append(_text(child.tail))
    return node


def parse_tree(markup):
    """
    Parses an HTML fragment into markup nodes.

    Top-level text that is only whitespace is dropped.

    @return
      A list of the top-level nodes.
    @raise ParseError
      The markup is empty or can't be parsed.
    """
    if markup is None or markup.strip() == "":
        raise ParseError(markup, "empty markup")

    try:
        fragments = lxml.html.fragments_fromstring(markup)
    except (lxml.etree.LxmlError, ValueError) as exc:
        raise ParseError(markup, exc) from exc

    nodes = []
    for fragment in fragments:
        if isinstance(fragment, str):
            if fragment.strip() != "":
                nodes.append(_text(fragment))
            continue
        if isinstance(fragment.tag, str):
            nodes.append(_convert(fragment))
        if fragment.tail and fragment.tail.strip() != "":
            nodes.append(_text(fragment.tail))

    if len(nodes) == 0:
        raise ParseError(markup, "no nodes")
    return nodes


def parse_as_root(root, markup):
    """
    Parses `markup` into the children of a new `root` node.

    Empty markup produces an empty root.
    """
    node = Markup(root, self_closing=is_self_closing(root))
    if markup is not None and markup.strip() != "":
        node.modify(*parse_tree(markup))
    return node


#-------------------------------------------------------------------------------

def _context(bindings):
    if bindings is None:
        return {}
    elif isinstance(bindings, Mapping):
        return dict(bindings)
    else:
        return {"bind": bindings}


def render_template(template, bindings=None):
    """
    Renders a Jinja2 template string.

    @param bindings
      A mapping supplies the template's variables.  Any other object is
      available in the template as `bind`.
    @raise TemplateFailure
      The template is malformed, refers to something undefined, or raises
      while rendering.
    """
    try:
        return _TEMPLATES.from_string(template).render(_context(bindings))
    except jinja2.TemplateError as exc:
        raise TemplateFailure(template, exc) from exc
    except Exception as exc:
        # Errors raised by expressions or bound objects while rendering.
        raise TemplateFailure(template, f"{type(exc).__name__}: {exc}") from exc


def render_markdown(text):
    """
    Converts Markdown to HTML.  Fenced code blocks are highlighted with
    Pygments.
    """
    return markdown.markdown(
        text, output_format="html", extensions=MARKDOWN_EXTENSIONS)


