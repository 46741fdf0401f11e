"""
Factories for HTML and SVG elements.

There is one factory per element, named by its canonical name: `Div`,
`Paragraph`, `Anchor`, `SvgCircle`, `SvgGroup`, `Svg`, and so on.  Each
takes any number of modifiers, applies those that aren't `None` in order,
and returns the new node.

  >>> str(Paragraph(Attr("cls", "note"), text("Hello"), None))
  '<p class="note">Hello</p>'

Element documentation: "HTML element reference" and "SVG element reference"
by Mozilla Contributors, https://developer.mozilla.org/, licensed under
CC-BY-SA 2.5.
"""

#-------------------------------------------------------------------------------

from   html import escape
import logging

from   .catalog import build_descriptors, DOC_BASE
from   .exc import ParseError, TemplateFailure
from   .markup import CSSStyle, Markup, Text
from   .parsing import parse_as_root, parse_tree, render_markdown, render_template
from   .tables import HTML_ELEMENTS, SVG_ELEMENTS

LOG = logging.getLogger(__name__)

#-------------------------------------------------------------------------------

def make_element(descriptor):
    """
    Returns the factory function for the element `descriptor` describes.
    """
    tag = descriptor.tag
    self_closing = descriptor.self_closing

    def make_element(*modifiers):
        return Markup(tag, self_closing=self_closing).modify(*modifiers)

    make_element.__name__ = make_element.__qualname__ = descriptor.name
    make_element.__doc__ = (
        f"Builds a <{tag}> element.\n\n"
        f"{descriptor.description}\n\n"
        f"{DOC_BASE}{descriptor.link}\n"
    )
    make_element.descriptor = descriptor
    return make_element


CATALOG = build_descriptors(SVG_ELEMENTS, HTML_ELEMENTS)

ELEMENTS = { n: make_element(d) for n, d in CATALOG.items() }
globals().update(ELEMENTS)

#-------------------------------------------------------------------------------

def space(count):
    """
    Returns a text node of `count` non-breaking spaces.
    """
    return Text("&nbsp;" * max(count, 0))


def text(content, *args):
    """
    Returns a text node, `%`-formatted with `args` if given.
    """
    return Text(content % args if len(args) > 0 else content)


def custom_element(tag, *modifiers):
    """
    Builds an element with an arbitrary tag, for custom elements.

    The element is displayed as a block, unless modifiers say otherwise.
    """
    node = Markup(tag)
    CSSStyle("display", "block").apply(node)
    return node.modify(*modifiers)


def _wrap(nodes, modifiers):
    if len(nodes) > 1:
        root = Markup("section").modify(*nodes)
    else:
        root, = nodes
    return root.modify(*modifiers)


def parse(markup, *modifiers):
    """
    Parses HTML into a node and applies `modifiers` to it.

    If the markup has more than one top-level node, they are wrapped in a
    `<section>`, and the modifiers are applied to that.

    @raise ParseError
      The markup is empty or can't be parsed.
    """
    return _wrap(parse_tree(markup), modifiers)


def parse_in(root, markup, *modifiers):
    """
    Parses HTML into the children of a new `root` element, and applies
    `modifiers` to the root.
    """
    return parse_as_root(root, markup).modify(*modifiers)


def parse_template(markup, bindings, *modifiers):
    """
    Renders a Jinja2 template with `bindings`, then parses it like `parse()`.

    @raise TemplateFailure
      The template couldn't be rendered.
    @raise ParseError
      The rendered markup can't be parsed.
    """
    return _wrap(parse_tree(render_template(markup, bindings)), modifiers)


def _error(exc):
    LOG.error(f"markdown failed: {exc}")
    return Markup("error").modify(Text(escape(str(exc), quote=False)))


def markdown(md):
    """
    Converts Markdown to a node.

    On failure, returns an `<error>` node with the message instead.
    """
    try:
        return parse(render_markdown(md))
    except ParseError as exc:
        return _error(exc)


def markdown_template(md, bindings):
    """
    Renders a Jinja2 template with `bindings` and converts the resulting
    Markdown to a node.

    On failure, returns an `<error>` node with the message instead.
    """
    try:
        return parse(render_markdown(render_template(md, bindings)))
    except (ParseError, TemplateFailure) as exc:
        return _error(exc)


#-------------------------------------------------------------------------------

__all__ = tuple(ELEMENTS) + (
    "CATALOG",
    "ELEMENTS",
    "custom_element",
    "make_element",
    "markdown",
    "markdown_template",
    "parse",
    "parse_in",
    "parse_template",
    "space",
    "text",
)

