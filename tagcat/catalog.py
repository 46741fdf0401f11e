"""
Element descriptors.

A descriptor records what the catalog needs to build one element factory:
the raw tag, its canonical name, whether it is self-closing, and its
documentation.
"""

#-------------------------------------------------------------------------------

from   collections import namedtuple, OrderedDict
import logging

from   .names import derive_name, is_self_closing, NameRegistry

LOG = logging.getLogger(__name__)

#-------------------------------------------------------------------------------

DOC_BASE = "https://developer.mozilla.org"
SVG_DOC_PATH = "/en-US/docs/Web/SVG/Element/"
HTML_DOC_PATH = "/en-US/docs/Web/HTML/Element/"

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
HEADING_DOC_PATH = HTML_DOC_PATH + "Heading_Elements"

ElementDescriptor = namedtuple(
    "ElementDescriptor",
    ("tag", "name", "self_closing", "description", "link")
)


def doc_link(tag, *, svg=False):
    """
    Returns the documentation path for `tag`, relative to `DOC_BASE`.
    """
    if svg:
        return SVG_DOC_PATH + tag
    elif tag in HEADING_TAGS:
        return HEADING_DOC_PATH
    else:
        return HTML_DOC_PATH + tag


def describe(tag, description, *, svg=False, link=None):
    """
    Builds the descriptor for one element.

    @param link
      The documentation path; if `None`, derived from `tag`.
    """
    return ElementDescriptor(
        tag         =tag,
        name        =derive_name(tag, svg=svg),
        self_closing=is_self_closing(tag),
        description =description,
        link        =doc_link(tag, svg=svg) if link is None else link,
    )


def _unique(entries, kind):
    seen = set()
    for entry in entries:
        tag = entry[0]
        if tag in seen:
            LOG.debug(f"skipping duplicate {kind} tag: {tag}")
            continue
        seen.add(tag)
        yield entry


def build_descriptors(svg_entries, html_entries):
    """
    Builds descriptors for the SVG and then the HTML elements.

    Each entry is `(tag, description)` or `(tag, description, link)`.  A tag
    that repeats within its collection is skipped; the first one wins.

    @return
      Ordered mapping from canonical name to descriptor.
    @raise NameDerivationError
      A tag doesn't produce a valid name.
    @raise DuplicateNameError
      Two tags produce the same name.
    """
    registry = NameRegistry()
    descriptors = OrderedDict()

    for kind, entries in (("SVG", svg_entries), ("HTML", html_entries)):
        svg = kind == "SVG"
        for tag, description, *link in _unique(entries, kind):
            desc = describe(
                tag, description, svg=svg, link=link[0] if link else None)
            registry.claim(desc.name, tag)
            descriptors[desc.name] = desc

    LOG.debug(f"built {len(descriptors)} element descriptors")
    return descriptors



