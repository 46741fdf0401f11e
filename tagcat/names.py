"""
Canonical names for element tags.

Each raw tag, such as `"font-face-src"` or `"dl"`, maps to a capitalized
identifier, such as `FontFaceSrc` or `DescriptionList`, used to name its
factory in the catalog.  Names come from `TAG_OVERRIDES` where listed, and
otherwise from camel-joining the hyphenated parts of the tag.

  >>> derive_name("font-face-format")
  'FontFaceFormat'
  >>> derive_name("circle", svg=True)
  'SvgCircle'

"""

#-------------------------------------------------------------------------------

import logging
import re
from   types import MappingProxyType

from   .exc import DuplicateNameError, NameDerivationError

LOG = logging.getLogger(__name__)

#-------------------------------------------------------------------------------

TAG_OVERRIDES = MappingProxyType({
    "g"                 : "Group",
    "font-face-face"    : "Fontface",
    "font-face-format"  : "FontFaceFormat",
    "font-face-name"    : "FontfaceName",
    "font-face-src"     : "FontFaceSrc",
    "font-face-uri"     : "FontfaceURI",
    "missing-glyph"     : "MissingGlyph",
    "a"                 : "Anchor",
    "article"           : "Article",
    "aside"             : "Aside",
    "area"              : "Area",
    "abbr"              : "Abbreviation",
    "b"                 : "Bold",
    "base"              : "Base",
    "bdi"               : "BidirectionalIsolation",
    "bdo"               : "BidirectionalOverride",
    "blockquote"        : "BlockQuote",
    "br"                : "Break",
    "cite"              : "Citation",
    "col"               : "Column",
    "colgroup"          : "ColumnGroup",
    "datalist"          : "DataList",
    "dialog"            : "Dialog",
    "details"           : "Details",
    "dd"                : "Description",
    "del"               : "DeletedText",
    "dfn"               : "Definition",
    "Def"               : "Definition",
    "dl"                : "DescriptionList",
    "dt"                : "DefinitionTerm",
    "G"                 : "Group",
    "em"                : "Emphasis",
    "embed"             : "Embed",
    "footer"            : "Footer",
    "figure"            : "Figure",
    "figcaption"        : "FigureCaption",
    "fieldset"          : "FieldSet",
    "h1"                : "Header1",
    "h2"                : "Header2",
    "h3"                : "Header3",
    "h4"                : "Header4",
    "h5"                : "Header5",
    "h6"                : "Header6",
    "hgroup"            : "HeadingsGroup",
    "header"            : "Header",
    "hr"                : "HorizontalRule",
    "i"                 : "Italic",
    "iframe"            : "InlineFrame",
    "img"               : "Image",
    "ins"               : "InsertedText",
    "kbd"               : "KeyboardInput",
    "keygen"            : "KeyGen",
    "li"                : "ListItem",
    "meta"              : "Meta",
    "menuitem"          : "MenuItem",
    "nav"               : "Navigation",
    "noframes"          : "NoFrames",
    "noscript"          : "NoScript",
    "ol"                : "OrderedList",
    "option"            : "Option",
    "optgroup"          : "OptionsGroup",
    "p"                 : "Paragraph",
    "param"             : "Parameter",
    "pre"               : "Preformatted",
    "q"                 : "Quote",
    "rp"                : "RubyParenthesis",
    "Ref"               : "Reference",
    "rt"                : "RubyText",
    "s"                 : "Strikethrough",
    "samp"              : "Sample",
    "source"            : "Source",
    "section"           : "Section",
    "sub"               : "Subscript",
    "sup"               : "Superscript",
    "tbody"             : "TableBody",
    "textarea"          : "TextArea",
    "td"                : "TableData",
    "tfoot"             : "TableFoot",
    "th"                : "TableHeader",
    "thead"             : "TableHead",
    "tr"                : "TableRow",
    "u"                 : "Underline",
    "ul"                : "UnorderedList",
    "var"               : "Variable",
    "track"             : "Track",
    "wbr"               : "WordBreakOpportunity",
})

# Void elements: no children, no closing tag.
SELF_CLOSING = frozenset({
    "area",
    "base",
    "br",
    "col",
    "command",
    "embed",
    "hr",
    "img",
    "input",
    "keygen",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "use",
    "wbr",
})

SVG_PREFIX = "Svg"

_IDENTIFIER = re.compile(r"[A-Za-z][A-Za-z0-9]*")

#-------------------------------------------------------------------------------

def capitalize(s):
    """
    Upper-cases the first character of `s`, leaving the rest alone.

    Unlike `str.capitalize()`, this preserves inner capitals, so that
    `"feBlend"` becomes `"FeBlend"`.
    """
    return s[: 1].upper() + s[1 :]


def camel_join(s):
    """
    Joins the hyphen-separated parts of `s` in camel case.

      >>> camel_join("font-face-uri")
      'fontFaceUri'

    """
    first, *rest = s.split("-")
    return first + "".join( capitalize(p) for p in rest )


def is_identifier(name):
    return _IDENTIFIER.fullmatch(name) is not None


def derive_name(tag, *, svg=False):
    """
    Derives the canonical name for `tag`.

    @param svg
      If true, the tag is from the SVG element set, and the name is prefixed
      with "Svg" to keep it apart from HTML names, unless it is already.
    @raise NameDerivationError
      `tag` is empty or doesn't produce a valid identifier.
    """
    if not tag:
        raise NameDerivationError(tag)

    name = capitalize(camel_join(TAG_OVERRIDES.get(tag, tag)))
    if svg and not name.startswith(SVG_PREFIX):
        name = SVG_PREFIX + name

    if not is_identifier(name):
        raise NameDerivationError(tag, name)
    return name


def is_self_closing(tag):
    """
    Returns true if `tag` is a void element.
    """
    return tag in SELF_CLOSING


#-------------------------------------------------------------------------------

class NameRegistry:
    """
    Canonical names claimed so far in one catalog build.
    """

    def __init__(self):
        self.__tags = {}


    def __contains__(self, name):
        return name in self.__tags


    def __len__(self):
        return len(self.__tags)


    @property
    def names(self):
        """
        Claimed names, in the order claimed.
        """
        return tuple(self.__tags)


    def claim(self, name, tag):
        """
        Claims `name` for `tag`.

        @raise DuplicateNameError
          `name` has already been claimed.
        """
        try:
            other = self.__tags[name]
        except KeyError:
            self.__tags[name] = tag
            LOG.debug(f"claimed {name} for {tag!r}")
            return name
        else:
            raise DuplicateNameError(name, tag, other)



