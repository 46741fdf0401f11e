"""
Factories for HTML and SVG markup nodes.

  >>> from tagcat import Div, Attr, text
  >>> str(Div(Attr("id", "main"), text("hello")))
  '<div id="main">hello</div>'

"""

from   .stylesheet import css, plain_css, Stylesheet
from   .elements import *
from   .elements import __all__ as _elements_all
from   .exc import DuplicateNameError, NameDerivationError, ParseError, TemplateFailure
from   .markup import Attr, CSSStyle, Event, Markup, Text

__all__ = _elements_all + (
    "Attr",
    "CSSStyle",
    "DuplicateNameError",
    "Event",
    "Markup",
    "NameDerivationError",
    "ParseError",
    "Stylesheet",
    "TemplateFailure",
    "Text",
    "css",
    "plain_css",
)

