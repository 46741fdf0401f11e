"""
Stylesheet nodes.

A stylesheet is a `<style>` node built from rule text.  Rule text is a
Jinja2 template rendered with bindings.  A scoped stylesheet rewrites `&` in
its rules to a selector for the element it is applied to:

  >>> sheet = css("& a { color: {{ color }}; }", {"color": "red"})
  >>> nav = Markup("nav").modify(Attr("id", "top"), sheet)
  >>> sheet.text
  '#top a { color: red; }'

"""

#-------------------------------------------------------------------------------

import logging

from   .markup import Markup
from   .parsing import render_template

LOG = logging.getLogger(__name__)

SCOPE = "&"

#-------------------------------------------------------------------------------

def selector_for(node):
    """
    Returns a CSS selector for `node`: its id if it has one, else its tag.
    """
    id = node.attrs.get("id")
    return node.tag if id is None else f"#{id}"


class Stylesheet(Markup):

    def __init__(self, rules, *, plain=False):
        super().__init__("style")
        self.__rules = rules
        self.__plain = bool(plain)
        self.__scope = None


    @property
    def rules(self):
        """
        The rendered rules, before scoping.
        """
        return self.__rules


    @property
    def plain(self):
        return self.__plain


    @property
    def scope(self):
        """
        The selector `&` is replaced with, or `None` if not yet mounted.
        """
        return self.__scope


    @property
    def text(self):
        if self.__scope is None:
            return self.__rules
        return self.__rules.replace(SCOPE, self.__scope)


    def apply(self, parent):
        if not self.__plain:
            self.__scope = selector_for(parent)
            LOG.debug(f"scoped stylesheet to {self.__scope}")
        super().apply(parent)


    def __str__(self):
        return self.start_tag + self.text + self.end_tag


    def format(self, indent=0):
        yield " " * indent + self.start_tag
        for line in self.text.splitlines():
            yield " " * (indent + 1) + line
        yield " " * indent + self.end_tag



def build_stylesheet(rules, bindings=None, extension=None, plain=False):
    """
    Builds a stylesheet node.

    @param rules
      Rule text, as a Jinja2 template.
    @param bindings
      Bindings for rendering `rules` and `extension`.
    @param extension
      Base rule text or another `Stylesheet`, whose rules precede `rules`.
    @param plain
      If true, the sheet isn't scoped to the element it's applied to.
    @raise TemplateFailure
      The rules couldn't be rendered.
    """
    text = render_template(rules, bindings).strip()
    if isinstance(extension, Stylesheet):
        text = extension.rules + "\n" + text
    elif extension is not None:
        text = render_template(extension, bindings).strip() + "\n" + text
    return Stylesheet(text, plain=plain)


def css(rules, bindings=None, extension=None):
    """
    Builds a stylesheet scoped to the element it is applied to.
    """
    return build_stylesheet(rules, bindings, extension, plain=False)


def plain_css(rules, bindings=None, extension=None):
    """
    Builds an unscoped stylesheet.
    """
    return build_stylesheet(rules, bindings, extension, plain=True)


