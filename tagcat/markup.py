"""
A lightweight markup tree.

A `Markup` node has a tag, attributes, styles, event bindings, and children.
Nodes are built up by applying modifiers: any object with an `apply(node)`
method.  `Attr`, `CSSStyle`, and `Event` are modifiers, and so are nodes
themselves; applying a node to another appends it as a child.

  >>> div = Markup("div").modify(Attr("id", "main"), Markup("br", self_closing=True))
  >>> str(div)
  '<div id="main"><br/></div>'

"""

#-------------------------------------------------------------------------------

from   html import escape

#-------------------------------------------------------------------------------

class Markup:

    def __init__(self, tag, *, self_closing=False):
        self.__tag = tag
        self.__self_closing = bool(self_closing)
        self.__attrs = {}
        self.__styles = {}
        self.__events = []
        self.__children = []


    def __repr__(self):
        return f"{type(self).__name__}({self.__tag!r})"


    @property
    def tag(self):
        return self.__tag


    @property
    def self_closing(self):
        return self.__self_closing


    @property
    def attrs(self):
        return dict(self.__attrs)


    @property
    def styles(self):
        return dict(self.__styles)


    @property
    def events(self):
        return tuple(self.__events)


    @property
    def children(self):
        return tuple(self.__children)


    def __getitem__(self, name):
        return self.__attrs[name]


    def __setitem__(self, name, value):
        if name == "cls":
            name = "class"
        if name == "fr":
            name = "for"

        if name == "class" and isinstance(value, (list, tuple)):
            value = " ".join( str(c) for c in value )

        self.__attrs[name] = value


    def set_style(self, name, value):
        self.__styles[name] = value


    def bind(self, event):
        self.__events.append(event)


    def append(self, child):
        """
        Appends `child` and returns it.

        @raise ValueError
          This is a self-closing node, which can't have children.
        """
        if self.__self_closing:
            raise ValueError(f"self-closing <{self.__tag}> can't have children")
        self.__children.append(child)
        return child


    def modify(self, *modifiers):
        """
        Applies `modifiers` in order, skipping any that are `None`.

        @return
          This node.
        """
        for modifier in modifiers:
            if modifier is None:
                continue
            modifier.apply(self)
        return self


    def apply(self, parent):
        parent.append(self)


    # Why not __iadd__?  We want to use an expression operator, rather than
    # an assignment statement, so that we can return the (rightmost) child.
    # This enables code like,
    #
    #   child = parent << Div(...)
    #
    __lshift__ = append

    #---------------------------------------------------------------------------
    # Serialization

    @property
    def start_tag(self):
        attrs = dict(self.__attrs)
        if len(self.__styles) > 0:
            attrs["style"] = "; ".join(
                f"{n}: {v}" for n, v in self.__styles.items() )

        parts = [self.__tag] + [
            n if v is None else f'{n}="{escape(str(v))}"'
            for n, v in attrs.items()
        ]
        end = "/>" if self.__self_closing else ">"
        return "<" + " ".join(parts) + end


    @property
    def end_tag(self):
        return "" if self.__self_closing else f"</{self.__tag}>"


    def __str__(self):
        return (
              self.start_tag
            + "".join( str(c) for c in self.__children )
            + self.end_tag
        )


    def format(self, indent=0):
        """
        Generates lines of indented HTML.
        """
        yield " " * indent + self.start_tag
        for child in self.__children:
            yield from child.format(indent + 1)
        if not self.__self_closing:
            yield " " * indent + self.end_tag



class Text:
    """
    A text node.

    The content is emitted as is, so it may contain entity references such as
    `&nbsp;`.  Escape it first if it may contain markup characters.
    """

    def __init__(self, content=""):
        self.content = content


    def __repr__(self):
        return f"Text({self.content!r})"


    def __str__(self):
        return self.content


    def apply(self, parent):
        parent.append(self)


    def format(self, indent=0):
        if len(self.content) > 0:
            yield " " * indent + self.content



#-------------------------------------------------------------------------------

class Attr:
    """
    Sets an attribute.  A value of `None` produces a bare attribute.
    """

    def __init__(self, name, value=None):
        self.name = name
        self.value = value


    def apply(self, node):
        node[self.name] = self.value



class CSSStyle:
    """
    Sets an inline style property.
    """

    def __init__(self, name, value):
        self.name = name
        self.value = value


    def apply(self, node):
        node.set_style(self.name, self.value)



class Event:
    """
    Binds a handler to an event type, e.g. `Event("click", on_click)`.

    Bindings are kept on the node for whoever mounts it; they are not
    serialized.
    """

    def __init__(self, kind, handler):
        self.kind = kind
        self.handler = handler


    def __repr__(self):
        return f"Event({self.kind!r}, {self.handler!r})"


    def apply(self, node):
        node.bind(self)



