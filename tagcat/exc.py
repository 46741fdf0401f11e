"""
Tagcat exceptions.
"""

#-------------------------------------------------------------------------------

class NameDerivationError(ValueError, RuntimeError):
    """
    A tag could not be turned into a valid canonical name.
    """

    def __init__(self, tag, name=None):
        if name is None:
            super().__init__(f"bad tag: {tag!r}")
        else:
            super().__init__(f"bad name for tag {tag!r}: {name!r}")
        self.tag = tag
        self.name = name



class DuplicateNameError(ValueError, RuntimeError):
    """
    A canonical name was claimed by two different tags.
    """

    def __init__(self, name, tag, other):
        super().__init__(f"duplicate name {name}: {tag!r} and {other!r}")
        self.name = name
        self.tag = tag
        self.other = other



class ParseError(RuntimeError):
    """
    Markup could not be parsed into nodes.
    """

    def __init__(self, markup, reason=None):
        message = "can't parse markup"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
        self.markup = markup



class TemplateFailure(RuntimeError):
    """
    A template could not be rendered with its bindings.
    """

    def __init__(self, template, reason=None):
        message = "template failed"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
        self.template = template



