import re

from webnav.dom.nodes import Element
from webnav.dom.utils import as_text


class Matcher:
    """Compares one string taken from a node against a target.

    With pattern=True the target is a regular expression that has to match
    the whole candidate string.
    """

    def __init__(self, target, pattern=False, flags=0):
        self.target = target
        self.regex = re.compile(target, flags) if pattern else None

    def applies(self, node):
        return True

    def candidate(self, node):
        raise NotImplementedError

    def compare(self, candidate):
        if candidate is None:
            return False
        if self.regex is not None:
            return self.regex.fullmatch(candidate) is not None
        return candidate == self.target

    def matches(self, node):
        return self.compare(self.candidate(node))


class ElementNameMatcher(Matcher):
    def __init__(self, name, pattern=False):
        # Patterns are matched as written against the lower-cased tag name
        super().__init__(name if pattern else name.casefold(), pattern)

    def applies(self, node):
        return isinstance(node, Element)

    def candidate(self, node):
        return node.tag.casefold()

    def __repr__(self):
        return "element({})".format(self.target)


class AttributeMatcher(Matcher):
    def __init__(self, name, value, pattern=False):
        super().__init__(value, pattern)
        self.name = name

    def applies(self, node):
        return isinstance(node, Element)

    def candidate(self, node):
        return node.get_attribute(self.name)

    def __repr__(self):
        return "attribute({}, {})".format(self.name, self.target)


class TextMatcher(Matcher):
    def candidate(self, node):
        return as_text(node)

    def __repr__(self):
        return "text({})".format(self.target)
