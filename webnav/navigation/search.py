import logging

from webnav.dom.utils import tree_to_list
from .context import DEEP, NEGATE, PATTERN
from .html_navigation import HtmlNavigation
from .matchers import AttributeMatcher, ElementNameMatcher, TextMatcher

logger = logging.getLogger(__name__)


def search_nodes(nodes, matcher, negate=False, deep=False):
    """Select the nodes accepted by matcher.

    A shallow search looks only at nodes; a deep search also looks at every
    descendant, in document order. Returns (results, found).
    """
    if deep:
        candidates = []
        for node in nodes:
            tree_to_list(node, candidates)
    else:
        candidates = nodes

    results = []
    seen = set()
    for node in candidates:
        if id(node) in seen:
            continue
        seen.add(id(node))
        if matcher.applies(node) and matcher.matches(node) != negate:
            results.append(node)
    return results, len(results) != 0


class SearchNavigation(HtmlNavigation):
    """Base for searches. Honors the not, deep and pattern markers."""

    def make_matcher(self, pattern):
        raise NotImplementedError

    def navigate_this_level(self):
        ctx = self.context
        negate = ctx.has_ephemeral(NEGATE)
        deep = ctx.has_ephemeral(DEEP)
        matcher = self.make_matcher(ctx.has_ephemeral(PATTERN))

        results, found = search_nodes(self.get_node_list(), matcher, negate, deep)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s%s%s matched %d node(s)", "not " if negate else "",
                         "deep " if deep else "", matcher, len(results))
        self.set_node_list(results)
        return found


class MatchElementNavigation(SearchNavigation):
    def __init__(self, parent, name):
        super().__init__(parent)
        self.element_name = name

    def make_matcher(self, pattern):
        return ElementNameMatcher(self.element_name, pattern)

    def __repr__(self):
        return "element({})".format(self.element_name)


class MatchAttributeNavigation(SearchNavigation):
    def __init__(self, parent, name, value):
        super().__init__(parent)
        self.attribute_name = name
        self.attribute_value = value

    def make_matcher(self, pattern):
        return AttributeMatcher(self.attribute_name, self.attribute_value, pattern)

    def __repr__(self):
        return "attribute({}, {})".format(self.attribute_name, self.attribute_value)


class MatchTextNavigation(SearchNavigation):
    def __init__(self, parent, value):
        super().__init__(parent)
        self.text_value = value

    def make_matcher(self, pattern):
        return TextMatcher(self.text_value, pattern)

    def __repr__(self):
        return "text({})".format(self.text_value)
