import logging

from webnav.dom.utils import element_children
from .context import NEGATE
from .html_navigation import HtmlNavigation

logger = logging.getLogger(__name__)


class ChildrenNavigation(HtmlNavigation):
    """Element children of the first node."""

    def navigate_this_level(self):
        nodes = self.get_node_list()
        # TODO: take the children of every node, not only the first
        children = element_children(nodes[0]) if nodes else []
        self.set_node_list(children)
        return len(children) != 0

    def __repr__(self):
        return "children"


class ParentNavigation(HtmlNavigation):
    def navigate_this_level(self):
        nodes = self.get_node_list()
        parents = []
        if nodes and nodes[0].parent is not None:
            parents.append(nodes[0].parent)
        self.set_node_list(parents)
        return len(parents) != 0

    def __repr__(self):
        return "parent"


class IndexNavigation(HtmlNavigation):
    def __init__(self, parent, index):
        super().__init__(parent)
        self.index_value = index

    def navigate_this_level(self):
        nodes = self.get_node_list()
        if not 0 <= self.index_value < len(nodes):
            return False
        self.set_node_list([nodes[self.index_value]])
        return True

    def __repr__(self):
        return "index({})".format(self.index_value)


class LastIndexNavigation(HtmlNavigation):
    def navigate_this_level(self):
        nodes = self.get_node_list()
        if not nodes:
            return False
        self.set_node_list([nodes[-1]])
        return True

    def __repr__(self):
        return "last"


class SiblingNavigation(HtmlNavigation):
    """Element siblings on one side of the first node, at every level up to
    the document root, in document order."""

    following = False

    def navigate_this_level(self):
        nodes = self.get_node_list()
        current = nodes[0] if nodes else None
        groups = []
        while current is not None and current.parent is not None:
            siblings = current.parent.children
            position = next((i for i, node in enumerate(siblings) if node is current), None)
            if position is None:
                # Detached from its parent, e.g. replaced text
                break
            group = siblings[position + 1:] if self.following else siblings[:position]
            groups.append([node for node in group if node.is_element()])
            current = current.parent

        # Preceding groups are collected innermost first
        if not self.following:
            groups.reverse()
        results = [node for group in groups for node in group]
        logger.debug("%s collected %d node(s)", self, len(results))
        self.set_node_list(results)
        return len(results) != 0


class BeforeNavigation(SiblingNavigation):
    following = False

    def __repr__(self):
        return "before"


class AfterNavigation(SiblingNavigation):
    following = True

    def __repr__(self):
        return "after"


class CountNavigation(HtmlNavigation):
    """Checks the size of the node list, which it leaves unchanged."""

    def __init__(self, parent, count):
        super().__init__(parent)
        self.count = count

    def compare(self, size):
        raise NotImplementedError

    def navigate_this_level(self):
        negate = self.context.has_ephemeral(NEGATE)
        return negate != self.compare(len(self.get_node_list()))


class ContainsExactlyNavigation(CountNavigation):
    def compare(self, size):
        return size == self.count

    def __repr__(self):
        return "exactly({})".format(self.count)


class ContainsAtLeastNavigation(CountNavigation):
    def compare(self, size):
        return size >= self.count

    def __repr__(self):
        return "at_least({})".format(self.count)


class ContainsAtMostNavigation(CountNavigation):
    def compare(self, size):
        return size <= self.count

    def __repr__(self):
        return "at_most({})".format(self.count)
