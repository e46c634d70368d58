"""
Navigations over parsed HTML documents.

HtmlNavigation adds the node list (kept on the persistent context), result
accessors, and one factory method per kind of navigation so chains can be
written fluently:

    nav.page_navigation().deep().form().children().not_().type("hidden")

Searches (element, attribute, text and their shortcuts) look only at the
current node list unless preceded by deep(), compare literally unless
preceded by pattern(), and are inverted by not_().
"""

from webnav.dom import forms
from webnav.dom.utils import as_text
from .chain import Navigation
from .context import NAVIGATOR, NODES
from .errors import NavigationError


def _element_shortcut(tag):
    def shortcut(self):
        return search.MatchElementNavigation(self, tag)
    shortcut.__name__ = tag
    shortcut.__doc__ = "Search for {} elements.".format(tag)
    return shortcut


def _attribute_shortcut(attribute):
    def shortcut(self, value):
        return search.MatchAttributeNavigation(self, attribute, value)
    shortcut.__doc__ = "Search for elements by their {} attribute.".format(attribute)
    return shortcut


class HtmlNavigation(Navigation):

    def set_node_list(self, nodes):
        self.context.set_persistent(NODES, tuple(nodes))

    def get_node_list(self):
        """Node list on this level's context, without running the navigation."""
        if self.context is None:
            raise NavigationError("BUG: No context on {}".format(self))
        return self.context.get_persistent(NODES, ())

    @property
    def navigator(self):
        if self.context is None:
            raise NavigationError("BUG: No context on {}".format(self))
        return self.context.get_persistent(NAVIGATOR)

    # Result accessors
    # -------------------------------------------------------------------------

    def exists(self):
        """Run the navigation if needed and report whether it reached this level."""
        return self.succeeded()

    def get_nodes(self):
        """Nodes at this level. A level that could not be reached has none."""
        if not self.succeeded():
            return ()
        return self.get_node_list()

    def node_count(self):
        return len(self.get_nodes())

    def get_node(self):
        nodes = self.get_nodes()
        if not nodes:
            raise NavigationError("No node at {}".format(self))
        return nodes[0]

    def get_text(self):
        return as_text(self.get_node())

    def get_attribute(self, name):
        node = self.get_node()
        if not node.is_element():
            return None
        return node.get_attribute(name)

    def get_name(self):
        return self.get_node().name

    def get_value(self):
        return forms.get_value(self.get_node())

    def activate(self):
        """Click or submit the first node at this level.

        The navigator that loaded the page moves to the resulting page.
        """
        node = self.get_node()
        navigator = self.navigator
        if navigator is None:
            raise NavigationError("{} was not started from a WebNavigator".format(self))
        return navigator.activate(node)

    # Structure
    # -------------------------------------------------------------------------

    def children(self):
        return structural.ChildrenNavigation(self)

    def parent_node(self):
        return structural.ParentNavigation(self)

    def index(self, idx):
        return structural.IndexNavigation(self, idx)

    def first(self):
        return structural.IndexNavigation(self, 0)

    def last(self):
        return structural.LastIndexNavigation(self)

    def before(self):
        return structural.BeforeNavigation(self)

    def after(self):
        return structural.AfterNavigation(self)

    def exactly(self, count):
        return structural.ContainsExactlyNavigation(self, count)

    def at_least(self, count):
        return structural.ContainsAtLeastNavigation(self, count)

    def at_most(self, count):
        return structural.ContainsAtMostNavigation(self, count)

    # Descriptive markers for the next search
    # -------------------------------------------------------------------------

    def not_(self):
        return descriptive.NegateNavigation(self)

    def deep(self):
        return descriptive.DeepSearchNavigation(self)

    def pattern(self):
        return descriptive.PatternSearchNavigation(self)

    # Searches
    # -------------------------------------------------------------------------

    def element(self, name):
        return search.MatchElementNavigation(self, name)

    def attribute(self, name, value):
        return search.MatchAttributeNavigation(self, name, value)

    def text(self, value):
        return search.MatchTextNavigation(self, value)

    action = _attribute_shortcut("action")
    style_class = _attribute_shortcut("class")
    href = _attribute_shortcut("href")
    id = _attribute_shortcut("id")
    name = _attribute_shortcut("name")
    src = _attribute_shortcut("src")
    type = _attribute_shortcut("type")
    value = _attribute_shortcut("value")

    a = _element_shortcut("a")
    br = _element_shortcut("br")
    div = _element_shortcut("div")
    form = _element_shortcut("form")
    hr = _element_shortcut("hr")
    iframe = _element_shortcut("iframe")
    img = _element_shortcut("img")
    input = _element_shortcut("input")
    li = _element_shortcut("li")
    object = _element_shortcut("object")
    option = _element_shortcut("option")
    p = _element_shortcut("p")
    select = _element_shortcut("select")
    span = _element_shortcut("span")
    table = _element_shortcut("table")
    tbody = _element_shortcut("tbody")
    td = _element_shortcut("td")
    textarea = _element_shortcut("textarea")
    th = _element_shortcut("th")
    thead = _element_shortcut("thead")
    tr = _element_shortcut("tr")

    # Actions
    # -------------------------------------------------------------------------

    def set_value(self, value):
        return actions.SetValueNavigation(self, value)

    def contents(self):
        return actions.ContentsNavigation(self)


class StartNavigation(HtmlNavigation):
    """Top of a chain: focuses on a single starting node."""

    def __init__(self, node, navigator=None):
        super().__init__(None)
        self.node = node
        self.start_navigator = navigator

    def create_initial_context(self):
        context = super().create_initial_context()
        context.set_persistent(NAVIGATOR, self.start_navigator)
        self.set_node_list([self.node])
        return context

    def navigate_this_level(self):
        # Only here to seed the context
        return True

    def __repr__(self):
        return "start({!r})".format(self.node)


def navigate(node, navigator=None):
    """Start a navigation chain at node."""
    return StartNavigation(node, navigator)


from . import actions, descriptive, search, structural  # noqa: E402
