import logging

from webnav.config.constants import FRAME_TAGS
from webnav.dom import forms
from .errors import NavigationError
from .html_navigation import HtmlNavigation

logger = logging.getLogger(__name__)


class SetValueNavigation(HtmlNavigation):
    """Writes a value into every node of the list.

    Fails without touching anything unless every node is a settable form
    control (checkbox, radio, text, password, file input or textarea).
    Booleans are written as "true"/"false".
    """

    def __init__(self, parent, value):
        super().__init__(parent)
        if isinstance(value, bool):
            value = "true" if value else "false"
        self.new_value = str(value)

    def navigate_this_level(self):
        nodes = self.get_node_list()
        if not nodes or not all(forms.is_settable(node) for node in nodes):
            return False
        for node in nodes:
            forms.set_value(node, self.new_value)
            logger.debug("set %r to %r", node, self.new_value)
        return True

    def __repr__(self):
        return "set_value({})".format(self.new_value)


class ContentsNavigation(HtmlNavigation):
    """Moves into the document enclosed by a frame or iframe."""

    def navigate_this_level(self):
        nodes = self.get_node_list()
        if not nodes:
            return False
        node = nodes[0]
        if not node.is_element() or node.tag not in FRAME_TAGS:
            raise NavigationError("Element {!r} is not a frame".format(node))

        navigator = self.navigator
        if navigator is None:
            raise NavigationError("{} was not started from a WebNavigator".format(self))
        self.set_node_list([navigator.enclosed_page(node)])
        return True

    def __repr__(self):
        return "contents"
