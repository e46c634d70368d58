"""
Descriptive navigations. They do no navigating of their own, only leave a
marker on the ephemeral context for the next real navigation. They keep the
ephemeral context intact so several can be stacked:

    nav.not_().deep().pattern().id("tmp.*")
"""

from .context import DEEP, NEGATE, PATTERN
from .html_navigation import HtmlNavigation


class DescriptiveNavigation(HtmlNavigation):
    marker = None

    def navigate_this_level(self):
        self.context.set_ephemeral_marker(self.marker)
        return True

    def handle_context(self):
        # Markers must survive until the next real navigation
        pass


class NegateNavigation(DescriptiveNavigation):
    marker = NEGATE

    def __repr__(self):
        return "not"


class DeepSearchNavigation(DescriptiveNavigation):
    marker = DEEP

    def __repr__(self):
        return "deep"


class PatternSearchNavigation(DescriptiveNavigation):
    marker = PATTERN

    def __repr__(self):
        return "pattern"
