"""
Lazily evaluated navigation chains.

A chain is built one link at a time; each link knows only its parent. Nothing
runs until a result is requested from some link, at which point every link
between the top of the chain and that link is run once, top-down, and its
outcome cached:

    nav = root.children().div().index(0)   # nothing evaluated yet
    nav.resolve()                          # runs root, children, div, index

Resolving a link whose ancestors already ran starts from the nearest ancestor
that ran, reusing its context. Once a link fails, every link below it fails
without running.
"""

import enum
import logging

from .context import NavigationContext
from .errors import NavigationError

logger = logging.getLogger(__name__)


class NavigationState(enum.Enum):
    UNRESOLVED = "unresolved"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Navigation:
    """One link of a navigation chain.

    Subclasses implement navigate_this_level(), which reads and updates
    self.context and returns True if navigation reached this level.
    """

    def __init__(self, parent):
        self.parent = parent
        self.context = None
        self.state = NavigationState.UNRESOLVED
        self._ultimate_parent = None

    @property
    def has_run(self):
        return self.state is not NavigationState.UNRESOLVED

    def resolve(self):
        """Run the chain down to this link. Returns self, or None on failure."""
        if self.has_run:
            return self if self.state is NavigationState.SUCCEEDED else None

        # Stack the links top-down, stopping at the last one that already ran
        chain = []
        link = self
        while link is not None:
            chain.append(link)
            logger.debug("stacking %s", link)
            if link.has_run:
                logger.debug("%s has already been navigated. Shorting.", link)
                break
            link = link.parent
        chain.reverse()

        top = chain[0]
        context = top.context
        if context is None:
            if top.has_run or top.parent is not None:
                raise NavigationError("{} has been navigated but has no context".format(top))
            logger.debug("Top %s has no context. Creating one.", top)
            context = top.create_initial_context()

        failed = False
        for link in chain:
            if link.context is None:
                link.context = context.clone()
            if failed:
                link._settle(False)
            elif not link._navigate():
                logger.debug("Navigation failed at %s. Forcing the rest to fail.", link)
                failed = True
            context = link.context

        return self if self.state is NavigationState.SUCCEEDED else None

    def succeeded(self):
        return self.resolve() is not None

    def get_ultimate_parent(self):
        """The real top of the chain."""
        if self._ultimate_parent is None:
            link = self
            while link.parent is not None:
                link = link._ultimate_parent or link.parent
            self._ultimate_parent = link
        return self._ultimate_parent

    def create_initial_context(self):
        if self.context is None:
            self.context = NavigationContext()
        return self.context

    def handle_context(self):
        """Post-process the context after this level navigated successfully."""
        self.context.clear_ephemeral()

    def navigate_this_level(self):
        raise NotImplementedError

    def _navigate(self):
        if self.has_run:
            logger.debug("Already navigated %s. Old result: %s", self, self.state.value)
            return self.state is NavigationState.SUCCEEDED

        result = bool(self.navigate_this_level())
        self._settle(result)
        logger.debug("New navigation for %s resulted: %s", self, result)
        if result:
            self.handle_context()
        return result

    def _settle(self, result):
        if self.has_run:
            return
        if self.context is None:
            raise NavigationError("{} cannot settle without a context".format(self))
        self.state = NavigationState.SUCCEEDED if result else NavigationState.FAILED

    def __repr__(self):
        return type(self).__name__
