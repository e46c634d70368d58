"""
Navigation context: the key/value carrier that flows down a navigation chain.

It holds two maps:

    ephemeral  : markers left by descriptive navigations (not, deep, pattern)
                 for the next real navigation. Cleared by every real
                 navigation once it has run.
    persistent : state every later navigation can see, most importantly the
                 current node list. Never cleared.

Every link gets its own clone, and clones are shallow: the maps are new but
the values are shared. Values must therefore be replaced, never modified.
Node lists are stored as tuples so they cannot be modified in place.
"""

from types import MappingProxyType

# Well known keys
NODES = "webnav.nodes"
NAVIGATOR = "webnav.navigator"
NEGATE = "webnav.negate"
DEEP = "webnav.deep"
PATTERN = "webnav.pattern"


class NavigationContext:
    def __init__(self, ephemeral=None, persistent=None):
        self._ephemeral = dict(ephemeral or {})
        self._persistent = dict(persistent or {})

    @property
    def ephemeral(self):
        return MappingProxyType(self._ephemeral)

    @property
    def persistent(self):
        return MappingProxyType(self._persistent)

    def set_ephemeral(self, key, value):
        self._ephemeral[key] = value

    def set_ephemeral_marker(self, key):
        self._ephemeral[key] = True

    def get_ephemeral(self, key, default=None):
        return self._ephemeral.get(key, default)

    def has_ephemeral(self, key):
        return self._ephemeral.get(key) is not None

    def clear_ephemeral(self):
        self._ephemeral.clear()

    def set_persistent(self, key, value):
        if isinstance(value, list):
            value = tuple(value)
        self._persistent[key] = value

    def get_persistent(self, key, default=None):
        return self._persistent.get(key, default)

    def clone(self):
        return NavigationContext(self._ephemeral, self._persistent)

    def __repr__(self):
        return "NavigationContext(ephemeral={}, persistent={})".format(
            sorted(self._ephemeral), sorted(self._persistent))
