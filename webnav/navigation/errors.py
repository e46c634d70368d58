class NavigationError(RuntimeError):
    """Misuse of a navigation chain or of the nodes it reached.

    Ordinary "nothing matched" outcomes are never reported this way; they make
    the navigation fail. This is raised for programming errors such as reading
    a node from a level that has none, or activating a node that cannot be
    clicked.
    """
