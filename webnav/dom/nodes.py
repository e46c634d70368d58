class Document:
    """Root of a parsed page. Holds the top level html element."""

    def __init__(self, url=None):
        self.url = url
        self.children = []
        self.parent = None

    @property
    def name(self):
        return "#document"

    def is_element(self):
        return False

    def get_attribute(self, name):
        return None

    def __repr__(self):
        return "<#document " + str(self.url) + ">"


class Text:
    def __init__(self, text, parent):
        self.text = text
        self.children = []
        self.parent = parent

    @property
    def name(self):
        return "#text"

    def is_element(self):
        return False

    def get_attribute(self, name):
        return None

    def __repr__(self):
        return repr(self.text)


class Element:
    def __init__(self, tag, attributes, parent):
        self.tag = tag
        self.attributes = attributes
        self.children = []
        self.parent = parent
        # Document loaded for frame and iframe elements
        self.content_document = None

    @property
    def name(self):
        return self.tag

    def is_element(self):
        return True

    def get_attribute(self, name):
        """Attribute value, or None when the attribute is not defined."""
        return self.attributes.get(name.casefold())

    def set_attribute(self, name, value):
        self.attributes[name.casefold()] = value

    def remove_attribute(self, name):
        self.attributes.pop(name.casefold(), None)

    def __repr__(self):
        attrs = "".join(" {}=\"{}\"".format(k, v) for k, v in self.attributes.items()
                        if k in ("id", "name", "type", "class"))
        return "<" + self.tag + attrs + ">"
