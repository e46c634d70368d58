import html
import logging

from webnav.dom.nodes import Document, Element, Text
from webnav.config.constants import IMPLIED_END_TAGS, SELF_CLOSING_TAGS
from .lexer import lex, TextToken, TagToken

logger = logging.getLogger(__name__)


class HTMLParser:
    def __init__(self, body, url=None):
        self.body = body
        self.url = url
        self.unfinished = []

    def add_text(self, text):
        if text.isspace():
            return
        self.implicit_root()
        parent = self.unfinished[-1]
        parent.children.append(Text(text, parent))

    def get_attributes(self, text):
        parts = []
        current = ""
        quote_char = None

        for char in text:
            if char in ['"', "'"] and (quote_char is None or char == quote_char):
                quote_char = char if quote_char is None else None
                current += char
            elif char.isspace() and quote_char is None:
                if current:
                    parts.append(current)
                    current = ""
            else:
                current += char

        if current:
            parts.append(current)

        self_closing = False
        if parts and parts[-1] == "/":
            parts.pop()
            self_closing = True
        elif parts and parts[-1].endswith("/") and ("=" not in parts[-1] or parts[-1][-2:-1] in ("'", "\"")):
            parts[-1] = parts[-1][:-1]
            self_closing = True

        if not parts:
            return "", {}, self_closing

        tag = parts[0].casefold()
        attributes = {}

        for attrpair in parts[1:]:
            if "=" in attrpair:
                key, value = attrpair.split("=", 1)
                if len(value) >= 2 and value[0] in ["'", "\""] and value[-1] == value[0]:
                    value = value[1:-1]
                attributes[key.casefold()] = html.unescape(value)
            else:
                attributes[attrpair.casefold()] = ""
        return tag, attributes, self_closing

    def implicit_root(self):
        if not self.unfinished:
            self.unfinished.append(Element("html", {}, None))

    def close(self, tag):
        # Pop back to the matching open tag; stray end tags are ignored
        for i in range(len(self.unfinished) - 1, 0, -1):
            if self.unfinished[i].tag == tag:
                del self.unfinished[i:]
                return
        logger.debug("Ignoring unmatched end tag </%s>", tag)

    def close_implied(self, tag):
        if tag not in IMPLIED_END_TAGS:
            return
        closes, scope = IMPLIED_END_TAGS[tag]
        for i in range(len(self.unfinished) - 1, 0, -1):
            open_tag = self.unfinished[i].tag
            if open_tag in closes:
                del self.unfinished[i:]
                return
            if open_tag in scope:
                return

    def add_tag(self, tag):
        tag, attributes, self_closing = self.get_attributes(tag)
        if not tag or tag.startswith("!") or tag.startswith("?"):
            return
        if tag.startswith("/"):
            self.close(tag[1:])
            return
        if tag == "html":
            if self.unfinished:
                self.unfinished[0].attributes.update(attributes)
            else:
                self.unfinished.append(Element("html", attributes, None))
            return

        self.implicit_root()
        self.close_implied(tag)
        parent = self.unfinished[-1]
        node = Element(tag, attributes, parent)
        parent.children.append(node)
        if tag not in SELF_CLOSING_TAGS and not self_closing:
            self.unfinished.append(node)

    def finish(self):
        self.implicit_root()
        root = self.unfinished[0]
        self.unfinished = []
        document = Document(self.url)
        root.parent = document
        document.children.append(root)
        return document

    def parse(self):
        self.unfinished = []
        for token in lex(self.body):
            if isinstance(token, TextToken):
                self.add_text(token.text)
            elif isinstance(token, TagToken):
                self.add_tag(token.tag)

        return self.finish()
