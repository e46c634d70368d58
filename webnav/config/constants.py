# config/constants.py
import os

SELF_CLOSING_TAGS = ["area", "base", "br", "col", "embed", "hr", "img", "input",
                     "link", "meta", "param", "source", "track", "wbr", "frame"]

# Elements whose text is rendered on its own line
BLOCK_TAGS = ["address", "article", "aside", "blockquote", "body", "dd", "div",
              "dl", "dt", "fieldset", "figure", "footer", "form", "h1", "h2",
              "h3", "h4", "h5", "h6", "head", "header", "hr", "html", "li",
              "main", "nav", "ol", "p", "pre", "section", "table", "tbody",
              "td", "tfoot", "th", "thead", "title", "tr", "ul"]

# Elements that may be activated (clicked or submitted)
CLICKABLE_TAGS = ["a", "area", "button", "form", "input"]

FRAME_TAGS = ["frame", "iframe"]

MAX_REDIRECTS = 5

DEFAULT_USER_AGENT = os.environ.get("WEBNAV_USER_AGENT", "webnav/0.1")

# Seconds; 0 or empty disables the timeout
SOCKET_TIMEOUT = float(os.environ.get("WEBNAV_TIMEOUT") or 0) or None

LOG_LEVEL = os.environ.get("WEBNAV_LOG_LEVEL", "WARNING").upper()

# Opening one of these closes an open element of the listed kinds, unless
# one of the scope elements is reached first:
#   tag: (tags it closes, scope boundaries)
IMPLIED_END_TAGS = {
    "li": (["li"], ["ul", "ol"]),
    "dt": (["dt", "dd"], ["dl"]),
    "dd": (["dt", "dd"], ["dl"]),
    "option": (["option"], ["select", "datalist", "optgroup"]),
    "p": (["p"], ["div", "li", "td", "th", "table", "form", "blockquote"]),
    "tr": (["tr"], ["table", "tbody", "thead", "tfoot"]),
    "td": (["td", "th"], ["tr", "table"]),
    "th": (["td", "th"], ["tr", "table"]),
}
