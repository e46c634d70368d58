import logging
from urllib.parse import urlencode

from webnav.config.constants import CLICKABLE_TAGS
from webnav.dom import forms
from webnav.dom.nodes import Document
from webnav.dom.utils import ancestors
from webnav.navigation.errors import NavigationError
from webnav.navigation.html_navigation import navigate
from webnav.network.url import URL, PageLoadError
from webnav.parser.html_parser import HTMLParser

logger = logging.getLogger(__name__)


class WebNavigator:
    """Loads pages and hands out navigation chains rooted at the current page.

        nav = WebNavigator("file:///tmp/site/index.html")
        nav.page_navigation().deep().id("login").activate()
        nav.title().get_text()
    """

    def __init__(self, url=None):
        self.page = None
        self.headers = {}
        if url is not None:
            self.goto_url(url)

    @property
    def url(self):
        return self.page.url if self.page is not None else None

    def set_user_agent(self, user_agent):
        self.headers["User-Agent"] = user_agent

    def add_request_header(self, header, value):
        self.headers[header] = value

    def load(self, url, payload=None):
        """Fetch and parse url without changing the current page."""
        if isinstance(url, str):
            url = URL(url)
        body = url.request(payload, self.headers)
        return HTMLParser(body, url).parse()

    def goto_url(self, url, payload=None):
        logger.debug("goto_url: %s", url)
        self.set_page(self.load(url, payload))
        return self.page

    def set_page(self, page):
        if not isinstance(page, Document):
            raise PageLoadError("Resulting page is of unsupported type {}".format(type(page).__name__))
        self.page = page

    # Navigations
    # -------------------------------------------------------------------------

    def page_navigation(self):
        if self.page is None:
            raise NavigationError("No page has been loaded")
        return navigate(self.page, self)

    def html(self):
        return self.page_navigation().children().element("html")

    def html_children(self):
        return self.html().children()

    def head(self):
        return self.html_children().element("head")

    def head_children(self):
        return self.head().children()

    def title(self):
        return self.head_children().element("title")

    def body(self):
        return self.html_children().element("body")

    def body_children(self):
        return self.body().children()

    def frames(self):
        return self.html_children().element("frameset").children().element("frame")

    # Actions
    # -------------------------------------------------------------------------

    def base_url(self, node):
        """URL of the document node belongs to."""
        root = (ancestors(node) or [node])[-1]
        if isinstance(root, Document) and root.url is not None:
            return root.url
        if self.url is None:
            raise NavigationError("{!r} has no URL to resolve links against".format(node))
        return self.url

    def activate(self, node):
        if not node.is_element() or node.tag not in CLICKABLE_TAGS:
            raise NavigationError("Element {!r} is not clickable".format(node))

        if node.tag in ("a", "area"):
            href = node.get_attribute("href")
            if href and not href.startswith("#"):
                self.goto_url(self.base_url(node).resolve(href))
        elif node.tag == "form":
            self.submit(node)
        elif node.tag == "button":
            form = forms.enclosing_form(node)
            if form is not None and (node.get_attribute("type") or "submit").casefold() == "submit":
                self.submit(form, node)
        elif node.tag == "input":
            kind = (node.get_attribute("type") or "text").casefold()
            if kind == "checkbox":
                forms.set_checked(node, not forms.is_checked(node))
            elif kind == "radio":
                forms.set_checked(node, True)
            elif kind in ("submit", "image"):
                form = forms.enclosing_form(node)
                if form is not None:
                    self.submit(form, node)
        return self.page

    def submit(self, form, submitter=None):
        pairs = forms.form_data(form, submitter)
        base = self.base_url(form)
        action = form.get_attribute("action")
        url = base.resolve(action) if action else base
        method = (form.get_attribute("method") or "get").casefold()
        logger.debug("submitting %s %s with %d field(s)", method, url, len(pairs))
        if method == "post":
            return self.goto_url(url, payload=urlencode(pairs))
        return self.goto_url(url.with_query(pairs))

    def enclosed_page(self, frame):
        """Document shown by a frame or iframe, loaded on first use."""
        if frame.content_document is None:
            src = frame.get_attribute("src")
            if src:
                frame.content_document = self.load(self.base_url(frame).resolve(src))
            else:
                frame.content_document = HTMLParser("").parse()
        return frame.content_document
