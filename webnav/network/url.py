import logging
import os
import socket
import ssl
from urllib.parse import urlencode

from webnav.config.constants import DEFAULT_USER_AGENT, MAX_REDIRECTS, SOCKET_TIMEOUT
from . import cache

logger = logging.getLogger(__name__)


class PageLoadError(OSError):
    """A page could not be fetched or is of an unexpected kind."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class URL:
    def __init__(self, url):
        self.fragment = None
        self.query = ""

        try:
            self.scheme, url = url.split("://", 1)
        except ValueError:
            raise PageLoadError("Malformed URL: {}".format(url))
        self.scheme = self.scheme.casefold()

        if self.scheme not in ["http", "https", "file"]:
            raise PageLoadError("Unsupported URL scheme: {}".format(self.scheme))

        if "#" in url:
            url, self.fragment = url.split("#", 1)
        if "?" in url:
            url, self.query = url.split("?", 1)

        if self.scheme in ["http", "https"]:
            if "/" not in url:
                url = url + "/"

            self.host, url = url.split("/", 1)
            self.path = "/" + url

            if self.scheme == "http":
                self.port = 80
            elif self.scheme == "https":
                self.port = 443

            if ":" in self.host:
                self.host, port = self.host.split(":", 1)
                self.port = int(port)

        elif self.scheme == "file":
            self.host = ""
            if os.name == "nt" and url.startswith("/"):
                url = url[1:]
            self.path = os.path.normpath(url)

    def __str__(self):
        query_part = "?" + self.query if self.query else ""
        if self.scheme == "file":
            return "file://" + self.path + query_part

        port_part = ":" + str(self.port)
        if self.scheme == "https" and self.port == 443:
            port_part = ""
        if self.scheme == "http" and self.port == 80:
            port_part = ""
        return self.scheme + "://" + self.host + port_part + self.path + query_part

    def __repr__(self):
        return "URL({!r})".format(str(self))

    def with_query(self, pairs):
        """Copy of this URL whose query string encodes pairs."""
        url = URL(str(self))
        url.query = urlencode(pairs)
        return url

    def request(self, payload=None, headers=None, redirect_count=0):
        """Fetch the body of this URL. A payload turns the request into a POST."""
        if self.scheme == "file":
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    return f.read()
            except OSError as e:
                raise PageLoadError("Cannot read {}: {}".format(self.path, e)) from e

        cache_key = str(self)
        if payload is None:
            body = cache.lookup(cache_key)
            if body is not None:
                logger.debug("cache hit: %s", cache_key)
                return body

        if redirect_count > MAX_REDIRECTS:
            raise PageLoadError("Too many redirects")

        method = "GET" if payload is None else "POST"
        status, response_headers, content = self._send(method, payload, headers or {})

        if 300 <= status < 400:
            location = response_headers.get("location")
            if not location:
                raise PageLoadError("Redirect without location from {}".format(self), status)
            target = self.resolve(location)
            logger.debug("redirect %d: %s -> %s", status, self, target)
            # 307/308 keep the method and body, the rest turn into a GET
            keep = payload if status in (307, 308) else None
            return target.request(keep, headers, redirect_count + 1)

        if status >= 400:
            raise PageLoadError("Unexpected page. Code={}, url={}".format(status, self), status)

        cache_control = response_headers.get("cache-control")
        if payload is None and cache_control:
            cache_control = cache_control.lower()
            if "no-store" not in cache_control and "max-age=" in cache_control:
                try:
                    max_age = int(cache_control.split("max-age=")[1].split(",")[0])
                except ValueError:
                    max_age = 0
                if max_age > 0:
                    cache.store(cache_key, content, max_age)
                    logger.debug("cached: %s (max-age=%d)", cache_key, max_age)

        return content

    def _send(self, method, payload, headers):
        path = self.path + ("?" + self.query if self.query else "")
        logger.debug("%s %s", method, self)

        s = socket.create_connection((self.host, self.port), timeout=SOCKET_TIMEOUT)
        try:
            if self.scheme == "https":
                ctx = ssl.create_default_context()
                s = ctx.wrap_socket(s, server_hostname=self.host)

            request = "{} {} HTTP/1.0\r\n".format(method, path)
            request += "Host: {}\r\n".format(self.host)
            if not any(k.casefold() == "user-agent" for k in headers):
                request += "User-Agent: {}\r\n".format(DEFAULT_USER_AGENT)
            for header, value in headers.items():
                request += "{}: {}\r\n".format(header, value)
            body = b""
            if payload is not None:
                body = payload.encode("utf8")
                request += "Content-Type: application/x-www-form-urlencoded\r\n"
                request += "Content-Length: {}\r\n".format(len(body))
            request += "\r\n"
            s.sendall(request.encode("utf8") + body)

            response = s.makefile("r", encoding="utf8", newline="\r\n")
            statusline = response.readline()
            try:
                version, status, explanation = (statusline.split(" ", 2) + [""])[:3]
                status = int(status)
            except ValueError:
                raise PageLoadError("Malformed status line from {}: {!r}".format(self, statusline))

            response_headers = {}
            while True:
                line = response.readline()
                if line in ("\r\n", ""):
                    break
                header, value = line.split(":", 1)
                response_headers[header.casefold()] = value.strip()

            if "transfer-encoding" in response_headers or "content-encoding" in response_headers:
                raise PageLoadError("Unsupported encoding from {}".format(self), status)

            content = response.read()
        finally:
            s.close()
        return status, response_headers, content

    def resolve(self, url):
        if "://" in url:
            return URL(url)

        if url.startswith("//"):
            return URL(self.scheme + ":" + url)

        base = URL(str(self))
        base.fragment = None
        if url.startswith("#"):
            base.fragment = url[1:]
            return base
        if url.startswith("?"):
            return URL(str(base).split("?", 1)[0] + url)

        if self.scheme == "file":
            base_dir = os.path.dirname(self.path)
            rest = ""
            for sep in "#?":
                if sep in url:
                    url, tail = url.split(sep, 1)
                    rest = sep + tail + rest
            full_path = os.path.normpath(os.path.join(base_dir, url))
            return URL("file://" + full_path + rest)

        if not url.startswith("/"):
            dir, _ = self.path.rsplit("/", 1)
            while url.startswith("../"):
                url = url[3:]
                if "/" in dir:
                    dir, _ = dir.rsplit("/", 1)
            url = dir + "/" + url

        return URL("{}://{}:{}{}".format(self.scheme, self.host, self.port, url))
