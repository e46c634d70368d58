"""
Shared pytest fixtures: sample pages, parsed documents and a navigator bound
to a small site written under tmp_path.
"""

import pytest

from webnav.core.navigator import WebNavigator
from webnav.navigation.html_navigation import navigate
from webnav.network import cache
from webnav.parser.html_parser import HTMLParser

TEST_PAGE = """<!DOCTYPE html>
<html>
<head><title>Test Page</title></head>
<body>
<h1>Test page</h1>
<div id="level1DivA">
  <div id="level2Div">
    <a href="test3.html">Link to test 3</a>
    <form action="test2.html" method="get">
      <input type="text" name="textparam" value="initial">
      <input type="checkbox" name="checkparam" value="yes">
      <input type="radio" name="radioparam" value="r1">
      <input type="password" name="secret">
      <textarea name="comments">Some text</textarea>
    </form>
  </div>
</div>
<div id="level1DivB">
  <span id="span1">Span one</span>
  <a href="goRandom.html" id="randomLink">Click here to go a random location</a>
</div>
</body>
</html>
"""

SITE = {
    "test.html": TEST_PAGE,
    "test2.html": "<html><head><title>Test 2</title></head><body><h1>Welcome to test 2</h1></body></html>",
    "test3.html": "<html><head><title>Test 3</title></head><body><h1>Welcome to test 3</h1></body></html>",
    "goRandom.html": "<html><head><title>Random</title></head><body><p>You went somewhere random</p></body></html>",
    "frames.html": """<html><head><title>Frames</title></head>
<frameset cols="33%,33%,*">
  <frame id="leftFrame" src="test2.html">
  <frame id="middleFrame" src="test3.html">
  <frame id="rightFrame" src="inline.html">
</frameset>
</html>""",
    "inline.html": "<html><body><iframe id='inner' src='test2.html'></iframe></body></html>",
}


@pytest.fixture(autouse=True)
def empty_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def document():
    return HTMLParser(TEST_PAGE).parse()


@pytest.fixture
def page(document):
    """Navigation chain rooted at the parsed test page."""
    return navigate(document)


@pytest.fixture
def site(tmp_path):
    for name, body in SITE.items():
        (tmp_path / name).write_text(body, encoding="utf8")
    return tmp_path


@pytest.fixture
def site_url(site):
    return lambda name: "file://" + str(site / name)


@pytest.fixture
def nav(site_url):
    return WebNavigator(site_url("test.html"))
