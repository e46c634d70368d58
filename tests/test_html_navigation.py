import pytest

from webnav.navigation import search
from webnav.navigation.chain import NavigationState
from webnav.navigation.context import NODES
from webnav.navigation.errors import NavigationError
from webnav.navigation.html_navigation import navigate
from webnav.parser.html_parser import HTMLParser


def ids(navigation):
    return [node.get_attribute("id") for node in navigation.get_nodes()]


@pytest.fixture
def body_page():
    doc = HTMLParser("<body><div id='a'><div id='b'></div></div></body>").parse()
    body = doc.children[0].children[0]
    return navigate(body)


@pytest.fixture
def search_calls(monkeypatch):
    calls = []
    real = search.search_nodes

    def counting(*args, **kwargs):
        calls.append(args[1])
        return real(*args, **kwargs)

    monkeypatch.setattr(search, "search_nodes", counting)
    return calls


def test_searches_are_shallow_by_default(body_page):
    assert not body_page.children().div().id("b").exists()
    assert body_page.children().div().id("a").exists()


def test_deep_search_finds_descendants(body_page):
    found = body_page.deep().id("b")
    assert found.exists()
    assert ids(found) == ["b"]


def test_deep_pattern_count(page):
    divs = page.deep().div().pattern().id("level.Div.*")
    assert divs.exactly(3).exists()
    assert not divs.exactly(4).exists()
    assert divs.at_least(2).exists()
    assert not divs.at_most(2).exists()
    assert divs.not_().exactly(4).exists()


def test_pattern_search(page):
    assert page.deep().div().pattern().id("level1DivA").exists()
    assert not page.deep().pattern().id("aqwergaehbae.*aasdd?..+").exists()


def test_deep_search(page):
    assert page.deep().div().id("level1DivA").exists()
    assert page.deep().div().id("level2Div").exists()
    assert page.deep().div().id("level1DivB").exists()
    assert not page.deep().div().id("sadfasdfasd").exists()
    assert page.deep().a().href("test3.html").exists()
    assert not page.deep().a().href("asdfasdf.html").exists()


def test_step_by_step_and_deep_reach_the_same_node(page):
    body_children = page.children().element("html").children().element("body").children()
    div1 = body_children.div().index(0).children().div()
    div2 = page.deep().div().id("level2Div")
    assert div1.exists()
    assert div2.exists()
    assert div1.get_node() is div2.get_node()
    assert div1.get_text() == div2.get_text()
    assert not div1.attribute("asdfasfvavrer", "drgasrgwer").exists()


def test_count(page):
    assert page.deep().action("test2.html").children().input().node_count() == 4
    assert page.deep().id("level1DivA").children().node_count() == 1


def test_parent(page):
    form = page.deep().action("test2.html")
    assert form.parent_node().children().a().get_attribute("href") == "test3.html"
    assert form.parent_node().get_attribute("id") == "level2Div"


def test_negate(page):
    form_children = page.deep().action("test2.html").children()
    assert form_children.not_().textarea().node_count() == 4
    assert form_children.not_().textarea().not_().type("radio").node_count() == 3


def test_negate_radio_among_four(page):
    inputs = page.deep().input()
    assert inputs.node_count() == 4
    remaining = inputs.not_().type("radio")
    assert remaining.node_count() == 3
    assert "radio" not in [node.get_attribute("type") for node in remaining.get_nodes()]


def test_negation_only_applies_to_the_next_step(page):
    form_children = page.deep().action("test2.html").children()
    # not applies to textarea only; input is a plain search afterwards
    assert form_children.not_().textarea().input().node_count() == 4
    assert not form_children.not_().textarea().textarea().exists()


def test_deep_only_applies_to_the_next_step(page):
    assert page.deep().element("html").exists()
    assert not page.deep().element("html").div().exists()
    assert page.deep().element("html").deep().div().exists()


def test_after(page):
    after = page.deep().type("checkbox").after()
    assert after.id("level1DivB").children().id("span1").exists()
    assert not after.name("textparam").exists()
    assert not after.type("checkbox").exists()
    assert not after.action("test2.html").exists()
    assert not after.id("level1DivA").exists()
    names = [node.name for node in after.get_nodes()]
    assert names == ["input", "input", "textarea", "div"]


def test_before(page):
    before = page.deep().type("checkbox").before()
    assert not before.id("level1DivB").children().id("span1").exists()
    assert before.name("textparam").exists()
    assert not before.type("checkbox").exists()
    assert before.element("h1").exists()
    assert before.element("head").exists()
    names = [node.name for node in before.get_nodes()]
    assert names == ["head", "h1", "a", "input"]


def test_before_at_top_fails(document):
    assert not navigate(document).before().exists()
    assert not navigate(document.children[0]).after().exists()


def test_bad_navigation(page):
    bad = page.deep().pattern().href("blahblahblahblah.*").after().table().children().children()
    assert bad.node_count() == 0
    assert not bad.exists()
    assert bad.state is NavigationState.FAILED


def test_index_first_last(page):
    inputs = page.deep().input()
    assert inputs.first().get_attribute("name") == "textparam"
    assert inputs.index(2).get_attribute("type") == "radio"
    assert inputs.last().get_attribute("type") == "password"
    assert not inputs.index(4).exists()
    assert not inputs.index(-1).exists()


def test_text_search(page):
    assert page.deep().a().text("Click here to go a random location").exists()
    assert page.deep().a().pattern().text(".*random.*").get_attribute("id") == "randomLink"
    assert page.deep().element("h1").not_().text("Test page").node_count() == 0


def test_accessors(page):
    title = page.children().element("html").children().element("head").children().element("title")
    assert title.get_text() == "Test Page"
    assert title.get_name() == "title"
    assert title.get_attribute("missing") is None
    assert page.deep().type("text").get_value() == "initial"


def test_get_node_on_failed_level_is_a_bug(page):
    missing = page.deep().id("nothing-here")
    assert missing.get_nodes() == ()
    with pytest.raises(NavigationError):
        missing.get_node()


def test_activate_needs_a_navigator(page):
    with pytest.raises(NavigationError):
        page.deep().id("randomLink").activate()


def test_contents_of_non_frame_is_a_bug(page):
    with pytest.raises(NavigationError):
        page.deep().div().contents().exists()


def test_navigation_runs_once(page, search_calls):
    inputs = page.deep().input().type("text")
    assert inputs.exists()
    assert len(search_calls) == 2
    assert inputs.exists()
    assert inputs.node_count() == 1
    assert inputs.get_value() == "initial"
    assert len(search_calls) == 2


def test_resolved_prefix_is_reused(page, search_calls):
    form = page.deep().action("test2.html")
    assert form.exists()
    assert len(search_calls) == 1

    assert form.children().input().exists()
    assert form.children().textarea().exists()
    assert len(search_calls) == 3


def test_failure_skips_remaining_searches(page, search_calls):
    chain = page.deep().id("nothing-here").children().input().type("text")
    assert not chain.exists()
    assert len(search_calls) == 1


def test_descendants_do_not_change_ancestor_nodes(page):
    inputs = page.deep().input()
    before = inputs.get_nodes()
    assert inputs.not_().type("radio").last().exists()
    assert inputs.first().exists()
    assert inputs.get_nodes() is before
    assert inputs.context.get_persistent(NODES) is before
    assert len(before) == 4


def test_set_value(page):
    text = page.deep().input().type("text")
    assert text.set_value("newvalue").exists()
    assert page.deep().input().type("text").get_value() == "newvalue"

    assert page.deep().input().type("checkbox").set_value("true").exists()
    assert page.deep().input().type("checkbox").get_value() == "checked"
    assert page.deep().input().type("checkbox").set_value(False).exists()
    assert page.deep().input().type("checkbox").get_value() == ""

    assert page.deep().input().type("radio").set_value(True).exists()
    assert page.deep().input().type("radio").get_value() == "checked"

    assert page.deep().textarea().set_value("new text").exists()
    assert page.deep().textarea().get_value() == "new text"

    assert page.deep().input().type("password").set_value(1234).exists()
    assert page.deep().input().type("password").get_value() == "1234"


def test_set_value_on_unsettable_nodes_fails(page):
    assert not page.deep().div().set_value("x").exists()
    assert not page.deep().id("level2Div").children().set_value("x").exists()
    mixed = page.deep().pattern().element("input|h1")
    assert mixed.node_count() == 5
    assert not mixed.set_value("x").exists()
    # Nothing was written to the inputs
    assert page.deep().input().type("text").get_value() == "initial"


def test_ultimate_parent(page):
    div = page.deep().div().index(0).children().div()
    text_input = div.children().form().children().input().type("text")
    assert text_input.exists()
    assert div.get_ultimate_parent() is page
    assert text_input.get_ultimate_parent() is div.get_ultimate_parent()


def test_siblings_of_a_detached_node(page):
    textarea = page.deep().textarea()
    old_text = textarea.get_node().children[0]
    assert textarea.set_value("new text").exists()
    assert old_text not in textarea.get_node().children

    assert not navigate(old_text).after().exists()
    assert not navigate(old_text).before().exists()


def test_deep_search_over_long_unclosed_list():
    doc = HTMLParser("<ul>" + "<li>item" * 1500 + "</ul>").parse()
    items = navigate(doc).deep().element("ul").children()
    assert items.node_count() == 1500
    assert navigate(doc).deep().element("li").node_count() == 1500
    assert items.index(1499).get_text() == "item"


def test_deep_search_over_deeply_nested_document():
    depth = 1600
    doc = HTMLParser("<div>" * depth + "bottom" + "</div>" * depth).parse()
    divs = navigate(doc).deep().div()
    assert divs.exactly(depth).exists()
    assert divs.first().get_text() == "bottom"
    assert divs.last().deep().text("bottom").exists()
