import pytest
from bs4 import BeautifulSoup

from vnode.builder import Fragment, h
from vnode.nodes import ElementNode, FragmentNode, TextNode
from vnode.render import SELF_CLOSING, render


def test_attribute_values_are_escaped():
    assert render(h("div", {"class": "a&b"}, "hi")) == '<div class="a&amp;b">hi</div>'


def test_self_closing_drops_children():
    assert render(h("img", {"src": "x.png"}, "ignored")) == '<img src="x.png">'


@pytest.mark.parametrize("tag", sorted(SELF_CLOSING))
def test_every_self_closing_tag(tag):
    node = h(tag, {"data-x": "1"}, "child", h("b", None, "bold"))
    assert render(node) == f'<{tag} data-x="1">'


@pytest.mark.parametrize("tag", ["div", "span", "p", "IMG", "Br"])
def test_other_tags_are_wrapped(tag):
    assert render(ElementNode(tag, {}, ())) == f"<{tag}></{tag}>"


def test_fragment_is_transparent():
    a = h("i", None, "1")
    b = TextNode("2")
    assert render(FragmentNode((a, b))) == render(a) + render(b)
    assert render(Fragment({"children": [TextNode("a"), TextNode("b")]})) == "ab"


def test_props_render_in_insertion_order_and_stringify():
    node = h("a", {"href": "/?a=1&b=2", "data-n": 3, "hidden": None, "x": True})
    assert render(node) == '<a href="/?a=1&amp;b=2" data-n="3" hidden="" x="True"></a>'


def test_tag_names_are_not_escaped():
    assert render(ElementNode("x<y", {}, ())) == "<x<y></x<y>"


def test_rendered_markup_parses_back_to_same_structure():
    items = ["a<b", "c & d"]
    node = h(
        "ul",
        {"class": "list"},
        [h("li", None, item) for item in items],
        h("img", {"src": "x.png", "alt": "\"quoted\""}),
    )
    soup = BeautifulSoup(render(node), "html.parser")

    assert soup.ul["class"] == ["list"]
    assert [li.get_text() for li in soup.find_all("li")] == items
    assert soup.img["alt"] == '"quoted"'
