import pytest

from   tagcat.markup import Attr, CSSStyle, Event, Markup, Text

#-------------------------------------------------------------------------------

def test_empty():
    node = Markup("div")
    assert node.tag == "div"
    assert not node.self_closing
    assert node.children == ()
    assert str(node) == "<div></div>"


def test_attrs():
    node = Markup("a").modify(
        Attr("href", "/x"),
        Attr("cls", ["big", "red"]),
        Attr("hidden"),
    )
    assert node["href"] == "/x"
    assert node.attrs == {"href": "/x", "class": "big red", "hidden": None}
    assert str(node) == '<a href="/x" class="big red" hidden></a>'


def test_for_attr():
    node = Markup("label").modify(Attr("fr", "name"))
    assert str(node) == '<label for="name"></label>'


def test_attr_escaped():
    node = Markup("p").modify(Attr("title", 'say "<hi>"'))
    assert str(node) == '<p title="say &quot;&lt;hi&gt;&quot;"></p>'


def test_styles():
    node = Markup("p").modify(
        Attr("id", "x"),
        CSSStyle("color", "red"),
        CSSStyle("margin", "0"),
    )
    assert node.styles == {"color": "red", "margin": "0"}
    assert str(node) == '<p id="x" style="color: red; margin: 0"></p>'


def test_children():
    node = Markup("ul").modify(
        Markup("li").modify(Text("one")),
        Markup("li").modify(Text("two")),
    )
    assert len(node.children) == 2
    assert str(node) == "<ul><li>one</li><li>two</li></ul>"


def test_lshift():
    parent = Markup("div")
    child = parent << Markup("span")
    assert child.tag == "span"
    assert parent.children == (child, )


def test_self_closing():
    node = Markup("br", self_closing=True)
    assert str(node) == "<br/>"
    assert str(Markup("img", self_closing=True).modify(Attr("src", "a.png"))) \
        == '<img src="a.png"/>'
    with pytest.raises(ValueError):
        node.modify(Text("nope"))


def test_none_modifiers():
    with_none = Markup("div").modify(
        None, Attr("id", "a"), None, Text("x"), None, CSSStyle("color", "red"))
    without = Markup("div").modify(
        Attr("id", "a"), Text("x"), CSSStyle("color", "red"))
    assert str(with_none) == str(without)
    assert with_none.attrs == without.attrs
    assert with_none.styles == without.styles


def test_modifier_order():
    node = Markup("div").modify(Attr("id", "a"), Attr("id", "b"))
    assert node["id"] == "b"
    node = Markup("div").modify(Text("1"), Text("2"))
    assert str(node) == "<div>12</div>"


def test_events():
    clicked = []
    event = Event("click", clicked.append)
    node = Markup("button").modify(event, Text("go"))
    assert node.events == (event, )
    assert node.events[0].kind == "click"
    # Events aren't serialized.
    assert str(node) == "<button>go</button>"


def test_text():
    text = Text("a&nbsp;b")
    assert str(text) == "a&nbsp;b"
    assert str(Text()) == ""


def test_format():
    node = Markup("div").modify(
        Markup("p").modify(Text("hi")),
        Markup("hr", self_closing=True),
    )
    assert list(node.format()) == [
        "<div>",
        " <p>",
        "  hi",
        " </p>",
        " <hr/>",
        "</div>",
    ]


