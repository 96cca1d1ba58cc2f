import pytest

from htmldom.node import Node, NodeType


def _text(value):
    return Node(NodeType.TEXT, text=value)


def _element(tag, **attributes):
    return Node(NodeType.ELEMENT, tag=tag, attributes=dict(attributes))


def test_append_child_sets_parent_and_order():
    parent = _element("ul")
    first = _element("li")
    second = _element("li")
    parent.append_child(first)
    parent.append_child(second)
    assert parent.children == [first, second]
    assert first.parent is parent
    assert second.parent is parent


def test_get_attribute_present():
    node = _element("div", id="main")
    assert node.get_attribute("id") == "main"


def test_get_attribute_missing_is_empty_string():
    node = _element("div")
    assert node.get_attribute("id") == ""


def test_setting_attribute_through_mapping():
    node = _element("img", src="old_image.jpg")
    node.attributes["src"] = "new_image.jpg"
    assert node.get_attribute("src") == "new_image.jpg"


@pytest.mark.parametrize(
    "classes, wanted, expected",
    [
        ("item", "item", True),
        ("item highlight", "highlight", True),
        ("intro  highlight", "intro", True),
        ("\titem\n", "item", True),
        ("items", "item", False),
        ("highlight", "item", False),
        ("item", "", False),
    ],
)
def test_has_class(classes, wanted, expected):
    node = _element("div", **{"class": classes})
    assert node.has_class(wanted) is expected


def test_has_class_without_class_attribute():
    assert _element("p").has_class("text") is False


def test_text_content_of_text_node():
    assert _text("Hello World").text_content() == "Hello World"


def test_text_content_concatenates_descendants_in_order():
    paragraph = _element("p")
    paragraph.append_child(_text("Hello "))
    strong = _element("strong")
    strong.append_child(_text("Wor"))
    paragraph.append_child(strong)
    paragraph.append_child(_text("ld"))
    assert paragraph.text_content() == "Hello World"


def test_text_content_ignores_comments():
    div = _element("div")
    div.append_child(Node(NodeType.COMMENT, text="hidden"))
    div.append_child(_text("Main Content"))
    assert div.text_content() == "Main Content"


def test_text_content_of_empty_element_is_empty():
    assert _element("br").text_content() == ""


def test_text_content_handles_deep_nesting():
    root = _element("div")
    current = root
    for _ in range(3000):
        child = _element("div")
        current.append_child(child)
        current = child
    current.append_child(_text("Nested Content"))
    assert root.text_content() == "Nested Content"


def test_nodes_compare_by_identity():
    a = _element("li")
    b = _element("li")
    assert a != b
    assert a == a