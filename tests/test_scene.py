import pytest

from atomlab.scene import (
    Circle,
    Group,
    Line,
    Text,
    effective_opacity,
    find_node,
    find_nodes,
    flatten,
    iter_nodes,
)


def test_flatten_composes_group_transforms():
    inner = Group(key="inner", x=5.0, scale=0.5, opacity=0.5).add(Circle(key="dot", x=4.0, r=2.0))
    root = Group(key="root", x=10.0, scale=2.0).add(inner)
    (node, tf), = list(flatten(root))
    assert node.key == "dot"
    # 10 + 2 * (5 + 0.5 * 4)
    assert tf.apply(node.x, node.y) == (pytest.approx(24.0), pytest.approx(0.0))
    assert tf.scale == pytest.approx(1.0)
    assert effective_opacity(node, tf) == pytest.approx(0.5)


def test_rotation_is_in_degrees():
    root = Group(key="root", rotation=90.0).add(Circle(key="e", x=10.0))
    (node, tf), = list(flatten(root))
    x, y = tf.apply(node.x, node.y)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(10.0)


def test_queries():
    root = Group(key="root").add(
        Line(key="b", role="bond", x2=10.0),
        Group(key="g").add(Text(key="t", role="label", text="hi"), None),
    )
    assert [n.key for n in iter_nodes(root)] == ["root", "b", "g", "t"]
    assert [n.key for n in find_nodes(root, "bond")] == ["b"]
    assert find_node(root, "t").text == "hi"
    assert find_node(root, "missing") is None
    line, tf = next(flatten(root))
    assert tf.apply(line.x2, line.y2) == (10.0, 0.0)
