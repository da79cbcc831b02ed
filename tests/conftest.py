import pytest

from treescene import NestedMappingAdapter

from .helpers import node


@pytest.fixture
def adapter():
    return NestedMappingAdapter()


@pytest.fixture
def binary_tree():
    """Perfect binary tree, 3 levels: r -> a, b -> a1, a2, b1, b2."""
    return node(
        "r",
        node("a", node("a1"), node("a2")),
        node("b", node("b1"), node("b2")),
    )


@pytest.fixture
def single_node():
    return node("only")


@pytest.fixture
def ragged_tree():
    """Uneven fan-out and depth."""
    return node(
        "root",
        node("x", node("x1", node("x1a"), node("x1b"), node("x1c"))),
        node("y"),
        node("z", node("z1"), node("z2", node("z2a"))),
    )
