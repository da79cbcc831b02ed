"""Tests for the bundled tree adapters."""

import pytest

from treescene import AttributeAdapter, ContractViolation, NestedMappingAdapter, ParentMapAdapter, flatten

from .helpers import node


class Split:
    """Decision-tree style inner node."""

    def __init__(self, feature, threshold, left, right):
        self.feature = feature
        self.threshold = threshold
        self.left = left
        self.right = right

    def branches(self):
        return [self.left, self.right]


class Leaf:
    def __init__(self, majority):
        self.majority = majority

    def branches(self):
        return []


def describe(n):
    if isinstance(n, Split):
        return f"{n.feature} < {n.threshold}"
    return f"class {n.majority}"


class TestNestedMappingAdapter:

    def test_size_counts_subtree(self, adapter, binary_tree):
        assert adapter.size(binary_tree) == 7
        assert adapter.size(binary_tree["children"][0]) == 3

    def test_missing_children_is_leaf(self, adapter):
        assert adapter.children({"label": "x"}) == []
        assert not adapter.has_children({"label": "x"})

    def test_custom_keys(self):
        tree = {"name": "r", "kids": [{"name": "a"}, {"name": "b", "kids": []}]}
        records = flatten(tree, NestedMappingAdapter(label_key="name", children_key="kids"))
        assert [r.label for r in records] == ["r", "a", "b"]

    def test_non_string_label(self, adapter):
        assert adapter.label({"label": 42}) == "42"
        assert adapter.label({}) == ""

    def test_children_must_be_list(self, adapter):
        with pytest.raises(ContractViolation):
            adapter.children({"label": "r", "children": "abc"})

    @pytest.mark.parametrize("bad", ["x", 3, ["nested"], None])
    def test_node_must_be_mapping(self, adapter, bad):
        with pytest.raises(ContractViolation, match="must be a mapping"):
            adapter.children(bad)
        with pytest.raises(ContractViolation, match="must be a mapping"):
            adapter.label(bad)

    def test_size_rejects_cycle(self, adapter):
        tree = node("r", node("a"))
        tree["children"][0]["children"].append(tree)
        with pytest.raises(ContractViolation, match="reachable twice"):
            adapter.size(tree)

    def test_size_rejects_shared_child(self, adapter):
        shared = node("s")
        with pytest.raises(ContractViolation, match="reachable twice"):
            adapter.size(node("r", shared, node("b", shared)))


class TestAttributeAdapter:

    def test_decision_tree_with_formatter(self):
        tree = Split("feat1", 0.7, Split("feat2", 0.5, Leaf("a"), Leaf("b")), Leaf("c"))
        adapter = AttributeAdapter(children_attr="branches", formatter=describe)
        records = flatten(tree, adapter)
        assert [r.label for r in records] == ["feat1 < 0.7", "feat2 < 0.5", "class c", "class a", "class b"]
        assert [r.is_leaf for r in records] == [False, False, True, True, True]
        assert [r.parent_index for r in records] == [0, 1, 1, 2, 2]

    def test_label_attribute_and_method(self):
        class Named:
            children = ()

            def label(self):
                return "called"

        class Plain:
            children = None
            label = "plain"

        adapter = AttributeAdapter()
        assert adapter.label(Named()) == "called"
        assert adapter.label(Plain()) == "plain"
        assert adapter.children(Plain()) == []


class TestParentMapAdapter:

    def test_rows_to_tree(self):
        rows = [
            ("0", None, "goal"),
            ("1", "0", "step 1"),
            ("2", "0", "step 2"),
            ("1_1", "1", "step 1.1"),
            ("1_2", "1", "step 1.2"),
        ]
        adapter = ParentMapAdapter(rows)
        assert adapter.root == "0"
        records = flatten(adapter.root, adapter)
        assert [r.label for r in records] == ["goal", "step 1", "step 2", "step 1.1", "step 1.2"]
        assert [r.parent_index for r in records] == [0, 1, 1, 2, 2]

    def test_children_keep_row_order(self):
        adapter = ParentMapAdapter([("r", None, "r"), ("z", "r", "z"), ("a", "r", "a")])
        assert adapter.children("r") == ["z", "a"]

    @pytest.mark.parametrize("rows", [
        [("a", None, "a"), ("b", None, "b")],
        [("a", "b", "a"), ("b", "a", "b")],
    ])
    def test_needs_exactly_one_root(self, rows):
        with pytest.raises(ContractViolation, match="exactly one root"):
            ParentMapAdapter(rows)

    def test_unknown_parent(self):
        with pytest.raises(ContractViolation, match="unknown parent"):
            ParentMapAdapter([("r", None, "r"), ("a", "missing", "a")])

    def test_duplicate_id(self):
        with pytest.raises(ContractViolation, match="Duplicate"):
            ParentMapAdapter([("r", None, "r"), ("r", "r", "again")])

    def test_detached_cycle(self):
        rows = [("r", None, "r"), ("a", "b", "a"), ("b", "a", "b")]
        with pytest.raises(ContractViolation, match="not connected"):
            ParentMapAdapter(rows)

    def test_self_parent(self):
        with pytest.raises(ContractViolation, match="own parent"):
            ParentMapAdapter([("r", None, "r"), ("a", "a", "a")])

    def test_nested_helper_matches_parent_map(self, adapter):
        tree = node("r", node("a"), node("b", node("b1")))
        rows = [("r", None, "r"), ("a", "r", "a"), ("b", "r", "b"), ("b1", "b", "b1")]
        pm = ParentMapAdapter(rows)
        assert flatten(tree, adapter) == flatten(pm.root, pm)
