"""Tests for object graph exploration."""

import functools
import types

import pytest

from dotgraph.explorer import (
    BASE_OF,
    BOUND_TO,
    CLASS_OF,
    NAME_OF,
    WRAPPED,
    AccessorFailure,
    Explorer,
    attribute_relation,
    explore,
    own_attribute_relation,
    relation,
)


class Empty:
    pass


class Link:
    def __init__(self, name: str) -> None:
        self.name = name

    def describe(self) -> str:
        return self.name


def decorated(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper


@decorated
def greet() -> str:
    return "hello"


class TestRelations:
    """Tests for the built-in relations."""

    def test_class_of(self) -> None:
        """Test the class relation."""
        assert CLASS_OF.access(Empty()) is Empty
        assert CLASS_OF.access(Empty) is type

    def test_base_of(self) -> None:
        """Test the base class relation."""
        assert BASE_OF.access(bool) is int
        with pytest.raises(AccessorFailure):
            BASE_OF.access(object)
        with pytest.raises(AccessorFailure):
            BASE_OF.access(Empty())

    def test_bound_to(self) -> None:
        """Test the bound instance relation."""
        link = Link("a")
        assert BOUND_TO.access(link.describe) is link
        with pytest.raises(AccessorFailure):
            BOUND_TO.access(Link.describe)

    def test_wrapped(self) -> None:
        """Test the decorator relation."""
        assert WRAPPED.access(greet).__name__ == "greet"
        assert WRAPPED.access(greet) is not greet
        with pytest.raises(AccessorFailure):
            WRAPPED.access(Link.describe)

    def test_name_of(self) -> None:
        """Test the name relation."""
        assert NAME_OF.access(Empty) == "Empty"
        assert NAME_OF.access(types) == "types"
        assert NAME_OF.access(Link.describe) == "describe"
        with pytest.raises(AccessorFailure):
            NAME_OF.access(Empty())
        with pytest.raises(AccessorFailure):
            NAME_OF.access(3)

    def test_own_attribute(self) -> None:
        """Test own attributes ignore class attributes."""
        rel = own_attribute_relation("name")
        assert rel.access(Link("x")) == "x"
        with pytest.raises(AccessorFailure):
            own_attribute_relation("describe").access(Link("x"))
        with pytest.raises(AccessorFailure):
            rel.access(3)

    def test_attribute(self) -> None:
        """Test attributes may be inherited."""
        rel = attribute_relation("describe")
        assert callable(rel.access(Link("x")))
        with pytest.raises(AccessorFailure):
            attribute_relation("missing").access(Link("x"))


class TestExplorer:
    """Tests for the traversal."""

    def test_instance_with_class_relation(self) -> None:
        """Test an instance, its class and type."""
        value = Empty()
        result = explore(value, [CLASS_OF])

        assert result.nodes == {"n0": value, "n1": Empty, "n2": type}
        assert result.edges == {"__class__": {"n0": "n1", "n1": "n2", "n2": "n2"}}

    def test_self_reference(self) -> None:
        """Test a value referring to itself is expanded once."""
        value = Empty()
        value.me = value
        result = explore(value, [own_attribute_relation("me")])

        assert result.nodes == {"n0": value}
        assert result.edges == {"me": {"n0": "n0"}}

    def test_two_cycle(self) -> None:
        """Test mutually referring values."""
        first, second = Empty(), Empty()
        first.other = second
        second.other = first
        result = explore(first, [own_attribute_relation("other")])

        assert list(result.nodes.values()) == [first, second]
        assert result.edges["other"] == {"n0": "n1", "n1": "n0"}

    def test_shared_values_are_deduplicated(self) -> None:
        """Test values reached twice get one node."""
        shared = Empty()
        root = Empty()
        root.left = shared
        root.right = shared
        result = explore(root, [own_attribute_relation("left"), own_attribute_relation("right")])

        assert len(result.nodes) == 2
        assert result.edges == {"left": {"n0": "n1"}, "right": {"n0": "n1"}}

    def test_depth_first_ids(self) -> None:
        """Test ids are assigned in depth first order."""
        root, a, b, c = Empty(), Empty(), Empty(), Empty()
        root.left, root.right, a.left = a, b, c
        result = explore(root, [own_attribute_relation("left"), own_attribute_relation("right")])

        assert result.id_of(root) == "n0"
        assert result.id_of(a) == "n1"
        assert result.id_of(c) == "n2"
        assert result.id_of(b) == "n3"
        assert result.id_of(Empty()) is None

    def test_equal_values_stay_distinct(self) -> None:
        """Test identity, not equality, decides deduplication."""
        root = Empty()
        root.left = [1]
        root.right = [1]
        result = explore(root, [own_attribute_relation("left"), own_attribute_relation("right")])
        assert len(result.nodes) == 3

    def test_failures_are_contained(self) -> None:
        """Test a failing relation only skips its own edge."""

        def explode(value):
            if value is Empty:
                raise KeyError("boom")
            return Empty

        value = Empty()
        result = explore(value, [relation("explode", explode), CLASS_OF])

        assert result.edges["explode"] == {"n0": "n1", "n2": "n1"}
        assert result.edges["__class__"]["n0"] == "n1"
        assert "n1" not in result.edges["explode"]
        assert result.nodes["n1"] is Empty

    def test_every_relation_has_a_mapping(self) -> None:
        """Test relations that never apply still appear."""
        result = explore(3, [CLASS_OF, own_attribute_relation("missing")])
        assert result.edges["missing"] == {}

    def test_deep_chain(self) -> None:
        """Test long chains do not hit the recursion limit."""
        head = Empty()
        current = head
        for _ in range(5000):
            current.next = Empty()
            current = current.next
        result = explore(head, [own_attribute_relation("next")])

        assert len(result.nodes) == 5001
        assert result.edge_count() == 5000

    def test_default_relations(self) -> None:
        """Test the defaults on a decorated function."""
        result = Explorer().explore(greet)

        assert result.id_of(greet) == "n0"
        assert result.nodes[result.edges["__class__"]["n0"]] is types.FunctionType
        assert result.nodes[result.edges["__name__"]["n0"]] == "greet"
        assert result.nodes[result.edges["__wrapped__"]["n0"]] is greet.__wrapped__
        assert list(result.edges) == ["__class__", "__base__", "__self__", "__wrapped__", "__name__"]

    def test_duplicate_relation_names(self) -> None:
        """Test relation names must be unique."""
        with pytest.raises(ValueError):
            Explorer([CLASS_OF, relation("__class__", type)])

    def test_none_root(self) -> None:
        """Test None can be explored."""
        result = explore(None, [CLASS_OF, BASE_OF])
        assert result.nodes["n0"] is None
        assert result.nodes["n1"] is type(None)

    def test_unexpected_errors_are_contained(self) -> None:
        """Test any exception from an accessor only skips its own edge."""

        class Lazy:
            @property
            def other(self):
                raise RuntimeError("working outside of context")

        value = Lazy()
        result = Explorer([relation("other", lambda v: v.other), CLASS_OF]).explore(value)

        assert "n0" not in result.edges["other"]
        assert result.edges["__class__"]["n0"] == "n1"
        assert result.nodes["n1"] is Lazy

    def test_equal_strings_are_deduplicated(self) -> None:
        """Test equal strings built at runtime share one node."""
        root = Empty()
        root.left = "".join(["x", "y"])
        root.right = "xy"
        result = explore(root, [own_attribute_relation("left"), own_attribute_relation("right")])

        assert len(result.nodes) == 2
        assert result.edges == {"left": {"n0": "n1"}, "right": {"n0": "n1"}}
        assert result.id_of("".join(["x", "y"])) == "n1"

    def test_edges_recorded_after_subtree(self) -> None:
        """Test an edge to a new value is recorded once its subtree is done."""
        root, a, b, c = Empty(), Empty(), Empty(), Empty()
        root.left, root.right, a.left = a, b, c
        result = explore(root, [own_attribute_relation("left"), own_attribute_relation("right")])

        assert list(result.edges["left"].items()) == [("n1", "n2"), ("n0", "n1")]
        assert list(result.edges["right"].items()) == [("n0", "n3")]
