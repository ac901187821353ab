"""Tests for nodes and automatic labels."""

from enum import IntEnum

from dotgraph.graph.node import Node, autolabel


def sample_function() -> None:
    """Plain module level function."""


class Color(IntEnum):
    RED = 1


class Hostile:
    """Object whose attribute lookups all fail."""

    def __getattribute__(self, name):
        raise RuntimeError(name)


class TestAutolabel:
    """Tests for label derivation."""

    def test_none(self) -> None:
        """Test None is labelled with its string form."""
        assert autolabel(None) == "None"

    def test_primitives(self) -> None:
        """Test primitives get their type name and JSON encoding."""
        assert autolabel(42) == "int\n42"
        assert autolabel(1.5) == "float\n1.5"
        assert autolabel(True) == "bool\ntrue"
        assert autolabel("hi") == 'str\n"hi"'

    def test_nan(self) -> None:
        """Test non-finite floats."""
        assert autolabel(float("nan")) == "float\nNaN"
        assert autolabel(float("inf")) == "float\nInfinity"

    def test_classes(self) -> None:
        """Test classes are labelled as types."""
        assert autolabel(Color) == "type\nColor"
        assert autolabel(object) == "type\nobject"

    def test_functions(self) -> None:
        """Test functions, builtins and lambdas."""
        assert autolabel(sample_function) == "function\nsample_function"
        assert autolabel(len) == "function\nlen"
        assert autolabel(lambda: None) == "function"
        assert autolabel("text".upper) == "function\nupper"

    def test_wrapped_primitive(self) -> None:
        """Test instances of primitive subclasses show the wrapped value."""
        assert autolabel(Color.RED) == "object\nnew Color(1)"

    def test_plain_objects(self) -> None:
        """Test other objects."""
        assert autolabel(object()) == "object\nnew object(...)"
        assert autolabel([1, 2]) == "object\nnew list(...)"

    def test_never_raises(self) -> None:
        """Test values that break under inspection still get a label."""
        label = autolabel(Hostile())
        assert label.startswith("object")


class TestNode:
    """Tests for node specs and definitions."""

    def test_spec_fields_and_attributes(self) -> None:
        """Test spec keys are split into fields and attributes."""
        node = Node.from_spec({"id": "a1", "rank": 2, "represents": 7, "shape": "box"})

        assert node.id == "a1"
        assert node.rank == 2
        assert node.represents == 7
        assert node.attributes == {"shape": "box", "label": "int\n7"}

    def test_invis_sets_style(self) -> None:
        """Test the invis shorthand."""
        node = Node.from_spec({"id": "x", "represents": 1, "invis": True})
        assert node.attributes["style"] == "invis"
        assert "invis" not in node.attributes

    def test_explicit_label_is_kept(self) -> None:
        """Test an explicit label wins over the automatic one."""
        node = Node.from_spec({"id": "x", "represents": 1, "label": "one"})
        assert node.attributes["label"] == "one"

    def test_apply_spec_merges(self) -> None:
        """Test later specs update earlier attributes."""
        node = Node.from_spec({"id": "x", "represents": 1, "color": "red"})
        node.apply_spec({"color": "blue", "penwidth": 2})
        assert node.attributes["color"] == "blue"
        assert node.attributes["penwidth"] == 2

    def test_definition(self) -> None:
        """Test the node statement."""
        node = Node.from_spec({"id": "i0", "represents": 42})
        assert node.definition() == 'i0[label="int\\n42"];'

    def test_definition_with_line_break_marker(self) -> None:
        """Test labels with \\N markers."""
        node = Node.from_spec({"id": "s0", "represents": "x", "label": 'a\\N"b"'})
        assert node.definition() == 's0[label="a\\N\\"b\\""];'

    def test_copy_is_independent(self) -> None:
        """Test copies do not share attributes."""
        value = object()
        node = Node.from_spec({"id": "o0", "represents": value, "style": {"a": 1}})
        clone = node.copy()
        clone.attributes["style"]["a"] = 2
        clone.attributes["color"] = "red"

        assert node.attributes["style"] == {"a": 1}
        assert "color" not in node.attributes
        assert clone.represents is value
