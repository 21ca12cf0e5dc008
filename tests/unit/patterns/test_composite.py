"""Tests for the Composite pattern unit."""
import pytest

from pattern_catalog.patterns.composite import Composite, CompositeExample, Leaf, build_sample_tree


@pytest.mark.unit
class TestComposite:
    def test_leaf_operation_is_its_name(self):
        leaf = Leaf("A")
        assert leaf.operation() == "A"
        assert not leaf.is_composite()

    def test_empty_composite(self):
        assert Composite("Empty").operation() == "Empty()"

    def test_nested_operation(self):
        assert build_sample_tree().operation() == "Root(Branch(A+B)+C)"

    def test_add_is_chainable(self):
        tree = Composite("T").add(Leaf("x")).add(Leaf("y"))
        assert tree.operation() == "T(x+y)"
        assert tree.is_composite()

    def test_remove_child(self):
        a, b = Leaf("a"), Leaf("b")
        tree = Composite("T").add(a).add(b)
        tree.remove(a)
        assert tree.children == [b]
        assert tree.operation() == "T(b)"

    def test_children_returns_copy(self):
        tree = Composite("T").add(Leaf("a"))
        tree.children.append(Leaf("z"))
        assert len(tree.children) == 1


@pytest.mark.unit
def test_composite_example_output():
    assert CompositeExample().render() == ["Result: Root(Branch(A+B)+C)"]
