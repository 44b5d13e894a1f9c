"""Unit tests for the line-level shortest edit script."""

import pytest

from codediff.diff.myers import Edit, Frontier, shortest_edit_script


def _tags(edits):
    return [edit.tag for edit in edits]


def _apply(edits, left, right):
    """Rebuild the right sequence from the left one and an edit script."""
    rebuilt = []
    for edit in edits:
        if edit.tag == "equal":
            rebuilt.append(left[edit.left_index])
        elif edit.tag == "insert":
            rebuilt.append(right[edit.right_index])
    return rebuilt


@pytest.mark.unit
class TestEdit:
    """Tests for the Edit record constructors."""

    def test_equal_carries_both_indices(self):
        """Test equal edits reference both sides."""
        assert Edit.equal(2, 3) == Edit("equal", 2, 3)

    def test_delete_carries_left_index_only(self):
        """Test delete edits reference only the left side."""
        assert Edit.delete(4) == Edit("delete", 4, None)

    def test_insert_carries_right_index_only(self):
        """Test insert edits reference only the right side."""
        assert Edit.insert(1) == Edit("insert", None, 1)


@pytest.mark.unit
class TestFrontier:
    """Tests for Frontier diagonal indexing."""

    def test_x_at_maps_diagonal_to_slot(self):
        """Test reach slots run from diagonal -step to +step in steps of two."""
        frontier = Frontier(2, (5, 6, 7))
        assert frontier.x_at(-2) == 5
        assert frontier.x_at(0) == 6
        assert frontier.x_at(2) == 7

    def test_frontier_is_immutable(self):
        """Test recorded frontiers cannot be modified."""
        frontier = Frontier(0, (1,))
        with pytest.raises(AttributeError):
            frontier.step = 3  # type: ignore[misc]


@pytest.mark.unit
class TestShortestEditScript:
    """Tests for shortest_edit_script function."""

    def test_both_empty(self):
        """Test two empty sequences give an empty script."""
        assert shortest_edit_script([], []) == []

    def test_left_empty_is_all_inserts(self):
        """Test an empty left side yields only inserts."""
        edits = shortest_edit_script([], ["a", "b"])
        assert edits == [Edit.insert(0), Edit.insert(1)]

    def test_right_empty_is_all_deletes(self):
        """Test an empty right side yields only deletes."""
        edits = shortest_edit_script(["a", "b"], [])
        assert edits == [Edit.delete(0), Edit.delete(1)]

    def test_identical_sequences(self):
        """Test identical input is all equal edits."""
        lines = ["x", "y", "z"]
        assert shortest_edit_script(lines, lines) == [Edit.equal(0, 0), Edit.equal(1, 1), Edit.equal(2, 2)]

    def test_substitution_deletes_before_inserting(self):
        """Test a replaced line is a delete followed by an insert."""
        edits = shortest_edit_script(["a", "b", "c"], ["a", "x", "c"])
        assert edits == [Edit.equal(0, 0), Edit.delete(1), Edit.insert(1), Edit.equal(2, 2)]

    def test_append(self):
        """Test appended lines become trailing inserts."""
        assert _tags(shortest_edit_script(["a", "b"], ["a", "b", "c"])) == ["equal", "equal", "insert"]

    def test_prepend(self):
        """Test prepended lines become leading inserts."""
        assert _tags(shortest_edit_script(["b"], ["a", "b"])) == ["insert", "equal"]

    def test_removal_in_middle(self):
        """Test a removed middle line is a single delete."""
        edits = shortest_edit_script(["a", "b", "c"], ["a", "c"])
        assert edits == [Edit.equal(0, 0), Edit.delete(1), Edit.equal(2, 1)]

    def test_classic_example_is_minimal(self):
        """Test the textbook ABCABBA/CBABAC pair has edit distance five."""
        left = list("ABCABBA")
        right = list("CBABAC")
        edits = shortest_edit_script(left, right)
        assert sum(1 for e in edits if e.tag != "equal") == 5
        assert _apply(edits, left, right) == right

    def test_edits_in_document_order(self):
        """Test indices on each side increase monotonically."""
        left = ["a", "b", "c", "d", "e"]
        right = ["b", "x", "d", "e", "f"]
        edits = shortest_edit_script(left, right)

        left_indices = [e.left_index for e in edits if e.left_index is not None]
        right_indices = [e.right_index for e in edits if e.right_index is not None]
        assert left_indices == list(range(len(left)))
        assert right_indices == list(range(len(right)))

    def test_ignore_whitespace_matches_folded_lines(self):
        """Test whitespace-only differences are equal when folding."""
        edits = shortest_edit_script(["  x  ", "a\tb"], ["x", "a b"], ignore_whitespace=True)
        assert _tags(edits) == ["equal", "equal"]

    def test_whitespace_significant_by_default(self):
        """Test whitespace differences count without folding."""
        edits = shortest_edit_script(["  x  "], ["x"])
        assert _tags(edits) == ["delete", "insert"]

    def test_empty_lines_compare_equal(self):
        """Test empty strings are ordinary lines."""
        edits = shortest_edit_script(["", "a", ""], ["", ""])
        assert sum(1 for e in edits if e.tag != "equal") == 1

    def test_accepts_tuples(self):
        """Test any sequence type is accepted."""
        assert _tags(shortest_edit_script(("a",), ("a",))) == ["equal"]

    @pytest.mark.slow
    def test_large_identical_input(self):
        """Test identical large inputs resolve in a single snake."""
        lines = [f"line {i}" for i in range(20000)]
        edits = shortest_edit_script(lines, list(lines))
        assert len(edits) == 20000
        assert all(e.tag == "equal" for e in edits)

    @pytest.mark.slow
    def test_large_input_with_scattered_changes(self):
        """Test a long document with a few edits stays minimal."""
        left = [f"line {i}" for i in range(10000)]
        right = list(left)
        right[10] = "changed"
        del right[5000]
        right.insert(9000, "inserted")
        edits = shortest_edit_script(left, right)
        assert sum(1 for e in edits if e.tag != "equal") == 4
        assert _apply(edits, left, right) == right
