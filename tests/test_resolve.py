"""Tests for identifier resolution."""

import pytest

from szyk import Node, TargetNotFoundError, find_duplicate_ids, find_index


class TestFindIndex:
    def test_finds_position(self) -> None:
        domain = [Node("a"), Node("b"), Node("c")]
        assert find_index(domain, "c") == 2

    def test_first_match_wins(self) -> None:
        domain = [Node("x", [], 1), Node("a"), Node("x", [], 2)]
        assert find_index(domain, "x") == 0

    def test_not_found(self) -> None:
        with pytest.raises(TargetNotFoundError) as exc_info:
            find_index([Node("a")], "b")
        assert exc_info.value.id == "b"

    def test_empty_domain(self) -> None:
        with pytest.raises(TargetNotFoundError):
            find_index([], 0)

    def test_uses_equality(self) -> None:
        # 1 == 1.0, so a float target resolves an int id.
        assert find_index([Node(1)], 1.0) == 0


class TestFindDuplicateIds:
    def test_no_duplicates(self) -> None:
        assert find_duplicate_ids([Node("a"), Node("b")]) == []

    def test_reports_each_duplicate_once_in_order(self) -> None:
        domain = [Node("a"), Node("b"), Node("b"), Node("a"), Node("a"), Node("c")]
        assert find_duplicate_ids(domain) == ["b", "a"]

    def test_empty_domain(self) -> None:
        assert find_duplicate_ids([]) == []

    def test_unhashable_ids(self) -> None:
        assert find_duplicate_ids([Node([1]), Node([1])]) == [[1]]
