"""Tests for the Result ADT."""

from __future__ import annotations

import pytest

from reactgpu.result import Failure, Result, Success, fold_results


def _add_if_positive(acc: int, x: int) -> Result[int, str]:
    return Success(acc + x) if x > 0 else Failure(f"negative: {x}")


class TestSuccessFailure:
    def test_success_unwraps(self) -> None:
        assert Success(3).unwrap() == 3
        assert Success(3).is_success()
        assert not Success(3).is_failure()

    def test_failure_unwrap_raises(self) -> None:
        with pytest.raises(RuntimeError, match="Called unwrap\\(\\) on Failure"):
            Failure("boom").unwrap()

    def test_map_only_touches_success(self) -> None:
        assert Success(2).map(lambda x: x * 10) == Success(20)
        assert Failure("e").map(lambda x: x * 10) == Failure("e")

    def test_map_error_only_touches_failure(self) -> None:
        assert Failure("e").map_error(str.upper) == Failure("E")
        assert Success(1).map_error(str.upper) == Success(1)

    def test_and_then_chains(self) -> None:
        assert Success(1).and_then(lambda x: Success(x + 1)) == Success(2)
        assert Failure("e").and_then(lambda x: Success(x + 1)) == Failure("e")


class TestFoldResults:
    def test_all_success(self) -> None:
        assert fold_results([1, 2, 3], _add_if_positive, 0) == Success(6)

    def test_stops_at_first_failure(self) -> None:
        seen: list[int] = []

        def record(acc: int, x: int) -> Result[int, str]:
            seen.append(x)
            return _add_if_positive(acc, x)

        assert fold_results([1, -2, 3], record, 0) == Failure("negative: -2")
        assert seen == [1, -2]

    def test_empty_returns_initial(self) -> None:
        assert fold_results([], _add_if_positive, 7) == Success(7)
