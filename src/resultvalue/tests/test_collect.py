"""Tests for aggregating many Results into one."""

from __future__ import annotations

from collections.abc import Iterator

from resultvalue import Result, collect_results, failure, pack_results, success, traverse


def _parse_int(s: str) -> Result[int, str]:
    try:
        return success(int(s))
    except ValueError:
        return failure(f"invalid: {s}")


# ═════════════════════════════════════════════════════════════════════════════
# pack_results
# ═════════════════════════════════════════════════════════════════════════════


def test_pack_all_success_preserves_order() -> None:
    assert pack_results([success(1), success(2), success(3)]) == success([1, 2, 3])


def test_pack_empty() -> None:
    results: list[Result[int, str]] = []
    assert pack_results(results) == success([])


def test_pack_returns_failure() -> None:
    assert pack_results([success(1), failure("x"), success(3)]) == failure("x")


def test_pack_first_failure_wins() -> None:
    first: Result[int, str] = failure("a")

    packed = pack_results([first, failure("b")])

    assert packed == failure("a")
    assert packed is first


def test_pack_short_circuits_lazy_input() -> None:
    produced: list[int] = []

    def results() -> Iterator[Result[int, str]]:
        produced.append(1)
        yield success(1)
        produced.append(2)
        yield failure("x")
        produced.append(3)
        yield success(3)

    assert pack_results(results()) == failure("x")
    assert produced == [1, 2]


def test_pack_accepts_any_iterable() -> None:
    assert pack_results(success(n) for n in range(3)) == success([0, 1, 2])
    assert pack_results((success("a"), success("b"))) == success(["a", "b"])


# ═════════════════════════════════════════════════════════════════════════════
# traverse
# ═════════════════════════════════════════════════════════════════════════════


def test_traverse_all_success() -> None:
    assert traverse(["1", "2", "3"], _parse_int) == success([1, 2, 3])


def test_traverse_stops_at_first_failure() -> None:
    seen: list[str] = []

    def parse(s: str) -> Result[int, str]:
        seen.append(s)
        return _parse_int(s)

    assert traverse(["1", "bad", "3", "worse"], parse) == failure("invalid: bad")
    assert seen == ["1", "bad"]


# ═════════════════════════════════════════════════════════════════════════════
# collect_results
# ═════════════════════════════════════════════════════════════════════════════


def test_collect_results_all_success() -> None:
    assert collect_results([success(1), success(2), success(3)]) == success([1, 2, 3])


def test_collect_results_accumulates_errors() -> None:
    collected = collect_results([success(1), failure("e1"), success(3), failure("e2")])

    assert collected == failure(["e1", "e2"])


def test_collect_results_empty() -> None:
    assert collect_results([]) == success([])
