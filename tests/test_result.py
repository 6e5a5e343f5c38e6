"""Tests for PuzzleResult."""

from puzzles.core.result import PuzzleResult, ResultKind


def test_named_constructors():
    assert PuzzleResult.u32_item(7) == PuzzleResult(ResultKind.U32_ITEM, 7)
    assert PuzzleResult.u64_item(2**40) == PuzzleResult(ResultKind.U64_ITEM, 2**40)
    assert PuzzleResult.usize_item(3) == PuzzleResult(ResultKind.USIZE_ITEM, 3)
    assert PuzzleResult.u32_item_opt(None) == PuzzleResult(ResultKind.U32_ITEM_OPT, None)
    assert PuzzleResult.u32_list([1, 2]) == PuzzleResult(ResultKind.U32_LIST, (1, 2))
    assert PuzzleResult.usize_list(iter([4])) == PuzzleResult(ResultKind.USIZE_LIST, (4,))


def test_kind_distinguishes_equal_values():
    assert PuzzleResult.u32_item(5) != PuzzleResult.usize_item(5)


def test_wrap_keeps_large_values():
    big = 2**63 + 1
    assert PuzzleResult.wrap(ResultKind.U64_ITEM, big).value == big


def test_to_payload():
    assert PuzzleResult.u32_list((1, 2, 3)).to_payload() == {
        "kind": "u32_list",
        "value": [1, 2, 3],
    }
    assert PuzzleResult.u32_item_opt(None).to_payload() == {
        "kind": "u32_item_opt",
        "value": None,
    }


def test_str():
    assert str(PuzzleResult.u32_item(42)) == "42"
    assert str(PuzzleResult.u32_item_opt(None)) == "None"
    assert str(PuzzleResult.usize_list([1, 2])) == "1, 2"
