import pytest

from dsalab.hanoi import hanoi_moves


def _play(n, moves):
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for src, dst in moves:
        disk = pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disk
        pegs[dst].append(disk)
    return pegs


def test_single_disk():
    assert list(hanoi_moves(1)) == [("A", "C")]


def test_two_disks():
    assert list(hanoi_moves(2)) == [("A", "B"), ("A", "C"), ("B", "C")]


def test_zero_disks_no_moves():
    assert list(hanoi_moves(0)) == []


def test_negative_rejected():
    with pytest.raises(ValueError):
        list(hanoi_moves(-1))


@pytest.mark.parametrize("n", range(1, 8))
def test_moves_are_legal_and_complete(n):
    pegs = _play(n, hanoi_moves(n))
    assert pegs["A"] == []
    assert pegs["B"] == []
    assert pegs["C"] == list(range(n, 0, -1))


@pytest.mark.parametrize("n", range(1, 8))
def test_move_count_doubles_plus_one(n):
    assert len(list(hanoi_moves(n + 1))) == 2 * len(list(hanoi_moves(n))) + 1


def test_custom_peg_names():
    moves = list(hanoi_moves(3, "x", "y", "z"))
    assert moves[0][0] == "x"
    assert moves[-1][1] == "z"
    assert {peg for move in moves for peg in move} == {"x", "y", "z"}