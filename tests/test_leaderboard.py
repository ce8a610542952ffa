from conftest import make_bit
from shared.leaderboard import rank
from shared.models import SortMode


def test_rating_tie_is_broken_by_vote_count():
    single = make_bit("single", ratings={"a": 5})
    double = make_bit("double", ratings={"a": 5, "b": 5})
    assert [bit.id for bit in rank([single, double], SortMode.BY_AVERAGE)] == ["double", "single"]


def test_by_votes_breaks_ties_on_rating():
    bits = [
        make_bit("low", ratings={"a": 1, "b": 1}),
        make_bit("high", ratings={"a": 5, "b": 4}),
        make_bit("one", ratings={"a": 5}),
    ]
    assert [bit.id for bit in rank(bits, SortMode.BY_VOTES)] == ["high", "low", "one"]


def test_rank_is_stable_for_full_ties():
    bits = [make_bit(f"b{i}", ratings={"a": 3}) for i in range(5)]
    assert [bit.id for bit in rank(bits, SortMode.BY_AVERAGE)] == [f"b{i}" for i in range(5)]
    assert [bit.id for bit in rank(bits, SortMode.BY_VOTES)] == [f"b{i}" for i in range(5)]


def test_unrated_bits_sink_to_the_bottom_in_input_order():
    bits = [
        make_bit("empty1"),
        make_bit("rated", ratings={"a": 1}),
        make_bit("empty2"),
    ]
    assert [bit.id for bit in rank(bits, "average")] == ["rated", "empty1", "empty2"]


def test_rank_does_not_modify_input():
    bits = [make_bit("a"), make_bit("b", ratings={"x": 4})]
    rank(bits)
    assert [bit.id for bit in bits] == ["a", "b"]
