from conftest import make_bit
from shared.dashboard import build_dashboard
from shared.models import SortMode, ViewState


def test_dashboard_recomputes_every_view(accounts):
    bits = [
        make_bit("b1", author="Amy", ratings={"u-bo": 3}),
        make_bit("b2", author="Bo", ratings={"u-amy": 5, "u-cass": 1}),
        make_bit("b3", author="amy", ratings={"u-bo": 5}),
    ]
    view = build_dashboard(bits, accounts, accounts[0], ViewState(sort_mode=SortMode.BY_VOTES))

    assert [bit.id for bit in view.leaderboard] == ["b2", "b3", "b1"]
    assert [bit.id for bit in view.my_bits] == ["b1", "b3"]
    assert [g.name for g in view.top_by_count] == ["Amy", "Bo"]
    assert [g.name for g in view.top_by_average] == ["Amy", "Bo"]
    assert view.my_stats.bits == 2
    assert view.global_stats.users == 2


def test_dashboard_is_idempotent(accounts):
    bits = [make_bit("b1", author="Amy", ratings={"u-bo": 3})]
    assert build_dashboard(bits, accounts, None) == build_dashboard(bits, accounts, None)
