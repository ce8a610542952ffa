from conftest import make_bit
from shared.errors import RejectionReason
from shared.stats import format_avg, global_stats, my_stats
from shared.submission import new_bit_request


def test_new_bit_request_builds_create_fields(accounts):
    request = new_bit_request("  Airline food ", " peanuts ", accounts[2])
    assert request.is_create
    assert request.fields == {
        "name": "Airline food",
        "description": "peanuts",
        "author": "cass",
        "authorId": "u-cass",
        "rating": 0,
        "ratings": {},
    }


def test_new_bit_request_rejects_blank_fields(accounts):
    assert new_bit_request(" ", "desc", accounts[0]).reason is RejectionReason.MISSING_INPUT
    assert new_bit_request("name", "", accounts[0]).reason is RejectionReason.MISSING_INPUT
    assert new_bit_request("name", "desc", None).reason is RejectionReason.MISSING_INPUT


def test_my_stats(accounts):
    amy = accounts[0]
    bits = [
        make_bit("b1", author="Amy", ratings={"u-bo": 4}),
        make_bit("b2", author_id="u-amy", ratings={"u-bo": 2}),
        make_bit("b3", author="Bo", ratings={"u-amy": 5}),
    ]
    stats = my_stats(bits, amy, accounts)
    assert stats.bits == 2
    assert stats.avg_rating == 3.0
    assert stats.ratings_given == 1


def test_my_stats_without_bits_has_no_average(accounts):
    stats = my_stats([], accounts[0], accounts)
    assert stats.avg_rating is None
    assert format_avg(stats.avg_rating) == "—"


def test_global_stats_counts_distinct_owner_names(accounts):
    bits = [
        make_bit("b1", author="Amy", rating=4),
        make_bit("b2", author=" amy", rating=2),
        make_bit("b3", author_id="u-bo", rating=0),
    ]
    stats = global_stats(bits, accounts)
    assert stats.total_bits == 3
    assert stats.avg_rating == 2.0
    assert stats.users == 2
    assert format_avg(stats.avg_rating) == "2.0"
