from workers.leaderboard_worker import poll_once


def test_recomputes_only_when_snapshot_changes(store, capsys):
    bit_id = store.create_bit({"name": "X", "description": "d", "author": "Amy", "ratings": {"a": 4}, "rating": 4.0})

    signature, view = poll_once(None)
    assert [bit.id for bit in view.leaderboard] == [bit_id]
    assert view.top_by_count[0].name == "Amy"
    assert "Top Bitters by count" in capsys.readouterr().out

    signature, view = poll_once(signature)
    assert view is None

    store.update_bit(bit_id, author="Bo", ratings={"a": 4, "b": 5}, rating=4.5)
    _, view = poll_once(signature)
    assert view.top_by_count[0].name == "Bo"
