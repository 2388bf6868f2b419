"""Unit tests for percentage computation and result ordering."""

from types import SimpleNamespace

import pytest

from app.services import voting_service
from app.services.voting_service import compute_percentage


class TestComputePercentage:
    def test_zero_total_is_zero(self):
        assert compute_percentage(0, 0) == 0

    def test_three_of_four(self):
        assert compute_percentage(3, 4) == 75
        assert compute_percentage(1, 4) == 25

    @pytest.mark.parametrize(
        "count,total,expected",
        [
            (1, 8, 13),  # 12.5 rounds up
            (1, 3, 33),
            (2, 3, 67),
            (1, 200, 1),  # 0.5 rounds up
            (5, 5, 100),
        ],
    )
    def test_rounds_half_up(self, count, total, expected):
        assert compute_percentage(count, total) == expected


class FakeStore:
    """Minimal store returning rows in a deliberately wrong order."""

    def __init__(self, rows):
        self.rows = rows

    def get_players_with_vote_counts(self):
        return self.rows

    def count_total_votes(self):
        return sum(row["vote_count"] for row in self.rows)


def make_player(player_id: int, name: str):
    return SimpleNamespace(
        id=player_id,
        name=name,
        team="Team",
        image_url=None,
        position=None,
        number=None,
        is_active=True,
        created_at=None,
        updated_at=None,
    )


def test_results_are_ordered_by_vote_count_descending():
    store = FakeStore(
        [
            {"player": make_player(1, "B"), "vote_count": 1},
            {"player": make_player(2, "A"), "vote_count": 3},
        ]
    )

    results = voting_service.get_results(store)

    assert results["total_votes"] == 4
    assert [p["name"] for p in results["players"]] == ["A", "B"]
    assert [p["percentage"] for p in results["players"]] == [75, 25]


def test_results_without_votes_have_zero_percentages():
    store = FakeStore([{"player": make_player(1, "A"), "vote_count": 0}])

    results = voting_service.get_results(store)

    assert results["total_votes"] == 0
    assert results["players"][0]["percentage"] == 0
