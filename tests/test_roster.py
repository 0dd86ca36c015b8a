"""Tests for the player roster and team draw."""

import random

import pytest

from src.wordgame import Roster, Team


@pytest.fixture
def roster():
    r = Roster(random.Random(11))
    for name in ["Ala", "Bartek", "Celina", "Darek", "Ela"]:
        r.add_player(name)
    return r


class TestAddRemove:
    """Tests for adding and removing players."""

    def test_add_player_appends_without_team(self):
        r = Roster()
        assert r.add_player("Ola")
        assert len(r) == 1
        assert r.players[0].name == "Ola"
        assert r.players[0].team is None

    def test_add_player_trims_name(self):
        r = Roster()
        r.add_player("  Piotr  ")
        assert r.players[0].name == "Piotr"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_names_are_ignored(self, name):
        r = Roster()
        assert not r.add_player(name)
        assert len(r) == 0

    def test_duplicate_names_allowed(self):
        r = Roster()
        r.add_player("Kasia")
        r.add_player("Kasia")
        assert len(r) == 2

    def test_remove_by_position(self, roster):
        assert roster.remove_player(1)
        assert [p.name for p in roster.players] == ["Ala", "Celina", "Darek", "Ela"]

    @pytest.mark.parametrize("index", [-1, 5, 100])
    def test_remove_out_of_range_is_ignored(self, roster, index):
        assert not roster.remove_player(index)
        assert len(roster) == 5

    def test_player_lookup(self, roster):
        assert roster.player(0).name == "Ala"
        assert roster.player(9) is None


class TestRandomizeTeams:
    """Tests for drawing teams."""

    def test_first_half_rounded_up_goes_to_team_a(self, roster):
        roster.randomize_teams()
        assert roster.team_size(Team.A) == 3
        assert roster.team_size(Team.B) == 2

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 7, 10])
    def test_team_sizes_differ_by_at_most_one(self, count):
        r = Roster(random.Random(count))
        for i in range(count):
            r.add_player(f"P{i}")
        r.randomize_teams()

        a, b = r.team_size(Team.A), r.team_size(Team.B)
        assert a + b == count
        assert 0 <= a - b <= 1

    def test_everyone_keeps_their_place_in_a_team(self, roster):
        roster.randomize_teams()
        names = sorted(roster.names(Team.A) + roster.names(Team.B))
        assert names == ["Ala", "Bartek", "Celina", "Darek", "Ela"]
        assert roster.total_assigned() == 5

    def test_by_team_follows_roster_order(self, roster):
        roster.randomize_teams()
        order = [p.name for p in roster.players]
        team_a = roster.names(Team.A)
        assert team_a == [n for n in order if n in team_a]
        assert team_a == order[:3]

    def test_both_teams_filled(self):
        r = Roster()
        r.add_player("Solo")
        r.randomize_teams()
        assert not r.both_teams_filled()

        r.add_player("Drugi")
        r.randomize_teams()
        assert r.both_teams_filled()

    def test_unassigned_players_not_counted(self, roster):
        roster.randomize_teams()
        roster.add_player("Spóźniony")
        assert len(roster) == 6
        assert roster.total_assigned() == 5
