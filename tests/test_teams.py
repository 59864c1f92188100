import pytest

pd = pytest.importorskip("pandas")

from cfb.io.teams import TeamDirectory, load_conferences, load_memberships
from cfb.names import team_slug
from cfb.tiers import Membership, Tier


@pytest.fixture()
def team_files(tmp_path):
    memberships = tmp_path / "team_membership.csv"
    memberships.write_text(
        "season,team_id,level\n"
        "2024,delaware,fcs\n"
        "2025,delaware,fbs\n"
        "2025,Notre Dame,FBS\n"
        "2025,alabama,fbs\n"
        "2025,army,fbs\n"
        "2025,montana,fcs\n"
        "2025,wingate,d2\n"
        ",ghost,fbs\n",
        encoding="utf-8",
    )
    conferences = tmp_path / "teams.csv"
    conferences.write_text(
        "team_id,conference,season\n"
        "delaware,CAA,2024\n"
        "delaware,C-USA,\n"
        "alabama,SEC,\n"
        "notre-dame,,\n"
        "army,,\n"
        "montana,Big Sky,\n",
        encoding="utf-8",
    )
    return memberships, conferences


def test_team_slug():
    assert team_slug("Notre Dame") == "notre-dame"
    assert team_slug("Texas A&M") == "texas-a-and-m"
    assert team_slug("  San José State ") == "san-jose-state"
    assert team_slug(None) == ""


def test_load_memberships_skips_unknown_levels(team_files, caplog):
    memberships_path, _ = team_files
    caplog.set_level("WARNING", logger="cfb.io.teams")
    memberships = load_memberships(memberships_path)

    assert memberships[(2024, "delaware")] == Membership("fcs")
    assert memberships[(2025, "notre-dame")] == Membership("fbs")
    assert (2025, "wingate") not in memberships
    assert "Skipped 2 membership rows" in caplog.text


def test_load_conferences_splits_seasonal_rows(team_files):
    _, conferences_path = team_files
    current, by_season = load_conferences(conferences_path)
    assert current["delaware"] == "C-USA"
    assert by_season[(2024, "delaware")] == "CAA"
    assert current["army"] is None


def test_directory_tiers_follow_season_snapshots(team_files):
    directory = TeamDirectory.from_csv(*team_files)

    assert directory.conference(2024, "delaware") == "CAA"
    assert directory.conference(2025, "Delaware") == "C-USA"
    assert directory.tier(2024, "delaware") is Tier.FCS
    assert directory.tier(2025, "delaware") is Tier.G5
    assert directory.tier(2025, "Notre Dame") is Tier.P5
    assert directory.tier(2025, "alabama") is Tier.P5
    assert directory.tier(2025, "army") is Tier.G5
    assert directory.tier(2025, "montana") is Tier.FCS
    assert directory.tier(2025, "unknown-school") is Tier.FCS


def test_directory_without_conferences(team_files):
    memberships_path, _ = team_files
    directory = TeamDirectory.from_csv(memberships_path)
    assert directory.conference(2025, "alabama") is None
    assert directory.tier(2025, "alabama") is Tier.G5


def test_missing_file_and_columns(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_memberships(tmp_path / "nope.csv")

    bad = tmp_path / "bad.csv"
    bad.write_text("team_id,level\nalabama,fbs\n", encoding="utf-8")
    with pytest.raises(ValueError, match="season"):
        load_memberships(bad)


def test_fractional_season_is_rejected(tmp_path):
    path = tmp_path / "team_membership.csv"
    path.write_text("season,team_id,level\n2024.5,alabama,fbs\n", encoding="utf-8")
    with pytest.raises(ValueError, match="whole year"):
        load_memberships(path)

    path.write_text("season,team_id,level\n2024.0,alabama,fbs\n", encoding="utf-8")
    assert load_memberships(path) == {(2024, "alabama"): Membership("fbs")}
