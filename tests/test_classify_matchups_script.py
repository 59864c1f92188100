import importlib.util
from pathlib import Path

import pytest

pd = pytest.importorskip("pandas")
pytest.importorskip("yaml")

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "classify_matchups.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("classify_matchups", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_script_writes_annotated_csv(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("CFB_CONFIG", raising=False)
    games = tmp_path / "games.csv"
    games.write_text(
        "season,home_team_id,away_team_id\n"
        "2025,alabama,boise-state\n"
        "2025,montana,montana-state\n",
        encoding="utf-8",
    )
    memberships = tmp_path / "membership.csv"
    memberships.write_text(
        "season,team_id,level\n"
        "2025,alabama,fbs\n"
        "2025,boise-state,fbs\n"
        "2025,montana,fcs\n"
        "2025,montana-state,fcs\n",
        encoding="utf-8",
    )
    conferences = tmp_path / "teams.csv"
    conferences.write_text(
        "team_id,conference\nalabama,SEC\nboise-state,Mountain West\n",
        encoding="utf-8",
    )
    output = tmp_path / "out" / "games_matchups.csv"

    module = _load_script()
    exit_code = module.main(
        [
            "--games",
            str(games),
            "--memberships",
            str(memberships),
            "--conferences",
            str(conferences),
            "--output",
            str(output),
            "--drop-unsupported",
        ]
    )

    assert exit_code == 0
    written = pd.read_csv(output)
    assert list(written["matchup_class"]) == ["P5_G5"]
    assert written.loc[0, "is_P5_G5"] == 1

    out = capsys.readouterr().out
    assert "Matchup class distribution" in out
    assert "unsupported" in out
