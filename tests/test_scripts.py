"""Tests for the command-line scripts."""

import json
from pathlib import Path

from poker_hands.engine import RoundTally
from poker_hands.scripts import classify as classify_script
from poker_hands.scripts import tally as tally_script

DATA_DIR = Path(__file__).parent / "data"


class TestTallyScript:
    def test_json_output(self, capsys):
        code = tally_script.main([str(DATA_DIR / "rounds_sample.txt"), "--json"])
        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert result == {"wins_a": 5, "wins_b": 4, "draws": 1, "skipped": 0}

    def test_table_output(self, capsys):
        code = tally_script.main([str(DATA_DIR / "rounds_sample.txt")])
        assert code == 0
        out = capsys.readouterr().out
        assert "Hand A wins" in out
        assert "Draws" in out

    def test_invalid_input_fails(self, capsys):
        code = tally_script.main([str(DATA_DIR / "rounds_invalid.txt")])
        assert code == 1
        assert "invalid input" in capsys.readouterr().out

    def test_skip_invalid(self, capsys):
        code = tally_script.main([str(DATA_DIR / "rounds_invalid.txt"), "--skip-invalid", "--json"])
        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["skipped"] == 2
        assert result["wins_b"] == 2

    def test_missing_file(self, tmp_path, capsys):
        code = tally_script.main([str(tmp_path / "missing.txt")])
        assert code == 1
        assert "file not found" in capsys.readouterr().out

    def test_directory_path(self, tmp_path, capsys):
        code = tally_script.main([str(tmp_path)])
        assert code == 1
        assert "Error: cannot read" in capsys.readouterr().out

    def test_non_utf8_file(self, tmp_path, capsys):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"5H 5C 6S 7S KD 2C 3S 8S 8D TD \xff\xfe\n")
        code = tally_script.main([str(path)])
        assert code == 1
        assert "not valid UTF-8" in capsys.readouterr().out

    def test_summary_table_rows(self):
        table = tally_script.build_summary_table(RoundTally(wins_a=1, wins_b=1, draws=0, skipped=3))
        assert table.row_count == 4
        assert tally_script.build_summary_table(RoundTally()).row_count == 3


class TestClassifyScript:
    def test_single_hand(self, capsys):
        code = classify_script.main(["8C 8S KC 9H 9S"])
        assert code == 0
        assert "Two Pairs (Nine)" in capsys.readouterr().out

    def test_two_hands(self, capsys):
        code = classify_script.main(["5H 5C 6S 7S KD", "2C 3S 8S 8D TD"])
        assert code == 0
        out = capsys.readouterr().out
        assert "One Pair (Five)" in out
        assert "One Pair (Eight)" in out
        assert "Hand B wins" in out

    def test_invalid_hand(self, capsys):
        code = classify_script.main(["8C 8S KC 9H"])
        assert code == 1
        assert "Error" in capsys.readouterr().out

    def test_too_many_hands(self, capsys):
        code = classify_script.main(["8C 8S KC 9H 9S", "8C 8S KC 9H 9S", "8C 8S KC 9H 9S"])
        assert code == 1
