import pytest

import wordle
import wordle_last


@pytest.fixture
def saved_result(tmp_path):
    path = tmp_path / "last.json"
    result = wordle.GameResult(
        secret="bathe",
        solved=True,
        turns=2,
        max_attempts=6,
        steps=[("braid", "gbybb"), ("bathe", "ggggg")],
    )
    wordle.write_result(path, result, wordle.SCORING_POSITIONAL)
    return path


def test_format_summary():
    assert wordle_last.format_summary(
        {"date": "2026-10-16", "solved": True, "answer": "bathe", "turns": 3, "max_attempts": 6}
    ) == "Wordle 2026-10-16: bathe in 3/6"
    assert wordle_last.format_summary(
        {"date": "2026-10-16", "solved": False, "answer": "bathe", "turns": 6}
    ) == "Wordle 2026-10-16: not solved, the word was 'bathe'"
    assert wordle_last.format_summary({}) == "Wordle ?: not solved (turns=None)"


def test_format_board_skips_broken_steps():
    data = {"steps": [
        {"guess": "braid", "pattern": "gbybb"},
        {"guess": "crane", "pattern": "nope"},
        {"guess": None, "pattern": "ggggg"},
    ]}
    assert wordle_last.format_board(data, color=False) == ["b r a i d"]


def test_main_prints_saved_result(saved_result, capsys):
    assert wordle_last.main(["--path", str(saved_result), "--board", "--no-color"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(": bathe in 2/6")
    assert lines[1:] == ["b r a i d", "b a t h e"]


def test_main_missing_file(tmp_path, capsys):
    assert wordle_last.main(["--path", str(tmp_path / "nope.json")]) == 1
    assert "No saved result found" in capsys.readouterr().err


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_main_unreadable_file(tmp_path, capsys, content):
    path = tmp_path / "last.json"
    path.write_text(content, encoding="utf-8")
    assert wordle_last.main(["--path", str(path)]) == 2
    assert "Failed to read result JSON" in capsys.readouterr().err
