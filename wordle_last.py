#!/usr/bin/env python3
"""wordle_last.py

Print the most recent game saved by wordle.py --result-path.

Default path:
  ~/.cache/wordle/last.json

Usage:
  python3 wordle_last.py
  python3 wordle_last.py --path ~/.cache/wordle/last.json --board
"""

from __future__ import annotations

import argparse
import json
import shutil
import subprocess
import sys
from pathlib import Path

import wordle


def _expand(p: str) -> Path:
    return Path(p).expanduser().resolve()


def _notify(message: str) -> None:
    if shutil.which("notify-send") is None:
        return
    subprocess.run(
        ["notify-send", "Wordle", message],
        check=False,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


def format_summary(data: dict) -> str:
    date = data.get("date", "?")
    solved = bool(data.get("solved", False))
    answer = data.get("answer")
    turns = data.get("turns")
    max_attempts = data.get("max_attempts", wordle.ATTEMPT_COUNT)

    if solved and isinstance(answer, str):
        return f"Wordle {date}: {answer} in {turns}/{max_attempts}"
    if isinstance(answer, str):
        return f"Wordle {date}: not solved, the word was '{answer}'"
    return f"Wordle {date}: not solved (turns={turns})"


def format_board(data: dict, *, color: bool = True) -> list[str]:
    rows = []
    for step in data.get("steps", []):
        guess = step.get("guess")
        pattern = step.get("pattern")
        if not isinstance(guess, str) or not isinstance(pattern, str):
            continue
        try:
            feedback = wordle.parse_pattern(pattern)
        except ValueError:
            continue
        rows.append(wordle.render_feedback(guess, feedback, color=color))
    return rows


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Print the latest Wordle result.")
    ap.add_argument("--path", type=str, default=wordle.DEFAULT_RESULT_PATH, help="Path to result JSON.")
    ap.add_argument("--board", action="store_true", help="Also print every guess with its feedback.")
    ap.add_argument("--no-color", action="store_true", help="Print the board without colors.")
    ap.add_argument("--notify", action="store_true", help="Send a desktop notification with the result.")
    args = ap.parse_args(argv)

    path = _expand(args.path)
    if not path.exists():
        print(f"No saved result found at: {path}", file=sys.stderr)
        return 1

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Failed to read result JSON: {e}", file=sys.stderr)
        return 2
    if not isinstance(data, dict):
        print(f"Failed to read result JSON: expected an object in {path}", file=sys.stderr)
        return 2

    msg = format_summary(data)
    print(msg)
    if args.board:
        for row in format_board(data, color=not args.no_color):
            print(row)
    if args.notify:
        _notify(msg)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
