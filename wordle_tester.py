#!/usr/bin/env python3
"""wordle_tester.py

Scores every (secret, guess) pair from word lists with both scoring modes of
wordle.py and reports how often they disagree.
Optionally writes a matplotlib graph to disk.

Positional scoring marks a guessed letter yellow whenever it occurs anywhere in
the secret; counted scoring (standard Wordle) caps yellows by the occurrences
left after the greens. They can only differ when the guess repeats a letter.

Examples:
  python3 wordle_tester.py --limit 200
  python3 wordle_tester.py --words assets/words.txt --guesses allowed.txt --sample 500 --plot results.png

Notes:
- Use --plot to require matplotlib.
"""

from __future__ import annotations

import argparse
import random
import sys
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional

import tqdm

import wordle


@dataclass(frozen=True)
class Comparison:
    secret: str
    guess: str
    positional: str
    counted: str

    @property
    def repeats(self) -> int:
        return repeated_letters(self.guess)


# number of letter occurrences beyond the first, e.g. 'geese' -> 2
def repeated_letters(word: str) -> int:
    return sum(n - 1 for n in Counter(word).values())


def compare_pair(secret: wordle.SecretWord, guess: str) -> Optional[Comparison]:
    positional = wordle.evaluate(secret, guess, scoring=wordle.SCORING_POSITIONAL)
    counted = wordle.evaluate(secret, guess, scoring=wordle.SCORING_COUNTED)
    if positional == counted:
        return None
    return Comparison(
        secret=secret.reveal(),
        guess=guess,
        positional=positional.to_string(),
        counted=counted.to_string(),
    )


def _iter_progress(iterable, *, enabled: bool, desc: str, unit: str):
    if enabled:
        return tqdm.tqdm(iterable, desc=desc, unit=unit)
    return iterable


def compare(secrets: List[str], guesses: List[str], *, progress: bool = False) -> List[Comparison]:
    disagreements: List[Comparison] = []
    for s in _iter_progress(secrets, enabled=progress, desc="Comparing", unit="secret"):
        secret = wordle.SecretWord(s)
        for guess in guesses:
            c = compare_pair(secret, guess)
            if c is not None:
                disagreements.append(c)
    return disagreements


def summarize(disagreements: Iterable[Comparison], *, pairs: int) -> str:
    disagreements = list(disagreements)
    if pairs <= 0:
        return "No pairs compared."

    lines: List[str] = []
    lines.append(f"Pairs: {pairs}")
    lines.append(f"Disagreements: {len(disagreements)} ({len(disagreements) / pairs * 100:.2f}%)")

    if disagreements:
        by_repeats = Counter(c.repeats for c in disagreements)
        lines.append(
            "By repeated letters in guess: " + ", ".join(f"{r}:{by_repeats[r]}" for r in sorted(by_repeats))
        )
        examples = ", ".join(
            f"{c.secret}/{c.guess} {c.positional}!={c.counted}" for c in disagreements[:5]
        )
        lines.append(f"Examples (up to 5): {examples}")

    return "\n".join(lines)


def plot_results(*, disagreements: List[Comparison], out_path: str) -> None:
    # Import matplotlib only if plotting is requested.
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt  # noqa: E402

    by_repeats = Counter(c.repeats for c in disagreements)
    xs = sorted(by_repeats) or [1]
    ys = [by_repeats.get(r, 0) for r in xs]

    fig, ax = plt.subplots(figsize=(8, 4.5))
    ax.bar(xs, ys, color="C1")

    ax.set_title("Positional vs counted scoring")
    ax.set_xlabel("Repeated letters in guess")
    ax.set_ylabel("# disagreeing pairs")
    ax.set_xticks(xs)

    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Compare positional and counted Wordle scoring over word lists.")
    ap.add_argument("--words", type=str, default=str(wordle.DEFAULT_WORDS_PATH),
                    help="Secrets to test (5-letter words).")
    ap.add_argument("--guesses", type=str, default=None, help="Guesses to test (defaults to --words).")
    ap.add_argument("--limit", type=int, default=0, help="Limit number of secrets (0 = no limit).")
    ap.add_argument("--sample", type=int, default=0, help="Randomly sample this many guesses (0 = all).")
    ap.add_argument("--seed", type=int, default=None, help="Seed for --sample.")
    ap.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    ap.add_argument("--plot", type=str, default=None, help="Write a matplotlib graph to this path (e.g. results.png).")
    args = ap.parse_args(argv)

    try:
        secrets = wordle.load_words_from_file(args.words)
        guesses = wordle.load_words_from_file(args.guesses) if args.guesses else secrets[:]
    except OSError as e:
        print(f"Could not read word list: {e}", file=sys.stderr)
        return 2

    if not secrets:
        print("Loaded 0 secrets.", file=sys.stderr)
        return 2
    if not guesses:
        print("Loaded 0 guesses.", file=sys.stderr)
        return 2

    if args.limit and args.limit > 0:
        secrets = secrets[: args.limit]
    if args.sample and 0 < args.sample < len(guesses):
        guesses = random.Random(args.seed).sample(guesses, args.sample)

    disagreements = compare(secrets, guesses, progress=not args.no_progress)
    print(summarize(disagreements, pairs=len(secrets) * len(guesses)))

    if args.plot:
        try:
            plot_results(disagreements=disagreements, out_path=args.plot)
            print(f"Wrote plot: {args.plot}")
        except ModuleNotFoundError as e:
            print(f"Plot requested but missing dependency: {e}. Install matplotlib to use --plot.", file=sys.stderr)
            return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
