#!/usr/bin/env python3
"""
wordle.py

Terminal Wordle. A secret five-letter word is drawn from a word list and you
get a fixed number of guesses to find it. After each guess every letter is
colored:
- green: the letter is in the secret at this position
- yellow: the letter is in the secret, somewhere else
- plain: the letter is not in the secret

Scoring:
- "positional" (default): a guessed letter is yellow whenever it occurs anywhere
  in the secret, so a repeated letter can be yellow more times than it occurs.
- "counted": standard Wordle rules, yellows are capped by the number of
  occurrences left after the greens.

Usage:
  python3 wordle.py
  python3 wordle.py --words my_words.txt --attempts 6 --scoring counted
  python3 wordle.py --result-path ~/.cache/wordle/last.json
"""

from __future__ import annotations

import argparse
import enum
import json
import pathlib
import random
import re
import sys
import time
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Iterator, List, Mapping, Optional, Protocol, Sequence, Set, Tuple

from colorama import Fore, Style
from colorama import init as colorama_init

WORD_LENGTH = 5
ATTEMPT_COUNT = 6

SCORING_POSITIONAL = "positional"
SCORING_COUNTED = "counted"
SCORING_MODES = (SCORING_POSITIONAL, SCORING_COUNTED)

DEFAULT_WORDS_PATH = pathlib.Path(__file__).resolve().parent / "assets" / "words.txt"
DEFAULT_RESULT_PATH = "~/.cache/wordle/last.json"

QUIT_COMMAND = "quit"

LogFn = Callable[[str], None]


class InvalidWordLength(ValueError):
    """A secret or a guess does not have exactly WORD_LENGTH characters."""

    def __init__(self, actual: int, expected: int = WORD_LENGTH):
        self.actual = actual
        self.expected = expected
        super().__init__(f"Word must be exactly {expected} characters long, got {actual}")


class Feedback(enum.IntEnum):
    # same ints as the classic pattern tuples: 2 = green, 1 = yellow, 0 = gray
    ABSENT = 0
    PRESENT = 1
    MATCHED = 2

    @property
    def symbol(self) -> str:
        return _FEEDBACK_SYMBOLS[self]


_FEEDBACK_SYMBOLS = {Feedback.ABSENT: "b", Feedback.PRESENT: "y", Feedback.MATCHED: "g"}


@dataclass(frozen=True)
class FeedbackSequence:
    """Per-position result of scoring one guess, in guess order."""

    slots: Tuple[Feedback, ...]

    @classmethod
    def all_matched(cls) -> "FeedbackSequence":
        return cls(tuple(Feedback.MATCHED for _ in range(WORD_LENGTH)))

    def full_match(self) -> bool:
        return all(slot is Feedback.MATCHED for slot in self.slots)

    def to_string(self) -> str:
        return "".join(slot.symbol for slot in self.slots)

    def __iter__(self) -> Iterator[Feedback]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: int) -> Feedback:
        return self.slots[index]


# parse_pattern converts a string like 'bygyb' or '02120' into a FeedbackSequence
def parse_pattern(s: str) -> FeedbackSequence:
    s = s.strip().lower()
    if re.fullmatch(rf"[gyb]{{{WORD_LENGTH}}}", s):
        m = {"b": Feedback.ABSENT, "y": Feedback.PRESENT, "g": Feedback.MATCHED}
        return FeedbackSequence(tuple(m[ch] for ch in s))
    if re.fullmatch(rf"[012]{{{WORD_LENGTH}}}", s):
        return FeedbackSequence(tuple(Feedback(int(ch)) for ch in s))
    raise ValueError(
        f"Pattern must be {WORD_LENGTH} chars of [g,y,b] or [0,1,2]. Example: 'bygyb' or '02120'."
    )


class SecretWord:
    """The word the player has to find.

    Keeps the text verbatim plus an index from each letter to the set of
    positions it occupies, so position checks during scoring are O(1).
    """

    __slots__ = ("_text", "_positions")

    def __init__(self, raw: str):
        if len(raw) != WORD_LENGTH:
            raise InvalidWordLength(len(raw))

        positions: Dict[str, Set[int]] = defaultdict(set)
        for ind, ch in enumerate(raw):
            positions[ch].add(ind)

        self._text = raw
        self._positions: Mapping[str, FrozenSet[int]] = MappingProxyType(
            {ch: frozenset(inds) for ch, inds in positions.items()}
        )

    @classmethod
    def from_source(cls, source: "WordSource") -> "SecretWord":
        return cls(source.generate())

    @property
    def text(self) -> str:
        return self._text

    @property
    def position_index(self) -> Mapping[str, FrozenSet[int]]:
        return self._positions

    def is_at_position(self, char: str, position: int) -> bool:
        return position in self._positions.get(char, ())

    def contains(self, char: str) -> bool:
        return char in self._positions

    # only meant for the end-of-game message
    def reveal(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretWord):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"SecretWord({self._text!r})"


def validate_guess(guess: str) -> str:
    if len(guess) != WORD_LENGTH:
        raise InvalidWordLength(len(guess))
    return guess


def _positional_feedback(secret: SecretWord, guess: str) -> FeedbackSequence:
    slots: List[Feedback] = []
    for ind, ch in enumerate(guess):
        if secret.is_at_position(ch, ind):
            slots.append(Feedback.MATCHED)
        elif secret.contains(ch):
            slots.append(Feedback.PRESENT)
        else:
            slots.append(Feedback.ABSENT)
    return FeedbackSequence(tuple(slots))


def _counted_feedback(secret: SecretWord, guess: str) -> FeedbackSequence:
    # first pass: greens
    res = [Feedback.ABSENT] * WORD_LENGTH
    secret_counts = Counter(secret.text)

    for i, (s_ch, g_ch) in enumerate(zip(secret.text, guess)):
        if g_ch == s_ch:
            res[i] = Feedback.MATCHED
            secret_counts[g_ch] -= 1

    # second pass: yellows, only while unmatched occurrences are left
    for i, g_ch in enumerate(guess):
        if res[i] is Feedback.ABSENT and secret_counts[g_ch] > 0:
            res[i] = Feedback.PRESENT
            secret_counts[g_ch] -= 1

    return FeedbackSequence(tuple(res))


def evaluate(secret: SecretWord, guess: str, scoring: str = SCORING_POSITIONAL) -> FeedbackSequence:
    """Score ``guess`` against ``secret`` letter by letter.

    Raises InvalidWordLength if the guess has the wrong length, and ValueError
    for an unknown scoring mode.
    """
    if scoring not in SCORING_MODES:
        raise ValueError(f"Unknown scoring mode {scoring!r}, expected one of {', '.join(SCORING_MODES)}")
    validate_guess(guess)

    if guess == secret.text:
        return FeedbackSequence.all_matched()

    if scoring == SCORING_COUNTED:
        return _counted_feedback(secret, guess)
    return _positional_feedback(secret, guess)


# load_words_from_file loads a list of 5-letter words from a file, one per line
def load_words_from_file(path: str | pathlib.Path) -> List[str]:
    words: List[str] = []
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            w = line.strip().lower()
            if len(w) == WORD_LENGTH and w.isalpha():
                words.append(w)
    # Deduplicate while keeping order
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


class WordSource(Protocol):
    def generate(self) -> str:
        ...


class ListWordSource:
    """Draws secrets uniformly from an in-memory word list."""

    def __init__(self, words: Sequence[str], rng: random.Random | None = None):
        if not words:
            raise ValueError("Word list is empty.")
        self.words = list(words)
        self._rng = rng if rng is not None else random.Random()

    def generate(self) -> str:
        return self._rng.choice(self.words)


class FileWordSource:
    """Draws secrets from one or more word list files.

    A file is picked uniformly first, then a word inside it, so a corpus can be
    split into parts without the bigger parts dominating the draw.
    """

    def __init__(self, paths: Sequence[str | pathlib.Path], rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        self.parts: List[List[str]] = []
        for p in paths:
            words = load_words_from_file(p)
            if words:
                self.parts.append(words)
        if not self.parts:
            raise ValueError("Loaded 0 usable words from " + ", ".join(str(p) for p in paths))

    @property
    def word_count(self) -> int:
        return sum(len(part) for part in self.parts)

    def generate(self) -> str:
        part = self._rng.choice(self.parts)
        return self._rng.choice(part)


class GameState(enum.Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Game:
    """One round: a fixed secret, an attempt budget and the guesses so far."""

    def __init__(self, secret: SecretWord, max_attempts: int = ATTEMPT_COUNT, scoring: str = SCORING_POSITIONAL):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if scoring not in SCORING_MODES:
            raise ValueError(f"Unknown scoring mode {scoring!r}, expected one of {', '.join(SCORING_MODES)}")
        self.secret = secret
        self.max_attempts = max_attempts
        self.scoring = scoring
        self.attempts = 0
        self.history: List[Tuple[str, FeedbackSequence]] = []
        self.state = GameState.PLAYING

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempts

    @property
    def is_over(self) -> bool:
        return self.state is not GameState.PLAYING

    def submit(self, guess: str) -> FeedbackSequence:
        """Score a guess and advance the game.

        A guess of the wrong length raises InvalidWordLength without using up
        an attempt.
        """
        if self.is_over:
            raise RuntimeError(f"Game is already over ({self.state.value})")

        feedback = evaluate(self.secret, guess, scoring=self.scoring)
        self.attempts += 1
        self.history.append((guess, feedback))

        if feedback.full_match():
            self.state = GameState.WON
        elif self.attempts >= self.max_attempts:
            self.state = GameState.LOST
        return feedback


@dataclass(frozen=True)
class GameResult:
    secret: str
    solved: bool
    turns: int
    max_attempts: int
    steps: List[Tuple[str, str]] = field(default_factory=list)
    quit: bool = False


def _colorize(ch: str, slot: Feedback) -> str:
    if slot is Feedback.MATCHED:
        return Fore.GREEN + Style.BRIGHT + ch + Style.RESET_ALL
    if slot is Feedback.PRESENT:
        return Fore.YELLOW + Style.BRIGHT + ch + Style.RESET_ALL
    return ch


def render_feedback(guess: str, feedback: FeedbackSequence, color: bool = True) -> str:
    if not color:
        return " ".join(guess)
    return " ".join(_colorize(ch, slot) for ch, slot in zip(guess, feedback))


def play(
    game: Game,
    read_guess: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
    *,
    color: bool = True,
    log: Optional[LogFn] = None,
) -> GameResult:
    """Run the interactive loop until the game is won, lost or abandoned."""
    read_guess = read_guess or input
    write = write or print

    def _result(abandoned: bool = False) -> GameResult:
        return GameResult(
            secret=game.secret.reveal(),
            solved=game.state is GameState.WON,
            turns=game.attempts,
            max_attempts=game.max_attempts,
            steps=[(g, fb.to_string()) for g, fb in game.history],
            quit=abandoned,
        )

    write("Welcome to Wordle!")
    write(" ".join("_" * WORD_LENGTH))

    while not game.is_over:
        try:
            guess = read_guess("").strip().lower()
        except EOFError:
            if log is not None:
                log("input: end of input, abandoning game")
            write(f"The word was '{game.secret.reveal()}'")
            return _result(abandoned=True)

        if guess == QUIT_COMMAND:
            write(f"The word was '{game.secret.reveal()}'")
            return _result(abandoned=True)

        try:
            feedback = game.submit(guess)
        except InvalidWordLength as e:
            if log is not None:
                log(f"input: rejected guess {guess!r} ({e})")
            write(f"You'll need {WORD_LENGTH} characters to make it work!")
            continue

        if log is not None:
            log(f"turn {game.attempts}: guess '{guess}' -> {feedback.to_string()}")

        write(render_feedback(guess, feedback, color=color))

    if game.state is GameState.WON:
        won = "You won!"
        if color:
            won = Fore.GREEN + won + Style.RESET_ALL
        write(f"{won} You needed {game.attempts} attempts")
    else:
        lost = "You lost :("
        if color:
            lost = Fore.RED + lost + Style.RESET_ALL
        write(f"{lost} The word was '{game.secret.reveal()}'")
    return _result()


def _expand_path(p: str) -> pathlib.Path:
    return pathlib.Path(p).expanduser().resolve()


def write_result(path: pathlib.Path, result: GameResult, scoring: str, *, log: Optional[LogFn] = None) -> None:
    """Save a finished game as JSON, replacing the previous record atomically."""
    payload = {
        "date": time.strftime("%Y-%m-%d"),
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        "solved": result.solved,
        "answer": result.secret,
        "turns": result.turns,
        "max_attempts": result.max_attempts,
        "scoring": scoring,
        "quit": result.quit,
        "steps": [
            {"turn": i, "guess": guess, "pattern": pattern}
            for i, (guess, pattern) in enumerate(result.steps, start=1)
        ],
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    tmp.replace(path)
    if log is not None:
        log(f"result: wrote {path}")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Guess the secret five-letter word (interactive CLI).")
    ap.add_argument("--words", type=str, action="append", default=None,
                    help="Word list to draw the secret from, one word per line. Repeat to add parts.")
    ap.add_argument("--attempts", type=int, default=ATTEMPT_COUNT, help="How many guesses you get.")
    ap.add_argument("--scoring", choices=list(SCORING_MODES), default=SCORING_POSITIONAL,
                    help="How repeated letters are scored.")
    ap.add_argument("--seed", type=int, default=None, help="Seed the random word choice.")
    ap.add_argument("--secret", type=str, default=None, help="Play against this word instead of a random one.")
    ap.add_argument("--no-color", action="store_true", help="Print plain letters.")
    ap.add_argument(
        "--result-path",
        type=str,
        default=None,
        help=f"Write the final result to this JSON file (e.g. {DEFAULT_RESULT_PATH}).",
    )
    ap.add_argument("--verbose", action="store_true", help="Print progress details to stderr.")
    ap.add_argument("--debug", action="store_true", help="Very verbose logs.")
    args = ap.parse_args(argv)

    verbose = bool(args.verbose or args.debug)
    debug = bool(args.debug)

    start_t = time.time()

    def log(msg: str) -> None:
        if not verbose:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] {msg}", file=sys.stderr)

    def log_debug(msg: str) -> None:
        if not debug:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] DEBUG {msg}", file=sys.stderr)

    color = not args.no_color
    if color:
        colorama_init()

    if args.secret is not None:
        try:
            secret = SecretWord(args.secret.strip().lower())
        except InvalidWordLength as e:
            print(f"Invalid --secret: {e}", file=sys.stderr)
            return 2
        log("secret: using word given on the command line")
    else:
        paths = args.words or [str(DEFAULT_WORDS_PATH)]
        rng = random.Random(args.seed)
        try:
            source = FileWordSource(paths, rng=rng)
        except OSError as e:
            print(f"Could not read word list: {e}", file=sys.stderr)
            return 2
        except ValueError as e:
            print(f"{e}. Check the file.", file=sys.stderr)
            return 2
        log(f"words: loaded {source.word_count} words from {len(source.parts)} file(s)")
        try:
            secret = SecretWord.from_source(source)
        except InvalidWordLength as e:
            print(f"Word source returned a bad word: {e}", file=sys.stderr)
            return 2
    log_debug(f"secret: {secret.reveal()}")

    try:
        game = Game(secret, max_attempts=args.attempts, scoring=args.scoring)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2
    log(f"game: attempts={game.max_attempts} scoring={game.scoring}")

    result = play(game, color=color, log=log if verbose else None)

    if args.result_path:
        try:
            write_result(_expand_path(args.result_path), result, game.scoring, log=log if verbose else None)
        except OSError as e:
            print(f"Could not write result to {args.result_path}: {e}", file=sys.stderr)

    return 0 if result.solved else 1


if __name__ == "__main__":
    raise SystemExit(main())
