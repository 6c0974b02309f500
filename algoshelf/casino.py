"""A find-the-queen betting game played with three shuffled cards."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass

CARDS = "JQK"
SHUFFLE_SWAPS = 5
PAYOUT = 3


@dataclass(frozen=True)
class Round:
    """The outcome of one round."""

    won: bool
    cards: str
    cash: int


class Casino:
    """A player's purse and the card shuffler for the queen-guessing game."""

    def __init__(self, cash: int = 100, rng: random.Random | None = None) -> None:
        self.cash = cash
        self._rng = rng if rng is not None else random.Random()

    def shuffle(self) -> str:
        """The three cards after a few random swaps."""
        cards = list(CARDS)
        for _ in range(SHUFFLE_SWAPS):
            x = self._rng.randrange(len(cards))
            y = self._rng.randrange(len(cards))
            cards[x], cards[y] = cards[y], cards[x]
        return "".join(cards)

    def play(self, bet: int, guess: int) -> Round:
        """Shuffle and check whether the queen is at position ``guess`` (1 to 3).

        A win pays three times the bet; a loss costs the bet.
        """
        if bet <= 0:
            raise ValueError("bet must be positive")
        if bet > self.cash:
            raise ValueError("bet exceeds available cash")
        if not 1 <= guess <= len(CARDS):
            raise ValueError(f"guess must be between 1 and {len(CARDS)}")
        cards = self.shuffle()
        won = cards[guess - 1] == "Q"
        self.cash += PAYOUT * bet if won else -bet
        return Round(won=won, cards=cards, cash=self.cash)


def _ask(prompt: str) -> int | None:
    while True:
        try:
            answer = input(prompt)
        except EOFError:
            return None
        try:
            return int(answer.strip())
        except ValueError:
            print("Please enter a whole number.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game interactively on standard input and output."""
    parser = argparse.ArgumentParser(description="Guess where the queen lands.")
    parser.add_argument("--cash", type=int, default=100, help="starting cash")
    parser.add_argument("--seed", type=int, default=None, help="shuffle seed")
    args = parser.parse_args(argv)

    casino = Casino(args.cash, random.Random(args.seed))
    print("Welcome to the Virtual Casino")
    print(f"Total cash = ${casino.cash}")
    while casino.cash > 0:
        bet = _ask("What's your bet? $")
        if bet is None or bet == 0 or bet > casino.cash:
            break
        print("Shuffling....")
        guess = _ask("What's the position of queen - 1,2 or 3?")
        if guess is None:
            break
        try:
            result = casino.play(bet, guess)
        except ValueError as error:
            print(error)
            continue
        if result.won:
            print(f"You win | Result = {result.cards} Total Cash = {result.cash}")
        else:
            print(f"You loose! Result = {result.cards} Total Cash = {result.cash}")
        print("\n***********************")
    return 0