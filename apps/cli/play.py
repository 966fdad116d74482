# apps/cli/play.py
"""
CodeBreaker - The Ultimate Mastermind Game, in the terminal.

Play a number of rounds against the computer. Each round you pick a role:
  [1] Code Maker   - you choose a secret, the computer guesses and you
                     give feedback ('b' exact, 'w' right color, '.' miss)
  [2] Code Breaker - the computer picks a secret and you guess it
The code maker scores a point for every guess the breaker needed.

Usage:
    python -m apps.cli.play --rounds 3 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys

from codebreaker.game import HUMAN_BREAKER, HUMAN_MAKER, MOVES_ALLOWED, Session

ROLE_MENU = {"1": HUMAN_MAKER, "2": HUMAN_BREAKER}


class Exited(Exception):
    """Player hit Ctrl-C or closed stdin."""


def _input(prompt: str) -> str:
    try:
        return input(prompt)
    except (KeyboardInterrupt, EOFError) as e:
        raise Exited() from e


def ask_rounds(ask, say) -> int:
    say("How many rounds should the game have?")
    say("Note: The player with the score at the end of the rounds wins")
    while True:
        raw = ask("~>: ")
        try:
            n = int(raw)
        except ValueError:
            say("Expected an integer value. Try again")
            continue
        if n < 1:
            say("Play at least one round. Try again")
            continue
        return n


def ask_role(ask, say) -> str | None:
    """Return HUMAN_MAKER / HUMAN_BREAKER, or None to quit."""
    while True:
        say("Do you want to be the code maker or code breaker?")
        say("[1]. Code Maker")
        say("[2]. Code Breaker")
        say("[0]. Quit")
        choice = ask("~>: ").strip()
        if choice == "0":
            return None
        if choice in ROLE_MENU:
            return ROLE_MENU[choice]
        say(f"Unknown option {choice!r}")


def run_game(session: Session, rounds: int) -> None:
    ask, say = session.ask, session.say
    for n in range(1, rounds + 1):
        say(f"\n=== Round {n}/{rounds} ===")
        role = ask_role(ask, say)
        if role is None:
            break
        session.play_round(role)
        board = session.scoreboard
        say(f"Score: you {board.human} - computer {board.computer}")

    board = session.scoreboard
    leader = board.leader()
    if leader == "tie":
        say(f"Final score {board.human} - {board.computer}: it's a tie")
    else:
        winner = "You win" if leader == "human" else "The computer wins"
        say(f"Final score {board.human} - {board.computer}: {winner}")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="CodeBreaker - The Ultimate Mastermind Game")
    ap.add_argument("--rounds", type=int, help="number of rounds (asked if omitted)")
    ap.add_argument("--seed", type=int, help="RNG seed for secrets and computer guesses")
    ap.add_argument("--max-turns", type=int, default=MOVES_ALLOWED, help="rows on the board")
    ap.add_argument("--no-color", action="store_true", help="plain text board")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    session = Session(_input, print, seed=args.seed, max_turns=args.max_turns,
                      colorize=not args.no_color)
    print("Welcome to CodeBreaker - The Ultimate Mastermind Game\n")
    try:
        rounds = args.rounds if args.rounds and args.rounds > 0 else ask_rounds(_input, print)
        run_game(session, rounds)
    except Exited:
        print("Exited")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
