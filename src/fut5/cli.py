"""Command-line interface for managing a day's roster and split proposals."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

from fut5.consensus import tally
from fut5.day import DayService
from fut5.errors import Fut5Error
from fut5.models import DayState, Split
from fut5.persistence import DayStore
from fut5.roster import is_ready


def _day(value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid day '{value}', expected YYYY-MM-DD") from exc


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Agree on 5-vs-5 team splits by vote")
    parser.add_argument("--db", type=Path, default=Path("fut5.sqlite"), help="SQLite database path")
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Print roster, submissions and consensus")
    show.add_argument("day", type=_day)

    name = commands.add_parser("name", help="Set the name of a roster slot")
    name.add_argument("day", type=_day)
    name.add_argument("slot", type=int, help="Roster slot number (1-10)")
    name.add_argument("name", help="Player name; pass an empty string to clear")

    check = commands.add_parser("check", help="Validate that the roster is complete")
    check.add_argument("day", type=_day)

    submit = commands.add_parser("submit", help="Propose a split by naming team A")
    submit.add_argument("day", type=_day)
    submit.add_argument("team_a", nargs="+", help="Names of the players on team A")
    submit.add_argument("--author", default="", help="Name shown next to the submission")

    delete = commands.add_parser("delete", help="Remove a submission")
    delete.add_argument("day", type=_day)
    delete.add_argument("submission_id")

    reset = commands.add_parser("reset", help="Clear the roster and all submissions")
    reset.add_argument("day", type=_day)

    share = commands.add_parser("share", help="Print the share line for a day")
    share.add_argument("day", type=_day)

    serve = commands.add_parser("serve", help="Run the REST API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser.parse_args(argv)


def _format_split(split: Split) -> str:
    team_a = ", ".join(player.name for player in split.team_a)
    team_b = ", ".join(player.name for player in split.team_b)
    return f"A: {team_a} | B: {team_b}"


def _print_day(service: DayService, day: str, state: DayState) -> None:
    status = "ready" if is_ready(state.players, service.rules) else "incomplete"
    print(f"Day {day} ({status})")
    for slot, player in enumerate(state.players, start=1):
        print(f"  {slot:>2}. {player.name or '-'}")

    print(f"Submissions ({len(state.submissions)})")
    for submission in state.submissions:
        stamp = submission.created_at.astimezone().strftime("%H:%M:%S")
        print(f"  {submission.id}  {stamp}  {submission.author}  {_format_split(submission.split)}")

    groups = tally(state.submissions)
    if len(groups) > 1:
        print("Votes")
        for group in groups:
            print(f"  {group.votes:>3}  {_format_split(group.split)}")

    result = service.consensus(day)
    if result is None:
        print("No consensus yet")
    else:
        print(f"Consensus ({result.votes} vote(s)): {_format_split(result.split)}")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    if args.command == "serve":
        import uvicorn

        from fut5.api import create_app

        uvicorn.run(create_app(args.db), host=args.host, port=args.port)
        return

    service = DayService(DayStore(args.db))

    try:
        if args.command == "show":
            _print_day(service, args.day, service.load(args.day))
        elif args.command == "name":
            players = service.load(args.day).players
            if not 1 <= args.slot <= len(players):
                raise SystemExit(f"Slot must be between 1 and {len(players)}")
            state = service.update_player_name(args.day, players[args.slot - 1].id, args.name)
            _print_day(service, args.day, state)
        elif args.command == "check":
            service.save_players(args.day)
            print("Players saved")
        elif args.command == "submit":
            submission = service.add_submission(args.day, args.author, args.team_a)
            print(f"Submitted {submission.id} for {submission.author}: {_format_split(submission.split)}")
        elif args.command == "delete":
            if service.delete_submission(args.day, args.submission_id):
                print(f"Deleted {args.submission_id}")
            else:
                print(f"No submission {args.submission_id} on {args.day}")
        elif args.command == "reset":
            _print_day(service, args.day, service.reset_day(args.day))
        elif args.command == "share":
            print(service.share_text(args.day))
    except Fut5Error as exc:
        print(exc.message, file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
