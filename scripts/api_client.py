"""Lightweight REST client for the fut5 API."""

from __future__ import annotations

import argparse
import json

import httpx


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the fut5 REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("day", help="Day key, e.g. 2024-05-01")
    parser.add_argument(
        "--players",
        nargs="*",
        default=None,
        help="Fill the roster slots in order with these names",
    )
    parser.add_argument("--submit", nargs="*", default=None, help="Names to put on team A")
    parser.add_argument("--author", default="", help="Author shown for --submit")
    parser.add_argument("--delete", metavar="SUBMISSION_ID", help="Delete a submission and exit")
    parser.add_argument("--reset", action="store_true", help="Reset the day and exit")
    parser.add_argument("--share", action="store_true", help="Print the share text and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.reset:
            resp = client.post(f"/days/{args.day}/reset")
            resp.raise_for_status()
            _print_json(resp.json())
            return
        if args.delete:
            resp = client.delete(f"/days/{args.day}/submissions/{args.delete}")
            resp.raise_for_status()
            _print_json(resp.json())
            return
        if args.share:
            resp = client.get(f"/days/{args.day}/share")
            resp.raise_for_status()
            print(resp.json()["text"])
            return

        if args.players:
            resp = client.get(f"/days/{args.day}")
            resp.raise_for_status()
            slots = resp.json()["players"]
            for slot, name in zip(slots, args.players):
                resp = client.put(f"/days/{args.day}/players/{slot['id']}", json={"name": name})
                resp.raise_for_status()
            resp = client.post(f"/days/{args.day}/players/save")
            if resp.status_code == 400:
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            print(f"Saved {len(args.players)} players")

        if args.submit is not None:
            resp = client.post(
                f"/days/{args.day}/submissions",
                json={"author": args.author or None, "team_a": args.submit},
            )
            if resp.status_code in {400, 409}:
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            print(f"Submitted {resp.json()['id']}")

        resp = client.get(f"/days/{args.day}/consensus")
        resp.raise_for_status()
        _print_json(resp.json())


if __name__ == "__main__":
    main()
