#!/usr/bin/env python3
"""
Basic Usage Example - WiseLife Challenge Participation

This script demonstrates joining a challenge from the terminal. It shows how to:
- Initialize the client from configuration
- Store login credentials
- Open a challenge and check the join window
- Run one participation attempt with console dialogs

Run: python examples/basic_usage.py <challenge_id> [--access TOKEN --refresh TOKEN]
"""

import argparse
import sys

from wiselife_app.app import WiseLifeClient
from wiselife_app.errors import ApiError
from wiselife_app.logging.config import configure_logging
from wiselife_app.participation.eligibility import days_until_start
from wiselife_app.ui.console import ConsoleNavigator, ConsoleNotifier


def main() -> int:
    parser = argparse.ArgumentParser(description="Join a WiseLife challenge")
    parser.add_argument("challenge_id", type=int)
    parser.add_argument("--config-dir", default=None)
    parser.add_argument("--base-url", default=None)
    parser.add_argument("--access", help="Access token issued at login")
    parser.add_argument("--refresh", help="Refresh token issued at login")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    configure_logging(level=args.log_level)

    overrides = {"api": {"base_url": args.base_url}} if args.base_url else None
    client = WiseLifeClient(config_dir=args.config_dir, overrides=overrides)

    if args.access and args.refresh:
        client.session.save_login(args.access, args.refresh)

    try:
        page = client.open_challenge(args.challenge_id)
    except ApiError as e:
        print(f"Could not load challenge {args.challenge_id}: {e}")
        return 1

    challenge = page.challenge
    print(f"{challenge.title} ({challenge.start_date} ~ {challenge.end_date or '?'})")
    full = " (full)" if challenge.is_full else ""
    print(f"Members: {challenge.current_party} / {challenge.max_party}{full}")
    print(f"Fee per person: {challenge.fee_per_person}")

    left = days_until_start(challenge)
    if left is not None:
        print(f"Starts in {left} day(s)")

    if not client.can_join(challenge):
        print("Joining is not available (log in first, or the join window has closed).")
        return 0

    controller = client.participation_controller(
        page=page,
        notifier=ConsoleNotifier(),
        navigator=ConsoleNavigator(),
    )
    outcome = controller.attempt_participation(challenge)
    print(f"Outcome: {outcome.kind.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
