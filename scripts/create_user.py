"""Utility script to create a user account from the command line."""

from __future__ import annotations

import argparse
from getpass import getpass

from event_planner.application.use_cases.users import register_user
from event_planner.domain.errors import ApiError
from event_planner.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a user for the Event Planner API.")
    parser.add_argument("--username", required=True, help="Unique login name")
    parser.add_argument("--email", required=True, help="Unique email address")
    parser.add_argument(
        "--password",
        default=None,
        help="Account password. Prompted interactively when omitted.",
    )
    parser.add_argument("--avatar-url", default=None, help="Optional avatar image URL")
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("A password is required.")

    initialize_database()

    session = SessionLocal()
    try:
        user = register_user(
            session,
            username=args.username,
            email=args.email,
            password=password,
            avatar_url=args.avatar_url,
        )
    except ApiError as exc:
        raise SystemExit(f"Could not create the user: [{exc.code}] {exc.message}") from exc
    else:
        print(f"Created user {user.id} ({user.username}, {user.email})")
    finally:
        session.close()


if __name__ == "__main__":
    main()
