"""
Create a user (e.g. the first operator). Run from project root:
  python -m sysapi.scripts.create_user USERNAME PASSWORD [--email EMAIL]
"""
import argparse
import sys

from sysapi.core.config import get_settings
from sysapi.core.database import Database
from sysapi.schemas.user import UserCreate
from sysapi.services import UserService


def main(argv: list[str] | None = None, database: Database | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a system user (no registration UI).")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("--email", default=None, help="Optional e-mail address")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > 255:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > 128:
        print("Password must be 1-128 characters.", file=sys.stderr)
        return 1

    owns_database = database is None
    if database is None:
        settings = get_settings()
        database = Database(settings.DATABASE_URL, pool_size=1)
    db = database.session_factory()
    try:
        service = UserService(db)
        if service.get_by_username(username) is not None:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        user_id = service.save(
            UserCreate(username=username, email=args.email, password=args.password)
        )
        print(f"Created user '{username}' with id {user_id}.")
        return 0
    finally:
        db.close()
        if owns_database:
            database.dispose()


if __name__ == "__main__":
    sys.exit(main())
