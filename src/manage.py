"""T-shirt store management CLI.

Usage:
    python src/manage.py setup-db       # Create all tables
    python src/manage.py drop-db        # Drop all tables
    python src/manage.py create-admin --username admin --email admin@example.com --password ...
"""

import argparse
import sys


def _initialized_store():
    from store.domain import store

    store.init()
    return store


def setup_databases():
    """Create the database schema for the store domain."""
    from store.utils.db import setup_db

    store = _initialized_store()
    print("Creating store database schema...")
    providers = setup_db(store)
    print(f"  schema ready ({', '.join(providers) or 'no SQL providers configured'}).")
    print("Done.")


def drop_databases():
    """Drop the database schema for the store domain."""
    from store.utils.db import drop_db

    store = _initialized_store()
    print("Dropping store database schema...")
    providers = drop_db(store)
    print(f"  schema dropped ({', '.join(providers) or 'no SQL providers configured'}).")
    print("Done.")


def create_admin(username, email, password, domain=None):
    """Register an administrator, or promote the account already using `email`.

    `domain` is an already initialized store domain; by default one is
    initialized here.
    """
    from store.user.profile import GrantAdmin
    from store.user.registration import RegisterUser
    from store.user.user import User

    store = domain or _initialized_store()
    with store.domain_context():
        existing = store.repository_for(User).find_by_email(email)
        if existing is not None:
            store.process(GrantAdmin(user_id=str(existing.id)), asynchronous=False)
            print(f"Granted admin privileges to {existing.username}.")
            return str(existing.id)

        user_id = store.process(
            RegisterUser(username=username, email=email, password=password, is_admin=True),
            asynchronous=False,
        )
        print(f"Created admin {username} ({user_id}).")
        return user_id


def main(argv=None):
    parser = argparse.ArgumentParser(description="T-shirt store management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    admin_parser = subparsers.add_parser("create-admin", help="Create or promote an administrator")
    admin_parser.add_argument("--username", required=True)
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    elif args.command == "create-admin":
        create_admin(args.username, args.email, args.password)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
