"""Maintenance commands for the configured database.

These run with a privileged caller, so they can do what no member can
(deleting schools, removing accounts).
"""
from __future__ import annotations

import argparse
import logging
import sys
import uuid

from schoolboard.core.errors import ForumError
from schoolboard.core.settings import settings
from schoolboard.db.session import SessionLocal, create_tables, drop_tables
from schoolboard.services import identity_service, school_service
from schoolboard.services.policy import Caller
from schoolboard.services.store import Store

logger = logging.getLogger("schoolboard.manage")


def _cmd_create_tables(_args: argparse.Namespace) -> None:
    create_tables()
    print(f"[manage] created tables on {settings.effective_database_url}")


def _cmd_drop_tables(args: argparse.Namespace) -> None:
    if not args.yes:
        raise SystemExit("[manage] refusing to drop tables without --yes")
    drop_tables()
    print(f"[manage] dropped tables on {settings.effective_database_url}")


def _cmd_delete_school(args: argparse.Namespace) -> None:
    with SessionLocal() as db:
        school_service.delete_school(Store(db, Caller.service()), args.school_id)
    print(f"[manage] deleted school {args.school_id}")


def _cmd_delete_identity(args: argparse.Namespace) -> None:
    with SessionLocal() as db:
        identity_service.delete_identity(db, args.identity_id)
    print(f"[manage] deleted identity {args.identity_id}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Schoolboard maintenance commands")
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create-tables", help="Create all tables from the models")
    create.set_defaults(func=_cmd_create_tables)

    drop = commands.add_parser("drop-tables", help="Drop every table (destroys all data)")
    drop.add_argument("--yes", action="store_true", help="Confirm the drop")
    drop.set_defaults(func=_cmd_drop_tables)

    school = commands.add_parser(
        "delete-school",
        help="Delete a school with its posts, comments, votes, and memberships",
    )
    school.add_argument("school_id", type=uuid.UUID)
    school.set_defaults(func=_cmd_delete_school)

    identity = commands.add_parser(
        "delete-identity",
        help="Delete an account; its profile and everything it authored cascade",
    )
    identity.add_argument("identity_id", type=uuid.UUID)
    identity.set_defaults(func=_cmd_delete_identity)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.log_level.upper())
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except ForumError as exc:
        logger.error("%s failed: %s", args.command, exc.detail)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
