"""
Manage users from the shell, without the admin panel. Run from project root:
  python -m fullbright.scripts.manage_user create USERNAME [--hwid HWID] [--role ROLE]
  python -m fullbright.scripts.manage_user ban USERNAME [--unban]
  python -m fullbright.scripts.manage_user role USERNAME ROLE
  python -m fullbright.scripts.manage_user reset-hwid USERNAME
Example:
  python -m fullbright.scripts.manage_user role alice VIP
"""
import argparse
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError
from sqlalchemy.orm import Session

from fullbright.core.config import Settings, get_settings
from fullbright.core.database import build_engine, build_session_factory
from fullbright.core.errors import ServiceError
from fullbright.services import accounts, admin

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage FullBright users.")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Register a user")
    create.add_argument("username")
    create.add_argument("--hwid", default=None, help="Hardware id to bind")
    create.add_argument("--role", default=None, help="Role to assign after creation")

    ban = sub.add_parser("ban", help="Ban (or unban) a user")
    ban.add_argument("username")
    ban.add_argument("--unban", action="store_true")

    role = sub.add_parser("role", help="Overwrite a user's role")
    role.add_argument("username")
    role.add_argument("role")

    reset = sub.add_parser("reset-hwid", help="Unbind a user's hardware id")
    reset.add_argument("username")
    return parser


def run(args: argparse.Namespace, db: Session, settings: Settings) -> str:
    """Execute one command and return a summary line."""
    if args.command == "create":
        user = accounts.register(db, settings, args.username, args.hwid)
        if args.role:
            user = admin.set_role(db, user, args.role)
        return f"Created user '{user.username}' with role '{user.role}'."
    user = admin.get_user(db, username=args.username)
    if args.command == "ban":
        user = admin.set_ban(db, user, banned=not args.unban)
        return f"User '{user.username}' banned={user.banned}."
    if args.command == "role":
        user = admin.set_role(db, user, args.role)
        return f"User '{user.username}' role={user.role}."
    if args.command == "reset-hwid":
        user = admin.reset_hwid(db, user)
        return f"User '{user.username}' hwid cleared."
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv()
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)
    db = build_session_factory(engine)()
    try:
        logger.info(run(args, db, settings))
        return 0
    except ServiceError as e:
        logger.error("%s: %s", args.command, e.message)
        return 1
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
