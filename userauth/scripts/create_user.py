"""
Create a user (e.g. first admin). Run from project root:
  python -m userauth.scripts.create_user EMAIL PASSWORD [--admin]
Example:
  python -m userauth.scripts.create_user admin@example.com your-secure-password --admin
"""
import argparse
import sys

from pydantic import ValidationError

from userauth.core.config import get_settings
from userauth.core.database import SessionLocal
from userauth.core.logging_config import configure_logging
from userauth.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, PasswordHasher
from userauth.schemas.auth import normalize_email
from userauth.services.auth import AuthService
from userauth.services.errors import EmailInUseError
from userauth.services.users import UsersService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user account from the command line.")
    parser.add_argument("email", help="Account email (up to 255 chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("--admin", action="store_true", help="Grant the admin flag")
    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    try:
        email = normalize_email(args.email)
    except ValidationError:
        print(f"Invalid email: {args.email!r}", file=sys.stderr)
        return 1
    if len(email) > 255:
        print("Invalid email length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        users = UsersService(db)
        auth = AuthService(users, PasswordHasher.from_settings(settings))
        try:
            user = auth.signup(email, args.password)
        except EmailInUseError as e:
            print(f"{e.message} ({email})", file=sys.stderr)
            return 1
        if args.admin:
            user = users.update(user.id, {"admin": True})
        print(f"Created user '{user.email}' (id={user.id}, admin={user.admin}).")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
