"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD [--name NAME] [--admin]
Example:
  python -m app.scripts.create_user admin@example.com your-secure-password --admin
"""
import argparse
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import AuthError
from app.services.auth import AuthService
from app.validators.auth import validate_registration


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Authgate user.")
    parser.add_argument("email", help="Email address (unique)")
    parser.add_argument("password", help="Password (8-512 chars)")
    parser.add_argument("--name", default=None, help="Display name (3-64 chars)")
    parser.add_argument("--admin", action="store_true", help="Grant admin access")
    args = parser.parse_args(argv)

    try:
        data = validate_registration(
            {"email": args.email.strip(), "password": args.password, "name": args.name}
        )
    except AuthError as e:
        for err in e.to_errors():
            print(err["message"], file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        service = AuthService(db, get_settings())
        try:
            user = service.register(data, is_admin=args.admin)
        except AuthError as e:
            print(e.message, file=sys.stderr)
            return 1
        role = "admin" if args.admin else "user"
        print(f"Created {role} '{user.email}' with id {user.id}.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
