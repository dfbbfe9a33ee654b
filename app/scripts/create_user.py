"""
Create a user (e.g. the first employee). Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD [--role employee] [--account-number ACC1234]
Example:
  python -m app.scripts.create_user reviewer reviewer@bank.example 'Str0ng!Passw0rd' --role employee
"""
import argparse
import sys

from pydantic import ValidationError

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import ConflictError
from app.core.logging_config import configure_logging
from app.schemas.auth import AdminRegisterRequest
from app.services.users import register_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Create a portal user. Employees can only be created this way or by another employee."
    )
    parser.add_argument("username", help="Username (3-50 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (8-128 chars, upper, lower, digit, symbol)")
    parser.add_argument("--role", default="employee", choices=["customer", "employee"])
    parser.add_argument("--account-number", default=None, help="Optional 4-20 alphanumeric")
    args = parser.parse_args(argv)

    configure_logging(get_settings().LOG_LEVEL)

    try:
        payload = AdminRegisterRequest(
            username=args.username,
            email=args.email,
            password=args.password,
            account_number=args.account_number,
            role=args.role,
        )
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"{field}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = register_user(db, payload, role=payload.role)
    except ConflictError as e:
        print(f"{e.message}: '{payload.username}' / '{payload.email}'.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{payload.username}' with role '{payload.role}' (id {user.id}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
