#!/usr/bin/env python3
"""Register a user from the command line.

Usage: python -m scripts.create_user <username> --name NAME --gender GENDER --password PASSWORD
"""
import argparse
import sys
from pathlib import Path

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from registration.database import SessionLocal
from registration.models.user import GENDERS
from registration.schemas.registration import RegistrationForm
from registration.services.registration import register_user


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Register a user")
    parser.add_argument("username")
    parser.add_argument("--name", required=True)
    parser.add_argument("--gender", required=True, choices=GENDERS)
    parser.add_argument("--password", required=True)
    args = parser.parse_args(argv)

    form = RegistrationForm(
        username=args.username,
        name=args.name,
        gender=args.gender,
        password=args.password,
    )
    db = SessionLocal()
    try:
        result = register_user("POST", form, db)
    finally:
        db.close()

    if not result.success:
        print(result.message)
        for error in result.errors:
            print(f"  - {error}")
        return 1
    print(f"Created user {result.user_id}: {form.username}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
