#!/usr/bin/env python3
"""
Issue a bearer token for an existing profile.

Roles follow the profile's IsAdmin flag unless --role is given explicitly.
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("profile_id", type=int, help="UserProfile.Id")
    parser.add_argument(
        "--role",
        action="append",
        choices=["User", "Admin"],
        help="Override the roles written into the token (repeatable)",
    )
    parser.add_argument("--minutes", type=int, default=None, help="Token lifetime")
    args = parser.parse_args(argv)

    from datetime import timedelta

    from app.security import create_access_token, roles_for
    from domain.models import SessionLocal
    from repositories import ProfileRepository

    db = SessionLocal()
    try:
        profile = ProfileRepository(db).get_by_id(args.profile_id)
        if profile is None:
            print(f"Profile {args.profile_id} not found", file=sys.stderr)
            return 1
        roles = args.role or roles_for(profile.is_admin)
    finally:
        db.close()

    expires = timedelta(minutes=args.minutes) if args.minutes else None
    print(create_access_token(args.profile_id, roles=roles, expires_delta=expires))
    return 0


if __name__ == "__main__":
    sys.exit(main())
