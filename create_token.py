#!/usr/bin/env python3
"""
Mint a bearer token for the UCSB Records API.

The token is signed with ``SECRET_KEY`` from the environment, so run
this with the same settings as the server.

Usage:
    python create_token.py --email cgaucho@ucsb.edu --role USER
    python create_token.py --email phtcon@ucsb.edu --role USER --role ADMIN --days 365
"""

import argparse

from ucsb_records_api.app.core.security import Role, create_access_token


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a signed API token.")
    parser.add_argument("--email", required=True, help="Principal email (token subject)")
    parser.add_argument(
        "--role",
        action="append",
        choices=[role.value for role in Role],
        default=[],
        help="Role to grant; repeat for several roles",
    )
    parser.add_argument("--days", type=int, default=1, help="Token lifetime in days (default: 1)")
    args = parser.parse_args()

    roles = args.role or [Role.USER.value]
    token = create_access_token({"sub": args.email, "roles": roles}, expires_delta=args.days * 24 * 60 * 60)
    print(token)


if __name__ == "__main__":
    main()
