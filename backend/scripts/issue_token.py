#!/usr/bin/env python
"""Print a bearer token for local calls against the expenses function.

Usage:
    python backend/scripts/issue_token.py <user-id> [--hours 8]

Tokens are signed with JWT_SECRET_KEY, the same key the function verifies against.
"""
from __future__ import annotations
import os, sys, argparse
from datetime import timedelta
from flask_jwt_extended import create_access_token

sys.path.append(os.path.abspath('backend'))

from expenses_service import create_app  # type: ignore


def main():
    p = argparse.ArgumentParser(description="Mint a development bearer token")
    p.add_argument('user_id')
    p.add_argument('--hours', type=int, default=8, help='Token lifetime in hours')
    args = p.parse_args()
    app = create_app()
    with app.app_context():
        token = create_access_token(identity=args.user_id, expires_delta=timedelta(hours=args.hours))
    print(token)


if __name__ == '__main__':
    main()
