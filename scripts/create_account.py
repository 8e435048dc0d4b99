#!/usr/bin/env python3
"""
Create an account from the command line through the same controller the API uses.

Usage:
  python scripts/create_account.py --name "Ada" --email ada@example.com --password s3cret [--confirm s3cret]
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys

from signup_api.controllers.protocols import HttpRequest
from signup_api.core.config import get_settings
from signup_api.core.logging_config import configure_logging
from signup_api.db.create_tables import create_all
from signup_api.factories import make_signup_controller


async def run(payload: dict) -> int:
    controller = make_signup_controller()
    response = await controller.handle(HttpRequest(body=payload))
    print(f"status: {response.status_code}")
    print(json.dumps(response.body_dict(), ensure_ascii=False, indent=2))
    return 0 if response.status_code == 200 else 1


def main() -> None:
    ap = argparse.ArgumentParser(description="Create an account")
    ap.add_argument("--name", required=True)
    ap.add_argument("--email", required=True)
    ap.add_argument("--password", required=True)
    ap.add_argument("--confirm", help="password confirmation (default: same as --password)")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.auto_create_tables:
        create_all()
    payload = {
        "name": args.name,
        "email": args.email,
        "password": args.password,
        "passwordConfirmation": args.confirm if args.confirm is not None else args.password,
    }
    raise SystemExit(asyncio.run(run(payload)))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
