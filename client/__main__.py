"""Command-line client for the authentication service.

Usage::

    python -m client signup --email a@b.com --name Ann
    python -m client signin --email a@b.com
    python -m client profile
    python -m client logout
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from getpass import getpass
from pathlib import Path
from typing import Dict, Sequence

import httpx

from client.api import ApiResult, AuthClient
from client.storage import DEFAULT_PATH, CredentialStore
from client.validations import validate_email, validate_form

logger = logging.getLogger("client")

_DEFAULT_API_URL = os.getenv("AUTH_API_URL", "http://localhost:8000/api")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Authentication service client")
    parser.add_argument("--api-url", default=_DEFAULT_API_URL, help="Base URL of the API")
    parser.add_argument(
        "--credentials",
        type=Path,
        default=DEFAULT_PATH,
        help=f"Where to keep the token (default: {DEFAULT_PATH})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    signup_parser = subparsers.add_parser("signup", help="Create an account")
    signup_parser.add_argument("--email", required=True)
    signup_parser.add_argument("--name", required=True)
    signup_parser.add_argument("--password", help="Prompted for when omitted")

    signin_parser = subparsers.add_parser("signin", help="Sign in to an existing account")
    signin_parser.add_argument("--email", required=True)
    signin_parser.add_argument("--password", help="Prompted for when omitted")

    subparsers.add_parser("profile", help="Show the signed-in user's profile")
    subparsers.add_parser("logout", help="Forget the stored token")

    return parser.parse_args(argv)


def _print_errors(errors: Dict[str, str]) -> None:
    for field, message in errors.items():
        print(f"{field}: {message}", file=sys.stderr)


def _finish_auth(result: ApiResult, store: CredentialStore) -> int:
    if not result.success:
        print(result.message, file=sys.stderr)
        return 1
    store.set_token_and_user(result.token, result.user)
    print(f"Signed in as {result.user.name} <{result.user.email}>")
    return 0


async def _run(args: argparse.Namespace) -> int:
    store = CredentialStore(args.credentials)

    if args.command == "logout":
        store.logout()
        print("Signed out")
        return 0

    async with AuthClient(args.api_url) as client:
        if args.command == "signup":
            password = args.password or getpass("Password: ")
            errors = validate_form(args.email, password, args.name)
            if errors:
                _print_errors(errors)
                return 2
            return _finish_auth(await client.signup(args.email, args.name, password), store)

        if args.command == "signin":
            password = args.password or getpass("Password: ")
            email_error = validate_email(args.email)
            if email_error:
                _print_errors({"email": email_error})
                return 2
            return _finish_auth(await client.signin(args.email, password), store)

        token = store.get_stored_token()
        if not token:
            print("Not signed in", file=sys.stderr)
            return 1
        result = await client.get_profile(token)
        if not result.success:
            store.logout()
            print(result.message, file=sys.stderr)
            return 1
        print(f"id:    {result.user.id}")
        print(f"email: {result.user.email}")
        print(f"name:  {result.user.name}")
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    args = _parse_args(argv)
    try:
        return asyncio.run(_run(args))
    except httpx.HTTPError as exc:
        logger.error("Request failed: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
