from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time

import httpx

from butler_cloud.backend.sync import sync_to_cloud
from butler_cloud.cloud.client import CloudClient
from butler_cloud.cloud.models import User
from butler_cloud.cloud.responses import CloudError
from butler_cloud.config.settings import get_settings
from butler_cloud.observability.logging import configure_logging

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="butler-cloud",
        description="Talk to the GitButler cloud API",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="Auth token (default: BUTLER_CLOUD_AUTH_TOKEN)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: BUTLER_CLOUD_LOG_LEVEL or INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("login", help="Log in through the browser and print the access token")
    commands.add_parser("whoami", help="Show the logged in user")

    projects = commands.add_parser("projects", help="Manage cloud projects")
    project_commands = projects.add_subparsers(dest="project_command", required=True)
    project_commands.add_parser("list", help="List projects")
    for name in ("get", "delete"):
        sub = project_commands.add_parser(name, help=f"{name.capitalize()} a project")
        sub.add_argument("repository_id")

    sync = commands.add_parser("sync", help="Flush and push a local project")
    sync.add_argument("project_id")
    return parser


async def poll_login(client: CloudClient, token: str, *, interval: float, timeout: float) -> User | None:
    """Wait until the browser side of the login completes, or give up after ``timeout``."""

    deadline = time.monotonic() + timeout
    while True:
        try:
            user = await client.get_login_user(token)
        except CloudError:
            user = None
        if user is not None:
            return user
        if time.monotonic() >= deadline:
            return None
        await asyncio.sleep(interval)


async def _login(client: CloudClient) -> int:
    settings = get_settings()
    login_token = await client.create_login_token()
    if login_token is None:
        print("Server did not issue a login token", file=sys.stderr)
        return 1
    print(f"Open this URL to log in: {login_token.url}")
    user = await poll_login(
        client,
        login_token.token,
        interval=settings.login_poll_interval_seconds,
        timeout=settings.login_timeout_seconds,
    )
    if user is None:
        print("Timed out waiting for login", file=sys.stderr)
        return 1
    print(user.access_token)
    return 0


async def _run(args: argparse.Namespace, client: CloudClient, token: str) -> int:
    if args.command == "whoami":
        user = await client.get_user(token)
        if user is not None:
            print(f"{user.email} {user.name or ''}".rstrip())
        return 0

    if args.command == "sync":
        await sync_to_cloud(args.project_id)
        return 0

    if args.project_command == "list":
        for project in await client.list_projects(token):
            print(f"{project.repository_id}\t{project.name}")
    elif args.project_command == "get":
        project = await client.get_project(token, args.repository_id)
        if project is not None:
            print(project.model_dump_json(indent=2))
    elif args.project_command == "delete":
        await client.delete_project(token, args.repository_id)
        LOGGER.info("Deleted project %s", args.repository_id)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    client = CloudClient()
    try:
        if args.command == "login":
            return asyncio.run(_login(client))
        token = args.token or settings.auth_token
        if not token and args.command != "sync":
            print("An auth token is required (--token or BUTLER_CLOUD_AUTH_TOKEN)", file=sys.stderr)
            return 2
        return asyncio.run(_run(args, client, token or ""))
    except (CloudError, httpx.HTTPError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
