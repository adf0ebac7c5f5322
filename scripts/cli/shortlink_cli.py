#!/usr/bin/env python3
"""
Command-line interface for the shortlink store.

Usage:
    python shortlink_cli.py shorten <url> --username USER --notification-type TYPE
    python shortlink_cli.py get <short_code>
    python shortlink_cli.py delete <short_code>
    python shortlink_cli.py count
    python shortlink_cli.py health

The store is chosen from STORE_BACKEND / REDIS_URL / DATABASE_URL as for the
server. The memory backend only lives for a single invocation.
"""

import argparse
import asyncio
import json
import sys
import os
from typing import Optional

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from config import Config
from shortlink.database import LinkStoreBase, RedisLinkStore, build_store
from shortlink.errors import InternalError, NotFoundError, ValidationError
from shortlink.service import LinkService
from shortlink.common.logging_config import setup_logging


class ShortlinkCLI:
    """Command-line interface for shortlink."""

    def __init__(self, config: Config, verbose: bool = False, store: Optional[LinkStoreBase] = None):
        self.config = config
        self.verbose = verbose
        # stdout carries the JSON results
        self.logger = setup_logging(level="DEBUG" if verbose else "ERROR", stream=sys.stderr)
        self.store = store
        self.service = None

    async def initialize(self):
        """Open the store and build the service."""
        if self.store is None:
            self.store = build_store(self.config, logger=self.logger)
            if isinstance(self.store, RedisLinkStore):
                await self.store.connect()

        self.service = LinkService(store=self.store, logger=self.logger)

    async def cleanup(self):
        if self.service:
            await self.service.close()

    @staticmethod
    def _emit(payload: dict, error: bool = False) -> int:
        print(json.dumps(payload, indent=2), file=sys.stderr if error else sys.stdout)
        return 1 if error else 0

    async def shorten(self, url: str, username: str, notification_type: str) -> int:
        """Create or reuse a short code for a URL."""
        try:
            link = await self.service.create_or_reuse(url, username, notification_type)
        except (ValidationError, InternalError) as e:
            return self._emit({"success": False, "error": str(e)}, error=True)

        return self._emit({"success": True, **link.to_dict()})

    async def get(self, short_code: str) -> int:
        """Print the redirect target for a short code."""
        try:
            target = await self.service.resolve_redirect(short_code)
        except (NotFoundError, InternalError) as e:
            return self._emit({"success": False, "short_code": short_code, "error": str(e)}, error=True)

        return self._emit({"success": True, "short_code": short_code, "original_url": target})

    async def delete(self, short_code: str) -> int:
        """Delete the link for a short code."""
        try:
            await self.service.delete_by_short_code(short_code)
        except (NotFoundError, InternalError) as e:
            return self._emit({"success": False, "short_code": short_code, "error": str(e)}, error=True)

        return self._emit({"success": True, "message": "Link deleted successfully"})

    async def count(self) -> int:
        try:
            total = await self.store.count()
        except InternalError as e:
            return self._emit({"success": False, "error": str(e)}, error=True)

        return self._emit({"success": True, "count": total})

    async def health(self) -> int:
        health_status = await self.service.health_check()
        self._emit({"success": health_status["overall"], "health": health_status})
        return 0 if health_status["overall"] else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Shortlink CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url --username bob --notification-type email

  # Resolve a short code
  %(prog)s get 3f2a9c01be47

  # Delete a short code
  %(prog)s delete 3f2a9c01be47
        """
    )

    parser.add_argument(
        "--backend",
        choices=["memory", "redis", "postgres"],
        help="Store backend (default: from STORE_BACKEND env)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--username", required=True, help="Submitting user")
    shorten_parser.add_argument("--notification-type", required=True, help="EMAIL, SMS, PUSH or WHATSAPP")

    get_parser = subparsers.add_parser("get", help="Get original URL")
    get_parser.add_argument("short_code", help="Short code to lookup")

    delete_parser = subparsers.add_parser("delete", help="Delete a short link")
    delete_parser.add_argument("short_code", help="Short code to delete")

    subparsers.add_parser("count", help="Count stored links")
    subparsers.add_parser("health", help="Check store health")

    return parser


async def main(argv=None, store: Optional[LinkStoreBase] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    overrides = {"store_backend": args.backend} if args.backend else {}
    cli = ShortlinkCLI(Config(**overrides), verbose=args.verbose, store=store)

    try:
        await cli.initialize()

        if args.command == "shorten":
            return await cli.shorten(args.url, args.username, args.notification_type)
        elif args.command == "get":
            return await cli.get(args.short_code)
        elif args.command == "delete":
            return await cli.delete(args.short_code)
        elif args.command == "count":
            return await cli.count()
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1

    finally:
        await cli.cleanup()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
