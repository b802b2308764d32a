#!/usr/bin/env python3
"""
Domain Provisioner command line

Attaches a custom domain to a hosting platform project. Options left unset
fall back to PROVISIONER_* environment variables (or .env).

Usage:
    python scripts/add_domain.py --domain shop.example.com --project prj_123
    python scripts/add_domain.py --domain shop.example.com --team team_123
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List, Optional

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from provisioner.config import Settings
from provisioner.domains import (
    ApiError,
    TransportError,
    ValidationError,
    add_project_domain,
)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Attach a custom domain to a hosting platform project"
    )
    parser.add_argument("--domain", required=True, help="Domain name to add")
    parser.add_argument("--project", help="Project ID (default: PROVISIONER_PROJECT_ID)")
    parser.add_argument("--team", help="Team ID scoping (default: PROVISIONER_TEAM_ID)")
    parser.add_argument("--token", help="API token (default: PROVISIONER_API_TOKEN)")
    parser.add_argument("--api-base", help="API base URL (default: PROVISIONER_API_BASE)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


async def provision(args: argparse.Namespace, settings: Settings) -> int:
    try:
        result = await add_project_domain(
            project_id=args.project or settings.project_id,
            domain=args.domain,
            token=args.token or settings.api_token,
            team_id=args.team or settings.team_id or None,
            api_base=args.api_base or settings.api_base,
        )
    except ValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_INVALID
    except (ApiError, TransportError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILED

    print(json.dumps(result, indent=2))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper()
    )

    return asyncio.run(provision(args, settings))


if __name__ == "__main__":
    sys.exit(main())
