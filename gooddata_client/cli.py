#!/usr/bin/env python3
"""
Command line interface for browsing the GoodData API.
"""

import argparse
import json
import logging
import sys
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import after loading env vars to ensure proper configuration
from . import __version__
from .application.gooddata_service import GoodDataClient
from .domain.errors import GoodDataError
from .domain.models.link import absolute_uri
from .infrastructure.config.settings import get_settings
from .utils import parse_path, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gooddata-client',
        description="Navigate the GoodData REST API by following links",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s links                                      # Links of the API root
  %(prog)s links md category=project,title=Sales      # Matching project links
  %(prog)s uri /gdc/md project                        # First project URI
  %(prog)s --username me@example.com projects         # Log in, list projects
        """
    )
    parser.add_argument('--root',
                        help='API entry point (or set GOODDATA_ROOT env var)')
    parser.add_argument('--username',
                        help='Login name (or set GOODDATA_USERNAME env var)')
    parser.add_argument('--password',
                        help='Password (or set GOODDATA_PASSWORD env var)')
    parser.add_argument('--log-level',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Set logging level')
    parser.add_argument('--version',
                        action='version',
                        version=f'%(prog)s {__version__}')

    sub = parser.add_subparsers(dest='command', required=True)
    links = sub.add_parser('links', help='Print links matching a path')
    links.add_argument('path', nargs='*', help='Categories or key=value descriptors')
    uri = sub.add_parser('uri', help='Print the URI of the first link matching a path')
    uri.add_argument('path', nargs='+', help='Categories or key=value descriptors')
    sub.add_parser('projects', help='Print links to projects')
    return parser


def run(args: argparse.Namespace, client: GoodDataClient) -> int:
    """Execute a parsed command and print its JSON result."""
    settings = get_settings()
    username = args.username or settings.gooddata.username
    password = args.password or settings.gooddata.password
    if username and password:
        client.login(username, password)

    if args.command == 'links':
        result = [record.to_dict() for record in client.links(*parse_path(args.path))]
    elif args.command == 'uri':
        result = client.get_uri(*parse_path(args.path))
    else:
        result = [record.to_dict() for record in client.projects()]

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def main(argv=None) -> int:
    """Main entry point for GoodData Client CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = logging.getLogger(__name__)

    try:
        settings = get_settings()
        setup_logging(args.log_level or settings.log_level, settings.log_format)
        entry_point = absolute_uri(args.root, settings.gooddata.root) if args.root else None
        client = GoodDataClient(settings=settings, entry_point=entry_point)
        return run(args, client)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except GoodDataError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
