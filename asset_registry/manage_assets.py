#!/usr/bin/env python3
"""
Manage the asset registry: asset info templates, token lists and feed imports.

Commands:
  create-template  Create an empty info.json for a new asset
  add-token        Append an asset to a chain's default or extended token list
  ingest           Import new tokens (info.json + logo) from a remote feed

Only one instance may modify a registry at a time; token list updates are
read-modify-write without locking.
"""

import argparse
import sys
from typing import List, Optional

from asset_registry.lib.chains import CHAINS, REMOTE_FEED_CHAINS, get_chain_by_handle, parse_asset_id
from asset_registry.lib.config import RegistryConfig, load_config
from asset_registry.lib.errors import RegistryError
from asset_registry.lib.formatters import log, write_report
from asset_registry.lib.paths import TOKEN_LIST_TYPES, TOKENLIST_DEFAULT
from asset_registry.lib.pipeline import RemoteIngestionPipeline
from asset_registry.lib.reconciler import Reconciler

REMOTE_FEED_HANDLES = sorted(CHAINS[coin_id].handle for coin_id in REMOTE_FEED_CHAINS)


def create_template(config: RegistryConfig, asset_id: str) -> int:
    path = Reconciler(config).create_template(asset_id)
    log("template", f"Created {path}")
    return 0


def add_token(config: RegistryConfig, asset_id: str, list_type: str) -> int:
    chain, token_id = parse_asset_id(asset_id)
    token_list = Reconciler(config).add_token_to_list(chain, asset_id, token_id, list_type)
    log(
        chain.handle,
        f"Added {asset_id} to {list_type} token list "
        f"(version {token_list.version.major}, {len(token_list.tokens)} tokens)",
    )
    return 0


def ingest(config: RegistryConfig, handle: str, url: str, output: Optional[str]) -> int:
    chain = get_chain_by_handle(handle)
    report = RemoteIngestionPipeline(config).ingest(chain, url)

    report_file = write_report([report], output)
    if report_file:
        print(f"\nReport written to: {report_file}", file=sys.stderr)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Curate blockchain asset info files, token lists and logos.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create an empty info.json for a new Ethereum token
  %(prog)s create-template c60_t0xdAC17F958D2ee523a2206206994597C13D831ec7

  # List it in the extended token list
  %(prog)s add-token c60_t0xdAC17F958D2ee523a2206206994597C13D831ec7 --list extended

  # Import new Polygon tokens from a feed, saving the report
  %(prog)s ingest --chain polygon --url https://example.com/tokens.json \\
    --output ingest_report.csv
        """,
    )
    parser.add_argument(
        "--root",
        help="Registry root directory containing blockchains/ (default: $ASSETS_ROOT or .)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    template_parser = subparsers.add_parser("create-template", help="Create an empty info.json")
    template_parser.add_argument("asset_id", help="Asset id, e.g. c60_t0x...")

    add_parser = subparsers.add_parser("add-token", help="Add an asset to a token list")
    add_parser.add_argument("asset_id", help="Asset id, e.g. c60_t0x...")
    add_parser.add_argument(
        "--list",
        dest="list_type",
        choices=TOKEN_LIST_TYPES,
        default=TOKENLIST_DEFAULT,
        help="Token list to append to (default: %(default)s)",
    )

    ingest_parser = subparsers.add_parser("ingest", help="Import tokens from a remote feed")
    ingest_parser.add_argument(
        "--chain",
        required=True,
        help=f"Chain handle. Supported: {', '.join(REMOTE_FEED_HANDLES)}",
    )
    ingest_parser.add_argument("--url", required=True, help="Token feed URL")
    ingest_parser.add_argument(
        "--output",
        help="Report file path (timestamp auto-appended). If not specified, outputs to stdout.",
    )

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parsed_args = build_parser().parse_args(args)

    try:
        config = load_config().with_root(parsed_args.root)
        if parsed_args.command == "create-template":
            return create_template(config, parsed_args.asset_id)
        if parsed_args.command == "add-token":
            return add_token(config, parsed_args.asset_id, parsed_args.list_type)
        return ingest(config, parsed_args.chain, parsed_args.url, parsed_args.output)
    except RegistryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
