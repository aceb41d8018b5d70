"""
Command-line interface for GrenLoc.

This module provides the ``grenloc`` entry point.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import requests
from pydantic import ValidationError

from grenloc import __version__
from grenloc.codec import get_classifier, locate, maps_url
from grenloc.config import get_settings
from grenloc.logging_config import setup_logging
from grenloc.presenters import (
    CompositePresenter,
    ConsolePresenter,
    Presenter,
    StickerPresenter,
    encode_and_present,
)
from grenloc.reference.grid import GRID_SIZE_M, SEARCH_GRID_SIZE_M
from grenloc.reference.parishes import PARISH_FALLBACK, PARISHES
from grenloc.schemas import Coordinate
from grenloc.services.geocoding import geocode


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="grenloc",
        description="Grenada digital location codes",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Options shared by commands that produce a code
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument(
        "--sticker",
        action="store_true",
        help="Write a printable HTML sticker to sticker_dir from settings",
    )
    output.add_argument(
        "--sticker-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Write the sticker to DIR instead (implies --sticker)",
    )
    output.add_argument(
        "--share",
        action="store_true",
        help="Also print the share message and WhatsApp link",
    )

    encode_parser = subparsers.add_parser(
        "encode", parents=[output], help="Encode a coordinate into a location code"
    )
    encode_parser.add_argument("lat", type=float, help="Latitude in decimal degrees")
    encode_parser.add_argument("lng", type=float, help="Longitude in decimal degrees")

    decode_parser = subparsers.add_parser("decode", help="Find the position of a location code")
    decode_parser.add_argument("code", type=str, help="Location code, e.g. GN-STG-482731")

    search_parser = subparsers.add_parser(
        "search", parents=[output], help="Look up a place name and encode it"
    )
    search_parser.add_argument("query", nargs="+", help="Place name")

    subparsers.add_parser("parishes", help="List parish codes and bounding boxes")

    subparsers.add_parser("info", help="Show application info")

    return parser


def _encode(coord: Coordinate, args: argparse.Namespace) -> int:
    """Encode ``coord`` to the console, plus a sticker file when one was requested."""
    settings = get_settings()
    classifier = get_classifier(settings.boundary_mode)

    presenter: Presenter = ConsolePresenter(diagnostics=args.debug, share=args.share)
    sticker: StickerPresenter | None = None
    if args.sticker or args.sticker_dir is not None:
        sticker = StickerPresenter(args.sticker_dir or settings.sticker_dir)
        presenter = CompositePresenter(presenter, sticker)

    encode_and_present(coord, presenter, classifier)

    if sticker is not None:
        for path in sticker.written:
            print(f"Sticker: {path}")
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    """Handle the 'encode' command."""
    try:
        coord = Coordinate(lat=args.lat, lng=args.lng)
    except ValidationError:
        print(
            f"Error: coordinates must be finite numbers, got {args.lat}, {args.lng}",
            file=sys.stderr,
        )
        return 1
    return _encode(coord, args)


def cmd_decode(args: argparse.Namespace) -> int:
    """Handle the 'decode' command."""
    coord = locate(args.code)
    if coord is None:
        print(f"Invalid GrenLoc code: {args.code!r}", file=sys.stderr)
        return 1

    print(coord)
    print(f"Map: {maps_url(coord)}")
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command: geocode a place name then encode it."""
    query = " ".join(args.query)
    try:
        coord = geocode(query)
    except requests.RequestException as e:
        print(f"Error: place search failed: {e}", file=sys.stderr)
        return 1

    if coord is None:
        print(f"No place found for {query!r}", file=sys.stderr)
        return 1

    return _encode(coord, args)


def cmd_parishes(_args: argparse.Namespace) -> int:
    """Handle the 'parishes' command. Listed in match order."""
    for boundary in PARISHES:
        b = boundary.bbox
        print(
            f"{boundary.parish.code}  {boundary.parish.name:<12} "
            f"lat {b.min_lat:.2f}..{b.max_lat:.2f}  lng {b.min_lng:.2f}..{b.max_lng:.2f}"
        )
    print(f"{PARISH_FALLBACK.code}  {PARISH_FALLBACK.name}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Boundary mode: {settings.boundary_mode}")
    print(f"Encode grid: {GRID_SIZE_M} m")
    print(f"Search grid: {SEARCH_GRID_SIZE_M} m")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug or get_settings().debug)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "encode": cmd_encode,
        "decode": cmd_decode,
        "search": cmd_search,
        "parishes": cmd_parishes,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
