"""
google-geocoding - look up coordinates of addresses and addresses of coordinates
from the command line.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List, Optional

from google_geocoding import (
    Connection,
    Coordinates,
    DegeocodeQuery,
    GeocodeQuery,
    GeocodingError,
    Language,
    Region,
    Reply,
)
from google_geocoding.config import ConfigManager
from google_geocoding.logging_utils import initLogging

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)


def parseArguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Google Geocoding API client, dood!")
    parser.add_argument(
        "-c",
        "--config",
        default="geocoding.toml",
        help="Path to configuration file (default: geocoding.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times)",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit",
    )
    parser.add_argument(
        "--full",
        action="store_true",
        help="Print the full reply as JSON instead of coordinates/addresses",
    )
    parser.add_argument("--language", type=Language, help="Language of the results")

    subparsers = parser.add_subparsers(dest="command")

    geocodeParser = subparsers.add_parser("geocode", help="Coordinates of an address")
    geocodeParser.add_argument("address", help="Address to look up")
    geocodeParser.add_argument("--region", type=Region, help="Region bias (ccTLD)")

    degeocodeParser = subparsers.add_parser("degeocode", help="Addresses at coordinates")
    degeocodeParser.add_argument("latitude", type=float, help="Latitude in degrees")
    degeocodeParser.add_argument("longitude", type=float, help="Longitude in degrees")

    args = parser.parse_args(argv)
    args.config = os.path.abspath(args.config)
    if args.config_dir:
        args.config_dir = [os.path.abspath(dirPath) for dirPath in args.config_dir]
    if args.command is None and not args.print_config:
        parser.error("a command (geocode or degeocode) is required")

    return args


def prettyPrintConfig(configManager: ConfigManager) -> None:
    """Pretty-print the loaded configuration, hiding the API key."""
    config = dict(configManager.config)
    if "api-key" in config.get("geocoding", {}):
        config["geocoding"] = {**config["geocoding"], "api-key": "***"}
    print(json.dumps(config, indent=2, ensure_ascii=False, sort_keys=True))


def buildQuery(args: argparse.Namespace) -> GeocodeQuery | DegeocodeQuery:
    """Build the query described by the command line.

    Raises:
        ValidationError: If the coordinates are out of range
    """
    if args.command == "geocode":
        query = GeocodeQuery(args.address)
        if args.region is not None:
            query = query.withRegion(args.region)
    else:
        query = DegeocodeQuery(Coordinates.tryNew(args.latitude, args.longitude))

    if args.language is not None:
        query = query.withLanguage(args.language)
    return query


async def runQuery(connection: Connection, query: GeocodeQuery | DegeocodeQuery) -> Reply:
    async with connection:
        if isinstance(query, GeocodeQuery):
            return await connection.geocode(query)
        return await connection.degeocode(query)


def formatReply(reply: Reply, isGeocode: bool, full: bool) -> str:
    """Render a reply for printing."""
    if full:
        return json.dumps(reply.to_dict(), indent=2, ensure_ascii=False)
    lines = [str(c) for c in reply.coordinates()] if isGeocode else reply.addresses()
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parseArguments(argv)

    try:
        configManager = ConfigManager(args.config, args.config_dir)
        if args.print_config:
            prettyPrintConfig(configManager)
            return 0

        initLogging(configManager.getLoggingConfig())

        query = buildQuery(args)
        connection = Connection.fromConfig(configManager.getGeocodingConfig())
        reply = asyncio.run(runQuery(connection, query))
    except GeocodingError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    output = formatReply(reply, isinstance(query, GeocodeQuery), args.full)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
