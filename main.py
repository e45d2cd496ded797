#!/usr/bin/env python3

"""
Entry point script that runs the command-line converter.
"""

import argparse
import asyncio
import logging
import sys

logger = logging.getLogger("igc_flightlog.main")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Convert IGC flight recorder files into a flight log or KML tracks'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--config',
        help='JSON settings file to load instead of the default one'
    )
    parser.add_argument(
        '--workers',
        type=int,
        help='Number of files analyzed at once'
    )
    parser.add_argument(
        '--forward-scan',
        action='store_true',
        help='Only pair each climb start fix with later fixes'
    )
    parser.add_argument(
        '--complete-only',
        action='store_true',
        help='Leave flights without a detected landing out of the output'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help="Don't print per-file progress"
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    log_parser = subparsers.add_parser('log', help='Write a CSV flight log')
    log_parser.add_argument('input', help='IGC file or directory of IGC files')
    log_parser.add_argument('output', help='CSV file to create')

    kml_parser = subparsers.add_parser('kml', help='Write a KML document')
    kml_parser.add_argument('input', help='IGC file or directory of IGC files')
    kml_parser.add_argument(
        '--output', '-o',
        help='KML file to create (default: first IGC file with .kml appended)'
    )

    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    from igc_flightlog.config.settings import settings
    from igc_flightlog.core.flight import AnalysisOptions
    from igc_flightlog.ui.cli import create_cli

    if args.config and not settings.load_from_file(args.config):
        return 1

    level = 'DEBUG' if args.debug else settings.get('log_level', 'INFO')
    logging.getLogger("igc_flightlog").setLevel(level)

    if args.forward_scan:
        settings.set('legacy_full_scan', False)

    try:
        cli = create_cli(
            options=AnalysisOptions.from_settings(settings),
            max_workers=args.workers,
            complete_only=args.complete_only,
            quiet=args.quiet
        )
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        return 1

    if args.command == 'log':
        return await cli.run_log(args.input, args.output)
    return await cli.run_kml(args.input, args.output)


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
