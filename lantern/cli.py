#!/usr/bin/env python3
"""
Teleport to a Bloodborne lantern by patching a decrypted save file.

Usage:
    lantern-teleport <save_file> [--location LOCATION]
    lantern-teleport --list

Examples:
    # Teleport to Hunter's Dream (the default)
    lantern-teleport userdata0000

    # Teleport to a lantern by (partial) name
    lantern-teleport userdata0001 --location "grand cathedral"

Run it on the userdata0000, userdata0001, ... files of your save directory;
userdata0000 is the first character, userdata0001 the second, and so on.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from lantern.errors import AmbiguousLocation, LocationNotFound, TeleportError
from lantern.locations import all_locations, find_location, group_by_region
from lantern.log import log, setup_logging
from lantern.save import teleport_file


def list_locations() -> None:
    locations = all_locations()
    groups = group_by_region(locations)

    log.info('Available teleport locations:')
    for group in groups:
        log.info('')
        log.info(group.region)
        for location in group.locations:
            marker = '' if location.verified else ' *'
            log.info(f'  - {location.describe()}{marker}')
    log.info('')
    log.info(f'Total: {len(locations)} locations across {len(groups)} regions')
    log.info('* placeholder coordinates, not checked in game')


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Teleport to any lantern in Bloodborne save files')
    parser.add_argument('save_file', nargs='?', type=Path, help='Path to the save file (e.g. userdata0000)')
    parser.add_argument(
        '--location',
        '-l',
        help='Lantern to teleport to, case-insensitive partial name (default: first lantern)',
    )
    parser.add_argument('--list', action='store_true', help='List all available locations and exit')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log locator offsets')

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.list:
        list_locations()
        return 0

    if args.save_file is None:
        log.error('No save file provided. Use --help for usage information.')
        return 1

    if args.location is None:
        location = all_locations()[0]
    else:
        try:
            location = find_location(args.location)
        except AmbiguousLocation as e:
            log.error(f'Multiple matches found for {e.query!r}:')
            for i, match in enumerate(e.matches, 1):
                log.error(f'  {i}. {match.name} ({match.region})')
            log.error('Please provide a more specific location name.')
            return 1
        except LocationNotFound as e:
            log.error(f'{e}. Use --list to see available locations.')
            return 1

    log.info(f'Teleporting to: {location.name} in {location.region}')
    try:
        teleport_file(args.save_file, location)
    except TeleportError as e:
        log.error(f'Failed to teleport: {e}')
        return 1

    log.info(f'Successfully teleported to {location.name}!')
    log.info(f'Save file updated: {args.save_file}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
