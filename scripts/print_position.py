#!/usr/bin/env python3
"""
Print the position stored in a decrypted Bloodborne save file.

Usage: uv run python scripts/print_position.py <save_file>
"""

import argparse
import logging
from pathlib import Path

from lantern.errors import TeleportError
from lantern.locations import all_locations
from lantern.log import log, setup_logging
from lantern.save import encode_zone_id, validate_file


def main() -> None:
    parser = argparse.ArgumentParser(description='Print the position stored in a save file')
    parser.add_argument('save_file', type=Path, help='Path to the save file (e.g. userdata0000)')
    args = parser.parse_args()
    setup_logging(logging.DEBUG)

    log.info(f'Reading save file: {args.save_file}')
    try:
        position = validate_file(args.save_file)
    except TeleportError as e:
        log.error(str(e))
        return

    log.info(f'Zone ID: {position.zone_id_hex}')
    log.info(f'X: {position.x:.2f}  Y: {position.y:.2f}  Z: {position.z:.2f}')

    for location in all_locations():
        if location.coordinates == position.coordinates and encode_zone_id(location.zone_id) == position.zone_id:
            log.info(f'At lantern: {location.name} ({location.region})')
            break
    else:
        log.info('Not at a known lantern')


if __name__ == '__main__':
    main()
