"""
Constants for the Bloodborne lantern teleport tool.
"""

import os
from pathlib import Path

# Save layout (decrypted userdata files)
LCED_MARKER = b'LCED'  # 4C 43 45 44
COORD_PATTERN = b'\xff\xff\xff\xff' + b'\x00' * 8
COORD_OFFSET_AFTER_PATTERN = len(COORD_PATTERN)
ZONE_ID_OFFSET = 0x04
ZONE_ID_SIZE = 4

# Interactive session
TICK_RATE_MS = 250
START_DIR = Path(os.environ.get('LANTERN_TELEPORT_DIR') or Path.cwd())
_log_file = os.environ.get('LANTERN_TELEPORT_LOG')
TUI_LOG_FILE = Path(_log_file) if _log_file else None
