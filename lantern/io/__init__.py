"""Binary IO utilities for save file patching."""

from lantern.io.reader import Reader
from lantern.io.writer import Writer

__all__ = ['Reader', 'Writer']
