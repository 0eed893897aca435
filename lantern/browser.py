"""Directory listing for the save file browser."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lantern.log import log


@dataclass(frozen=True)
class FileEntry:
    name: str
    path: Path
    is_dir: bool


def list_directory(path: Path) -> list[FileEntry]:
    """List `path` as '..' (when there is a parent), directories, then files.

    Directories and files are each sorted case-insensitively. An unreadable
    directory yields only the parent entry.
    """
    entries = []
    if path.parent != path:
        entries.append(FileEntry(name='..', path=path.parent, is_dir=True))

    try:
        children = list(path.iterdir())
    except OSError as e:
        log.warning(f'Cannot list {path}: {e}')
        return entries

    dirs = []
    files = []
    for child in children:
        try:
            is_dir = child.is_dir()
        except OSError:
            is_dir = False
        entry = FileEntry(name=child.name, path=child, is_dir=is_dir)
        if is_dir:
            dirs.append(entry)
        else:
            files.append(entry)

    dirs.sort(key=lambda e: e.name.lower())
    files.sort(key=lambda e: e.name.lower())
    return entries + dirs + files
