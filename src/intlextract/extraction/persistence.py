"""Unit export files.

One JSON file per compilation unit, mirroring the source tree under the
messages directory:

    src/components/App.js  ->  <messages_dir>/src/components/App.json

Files hold a 2-space-indented array of descriptors in discovery order.

Python 3.13+. Zero external dependencies.
"""

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from intlextract.constants import JSON_INDENT, MESSAGES_FILE_SUFFIX

from .descriptor import MessageDescriptor

__all__ = ["messages_path", "read_messages", "write_messages"]

logger = logging.getLogger(__name__)


def messages_path(
    messages_dir: str | os.PathLike[str],
    filename: str | os.PathLike[str],
    root: str | os.PathLike[str] | None = None,
) -> Path:
    """Export path for a unit.

    Args:
        messages_dir: Root of the export tree
        filename: Unit source path
        root: Directory the unit path is taken relative to (default: cwd)

    Returns:
        <messages_dir>/<dirname(relpath)>/<stem>.json

    Example:
        >>> messages_path("build/messages", "/repo/src/App.js", root="/repo")
        PosixPath('build/messages/src/App.json')
    """
    source = Path(filename)
    base = Path(root) if root is not None else Path.cwd()
    relative = Path(os.path.relpath(source, base))
    return Path(messages_dir) / relative.parent / (source.stem + MESSAGES_FILE_SUFFIX)


def write_messages(path: Path, messages: Iterable[MessageDescriptor]) -> Path:
    """Write descriptors as a JSON array, creating parent directories.

    Returns:
        path
    """
    descriptors = [message.to_dict() for message in messages]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(descriptors, indent=JSON_INDENT, ensure_ascii=False), encoding="utf-8")
    logger.info("Wrote %d messages to %s", len(descriptors), path)
    return path


def read_messages(path: Path) -> tuple[MessageDescriptor, ...]:
    """Load a file written by write_messages.

    Raises:
        ValueError: If the file is not a JSON array of descriptor objects
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        msg = f"{path} is not a message descriptor array"
        raise ValueError(msg)
    return tuple(MessageDescriptor.from_dict(item) for item in data)
