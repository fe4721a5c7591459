"""Conversion between `FileType` and the POSIX file type bits of a ``st_mode`` word.

The constants come from the standard ``stat`` module, which mirrors ``<sys/stat.h>``.
Each member is bound to the constant that documents the same kind of entry.
"""

import logging
import stat
import sys
from typing import Dict

from .exceptions import UnrecognizedFileTypeError
from .file_type import FileType

logger = logging.getLogger(__name__)

_MODE_BY_FILE_TYPE: Dict[FileType, int] = {
    FileType.REGULAR: stat.S_IFREG,
    FileType.DIRECTORY: stat.S_IFDIR,
    FileType.SYMLINK: stat.S_IFLNK,
}
if sys.platform != "win32":
    _MODE_BY_FILE_TYPE.update(
        {
            FileType.BLOCK_DEVICE: stat.S_IFBLK,
            FileType.CHAR_DEVICE: stat.S_IFCHR,
            FileType.FIFO: stat.S_IFIFO,
            FileType.SOCKET: stat.S_IFSOCK,
        }
    )

_FILE_TYPE_BY_MODE: Dict[int, FileType] = {mode: file_type for file_type, mode in _MODE_BY_FILE_TYPE.items()}


def file_type_to_mode(file_type: FileType) -> int:
    """Return the file type bits for ``file_type``, e.g. ``stat.S_IFDIR`` for a directory.

    Args:
        file_type: Member to convert.

    Returns:
        One of ``S_IFREG``, ``S_IFDIR``, ``S_IFLNK``, ``S_IFBLK``, ``S_IFCHR``, ``S_IFIFO``
        or ``S_IFSOCK``.
    """
    return _MODE_BY_FILE_TYPE[file_type]


def file_type_from_mode(bits: int) -> FileType:
    """Return the member for exactly one of the file type constants.

    The value is not masked: ``stat.S_IFREG | 0o644`` is rejected. Use
    `file_type_from_st_mode` for a complete mode word.

    Args:
        bits: File type bits, such as ``stat.S_IFIFO``.

    Returns:
        The member bound to ``bits``.

    Raises:
        UnrecognizedFileTypeError: If ``bits`` is not one of the recognized constants.
    """
    try:
        return _FILE_TYPE_BY_MODE[bits]
    except KeyError:
        logger.error("No file type is bound to mode bits %#o", bits)
        raise UnrecognizedFileTypeError(bits) from None


def file_type_from_st_mode(st_mode: int) -> FileType:
    """Mask a full ``st_mode`` word down to its file type field and convert it."""
    return file_type_from_mode(stat.S_IFMT(st_mode))
