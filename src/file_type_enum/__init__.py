"""An enum with a member for each kind of filesystem entry.

This package classifies a path, a ``stat`` result or an ``os.scandir`` entry as a
regular file, directory or symbolic link and, on POSIX systems, as a block device,
character device, FIFO or socket, and converts between those members and the file
type bits of a POSIX mode word.

Example:
    >>> import shutil
    >>> from file_type_enum import FileType
    >>> def move_file(source, destination):
    ...     source_type = FileType.symlink_read_at(source)
    ...     destination_type = FileType.symlink_read_at(destination)
    ...     if destination_type.is_directory():
    ...         shutil.move(source, destination)
    ...     elif source_type != destination_type:
    ...         raise ValueError(f"Cannot overwrite {destination_type} with a {source_type}")
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from .exceptions import UnrecognizedFileTypeError
from .file_type import HAS_POSIX_FILE_TYPES, FileType, classify_mode
from .mode_bits import file_type_from_mode, file_type_from_st_mode, file_type_to_mode
from .symlink_policy import SymlinkPolicy, classify
from .types import PathType, StatLike

# Expose the version for programmatic use
try:
    __version__ = version("file-type-enum")
except PackageNotFoundError:
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HAS_POSIX_FILE_TYPES",
    "FileType",
    "PathType",
    "StatLike",
    "SymlinkPolicy",
    "UnrecognizedFileTypeError",
    "classify",
    "classify_mode",
    "file_type_from_mode",
    "file_type_from_st_mode",
    "file_type_to_mode",
]
