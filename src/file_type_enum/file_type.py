"""File type enumeration and classification of filesystem entries."""

import functools
import logging
import os
import stat
import sys
from enum import Enum
from typing import Any, Callable, Tuple

from .exceptions import UnrecognizedFileTypeError
from .types import PathType, StatLike

logger = logging.getLogger(__name__)

# Block devices, character devices, FIFOs and sockets only exist on POSIX-family systems
HAS_POSIX_FILE_TYPES = sys.platform != "win32"


@functools.total_ordering
class FileType(Enum):
    """Enumeration with one member per kind of filesystem entry.

    Every classification yields exactly one member. The value of each member is its
    human-readable rendering, which is also what ``str()`` returns, so a member can be
    dropped straight into a user-facing message::

        >>> f"Overwriting {FileType.REGULAR} at {'/tmp/x'}"
        'Overwriting regular file at /tmp/x'

    Members are ordered by declaration, so they sort and can be used as dictionary or
    set keys.

    Attributes:
        REGULAR: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
        BLOCK_DEVICE: Block device (POSIX only)
        CHAR_DEVICE: Character device (POSIX only)
        FIFO: Named pipe (POSIX only)
        SOCKET: Unix domain socket (POSIX only)

    Note:
        On Windows the four POSIX-only members and their predicates are not defined,
        so matching over the members stays exhaustive on every platform.

        Like ``os.stat``, `read_at` follows symlinks and therefore never returns
        `SYMLINK`. Use `symlink_read_at` for symlink awareness.
    """

    REGULAR = "regular file"
    DIRECTORY = "directory"
    SYMLINK = "symbolic link"
    if sys.platform != "win32":
        BLOCK_DEVICE = "block device"
        CHAR_DEVICE = "char device"
        FIFO = "FIFO"
        SOCKET = "socket"

    @classmethod
    def read_at(cls, path: PathType) -> "FileType":
        """Read the type of the entry at ``path``, following symlinks.

        Because links are followed to their final target, the result is never `SYMLINK`.

        Args:
            path: Path to classify.

        Returns:
            The type of the entry, or of the final target if ``path`` is a symlink.

        Raises:
            FileNotFoundError: If the path, or the target of a symlink chain, does not exist.
            PermissionError: If metadata of any element of the chain cannot be read.
            UnrecognizedFileTypeError: If the platform reports a type outside this enumeration.
        """
        result = cls.from_metadata(os.stat(path))
        logger.debug("Classified %s as %s (following symlinks)", path, result)
        return result

    @classmethod
    def symlink_read_at(cls, path: PathType) -> "FileType":
        """Read the type of the entry at ``path`` without following a final symlink.

        Args:
            path: Path to classify.

        Returns:
            `SYMLINK` if ``path`` itself is a symbolic link, otherwise the type of the entry.

        Raises:
            FileNotFoundError: If the path does not exist.
            PermissionError: If metadata of the path cannot be read.
            UnrecognizedFileTypeError: If the platform reports a type outside this enumeration.
        """
        result = cls.from_metadata(os.lstat(path))
        logger.debug("Classified %s as %s (preserving symlinks)", path, result)
        return result

    @classmethod
    def from_path(cls, path: PathType) -> "FileType":
        """Alias of `read_at`."""
        return cls.read_at(path)

    @classmethod
    def from_metadata(cls, metadata: StatLike) -> "FileType":
        """Classify metadata that was already obtained, without touching the filesystem.

        Args:
            metadata: An ``os.stat_result`` or any object exposing ``st_mode``.

        Returns:
            The member matching the file type bits of ``metadata.st_mode``.

        Raises:
            UnrecognizedFileTypeError: If the file type bits match no member.
        """
        return classify_mode(metadata.st_mode)

    @classmethod
    def from_dir_entry(cls, entry: "os.DirEntry[Any]", follow_symlinks: bool = True) -> "FileType":
        """Classify an entry yielded by ``os.scandir``.

        Regular files, directories and symlinks are recognized from the type information
        the directory listing already provides. Only the remaining kinds cost a single
        ``entry.stat()`` call, which ``os.DirEntry`` caches.

        Args:
            entry: Directory entry to classify.
            follow_symlinks: Whether a symlink entry is classified by its target.

        Returns:
            The type of the entry.

        Raises:
            FileNotFoundError: If ``follow_symlinks`` is set and the entry is a dangling symlink.
            PermissionError: If metadata of the entry cannot be read.
            UnrecognizedFileTypeError: If the platform reports a type outside this enumeration.
        """
        if not follow_symlinks and entry.is_symlink():
            result = cls.SYMLINK
        elif entry.is_file(follow_symlinks=follow_symlinks):
            result = cls.REGULAR
        elif entry.is_dir(follow_symlinks=follow_symlinks):
            result = cls.DIRECTORY
        else:
            result = cls.from_metadata(entry.stat(follow_symlinks=follow_symlinks))
        logger.debug("Classified directory entry %s as %s", entry.path, result)
        return result

    @classmethod
    def from_bits(cls, bits: int) -> "FileType":
        """Convert POSIX file type bits (e.g. ``stat.S_IFDIR``) into a member.

        See `file_type_enum.mode_bits.file_type_from_mode`.
        """
        from .mode_bits import file_type_from_mode

        return file_type_from_mode(bits)

    def bits(self) -> int:
        """Return the POSIX file type bits (e.g. ``stat.S_IFREG``) for this member."""
        from .mode_bits import file_type_to_mode

        return file_type_to_mode(self)

    def is_regular(self) -> bool:
        """Return True if this is `REGULAR`."""
        return self is FileType.REGULAR

    def is_directory(self) -> bool:
        """Return True if this is `DIRECTORY`."""
        return self is FileType.DIRECTORY

    def is_symlink(self) -> bool:
        """Return True if this is `SYMLINK`."""
        return self is FileType.SYMLINK

    if sys.platform != "win32":

        def is_block_device(self) -> bool:
            """Return True if this is `BLOCK_DEVICE`."""
            return self is FileType.BLOCK_DEVICE

        def is_char_device(self) -> bool:
            """Return True if this is `CHAR_DEVICE`."""
            return self is FileType.CHAR_DEVICE

        def is_fifo(self) -> bool:
            """Return True if this is `FIFO`."""
            return self is FileType.FIFO

        def is_socket(self) -> bool:
            """Return True if this is `SOCKET`."""
            return self is FileType.SOCKET

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FileType):
            return NotImplemented
        members = list(FileType)
        return members.index(self) < members.index(other)


# Checked in this order; the first predicate that accepts the mode wins
_UNIVERSAL_MODE_PREDICATES: Tuple[Tuple[Callable[[int], bool], FileType], ...] = (
    (stat.S_ISREG, FileType.REGULAR),
    (stat.S_ISDIR, FileType.DIRECTORY),
    (stat.S_ISLNK, FileType.SYMLINK),
)

# Windows reports character devices such as NUL and named pipes through os.stat,
# but has no members for them; they count as regular files there.
_WINDOWS_MODE_PREDICATES = _UNIVERSAL_MODE_PREDICATES + (
    (stat.S_ISCHR, FileType.REGULAR),
    (stat.S_ISFIFO, FileType.REGULAR),
)

if sys.platform != "win32":
    _MODE_PREDICATES = _UNIVERSAL_MODE_PREDICATES + (
        (stat.S_ISBLK, FileType.BLOCK_DEVICE),
        (stat.S_ISCHR, FileType.CHAR_DEVICE),
        (stat.S_ISFIFO, FileType.FIFO),
        (stat.S_ISSOCK, FileType.SOCKET),
    )
else:
    _MODE_PREDICATES = _WINDOWS_MODE_PREDICATES


def classify_mode(st_mode: int) -> FileType:
    """Map a full ``st_mode`` word to its `FileType`.

    Permission bits are ignored; only the file type field is inspected.

    Args:
        st_mode: Mode word as found in ``os.stat_result.st_mode``.

    Returns:
        The matching member.

    Raises:
        UnrecognizedFileTypeError: If no member matches. The platform promised one would,
            so this is not an error callers are expected to handle.
    """
    for predicate, file_type in _MODE_PREDICATES:
        if predicate(st_mode):
            return file_type
    logger.error("Platform reported an unknown file type (mode %#o)", st_mode)
    raise UnrecognizedFileTypeError(st_mode)
