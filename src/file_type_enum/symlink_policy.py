"""Symlink policy enum for choosing how a path lookup treats symbolic links."""

from enum import Enum
from typing import Union

from .file_type import FileType
from .types import PathType


class SymlinkPolicy(str, Enum):
    """How to treat a symbolic link at the end of a path being classified.

    Values:
        FOLLOW: Classify the final target of the link (default behavior)
        PRESERVE: Classify the link itself, reporting it as a symlink
    """

    FOLLOW = "follow"
    PRESERVE = "preserve"


def classify(path: PathType, policy: Union[SymlinkPolicy, str] = SymlinkPolicy.FOLLOW) -> FileType:
    """Classify ``path`` according to ``policy``.

    Args:
        path: Path to classify.
        policy: A `SymlinkPolicy` member or its string value.

    Returns:
        The type of the entry.

    Raises:
        ValueError: If ``policy`` is not a known policy name.
        OSError: If the metadata lookup fails (see `FileType.read_at`).
    """
    policy = SymlinkPolicy(policy)
    if policy is SymlinkPolicy.PRESERVE:
        return FileType.symlink_read_at(path)
    return FileType.read_at(path)
