from os import PathLike
from typing import Protocol, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class StatLike(Protocol):
    """Anything carrying a POSIX ``st_mode`` word, such as ``os.stat_result``.

    Attributes:
        st_mode: File type and permission bits as returned by ``stat(2)``.
    """

    @property
    def st_mode(self) -> int: ...
