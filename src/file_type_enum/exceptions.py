class UnrecognizedFileTypeError(AssertionError):
    """
    Exception raised when a mode value matches none of the known file types.

    The platform guarantees that every filesystem entry is exactly one of the
    categories modelled by `FileType`. Seeing anything else means that contract
    was broken (an exotic entry such as a Solaris door, or a corrupted mode
    word), so there is no tag that could be returned safely. This error derives
    from `AssertionError` rather than `OSError` so that handlers written for
    ordinary I/O failures do not absorb it.

    Attributes:
        mode (int): The offending mode value.

    Example:
        >>> error = UnrecognizedFileTypeError(0o170000)
        >>> str(error)
        'unexpected file type: mode 0o170000'
    """

    def __init__(self, mode: int) -> None:
        """
        Initialize the exception with the mode value that could not be mapped.

        Args:
            mode (int): The ``st_mode`` word or file type bits that were rejected.
        """
        self.mode = mode
        super().__init__(f"unexpected file type: mode {mode:#o}")
