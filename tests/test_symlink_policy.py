"""Unit tests for the symlink_policy module."""

import pytest

from file_type_enum.file_type import FileType
from file_type_enum.symlink_policy import SymlinkPolicy, classify


def test_symlink_policy_enum():
    """Test the SymlinkPolicy enum values."""
    assert SymlinkPolicy.FOLLOW == "follow"
    assert SymlinkPolicy.PRESERVE == "preserve"

    # Test string conversion works both ways
    assert SymlinkPolicy("follow") == SymlinkPolicy.FOLLOW
    assert SymlinkPolicy("preserve") == SymlinkPolicy.PRESERVE


def test_classify_defaults_to_following(regular_file, make_symlink):
    link = make_symlink("link", regular_file)
    assert classify(link) is FileType.REGULAR
    assert classify(link, SymlinkPolicy.FOLLOW) is FileType.read_at(link)


def test_classify_preserving(regular_file, make_symlink):
    link = make_symlink("link", regular_file)
    assert classify(link, SymlinkPolicy.PRESERVE) is FileType.SYMLINK
    assert classify(regular_file, SymlinkPolicy.PRESERVE) is FileType.REGULAR


def test_classify_accepts_policy_strings(directory, make_symlink):
    link = make_symlink("dirlink", directory, target_is_directory=True)
    assert classify(link, "follow") is FileType.DIRECTORY
    assert classify(link, "preserve") is FileType.SYMLINK


def test_classify_rejects_unknown_policy(regular_file):
    with pytest.raises(ValueError):
        classify(regular_file, "resolve")


def test_classify_missing_path(tmp_path):
    for policy in SymlinkPolicy:
        with pytest.raises(FileNotFoundError):
            classify(tmp_path / "missing", policy)
