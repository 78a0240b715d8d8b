"""Tests for probe module."""

import os

import pytest

from dotmanager.models import LinkState
from dotmanager.probe import ProbeError, classify, exists, lexists, link_target


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "source.conf"
    path.write_text("data")
    return str(path)


class TestClassify:
    """Tests for classify function."""

    def test_absent(self, tmp_path, source):
        """Nothing at the path is ABSENT."""
        assert classify(str(tmp_path / "nothing"), source) is LinkState.ABSENT

    def test_linked_correctly(self, tmp_path, source):
        """Link with the exact target is LINKED_CORRECTLY."""
        dest = tmp_path / ".dest"
        os.symlink(source, dest)
        assert classify(str(dest), source) is LinkState.LINKED_CORRECTLY

    def test_linked_elsewhere(self, tmp_path, source):
        """Link to another target is LINKED_ELSEWHERE."""
        other = tmp_path / "other.conf"
        other.write_text("other")
        dest = tmp_path / ".dest"
        os.symlink(other, dest)
        assert classify(str(dest), source) is LinkState.LINKED_ELSEWHERE

    def test_equivalent_target_spelling_is_elsewhere(self, tmp_path, source):
        """Target comparison is exact string equality."""
        dest = tmp_path / ".dest"
        os.symlink(os.path.join(str(tmp_path), "..", tmp_path.name, "source.conf"), dest)
        assert classify(str(dest), source) is LinkState.LINKED_ELSEWHERE

    def test_dangling_link(self, tmp_path, source):
        """Dangling link is classified by its target string, not followed."""
        dest = tmp_path / ".dest"
        os.symlink(str(tmp_path / "gone"), dest)
        assert classify(str(dest), source) is LinkState.LINKED_ELSEWHERE

    def test_regular_file(self, tmp_path, source):
        """Plain file is REGULAR_FILE_EXISTS."""
        dest = tmp_path / ".dest"
        dest.write_text("mine")
        assert classify(str(dest), source) is LinkState.REGULAR_FILE_EXISTS

    def test_directory(self, tmp_path, source):
        """Directory is not a link either."""
        dest = tmp_path / ".dest"
        dest.mkdir()
        assert classify(str(dest), source) is LinkState.REGULAR_FILE_EXISTS

    def test_parent_is_file(self, tmp_path, source):
        """A file in place of a parent directory is a probe error."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        with pytest.raises(ProbeError, match="Cannot inspect"):
            classify(str(blocker / ".dest"), source)


class TestExistence:
    """Tests for exists, lexists and link_target."""

    def test_lexists_dangling(self, tmp_path):
        """lexists sees a dangling link, exists does not."""
        dest = tmp_path / ".dest"
        os.symlink(str(tmp_path / "gone"), dest)
        assert lexists(str(dest))
        assert not exists(str(dest))

    def test_exists_file(self, source):
        """Existing file exists."""
        assert exists(source)
        assert lexists(source)

    def test_missing(self, tmp_path):
        """Missing path exists nowhere."""
        assert not exists(str(tmp_path / "nope"))
        assert not lexists(str(tmp_path / "nope"))

    def test_link_target(self, tmp_path, source):
        """link_target returns the stored target string."""
        dest = tmp_path / ".dest"
        os.symlink(source, dest)
        assert link_target(str(dest)) == source

    def test_link_target_not_a_link(self, source):
        """Reading a non-link errors."""
        with pytest.raises(ProbeError) as exc_info:
            link_target(source)
        assert exc_info.value.path == source
