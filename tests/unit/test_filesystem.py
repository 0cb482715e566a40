"""Unit tests for the filesystem facade.

Every test works inside a namespaced testing workspace under tmp_path, which
is deleted before each test.
"""

from pathlib import Path

import pytest

from diskkit.exceptions import InputInvalidError
from diskkit.filesystem import (
    FilesystemError,
    create_folder,
    delete_folder,
    is_real_file_path,
    is_real_folder_path,
    path_exists,
)
from diskkit.naming import workspace_testing_path


@pytest.fixture
def stub_root(tmp_path: Path) -> Path:
    """Provide an empty, not yet created testing root directory."""
    root = workspace_testing_path("os.filesystem", root=tmp_path)
    delete_folder(root)
    return root


class TestIsRealFolderPath:
    """Tests for is_real_folder_path."""

    def test_false_if_not_path(self) -> None:
        """An empty string is not a folder."""
        assert is_real_folder_path("") is False

    def test_false_if_not_real(self, stub_root: Path) -> None:
        """A missing directory is not a folder."""
        assert is_real_folder_path(stub_root) is False

    def test_false_if_not_directory(self, stub_root: Path) -> None:
        """A file is not a folder."""
        create_folder(stub_root)
        (stub_root / "alfa.txt").write_text("")

        assert is_real_folder_path(stub_root / "alfa.txt") is False

    def test_true(self, stub_root: Path) -> None:
        """An existing directory is a folder."""
        create_folder(stub_root)

        assert is_real_folder_path(stub_root) is True
        assert is_real_folder_path(str(stub_root)) is True


class TestIsRealFilePath:
    """Tests for is_real_file_path."""

    def test_false_if_not_path(self) -> None:
        """An empty string is not a file."""
        assert is_real_file_path("") is False

    def test_false_if_missing(self, stub_root: Path) -> None:
        """A missing file is not a file."""
        assert is_real_file_path(stub_root / "alpha.txt") is False

    def test_false_if_directory(self, stub_root: Path) -> None:
        """A directory is not a file."""
        create_folder(stub_root)

        assert is_real_file_path(stub_root) is False

    def test_true_if_file_exists(self, stub_root: Path) -> None:
        """An existing file is a file."""
        create_folder(stub_root)
        (stub_root / "alpha.txt").write_text("")

        assert is_real_file_path(stub_root / "alpha.txt") is True


class TestPathExists:
    """Tests for path_exists."""

    def test_empty_string(self) -> None:
        """An empty string never exists."""
        assert path_exists("") is False

    def test_file_and_folder(self, stub_root: Path) -> None:
        """Both files and folders exist."""
        assert path_exists(stub_root) is False

        create_folder(stub_root)
        (stub_root / "alpha.txt").write_text("")

        assert path_exists(stub_root) is True
        assert path_exists(stub_root / "alpha.txt") is True


class TestCreateFolder:
    """Tests for create_folder."""

    def test_returns_argument(self, stub_root: Path) -> None:
        """The argument is returned unchanged, str or Path."""
        as_path = stub_root / "alfa"
        as_str = str(stub_root / "bravo")

        assert create_folder(as_path) is as_path
        assert create_folder(as_str) is as_str

    def test_rejects_empty_path(self) -> None:
        """An empty path is refused instead of resolving to the working directory."""
        with pytest.raises(InputInvalidError, match="path"):
            create_folder("")

    def test_creates_folder_with_parents(self, stub_root: Path) -> None:
        """Missing parents are created too."""
        target = stub_root / "alfa" / "bravo"
        assert target.exists() is False

        assert Path(create_folder(target)).is_dir()

    def test_does_nothing_if_exists(self, stub_root: Path) -> None:
        """An existing folder keeps its contents."""
        directory = create_folder(stub_root / "alpha")
        (directory / "bravo.txt").write_text("charlie")

        assert create_folder(directory) == directory
        assert (directory / "bravo.txt").read_text() == "charlie"

    def test_raises_if_file_in_the_way(self, stub_root: Path) -> None:
        """A file at the path cannot become a folder."""
        create_folder(stub_root)
        blocker = stub_root / "alpha"
        blocker.write_text("")

        with pytest.raises(FilesystemError) as exc_info:
            create_folder(blocker / "bravo")

        assert exc_info.value.path == str(blocker / "bravo")
        assert isinstance(exc_info.value.__cause__, OSError)


class TestDeleteFolder:
    """Tests for delete_folder."""

    def test_returns_0_if_path_does_not_exist(self, stub_root: Path) -> None:
        """Deleting a missing folder is a no-op."""
        assert delete_folder(stub_root / "alpha") == 0

    def test_returns_0_if_path_not_directory(self, stub_root: Path) -> None:
        """Files are left alone."""
        create_folder(stub_root)
        file_path = stub_root / "alpha.txt"
        file_path.write_text("")

        assert delete_folder(file_path) == 0
        assert file_path.exists()

    def test_returns_0_for_empty_string(self) -> None:
        """An empty string never deletes the working directory."""
        assert delete_folder("") == 0

    def test_returns_1_and_deletes_recursively(self, stub_root: Path) -> None:
        """A folder is removed with everything inside it."""
        directory = create_folder(stub_root / "alpha")
        (directory / "alpha.txt").write_text("")

        assert delete_folder(stub_root) == 1
        assert directory.exists() is False
        assert stub_root.exists() is False
