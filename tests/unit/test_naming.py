"""Unit tests for naming constants and testing workspace paths."""

from pathlib import Path

import pytest

from diskkit import naming
from diskkit.exceptions import InputInvalidError
from diskkit.naming import (
    WORKSPACE_TESTING_FOLDER_NAME,
    workspace_testing_path,
    workspace_testing_subfolder_name_for,
)


class TestConstants:
    """Tests for the folder and file name constants."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("APP_FOLDER_NAME", "os-app"),
            ("CACHE_FOLDER_NAME", "os-cache"),
            ("DATA_FOLDER_NAME", "os-data"),
            ("PUBLIC_FOLDER_NAME", "os-public"),
            ("WORKSPACE_TESTING_FOLDER_NAME", "os-workspace-testing"),
            ("LAUNCH_FILE_NAME", "os-launch.js"),
            ("DEFAULT_TEXT_ENCODING", "utf8"),
        ],
    )
    def test_constant(self, name: str, expected: str) -> None:
        """Each constant has its fixed value."""
        assert getattr(naming, name) == expected


class TestWorkspaceTestingSubfolderNameFor:
    """Tests for workspace_testing_subfolder_name_for."""

    def test_raises_if_not_string(self) -> None:
        """None is rejected."""
        with pytest.raises(InputInvalidError, match="expected str"):
            workspace_testing_subfolder_name_for(None)

    def test_raises_if_empty(self) -> None:
        """The empty string is rejected."""
        with pytest.raises(InputInvalidError, match="non-empty"):
            workspace_testing_subfolder_name_for("")

    def test_returns_subfolder_name(self) -> None:
        """Names are prefixed and dots become hyphens."""
        assert workspace_testing_subfolder_name_for("os-alpha") == "test-os-alpha"
        assert workspace_testing_subfolder_name_for("os-bravo.charlie") == "test-os-bravo-charlie"
        assert workspace_testing_subfolder_name_for("a.b.c") == "test-a-b-c"


class TestWorkspaceTestingPath:
    """Tests for workspace_testing_path."""

    def test_joins_parts_under_root(self, tmp_path: Path) -> None:
        """The path is root / testing folder / subfolder / parts."""
        path = workspace_testing_path("os.filesystem", "alpha", "bravo.txt", root=tmp_path)

        assert path == tmp_path / WORKSPACE_TESTING_FOLDER_NAME / "test-os-filesystem" / "alpha" / "bravo.txt"

    def test_defaults_to_configured_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without root, DISKKIT_WORKSPACE_ROOT is used."""
        monkeypatch.setenv("DISKKIT_WORKSPACE_ROOT", str(tmp_path))

        path = workspace_testing_path("os-alpha")

        assert path == tmp_path / WORKSPACE_TESTING_FOLDER_NAME / "test-os-alpha"

    def test_rejects_invalid_namespace(self, tmp_path: Path) -> None:
        """The namespace follows the subfolder name rules."""
        with pytest.raises(InputInvalidError):
            workspace_testing_path("", root=tmp_path)
