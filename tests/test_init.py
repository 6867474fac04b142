"""Tests for the typed_format package and project information."""

from pathlib import Path
import tomllib
from unittest.mock import Mock
from unittest.mock import patch

import pytest

import typed_format
from typed_format import ProjectInfo
from typed_format import get_project_info
from typed_format.__main__ import DEMONSTRATIONS
from typed_format.__main__ import main


def test_get_project_info_success() -> None:
    """Test get_project_info returns the values from pyproject.toml."""
    info = get_project_info()

    assert isinstance(info, ProjectInfo)

    project_root_path = Path(__file__).parent.parent
    with (project_root_path / "pyproject.toml").open("rb") as f:
        project = tomllib.load(f)["project"]
    assert info.name == project["name"]
    assert info.version == project["version"]
    assert info.description == project["description"]


def test_version_attribute() -> None:
    """Test the package exposes its version."""
    assert typed_format.__version__ == get_project_info().version


def test_get_project_info_missing_file() -> None:
    """Test get_project_info when pyproject.toml doesn't exist."""
    with patch("typed_format.project_info.Path") as mock_path:
        mock_current_file = mock_path.return_value
        mock_pyproject_path = (
            mock_current_file.parent.parent.parent.__truediv__.return_value
        )
        mock_pyproject_path.exists.return_value = False

        info = get_project_info()

        assert info.description == "Project description not available"
        assert info.version == "Version not available"


def test_get_project_info_unreadable() -> None:
    """Test get_project_info when pyproject.toml cannot be read."""
    with patch("typed_format.project_info.Path") as mock_path:
        mock_current_file = mock_path.return_value
        mock_pyproject_path = Mock()
        mock_pyproject_path.exists.return_value = True
        mock_pyproject_path.open.side_effect = OSError("Permission denied")
        mock_current_file.parent.parent.parent.__truediv__.return_value = (
            mock_pyproject_path
        )

        info = get_project_info()

        assert info.description == "Error reading project info: Permission denied"
        assert info.version == "Version not available"


def test_public_api() -> None:
    """Test every name in __all__ is importable from the package."""
    for name in typed_format.__all__:
        assert hasattr(typed_format, name)


def test_main_runs_demonstrations(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the module entry point prints every demonstration."""
    main()

    output = capsys.readouterr().out
    assert output.startswith("typed-format v")
    assert f"{len(DEMONSTRATIONS)}. Selectors." in output
    assert "  Hello World" in output
    assert "  [1, 2, 3, 4, 5], {1: 1.5, 2: 3.0, 3: 4.5}" in output
    assert "  1.5, 3.0, 5, 2" in output
