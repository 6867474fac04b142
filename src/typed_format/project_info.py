"""Project information utilities."""

from pathlib import Path
import tomllib

from pydantic import BaseModel

_UNAVAILABLE_DESCRIPTION = "Project description not available"
_UNAVAILABLE_VERSION = "Version not available"


class ProjectInfo(BaseModel):
    """Name, description and version of the installed project."""

    name: str = "typed-format"
    description: str
    version: str


def get_project_info() -> ProjectInfo:
    """Read project information from pyproject.toml.

    Returns:
        ProjectInfo with placeholder values when the file is absent or
        unreadable.

    """
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if not pyproject_path.exists():
        return ProjectInfo(
            description=_UNAVAILABLE_DESCRIPTION, version=_UNAVAILABLE_VERSION
        )

    try:
        with pyproject_path.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ProjectInfo(
            description=f"Error reading project info: {e}",
            version=_UNAVAILABLE_VERSION,
        )

    return ProjectInfo(
        name=project.get("name", "typed-format"),
        description=project.get("description", _UNAVAILABLE_DESCRIPTION),
        version=project.get("version", _UNAVAILABLE_VERSION),
    )
