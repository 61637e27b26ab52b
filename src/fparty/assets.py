"""Asset discovery for bundled templates and static files."""

from importlib.resources import files
from pathlib import Path


def get_static_dir() -> Path:
    """Return path to bundled static assets.

    Returns:
        Path to the static directory containing javascripts and stylesheets.

    Raises:
        FileNotFoundError: If static assets are not bundled.
    """
    return _bundled_dir("static")


def get_templates_dir() -> Path:
    """Return path to bundled page templates."""
    return _bundled_dir("templates")


def _bundled_dir(name: str) -> Path:
    resource = files("fparty").joinpath(name)
    if not resource.is_dir():
        msg = f"Bundled {name} directory not found. Reinstall the fparty package."
        raise FileNotFoundError(msg)
    return Path(str(resource))
