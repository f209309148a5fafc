"""Resource path resolution for bundled data and configuration.

Reference catalogs and default settings ship inside the package, so paths are
resolved relative to the installed ``aerolens`` directory, or relative to the
PyInstaller extraction directory when running from a frozen bundle.

Typical usage:
    from aerolens.core.resource_path import get_config_path, get_data_path

    settings = get_config_path("settings.yaml")
    airports_csv = get_data_path("airports.csv")
"""

import sys
from pathlib import Path
from typing import Optional


def is_bundled() -> bool:
    """Check if running from a PyInstaller bundle.

    Returns:
        True if running from PyInstaller bundle, False otherwise.
    """
    return hasattr(sys, "_MEIPASS")


def get_package_root() -> Path:
    """Get the directory holding the ``aerolens`` package resources.

    Returns:
        Path to the package directory:
        - When installed or run from source: src/aerolens
        - When bundled: <bundle>/aerolens

    Examples:
        >>> get_package_root()
        PosixPath('/home/user/dev/aerolens/src/aerolens')
    """
    bundle_dir: Optional[str] = getattr(sys, "_MEIPASS", None)
    if bundle_dir is not None:
        return Path(bundle_dir) / "aerolens"
    # src/aerolens/core -> src/aerolens
    return Path(__file__).resolve().parent.parent


def get_resource_path(relative_path: str) -> Path:
    """Get absolute path to a resource file or directory.

    Args:
        relative_path: Path relative to the package root (e.g. "data/airports.csv")

    Returns:
        Absolute path to the resource.
    """
    return get_package_root() / relative_path


def get_config_path(config_file: str) -> Path:
    """Get path to a bundled configuration file.

    Examples:
        >>> get_config_path("logging.yaml").name
        'logging.yaml'
    """
    return get_resource_path(f"config/{config_file}")


def get_data_path(data_file: str = "") -> Path:
    """Get path to a bundled reference data file, or the data directory itself.

    Examples:
        >>> get_data_path("airlines.yaml").name
        'airlines.yaml'
    """
    if not data_file:
        return get_resource_path("data")
    return get_resource_path(f"data/{data_file}")
