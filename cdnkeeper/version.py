"""Access the package version string."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["get_version"]


def get_version() -> str:
    """Get the package version.

    Returns
    -------
    version : `str`
        Semantic version string, matching the installed distribution's
        version.
    """
    try:
        return version("cdnkeeper")
    except PackageNotFoundError:
        # Package is not installed
        return "0.0.0"
