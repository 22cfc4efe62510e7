"""Client library for the Fastly CDN configuration API."""

from cdnkeeper.client import Client
from cdnkeeper.version import get_version

__all__ = ["Client", "__version__"]

__version__ = get_version()
