"""Logging endpoint variants.

Each module covers one logging provider and exposes the same five
operations, named after the provider: ``list_<kind>_endpoints``,
``create_<kind>_endpoint``, ``get_<kind>_endpoint``,
``update_<kind>_endpoint`` and ``delete_<kind>_endpoint``.
"""
