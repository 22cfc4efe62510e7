"""Fastly API resources: services, versions and versioned configuration."""
