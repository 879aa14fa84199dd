"""Bundled configuration files (``settings/defaults.yaml``)."""
