"""Flet application: state, views and entry point."""
