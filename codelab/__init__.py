"""Basics Codelab package."""
