"""Presentation layer: user-facing API."""
