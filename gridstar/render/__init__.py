"""Rendering helpers for gridstar."""
