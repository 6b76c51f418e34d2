"""Pygame viewer for the gridsnake server."""
