"""Pygame rendering for the desktop front-end."""
