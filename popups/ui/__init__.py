"""Concrete popups, widgets and UI settings."""
