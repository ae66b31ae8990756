"""Core application services: XDG paths and user settings."""
