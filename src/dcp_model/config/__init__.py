"""Configuration module for the DCP container model."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
