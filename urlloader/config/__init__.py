"""Configuration module for loading and accessing fetch settings."""

from urlloader.exceptions import ConfigurationError

from .loader import Config, config

__all__ = ["Config", "ConfigurationError", "config"]
