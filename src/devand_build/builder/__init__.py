"""Configuration builder - turns a mode selector into a resolved configuration."""

from .builder import ConfigurationBuilder, build_configuration, create_builder

__all__ = ["ConfigurationBuilder", "build_configuration", "create_builder"]
