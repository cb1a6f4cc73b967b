"""Common - Shared functionality for fencat: logging and configuration."""

from . import base

__all__ = ["base"]
