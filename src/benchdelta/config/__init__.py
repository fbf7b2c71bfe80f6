"""Configuration models."""

from .base import ReportConfig

__all__ = ["ReportConfig"]
