"""Schemas for records consumed by the annotated NYT view."""

from .records import RawRecord

__all__ = ["RawRecord"]
