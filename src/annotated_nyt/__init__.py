"""Null-safe views over parsed New York Times Annotated Corpus records."""

from .document_view import DocumentView
from .schemas.records import RawRecord

__all__ = ["DocumentView", "RawRecord"]

__version__ = "0.1.0"
