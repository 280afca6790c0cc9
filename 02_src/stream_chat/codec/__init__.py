"""Extensible record codec."""

from .record import ExtensibleRecord, Timestamp, decode, encode, load_document

__all__ = ["ExtensibleRecord", "Timestamp", "decode", "encode", "load_document"]
