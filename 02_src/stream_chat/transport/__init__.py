"""Transport module."""

from .http_transport import HttpTransport, ITransport, escape_path_segment, join_path

__all__ = ["HttpTransport", "ITransport", "escape_path_segment", "join_path"]
