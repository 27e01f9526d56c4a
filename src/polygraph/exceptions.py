"""Custom exceptions for polygraph."""


class GraphError(Exception):
    """Base exception for graph operations."""


class ForeignVertexError(GraphError, IndexError):
    """Raised when a backend is handed a vertex it did not issue."""


class VertexPayloadError(GraphError, TypeError):
    """Raised when a vertex payload cannot be stored by a backend."""
