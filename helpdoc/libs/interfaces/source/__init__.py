from .source import DocumentNotFoundError, DocumentSource

__all__ = ["DocumentSource", "DocumentNotFoundError"]
