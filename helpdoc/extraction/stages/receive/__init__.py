from .source import SourceStage

__all__ = ["SourceStage"]
