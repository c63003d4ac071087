"""Chunking stage (tag/chunk segmenter)."""

from .segmenter import SegmentStage

__all__ = ["SegmentStage"]
