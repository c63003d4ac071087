from .signature import FUNCTION_PATTERN, SIGNATURE_PATTERN, BraceSignatureParser, parse_signature
from .tag_segmenter import DEFAULT_CONTINUATION, TagChunkSegmenter, chunk_hash
from .tags import TAG_DELIMITER, strip_tags

__all__ = [
    "TagChunkSegmenter",
    "DEFAULT_CONTINUATION",
    "chunk_hash",
    "strip_tags",
    "TAG_DELIMITER",
    "BraceSignatureParser",
    "parse_signature",
    "FUNCTION_PATTERN",
    "SIGNATURE_PATTERN",
]
