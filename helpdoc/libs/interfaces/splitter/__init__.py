from .splitter import Chunk, Param, ParsedSignature, Segmenter, SignatureParser

__all__ = ["Chunk", "Param", "ParsedSignature", "Segmenter", "SignatureParser"]
