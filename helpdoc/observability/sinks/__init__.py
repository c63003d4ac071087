from .jsonl import JsonlSink, resolve_trace_path

__all__ = ["JsonlSink", "resolve_trace_path"]
