"""Trace context, trace envelopes, and JSONL sink/reader."""
