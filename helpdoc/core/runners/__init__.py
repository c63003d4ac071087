from .extract import ExtractRunner, ExtractState, build_extraction_pipeline, build_graph, make_builder

__all__ = ["ExtractRunner", "ExtractState", "build_extraction_pipeline", "build_graph", "make_builder"]
