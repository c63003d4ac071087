from .memory import InMemorySource
from .runtime_doc import RUNTIME_ENV_VAR, RuntimeDocSource

__all__ = ["RuntimeDocSource", "InMemorySource", "RUNTIME_ENV_VAR"]
