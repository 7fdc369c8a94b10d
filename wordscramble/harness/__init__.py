from .core import replay, summarize
from .io import write_csv, write_manifest

__all__ = ["replay", "summarize", "write_csv", "write_manifest"]
