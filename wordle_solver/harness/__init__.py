from .core import run_case, run_bench, summarize
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_bench", "summarize", "write_csv", "write_manifest"]
