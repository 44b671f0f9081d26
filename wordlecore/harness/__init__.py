from .core import MAX_ROUNDS, play, run_case, run_batch, select_cases, summarize
from .io import write_csv, write_manifest

__all__ = ["MAX_ROUNDS", "play", "run_case", "run_batch", "select_cases", "summarize", "write_csv", "write_manifest"]
