from .core import run_sweep, run_width
from .io import write_csv, write_manifest

__all__ = ["run_sweep", "run_width", "write_csv", "write_manifest"]
