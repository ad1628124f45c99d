from .chunk import chunk
from .concat import concat, flat_map
from .enumerate import Enumerated, enumerate
from .zip import Pair, zip, zip_checked, zip_with

__all__ = (
    "Enumerated",
    "Pair",
    "chunk",
    "concat",
    "enumerate",
    "flat_map",
    "zip",
    "zip_checked",
    "zip_with",
)
