import os
from pathlib import Path


def get_cache_directory() -> Path:
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        cache_dir = Path(xdg_cache) / "statusprobe"
    else:
        cache_dir = Path.home() / ".cache/statusprobe"

    if not os.path.exists(cache_dir):
        os.makedirs(cache_dir, mode=0o700, exist_ok=True)

    return cache_dir
