from pathlib import Path

from .parser import PAGEMODEL_EXTENSION


def discover_pagemodel_files(root: Path, extension: str = PAGEMODEL_EXTENSION) -> list[Path]:
    files = [p for p in root.rglob(f"*{extension}") if p.is_file()]
    return sorted(set(files))
