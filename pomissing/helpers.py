from pathlib import Path
from typing import Optional


def read_text(path: Path) -> Optional[str]:
    return path.read_text(encoding="utf-8") if path.is_file() else None


def write_text(path: Path, text: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.write_text(text, encoding="utf-8")


def remove_file(path: Path):
    """
    Delete a file, returning whether there was one to delete
    """
    if not path.is_file():
        return False
    path.unlink()
    return True


def list_subdirectories(path: Path):
    return sorted(child for child in path.iterdir() if child.is_dir())
