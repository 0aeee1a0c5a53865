"""Copying an asset folder next to the program before it starts."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def copy_folder_contents(
    source: str | os.PathLike,
    target: str | os.PathLike,
    remove_source: bool = False,
    make_dirs: bool = False,
) -> list[Path]:
    """Copy every visible file under source into target, replacing what is there.

    The target folder itself is created if missing. Sub-folders are created
    only when make_dirs is set; files whose destination folder does not exist
    are skipped. With remove_source the source tree is deleted afterwards.
    Returns the destination paths of the copied files.
    """
    source = Path(source)
    target = Path(target)
    target.mkdir(exist_ok=True)

    copied: list[Path] = []
    for root, dirs, files in os.walk(source):
        root_path = Path(root)
        dirs[:] = sorted(d for d in dirs if not d.startswith("."))
        rel_root = root_path.relative_to(source)
        if _is_hidden(rel_root):
            continue
        if make_dirs:
            for name in dirs:
                (target / rel_root / name).mkdir(parents=True, exist_ok=True)
        for name in sorted(files):
            if name.startswith("."):
                continue
            destination = target / rel_root / name
            if not destination.parent.is_dir():
                continue
            if destination.exists() or destination.is_symlink():
                destination.unlink()
            shutil.copy2(root_path / name, destination)
            copied.append(destination)

    if remove_source:
        shutil.rmtree(source)
    return copied