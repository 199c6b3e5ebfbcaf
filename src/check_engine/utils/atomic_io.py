"""Atomic file replacement."""

import os
from pathlib import Path


def atomic_write_text(file_path: Path, content: str) -> None:
    """
    Replace a file's content so readers never see a partial write.

    The content goes to a hidden temp file in the target's directory, which
    is then renamed over the target. On failure the temp file is removed and
    the target keeps its previous content.

    Raises:
        OSError: If the temp file cannot be written or renamed
    """
    file_path = Path(file_path)
    tmp_file = file_path.with_name(f".{file_path.name}.tmp.{os.getpid()}")
    try:
        tmp_file.write_text(content)
        os.replace(tmp_file, file_path)
    except OSError:
        tmp_file.unlink(missing_ok=True)
        raise
