"""
Discovery of entity source files.
"""

from __future__ import annotations

import glob
import logging
from pathlib import Path

from .errors import NoInputFilesError

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "**/*.ts"


def discover_sources(input_path: str | Path, pattern: str = DEFAULT_PATTERN) -> list[Path]:
    """
    Expand an input directory, file or glob into source files.

    Args:
        input_path: A directory (searched with `pattern`), a file, or a glob expression
        pattern: Glob pattern used for directories

    Returns:
        Sorted list of matching files (declaration files excluded)

    Raises:
        NoInputFilesError: If nothing matches
    """
    path = Path(input_path)
    if path.is_file():
        files = [path]
    else:
        if path.is_dir():
            matches = path.glob(pattern)
        else:
            matches = (Path(p) for p in glob.glob(str(input_path), recursive=True))
        files = sorted({p for p in matches if p.is_file() and not p.name.endswith(".d.ts")})

    if not files:
        raise NoInputFilesError(f"No TypeScript source file matches {input_path}")

    logger.info(f"Found {len(files)} source file(s) in {input_path}")
    return files
