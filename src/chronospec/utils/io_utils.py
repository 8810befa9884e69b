"""
Centralized file I/O utilities.

- Single place for encoding handling
- Use Path.read_text() consistently (no raw open/read)
"""

from pathlib import Path
from typing import List, Union

from .config import DEFAULT_FILE_ENCODING, SPEC_COMMENT_PREFIX


def read_spec_file(path: Union[Path, str]) -> str:
    """Read a specification file with standard encoding."""
    p = Path(path) if not isinstance(path, Path) else path
    return p.read_text(encoding=DEFAULT_FILE_ENCODING)


def read_spec_lines(path: Union[Path, str]) -> List[str]:
    """Read one specification per line, skipping blank lines and comments."""
    lines = []
    for line in read_spec_file(path).splitlines():
        line = line.strip()
        if not line or line.startswith(SPEC_COMMENT_PREFIX):
            continue
        lines.append(line)
    return lines
