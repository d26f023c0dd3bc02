"""Text sanitizing and symbol segmentation."""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Union

from markovseed import config
from markovseed.errors import ModelIOError


logger = logging.getLogger(__name__)

# C0 and C1 control characters, minus tab, line feed and carriage return.
CONTROL_CHARS = re.compile('[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')


def sanitize(text: str) -> str:
    """Strip control characters, keeping tabs and line breaks."""
    return CONTROL_CHARS.sub('', text)


def split(text: str) -> List[str]:
    """Split text into symbols (one Unicode code point each)."""
    return list(text)


def join(symbols: Iterable[str]) -> str:
    """Reassemble symbols into text."""
    return ''.join(symbols)


def read_training_file(
    path: Union[str, Path],
    max_size: int = config.MAX_TRAINING_FILE_SIZE,
) -> str:
    """Read a UTF-8 training file.

    Args:
        path: File to read
        max_size: Largest accepted file size in bytes

    Raises:
        ModelIOError: if the file is missing, unreadable, empty, larger
            than ``max_size`` or not valid UTF-8
    """
    path = Path(path)
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise ModelIOError(f"failed to open training file: {path}") from exc

    if size == 0:
        raise ModelIOError(f"training file is empty: {path}")
    if size > max_size:
        raise ModelIOError(f"file too large: {size} bytes (limit {max_size})")

    logger.debug(f"Reading {size} bytes from {path}")
    try:
        with open(path, 'rb') as f:
            # Read one byte past the limit in case the file grew after stat().
            content = f.read(max_size + 1)
    except OSError as exc:
        raise ModelIOError(f"failed to read training file: {path}") from exc

    if len(content) > max_size:
        raise ModelIOError(f"file too large: more than {max_size} bytes")

    try:
        return content.decode('utf-8')
    except UnicodeDecodeError as exc:
        raise ModelIOError(f"training file is not valid UTF-8: {path}") from exc
