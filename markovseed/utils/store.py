"""JSON persistence for transition tables."""

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from markovseed.errors import CorruptModelError, ModelIOError
from markovseed.models.table import TransitionTable


logger = logging.getLogger(__name__)


def save_model(path: Union[str, Path], n: int, table: TransitionTable) -> Dict[str, Any]:
    """Write ``{"n", "model", "meta"}`` to ``path`` as UTF-8 JSON.

    Returns:
        The metadata block that was written
    """
    meta = {
        'timestamp': datetime.now(timezone.utc).isoformat(timespec='seconds'),
        'size': len(table),
    }
    payload = {'n': n, 'model': table.to_dict(), 'meta': meta}
    path = Path(path)
    # Write beside the target and swap it in, so a failed write keeps the old file.
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            'w', encoding='utf-8', dir=path.parent, prefix=f".{path.name}.",
            suffix='.tmp', delete=False,
        ) as f:
            tmp_name = f.name
            json.dump(payload, f, ensure_ascii=False, indent=2)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise ModelIOError(f"failed to write model file: {path}") from exc
    logger.debug(f"Wrote {meta['size']} n-grams to {path}")
    return meta


def load_model(path: Union[str, Path]) -> Tuple[int, TransitionTable, Dict[str, Any]]:
    """Read and check a model file written by ``save_model``.

    Key lengths and empty successor lists are not checked here; see
    ``markovseed.utils.stats.validate``.

    Returns:
        ``(n, table, meta)``; ``meta`` is empty when the file has none
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise CorruptModelError(f"failed to decode model file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise CorruptModelError(f"model file {path} is not valid UTF-8") from exc
    except OSError as exc:
        raise ModelIOError(f"failed to read model file: {path}") from exc

    return parse_payload(data)


def parse_payload(data: Any) -> Tuple[int, TransitionTable, Dict[str, Any]]:
    """Check decoded JSON field by field and build a table from it."""
    if not isinstance(data, dict):
        raise CorruptModelError("model file must contain a JSON object")
    if 'n' not in data or 'model' not in data:
        raise CorruptModelError("model file is missing 'n' or 'model'")

    n = data['n']
    # bool is an int subclass; true/false is not a valid order.
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise CorruptModelError(f"'n' must be a positive integer, got {n!r}")

    entries = data['model']
    if not isinstance(entries, dict):
        raise CorruptModelError("'model' must be a JSON object")
    for key, successors in entries.items():
        if not isinstance(successors, list):
            raise CorruptModelError(f"successors of {key!r} must be a list")
        for symbol in successors:
            if not isinstance(symbol, str):
                raise CorruptModelError(
                    f"successor {symbol!r} of {key!r} must be a string"
                )

    meta = data.get('meta', {})
    if not isinstance(meta, dict):
        raise CorruptModelError("'meta' must be a JSON object")

    return n, TransitionTable(entries), meta
