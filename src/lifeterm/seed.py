"""JSON seed documents.

A seed is a single object whose ``cells`` field lists ``[row, col]`` pairs,
each an unsigned 16-bit integer::

    {"cells": [[1, 2], [2, 3], [3, 1], [3, 2], [3, 3]]}
"""

import json
import logging
from pathlib import Path
from typing import List, Tuple, Union

from .core.engine import SeedError

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = "default.json"

MAX_COORDINATE = 0xFFFF


def parse_seed(text: str) -> List[Tuple[int, int]]:
    """Parse a seed document.

    Args:
        text: JSON text of the seed document

    Returns:
        Seed coordinates in document order

    Raises:
        SeedError: If the document is not valid JSON or does not match the schema
    """
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise SeedError(f"Invalid JSON in seed: {e}") from e

    if not isinstance(document, dict) or "cells" not in document:
        raise SeedError("Seed must be an object with a 'cells' field")

    cells = document["cells"]
    if not isinstance(cells, list):
        raise SeedError("Seed 'cells' must be a list of [row, col] pairs")

    coords = []
    for i, entry in enumerate(cells):
        if not isinstance(entry, list) or len(entry) != 2:
            raise SeedError(f"Seed cell #{i} must be a [row, col] pair, got {entry!r}")
        for value in entry:
            # bool is an int subclass; JSON true/false are not coordinates
            if isinstance(value, bool) or not isinstance(value, int):
                raise SeedError(f"Seed cell #{i} has non-integer coordinate {value!r}")
            if not 0 <= value <= MAX_COORDINATE:
                raise SeedError(f"Seed cell #{i} coordinate {value} outside 0..{MAX_COORDINATE}")
        coords.append((entry[0], entry[1]))

    return coords


def load_seed(path: Union[str, Path] = DEFAULT_SEED_FILE) -> List[Tuple[int, int]]:
    """Read and parse a seed file.

    Raises:
        SeedError: If the file cannot be read or is malformed
    """
    seed_path = Path(path)
    try:
        text = seed_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SeedError(f"Cannot read seed file {seed_path}: {e}") from e

    coords = parse_seed(text)
    logger.info("Loaded %d seed cells from %s", len(coords), seed_path)
    return coords
