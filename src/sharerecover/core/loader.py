"""
Reading and writing share collections as JSON documents.
"""

import json
import logging
from pathlib import Path

from .shares import ShareSet
from ..errors import MalformedShareSet


logger = logging.getLogger(__name__)


def load_share_set(path: str | Path) -> ShareSet:
    """
    Load and decode a share collection from a JSON file.

    Raises:
        MalformedShareSet: If the file is not UTF-8 JSON or has the wrong shape
        OSError: If the file cannot be read
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except UnicodeDecodeError as e:
            raise MalformedShareSet(f"{path.name}: not valid UTF-8 ({e.reason})") from e
        except ValueError as e:
            # JSONDecodeError, or an integer literal past the digit limit
            raise MalformedShareSet(f"{path.name}: invalid JSON ({e})") from e

    share_set = ShareSet.from_dict(data)
    logger.info(
        "Loaded %d shares (n=%d, k=%d) from %s",
        len(share_set.shares),
        share_set.n,
        share_set.k,
        path,
    )
    return share_set


def dump_share_set(share_set: ShareSet, path: str | Path, base: int = 10) -> None:
    """Write a share collection as JSON with every value in the given base."""
    data = share_set.to_dict(base=base)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=4)
        f.write("\n")
