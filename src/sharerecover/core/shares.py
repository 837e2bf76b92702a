"""
Decoding of the external share collection.

The external shape is a JSON-style mapping:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

"keys" carries the threshold k and, optionally, the total share count n
(informational; it defaults to the number of shares present). Every
other key is a decimal x-coordinate whose record describes how to decode y.
The mapping is converted into a ShareSet at the boundary; the rest of the
package only sees Share values.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..arith.digits import parse_base, parse_digits, to_digits
from ..arith.lagrange import Share, check_distinct_x
from ..errors import MalformedShareSet


logger = logging.getLogger(__name__)

# Reserved entry holding n and k
KEYS_ENTRY = "keys"


def _parse_count(
    keys: Mapping[str, Any], name: str, default: Optional[int] = None
) -> int:
    """Read n or k from the keys entry; accepts ints and decimal strings."""
    if name not in keys:
        if default is not None:
            return default
        raise MalformedShareSet(f"Missing '{name}' in '{KEYS_ENTRY}' entry")

    raw = keys[name]
    if isinstance(raw, bool):
        raise MalformedShareSet(f"'{name}' must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        return parse_digits(raw, 10)

    raise MalformedShareSet(f"'{name}' must be an integer, got {raw!r}")


def _parse_x(key: str) -> int:
    text = key.strip()
    if not (text.isascii() and text.isdigit()):
        raise MalformedShareSet(
            f"Share key must be a non-negative decimal integer, got {key!r}"
        )
    return parse_digits(text, 10)


def decode_share(key: str, record: Any) -> Share:
    """
    Decode one {"base", "value"} record into a Share.

    Raises:
        MalformedShareSet: If the key or record shape is wrong
        InvalidBase, InvalidDigit, DigitOutOfRange: From digit parsing
    """
    x = _parse_x(key)

    if not isinstance(record, Mapping):
        raise MalformedShareSet(f"Share {key!r} must be an object, got {record!r}")
    for field_name in ("base", "value"):
        if field_name not in record:
            raise MalformedShareSet(f"Share {key!r} is missing '{field_name}'")

    value = record["value"]
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        raise MalformedShareSet(
            f"Share {key!r} value must be a string, got {value!r}"
        )

    base = parse_base(record["base"])
    return Share(x=x, y=parse_digits(value, base))


@dataclass(frozen=True)
class ShareSet:
    """
    A decoded share collection.

    Attributes:
        n: Declared total share count (informational)
        k: Threshold, the number of shares needed for recovery
        shares: Decoded shares, sorted ascending by x
    """

    n: int
    k: int
    shares: tuple[Share, ...]

    def __post_init__(self):
        if self.k < 1:
            raise MalformedShareSet(f"Threshold k must be at least 1, got {self.k}")

    @property
    def x_values(self) -> list[int]:
        return [s.x for s in self.shares]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShareSet":
        """
        Decode the external mapping.

        Share order in the input is irrelevant; the result is sorted by x.

        Raises:
            MalformedShareSet: If the mapping shape is wrong
            DuplicateXCoordinate: If two keys denote the same x (e.g. "1", "01")
            InvalidBase, InvalidDigit, DigitOutOfRange: From digit parsing
        """
        if not isinstance(data, Mapping):
            raise MalformedShareSet(
                f"Share collection must be an object, got {type(data).__name__}"
            )

        keys = data.get(KEYS_ENTRY)
        if not isinstance(keys, Mapping):
            raise MalformedShareSet(f"Missing or invalid '{KEYS_ENTRY}' entry")

        k = _parse_count(keys, "k")

        shares = [
            decode_share(key, record)
            for key, record in data.items()
            if key != KEYS_ENTRY
        ]
        shares.sort(key=lambda s: s.x)
        check_distinct_x(shares)

        n = _parse_count(keys, "n", default=len(shares))

        if n != len(shares):
            logger.warning("Declared n=%d but %d shares present", n, len(shares))

        return cls(n=n, k=k, shares=tuple(shares))

    def to_dict(self, base: int = 10) -> dict[str, Any]:
        """
        Render back to the external shape with every value in one base.

        Raises:
            InvalidBase: If base is out of range
            ValueError: If a share value is negative
        """
        result: dict[str, Any] = {KEYS_ENTRY: {"n": self.n, "k": self.k}}
        for share in self.shares:
            result[to_digits(share.x, 10)] = {
                "base": str(base),
                "value": to_digits(share.y, base),
            }
        return result
