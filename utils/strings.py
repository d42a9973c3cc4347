"""String duplication helpers.

Python strings are immutable, so sharing one between callers is harmless in
practice.  Callers that need an *independent* object (for example code that
keys caches on identity) use :func:`duplicate_string`, which always returns a
fresh :class:`OwnedString`.  A plain ``str`` copy cannot give that guarantee:
CPython returns the same object for ``s[:]`` and interns the empty string and
single characters.
"""

from __future__ import annotations

import logging
from typing import Union

logger = logging.getLogger(__name__)

CharacterSequence = Union[str, bytes, bytearray, memoryview]


class OwnedString(str):
    """A ``str`` that is never shared with the value it was copied from."""

    __slots__ = ()


def duplicate_string(value: CharacterSequence, encoding: str = "utf-8") -> OwnedString:
    """Return an independent copy of *value*.

    Bytes-like views are decoded with *encoding*; the copy owns its own
    storage, so the source buffer may be released or mutated afterwards.
    ``UnicodeDecodeError`` and ``MemoryError`` propagate to the caller.
    """

    if isinstance(value, str):
        text = value
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        logger.debug("Decoding %d bytes as %s for duplication", len(raw), encoding)
        text = raw.decode(encoding)
    else:
        raise TypeError(
            f"duplicate_string expects str or a bytes-like object, got {type(value).__name__}"
        )

    return OwnedString(text)


__all__ = [
    "CharacterSequence",
    "OwnedString",
    "duplicate_string",
]
