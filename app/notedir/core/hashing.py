"""String fingerprinting for cache keys.

Provides a small, deterministic 32-bit hash used to derive stable
identifiers for notes and directories from their paths.
"""

import struct

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN_BIT = 0x80000000


def string_hash(text: str) -> int:
    """Compute a signed 32-bit fingerprint of a string.

    Each UTF-16 code unit is folded in as ``hash * 31 + unit`` and the
    accumulator wraps like two's-complement 32-bit arithmetic. Characters
    outside the Basic Multilingual Plane contribute both surrogate units.

    Args:
        text: String to hash. May be empty.

    Returns:
        Hash value in the range [-2**31, 2**31 - 1]. Empty input yields 0.

    Raises:
        TypeError: If text is not a string.
    """
    if not isinstance(text, str):
        msg = f"string_hash() expects str, got {type(text).__name__}"
        raise TypeError(msg)

    value = 0
    data = text.encode("utf-16-le", "surrogatepass")
    for (unit,) in struct.iter_unpack("<H", data):
        value = ((value << 5) - value + unit) & _UINT32_MASK

    if value & _INT32_SIGN_BIT:
        return value - (1 << 32)
    return value
