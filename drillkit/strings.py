"""String exercises on text and NUL-terminated byte buffers."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: BytesLike | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def c_strlen(data: BytesLike | str) -> int:
    """Length up to, not including, the first NUL; the whole length if there is none."""
    if isinstance(data, str):
        end = data.find("\0")
        return len(data) if end == -1 else end
    raw = bytes(data)
    end = raw.find(b"\0")
    return len(raw) if end == -1 else end


def copy_into(buffer: bytearray | memoryview, text: BytesLike | str) -> bytearray | memoryview:
    """Copy text and a terminating NUL to the start of buffer and return buffer.

    Copying stops at the first NUL in text. A buffer too small for the text
    and its terminator raises ValueError instead of being overrun.
    """
    payload = _as_bytes(text)
    payload = payload[: c_strlen(payload)]
    needed = len(payload) + 1
    if needed > len(buffer):
        raise ValueError(
            f"buffer of {len(buffer)} bytes cannot hold {needed} bytes including the terminator"
        )
    buffer[:needed] = payload + b"\0"
    return buffer


def reverse_string(text: str | bytes) -> str | bytes:
    """Return text with its characters in reverse order."""
    return text[::-1]


def increment_bytes(data: BytesLike | str) -> bytes:
    """Add one to every byte, wrapping 0xFF round to 0x00."""
    return bytes((byte + 1) & 0xFF for byte in _as_bytes(data))


def has_duplicate_chars(text: str | bytes) -> bool:
    """Tell whether any character occurs more than once in text."""
    seen = set()
    for char in text:
        if char in seen:
            return True
        seen.add(char)
    return False


def longest_unique_substring_length(text: str | bytes) -> int:
    """Length of the longest run of text in which no character repeats."""
    last_seen: dict = {}
    start = best = 0
    for end, char in enumerate(text):
        previous = last_seen.get(char, -1)
        if previous >= start:
            start = previous + 1
        last_seen[char] = end
        best = max(best, end - start + 1)
    return best


def find_pattern(text: str | bytes, pattern: str | bytes) -> int:
    """Index of the first occurrence of pattern in text, or -1 when it is absent."""
    return text.find(pattern)