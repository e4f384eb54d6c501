"""String helpers: blank checks, padding, substrings, random strings and case conversion."""

from __future__ import annotations

import base64
import random
import secrets
import string
from collections.abc import Iterable
from urllib.parse import urlsplit

_ALPHANUMERIC = string.ascii_lowercase + string.ascii_uppercase + string.digits


def is_blank(s: str) -> bool:
    """Return whether ``s`` is empty or whitespace only."""
    return not s.strip()


def is_not_blank(s: str) -> bool:
    """Return whether ``s`` holds something other than whitespace."""
    return not is_blank(s)


def is_empty(s: str) -> bool:
    """Return whether ``s`` is the empty string."""
    return len(s) == 0


def is_not_empty(s: str) -> bool:
    """Return whether ``s`` is not the empty string."""
    return not is_empty(s)


def is_equals_any(val: str, *args: str) -> bool:
    """Return whether ``val`` equals any of the given strings."""
    return val in args


def _has_control_chars(s: str) -> bool:
    return any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in s)


def is_valid_url(url_string: str) -> bool:
    """Return whether ``url_string`` is an absolute URL with both a scheme and a host."""
    if not url_string or _has_control_chars(url_string):
        return False
    try:
        parts = urlsplit(url_string)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    if not parts.scheme or not parts.netloc:
        return False
    if any(ch.isspace() for ch in parts.netloc):
        return False
    return bool(parts.hostname)


def default_if_nil(s: str, default: str) -> str:
    """Return ``s``, or ``default`` if ``s`` is empty."""
    return default if is_empty(s) else s


def default_if_blank(s: str, default: str) -> str:
    """Return ``s``, or ``default`` if ``s`` is empty or whitespace only."""
    return default if is_blank(s) else s


def substring(s: str, i: int, j: int) -> str:
    """Return the characters of ``s`` in ``range(i, j)``.

    A negative bound means "open" on that side; if both are negative, ``s``
    is returned unchanged.
    """
    length = len(s)
    if i >= length:
        return ""
    j = min(j, length)

    left_bounded = i >= 0
    right_bounded = j >= 0

    if left_bounded and right_bounded:
        return "" if j <= i else s[i:j]
    if left_bounded:
        return s[i:]
    if right_bounded:
        return s[:j]
    return s


def is_match_all_substrings(s: str, *args: str) -> bool:
    """Return whether every given substring occurs in ``s``."""
    return all(sub in s for sub in args)


def match_all_substrings_in_a_string(s: str, *args: str) -> tuple[bool, int]:
    """Return whether all substrings occur in ``s`` and how many of them do."""
    matches = sum(1 for sub in args if sub in s)
    return matches == len(args), matches


def contains(items: Iterable[str], s: str) -> bool:
    """Return whether ``s`` is one of ``items``."""
    return s in items


def _pad_count(pad_str: str, overall_len: int) -> int:
    if not pad_str:
        raise ValueError("pad string must not be empty")
    width = len(pad_str)
    diff = overall_len - width
    # Integer division truncating toward zero.
    quotient = diff // width if diff >= 0 else -((-diff) // width)
    count = 1 + quotient
    if count < 0:
        raise ValueError(f"cannot pad to length {overall_len}")
    return count


def left_pad_to_length(s: str, pad_str: str, overall_len: int) -> str:
    """Pad ``s`` on the left with ``pad_str`` to exactly ``overall_len`` characters.

    If ``s`` is longer than ``overall_len``, characters are cut from its left.
    """
    padded = pad_str * _pad_count(pad_str, overall_len) + s
    if overall_len < 0 or len(padded) < overall_len:
        raise ValueError(f"cannot pad to length {overall_len}")
    return padded[len(padded) - overall_len:]


def right_pad_to_length(s: str, pad_str: str, overall_len: int) -> str:
    """Pad ``s`` on the right with ``pad_str`` to exactly ``overall_len`` characters.

    If ``s`` is longer than ``overall_len``, characters are cut from its right.
    """
    padded = s + pad_str * _pad_count(pad_str, overall_len)
    if overall_len < 0 or len(padded) < overall_len:
        raise ValueError(f"cannot pad to length {overall_len}")
    return padded[:overall_len]


def alpha_numeric_random_string(length: int) -> str:
    """Return a non-cryptographic random string of ASCII letters and digits."""
    return "".join(random.choice(_ALPHANUMERIC) for _ in range(length))


def generate_random_bytes(n: int) -> bytes:
    """Return ``n`` securely generated random bytes."""
    if n < 0:
        raise ValueError("number of bytes must not be negative")
    return secrets.token_bytes(n)


def _raw_urlsafe_b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def generate_random_string(length: int, is_special_character: bool) -> str:
    """Return a URL-safe random string built from secure random bytes.

    With ``is_special_character`` the unpadded URL-safe base64 form of
    ``length`` random bytes is returned, keeping ``-`` and ``_``. Otherwise the
    result is exactly ``length`` characters with ``-`` and ``_`` removed.
    """
    first = generate_random_bytes(length)
    if is_special_character:
        return _raw_urlsafe_b64(first)

    result = ""
    while len(result) < length:
        size = length - len(result)
        encoded = _raw_urlsafe_b64(generate_random_bytes(size))
        cleaned = encoded.replace("_", "").replace("-", "")
        result += substring(cleaned, 0, size)
    return result


def remove_leading_zeros_from_slice(items: list[str]) -> list[str]:
    """Return the strings of ``items`` with their leading ``0`` characters removed."""
    return [item.lstrip("0") for item in items]


def to_snake_case(s: str) -> str:
    """Convert ``s`` to snake case; non-alphanumeric characters become ``_``."""
    out: list[str] = []
    prev = "_"
    for index, ch in enumerate(s):
        if not (ch.isalpha() or ch.isdecimal()):
            out.append("_")
        elif ch.isupper() and index > 0:
            if (prev.isalpha() and not prev.isupper()) or prev.isdecimal():
                out.append("_" + ch.lower())
            else:
                out.append(ch.lower())
        else:
            out.append(ch.lower())
        prev = ch
    return "".join(out)