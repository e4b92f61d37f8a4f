"""G.711 A-law (PCMA) and mu-law (PCMU) companding.

Linear samples are signed 16-bit. A-law keeps the 12 most significant bits
of the magnitude, mu-law the 14 most significant bits. Decoding goes through
256-entry tables built from the per-sample expanders.
"""

from __future__ import annotations

from collections.abc import Iterable


def alaw_compress(sample: int) -> int:
    """Encode one int16 sample as an A-law codeword."""
    ix = (~sample if sample < 0 else sample) >> 4
    if ix > 15:
        iexp = 1
        while ix > 16 + 15:
            ix >>= 1
            iexp += 1
        ix -= 16
        ix += iexp << 4
    if sample >= 0:
        ix |= 0x80
    return ix ^ 0x55


def alaw_expand(code: int) -> int:
    """Decode one A-law codeword to an int16 sample."""
    ix = (code ^ 0x55) & 0x7F
    iexp = ix >> 4
    mant = ix & 0x0F
    if iexp > 0:
        mant += 16
    mant = (mant << 4) + 0x08
    if iexp > 1:
        mant <<= iexp - 1
    return mant if code > 127 else -mant


def ulaw_compress(sample: int) -> int:
    """Encode one int16 sample as a mu-law codeword."""
    absno = ((~sample if sample < 0 else sample) >> 2) + 33
    if absno > 0x1FFF:
        absno = 0x1FFF
    i = absno >> 6
    segno = 1
    while i != 0:
        segno += 1
        i >>= 1
    high_nibble = 0x08 - segno
    low_nibble = 0x0F - ((absno >> segno) & 0x0F)
    code = (high_nibble << 4) | low_nibble
    if sample >= 0:
        code |= 0x80
    return code


def ulaw_expand(code: int) -> int:
    """Decode one mu-law codeword to an int16 sample."""
    sign = -1 if code < 0x80 else 1
    mantissa = ~code
    exponent = (mantissa >> 4) & 0x07
    step = 4 << (exponent + 1)
    mantissa &= 0x0F
    return sign * ((0x80 << exponent) + step * mantissa + step // 2 - 4 * 33)


_ALAW_TABLE = tuple(alaw_expand(c) for c in range(256))
_ULAW_TABLE = tuple(ulaw_expand(c) for c in range(256))


def alaw_decode(data: bytes) -> list[int]:
    table = _ALAW_TABLE
    return [table[b] for b in data]


def ulaw_decode(data: bytes) -> list[int]:
    table = _ULAW_TABLE
    return [table[b] for b in data]


def alaw_encode(samples: Iterable[int]) -> bytes:
    return bytes(alaw_compress(s) for s in samples)


def ulaw_encode(samples: Iterable[int]) -> bytes:
    return bytes(ulaw_compress(s) for s in samples)
