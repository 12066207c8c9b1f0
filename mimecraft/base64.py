"""Streaming Base64 encoder and decoder."""

from __future__ import annotations

from .codecs import BytesLike, Codec, _as_bytes

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/="
_PAD_INDEX = 64
_NL = 0x0A
# Value an '=' takes inside a decoded quantum; marks padding.
_EQ_SIGN = 100

_DECODE_TABLE: dict[int, int] = {byte: value for value, byte in enumerate(_ALPHABET[:64])}
_DECODE_TABLE[ord("=")] = _EQ_SIGN

DEFAULT_MAXLEN = 76


class Base64Encoder(Codec):
    """Base64 encoder that wraps output lines after ``maxlen`` characters.

    Each full line is followed by LF; ``maxlen`` of 0 disables wrapping.
    """

    name = "Base64"
    code_size_multiplier = 1.5

    def __init__(self, maxlen: int = DEFAULT_MAXLEN) -> None:
        if maxlen < 0:
            raise ValueError("maxlen must not be negative")
        self.maxlen = maxlen
        self._pending = bytearray()
        self._pos = 1

    def _write_group(self, group: bytes, out: bytearray) -> None:
        first = group[0]
        second = group[1] if len(group) > 1 else 0
        third = group[2] if len(group) > 2 else 0
        indexes = [
            first >> 2,
            ((first & 0x03) << 4) | (second >> 4),
            ((second & 0x0F) << 2) | (third >> 6),
            third & 0x3F,
        ]
        if len(group) < 3:
            indexes[3] = _PAD_INDEX
        if len(group) < 2:
            indexes[2] = _PAD_INDEX
        for index in indexes:
            out.append(_ALPHABET[index])
            if self.maxlen:
                self._pos += 1
                if self._pos > self.maxlen:
                    out.append(_NL)
                    self._pos = 1

    def feed(self, data: BytesLike) -> bytes:
        self._pending += _as_bytes(data)
        complete = len(self._pending) - len(self._pending) % 3
        out = bytearray()
        view = memoryview(self._pending)
        for start in range(0, complete, 3):
            self._write_group(bytes(view[start:start + 3]), out)
        view.release()
        del self._pending[:complete]
        return bytes(out)

    def flush(self) -> bytes:
        out = bytearray()
        if self._pending:
            self._write_group(bytes(self._pending), out)
            self._pending.clear()
        return bytes(out)

    def __repr__(self) -> str:
        return f"Base64Encoder(maxlen={self.maxlen})"


class Base64Decoder(Codec):
    """Base64 decoder that skips any byte outside the Base64 alphabet.

    A final group missing its padding is decoded as if padded; a lone
    trailing character is dropped.
    """

    name = "Base64"

    def __init__(self) -> None:
        self._quad: list[int] = []

    @staticmethod
    def _write_quad(quad: list[int], out: bytearray) -> None:
        c0, c1, c2, c3 = quad
        out.append(((c0 << 2) | ((c1 >> 4) & 0x03)) & 0xFF)
        if c2 == _EQ_SIGN:
            return
        out.append(((c1 << 4) | ((c2 >> 2) & 0x0F)) & 0xFF)
        if c3 == _EQ_SIGN:
            return
        out.append(((c2 << 6) | c3) & 0xFF)

    def feed(self, data: BytesLike) -> bytes:
        out = bytearray()
        for byte in _as_bytes(data):
            value = _DECODE_TABLE.get(byte)
            if value is None:
                continue
            self._quad.append(value)
            if len(self._quad) == 4:
                self._write_quad(self._quad, out)
                self._quad = []
        return bytes(out)

    def flush(self) -> bytes:
        out = bytearray()
        if len(self._quad) >= 2:
            padded = self._quad + [_EQ_SIGN] * (4 - len(self._quad))
            self._write_quad(padded, out)
        self._quad = []
        return bytes(out)