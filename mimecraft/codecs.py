"""Composable byte codecs and helpers that run data through them."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]

_CR = 0x0D
_LF = 0x0A
_CRLF = b"\r\n"


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    return bytes(data)


class Codec(ABC):
    """Base class for stream codecs.

    A codec consumes bytes through :meth:`feed`, which returns whatever
    output is ready, and releases any buffered output on :meth:`flush`.
    Codecs can be joined into a pipeline with the ``|`` operator.
    """

    name = "Codec"
    #: Expected ratio between output and input size when encoding.
    code_size_multiplier = 1.0

    @abstractmethod
    def feed(self, data: BytesLike) -> bytes:
        """Process ``data`` and return the output produced so far."""

    def flush(self) -> bytes:
        """Return any output still held back; unbuffered codecs hold none."""
        return b""

    def __or__(self, other: "Codec") -> "CodecChain":
        if not isinstance(other, Codec):
            return NotImplemented
        return CodecChain(self, other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CodecChain(Codec):
    """A pipeline of codecs; the output of each feeds the next.

    Codecs are copied into the chain, so the originals keep their own state.
    """

    def __init__(self, *args: Codec) -> None:
        codecs: list[Codec] = []
        for item in args:
            if isinstance(item, CodecChain):
                codecs.extend(copy.deepcopy(c) for c in item.codecs)
            elif isinstance(item, Codec):
                codecs.append(copy.deepcopy(item))
            else:
                raise TypeError(f"not a codec: {item!r}")
        if not codecs:
            raise ValueError("a codec chain needs at least one codec")
        self.codecs: tuple[Codec, ...] = tuple(codecs)

    @property
    def name(self) -> str:  # type: ignore[override]
        return "|".join(c.name for c in self.codecs)

    def feed(self, data: BytesLike) -> bytes:
        out = _as_bytes(data)
        for codec in self.codecs:
            out = codec.feed(out)
        return out

    def flush(self) -> bytes:
        # Each codec's pending output goes through the rest of the chain
        # before the next codec is flushed.
        out = b""
        for codec in self.codecs:
            out = codec.feed(out) + codec.flush()
        return out

    def __or__(self, other: Codec) -> "CodecChain":
        if not isinstance(other, Codec):
            return NotImplemented
        return CodecChain(self, other)

    def __len__(self) -> int:
        return len(self.codecs)

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self.codecs)
        return f"CodecChain({inner})"


class NullCodec(Codec):
    """Copies input to output unchanged."""

    name = "NullCodec"

    def feed(self, data: BytesLike) -> bytes:
        return _as_bytes(data)


class ToUpperCase(Codec):
    """Converts ASCII letters to upper case."""

    name = "ToUpperCase"

    def feed(self, data: BytesLike) -> bytes:
        return _as_bytes(data).upper()


class ToLowerCase(Codec):
    """Converts ASCII letters to lower case."""

    name = "ToLowerCase"

    def feed(self, data: BytesLike) -> bytes:
        return _as_bytes(data).lower()


class Lf2CrLf(Codec):
    """Turns every LF not already preceded by CR into CRLF."""

    name = "Lf2CrLf"

    def __init__(self) -> None:
        self._prev = 0

    def feed(self, data: BytesLike) -> bytes:
        out = bytearray()
        for byte in _as_bytes(data):
            if byte == _LF and self._prev != _CR:
                out += _CRLF
            else:
                out.append(byte)
            self._prev = byte
        return bytes(out)


class MaxLineLen(Codec):
    """Inserts CRLF after every ``maxlen`` bytes; 0 disables the limit.

    Newlines already present in the input do not reset the count.
    """

    name = "MaxLineLen"

    def __init__(self, maxlen: int = 0) -> None:
        if maxlen < 0:
            raise ValueError("maxlen must not be negative")
        self.maxlen = maxlen
        self._written = 0

    def feed(self, data: BytesLike) -> bytes:
        raw = _as_bytes(data)
        if not self.maxlen:
            return raw
        out = bytearray()
        for byte in raw:
            if self._written == self.maxlen:
                out += _CRLF
                self._written = 0
            out.append(byte)
            self._written += 1
        return bytes(out)


def code(data: BytesLike, codec: Codec) -> bytes:
    """Run all of ``data`` through ``codec`` and flush it."""
    return codec.feed(data) + codec.flush()


def encode(data: BytesLike, codec: Codec) -> bytes:
    """Encode ``data`` with ``codec``."""
    return code(data, codec)


def decode(data: BytesLike, codec: Codec) -> bytes:
    """Decode ``data`` with ``codec``."""
    return code(data, codec)