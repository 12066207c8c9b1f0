"""Byte sinks that count, copy or rewrite what is written to them."""

from __future__ import annotations

from typing import Any, Protocol

from .codecs import BytesLike, _as_bytes

_CR = 0x0D
_LF = 0x0A


class _Writable(Protocol):
    def write(self, data: bytes) -> Any: ...


class _Sink:
    """Shared context-manager behaviour: leaving the block flushes."""

    def write(self, data: BytesLike) -> int:  # pragma: no cover - overridden
        raise NotImplementedError

    def flush(self) -> None:  # pragma: no cover - overridden
        raise NotImplementedError

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.flush()


def _flush_target(out: object) -> None:
    flush = getattr(out, "flush", None)
    if callable(flush):
        flush()


class CountingSink(_Sink):
    """Discards everything written to it and counts the bytes in ``size``."""

    def __init__(self) -> None:
        self.size = 0

    def write(self, data: BytesLike) -> int:
        count = len(_as_bytes(data))
        self.size += count
        return count

    def flush(self) -> None:
        """Nothing is buffered, so there is nothing to release."""
        return None


class PassthroughSink(_Sink):
    """Copies everything to ``out`` and counts the bytes in ``size``."""

    def __init__(self, out: _Writable) -> None:
        self.out = out
        self.size = 0

    def write(self, data: BytesLike) -> int:
        raw = _as_bytes(data)
        if raw:
            self.out.write(raw)
            self.size += len(raw)
        return len(raw)

    def flush(self) -> None:
        _flush_target(self.out)


class CrLfToLfSink(_Sink):
    """Writes to ``out`` with every CRLF pair turned into LF.

    A CR followed by anything other than LF is kept together with the byte
    after it; a CR left at the very end is written on :meth:`flush`.
    """

    def __init__(self, out: _Writable) -> None:
        self.out = out
        self._got_cr = False

    def write(self, data: BytesLike) -> int:
        raw = _as_bytes(data)
        result = bytearray()
        for byte in raw:
            if self._got_cr:
                self._got_cr = False
                if byte == _LF:
                    result.append(_LF)
                else:
                    result += bytes((_CR, byte))
            elif byte == _CR:
                self._got_cr = True
            else:
                result.append(byte)
        if result:
            self.out.write(bytes(result))
        return len(raw)

    def flush(self) -> None:
        if self._got_cr:
            self.out.write(bytes((_CR,)))
            self._got_cr = False
        _flush_target(self.out)