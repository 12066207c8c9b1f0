"""Streaming quoted-printable encoder and decoder."""

from __future__ import annotations

from collections import deque
from enum import Enum, auto
from itertools import islice

from .codecs import BytesLike, Codec, _as_bytes

_TAB = 0x09
_LF = 0x0A
_CR = 0x0D
_SP = 0x20
_EQ = ord("=")
_DOT = ord(".")
_UPPER_F = ord("F")
_BLANKS = frozenset((_SP, _TAB))
_NEWLINES = frozenset((_CR, _LF))
_HEX_DIGITS = frozenset(b"0123456789ABCDEFabcdef")
_UNSAFE = frozenset(b'!"#$=@[\\]^`{|}~')

DEFAULT_MAXLEN = 76


class _Kind(Enum):
    PRINTABLE = auto()
    TAB = auto()
    SPACE = auto()
    NEWLINE = auto()
    BINARY = auto()
    UNSAFE = auto()


def _classify(byte: int) -> _Kind:
    if byte == _TAB:
        return _Kind.TAB
    if byte in _NEWLINES:
        return _Kind.NEWLINE
    if byte == _SP:
        return _Kind.SPACE
    if byte < 0x20 or byte >= 0x7F:
        return _Kind.BINARY
    if byte in _UNSAFE:
        return _Kind.UNSAFE
    return _Kind.PRINTABLE


_KINDS = tuple(_classify(byte) for byte in range(256))


class QPEncoder(Codec):
    """Quoted-printable encoder.

    In binary mode spaces, tabs and newlines are hex encoded too. Text mode
    switches to binary mode at the first byte that is not printable text.
    Output newlines are LF; lines never exceed ``maxlen`` characters.
    """

    name = "Quoted-Printable"
    code_size_multiplier = 1.5
    _LOOKAHEAD = 5

    def __init__(self, binary: bool = False) -> None:
        self.binary = binary
        self.maxlen = DEFAULT_MAXLEN
        self._pos = 1
        self._ahead: deque[int] = deque()

    def _hard_break(self, out: bytearray) -> None:
        out.append(_LF)
        self._pos = 1

    def _soft_break(self, out: bytearray) -> None:
        out.append(_EQ)
        self._hard_break(out)

    def _write(self, byte: int, out: bytearray) -> None:
        is_last = not self._ahead
        if not is_last and self._pos == self.maxlen:
            self._soft_break(out)
        out.append(byte)
        self._pos += 1

    def _write_hex(self, byte: int, out: bytearray) -> None:
        is_last = not self._ahead
        if self._pos + (1 if is_last else 2) >= self.maxlen:
            self._soft_break(out)
        out += b"=%02X" % byte
        self._pos += 3

    def _next_is_newline(self) -> bool:
        return bool(self._ahead) and _KINDS[self._ahead[0]] is _Kind.NEWLINE

    def _encode(self, byte: int, out: bytearray) -> None:
        kind = _KINDS[byte]
        ahead = self._ahead
        if kind is _Kind.PRINTABLE:
            if self._pos == 1:
                from_line = (
                    byte == _UPPER_F
                    and len(ahead) >= 4
                    and bytes(islice(ahead, 4)) == b"rom "
                )
                lone_dot = byte == _DOT and (not ahead or self._next_is_newline())
                if from_line or lone_dot:
                    self._write_hex(byte, out)
                    return
            self._write(byte, out)
        elif kind in (_Kind.TAB, _Kind.SPACE):
            if self.binary or not ahead or self._next_is_newline():
                self._write_hex(byte, out)
            else:
                self._write(byte, out)
        elif kind is _Kind.NEWLINE:
            if self.binary:
                self._write_hex(byte, out)
            else:
                partner = _LF if byte == _CR else _CR
                if ahead and ahead[0] == partner:
                    ahead.popleft()
                self._hard_break(out)
        elif kind is _Kind.BINARY:
            self.binary = True
            self._write_hex(byte, out)
        else:
            self._write_hex(byte, out)

    def feed(self, data: BytesLike) -> bytes:
        out = bytearray()
        for byte in _as_bytes(data):
            self._ahead.append(byte)
            if len(self._ahead) >= self._LOOKAHEAD:
                self._encode(self._ahead.popleft(), out)
        return bytes(out)

    def flush(self) -> bytes:
        out = bytearray()
        while self._ahead:
            self._encode(self._ahead.popleft(), out)
        return bytes(out)

    def __repr__(self) -> str:
        return f"QPEncoder(binary={self.binary})"


class _State(Enum):
    WAITING_CHAR = auto()
    AFTER_EQ = auto()
    WAITING_FIRST_HEX = auto()
    WAITING_SECOND_HEX = auto()
    BLANK = auto()
    NEWLINE = auto()


class QPDecoder(Codec):
    """Quoted-printable decoder.

    Soft line breaks are removed, CRLF, LFCR, CR and LF each become LF,
    control characters are dropped and malformed escapes are copied as is.
    """

    name = "Quoted-Printable"

    def __init__(self) -> None:
        self._state = _State.WAITING_CHAR
        self._prev = bytearray()
        self._nl = 0

    def _flush_prev(self, out: bytearray) -> None:
        out += self._prev
        self._prev.clear()

    def _decode(self, byte: int, out: bytearray) -> None:
        while True:
            state = self._state
            if state is _State.BLANK:
                if byte in _BLANKS:
                    self._prev.append(byte)
                elif byte in _NEWLINES:
                    self._prev.clear()
                    self._state = _State.WAITING_CHAR
                else:
                    self._flush_prev(out)
                    self._state = _State.WAITING_CHAR
                    continue
                return
            if state is _State.AFTER_EQ:
                if byte in _BLANKS:
                    self._prev.append(byte)
                elif byte in _NEWLINES:
                    self._state = _State.NEWLINE
                    continue
                else:
                    if len(self._prev) > 1:
                        self._flush_prev(out)
                        self._state = _State.WAITING_CHAR
                    else:
                        self._state = _State.WAITING_FIRST_HEX
                    continue
                return
            if state is _State.WAITING_FIRST_HEX:
                if byte not in _HEX_DIGITS:
                    self._flush_prev(out)
                    out.append(byte)
                    self._state = _State.WAITING_CHAR
                else:
                    self._prev.append(byte)
                    self._state = _State.WAITING_SECOND_HEX
                return
            if state is _State.WAITING_SECOND_HEX:
                if byte not in _HEX_DIGITS:
                    self._flush_prev(out)
                    out.append(byte)
                else:
                    out.append(int(bytes((self._prev[-1], byte)), 16))
                    self._prev.clear()
                self._state = _State.WAITING_CHAR
                return
            if state is _State.NEWLINE:
                if not self._nl:
                    self._nl = byte
                    return
                if not self._prev or self._prev[0] != _EQ:
                    out.append(_LF)
                self._prev.clear()
                self._state = _State.WAITING_CHAR
                paired = byte == (_LF if self._nl == _CR else _CR)
                self._nl = 0
                if paired:
                    return
                continue
            # WAITING_CHAR
            if byte in _BLANKS:
                self._state = _State.BLANK
                continue
            if byte in _NEWLINES:
                self._state = _State.NEWLINE
                continue
            if byte == _EQ:
                self._state = _State.AFTER_EQ
                self._prev.append(byte)
                return
            if byte >= 0x20:
                out.append(byte)
            return

    def feed(self, data: BytesLike) -> bytes:
        out = bytearray()
        for byte in _as_bytes(data):
            self._decode(byte, out)
        return bytes(out)

    def flush(self) -> bytes:
        out = bytearray()
        if self._prev:
            out.append(_EQ)
            if len(self._prev) > 1 and self._prev[1] != _SP:
                out.append(self._prev[1])
        elif self._nl:
            out.append(_LF)
        self._prev.clear()
        self._nl = 0
        self._state = _State.WAITING_CHAR
        return bytes(out)