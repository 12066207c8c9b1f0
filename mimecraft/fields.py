"""Values of the MIME header fields: Content-Type, Content-Disposition and others."""

from __future__ import annotations

import itertools
import os
import random
import socket
import string
import time
from dataclasses import dataclass

from .tokenizer import StringTokenizer

_CRLF = "\r\n"


class _IString(str):
    """A string that compares and hashes case-insensitively."""

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.lower() == other.lower()
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self.lower())


@dataclass
class FieldParam:
    """A ``name=value`` parameter of a structured header field."""

    name: str
    value: str = ""

    def __post_init__(self) -> None:
        self.name = _IString(self.name)

    @classmethod
    def parse(cls, text: str) -> "FieldParam":
        """Parse ``name=value`` text; surrounding blanks and quotes are dropped."""
        name, _, value = text.partition("=")
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        return cls(name.strip(), value)

    def __str__(self) -> str:
        return f'{self.name}="{self.value}"'


def _find_param(params: list[FieldParam], name: str) -> FieldParam | None:
    return next((p for p in params if p.name == name), None)


def _set_param(params: list[FieldParam], name: str, value: str) -> None:
    existing = _find_param(params, name)
    if existing is not None:
        existing.value = value
    else:
        params.append(FieldParam(name, value))


def _params_text(params: list[FieldParam]) -> str:
    return "".join(f"; {p}" for p in params)


_BOUNDARY_CHARS = string.digits + string.ascii_lowercase + string.ascii_uppercase + "-_."
_boundary_counter = itertools.count(1)
_common_boundary = ""


def make_boundary() -> str:
    """Return a new multipart boundary string.

    All boundaries share a random prefix made once per process and end in
    a hexadecimal sequence number.
    """
    global _common_boundary
    if not _common_boundary:
        rng = random.SystemRandom()
        _common_boundary = "----" + "".join(rng.choice(_BOUNDARY_CHARS) for _ in range(48))
    return f"{_common_boundary}=_{next(_boundary_counter):x}_"


class ContentType:
    """Value of the Content-Type field: type, subtype and parameters."""

    label = "Content-Type"

    def __init__(self, value: str = "", subtype: str | None = None) -> None:
        self._type = _IString("")
        self._subtype = _IString("")
        self.params: list[FieldParam] = []
        if subtype is not None:
            self.type = value
            self.subtype = subtype
        elif value:
            self.set(value)

    @property
    def type(self) -> str:
        return self._type

    @type.setter
    def type(self, value: str) -> None:
        self._type = _IString(value)

    @property
    def subtype(self) -> str:
        return self._subtype

    @subtype.setter
    def subtype(self, value: str) -> None:
        self._subtype = _IString(value)

    def set(self, value: str) -> None:
        """Parse ``type/subtype; name=value; ...`` into this field."""
        tokens = StringTokenizer(value, ";")
        media = tokens.next()
        if media is None:
            return
        parts = StringTokenizer(media, "/")
        self.type = (parts.next() or "").strip()
        self.subtype = (parts.next() or "").strip()
        params = value[min(len(value), len(media) + 1):]
        for text in StringTokenizer(params, ";"):
            if text.strip():
                self.params.append(FieldParam.parse(text))

    def is_multipart(self) -> bool:
        return self.type == "multipart"

    def param(self, name: str) -> str:
        """Return the value of parameter ``name``, or "" if it is absent."""
        found = _find_param(self.params, name)
        return found.value if found is not None else ""

    def set_param(self, name: str, value: str) -> None:
        """Set parameter ``name``, replacing an existing one."""
        _set_param(self.params, name, value)

    def __str__(self) -> str:
        return f"{self.type}/{self.subtype}{_params_text(self.params)}"

    def __repr__(self) -> str:
        return f"ContentType({str(self)!r})"


class ContentDisposition:
    """Value of the Content-Disposition field: type and parameters."""

    label = "Content-Disposition"

    def __init__(self, value: str = "") -> None:
        self._type = _IString("")
        self.params: list[FieldParam] = []
        if value:
            self.set(value)

    @property
    def type(self) -> str:
        return self._type

    @type.setter
    def type(self, value: str) -> None:
        self._type = _IString(value)

    def set(self, value: str) -> None:
        """Parse ``type; name=value; ...`` into this field."""
        tokens = StringTokenizer(value, ";")
        kind = tokens.next()
        if kind is None:
            return
        self.type = kind.strip()
        for text in tokens:
            if text.strip():
                self.params.append(FieldParam.parse(text))

    def param(self, name: str) -> str:
        """Return the value of parameter ``name``, or "" if it is absent."""
        found = _find_param(self.params, name)
        return found.value if found is not None else ""

    def set_param(self, name: str, value: str) -> None:
        """Set parameter ``name``, replacing an existing one."""
        _set_param(self.params, name, value)

    def write(self, fold: bool = False) -> str:
        """Return the whole header line, CRLF terminated.

        With ``fold`` each parameter goes on its own tab-indented line.
        """
        separator = f";{_CRLF}\t" if fold else "; "
        params = "".join(f"{separator}{p}" for p in self.params)
        return f"{self.label}: {self.type}{params}{_CRLF}"

    def __str__(self) -> str:
        return f"{self.type}{_params_text(self.params)}"

    def __repr__(self) -> str:
        return f"ContentDisposition({str(self)!r})"


class ContentId:
    """Value of the Content-ID field.

    Without a value a unique id ``c<time>.<pid>.<seq>@<host>`` is made.
    """

    label = "Content-ID"
    _sequence = itertools.count(1)

    def __init__(self, value: str | None = None) -> None:
        if value is None:
            host = socket.gethostname() or "unknown"
            value = f"c{int(time.time())}.{os.getpid()}.{next(self._sequence)}@{host}"
        self.value = value

    def set(self, value: str) -> None:
        self.value = value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ContentId({self.value!r})"


class ContentTransferEncoding:
    """Value of the Content-Transfer-Encoding field."""

    label = "Content-Transfer-Encoding"
    BASE64 = "base64"
    QUOTED_PRINTABLE = "quoted-printable"
    BINARY = "binary"
    SEVENBIT = "7bit"
    EIGHTBIT = "8bit"

    def __init__(self, mechanism: str = "") -> None:
        self.mechanism = mechanism

    @property
    def mechanism(self) -> str:
        return self._mechanism

    @mechanism.setter
    def mechanism(self, value: str) -> None:
        self._mechanism = _IString(value)

    def set(self, value: str) -> None:
        self.mechanism = value

    def __str__(self) -> str:
        return str.__str__(self.mechanism)

    def __repr__(self) -> str:
        return f"ContentTransferEncoding({str(self)!r})"


class ContentDescription:
    """Value of the Content-Description field."""

    label = "Content-Description"

    def __init__(self, value: str = "") -> None:
        self.value = value

    def set(self, value: str) -> None:
        self.value = value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ContentDescription({self.value!r})"