"""Body of a MIME entity: raw content, preamble, epilogue and child parts."""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

from .codecs import BytesLike, Codec, _as_bytes, encode


class Body:
    """Content of a MIME entity.

    ``content`` holds the body bytes; ``parts`` holds the child entities of a
    multipart body, and ``preamble`` and ``epilogue`` the text around them.
    ``owner`` is the entity the body belongs to, if any.
    """

    def __init__(self, content: BytesLike = b"") -> None:
        self.content: bytes = _as_bytes(content)
        self.preamble = ""
        self.epilogue = ""
        self.parts: list[Any] = []
        self.owner: Any = None

    def set(self, content: BytesLike) -> None:
        """Replace the body content."""
        self.content = _as_bytes(content)

    def load(self, path: str | os.PathLike[str], codec: Codec | None = None) -> None:
        """Replace the content with the file at ``path``.

        Without a codec the file is taken as it is; otherwise it is run
        through a copy of ``codec``. Raises OSError if the file cannot be read.
        """
        data = Path(path).read_bytes()
        if codec is None:
            self.content = data
        else:
            self.content = encode(data, copy.deepcopy(codec))

    def code(self, codec: Codec) -> None:
        """Encode or decode the content in place with a copy of ``codec``."""
        self.content = encode(self.content, copy.deepcopy(codec))

    def __bytes__(self) -> bytes:
        return self.content

    def __len__(self) -> int:
        return len(self.content)

    def __repr__(self) -> str:
        return f"Body({len(self.content)} bytes, {len(self.parts)} parts)"