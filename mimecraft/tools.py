"""Command-line filters that Base64 or quoted-printable encode and decode."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from contextlib import ExitStack
from functools import partial
from typing import BinaryIO

from .base64 import Base64Decoder, Base64Encoder
from .codecs import Codec
from .qp import QPDecoder, QPEncoder

_CHUNK_SIZE = 64 * 1024


def run_codec(codec: Codec, source: BinaryIO, target: BinaryIO) -> int:
    """Stream ``source`` through ``codec`` into ``target``.

    Returns the number of bytes written.
    """
    written = 0
    for chunk in iter(partial(source.read, _CHUNK_SIZE), b""):
        out = codec.feed(chunk)
        if out:
            target.write(out)
            written += len(out)
    tail = codec.flush()
    if tail:
        target.write(tail)
        written += len(tail)
    return written


def _open(stack: ExitStack, path: str, mode: str) -> BinaryIO | None:
    try:
        return stack.enter_context(open(path, mode))
    except OSError:
        print(f"unable to open file {path}", file=sys.stderr)
        return None


def _filter_main(
    argv: Sequence[str] | None,
    program: str,
    encoder: Callable[[], Codec],
    decoder: Callable[[], Codec],
) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in ("-e", "-d"):
        print(f"{program} [-ed] [in_file [out_file]]")
        return 1
    codec = encoder() if args[0] == "-e" else decoder()
    with ExitStack() as stack:
        source: BinaryIO | None = sys.stdin.buffer
        target: BinaryIO | None = sys.stdout.buffer
        if len(args) > 1:
            source = _open(stack, args[1], "rb")
            if source is None:
                return -1
        if len(args) > 2:
            target = _open(stack, args[2], "wb")
            if target is None:
                return -1
        run_codec(codec, source, target)
        target.flush()
    return 0


def b64_main(argv: Sequence[str] | None = None) -> int:
    """Base64 encode (-e) or decode (-d) a file or standard input."""
    return _filter_main(argv, "b64", Base64Encoder, Base64Decoder)


def qp_main(argv: Sequence[str] | None = None) -> int:
    """Quoted-printable encode (-e) or decode (-d) a file or standard input."""
    return _filter_main(argv, "qp", QPEncoder, QPDecoder)