import pytest

from mimecraft.codecs import (
    Codec,
    CodecChain,
    Lf2CrLf,
    MaxLineLen,
    NullCodec,
    ToLowerCase,
    ToUpperCase,
    decode,
    encode,
)


class Reverser(Codec):
    """Buffers everything and emits it reversed on flush."""

    name = "Reverser"

    def __init__(self):
        self._buf = bytearray()

    def feed(self, data):
        self._buf += bytes(data)
        return b""

    def flush(self):
        out = bytes(reversed(self._buf))
        self._buf.clear()
        return out


SAMPLE = b"Hello, World!\nSecond line\n\nend"


def test_null_codec_copies_input():
    assert encode(SAMPLE, NullCodec()) == SAMPLE


def test_null_codec_accepts_str():
    assert encode("abc", NullCodec()) == b"abc"


def test_upper_case_is_ascii_only():
    data = SAMPLE + bytes([0xE9, 0xFF])
    result = encode(data, ToUpperCase())
    assert result.lower() == data.lower()
    assert not any(0x61 <= b <= 0x7A for b in result)
    assert result[-2:] == bytes([0xE9, 0xFF])


def test_lower_case_has_no_upper_letters():
    result = encode(SAMPLE, ToLowerCase())
    assert len(result) == len(SAMPLE)
    assert not any(0x41 <= b <= 0x5A for b in result)
    assert result.upper() == SAMPLE.upper()


def test_lf2crlf_pinned():
    assert encode(b"a\nb\r\nc", Lf2CrLf()) == b"a\r\nb\r\nc"


def test_lf2crlf_no_bare_lf_and_reversible():
    result = encode(SAMPLE, Lf2CrLf())
    assert result.replace(b"\r\n", b"\n") == SAMPLE
    assert result.count(b"\n") == result.count(b"\r\n")


def test_lf2crlf_remembers_cr_across_feeds():
    codec = Lf2CrLf()
    out = codec.feed(b"x\r") + codec.feed(b"\ny") + codec.flush()
    assert out == b"x\r\ny"


def test_max_line_len_pinned():
    assert encode(b"abcdefg", MaxLineLen(3)) == b"abc\r\ndef\r\ng"


@pytest.mark.parametrize("limit", [1, 2, 5, 10])
def test_max_line_len_segments_bounded(limit):
    data = b"x" * 23
    result = encode(data, MaxLineLen(limit))
    segments = result.split(b"\r\n")
    assert b"".join(segments) == data
    assert all(0 < len(s) <= limit for s in segments)


def test_max_line_len_zero_disables():
    data = b"y" * 200
    assert encode(data, MaxLineLen(0)) == data


def test_max_line_len_rejects_negative():
    with pytest.raises(ValueError):
        MaxLineLen(-1)


def test_streaming_matches_one_shot():
    whole = encode(SAMPLE, MaxLineLen(4) | Lf2CrLf())
    chain = MaxLineLen(4) | Lf2CrLf()
    parts = [chain.feed(SAMPLE[i:i + 3]) for i in range(0, len(SAMPLE), 3)]
    assert b"".join(parts) + chain.flush() == whole


def test_chain_equals_sequential_application():
    data = SAMPLE
    chained = encode(data, ToLowerCase() | Lf2CrLf())
    sequential = encode(encode(data, ToLowerCase()), Lf2CrLf())
    assert chained == sequential


def test_chain_name_and_flattening():
    chain = ToUpperCase() | Lf2CrLf() | NullCodec()
    assert isinstance(chain, CodecChain)
    assert len(chain) == 3
    assert chain.name == "ToUpperCase|Lf2CrLf|NullCodec"


def test_chain_flush_passes_through_later_codecs():
    chain = Reverser() | ToUpperCase()
    assert chain.feed(b"abc") == b""
    assert chain.flush() == b"CBA"


def test_chain_copies_codecs():
    original = Lf2CrLf()
    chain = original | NullCodec()
    chain.feed(b"\r")
    # the original never saw the CR, so a lone LF still expands
    assert original.feed(b"\n") == b"\r\n"


def test_or_with_non_codec_raises():
    with pytest.raises(TypeError):
        ToUpperCase() | "nope"


def test_chain_requires_codecs():
    with pytest.raises(ValueError):
        CodecChain()
    with pytest.raises(TypeError):
        CodecChain(NullCodec(), 5)


def test_encode_and_decode_agree():
    assert encode(SAMPLE, ToUpperCase()) == decode(SAMPLE, ToUpperCase())
    assert encode(SAMPLE, ToUpperCase()) == SAMPLE.upper()
    assert decode(SAMPLE, Reverser()) == SAMPLE[::-1]


def test_codec_is_abstract():
    with pytest.raises(TypeError):
        Codec()