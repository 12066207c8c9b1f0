import io

from mimecraft.streams import CountingSink, CrLfToLfSink, PassthroughSink


def _convert(*chunks):
    out = io.BytesIO()
    with CrLfToLfSink(out) as sink:
        for chunk in chunks:
            sink.write(chunk)
    return out.getvalue()


def test_counting_sink_counts_all_writes():
    sink = CountingSink()
    data = [b"abc", b"", b"defgh"]
    for chunk in data:
        sink.write(chunk)
    sink.flush()
    assert sink.size == sum(len(c) for c in data)


def test_counting_sink_write_returns_length():
    sink = CountingSink()
    assert sink.write(b"xyz") == 3


def test_passthrough_copies_and_counts():
    out = io.BytesIO()
    with PassthroughSink(out) as sink:
        sink.write(b"hello ")
        sink.write("world")
    assert out.getvalue() == b"hello world"
    assert sink.size == len(b"hello world")


def test_crlf_becomes_lf():
    assert _convert(b"a\r\nb\r\n") == b"a\nb\n"


def test_lone_cr_is_kept():
    assert _convert(b"a\rb") == b"a\rb"


def test_crlf_split_across_writes():
    assert _convert(b"a\r", b"\nb") == b"a\nb"


def test_trailing_cr_written_on_flush():
    out = io.BytesIO()
    sink = CrLfToLfSink(out)
    sink.write(b"end\r")
    assert out.getvalue() == b"end"
    sink.flush()
    assert out.getvalue() == b"end\r"


def test_double_cr_keeps_first_pair():
    assert _convert(b"\r\r\n") == b"\r\r\n"


def test_plain_lf_untouched():
    data = b"one\ntwo\n"
    assert _convert(data) == data