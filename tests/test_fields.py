from mimecraft.fields import (
    ContentDescription,
    ContentDisposition,
    ContentId,
    ContentTransferEncoding,
    ContentType,
    FieldParam,
    make_boundary,
)


def test_field_param_parse_strips_quotes_and_blanks():
    param = FieldParam.parse(' name = "a b" ')
    assert param.name == "name"
    assert param.value == "a b"


def test_field_param_name_case_insensitive():
    assert FieldParam.parse("Charset=x").name == "CHARSET"


def test_content_type_parse():
    ct = ContentType("text/plain; charset=us-ascii")
    assert ct.type == "text"
    assert ct.subtype == "plain"
    assert ct.type == "TEXT"
    assert ct.param("CHARSET") == "us-ascii"
    assert ct.param("missing") == ""


def test_content_type_two_arguments():
    ct = ContentType("image", "png")
    assert ct.type == "image"
    assert ct.subtype == "png"
    assert ct.params == []


def test_content_type_str_round_trip():
    ct = ContentType('multipart/mixed; boundary="xyz"; charset=utf-8')
    again = ContentType(str(ct))
    assert again.type == ct.type
    assert again.subtype == ct.subtype
    assert [(p.name, p.value) for p in again.params] == [(p.name, p.value) for p in ct.params]


def test_content_type_is_multipart():
    assert ContentType("Multipart/alternative").is_multipart()
    assert not ContentType("text/html").is_multipart()


def test_content_type_set_param_replaces_and_appends():
    ct = ContentType("text/plain; charset=a")
    ct.set_param("charset", "b")
    ct.set_param("format", "flowed")
    assert ct.param("charset") == "b"
    assert ct.param("format") == "flowed"
    assert len(ct.params) == 2


def test_content_type_empty_value():
    ct = ContentType()
    assert ct.type == ""
    assert ct.subtype == ""


def test_make_boundary_shares_prefix_and_differs():
    first = make_boundary()
    second = make_boundary()
    assert first != second
    assert first.startswith("----")
    prefix_a = first.split("=_")[0]
    prefix_b = second.split("=_")[0]
    assert prefix_a == prefix_b
    assert len(prefix_a) == 4 + 48
    assert first.endswith("_")
    assert int(second.split("=_")[1].rstrip("_"), 16) == int(first.split("=_")[1].rstrip("_"), 16) + 1


def test_content_disposition_parse():
    cd = ContentDisposition('attachment; filename="report.pdf"')
    assert cd.type == "ATTACHMENT"
    assert cd.param("filename") == "report.pdf"


def test_content_disposition_write():
    cd = ContentDisposition('attachment; filename="a.txt"')
    flat = cd.write()
    folded = cd.write(fold=True)
    assert flat.startswith("Content-Disposition: attachment")
    assert flat.endswith("\r\n")
    assert '; filename="a.txt"' in flat
    assert ';\r\n\tfilename="a.txt"' in folded


def test_content_disposition_str_round_trip():
    cd = ContentDisposition("inline; name=x; size=10")
    again = ContentDisposition(str(cd))
    assert again.type == cd.type
    assert again.param("size") == cd.param("size")


def test_content_disposition_set_param():
    cd = ContentDisposition("inline")
    cd.set_param("filename", "f.txt")
    assert cd.param("FILENAME") == "f.txt"


def test_content_id_generated_is_unique_and_sequential():
    a = str(ContentId())
    b = str(ContentId())
    assert a.startswith("c")
    assert "@" in a
    seq_a = int(a.split("@")[0].split(".")[2])
    seq_b = int(b.split("@")[0].split(".")[2])
    assert seq_b == seq_a + 1


def test_content_id_explicit_value():
    cid = ContentId("part1@example.com")
    assert str(cid) == "part1@example.com"
    cid.set("part2@example.com")
    assert str(cid) == "part2@example.com"


def test_content_transfer_encoding_case_insensitive():
    cte = ContentTransferEncoding("BASE64")
    assert cte.mechanism == ContentTransferEncoding.BASE64
    assert str(cte) == "BASE64"
    cte.set("Quoted-Printable")
    assert cte.mechanism == ContentTransferEncoding.QUOTED_PRINTABLE


def test_content_description():
    cd = ContentDescription("a picture")
    assert str(cd) == "a picture"
    cd.set("other")
    assert str(cd) == "other"


def test_labels():
    assert ContentType.label == "Content-Type"
    assert ContentDisposition.write(ContentDisposition("inline")).startswith(ContentDisposition.label)