# mimecraft

Building blocks for working with MIME messages, using only the standard
library:

- `mimecraft.codecs`: the `Codec` base class, codec chains built with `|`,
  and small helper codecs (`NullCodec`, `ToUpperCase`, `ToLowerCase`,
  `Lf2CrLf`, `MaxLineLen`);
- `mimecraft.base64` and `mimecraft.qp`: streaming Base64 and
  quoted-printable encoders and decoders;
- `mimecraft.fields`: values of the `Content-Type`, `Content-Disposition`,
  `Content-ID`, `Content-Transfer-Encoding` and `Content-Description`
  header fields, plus `make_boundary()` for multipart boundaries;
- `mimecraft.body`: a message `Body` that can be loaded from a file and run
  through a codec;
- `mimecraft.tokenizer`, `mimecraft.tree`, `mimecraft.streams`: a
  delimiter-based `StringTokenizer`, a small `TreeNode` type, and byte
  sinks that count, copy or rewrite output;
- `mimecraft.cmdline`: the option parser of a mail matching tool;
- `mimecraft.tools`: two command-line filters for Base64 and
  quoted-printable.

## Installation

```
pip install mimecraft
```

## Codecs

A codec is fed bytes with `feed()`, which returns the output ready so far,
and releases anything it still holds with `flush()`. `code`, `encode` and
`decode` do both in one call (they behave identically; the name just says
what you mean):

```python
from mimecraft.codecs import encode, decode, ToUpperCase, Lf2CrLf
from mimecraft.base64 import Base64Encoder, Base64Decoder
from mimecraft.qp import QPEncoder, QPDecoder

encoded = encode(b"hello world", Base64Encoder(76))
original = decode(encoded, Base64Decoder())

printable = encode(b"caf\xe9 au lait\n", QPEncoder(False))
text = decode(printable, QPDecoder())
```

`str` input is accepted too and taken as Latin-1.

Codecs combine into a `CodecChain` with `|`; data passes through them from
left to right. Each codec is copied into the chain, so the originals keep
their own state:

```python
chain = ToUpperCase() | Lf2CrLf() | QPEncoder(False)
result = encode(b"some text\nmore text\n", chain)
chain.name   # "ToUpperCase|Lf2CrLf|Quoted-Printable"
```

Details:

- `Base64Encoder(maxlen)` ends each output line with LF after `maxlen`
  characters; `0` disables line breaks. `Base64Decoder` skips bytes outside
  the Base64 alphabet and decodes a final group missing its padding as if
  it were padded.
- `QPEncoder(binary)` keeps lines within 76 characters and writes LF
  newlines. With `binary=True` spaces, tabs and line breaks are
  hex-encoded as well; in text mode it switches to binary mode at the
  first non-text byte. `From ` and a lone `.` at the start of a line are
  hex-encoded. `QPDecoder` removes soft line breaks, turns CRLF, LFCR, CR
  and LF into LF, drops control characters and copies malformed escapes
  as they are.
- `Lf2CrLf` turns each LF not already preceded by CR into CRLF.
- `MaxLineLen(maxlen)` inserts CRLF after every `maxlen` bytes, counting
  across newlines already in the input.

## Header fields

```python
from mimecraft.fields import ContentType, ContentDisposition, make_boundary

ct = ContentType('multipart/mixed; boundary="xyz"')
ct.is_multipart()          # True
ct.param("boundary")       # "xyz"
ct.set_param("charset", "us-ascii")
str(ct)                    # 'multipart/mixed; boundary="xyz"; charset="us-ascii"'

cd = ContentDisposition('attachment; filename="report.pdf"')
cd.param("filename")       # "report.pdf"
str(cd)                    # 'attachment; filename="report.pdf"'
cd.write(fold=True)        # 'Content-Disposition: attachment;\r\n\tfilename="report.pdf"\r\n'

ContentType("text", "plain").type   # "text"
make_boundary()            # a shared random prefix plus "=_<hex counter>_"
```

Types, subtypes, parameter names and transfer-encoding mechanisms compare
case-insensitively. `param()` returns `""` for a missing parameter.
`ContentId()` with no value makes a unique id of the form
`c<time>.<pid>.<sequence>@<host>`.

## Body

```python
from mimecraft.body import Body
from mimecraft.base64 import Base64Encoder

body = Body(b"plain content")
body.code(Base64Encoder(76))        # encode the content in place
body.load("attachment.bin")          # read a file as it is
body.load("attachment.bin", Base64Encoder(76))  # read and encode it
```

`load()` raises `OSError` when the file cannot be read. A body also carries
`preamble`, `epilogue`, a `parts` list and an `owner`, which are plain
attributes for the caller to fill in.

## Tokenizer, tree and sinks

```python
from mimecraft.tokenizer import StringTokenizer

list(StringTokenizer("a;;b;", ";"))   # ["a", "", "b"]
```

Consecutive delimiters give empty tokens; a trailing delimiter does not.
`next()` returns `None` at the end, and `matched` holds the delimiter that
ended the last token.

`TreeNode(data)` holds data and a list of `children`; `add_child()` appends
and returns a new node, and `find_node(nodes, data)` returns the first node
whose data is equal, or `None`.

`CountingSink` discards what it is given and counts bytes in `size`;
`PassthroughSink(out)` copies to `out` and counts; `CrLfToLfSink(out)`
turns CRLF into LF on the way to `out`. All three are context managers
that flush on exit.

## Mail tool options

`mimecraft.cmdline.CommandLine` parses the long options of a mail matching
tool (`--from`, `--field`, `--attach`, `--print-message`, `--recursive`,
and so on); options may be abbreviated to any unambiguous prefix.

```python
from mimecraft.cmdline import CommandLine, Option

cl = CommandLine().parse(["--from=alice@example.com", "--recursive", "in.eml"])
cl.is_set(Option.RECURSIVE)   # True
cl["from"]                     # "alice@example.com"
cl.args                        # ["in.eml"]
cl.validate()                  # raises CommandLineError on conflicting options
```

A switch is recorded under every long option of the same kind, so one of
the standard header options (`--from`, `--to`, `--subject`, ...) sets the
value for all of them. Unknown or malformed options raise
`CommandLineError`; `-h` writes `help_text()` to standard error and exits
with status 0, and `-v` writes the version and exits with status 1.

## Command-line tools

Two filters are installed with the package. Each reads a file (or standard
input) and writes to a file (or standard output):

```
mimecraft-b64 -e [in_file [out_file]]    # Base64-encode
mimecraft-b64 -d [in_file [out_file]]    # Base64-decode
mimecraft-qp  -e [in_file [out_file]]    # quoted-printable encode
mimecraft-qp  -d [in_file [out_file]]    # quoted-printable decode
```

Called without `-e` or `-d`, they print their usage line and exit with
status 1. A file that cannot be opened is reported on standard error and
the command exits with a non-zero status. `run_codec(codec, source,
target)` does the same streaming for any codec and pair of binary files.

## What the package does not do

There is no MIME message parser and no message or entity type: a complete
message cannot be read into a tree of parts, and no message is written out
with its headers. There is no mailbox reader and no program that matches
or edits messages; `mimecraft.cmdline` only parses and checks that tool's
options, and nothing acts on them.

## Running the tests

```
pip install -e ".[test]"
pytest
```