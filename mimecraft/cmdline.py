"""Long-option command line of the mail matching tool."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum, auto

VERSION = "0.0.1"


class Option(IntEnum):
    """Kinds of command-line switch."""

    NONE = 0
    # match
    ATTACHMENT_FILENAME = auto()
    HAS_BINARY_ATTACH = auto()
    HAS_FIELD = auto()
    FIELD = auto()
    IFIELD = auto()
    STD_FIELD = auto()
    # options
    MATCH_SHELL = auto()
    MATCH_REGEX = auto()
    PERL_REGEX = auto()
    CASE_INSENSITIVE = auto()
    ENCODING = auto()
    INVERT_SELECTION = auto()
    RECURSIVE = auto()
    # actions
    ADD_HEADER = auto()
    DEL_HEADER = auto()
    MOD_HEADER = auto()
    ADD_PART_HEADER = auto()
    DEL_PART_HEADER = auto()
    MOD_PART_HEADER = auto()
    ATTACH = auto()
    DETACH = auto()
    DELETE_PART = auto()
    DELETE_MSG = auto()
    PRINT_PART = auto()
    PRINT_MSG = auto()
    PIPE_TO = auto()
    # others
    IN = auto()
    OUT = auto()
    HELP = auto()
    VERSION = auto()


class CommandLineError(ValueError):
    """Raised for an unknown, ambiguous or malformed option."""


class _Arg(Enum):
    NONE = auto()
    REQUIRED = auto()
    OPTIONAL = auto()


@dataclass(frozen=True)
class _Spec:
    name: str
    description: str
    arg: _Arg
    option: Option


def _spec(name: str, arg: _Arg, option: Option, description: str = "") -> _Spec:
    return _Spec(name, description, arg, option)


_STD_FIELDS = (
    "from", "sender", "to", "subject", "cc", "bcc", "user-agent", "date",
    "content-type", "content-transfer-encoding", "content-disposition",
    "content-description",
)

_SPECS: tuple[_Spec, ...] = (
    _spec("attachment-filename", _Arg.REQUIRED, Option.ATTACHMENT_FILENAME,
          "filename of the attachment"),
    _spec("has-binary-attach", _Arg.NONE, Option.HAS_BINARY_ATTACH,
          "match if the message has attachments"),
    _spec("has-field", _Arg.OPTIONAL, Option.HAS_FIELD),
    _spec("field", _Arg.OPTIONAL, Option.FIELD),
    _spec("ifield", _Arg.OPTIONAL, Option.IFIELD),
    *(_spec(name, _Arg.OPTIONAL, Option.STD_FIELD) for name in _STD_FIELDS),
    _spec("add-header", _Arg.REQUIRED, Option.ADD_HEADER),
    _spec("del-header", _Arg.REQUIRED, Option.DEL_HEADER),
    _spec("mod-header", _Arg.REQUIRED, Option.MOD_HEADER),
    _spec("add-part-header", _Arg.REQUIRED, Option.ADD_PART_HEADER),
    _spec("del-part-header", _Arg.REQUIRED, Option.DEL_PART_HEADER),
    _spec("mod-part-header", _Arg.REQUIRED, Option.MOD_PART_HEADER),
    _spec("attach", _Arg.REQUIRED, Option.ATTACH),
    _spec("detach", _Arg.NONE, Option.DETACH),
    _spec("delete-part", _Arg.NONE, Option.DELETE_PART),
    _spec("delete-message", _Arg.NONE, Option.DELETE_MSG),
    _spec("print-part", _Arg.NONE, Option.PRINT_PART),
    _spec("print-message", _Arg.NONE, Option.PRINT_MSG),
    _spec("pipe-to", _Arg.REQUIRED, Option.PIPE_TO),
    _spec("recursive", _Arg.NONE, Option.RECURSIVE),
    _spec("invert-selection", _Arg.NONE, Option.INVERT_SELECTION),
    _spec("match-shell", _Arg.NONE, Option.MATCH_SHELL),
    _spec("match-regex", _Arg.NONE, Option.MATCH_REGEX),
    _spec("perl-regex", _Arg.NONE, Option.PERL_REGEX),
    _spec("case-insensitive", _Arg.NONE, Option.CASE_INSENSITIVE),
    _spec("encoding", _Arg.REQUIRED, Option.ENCODING),
    _spec("in", _Arg.REQUIRED, Option.IN),
    _spec("out", _Arg.REQUIRED, Option.OUT),
    _spec("help", _Arg.NONE, Option.HELP),
    _spec("version", _Arg.NONE, Option.VERSION),
)

_CONFLICTS = (
    (Option.MATCH_SHELL, Option.MATCH_REGEX,
     "just one of --match-shell and --match-regex can be specified"),
    (Option.MATCH_SHELL, Option.PERL_REGEX,
     "--match-shell and --perl-regex are not compatible"),
    (Option.PRINT_MSG, Option.PRINT_PART,
     "just one of --print-message and --print-part can be specified"),
    (Option.DELETE_MSG, Option.DELETE_PART,
     "just one of --delete-msg and --delete-part can be specified"),
)


def _lookup(name: str) -> _Spec:
    exact = next((s for s in _SPECS if s.name == name), None)
    if exact is not None:
        return exact
    candidates = [s for s in _SPECS if s.name.startswith(name)]
    if not candidates or len({(s.arg, s.option) for s in candidates}) > 1:
        raise CommandLineError("unknown option")
    return candidates[0]


class CommandLine:
    """Parsed switches, kept as (name, value) pairs ordered by name.

    Long options may be abbreviated to any unambiguous prefix. A switch is
    recorded under every long option of the same kind, so one of the
    standard header options sets them all. Arguments that are not options
    are collected in ``args``.
    """

    def __init__(self) -> None:
        self._switches: list[tuple[str, str]] = []
        self._counts: Counter[Option] = Counter()
        self.args: list[str] = []

    def _record(self, option: Option, value: str) -> None:
        self._counts[option] += 1
        self._switches.extend((s.name, value) for s in _SPECS if s.option is option)

    def parse(self, argv: Sequence[str] | None = None) -> "CommandLine":
        """Parse ``argv`` (default: the process arguments without the program).

        ``-v`` prints the version and ``-h`` the option list to standard
        error, then exit with status 1 and 0 respectively.
        """
        args = list(sys.argv[1:] if argv is None else argv)
        index = 0
        while index < len(args):
            arg = args[index]
            index += 1
            if arg == "--":
                self.args.extend(args[index:])
                break
            if arg.startswith("--"):
                name, has_value, value = arg[2:].partition("=")
                spec = _lookup(name)
                if spec.arg is _Arg.NONE:
                    if has_value:
                        raise CommandLineError("unknown option")
                elif spec.arg is _Arg.REQUIRED and not has_value:
                    if index == len(args):
                        raise CommandLineError("missing parameter")
                    value = args[index]
                    index += 1
                self._record(spec.option, value)
            elif arg.startswith("-") and arg != "-":
                for flag in arg[1:]:
                    if flag == "v":
                        print(VERSION, file=sys.stderr)
                        raise SystemExit(1)
                    if flag == "h":
                        sys.stderr.write(self.help_text())
                        raise SystemExit(0)
                    raise CommandLineError("unknown option")
            else:
                self.args.append(arg)
        return self

    def is_set(self, key: Option | str) -> bool:
        """Tell whether an option kind or a named switch was given."""
        if isinstance(key, Option):
            return self._counts[key] > 0
        return any(name == key for name, _ in self._switches)

    def values(self, key: str) -> list[str]:
        """Return the values given for switch ``key``, in order."""
        return [value for name, value in self._switches if name == key]

    def __getitem__(self, key: str) -> str:
        """Return the first value of switch ``key``, or "" if it was not given."""
        found = self.values(key)
        return found[0] if found else ""

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(sorted(self._switches, key=lambda item: item[0]))

    def validate(self) -> None:
        """Raise CommandLineError if incompatible switches were given together."""
        for first, second, message in _CONFLICTS:
            if self.is_set(first) and self.is_set(second):
                raise CommandLineError(message)

    def help_text(self) -> str:
        """Return one line per long option with its argument and description."""
        suffixes = {_Arg.NONE: "", _Arg.REQUIRED: " ARG", _Arg.OPTIONAL: " [ARG]"}
        return "".join(
            f"--{s.name}{suffixes[s.arg]}\t{s.description}\n" for s in _SPECS
        )