from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional

from ..utils.common import PathLike, bytes_to_str
from ..utils.exceptions import InvalidMagic, UnsupportedEntryType, UsageError
from .blocks import RECORD_SIZE


OCTAL_DIGITS = b"01234567"
C_WHITESPACE = b" \t\n\v\f\r"


def parse_octal(raw) -> int:
    """Parse a numeric header field the way ``strtoull(field, NULL, 8)`` does.

    Leading whitespace is skipped, an optional ``+`` is accepted and the
    longest run of octal digits is converted. Anything without digits,
    including negative values, yields 0.
    """
    raw = bytes(raw)
    i = 0
    end = len(raw)

    while i < end and raw[i:i + 1] in C_WHITESPACE:
        i += 1

    if raw[i:i + 1] == b"-":
        return 0
    if raw[i:i + 1] == b"+":
        i += 1

    start = i
    while i < end and raw[i:i + 1] in OCTAL_DIGITS:
        i += 1

    digits = raw[start:i]
    return int(digits, 8) if digits else 0


def cut_at_nul(raw) -> bytes:
    return bytes(raw).split(b"\0", 1)[0]




class ScanMode(Enum):
    LIST = "list"
    EXTRACT = "extract"




@dataclass(frozen=True, slots=True)
class HeaderBlock:
    """One ustar header record, decoded field by field."""
    name_field: bytes
    mode: bytes
    uid: bytes
    gid: bytes
    size_field: bytes
    mtime: bytes
    chksum: bytes
    typeflag: bytes
    linkname: bytes
    magic: bytes
    version: bytes
    uname: bytes
    gname: bytes
    devmajor: bytes
    devminor: bytes
    prefix: bytes

    # (field, offset, width) in on-wire order; the last 12 bytes are padding
    LAYOUT: ClassVar[tuple] = (
        ("name_field", 0, 100),
        ("mode", 100, 8),
        ("uid", 108, 8),
        ("gid", 116, 8),
        ("size_field", 124, 12),
        ("mtime", 136, 12),
        ("chksum", 148, 8),
        ("typeflag", 156, 1),
        ("linkname", 157, 100),
        ("magic", 257, 6),
        ("version", 263, 2),
        ("uname", 265, 32),
        ("gname", 297, 32),
        ("devmajor", 329, 8),
        ("devminor", 337, 8),
        ("prefix", 345, 155),
    )
    MAGICS: ClassVar[tuple] = (b"ustar\0", b"ustar ")
    REGTYPE: ClassVar[bytes] = b"0"
    AREGTYPE: ClassVar[bytes] = b"\0"

    @classmethod
    def parse(cls, block):
        block = bytes(block)
        if len(block) != RECORD_SIZE:
            raise ValueError(
                f"A header block is exactly {RECORD_SIZE} bytes, got {len(block)}"
            )
        return cls(**{
            name: block[offset:offset + width]
            for name, offset, width in cls.LAYOUT
        })

    @property
    def raw_name(self) -> bytes:
        return cut_at_nul(self.name_field)

    @property
    def name(self) -> str:
        return bytes_to_str(self.raw_name)

    @property
    def size(self) -> int:
        return parse_octal(self.size_field)

    def is_magic_valid(self) -> bool:
        return self.magic in self.MAGICS

    def is_supported_type(self) -> bool:
        return self.typeflag in (self.REGTYPE, self.AREGTYPE)

    def validate(self):
        # magic first: a bad magic means the whole stream is not a tar archive
        if not self.is_magic_valid():
            raise InvalidMagic(magic=self.magic)
        if not self.is_supported_type():
            raise UnsupportedEntryType(typeflag=self.typeflag)
        return self




@dataclass(frozen=True)
class ScanOptions:
    archive_file: PathLike
    mode: ScanMode = ScanMode.LIST
    verbose: bool = False
    names: tuple = ()
    directory: PathLike = "."

    def __post_init__(self):
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "mode", ScanMode(self.mode))

    @property
    def extracting(self) -> bool:
        return self.mode is ScanMode.EXTRACT

    @property
    def echoes_names(self) -> bool:
        return self.mode is ScanMode.LIST or self.verbose

    def validate(self):
        if not str(self.archive_file):
            raise UsageError("option -f requires an argument")
        if any(not name for name in self.names):
            raise UsageError("there was an empty string argument")
        return self




@dataclass(frozen=True)
class ScanSummary:
    entries: int
    blocks: int
    listed: tuple = field(default_factory=tuple)
    unmatched: tuple = field(default_factory=tuple)
    lone_zero_block_at: Optional[int] = None
