from .core import (
    ArchiveScanner,
    HeaderBlock,
    ScanMode,
    ScanOptions,
    ScanSummary,
)
from .filters import NameFilterSet
from .pytarscan import pytarscan
from .utils.exceptions import (
    ArchiveUnavailable,
    EntriesNotFound,
    ErrorCodes,
    FailureKind,
    InvalidMagic,
    SinkUnavailable,
    StreamTruncated,
    TarScanError,
    UnsupportedEntryType,
    UsageError,
)
