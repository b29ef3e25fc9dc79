from .blocks import (
    RECORD_SIZE,
    BlockRead,
    BlockReader,
    BlockStatus,
    is_all_zero,
    read_block,
    record_count,
)
from .models import (
    HeaderBlock,
    ScanMode,
    ScanOptions,
    ScanSummary,
    parse_octal,
)
from .scanner import ArchiveScanner, FileSinkFactory, ScanPhase, ScanState
from .transfer import PayloadTransfer
