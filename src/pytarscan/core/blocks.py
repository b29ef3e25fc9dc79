from dataclasses import dataclass
from enum import Enum, auto



RECORD_SIZE = 512



class BlockStatus(Enum):
    FULL = auto()
    PARTIAL = auto()
    END_OF_STREAM = auto()



@dataclass(frozen=True)
class BlockRead:
    status: BlockStatus
    data: bytes = b""

    @property
    def is_full(self) -> bool:
        return self.status is BlockStatus.FULL



def record_count(size):
    """Number of 512-byte records a payload of ``size`` bytes occupies."""
    if size < 0:
        raise ValueError(f"Payload size must be non-negative, got {size!r}")
    return (size + RECORD_SIZE - 1) // RECORD_SIZE


def is_all_zero(block) -> bool:
    return len(block) == RECORD_SIZE and not any(block)


def read_exact(stream, n):
    """Read ``n`` bytes, or fewer only when the stream runs dry."""
    chunks = []
    remaining = n
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_block(stream) -> BlockRead:
    data = read_exact(stream, RECORD_SIZE)

    if len(data) == RECORD_SIZE:
        return BlockRead(BlockStatus.FULL, data)
    if not data:
        return BlockRead(BlockStatus.END_OF_STREAM)
    return BlockRead(BlockStatus.PARTIAL, data)




class BlockReader:
    """Pulls 512-byte records off an archive stream, one per call."""

    def __init__(self, stream):
        self._stream = stream

    def read_block(self) -> BlockRead:
        return read_block(self._stream)
