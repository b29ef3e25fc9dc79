import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path, PurePath
from typing import Optional

from ..filters.name_filters import NameFilterSet
from ..utils.common import get_logger, quiet_logger, to_posix
from ..utils.exceptions import (
    ArchiveUnavailable,
    EntriesNotFound,
    SinkUnavailable,
    StreamTruncated,
    TarScanError,
)
from .blocks import BlockReader, BlockStatus, is_all_zero, record_count
from .models import HeaderBlock, ScanMode, ScanOptions, ScanSummary
from .transfer import PayloadTransfer




class ScanPhase(Enum):
    AWAITING_HEADER = auto()
    SAW_ONE_ZERO_BLOCK = auto()
    TERMINATED = auto()
    ABORTED = auto()



@dataclass
class ScanState:
    phase: ScanPhase = ScanPhase.AWAITING_HEADER
    # one tick per full record consumed, headers and payload alike
    block_index: int = 0
    entries: int = 0
    listed: list = field(default_factory=list)
    lone_zero_block_at: Optional[int] = None

    @property
    def saw_zero_block(self) -> bool:
        return self.phase is ScanPhase.SAW_ONE_ZERO_BLOCK




class FileSinkFactory:
    """Opens one output file per extracted entry, below ``directory``."""

    def __init__(self, directory="."):
        self._directory = Path(directory)

    def resolve(self, name) -> Path:
        path = PurePath(name)
        if not path.parts or path.is_absolute() or ".." in path.parts:
            raise SinkUnavailable(name=name)
        return self._directory / path

    def __call__(self, name):
        return open(self.resolve(name), "wb")




class ArchiveScanner:
    def __init__(
        self,
        options: ScanOptions,
        stream=None,
        *,
        output=None,
        sink_factory=None,
        quiet=False,
        log_stream=None,
    ):
        self.__logger = quiet_logger() if quiet else get_logger(stream=log_stream)

        self._options = options
        self._stream = stream
        self._output = output
        self._sink_factory = sink_factory or FileSinkFactory(options.directory)
        self._filter = NameFilterSet(options.names)
        self._state = ScanState()

    @property
    def options(self) -> ScanOptions:
        return self._options

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def entry_filter(self) -> NameFilterSet:
        return self._filter

    @property
    def stream(self):
        if self._stream is None:
            raise ArchiveUnavailable(
                f"The archive {to_posix(self._options.archive_file)!r} is not open"
            )
        return self._stream

    def _emit(self, header: HeaderBlock):
        # raw name bytes; entry names need not be valid UTF-8
        output = self._output or sys.stdout.buffer
        output.write(header.raw_name + b"\n")
        output.flush()

    @contextmanager
    def _open_sink(self, header: HeaderBlock, selected):
        if not (selected and self._options.extracting):
            yield None
            return

        try:
            sink = self._sink_factory(header.name)
        except OSError as e:
            raise SinkUnavailable(name=header.name) from e

        with sink:
            yield sink

    def _process_entry(self, header: HeaderBlock, transfer: PayloadTransfer):
        state = self._state
        name = header.name
        selected = self._filter(name)

        if selected:
            state.listed.append(name)
            if self._options.echoes_names:
                self._emit(header)

        size = header.size
        self.__logger.debug(
            f"Entry {name!r} at block {state.block_index}: {size} bytes, "
            f"{'selected' if selected else 'skipped'}"
        )

        with self._open_sink(header, selected) as sink:
            state.block_index += transfer.transfer(
                record_count(size), size, sink, block_index=state.block_index
            )

        state.entries += 1
        return selected

    def iter_entries(self):
        """Scan the archive, yielding ``(header, selected)`` per entry.

        Each entry is yielded once its payload has been consumed and its
        output (if any) closed. Any malformed block, truncation or output
        failure raises and ends the scan.
        """
        state = self._state = ScanState()
        reader = BlockReader(self.stream)
        transfer = PayloadTransfer(reader)

        try:
            while True:
                block = reader.read_block()

                if block.status is BlockStatus.END_OF_STREAM:
                    if state.saw_zero_block:
                        state.lone_zero_block_at = state.block_index
                        self.__logger.warning(
                            f"A lone zero block at {state.block_index}"
                        )
                    state.phase = ScanPhase.TERMINATED
                    return

                if block.status is BlockStatus.PARTIAL:
                    raise StreamTruncated(block_index=state.block_index)

                state.block_index += 1

                if is_all_zero(block.data):
                    if state.saw_zero_block:
                        state.phase = ScanPhase.TERMINATED
                        return
                    state.phase = ScanPhase.SAW_ONE_ZERO_BLOCK
                    continue

                state.phase = ScanPhase.AWAITING_HEADER
                header = HeaderBlock.parse(block.data).validate()
                selected = self._process_entry(header, transfer)
                yield header, selected
        except TarScanError:
            state.phase = ScanPhase.ABORTED
            raise

    @property
    def summary(self) -> ScanSummary:
        state = self._state
        return ScanSummary(
            entries=state.entries,
            blocks=state.block_index,
            listed=tuple(state.listed),
            unmatched=self._filter.unmatched(),
            lone_zero_block_at=state.lone_zero_block_at,
        )

    def reconcile(self, summary: ScanSummary):
        """Report requested names that never showed up, in list mode only."""
        if self._options.mode is not ScanMode.LIST or self._filter.is_selecting_all():
            return summary

        for name in summary.unmatched:
            self.__logger.error(f"{name}: Not found in archive")

        if summary.unmatched:
            raise EntriesNotFound(names=summary.unmatched, summary=summary)
        return summary

    def scan(self) -> ScanSummary:
        for _ in self.iter_entries():
            pass
        return self.reconcile(self.summary)
