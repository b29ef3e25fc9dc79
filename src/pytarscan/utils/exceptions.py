from enum import Enum, IntEnum, auto



class ErrorCodes(IntEnum):
    SUCCESS = 0
    EXCEPTION = 1
    FAILURE = 2
    USAGE_ERROR = 64

    @classmethod
    def for_exception(cls, error):
        if isinstance(error, UsageError):
            return cls.USAGE_ERROR
        if isinstance(error, (TarScanError, ArchiveUnavailable)):
            return cls.FAILURE
        return cls.EXCEPTION



class FailureKind(Enum):
    STREAM_TRUNCATED = auto()
    INVALID_MAGIC = auto()
    UNSUPPORTED_ENTRY_TYPE = auto()
    SINK_UNAVAILABLE = auto()
    ENTRIES_NOT_FOUND = auto()



class TarScanError(Exception):
    """Fatal condition that halts an archive scan."""
    kind = None



class StreamTruncated(TarScanError):
    kind = FailureKind.STREAM_TRUNCATED

    def __init__(self, msg="", block_index=None):
        super().__init__(msg or "Unexpected EOF in archive")
        self.block_index = block_index



class InvalidMagic(TarScanError):
    kind = FailureKind.INVALID_MAGIC

    def __init__(self, msg="", magic=None):
        super().__init__(msg or "This does not look like a tar archive")
        self.magic = magic



class UnsupportedEntryType(TarScanError):
    kind = FailureKind.UNSUPPORTED_ENTRY_TYPE

    def __init__(self, msg="", typeflag=None):
        if not msg and typeflag:
            msg = f"Unsupported header type: {ord(typeflag)}"
        super().__init__(msg or "Unsupported header type")
        self.typeflag = typeflag



class SinkUnavailable(TarScanError):
    kind = FailureKind.SINK_UNAVAILABLE

    def __init__(self, msg="", name=None):
        super().__init__(msg or f"Couldn't create file {name}")
        self.name = name



class EntriesNotFound(TarScanError):
    kind = FailureKind.ENTRIES_NOT_FOUND

    def __init__(self, msg="", names=(), summary=None):
        self.names = tuple(names)
        self.summary = summary
        super().__init__(
            msg or f"Not found in archive: {', '.join(self.names)}"
        )



class ArchiveUnavailable(Exception):
    pass



class UsageError(Exception):
    pass
