from .core.scanner import ArchiveScanner
from .utils.common import to_posix
from .utils.exceptions import ArchiveUnavailable




class pytarscan(ArchiveScanner):
    """Scanner that owns its archive file for the length of a ``with`` block.

    >>> with pytarscan(ScanOptions("backup.tar", ScanMode.LIST)) as tar:
    ...     summary = tar.scan()
    """

    def __enter__(self):
        archive_file = self.options.archive_file
        try:
            self._stream = open(archive_file, "rb")
        except OSError as e:
            raise ArchiveUnavailable(
                f"could not open file {to_posix(archive_file)}"
            ) from e
        return self

    def __exit__(self, *args, **kwargs):
        stream, self._stream = self._stream, None
        if stream is not None:
            stream.close()
