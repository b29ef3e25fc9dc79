from ..utils.exceptions import StreamTruncated
from .blocks import BlockReader



class PayloadTransfer:
    def __init__(self, reader: BlockReader):
        self._reader = reader

    def transfer(self, record_count, remaining_size, sink=None, block_index=0):
        """Consume the payload records of one entry.

        Every record is read even when there is no sink, so the stream ends
        up on the next header. With a sink, only the meaningful bytes of each
        record are written; the zero padding of the final record is not.
        Returns the number of full records consumed. A short record raises
        StreamTruncated at its position counted from ``block_index``.
        """
        consumed = 0

        for _ in range(record_count):
            block = self._reader.read_block()
            data = block.data

            if sink is not None and remaining_size > 0:
                sink.write(data[:remaining_size])

            remaining_size -= len(data)

            if not block.is_full:
                raise StreamTruncated(block_index=block_index + consumed)

            consumed += 1

        return consumed
