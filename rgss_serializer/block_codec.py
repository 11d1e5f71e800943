"""zlib wrapper used for script bundle entries."""
import zlib

from rgss_serializer.domain.constants import BEST_COMPRESSION


class BlockCodec:
    """Compresses and decompresses single code blocks.

    Output is deterministic for identical input and level, which keeps a
    split followed by a join byte-identical.
    """

    def __init__(self, level: int = BEST_COMPRESSION):
        self.level = level

    def compress(self, data: bytes) -> bytes:
        return zlib.compress(data, self.level)

    def decompress(self, data: bytes) -> bytes:
        return zlib.decompress(data)
