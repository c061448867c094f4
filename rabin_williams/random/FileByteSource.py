from typing import BinaryIO

from ..errors import ResourceExhaustion, TransientIO
from ..protocol_constants import MAX_READ_BYTES
from .abstract.IByteSource import IByteSource

MAX_INTERRUPTED_RETRIES = 100


class FileByteSource(IByteSource):
    """Byte source backed by a binary stream such as /dev/urandom."""

    def __init__(self, stream: BinaryIO, buffer_size: int = MAX_READ_BYTES) -> None:
        """Wrap a binary stream.

        Args:
            stream (BinaryIO): Stream opened in binary mode
            buffer_size (int): Largest number of bytes a single read may request
        """
        self._stream = stream
        self._buffer = bytearray(buffer_size)

    @classmethod
    def open(cls, path: str) -> "FileByteSource":
        try:
            stream = open(path, "rb", buffering=0)
        except OSError as e:
            raise ResourceExhaustion(f"cannot open random source {path}: {e}") from e
        return cls(stream)

    def read(self, count: int) -> bytes:
        if count > len(self._buffer):
            raise ResourceExhaustion(
                f"requested {count} bytes, read buffer holds {len(self._buffer)}"
            )

        view = memoryview(self._buffer)[:count]
        interrupted = 0
        while True:
            try:
                read = self._stream.readinto(view)
                break
            except InterruptedError:
                interrupted += 1
                if interrupted > MAX_INTERRUPTED_RETRIES:
                    raise TransientIO(
                        f"read interrupted {interrupted} times in a row"
                    ) from None
            except OSError as e:
                raise ResourceExhaustion(f"random source read failed: {e}") from e

        if read != count:
            raise ResourceExhaustion(f"short read: wanted {count} bytes, got {read or 0}")

        return bytes(view)

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "FileByteSource":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
