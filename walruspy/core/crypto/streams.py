"""
Stream helpers used by the cipher streaming adapters.

The adapters buffer the whole source before encrypting: they are not
incremental and memory use grows with the source size.
"""
from typing import AsyncIterable, Protocol, Union, runtime_checkable

DEFAULT_READ_SIZE = 64 * 1024


@runtime_checkable
class AsyncReadable(Protocol):
    """Anything with an async read() returning b'' at EOF (aiofiles, aiohttp.StreamReader)."""

    async def read(self, size: int = -1) -> bytes:
        ...


@runtime_checkable
class AsyncWritable(Protocol):
    """Anything with async write() and close() (aiofiles file objects)."""

    async def write(self, data: bytes) -> object:
        ...

    async def close(self) -> None:
        ...


Source = Union[AsyncReadable, AsyncIterable[bytes]]


async def read_all(src: Source, chunk_size: int = DEFAULT_READ_SIZE) -> bytes:
    """
    Drains a source and returns its chunks concatenated in arrival order.

    Args:
        src: Async readable or async iterable of bytes
        chunk_size: Size hint for each read() call

    Returns:
        All bytes read from the source
    """
    chunks = []

    if isinstance(src, AsyncReadable):
        while True:
            chunk = await src.read(chunk_size)
            if not chunk:
                break
            chunks.append(bytes(chunk))
    else:
        async for chunk in src:
            chunks.append(bytes(chunk))

    return b''.join(chunks)


async def write_and_close(dst: AsyncWritable, data: bytes) -> None:
    """Writes data as one chunk, then closes dst even if the write fails."""
    try:
        await dst.write(data)
    finally:
        await dst.close()
