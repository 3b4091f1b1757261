"""Pack loaded files into byte-bounded batches."""

from collections.abc import Iterable, Iterator

from .config import MAX_BATCH_BYTES
from .types import Batch, LoadedFile


def pack(files: Iterable[LoadedFile], max_bytes: int = MAX_BATCH_BYTES) -> Iterator[Batch]:
    """Group files into batches whose total size stays within max_bytes.

    Files are consumed lazily and batches are yielded as soon as they are
    sealed. A file that would push the running batch over the limit starts
    a new batch; a single file larger than the limit still gets a batch of
    its own. Order is preserved and every file lands in exactly one batch.

    Args:
        files: Loaded files in discovery order.
        max_bytes: Byte budget per batch.

    Yields:
        Non-empty Batch objects.
    """
    batch = Batch()
    for loaded in files:
        if batch and batch.total_bytes + loaded.size > max_bytes:
            yield batch
            batch = Batch()
        batch.add(loaded)
    if batch:
        yield batch
