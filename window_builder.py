import logging
import time

from record_source import PROGRESS_EVERY, RecordStream
from window import Window, empty_window


logger = logging.getLogger(__name__)


def window_start_for(target_row: int, capacity: int) -> int:
    # centre the window on the target so the next scroll step rarely misses
    return max(0, target_row - capacity // 2)


def _fields(row) -> tuple:
    return tuple(str(v) for v in row.tolist())


def build_window(
    path,
    target_row,
    capacity,
    delimiter=",",
    on_progress=None,
    progress_every=PROGRESS_EVERY,
) -> Window:
    """Re-scan ``path`` from the top and buffer up to ``capacity`` rows around ``target_row``.

    ``on_progress`` receives the percentage of the skip phase completed each
    time the skip count crosses ``progress_every``. Parse and I/O errors from
    the record stream propagate; the file is closed either way.

    The buffered rows are read in one batch together with the record just
    before them (the header, or the last skipped row). The parser only checks
    a record's field count against an earlier record of the same batch, so
    this keeps every buffered record checked.
    """
    capacity = max(1, int(capacity))
    progress_every = max(1, progress_every)
    start = window_start_for(max(0, target_row), capacity)
    began = time.monotonic()

    with RecordStream(path, delimiter) as stream:
        if start == 0:
            frame = stream.read_frame(capacity + 1)
            if len(frame) == 0:
                logger.debug("%s is empty", path)
                return empty_window(start, capacity)
            header = _fields(frame.iloc[0])
        else:
            header = stream.read_record()
            if header is None:
                logger.debug("%s is empty", path)
                return empty_window(start, capacity)

            def report(skipped):
                if on_progress is not None:
                    on_progress(100 * skipped // start)

            skipped = stream.skip(start - 1, on_progress=report, progress_every=progress_every)
            # one extra record: the last row before the window comes first
            frame = stream.read_frame(capacity + 1)
            if len(frame) <= 1:
                logger.debug(
                    "row %d is past the end of %s (%d data rows)",
                    target_row,
                    path,
                    skipped + len(frame),
                )
                return empty_window(start, capacity, headers=header)
            if on_progress is not None and (start // progress_every) > ((start - 1) // progress_every):
                on_progress(100)

        rows = frame.iloc[1:].reset_index(drop=True)
        if len(rows) == 0:
            rows = rows.reindex(columns=range(len(header)))

    reached_end = len(rows) < capacity or stream.exhausted
    window = Window(
        headers=tuple(header),
        first_row=start,
        last_row=start + len(rows) - 1,
        capacity=capacity,
        reached_end=reached_end,
        rows=rows,
    )
    logger.debug(
        "built window %d-%d of %s in %.3fs (end=%s)",
        window.first_row,
        window.last_row,
        path,
        time.monotonic() - began,
        reached_end,
    )
    return window
