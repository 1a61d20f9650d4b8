import logging

import pandas as pd


logger = logging.getLogger(__name__)

CHUNK_ROWS = 10000
PROGRESS_EVERY = 100000


class RecordSourceError(Exception):
    """Base class for failures while reading a delimited file."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class SourceNotFoundError(RecordSourceError):
    pass


class SourceIOError(RecordSourceError):
    pass


class MalformedRecordError(RecordSourceError):
    def __init__(self, message, path=None, record_index=None):
        super().__init__(message, path)
        self.record_index = record_index

    def __str__(self):
        base = super().__str__()
        if self.record_index is None:
            return base
        return f"{base} (near record {self.record_index})"


class RecordStream:
    """Forward-only reader of delimited records.

    The first record handed out is the file's header. There is no seek and no
    rewind: reaching a given record means opening a new stream and reading up
    to it again.
    """

    def __init__(self, path: str, delimiter: str = ",", encoding: str = "utf-8"):
        self.path = path
        self.delimiter = delimiter
        self.records_read = 0
        # field count, fixed by the first record read
        self.width = None
        self.exhausted = False
        self._reader = None

        try:
            self._handle = open(path, "r", encoding=encoding, errors="replace", newline="")
        except FileNotFoundError as exc:
            raise SourceNotFoundError(f"No such file: {path}", path) from exc
        except OSError as exc:
            raise SourceIOError(f"Cannot open {path}: {exc.strerror or exc}", path) from exc

        try:
            self._reader = pd.read_csv(
                self._handle,
                sep=delimiter,
                header=None,
                dtype=str,
                na_filter=False,
                skip_blank_lines=True,
                engine="c",
                chunksize=CHUNK_ROWS,
            )
        except pd.errors.EmptyDataError:
            self.exhausted = True
        except pd.errors.ParserError as exc:
            self._handle.close()
            raise MalformedRecordError(f"Malformed header in {path}: {exc}", path, 0) from exc
        except Exception:
            self._handle.close()
            raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        if self._reader is not None:
            try:
                self._reader.close()
            finally:
                self._reader = None
        if not self._handle.closed:
            self._handle.close()

    def read_frame(self, count: int) -> pd.DataFrame:
        """Read up to ``count`` records; fewer come back at end of stream."""
        if count <= 0 or self.exhausted or self._reader is None:
            return pd.DataFrame()
        try:
            frame = self._reader.get_chunk(count)
        except StopIteration:
            self.exhausted = True
            return pd.DataFrame()
        except pd.errors.EmptyDataError:
            self.exhausted = True
            return pd.DataFrame()
        except pd.errors.ParserError as exc:
            raise MalformedRecordError(
                f"Malformed record in {self.path}: {exc}", self.path, self.records_read
            ) from exc
        except OSError as exc:
            raise SourceIOError(f"Read failed on {self.path}: {exc}", self.path) from exc

        if len(frame) == 0:
            self.exhausted = True
            return frame

        # a leading extra field in the first record of a read becomes an index
        if not isinstance(frame.index, pd.RangeIndex):
            raise MalformedRecordError(
                f"Malformed record in {self.path}: more fields than the header",
                self.path,
                self.records_read,
            )
        frame.columns = range(len(frame.columns))
        if self.width is None:
            self.width = len(frame.columns)
        elif len(frame.columns) > self.width:
            raise MalformedRecordError(
                f"Malformed record in {self.path}: expected {self.width} fields, "
                f"saw {len(frame.columns)}",
                self.path,
                self.records_read,
            )
        elif len(frame.columns) < self.width:
            frame = frame.reindex(columns=range(self.width))
        # trailing fields missing from a short record come back as NaN
        frame = frame.fillna("")
        self.records_read += len(frame)
        return frame

    def read_record(self):
        frame = self.read_frame(1)
        if len(frame) == 0:
            return None
        return [str(v) for v in frame.iloc[0].tolist()]

    def skip(self, count: int, on_progress=None, progress_every: int = PROGRESS_EVERY) -> int:
        """Read and discard up to ``count`` records, returning how many went by."""
        skipped = 0
        progress_every = max(1, progress_every)
        while skipped < count:
            step = min(CHUNK_ROWS, count - skipped)
            got = len(self.read_frame(step))
            if got == 0:
                break
            before = skipped
            skipped += got
            if on_progress is not None and skipped // progress_every > before // progress_every:
                on_progress(skipped)
        return skipped
