"""Delimited text reader with a pluggable row decoder."""

from __future__ import annotations

from pathlib import Path
from typing import Generic, TypeVar

from loguru import logger

from scoreline.core.exceptions import DecodeError, ResourceIOError
from scoreline.core.models import MatchRecord
from scoreline.core.reading.decoders import MatchRecordDecoder, RecordDecoder

T = TypeVar("T")


class TabularReader(Generic[T]):
    """Load a delimited text file and decode every row with ``decoder``.

    Splitting and loading are fixed; the decoder is the only customizable
    step. A load either decodes every row or raises, leaving ``records``
    untouched.
    """

    def __init__(
        self,
        decoder: RecordDecoder[T],
        *,
        delimiter: str = ",",
        encoding: str = "utf-8",
        has_header: bool = False,
    ) -> None:
        self.decoder = decoder
        self.delimiter = delimiter
        self.encoding = encoding
        self.has_header = has_header
        self._records: tuple[T, ...] = ()

    @classmethod
    def for_matches(
        cls,
        *,
        date_format: str = "%d/%m/%Y",
        delimiter: str = ",",
        encoding: str = "utf-8",
        has_header: bool = False,
    ) -> TabularReader[MatchRecord]:
        """Reader preconfigured with a :class:`MatchRecordDecoder`."""

        return cls(
            MatchRecordDecoder(date_format=date_format),
            delimiter=delimiter,
            encoding=encoding,
            has_header=has_header,
        )

    @property
    def records(self) -> tuple[T, ...]:
        return self._records

    def load(self, path: str | Path) -> tuple[T, ...]:
        """Read ``path`` and decode its rows in source order.

        Raises:
            ResourceIOError: if the file cannot be read.
            DecodeError: on the first row that fails to decode; carries the
                1-based line number.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceIOError(f"Unable to read '{path}': {exc}", path, "read") from exc

        decoded: list[T] = []
        for line_number, line in self._lines(text):
            try:
                decoded.append(self.decoder.decode(line.split(self.delimiter)))
            except DecodeError as exc:
                logger.debug("Decode failed in {} at line {}: {}", path, line_number, exc.message)
                raise exc.at_line(line_number, line) from exc

        self._records = tuple(decoded)
        logger.debug("Loaded {} records from {}", len(self._records), path)
        return self._records

    def _lines(self, text: str) -> list[tuple[int, str]]:
        # only "\n" ends a line; other Unicode separators belong to the field
        lines: list[tuple[int, str]] = []
        for line_number, line in enumerate(text.split("\n"), start=1):
            line = line.removesuffix("\r")
            if line_number == 1 and self.has_header:
                continue
            if not line.strip():
                continue
            lines.append((line_number, line))
        return lines


__all__ = ["TabularReader"]
