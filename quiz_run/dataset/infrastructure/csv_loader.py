"""CSV dataset loader — reads a question table and returns typed QuestionRecord objects."""

import csv
import hashlib
import io
from pathlib import Path
from typing import TypeAlias

from quiz_run.dataset.domain.load_result import DatasetLoadResult
from quiz_run.dataset.domain.observer import DatasetObserver
from quiz_run.dataset.domain.record import QuestionRecord
from quiz_run.dataset.infrastructure.errors import DatasetOpenError, DatasetParseError

# (file line number, fields)
NumberedRow: TypeAlias = tuple[int, list[str]]


class CsvDatasetLoader:
    """Loads a comma-separated question table: a header row, then prompt,answer rows."""

    def __init__(self, observer: DatasetObserver) -> None:
        self._observer = observer

    def load(self, path: str) -> DatasetLoadResult:
        """
        Load all question records from the CSV file at path.

        The first row is the header and is returned as-is without validation.
        Every later row contributes column 0 as the prompt and column 1 as the
        expected answer. Collects ALL row errors before raising a single
        DatasetParseError listing every issue found; no partial dataset is returned.

        Raises:
            DatasetOpenError: if the file cannot be opened or read.
            DatasetParseError: if the file is not valid UTF-8 CSV, has no header
                row, or any data row is malformed.
        """
        self._observer.dataset_loading_started(path=path)

        try:
            raw = self._read_bytes(path=path)
        except OSError as exc:
            reason = f"cannot open file {path}: {exc.strerror or exc}"
            self._observer.dataset_loading_failed(path=path, reason=reason)
            raise DatasetOpenError(reason=reason) from exc

        try:
            rows = self._read_rows(raw=raw)
        except (UnicodeDecodeError, csv.Error) as exc:
            reason = f"invalid CSV: {exc}"
            self._observer.dataset_loading_failed(path=path, reason=reason)
            raise DatasetParseError(reason=reason) from exc

        if not rows:
            reason = "missing header row"
            self._observer.dataset_loading_failed(path=path, reason=reason)
            raise DatasetParseError(reason=reason)

        _, header = rows[0]
        records, errors = self._parse_rows(rows=rows[1:], header_width=len(header))

        if errors:
            reason = "; ".join(errors)
            self._observer.dataset_loading_failed(path=path, reason=reason)
            raise DatasetParseError(reason=reason)

        sha256 = hashlib.sha256(raw).hexdigest()
        self._observer.dataset_loading_completed(
            path=path,
            total_records=len(records),
            sha256=sha256,
        )
        return DatasetLoadResult(header=header, records=records, sha256=sha256)

    def _read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def _read_rows(self, raw: bytes) -> list[NumberedRow]:
        """Decode and split raw bytes into non-blank CSV rows tagged with line numbers."""
        text = raw.decode("utf-8-sig")
        reader = csv.reader(io.StringIO(text, newline=""), strict=True)
        return [(reader.line_num, row) for row in reader if row]

    def _parse_rows(
        self,
        rows: list[NumberedRow],
        header_width: int,
    ) -> tuple[list[QuestionRecord], list[str]]:
        """Parse each data row into a QuestionRecord, collecting errors without aborting early."""
        records: list[QuestionRecord] = []
        errors: list[str] = []

        for line_num, row in rows:
            result = self._parse_row(
                line_num=line_num, row=row, header_width=header_width
            )
            if isinstance(result, str):
                errors.append(result)
            else:
                self._observer.dataset_record_loaded(index=len(records))
                records.append(result)

        return records, errors

    def _parse_row(
        self,
        line_num: int,
        row: list[str],
        header_width: int,
    ) -> QuestionRecord | str:
        """
        Parse a single data row into a QuestionRecord.

        Returns a QuestionRecord on success, or an error string describing the problem.
        """
        if len(row) < 2:
            return f"line {line_num}: expected at least 2 fields, got {len(row)}"

        if len(row) != header_width:
            return (
                f"line {line_num}: wrong number of fields,"
                f" expected {header_width} to match header, got {len(row)}"
            )

        if row[0] == "":
            return f"line {line_num}: empty question prompt"

        return QuestionRecord(prompt=row[0], expected_answer=row[1])
