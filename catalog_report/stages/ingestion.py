"""
Catalog Source.

Streams raw rows out of a delimited product catalog file.
Every cell is kept as a string; validation happens in the parser.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

import pandas as pd

from catalog_report.errors import SourceReadError
import config.settings as settings

logger = logging.getLogger(__name__)


class CatalogSource:
    """
    Reads a delimited catalog file chunk by chunk.

    Rows are yielded in file order as plain dicts (column name -> string).
    Empty cells come through as "", cells missing from short rows as None.
    Rows with more fields than the header (including a trailing delimiter)
    keep only the header's columns.
    """

    def __init__(
        self,
        path: Union[str, Path],
        delimiter: str = settings.CSV_DELIMITER,
        encoding: str = settings.CSV_ENCODING,
        chunk_size: int = settings.READ_CHUNK_SIZE
    ):
        """
        Initialize catalog source.

        Args:
            path: Path to the catalog file
            delimiter: Field delimiter
            encoding: Text encoding of the file
            chunk_size: Number of rows pulled from the file per read
        """
        self.path = Path(path)
        self.delimiter = delimiter
        self.encoding = encoding
        self.chunk_size = chunk_size
        self._width = 0
        self._overflow_rows = 0

    def iter_rows(
        self,
        required_columns: Iterable[str] = ()
    ) -> Iterator[Dict[str, Optional[str]]]:
        """
        Yield raw rows from the source.

        Args:
            required_columns: Columns to check the header against; missing
                ones are logged, the rows still flow through

        Yields:
            One dict per data row

        Raises:
            SourceReadError: If the file cannot be opened, decoded or tokenized
        """
        logger.info(f"Reading catalog from {self.path}")
        total = 0
        self._overflow_rows = 0

        try:
            columns = self._read_header()
            self._check_header(columns, required_columns)
            self._width = len(columns)

            with pd.read_csv(
                self.path,
                sep=self.delimiter,
                encoding=self.encoding,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                engine="python",
                index_col=False,
                on_bad_lines=self._on_bad_line,
                chunksize=self.chunk_size
            ) as reader:
                for chunk_index, chunk in enumerate(reader):
                    for record in chunk.to_dict(orient="records"):
                        total += 1
                        yield {
                            str(key): value if isinstance(value, str) else None
                            for key, value in record.items()
                        }

                    logger.debug(f"Read chunk {chunk_index} ({len(chunk)} rows)")

        except pd.errors.EmptyDataError:
            logger.warning(f"Catalog {self.path} is empty")
            return
        except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
            logger.error(f"Failed to read catalog {self.path}: {e}")
            raise SourceReadError(str(self.path), e) from e

        if self._overflow_rows:
            logger.warning(
                f"{self._overflow_rows} row(s) in {self.path} had more fields than "
                f"the header; extra fields were dropped"
            )
        logger.info(f"Read {total} rows from {self.path}")

    def _read_header(self) -> List[str]:
        header = pd.read_csv(
            self.path,
            sep=self.delimiter,
            encoding=self.encoding,
            dtype=str,
            engine="python",
            index_col=False,
            nrows=0
        )
        return [str(c) for c in header.columns]

    def _on_bad_line(self, fields: List[str]) -> List[str]:
        """Keep an over-long row, cut back to the header's columns."""
        self._overflow_rows += 1
        return fields[:self._width]

    def _check_header(self, columns: Iterable[str], required_columns: Iterable[str]) -> None:
        present = {str(c) for c in columns}
        missing = [c for c in required_columns if c not in present]
        if missing:
            logger.warning(
                f"Catalog {self.path} is missing column(s) {missing}; "
                f"affected rows will be rejected"
            )


# Design Rationale and Trade-offs:
#
# 1. Why read with chunksize?
#    - Rows reach the parser as the file is read; only valid products are kept
#    - Trade-off: Slightly slower than one read_csv call for small files
#
# 2. Why the python engine with index_col=False?
#    - A trailing delimiter must not turn the name column into an index
#    - on_bad_lines callables are only supported by the python engine
#    - Trade-off: Slower tokenizer than the C engine
#
# 3. Why cut over-long rows back instead of rejecting them?
#    - The declared columns are still intact; extra cells carry no catalog field
#    - Trade-off: Extra cells are lost (a warning reports how many rows)
#
# 4. Why is an empty file not a SourceReadError?
#    - The file was read fine; it simply has no products
#    - Trade-off: Reported as an empty result rather than a read failure
