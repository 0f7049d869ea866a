"""
Storage utility.

File output for the summary report (text, JSON, HTML) and the rejected-rows log.
"""

import json
import logging
import os
from typing import Dict, List, Sequence

from catalog_report.models.product import RejectedRow
from catalog_report.stages.report import CatalogReport
from catalog_report.utils.rendering import render_html
import config.settings as settings

logger = logging.getLogger(__name__)


class ReportStorage:
    """
    Writes report files into a single output directory.

    Handles:
    - Text report (output/summary_report.txt)
    - JSON export (output/summary_report.json)
    - HTML report (output/summary_report.html)
    - Rejected rows (output/rejected_rows.log)

    Every file is overwritten on each run.
    """

    def __init__(
        self,
        output_dir: str,
        basename: str = settings.REPORT_BASENAME,
        rejected_log_name: str = settings.REJECTED_LOG_NAME
    ):
        """
        Initialize report storage.

        Args:
            output_dir: Directory receiving all report files
            basename: File name stem of the summary report files
            rejected_log_name: File name of the rejected-rows log
        """
        self.output_dir = output_dir
        self.text_path = os.path.join(output_dir, f"{basename}.txt")
        self.json_path = os.path.join(output_dir, f"{basename}.json")
        self.html_path = os.path.join(output_dir, f"{basename}.html")
        self.rejected_path = os.path.join(output_dir, rejected_log_name)

        logger.info(f"Initialized ReportStorage with output_dir={output_dir}")

    def save_report(self, report: CatalogReport) -> Dict[str, str]:
        """
        Save the text, JSON and HTML forms of a report.

        Args:
            report: Assembled report

        Returns:
            Mapping of format name to written path
        """
        self._ensure_output_dir()
        self._write(self.text_path, report.text)
        self._write(self.json_path, json.dumps(report.export, indent=2, ensure_ascii=False) + "\n")
        self._write(self.html_path, render_html(report))
        return {
            "text": self.text_path,
            "json": self.json_path,
            "html": self.html_path
        }

    def save_rejected_rows(self, rejected: Sequence[RejectedRow]) -> str:
        """
        Save one line per rejected row.

        Line format: "<seq>. row <row_number>: <reason> | <raw row as JSON>"

        Args:
            rejected: Rejected rows in rejection order

        Returns:
            Path to the written log
        """
        self._ensure_output_dir()
        self._write(self.rejected_path, format_rejected_rows(rejected))
        logger.info(f"Saved {len(rejected)} rejected rows to {self.rejected_path}")
        return self.rejected_path

    def clear_rejected_rows(self) -> bool:
        """
        Remove a rejected-rows log left in the output directory.

        Returns:
            True if a file was removed
        """
        if not os.path.exists(self.rejected_path):
            return False

        try:
            os.remove(self.rejected_path)
            logger.info(f"Removed stale {self.rejected_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to remove {self.rejected_path}: {e}")
            raise

    def _ensure_output_dir(self) -> None:
        os.makedirs(self.output_dir, exist_ok=True)

    def _write(self, filepath: str, content: str) -> None:
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write(content)
            logger.info(f"Saved {filepath}")
        except OSError as e:
            logger.error(f"Failed to write {filepath}: {e}")
            raise


def format_rejected_rows(rejected: Sequence[RejectedRow]) -> str:
    lines: List[str] = []
    for seq, row in enumerate(rejected, start=1):
        raw = json.dumps(row.raw, ensure_ascii=False)
        lines.append(f"{seq}. row {row.row_number}: {row.reason} | {raw}")
    return "\n".join(lines) + ("\n" if lines else "")


# Design Rationale and Trade-offs:
#
# 1. Why create the output directory on first write instead of in __init__?
#    - A run that ends in EmptyResultError leaves no trace on disk
#    - Trade-off: makedirs is called once per save
#
# 2. Why remove the rejected-rows log on clean runs?
#    - Every file in the output directory describes the latest run only
#    - Trade-off: Earlier rejection details are gone; the application log keeps them
#
# 3. Why log and re-raise write errors?
#    - A partial report set must not be mistaken for a finished one
#    - Trade-off: One failing file fails the run
