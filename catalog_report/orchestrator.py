"""
Pipeline Orchestrator.

Coordinates one catalog report run:
Load -> Validate-partition -> Aggregate -> Format -> Persist.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from catalog_report.errors import EmptyResultError
from catalog_report.models.product import Product, RejectedRow
from catalog_report.stages.aggregation import AggregateResult, aggregate
from catalog_report.stages.ingestion import CatalogSource
from catalog_report.stages.parsing import RecordParser
from catalog_report.stages.report import CatalogReport, ReportAssembler
from catalog_report.utils.storage import ReportStorage
import config.settings as settings

logger = logging.getLogger(__name__)


@dataclass
class PipelineRun:
    """
    Everything one run produced. Owned by the caller, never shared across runs.
    """
    products: List[Product]
    rejected: List[RejectedRow]
    result: AggregateResult
    report: CatalogReport
    written: Dict[str, str] = field(default_factory=dict)  # format -> path


class ReportPipeline:
    """
    Orchestrates a single-pass catalog report.

    Coordinates:
    1. Ingestion -> 2. Parsing (valid / rejected partition)
    -> 3. Aggregation -> 4. Report assembly -> 5. File output
    """

    def __init__(
        self,
        output_dir: str = str(settings.OUTPUT_ROOT),
        delimiter: str = settings.CSV_DELIMITER,
        write_rejected_log: bool = settings.WRITE_REJECTED_LOG,
        parser: Optional[RecordParser] = None
    ):
        """
        Initialize pipeline orchestrator.

        Args:
            output_dir: Directory for report files
            delimiter: Field delimiter of the catalog source
            write_rejected_log: Also write the rejected-rows log when rows were skipped
            parser: Record parser; defaults to the configured column names
        """
        self.delimiter = delimiter
        self.write_rejected_log = write_rejected_log

        self.parser = parser or RecordParser()
        self.assembler = ReportAssembler()
        self.storage = ReportStorage(output_dir)

    def run(
        self,
        input_path: str,
        min_price: float = settings.DEFAULT_MIN_PRICE,
        top_n: int = settings.DEFAULT_TOP_N,
        scope: str = settings.AGGREGATION_SCOPE
    ) -> PipelineRun:
        """
        Run the pipeline once over input_path.

        Args:
            input_path: Catalog file to read
            min_price: Exclusive price threshold for the in-stock filter
            top_n: Number of most expensive products to report
            scope: Reference set for category counts and top-N ("all" or "filtered")

        Returns:
            PipelineRun with the partitioned rows, views, report and written paths

        Raises:
            SourceReadError: If the catalog cannot be read
            EmptyResultError: If no row passes validation; nothing is written
        """
        # STAGE 1-2: Ingestion + parsing
        products, rejected = self.load(input_path)

        if not products:
            logger.error(f"No valid products in {input_path}, skipping report")
            raise EmptyResultError(str(input_path), rejected_count=len(rejected))

        # STAGE 3: Aggregation
        result = aggregate(products, min_price=min_price, n=top_n, scope=scope)

        # STAGE 4: Report assembly
        report = self.assembler.assemble(result, rejected_count=len(rejected))

        # STAGE 5: Persistence
        written = self.storage.save_report(report)
        if rejected and self.write_rejected_log:
            written["rejected"] = self.storage.save_rejected_rows(rejected)
        else:
            # No stale log from an earlier run may outlive this one
            self.storage.clear_rejected_rows()

        logger.info(
            f"Run complete: {len(products)} products, {len(rejected)} rejected, "
            f"{len(written)} files written"
        )

        return PipelineRun(
            products=products,
            rejected=rejected,
            result=result,
            report=report,
            written=written
        )

    def load(self, input_path: str):
        """
        Stream the source through the parser.

        Returns:
            Tuple of (valid products, rejected rows), both in source order
        """
        source = CatalogSource(input_path, delimiter=self.delimiter)

        products: List[Product] = []
        rejected: List[RejectedRow] = []

        for row_number, raw in enumerate(
            source.iter_rows(required_columns=self.parser.required_columns),
            start=1
        ):
            outcome = self.parser.parse(raw, row_number=row_number)
            if outcome.ok:
                products.append(outcome.product)
            else:
                logger.warning(
                    f"Skipping malformed row {row_number}: {outcome.rejected.reason}"
                )
                rejected.append(outcome.rejected)

        logger.info(f"Parsed {len(products)} valid products, {len(rejected)} rejected")
        return products, rejected


# Design Rationale and Trade-offs:
#
# 1. Why do product/rejected lists live inside run()?
#    - Each run starts from empty collections; nothing persists between runs
#    - Trade-off: A second run re-reads the whole file
#
# 2. Why check for zero products before aggregating?
#    - An empty report would overwrite the last good one
#    - Trade-off: The output directory keeps the previous run's files
#
# 3. Why return PipelineRun instead of printing here?
#    - Console output belongs to main.py; tests inspect the run directly
#    - Trade-off: Callers handle display themselves
