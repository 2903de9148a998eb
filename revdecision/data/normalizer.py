"""
Row normalization pipeline producing revenue records for the calculation core.

Plays the ingestion collaborator's mapping role: rows already decoded from a
spreadsheet (one dict per row, keyed by header) are mapped to RevenueRecord
values. Rows that are malformed, ambiguous or non-positive are dropped and
counted, never surfaced as errors to the core.
"""

from typing import Any, Iterable, Mapping, Optional

import structlog

from ..config.defaults import IngestionParams
from ..errors import DataQualityError
from ..utils.time import format_timestamp
from .models import DroppedRow, NormalizationResult, RevenueRecord
from .parsers import parse_revenue_row

logger = structlog.get_logger(__name__)


class RecordNormalizer:
    """
    Maps decoded tabular rows to revenue records.

    Header lookup follows the candidate lists in IngestionParams, tried in
    priority order.
    """

    def __init__(self, params: Optional[IngestionParams] = None):
        self.params = params or IngestionParams()

    def normalize(self, rows: Iterable[Mapping[Any, Any]]) -> NormalizationResult:
        """
        Normalize a batch of rows.

        Args:
            rows: Decoded rows from one or more sheets

        Returns:
            NormalizationResult with records sorted by timestamp
        """
        records: list[RevenueRecord] = []
        dropped: list[DroppedRow] = []

        for index, row in enumerate(rows):
            if not isinstance(row, Mapping):
                dropped.append(DroppedRow(index=index, reason="Row is not a mapping"))
                continue

            try:
                record = parse_revenue_row(
                    row,
                    date_keys=self.params.date_keys,
                    revenue_keys=self.params.revenue_keys,
                )
            except DataQualityError as e:
                logger.debug("Dropping row", row_index=index, reason=str(e))
                dropped.append(DroppedRow(index=index, reason=str(e)))
                continue

            records.append(record)

        records.sort(key=lambda r: r.timestamp)

        if records:
            logger.debug(
                "Records normalized",
                kept=len(records),
                first=format_timestamp(records[0].timestamp),
                last=format_timestamp(records[-1].timestamp),
            )

        if dropped:
            logger.info(
                "Rows dropped during normalization",
                kept=len(records),
                dropped=len(dropped),
            )

        return NormalizationResult(records=tuple(records), dropped=tuple(dropped))

    def normalize_sheets(self, sheets: Mapping[str, Iterable[Mapping[Any, Any]]]) -> NormalizationResult:
        """
        Normalize rows from several named sheets into one sorted result.

        Dropped row indices are counted per sheet; the reason is prefixed
        with the sheet name.
        """
        records: list[RevenueRecord] = []
        dropped: list[DroppedRow] = []

        for sheet_name, rows in sheets.items():
            result = self.normalize(rows)
            records.extend(result.records)
            dropped.extend(
                DroppedRow(index=d.index, reason=f"{sheet_name}: {d.reason}")
                for d in result.dropped
            )

        records.sort(key=lambda r: r.timestamp)
        return NormalizationResult(records=tuple(records), dropped=tuple(dropped))
