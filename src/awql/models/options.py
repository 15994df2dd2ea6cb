# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Report formatting options and connection identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..common.constants import API_VERSION


@dataclass(frozen=True)
class Identity:
    """
    Account the reports are downloaded for.

    :param account_id: AdWords client customer id, e.g. ``"123-456-7890"``.
    :type account_id: str
    :param api_version: AdWords API version, e.g. ``"v201607"``.
    :type api_version: str
    :param developer_token: Developer token sent with every report request.
    :type developer_token: str
    """

    account_id: str
    developer_token: str
    api_version: str = API_VERSION


@dataclass(frozen=True)
class ReportOptions:
    """
    Report download flags sent as HTTP headers with each report request.

    Report header and summary rows are skipped by default so that the payload
    only contains the column header followed by data rows.
    """

    version: str = API_VERSION
    skip_report_header: bool = True
    skip_column_header: bool = False
    skip_report_summary: bool = True
    include_zero_impressions: bool = False
    use_raw_enum_values: bool = False

    def headers(self) -> Dict[str, str]:
        """Serialize the boolean flags as ``"true"``/``"false"`` header values."""
        flags = {
            "includeZeroImpressions": self.include_zero_impressions,
            "skipColumnHeader": self.skip_column_header,
            "skipReportHeader": self.skip_report_header,
            "skipReportSummary": self.skip_report_summary,
            "useRawEnumValues": self.use_raw_enum_values,
        }
        return {k: "true" if v else "false" for k, v in flags.items()}


__all__ = ["Identity", "ReportOptions"]
