"""
Alert Service - Merged Asset and Global Alerts.

Alerts embedded in stocks and cryptocurrencies are tagged with their
owning asset (``assetId``) and kind (``assetType`` stock/crypto);
global alerts are tagged ``assetType = global``. The merged collection
is validated as a discriminated union before it is queried.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from pydantic import TypeAdapter

from pulse_query.domain.entities import Asset, TaggedAlert
from pulse_query.domain.value_objects import ListQuery, PageResult
from pulse_query.services.base import QueryService, to_records

logger = logging.getLogger(__name__)

_TAGGED_ALERTS = TypeAdapter(List[TaggedAlert])


class AlertService(QueryService):
    """Query operations over the merged alert collection."""

    resource = "alerts"

    def merged_alerts(self, per_asset: Optional[int] = None) -> List[TaggedAlert]:
        """
        Stock alerts, then crypto alerts, then global alerts.

        Args:
            per_asset: Keep only the first N embedded alerts of each asset
        """
        raw: List[Dict[str, Any]] = []
        raw.extend(_tag_embedded(self.data_source.stocks, "stock", per_asset))
        raw.extend(_tag_embedded(self.data_source.cryptocurrencies, "crypto", per_asset))
        for alert in self.data_source.global_alerts:
            raw.append({**alert.model_dump(by_alias=True), "assetType": "global"})
        return _TAGGED_ALERTS.validate_python(raw)

    def list_alerts(self, query: Optional[ListQuery] = None) -> PageResult:
        return self._run(to_records(self.merged_alerts()), query)

    def list_alerts_by_severity(
        self, severity: str, query: Optional[ListQuery] = None
    ) -> PageResult:
        return self._run(to_records(self.merged_alerts()), query, severity=severity)

    def list_alerts_by_asset(
        self, symbol: str, query: Optional[ListQuery] = None
    ) -> PageResult:
        """Alerts owned by the asset or listing it among affected assets."""
        return self._run(to_records(self.merged_alerts()), query, asset=symbol)

    def list_critical_alerts(self, query: Optional[ListQuery] = None) -> PageResult:
        return self.list_alerts_by_severity("critical", query)

    def list_active_alerts(self, query: Optional[ListQuery] = None) -> PageResult:
        """Each asset's leading alert plus every global alert."""
        return self._run(to_records(self.merged_alerts(per_asset=1)), query)

    def get_alert_stats(self) -> Dict[str, Any]:
        """
        Counts over the merged collection.

        ``averageAccuracy`` averages the alerts that carry an AI accuracy
        score and is 0 when none does.
        """
        records = to_records(self.merged_alerts())
        accuracies = [
            r["aiCoreAccuracy"] for r in records if r.get("aiCoreAccuracy") is not None
        ]
        return {
            "total": len(records),
            "bySeverity": dict(Counter(r["severity"] for r in records)),
            "byType": dict(Counter(r["type"] for r in records)),
            "byAssetType": dict(Counter(r["assetType"] for r in records)),
            "actionRequired": sum(1 for r in records if r.get("actionRequired")),
            "averageAccuracy": sum(accuracies) / len(accuracies) if accuracies else 0,
        }


def _tag_embedded(
    assets: Sequence[Asset],
    asset_type: str,
    per_asset: Optional[int] = None,
) -> List[Dict[str, Any]]:
    return [
        {
            **alert.model_dump(by_alias=True),
            "assetId": asset.symbol,
            "assetType": asset_type,
        }
        for asset in assets
        for alert in asset.alerts[:per_asset]
    ]
