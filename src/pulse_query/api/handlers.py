"""
Query Handlers - One Method per Endpoint.

Each handler takes the raw path and query parameters of a request,
validates them, calls the matching service and returns a
HandlerResponse carrying the status code and JSON body.

Error mapping:
    - ValidationError -> 400
    - NotFoundError   -> 404

Error bodies are ``{"success": False, "error": <message>}``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from pulse_query.config.models import QueryConfig
from pulse_query.domain.value_objects import ListQuery, PageResult
from pulse_query.filters import (
    ALERT_FILTERS,
    ASSET_FILTERS,
    EVENT_FILTERS,
    INFLUENCER_FILTERS,
    INSIGHT_FILTERS,
    NEWS_FILTERS,
)
from pulse_query.interfaces.market_data_source import MarketDataSource
from pulse_query.interfaces.metrics_collector import MetricsCollector
from pulse_query.registry.resource_registry import create_default_registry
from pulse_query.services import (
    AlertService,
    AssetService,
    DashboardService,
    EventService,
    InfluencerService,
    InsightService,
    NewsService,
    NotFoundError,
)
from pulse_query.services.event_service import utc_now
from pulse_query.validation import RequestValidator, ValidationError

logger = logging.getLogger(__name__)

Params = Mapping[str, Any]
ListRunner = Callable[[ListQuery], PageResult]

CRYPTO_FILTERS = tuple(name for name in ASSET_FILTERS if name != "sector")
CRITICAL_ALERT_FILTERS = ("asset", "type", "assetType")


def _without(names: Iterable[str], excluded: str) -> Tuple[str, ...]:
    return tuple(name for name in names if name != excluded)


@dataclass(frozen=True)
class HandlerResponse:
    """Status code plus JSON-compatible body."""

    status_code: int
    body: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class QueryHandlers:
    """Request handlers for every read endpoint."""

    def __init__(
        self,
        assets: AssetService,
        news: NewsService,
        alerts: AlertService,
        events: EventService,
        insights: InsightService,
        influencers: InfluencerService,
        dashboard: DashboardService,
        validator: RequestValidator,
    ) -> None:
        self.assets = assets
        self.news = news
        self.alerts = alerts
        self.events = events
        self.insights = insights
        self.influencers = influencers
        self.dashboard = dashboard
        self.validator = validator

    # -------------------------------------------------------------------------
    # Assets
    # -------------------------------------------------------------------------

    def list_assets(self, params: Params) -> HandlerResponse:
        return self._list(
            "list_assets", params, ASSET_FILTERS, self.assets.list_assets
        )

    def list_stocks(self, params: Params) -> HandlerResponse:
        return self._list(
            "list_stocks", params, ASSET_FILTERS, self.assets.list_stocks
        )

    def list_crypto(self, params: Params) -> HandlerResponse:
        return self._list(
            "list_crypto", params, CRYPTO_FILTERS, self.assets.list_crypto
        )

    def get_stock(self, symbol: str) -> HandlerResponse:
        def action() -> Dict[str, Any]:
            stock = self.assets.get_stock(self.validator.validate_symbol(symbol))
            return {"success": True, "data": stock.to_record()}

        return self._respond("get_stock", action)

    def get_crypto(self, symbol: str) -> HandlerResponse:
        def action() -> Dict[str, Any]:
            crypto = self.assets.get_crypto(self.validator.validate_symbol(symbol))
            return {"success": True, "data": crypto.to_record()}

        return self._respond("get_crypto", action)

    def get_price_history(self, symbol: str, params: Params) -> HandlerResponse:
        def action() -> Dict[str, Any]:
            self.validator.validate_symbol(symbol)
            start, end = self.validator.parse_date_range(
                params.get("startDate"), params.get("endDate")
            )
            history = self.assets.get_price_history(symbol, start, end)
            return {"success": True, "count": len(history), "data": history}

        return self._respond("get_price_history", action)

    def get_market_stats(self) -> HandlerResponse:
        return self._respond(
            "get_market_stats",
            lambda: {"success": True, "data": self.assets.get_market_stats()},
        )

    # -------------------------------------------------------------------------
    # News
    # -------------------------------------------------------------------------

    def list_news(self, params: Params) -> HandlerResponse:
        return self._list("list_news", params, NEWS_FILTERS, self.news.list_news)

    def list_news_by_asset(self, symbol: str, params: Params) -> HandlerResponse:
        def run(query: ListQuery) -> PageResult:
            self.validator.validate_symbol(symbol)
            return self.news.list_news_by_asset(symbol, query)

        return self._list(
            "list_news_by_asset", params, _without(NEWS_FILTERS, "asset"), run
        )

    def list_news_by_category(self, category: str, params: Params) -> HandlerResponse:
        def run(query: ListQuery) -> PageResult:
            value = self.validator.validate_enum("category", category)
            return self.news.list_news_by_category(value, query)

        return self._list(
            "list_news_by_category", params, _without(NEWS_FILTERS, "category"), run
        )

    def get_news_stats(self) -> HandlerResponse:
        return self._respond(
            "get_news_stats",
            lambda: {"success": True, "data": self.news.get_news_stats()},
        )

    # -------------------------------------------------------------------------
    # Alerts
    # -------------------------------------------------------------------------

    def list_alerts(self, params: Params) -> HandlerResponse:
        return self._list("list_alerts", params, ALERT_FILTERS, self.alerts.list_alerts)

    def list_alerts_by_severity(self, severity: str, params: Params) -> HandlerResponse:
        def run(query: ListQuery) -> PageResult:
            value = self.validator.validate_enum("severity", severity)
            return self.alerts.list_alerts_by_severity(value, query)

        return self._list(
            "list_alerts_by_severity", params, _without(ALERT_FILTERS, "severity"), run
        )

    def list_alerts_by_asset(self, symbol: str, params: Params) -> HandlerResponse:
        def run(query: ListQuery) -> PageResult:
            self.validator.validate_symbol(symbol)
            return self.alerts.list_alerts_by_asset(symbol, query)

        return self._list(
            "list_alerts_by_asset", params, _without(ALERT_FILTERS, "asset"), run
        )

    def list_critical_alerts(self, params: Params) -> HandlerResponse:
        return self._list(
            "list_critical_alerts",
            params,
            CRITICAL_ALERT_FILTERS,
            self.alerts.list_critical_alerts,
            allow_sort=False,
        )

    def get_alert_stats(self) -> HandlerResponse:
        return self._respond(
            "get_alert_stats",
            lambda: {"success": True, "data": self.alerts.get_alert_stats()},
        )

    # -------------------------------------------------------------------------
    # Events, insights, influencers, dashboard
    # -------------------------------------------------------------------------

    def list_events(self, params: Params) -> HandlerResponse:
        return self._list("list_events", params, EVENT_FILTERS, self.events.list_events)

    def list_upcoming_events(self, params: Params) -> HandlerResponse:
        return self._list(
            "list_upcoming_events", params, EVENT_FILTERS, self.events.list_upcoming_events
        )

    def list_insights(self, params: Params) -> HandlerResponse:
        return self._list(
            "list_insights", params, INSIGHT_FILTERS, self.insights.list_insights
        )

    def list_influencers(self, params: Params) -> HandlerResponse:
        return self._list(
            "list_influencers",
            params,
            INFLUENCER_FILTERS,
            self.influencers.list_influencers,
        )

    def get_dashboard(self) -> HandlerResponse:
        return self._respond(
            "get_dashboard",
            lambda: {"success": True, "data": self.dashboard.get_dashboard()},
        )

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------

    def _list(
        self,
        operation: str,
        params: Params,
        allowed_filters: Iterable[str],
        run: ListRunner,
        allow_sort: bool = True,
    ) -> HandlerResponse:
        def action() -> Dict[str, Any]:
            query = self.validator.parse_list_query(
                params, allowed_filters, allow_sort=allow_sort
            )
            return run(query).to_response()

        return self._respond(operation, action)

    def _respond(
        self,
        operation: str,
        action: Callable[[], Dict[str, Any]],
    ) -> HandlerResponse:
        """Run a handler body and map known errors to status codes."""
        try:
            return HandlerResponse(200, action())
        except ValidationError as e:
            logger.info(f"{operation}: rejected ({e.field}): {e.message}")
            return HandlerResponse(e.status_code, {"success": False, "error": e.message})
        except NotFoundError as e:
            logger.info(f"{operation}: not found: {e.message}")
            return HandlerResponse(e.status_code, {"success": False, "error": e.message})


def create_handlers(
    data_source: MarketDataSource,
    config: Optional[QueryConfig] = None,
    metrics_collector: Optional[MetricsCollector] = None,
    clock: Callable[[], datetime] = utc_now,
) -> QueryHandlers:
    """
    Factory function to wire services and handlers.

    Args:
        data_source: Read-only served collections
        config: Query configuration (defaults if omitted)
        metrics_collector: Optional metrics sink for all pipelines
        clock: Current-time source for upcoming events

    Returns:
        Configured QueryHandlers
    """
    config = config or QueryConfig()
    registry = create_default_registry(config, metrics_collector=metrics_collector)

    assets = AssetService(data_source, registry)
    news = NewsService(data_source, registry)
    alerts = AlertService(data_source, registry)
    events = EventService(data_source, registry, clock=clock)
    insights = InsightService(data_source, registry)

    return QueryHandlers(
        assets=assets,
        news=news,
        alerts=alerts,
        events=events,
        insights=insights,
        influencers=InfluencerService(data_source, registry),
        dashboard=DashboardService(assets, news, alerts, events, insights),
        validator=RequestValidator(config),
    )
