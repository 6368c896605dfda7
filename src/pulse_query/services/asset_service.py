"""
Asset Service - Stocks and Cryptocurrencies.

Listings, symbol lookups, price history and market statistics.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from pulse_query.domain.entities import Asset, Crypto, Stock
from pulse_query.domain.value_objects import ListQuery, PageResult
from pulse_query.services.base import QueryService, to_records
from pulse_query.services.errors import NotFoundError

logger = logging.getLogger(__name__)


class AssetService(QueryService):
    """Query operations over stocks and cryptocurrencies."""

    resource = "assets"

    def list_stocks(self, query: Optional[ListQuery] = None) -> PageResult:
        return self._run(to_records(self.data_source.stocks), query)

    def list_crypto(self, query: Optional[ListQuery] = None) -> PageResult:
        return self._run(to_records(self.data_source.cryptocurrencies), query)

    def list_assets(self, query: Optional[ListQuery] = None) -> PageResult:
        """Stocks followed by cryptocurrencies, each tagged with ``assetType``."""
        return self._run(to_records(self._all_assets()), query)

    def list_gainers(self, query: Optional[ListQuery] = None) -> PageResult:
        """Assets with a strictly positive daily change."""
        gainers = [a for a in self._all_assets() if a.change_percent > 0]
        return self._run(to_records(gainers), query)

    def list_losers(self, query: Optional[ListQuery] = None) -> PageResult:
        """Assets with a strictly negative daily change."""
        losers = [a for a in self._all_assets() if a.change_percent < 0]
        return self._run(to_records(losers), query)

    def get_stock(self, symbol: str) -> Stock:
        """
        Look up a stock by symbol (case-insensitive).

        Raises:
            NotFoundError: If no stock has the symbol
        """
        stock = _find(self.data_source.stocks, symbol)
        if stock is None:
            logger.info(f"Stock not found: {symbol}")
            raise NotFoundError("Stock not found")
        return stock

    def get_crypto(self, symbol: str) -> Crypto:
        """
        Look up a cryptocurrency by symbol (case-insensitive).

        Raises:
            NotFoundError: If no cryptocurrency has the symbol
        """
        crypto = _find(self.data_source.cryptocurrencies, symbol)
        if crypto is None:
            logger.info(f"Cryptocurrency not found: {symbol}")
            raise NotFoundError("Cryptocurrency not found")
        return crypto

    def get_price_history(
        self,
        symbol: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Dict[str, Any]]:
        """
        Price points of one asset, oldest first.

        Args:
            symbol: Stock or crypto symbol (case-insensitive)
            start: Inclusive lower bound (naive values are taken as UTC)
            end: Inclusive upper bound (naive values are taken as UTC)

        Raises:
            NotFoundError: If the symbol is unknown
        """
        asset = _find(self._all_assets(), symbol)
        if asset is None:
            logger.info(f"Price history not found: {symbol}")
            raise NotFoundError("Asset or price history not found")

        start = _as_utc(start)
        end = _as_utc(end)
        points = [
            point
            for point in asset.price_history
            if (start is None or _as_utc(point.timestamp) >= start)
            and (end is None or _as_utc(point.timestamp) <= end)
        ]
        return to_records(points)

    def get_market_stats(self) -> Dict[str, Any]:
        """Totals, gainers/losers and average change over all assets."""
        assets = self._all_assets()
        count = len(assets)
        return {
            "totalAssets": count,
            "totalStocks": len(self.data_source.stocks),
            "totalCrypto": len(self.data_source.cryptocurrencies),
            "totalMarketCap": sum(a.market_cap for a in assets),
            "totalVolume": sum(a.volume for a in assets),
            "gainers": sum(1 for a in assets if a.change_percent > 0),
            "losers": sum(1 for a in assets if a.change_percent < 0),
            "averageChangePercent": (
                sum(a.change_percent for a in assets) / count if count else 0.0
            ),
        }

    def _all_assets(self) -> List[Asset]:
        return [*self.data_source.stocks, *self.data_source.cryptocurrencies]


def _find(assets: Sequence[Asset], symbol: str) -> Optional[Asset]:
    wanted = symbol.lower()
    for asset in assets:
        if asset.symbol.lower() == wanted:
            return asset
    return None


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
