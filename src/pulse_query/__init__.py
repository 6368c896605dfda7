"""
Pulse Query - Read-Only Query Surface for Market Monitoring Data.

Serves filtered, sorted and paginated listings over in-memory
collections of market data: stocks, cryptocurrencies, news, alerts,
market events, AI insights and influencers.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability (data source is injected)
    - One composable query pipeline shared by every resource
    - Configuration-driven default ordering via YAML

Main Components:
    - domain: Typed entities and query value objects
    - query: Comparator, predicates, pagination and the pipeline
    - filters: Per-resource predicate sets
    - registry: Resource profiles (predicates + sort rules) by kind
    - services: Per-resource query services
    - validation: Raw query parameter parsing and validation
    - api: Request handlers producing the JSON envelope
    - adapters: Data sources and metrics collectors
    - config: Configuration models and loaders

Example:
    >>> from pulse_query.adapters import StaticMarketDataSource
    >>> from pulse_query.api import create_handlers
    >>> handlers = create_handlers(StaticMarketDataSource.from_seed())
    >>> response = handlers.list_news({"category": "crypto", "page": "1", "limit": "5"})
    >>> response.body["count"]
    2

"""

import logging

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Pulse Query.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import pulse_query
        >>> pulse_query.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("pulse_query").setLevel(level)
