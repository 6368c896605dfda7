"""
Seed Market Data.

Raw demo collections used by StaticMarketDataSource.from_seed().
Timestamps are stored as offsets in seconds relative to "now"
(negative = past, positive = future) and resolved at load time.

Price history is described by a generator profile per asset:
    (base, spread, wave_amplitude, wave_period, volume_base, volume_spread)
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

HOUR = 3600
DAY = 86400

HISTORY_DAYS = 30

PriceProfile = Tuple[float, float, float, float, int, int]


STOCKS: List[Dict[str, Any]] = [
    {
        "id": "AAPL",
        "symbol": "AAPL",
        "name": "Apple Inc.",
        "sector": "Technology",
        "current_price": 178.45,
        "change_percent": 2.34,
        "change_amount": 4.08,
        "volume": 52345678,
        "market_cap": 2800000000000,
        "profile": (174.50, 10.0, -5.0, 5.0, 40000000, 10000000),
        "alerts": [
            ("alert_aapl_1", "price_threshold", "high",
             "AAPL crossed $175 resistance level", -1 * HOUR, "positive"),
            ("alert_aapl_2", "volume_surge", "medium",
             "Unusual volume spike detected: 125% above average", -2 * HOUR, "neutral"),
        ],
        "sentiment": (0.72, 0.68, 0.76, 0.71),
        "key_metrics": {"peRatio": 28.5, "eps": 6.26, "dividendYield": 0.52, "beta": 1.26},
    },
    {
        "id": "TSLA",
        "symbol": "TSLA",
        "name": "Tesla Inc.",
        "sector": "Automotive",
        "current_price": 248.90,
        "change_percent": -1.23,
        "change_amount": -3.10,
        "volume": 98765432,
        "market_cap": 790000000000,
        "profile": (252.00, 15.0, -8.0, 4.0, 80000000, 15000000),
        "alerts": [
            ("alert_tsla_1", "news_event", "high",
             "Major news: Production update announcement scheduled", -1800, "positive"),
            ("alert_tsla_2", "technical_pattern", "medium",
             "Bearish divergence detected on RSI indicator", -3 * HOUR, "negative"),
        ],
        "sentiment": (0.58, 0.52, 0.61, 0.60),
        "key_metrics": {"peRatio": 62.3, "eps": 3.99, "dividendYield": 0, "beta": 2.15},
    },
    {
        "id": "NVDA",
        "symbol": "NVDA",
        "name": "NVIDIA Corporation",
        "sector": "Technology",
        "current_price": 485.20,
        "change_percent": 3.45,
        "change_amount": 16.20,
        "volume": 65432109,
        "market_cap": 1200000000000,
        "profile": (469.00, 20.0, 10.0, 3.0, 50000000, 12000000),
        "alerts": [
            ("alert_nvda_1", "ai_core_prediction", "critical",
             "AI Core: 94% confidence in positive earnings surprise", -5400, "positive"),
            ("alert_nvda_2", "insider_activity", "high",
             "Multiple insider buys detected in past 48 hours", -1 * DAY, "positive"),
        ],
        "sentiment": (0.85, 0.82, 0.88, 0.84),
        "key_metrics": {"peRatio": 65.8, "eps": 7.38, "dividendYield": 0.03, "beta": 1.68},
    },
    {
        "id": "MSFT",
        "symbol": "MSFT",
        "name": "Microsoft Corporation",
        "sector": "Technology",
        "current_price": 378.25,
        "change_percent": 0.89,
        "change_amount": 3.35,
        "volume": 34567890,
        "market_cap": 2800000000000,
        "profile": (374.90, 8.0, -3.0, 6.0, 30000000, 8000000),
        "alerts": [
            ("alert_msft_1", "regulatory_news", "medium",
             "Regulatory approval for cloud services expansion", -4 * HOUR, "positive"),
        ],
        "sentiment": (0.70, 0.67, 0.73, 0.69),
        "key_metrics": {"peRatio": 32.4, "eps": 11.67, "dividendYield": 0.73, "beta": 0.91},
    },
    {
        "id": "GOOGL",
        "symbol": "GOOGL",
        "name": "Alphabet Inc.",
        "sector": "Technology",
        "current_price": 142.80,
        "change_percent": -0.45,
        "change_amount": -0.65,
        "volume": 43210987,
        "market_cap": 1800000000000,
        "profile": (143.45, 6.0, -4.0, 5.0, 35000000, 10000000),
        "alerts": [
            ("alert_googl_1", "competitor_news", "low",
             "Competitor launched similar AI product", -6 * HOUR, "negative"),
        ],
        "sentiment": (0.65, 0.63, 0.67, 0.64),
        "key_metrics": {"peRatio": 24.8, "eps": 5.76, "dividendYield": 0, "beta": 1.05},
    },
]


CRYPTOCURRENCIES: List[Dict[str, Any]] = [
    {
        "id": "BTC",
        "symbol": "BTC",
        "name": "Bitcoin",
        "current_price": 43250.50,
        "change_percent": 1.89,
        "change_amount": 801.25,
        "volume": 18500000000,
        "market_cap": 850000000000,
        "profile": (42449.25, 2000.0, -800.0, 2.0, 15000000000, 5000000000),
        "alerts": [
            ("alert_btc_1", "ai_core_prediction", "critical",
             "AI Core: 91% confidence in bullish breakout pattern", -2700, "positive"),
            ("alert_btc_2", "whale_activity", "high",
             "Large wallet accumulation: 5,000+ BTC moved to cold storage", -1 * HOUR, "positive"),
            ("alert_btc_3", "regulatory_news", "medium",
             "Regulatory clarity announcement expected this week", -2 * HOUR, "neutral"),
        ],
        "sentiment": (0.78, 0.75, 0.80, 0.79),
        "key_metrics": {
            "circulatingSupply": 19650000,
            "maxSupply": 21000000,
            "marketDominance": 52.3,
            "hashRate": 450,
        },
    },
    {
        "id": "ETH",
        "symbol": "ETH",
        "name": "Ethereum",
        "current_price": 2650.75,
        "change_percent": 2.34,
        "change_amount": 60.50,
        "volume": 8200000000,
        "market_cap": 318000000000,
        "profile": (2590.25, 150.0, -60.0, 2.5, 7000000000, 2000000000),
        "alerts": [
            ("alert_eth_1", "network_activity", "high",
             "Network upgrade: Gas fees decreased by 40%", -4500, "positive"),
            ("alert_eth_2", "defi_activity", "medium",
             "Total Value Locked (TVL) reached new all-time high", -9000, "positive"),
        ],
        "sentiment": (0.74, 0.71, 0.77, 0.73),
        "key_metrics": {
            "circulatingSupply": 120200000,
            "maxSupply": None,
            "marketDominance": 18.7,
            "gasPrice": 25,
        },
    },
    {
        "id": "SOL",
        "symbol": "SOL",
        "name": "Solana",
        "current_price": 98.45,
        "change_percent": -0.67,
        "change_amount": -0.66,
        "volume": 1200000000,
        "market_cap": 45000000000,
        "profile": (99.11, 8.0, -4.0, 3.0, 1000000000, 400000000),
        "alerts": [
            ("alert_sol_1", "technical_pattern", "medium",
             "Support level holding at $95 - potential reversal signal", -6300, "neutral"),
        ],
        "sentiment": (0.62, 0.59, 0.65, 0.61),
        "key_metrics": {
            "circulatingSupply": 457000000,
            "maxSupply": None,
            "marketDominance": 2.8,
            "transactionsPerSecond": 3000,
        },
    },
]


NEWS: List[Dict[str, Any]] = [
    {
        "id": "news_1",
        "title": "Federal Reserve Holds Interest Rates Steady, Signals Potential Cuts",
        "source": "Financial Times",
        "category": "macro",
        "offset": -2 * HOUR,
        "impact": "high",
        "affected_assets": ["BTC", "ETH", "AAPL", "MSFT"],
        "summary": (
            "The Federal Reserve announced it will maintain current interest rates "
            "while hinting at potential cuts in the coming quarters. This decision has "
            "significant implications for both traditional equities and cryptocurrencies."
        ),
        "sentiment": 0.65,
        "tags": ["federal-reserve", "interest-rates", "macro", "policy"],
    },
    {
        "id": "news_2",
        "title": "NVIDIA Announces Breakthrough in AI Chip Technology",
        "source": "TechCrunch",
        "category": "technology",
        "offset": -5400,
        "impact": "critical",
        "affected_assets": ["NVDA", "TSLA"],
        "summary": (
            "NVIDIA unveiled its next-generation AI chips with 3x performance "
            "improvements, triggering significant market movement in tech stocks."
        ),
        "sentiment": 0.88,
        "tags": ["nvidia", "ai", "technology", "earnings"],
    },
    {
        "id": "news_3",
        "title": "Bitcoin ETF Sees Record Inflows Despite Market Volatility",
        "source": "CoinDesk",
        "category": "crypto",
        "offset": -1 * HOUR,
        "impact": "high",
        "affected_assets": ["BTC"],
        "summary": (
            "Institutional investors continue to pour money into Bitcoin ETFs, with "
            "net inflows reaching $2.5 billion this week alone."
        ),
        "sentiment": 0.82,
        "tags": ["bitcoin", "etf", "institutional", "crypto"],
    },
    {
        "id": "news_4",
        "title": "Major Exchange Reports Unusual Trading Activity",
        "source": "Bloomberg",
        "category": "market",
        "offset": -1800,
        "impact": "medium",
        "affected_assets": ["BTC", "ETH", "SOL"],
        "summary": (
            "Cryptocurrency exchange detected and prevented suspicious trading "
            "patterns, maintaining market integrity."
        ),
        "sentiment": 0.45,
        "tags": ["exchange", "security", "trading", "crypto"],
    },
    {
        "id": "news_5",
        "title": "Tesla Reports Strong Q4 Deliveries, Exceeds Expectations",
        "source": "Reuters",
        "category": "earnings",
        "offset": -9000,
        "impact": "high",
        "affected_assets": ["TSLA"],
        "summary": (
            "Tesla delivered 485,000 vehicles in Q4, surpassing analyst estimates "
            "and demonstrating strong demand."
        ),
        "sentiment": 0.79,
        "tags": ["tesla", "earnings", "deliveries", "automotive"],
    },
    {
        "id": "news_6",
        "title": "Apple Faces Antitrust Investigation in EU",
        "source": "Wall Street Journal",
        "category": "regulatory",
        "offset": -3 * HOUR,
        "impact": "medium",
        "affected_assets": ["AAPL"],
        "summary": (
            "European regulators launch new antitrust probe into Apple's App Store "
            "practices and payment systems."
        ),
        "sentiment": 0.42,
        "tags": ["apple", "antitrust", "regulatory", "eu"],
    },
    {
        "id": "news_7",
        "title": "Ethereum Layer 2 Solutions See Massive Adoption Surge",
        "source": "The Block",
        "category": "crypto",
        "offset": -4500,
        "impact": "high",
        "affected_assets": ["ETH"],
        "summary": (
            "Ethereum Layer 2 networks processed over $50 billion in transactions "
            "this month, demonstrating scaling success."
        ),
        "sentiment": 0.77,
        "tags": ["ethereum", "layer2", "scaling", "defi"],
    },
    {
        "id": "news_8",
        "title": "Microsoft Azure Cloud Revenue Grows 29% Year-Over-Year",
        "source": "CNBC",
        "category": "earnings",
        "offset": -4 * HOUR,
        "impact": "high",
        "affected_assets": ["MSFT"],
        "summary": (
            "Microsoft's cloud division continues to drive growth with Azure "
            "revenue reaching $31.8 billion."
        ),
        "sentiment": 0.73,
        "tags": ["microsoft", "azure", "cloud", "earnings"],
    },
]


GLOBAL_ALERTS: List[Dict[str, Any]] = [
    {
        "id": "global_alert_1",
        "type": "market_volatility",
        "severity": "high",
        "title": "Market Volatility Spike Detected",
        "message": "VIX index surged 15% indicating increased market uncertainty",
        "offset": -1 * HOUR,
        "affected_assets": ["AAPL", "MSFT", "GOOGL", "TSLA"],
        "action_required": True,
        "ai_core_accuracy": 0.94,
    },
    {
        "id": "global_alert_2",
        "type": "correlation_breakdown",
        "severity": "medium",
        "title": "Stock-Crypto Correlation Breakdown",
        "message": "Traditional correlation between stocks and crypto has weakened significantly",
        "offset": -2 * HOUR,
        "affected_assets": ["BTC", "ETH", "AAPL", "TSLA"],
        "action_required": False,
        "ai_core_accuracy": 0.91,
    },
    {
        "id": "global_alert_3",
        "type": "liquidity_event",
        "severity": "critical",
        "title": "Low Liquidity Warning",
        "message": (
            "Trading volume below 30-day average by 40% - potential for "
            "increased volatility"
        ),
        "offset": -3 * HOUR,
        "affected_assets": ["SOL"],
        "action_required": True,
        "ai_core_accuracy": 0.96,
    },
]


EVENTS: List[Dict[str, Any]] = [
    {
        "id": "event_1",
        "type": "earnings_release",
        "asset": "NVDA",
        "offset": 5 * DAY,
        "importance": "critical",
        "expected_impact": "positive",
        "description": "NVIDIA Q4 2024 Earnings Report",
        "prediction": (0.94, "upside", "high"),
    },
    {
        "id": "event_2",
        "type": "economic_indicator",
        "asset": "market_wide",
        "offset": 3 * DAY,
        "importance": "high",
        "expected_impact": "neutral",
        "description": "US Non-Farm Payrolls Report",
        "prediction": (0.87, "moderate", "medium"),
    },
    {
        "id": "event_3",
        "type": "product_launch",
        "asset": "AAPL",
        "offset": 7 * DAY,
        "importance": "high",
        "expected_impact": "positive",
        "description": "Apple Vision Pro Public Launch",
        "prediction": (0.91, "upside", "medium"),
    },
    {
        "id": "event_4",
        "type": "network_upgrade",
        "asset": "ETH",
        "offset": 14 * DAY,
        "importance": "high",
        "expected_impact": "positive",
        "description": "Ethereum Protocol Upgrade - EIP-4844",
        "prediction": (0.89, "upside", "high"),
    },
]


INSIGHTS: List[Dict[str, Any]] = [
    {
        "id": "insight_1",
        "type": "pattern_recognition",
        "asset": "BTC",
        "confidence": 0.94,
        "title": "Bullish Flag Pattern Identified",
        "description": (
            "AI Core has identified a classic bullish flag pattern with 94% "
            "historical accuracy. Target: $45,500"
        ),
        "offset": -5400,
        "actionable": True,
    },
    {
        "id": "insight_2",
        "type": "anomaly_detection",
        "asset": "NVDA",
        "confidence": 0.92,
        "title": "Unusual Options Activity Detected",
        "description": (
            "Significant call option buying detected suggesting institutional "
            "bullish sentiment"
        ),
        "offset": -2 * HOUR,
        "actionable": True,
    },
    {
        "id": "insight_3",
        "type": "sentiment_analysis",
        "asset": "market_wide",
        "confidence": 0.89,
        "title": "Market Sentiment Shift Detected",
        "description": "Overall market sentiment shifted from neutral to bullish over past 24 hours",
        "offset": -1 * HOUR,
        "actionable": False,
    },
]


INFLUENCERS: List[Dict[str, Any]] = [
    {
        "id": "inf_1",
        "name": "Crypto Analyst Pro",
        "handle": "@cryptoanalyst",
        "platform": "Twitter",
        "follower_count": 1250000,
        "credibility_score": 0.89,
        "predictions": [
            ("pred_1", "BTC", "bullish", 0.92, -2 * HOUR, 45000, "30 days"),
        ],
        "sentiment": 0.85,
    },
    {
        "id": "inf_2",
        "name": "Stock Market Guru",
        "handle": "@stockguru",
        "platform": "Twitter",
        "follower_count": 890000,
        "credibility_score": 0.82,
        "predictions": [
            ("pred_2", "NVDA", "bullish", 0.88, -5400, 520, "60 days"),
        ],
        "sentiment": 0.78,
    },
    {
        "id": "inf_3",
        "name": "Market Insights",
        "handle": "@marketinsights",
        "platform": "LinkedIn",
        "follower_count": 450000,
        "credibility_score": 0.75,
        "predictions": [
            ("pred_3", "TSLA", "bearish", 0.65, -3 * HOUR, 230, "45 days"),
        ],
        "sentiment": 0.55,
    },
]
