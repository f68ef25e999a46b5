"""data: 搜狐指数历史行情获取。"""

from .errors import (
    AnalysisError,
    EmptyDataError,
    NetworkError,
    ParseError,
    ReadError,
    SchemaError,
    StockDataError,
)
from .models import DailyObservation, StockDataPoint
from .sohu import FetcherConfig, SohuHistoryFetcher, resolve_timezone

__all__ = [
    "AnalysisError",
    "EmptyDataError",
    "NetworkError",
    "ParseError",
    "ReadError",
    "SchemaError",
    "StockDataError",
    "DailyObservation",
    "StockDataPoint",
    "FetcherConfig",
    "SohuHistoryFetcher",
    "resolve_timezone",
]
