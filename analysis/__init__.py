"""analysis: 上证指数成交量、成交额五日变动率。"""

from .five_day_rate import (
    FiveDayRateCalculator,
    RateTrace,
    dump_points,
    load_hq,
    log_trace,
    parse_daily_records,
    to_frame,
)
from .service import StockAnalysisService

__all__ = [
    "FiveDayRateCalculator",
    "RateTrace",
    "dump_points",
    "load_hq",
    "log_trace",
    "parse_daily_records",
    "to_frame",
    "StockAnalysisService",
]
