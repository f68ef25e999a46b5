"""
五日变动率计算

变动率 = (当日值 - 5个交易日前的值) / 5个交易日前的值 * 100

- 搜狐接口按日期倒序返回，计算前先反转为正序
- 前5个交易日数据不足，变动率为0
- 5日前的值为0时变动率为0
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import pandas as pd

from data.errors import EmptyDataError, ParseError, SchemaError
from data.models import DailyObservation, StockDataPoint

logger = logging.getLogger(__name__)

WINDOW = 5
MIN_RECORD_LENGTH = 9
NO_DATA = "-"

# hq 记录字段位置
DATE_POS = 0
VOLUME_POS = 7
TURNOVER_POS = 8


@dataclass(frozen=True)
class RateTrace:
    """单日变动率计算明细"""
    position: int
    date: str
    volume: float
    turnover: float
    prior_date: Optional[str] = None
    prior_volume: Optional[float] = None
    prior_turnover: Optional[float] = None
    volume_rate: float = 0.0
    turnover_rate: float = 0.0


TraceHook = Callable[[RateTrace], None]


def log_trace(trace: RateTrace) -> None:
    """将计算明细写入 DEBUG 日志"""
    if trace.prior_date is None:
        logger.debug("第%d天 %s: 数据不足%d天，变动率为0", trace.position, trace.date, WINDOW)
        return
    logger.debug(
        "第%d天 %s (5天前 %s): 成交量 %f -> %f = %f%%, 成交额 %f -> %f = %f%%",
        trace.position, trace.date, trace.prior_date,
        trace.prior_volume, trace.volume, trace.volume_rate,
        trace.prior_turnover, trace.turnover, trace.turnover_rate,
    )


def _to_float(value: Any) -> float:
    """字符串数值转 float，'-'、非数字和非字符串一律视为 0"""
    if not isinstance(value, str) or value == NO_DATA:
        return 0.0
    if value != value.strip() or "_" in value:
        return 0.0
    try:
        number = float(value)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def load_hq(payload: str) -> List[Any]:
    """
    解析原始响应，取出第一段的 hq 列表

    Raises:
        ParseError: 不是合法 JSON，或第一段不是对象
        EmptyDataError: 顶层列表或 hq 列表为空
        SchemaError: hq 缺失或不是列表
    """
    try:
        sections = json.loads(payload)
    except (TypeError, ValueError, RecursionError) as e:
        raise ParseError(f"failed to parse JSON: {e}") from e

    if not isinstance(sections, list):
        raise ParseError(f"expected a JSON list, got {type(sections).__name__}")
    if not sections:
        raise EmptyDataError("no stock data available")
    first = sections[0]
    if first is not None and not isinstance(first, dict):
        raise ParseError(f"expected a JSON object, got {type(first).__name__}")

    # null 视为缺少 hq
    hq = first.get("hq") if first is not None else None
    if not isinstance(hq, list):
        actual = type(hq).__name__
        raise SchemaError(f"unexpected hq data type: {actual}", actual_type=actual)
    if not hq:
        raise EmptyDataError("no hq data available")
    return hq


def parse_daily_records(hq: List[Any]) -> List[DailyObservation]:
    """
    提取每日成交量、成交额，保持原始顺序

    长度不足 9 的记录直接丢弃
    """
    observations: List[DailyObservation] = []
    for i, row in enumerate(hq):
        if not isinstance(row, list) or len(row) < MIN_RECORD_LENGTH:
            continue
        date = row[DATE_POS] if isinstance(row[DATE_POS], str) else ""
        observations.append(
            DailyObservation(
                date=date,
                volume=_to_float(row[VOLUME_POS]),
                turnover=_to_float(row[TURNOVER_POS]),
                index=i,
            )
        )
    return observations


def _five_day_rate(series: pd.Series) -> pd.Series:
    prior = series.shift(WINDOW)
    valid = prior.notna() & (prior != 0)
    rate = (series - prior) / prior * 100
    return rate.where(valid, 0.0)


class FiveDayRateCalculator:
    """五日变动率计算器"""

    def __init__(self, trace: Optional[TraceHook] = None):
        """
        Args:
            trace: 可选，接收每日计算明细的回调
        """
        self.trace = trace

    def calculate(self, payload: str) -> List[StockDataPoint]:
        """
        计算成交量、成交额的五日变动率

        Args:
            payload: 搜狐接口返回的原始文本

        Returns:
            按日期正序排列的 StockDataPoint 列表
        """
        observations = parse_daily_records(load_hq(payload))
        # 接口按日期倒序返回
        observations.reverse()
        if not observations:
            return []

        df = pd.DataFrame(
            {
                "date": [o.date for o in observations],
                "volume": [o.volume for o in observations],
                "turnover": [o.turnover for o in observations],
            }
        )
        df["volume_rate"] = _five_day_rate(df["volume"])
        df["turnover_rate"] = _five_day_rate(df["turnover"])

        points: List[StockDataPoint] = []
        for i, row in enumerate(df.itertuples(index=False)):
            point = StockDataPoint(
                date=row.date,
                volume=float(row.volume),
                turnover=float(row.turnover),
                five_day_volume_rate=float(row.volume_rate),
                five_day_turnover_rate=float(row.turnover_rate),
            )
            points.append(point)
            if self.trace is not None:
                self.trace(self._make_trace(i, point, points))
        return points

    @staticmethod
    def _make_trace(i: int, point: StockDataPoint, points: List[StockDataPoint]) -> RateTrace:
        if i < WINDOW:
            return RateTrace(i, point.date, point.volume, point.turnover)
        prior = points[i - WINDOW]
        return RateTrace(
            position=i,
            date=point.date,
            volume=point.volume,
            turnover=point.turnover,
            prior_date=prior.date,
            prior_volume=prior.volume,
            prior_turnover=prior.turnover,
            volume_rate=point.five_day_volume_rate,
            turnover_rate=point.five_day_turnover_rate,
        )


def dump_points(points: List[StockDataPoint]) -> str:
    """序列化为展示层使用的 JSON"""
    return json.dumps([p.to_dict() for p in points], ensure_ascii=False)


def to_frame(points: List[StockDataPoint]) -> pd.DataFrame:
    """转换为 DataFrame，列名与 JSON 字段一致"""
    columns = ["date", "volume", "turnover", "fiveDayVolumeRate", "fiveDayTurnoverRate"]
    return pd.DataFrame([p.to_dict() for p in points], columns=columns)
