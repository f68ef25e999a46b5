"""
分析服务
获取搜狐行情并计算五日变动率
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from data.errors import AnalysisError, StockDataError
from data.models import StockDataPoint
from data.sohu import SohuHistoryFetcher

from .five_day_rate import FiveDayRateCalculator, dump_points

logger = logging.getLogger(__name__)


class StockAnalysisService:
    """获取行情 -> 计算五日变动率。"""

    def __init__(
        self,
        fetcher: Optional[SohuHistoryFetcher] = None,
        calculator: Optional[FiveDayRateCalculator] = None,
    ):
        """
        Args:
            fetcher: 可选，行情采集器
            calculator: 可选，变动率计算器
        """
        self.fetcher = fetcher or SohuHistoryFetcher()
        self.calculator = calculator or FiveDayRateCalculator()

    def get_stock_data(self, now: Optional[datetime] = None) -> str:
        """
        获取原始行情数据

        Args:
            now: 可选，当前时间

        Returns:
            未解析的响应文本
        """
        return self.fetcher.fetch_recent_history(now)

    def calculate(self, payload: str) -> List[StockDataPoint]:
        """
        计算给定数据的五日变动率

        Args:
            payload: 原始行情文本

        Returns:
            按日期正序排列的 StockDataPoint 列表
        """
        return self.calculator.calculate(payload)

    def get_analysis(self, now: Optional[datetime] = None) -> List[StockDataPoint]:
        """
        获取行情并计算五日变动率

        Args:
            now: 可选，当前时间

        Returns:
            按日期正序排列的 StockDataPoint 列表

        Raises:
            AnalysisError: 获取或计算失败，stage 为 fetch / calculation
        """
        try:
            payload = self.get_stock_data(now)
        except StockDataError as e:
            logger.error("获取行情失败: %s", e)
            raise AnalysisError("fetch", e) from e

        try:
            points = self.calculate(payload)
        except StockDataError as e:
            logger.error("计算变动率失败: %s", e)
            raise AnalysisError("calculation", e) from e

        logger.info("分析完成，共 %s 个交易日", len(points))
        return points

    def get_analysis_json(self, now: Optional[datetime] = None) -> str:
        """获取分析结果的 JSON 文本"""
        return dump_points(self.get_analysis(now))
