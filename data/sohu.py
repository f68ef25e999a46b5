"""
搜狐指数历史行情采集器
免费API，无需token
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import requests

from .errors import NetworkError, ReadError

logger = logging.getLogger(__name__)

DATE_FORMAT = '%Y%m%d'


@dataclass(frozen=True)
class FetcherConfig:
    """采集器配置"""
    url: str = 'https://q.stock.sohu.com/hisHq'
    code: str = 'zs_000001'               # 上证指数
    lookback_days: int = 180              # 回溯自然日
    timezone: str = 'Asia/Shanghai'
    fallback_timezone: Optional[tzinfo] = None   # None 表示使用本机时区
    timeout: Optional[float] = None
    user_agent: str = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36'


def resolve_timezone(name: str, fallback: Optional[tzinfo] = None) -> Optional[tzinfo]:
    """
    加载命名时区，失败时退回到 fallback 或本机时区

    Args:
        name: IANA 时区名称
        fallback: 备用时区，None 表示本机时区

    Returns:
        tzinfo，None 表示本机时区（按时刻计算夏令时偏移）
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(f"时区 {name} 不可用 ({e})，使用备用时区 {fallback or '本机时区'}")
        return fallback


class SohuHistoryFetcher:
    """搜狐历史行情采集器"""

    def __init__(
        self,
        config: Optional[FetcherConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """
        初始化

        Args:
            config: 采集器配置
            session: 可选，自定义 requests 会话
        """
        self.config = config or FetcherConfig()
        self.timezone = resolve_timezone(self.config.timezone, self.config.fallback_timezone)
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': self.config.user_agent})

    def _localize(self, now: Optional[datetime]) -> datetime:
        if self.timezone is None:
            return (now if now is not None else datetime.now()).astimezone()
        if now is None:
            return datetime.now(self.timezone)
        if now.tzinfo is None:
            return now.replace(tzinfo=self.timezone)
        return now.astimezone(self.timezone)

    def lookback_window(self, now: Optional[datetime] = None) -> Tuple[str, str]:
        """
        计算回溯窗口

        Returns:
            (start, end)，格式 YYYYMMDD
        """
        end = self._localize(now)
        start = end - timedelta(days=self.config.lookback_days)
        return start.strftime(DATE_FORMAT), end.strftime(DATE_FORMAT)

    def fetch_recent_history(self, now: Optional[datetime] = None) -> str:
        """
        获取最近 lookback_days 天的原始行情数据

        Args:
            now: 可选，当前时间（测试时注入固定时钟）

        Returns:
            未解析的响应文本

        Raises:
            NetworkError: 请求失败或状态码非 2xx
            ReadError: 响应体读取失败
        """
        start, end = self.lookback_window(now)
        params = {
            'code': self.config.code,
            'start': start,
            'end': end,
            'stat': '1',
            'order': 'D',
            'period': 'd'
        }
        logger.info(f"请求 {self.config.code} 行情: {start} 至 {end}")

        try:
            response = self.session.get(
                self.config.url, params=params, timeout=self.config.timeout, stream=True
            )
        except requests.RequestException as e:
            raise NetworkError(f"请求 {self.config.url} 失败: {e}") from e

        try:
            if not response.ok:
                raise NetworkError(
                    f"请求 {self.config.url} 返回状态码 {response.status_code}",
                    status_code=response.status_code
                )
            try:
                return response.text
            except requests.RequestException as e:
                raise ReadError(f"读取响应失败: {e}") from e
        finally:
            response.close()
