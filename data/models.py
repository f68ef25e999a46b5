"""
数据模型定义
"""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class DailyObservation:
    """从行情记录中提取的单日数据（内部使用）"""
    date: str               # 交易日期 (YYYY-MM-DD)
    volume: float           # 成交量
    turnover: float         # 成交额
    index: int = 0          # 在原始 hq 列表中的位置

    def __repr__(self):
        return f"<DailyObservation {self.date}>"


@dataclass(frozen=True)
class StockDataPoint:
    """五日变动率计算结果"""
    date: str
    volume: float
    turnover: float
    five_day_volume_rate: float = 0.0     # 成交量五日变动率 (%)
    five_day_turnover_rate: float = 0.0   # 成交额五日变动率 (%)

    def to_dict(self) -> Dict[str, object]:
        """输出给展示层的字段名"""
        return {
            "date": self.date,
            "volume": self.volume,
            "turnover": self.turnover,
            "fiveDayVolumeRate": self.five_day_volume_rate,
            "fiveDayTurnoverRate": self.five_day_turnover_rate,
        }

    def __repr__(self):
        return f"<StockDataPoint {self.date}>"
