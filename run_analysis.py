"""
五日变动率分析脚本
"""
from __future__ import annotations

import logging
from pathlib import Path
import sys

# 添加项目根目录到路径
PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from analysis import FiveDayRateCalculator, StockAnalysisService, dump_points, log_trace
from data.errors import AnalysisError


def main() -> int:
    """运行分析并输出 JSON"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    service = StockAnalysisService(calculator=FiveDayRateCalculator(trace=log_trace))

    try:
        points = service.get_analysis()
    except AnalysisError as e:
        print(f"分析失败: {e}", file=sys.stderr)
        return 1

    print(dump_points(points))
    return 0


if __name__ == "__main__":
    sys.exit(main())
