"""
异常定义
行情获取与变动率计算过程中的错误类型
"""
from typing import Any, Dict, Optional


class StockDataError(Exception):
    """行情数据基础异常"""

    def __init__(
        self,
        message: str,
        error_code: str = "GENERAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            message: 错误消息
            error_code: 错误代码
            details: 额外详情
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class NetworkError(StockDataError):
    """请求失败或响应状态非成功"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        details = {"status_code": status_code} if status_code is not None else None
        super().__init__(message, "NETWORK_ERROR", details)
        self.status_code = status_code


class ReadError(StockDataError):
    """响应体读取不完整"""

    def __init__(self, message: str):
        super().__init__(message, "READ_ERROR")


class ParseError(StockDataError):
    """数据不是合法的 JSON 结构"""

    def __init__(self, message: str):
        super().__init__(message, "PARSE_ERROR")


class SchemaError(StockDataError):
    """hq 字段类型不符合预期"""

    def __init__(self, message: str, actual_type: Optional[str] = None):
        details = {"actual_type": actual_type} if actual_type else None
        super().__init__(message, "SCHEMA_ERROR", details)
        self.actual_type = actual_type


class EmptyDataError(StockDataError):
    """没有可用的行情记录"""

    def __init__(self, message: str):
        super().__init__(message, "EMPTY_DATA")


class AnalysisError(StockDataError):
    """带阶段标签的分析失败 (fetch / calculation)"""

    def __init__(self, stage: str, cause: Exception):
        super().__init__(
            f"{stage} failed: {cause}",
            "ANALYSIS_ERROR",
            {"stage": stage, "cause": type(cause).__name__},
        )
        self.stage = stage
        self.cause = cause
