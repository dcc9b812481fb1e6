"""
交易辅助函数：随机串、时间、商户订单号、金额换算。
"""

import time
import uuid
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal

# 标准北京时间（东八区）
BEIJING_TZ = timezone(timedelta(hours=8))


def get_nonce_str() -> str:
    """生成 32 位小写十六进制随机串，用于 nonce_str 字段。"""
    return uuid.uuid4().hex


def get_time_str() -> str:
    """
    返回北京时间 yyyyMMddHHmmss 字符串。

    与服务器所在时区无关，统一换算为东八区时间。
    """
    return datetime.now(BEIJING_TZ).strftime("%Y%m%d%H%M%S")


def get_timestamp() -> int:
    """自 1970-01-01 00:00:00 UTC 以来的秒数（10 位）。"""
    return int(time.time())


def get_order_no() -> str:
    """
    生成 32 位商户订单号：北京时间字符串 + 18 位随机串。
    """
    return get_time_str() + get_nonce_str()[:18]


def get_trade_amount(amount) -> int:
    """
    将金额（元）换算为接口使用的整数金额（分），四舍五入。

    Args:
        amount: 元为单位的金额，支持 Decimal、int、float 或字符串。
    """
    yuan = Decimal(str(amount))
    return int((yuan * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
