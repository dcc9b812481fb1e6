"""
数据模型 / 类型定义，供各模块引用。
使用 Enum 和 dataclass 保持轻量。
"""

from dataclasses import dataclass
from enum import Enum


class TradeType(Enum):
    """交易类型。"""

    MICRO = "MICRO"
    JSAPI = "JSAPI"
    NATIVE = "NATIVE"
    QRCODE = "QRCODE"
    APP = "APP"

    @property
    def wire_value(self) -> str:
        """接口中 trade_type 字段的取值，扫码支付与 NATIVE 相同。"""
        return _WIRE_VALUES[self]

    @property
    def required_fields(self) -> tuple[str, ...]:
        """该交易类型额外要求的必填字段。"""
        return _REQUIRED_FIELDS[self]


_WIRE_VALUES = {
    TradeType.MICRO: "MICRO",
    TradeType.JSAPI: "JSAPI",
    TradeType.NATIVE: "NATIVE",
    TradeType.QRCODE: "NATIVE",
    TradeType.APP: "APP",
}

_REQUIRED_FIELDS = {
    TradeType.MICRO: ("auth_code",),
    TradeType.JSAPI: ("openid",),
    TradeType.NATIVE: ("product_id",),
    TradeType.QRCODE: ("product_id",),
    TradeType.APP: (),
}


@dataclass(frozen=True)
class OrderIdentifier:
    """订单标识：微信订单号或商户订单号二选一。"""

    field: str
    value: str

    @classmethod
    def transaction_id(cls, value: str) -> "OrderIdentifier":
        return cls("transaction_id", value)

    @classmethod
    def out_trade_no(cls, value: str) -> "OrderIdentifier":
        return cls("out_trade_no", value)
