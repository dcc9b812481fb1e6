"""数据模型单元测试。"""

import pytest

from wechatpay.models.schemas import OrderIdentifier, TradeType


class TestTradeType:
    """交易类型测试。"""

    @pytest.mark.parametrize(
        "trade_type, wire",
        [
            (TradeType.MICRO, "MICRO"),
            (TradeType.JSAPI, "JSAPI"),
            (TradeType.NATIVE, "NATIVE"),
            (TradeType.QRCODE, "NATIVE"),
            (TradeType.APP, "APP"),
        ],
    )
    def test_wire_value(self, trade_type, wire):
        assert trade_type.wire_value == wire

    def test_qrcode_is_distinct_member(self):
        assert TradeType.QRCODE is not TradeType.NATIVE

    def test_required_fields(self):
        assert TradeType.MICRO.required_fields == ("auth_code",)
        assert TradeType.JSAPI.required_fields == ("openid",)
        assert TradeType.NATIVE.required_fields == ("product_id",)
        assert TradeType.QRCODE.required_fields == ("product_id",)
        assert TradeType.APP.required_fields == ()


class TestOrderIdentifier:
    """订单标识测试。"""

    def test_transaction_id(self):
        identifier = OrderIdentifier.transaction_id("1008450740201411110005820873")
        assert identifier.field == "transaction_id"
        assert identifier.value == "1008450740201411110005820873"

    def test_out_trade_no(self):
        identifier = OrderIdentifier.out_trade_no("1415757673")
        assert identifier == OrderIdentifier("out_trade_no", "1415757673")
