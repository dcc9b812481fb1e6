"""
微信支付 API 客户端：统一下单、付款码支付、订单查询。

主要功能：
- pay: 校验参数 → 补充公共参数 → 签名 → POST → 解析 XML 响应
- micro_pay / jsapi_pay / qrcode_pay / app_pay: 固定交易类型的 pay
- query_order: 按微信订单号或商户订单号查询订单
"""

import logging
from dataclasses import asdict

from wechatpay.config import API_BASE, DEFAULT_TIMEOUT, WechatpayConfig
from wechatpay.models.schemas import OrderIdentifier, TradeType
from wechatpay.services.param_checker import CheckMode, check_params
from wechatpay.services.request_executor import RequestExecutor
from wechatpay.services.sign import RESERVED_KEYS
from wechatpay.services.trade_utils import get_nonce_str

logger = logging.getLogger(__name__)

# 统一下单公共必填字段
REQUIRED_PAY_FIELDS = ("body", "out_trade_no", "total_fee", "spbill_create_ip")


class WechatpayClient:
    """微信支付 API 客户端，请求使用 MD5 签名、XML 报文。"""

    def __init__(
        self,
        appid: str,
        mch_id: str,
        api_key: str,
        notify_url: str,
        cert_path: str | None = None,
        key_path: str | None = None,
        api_base: str = API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        使用商户凭证初始化客户端。

        Args:
            appid: 公众账号 ID / 应用 ID。
            mch_id: 商户号。
            api_key: 商户 API 密钥。
            notify_url: 异步通知地址。
            cert_path: 商户证书路径（PEM），可选。
            key_path: 证书私钥路径，可选。
            api_base: 接口域名，默认生产环境。
            timeout: 单次请求超时（秒）。
        """
        self.config = WechatpayConfig(
            appid=appid,
            mch_id=mch_id,
            api_key=api_key,
            notify_url=notify_url,
            cert_path=cert_path,
            key_path=key_path,
            api_base=api_base,
            timeout=timeout,
        )
        self._executor = RequestExecutor(
            timeout=timeout, cert_path=cert_path, key_path=key_path
        )

    @classmethod
    def from_config(cls, config: WechatpayConfig) -> "WechatpayClient":
        return cls(**asdict(config))

    @property
    def appid(self) -> str:
        return self.config.appid

    @property
    def mch_id(self) -> str:
        return self.config.mch_id

    def _build_common_params(self) -> dict:
        """构建公共请求参数。"""
        return {
            "appid": self.config.appid,
            "mch_id": self.config.mch_id,
            "nonce_str": get_nonce_str(),
        }

    def pay(
        self,
        params: dict,
        trade_type: TradeType,
        retries: int | None = None,
    ) -> dict[str, str]:
        """
        下单支付。付款码支付走 micropay 接口，其余交易类型走统一下单接口。

        Args:
            params: 业务参数，必须包含 body、out_trade_no、total_fee、spbill_create_ip，
                以及交易类型要求的字段（product_id / openid / auth_code）。
            trade_type: 交易类型。
            retries: 最多尝试次数，未指定时为 1。

        Returns:
            接口响应字段字典，return_code / result_code 由调用方判断。

        Raises:
            RedundantFieldError: 传入了 key 或 sign。
            MissingFieldError: 缺少必填字段。
            TransportError / RequestFailedError: 请求失败。
        """
        check_params(params, RESERVED_KEYS, CheckMode.FORBIDDEN)
        check_params(params, REQUIRED_PAY_FIELDS, CheckMode.REQUIRED)
        check_params(params, trade_type.required_fields, CheckMode.REQUIRED)

        request_params = dict(params)
        request_params["trade_type"] = trade_type.wire_value
        request_params.update(self._build_common_params())

        if trade_type is TradeType.MICRO:
            url = self.config.micropay_url
        else:
            url = self.config.unifiedorder_url
            request_params["notify_url"] = self.config.notify_url

        logger.debug(
            "下单请求 (out_trade_no=%s, trade_type=%s)",
            request_params["out_trade_no"], trade_type.wire_value,
        )
        return self._executor.request(
            url, request_params, self.config.api_key, max_attempts=retries
        )

    def micro_pay(self, params: dict, retries: int | None = None) -> dict[str, str]:
        return self.pay(params, TradeType.MICRO, retries)

    def jsapi_pay(self, params: dict, retries: int | None = None) -> dict[str, str]:
        return self.pay(params, TradeType.JSAPI, retries)

    def qrcode_pay(self, params: dict, retries: int | None = None) -> dict[str, str]:
        return self.pay(params, TradeType.QRCODE, retries)

    def app_pay(self, params: dict, retries: int | None = None) -> dict[str, str]:
        return self.pay(params, TradeType.APP, retries)

    def query_order(
        self, identifier: OrderIdentifier, retries: int | None = None
    ) -> dict[str, str]:
        """
        查询订单。

        Args:
            identifier: OrderIdentifier.transaction_id(...) 或 OrderIdentifier.out_trade_no(...)。
            retries: 最多尝试次数，未指定时为 1。
        """
        params = {identifier.field: identifier.value}
        params.update(self._build_common_params())
        return self._executor.request(
            self.config.orderquery_url, params, self.config.api_key,
            max_attempts=retries,
        )
