"""
客户端配置：商户凭证、接口地址和超时设置。

配置在构造客户端时一次性传入，生命周期内只读。
load_config() 从环境变量（支持 .env 文件）读取配置。
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

API_BASE = "https://api.mch.weixin.qq.com"

# 统一下单
UNIFIEDORDER_PATH = "/pay/unifiedorder"
# 付款码支付
MICROPAY_PATH = "/pay/micropay"
# 查询订单
ORDERQUERY_PATH = "/pay/orderquery"

UNIFIEDORDER_URL = API_BASE + UNIFIEDORDER_PATH
MICROPAY_URL = API_BASE + MICROPAY_PATH
ORDERQUERY_URL = API_BASE + ORDERQUERY_PATH

DEFAULT_TIMEOUT = 10.0


class ConfigError(Exception):
    """客户端配置异常。"""
    pass


@dataclass(frozen=True)
class WechatpayConfig:
    appid: str
    mch_id: str
    api_key: str
    notify_url: str
    cert_path: str | None = None
    key_path: str | None = None
    api_base: str = API_BASE
    timeout: float = DEFAULT_TIMEOUT

    @property
    def unifiedorder_url(self) -> str:
        return self.api_base.rstrip("/") + UNIFIEDORDER_PATH

    @property
    def micropay_url(self) -> str:
        return self.api_base.rstrip("/") + MICROPAY_PATH

    @property
    def orderquery_url(self) -> str:
        return self.api_base.rstrip("/") + ORDERQUERY_PATH


_REQUIRED_ENV = {
    "appid": "WECHATPAY_APPID",
    "mch_id": "WECHATPAY_MCH_ID",
    "api_key": "WECHATPAY_API_KEY",
    "notify_url": "WECHATPAY_NOTIFY_URL",
}


def load_config() -> WechatpayConfig:
    """
    从环境变量读取客户端配置。

    必填：WECHATPAY_APPID、WECHATPAY_MCH_ID、WECHATPAY_API_KEY、WECHATPAY_NOTIFY_URL
    可选：WECHATPAY_CERT_PATH、WECHATPAY_KEY_PATH、WECHATPAY_API_BASE、WECHATPAY_TIMEOUT

    Raises:
        ConfigError: 必填变量缺失或超时设置不是合法数字。
    """
    load_dotenv()

    values = {}
    for field_name, env_name in _REQUIRED_ENV.items():
        value = os.getenv(env_name, "")
        if not value:
            raise ConfigError(f"缺少环境变量 {env_name}")
        values[field_name] = value

    timeout_str = os.getenv("WECHATPAY_TIMEOUT", "")
    try:
        timeout = float(timeout_str) if timeout_str else DEFAULT_TIMEOUT
    except ValueError:
        raise ConfigError(f"WECHATPAY_TIMEOUT 不是合法数字: {timeout_str}")

    return WechatpayConfig(
        cert_path=os.getenv("WECHATPAY_CERT_PATH") or None,
        key_path=os.getenv("WECHATPAY_KEY_PATH") or None,
        api_base=os.getenv("WECHATPAY_API_BASE") or API_BASE,
        timeout=timeout,
        **values,
    )
