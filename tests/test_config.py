"""客户端配置单元测试。"""

from unittest.mock import patch

import pytest

from wechatpay.config import (
    API_BASE,
    DEFAULT_TIMEOUT,
    MICROPAY_URL,
    ORDERQUERY_URL,
    UNIFIEDORDER_URL,
    ConfigError,
    WechatpayConfig,
    load_config,
)

_ENV = {
    "WECHATPAY_APPID": "wx2421b1c4370ec43b",
    "WECHATPAY_MCH_ID": "10000100",
    "WECHATPAY_API_KEY": "192006250b4c09247ec02edce69f6a2d",
    "WECHATPAY_NOTIFY_URL": "https://example.com/notify",
}


@pytest.fixture
def env(monkeypatch):
    for name in (
        "WECHATPAY_CERT_PATH", "WECHATPAY_KEY_PATH",
        "WECHATPAY_API_BASE", "WECHATPAY_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    for name, value in _ENV.items():
        monkeypatch.setenv(name, value)
    return monkeypatch


class TestEndpoints:
    """接口地址测试。"""

    def test_production_urls(self):
        assert UNIFIEDORDER_URL == "https://api.mch.weixin.qq.com/pay/unifiedorder"
        assert MICROPAY_URL == "https://api.mch.weixin.qq.com/pay/micropay"
        assert ORDERQUERY_URL == "https://api.mch.weixin.qq.com/pay/orderquery"

    def test_urls_follow_api_base(self):
        config = WechatpayConfig("wx1", "1", "k", "https://n", api_base="http://localhost:8080/")
        assert config.unifiedorder_url == "http://localhost:8080/pay/unifiedorder"
        assert config.micropay_url == "http://localhost:8080/pay/micropay"
        assert config.orderquery_url == "http://localhost:8080/pay/orderquery"


class TestLoadConfig:
    """load_config 测试。"""

    def test_required_only(self, env):
        config = load_config()
        assert config.appid == _ENV["WECHATPAY_APPID"]
        assert config.mch_id == _ENV["WECHATPAY_MCH_ID"]
        assert config.api_key == _ENV["WECHATPAY_API_KEY"]
        assert config.notify_url == _ENV["WECHATPAY_NOTIFY_URL"]
        assert config.cert_path is None
        assert config.key_path is None
        assert config.api_base == API_BASE
        assert config.timeout == DEFAULT_TIMEOUT

    def test_optional_values(self, env):
        env.setenv("WECHATPAY_CERT_PATH", "/certs/cert.pem")
        env.setenv("WECHATPAY_KEY_PATH", "/certs/key.pem")
        env.setenv("WECHATPAY_API_BASE", "https://api2.mch.weixin.qq.com")
        env.setenv("WECHATPAY_TIMEOUT", "3.5")
        config = load_config()
        assert config.cert_path == "/certs/cert.pem"
        assert config.key_path == "/certs/key.pem"
        assert config.api_base == "https://api2.mch.weixin.qq.com"
        assert config.timeout == 3.5

    @pytest.mark.parametrize("name", list(_ENV))
    def test_missing_required(self, env, name):
        env.delenv(name)
        with pytest.raises(ConfigError, match=name):
            load_config()

    @patch("wechatpay.config.load_dotenv")
    def test_reads_dotenv_on_call(self, mock_load_dotenv, env):
        """.env 在调用 load_config 时才加载，且先于读取环境变量。"""
        env.delenv("WECHATPAY_APPID")

        def _load():
            env.setenv("WECHATPAY_APPID", "wx_from_dotenv")

        mock_load_dotenv.side_effect = _load
        config = load_config()

        mock_load_dotenv.assert_called_once_with()
        assert config.appid == "wx_from_dotenv"

    def test_invalid_timeout(self, env):
        env.setenv("WECHATPAY_TIMEOUT", "fast")
        with pytest.raises(ConfigError, match="WECHATPAY_TIMEOUT"):
            load_config()
