"""全局测试配置：隔离本地 .env 中的微信支付配置。"""

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_wechatpay_env(monkeypatch):
    """每个测试前清除 WECHATPAY_* 环境变量。"""
    for name in list(os.environ):
        if name.startswith("WECHATPAY_"):
            monkeypatch.delenv(name)
    yield
