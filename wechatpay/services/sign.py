"""MD5 签名生成与验证模块。"""

import hashlib
import hmac
from urllib.parse import quote_plus

from wechatpay.services.errors import MissingFieldError

# 不参与签名、也不允许调用方传入的保留字段
RESERVED_KEYS = ("key", "sign")


def _quote(value: str) -> str:
    """application/x-www-form-urlencoded 编码：空格编码为 +，保留 * - . _ 不编码。"""
    return quote_plus(value, safe="*").replace("~", "%7E")


def form_urlencode(pairs) -> str:
    """按给定顺序将 (key, value) 序列拼接为表单编码字符串。"""
    return "&".join(f"{_quote(k)}={_quote(v)}" for k, v in pairs)


def generate_sign(params: dict, key: str) -> str:
    """
    生成 MD5 签名。

    1. 过滤空值和 key、sign 参数
    2. 按参数名 ASCII 码从小到大排序
    3. 拼接表单编码的键值对（空格编码为 +）
    4. 末尾拼接 &key=商户密钥 后 MD5 加密

    返回大写 32 位十六进制签名字符串。

    Raises:
        MissingFieldError: 商户密钥为空。
    """
    if not key:
        raise MissingFieldError("key")

    # 过滤空值和保留字段
    filtered = {
        k: str(v)
        for k, v in params.items()
        if k not in RESERVED_KEYS and v is not None and str(v) != ""
    }

    # 按参数名 ASCII 排序，密钥固定放在最后
    pairs = [(k, filtered[k]) for k in sorted(filtered.keys())]
    pairs.append(("key", key))

    sign_str = form_urlencode(pairs)
    return hashlib.md5(sign_str.encode("utf-8")).hexdigest().upper()


def verify_sign(params: dict, key: str) -> bool:
    """重新计算签名并与参数中的 sign 字段比对。"""
    sign = params.get("sign")
    if not sign:
        return False
    expected = generate_sign(params, key)
    return hmac.compare_digest(
        expected.encode("utf-8"), str(sign).upper().encode("utf-8")
    )
