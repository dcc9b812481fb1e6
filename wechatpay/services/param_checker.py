"""
请求参数校验：按规则表检查必填字段和禁止字段。

遇到第一个违规字段即返回，不再继续检查。
"""

from enum import Enum

from wechatpay.services.errors import (
    MissingFieldError,
    RedundantFieldError,
    WechatpayError,
)

# 兼容旧版的禁止字段判定：旧版以“值为空”判定违规（字段有值反而放行）。
# 默认关闭，按“字段是否出现”判定。
LEGACY_FORBIDDEN_CHECK = False


class CheckMode(Enum):
    REQUIRED = "required"
    FORBIDDEN = "forbidden"


def _is_empty(params: dict, key: str) -> bool:
    value = params.get(key)
    return value is None or str(value) == ""


def find_violation(
    params: dict,
    keys,
    mode: CheckMode,
    legacy_forbidden: bool | None = None,
) -> WechatpayError | None:
    """
    按给定顺序检查字段，返回第一个违规对应的异常对象，全部通过返回 None。

    Args:
        params: 请求参数。
        keys: 待检查的字段名，按调用方给定的顺序检查。
        mode: REQUIRED 要求字段存在且非空；FORBIDDEN 要求字段不出现。
        legacy_forbidden: 为 True 时 FORBIDDEN 沿用旧版按空值判定的行为，
            默认取 LEGACY_FORBIDDEN_CHECK。
    """
    if legacy_forbidden is None:
        legacy_forbidden = LEGACY_FORBIDDEN_CHECK

    for key in keys:
        if mode is CheckMode.REQUIRED:
            if _is_empty(params, key):
                return MissingFieldError(key)
        elif legacy_forbidden:
            if _is_empty(params, key):
                return RedundantFieldError(key)
        elif key in params:
            return RedundantFieldError(key)
    return None


def check_params(
    params: dict,
    keys,
    mode: CheckMode,
    legacy_forbidden: bool | None = None,
) -> None:
    """
    检查字段，发现违规时抛出对应异常。

    Raises:
        MissingFieldError: REQUIRED 模式下字段缺失或为空。
        RedundantFieldError: FORBIDDEN 模式下出现禁止字段。
    """
    error = find_violation(params, keys, mode, legacy_forbidden)
    if error is not None:
        raise error
