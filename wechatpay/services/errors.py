"""
微信支付客户端异常定义。

WechatpayError 为所有异常的基类，同时作为未归类错误的兜底类型。
"""


class WechatpayError(Exception):
    """微信支付客户端异常基类。"""
    pass


class MissingFieldError(WechatpayError):
    """必填字段缺失或为空。"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"缺少字段: {field}")


class RedundantFieldError(WechatpayError):
    """出现了不允许由调用方传入的字段。"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"多余的字段: {field}")


class TransportError(WechatpayError):
    """底层 HTTP/TLS 请求异常。"""
    pass


class RequestFailedError(WechatpayError):
    """所有重试均未得到 200/201 响应，且没有捕获到传输层异常。"""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class RequestCancelledError(WechatpayError):
    """请求在重试过程中被调用方取消。"""
    pass
