"""
请求执行器：签名 → XML 编码 → HTTP POST（失败重试）→ 解析响应。

主要行为：
- 状态码 200 / 201 视为成功，立即解析响应并返回
- 其他状态码或传输层异常都计为一次失败，直接进入下一次尝试，无退避
- 全部失败后抛出最后一次传输层异常；若从未发生传输层异常则抛出 RequestFailedError
"""

import logging
import ssl
import threading

import httpx

from wechatpay.config import DEFAULT_TIMEOUT
from wechatpay.services.errors import (
    MissingFieldError,
    RequestCancelledError,
    RequestFailedError,
    TransportError,
)
from wechatpay.services.sign import generate_sign
from wechatpay.services.xml_codec import from_xml, to_xml

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODES = (200, 201)

_HEADERS = {"Content-Type": "text/xml; charset=utf-8"}


class RequestExecutor:
    """对请求参数签名并 POST 到微信支付接口，按次数重试。"""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        cert_path: str | None = None,
        key_path: str | None = None,
    ):
        """
        Args:
            timeout: 单次请求超时（秒）。
            cert_path: 商户 API 证书路径（PEM），需要双向证书的接口使用。
            key_path: 证书私钥路径，私钥已包含在 cert_path 中时可不传。
        """
        self.timeout = timeout
        self.cert_path = cert_path
        self.key_path = key_path

    def _client_kwargs(self, use_client_cert: bool) -> dict:
        kwargs = {"timeout": self.timeout}
        if not use_client_cert:
            return kwargs
        if not self.cert_path:
            raise MissingFieldError("cert")
        try:
            context = ssl.create_default_context()
            context.load_cert_chain(certfile=self.cert_path, keyfile=self.key_path)
        except (OSError, ssl.SSLError) as e:
            raise TransportError(f"加载商户证书失败: {e}") from e
        kwargs["verify"] = context
        return kwargs

    def request(
        self,
        url: str,
        params: dict,
        secret_key: str,
        max_attempts: int | None = None,
        use_client_cert: bool = False,
        cancel_event: threading.Event | None = None,
    ) -> dict[str, str]:
        """
        签名并发送请求，返回解析后的响应字段。

        签名会写入 params["sign"]，params 中的 key 字段不会被发送。

        Args:
            url: 接口地址。
            params: 请求参数（不含 sign）。
            secret_key: 商户 API 密钥。
            max_attempts: 最多尝试次数，未指定时为 1。
            use_client_cert: 是否携带商户证书。
            cancel_event: 每次尝试前检查，已置位则放弃后续请求。

        Returns:
            响应 XML 解析得到的字段字典，不解释业务返回码。

        Raises:
            MissingFieldError: 密钥为空，或要求证书但未配置证书。
            TransportError: 证书加载失败，或重试耗尽时最后一次传输层异常。
            RequestFailedError: 重试耗尽且均为非成功状态码。
            RequestCancelledError: 请求被取消。
        """
        params["sign"] = generate_sign(params, secret_key)
        params.pop("key", None)
        body = to_xml(params)
        attempts = 1 if max_attempts is None else max_attempts

        last_error: httpx.HTTPError | None = None
        last_status: int | None = None

        with httpx.Client(**self._client_kwargs(use_client_cert)) as client:
            for attempt in range(1, attempts + 1):
                if cancel_event is not None and cancel_event.is_set():
                    raise RequestCancelledError(f"请求已取消 (url={url}, attempt={attempt})")

                logger.debug("发送请求 (url=%s, attempt=%d/%d)", url, attempt, attempts)
                try:
                    response = client.post(url, content=body, headers=_HEADERS)
                except httpx.HTTPError as e:
                    last_error = e
                    logger.warning(
                        "请求异常 (url=%s, attempt=%d/%d): %s",
                        url, attempt, attempts, e,
                    )
                    continue

                last_status = response.status_code
                if last_status in SUCCESS_STATUS_CODES:
                    logger.debug("请求成功 (url=%s, status=%d)", url, last_status)
                    return from_xml(response.content)

                logger.warning(
                    "响应状态码异常 (url=%s, attempt=%d/%d, status=%d)",
                    url, attempt, attempts, last_status,
                )

        logger.warning("请求失败，已尝试 %d 次 (url=%s)", attempts, url)
        if last_error is not None:
            raise TransportError(f"请求微信支付接口失败: {last_error}") from last_error
        raise RequestFailedError(
            f"请求微信支付接口失败 (status={last_status})", status_code=last_status
        )
