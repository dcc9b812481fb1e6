"""
XML 编解码：参数字典与微信支付接口 XML 报文互转。

报文格式：根元素 <xml>，每个字段一个平铺子元素，无 XML 声明。
响应中的字段值可能包裹在 CDATA 中，解析时与普通文本同等对待。
"""

import logging
import xml.etree.ElementTree as ET

logger = logging.getLogger(__name__)

ROOT_TAG = "xml"


def to_xml(params: dict) -> bytes:
    """
    将参数字典编码为 XML 报文（UTF-8 字节串）。

    子元素按字典迭代顺序输出，特殊字符由 ElementTree 转义。
    """
    root = ET.Element(ROOT_TAG)
    for key, value in params.items():
        child = ET.SubElement(root, key)
        child.text = "" if value is None else str(value)
    return ET.tostring(
        root,
        encoding="utf-8",
        xml_declaration=False,
        short_empty_elements=False,
    )


def _local_name(tag: str) -> str:
    """去掉 {namespace} 前缀。"""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def _iter_events(data):
    parser = ET.XMLPullParser(events=("end",))
    parser.feed(data)
    # 解析错误会排在事件队列中，先产出出错位置之前的事件再抛出
    yield from parser.read_events()
    parser.close()
    yield from parser.read_events()


def from_xml(data: bytes | str) -> dict[str, str]:
    """
    将 XML 报文解析为参数字典。

    叶子元素有文本（含 CDATA，空白也保留）时以元素本地名为键写入，
    普通文本与 CDATA 相邻时合并为一个值。
    同名元素后出现的覆盖先出现的。报文格式错误时不抛异常，
    返回出错位置之前已解析的字段。
    """
    pairs: dict[str, str] = {}
    if not data:
        return pairs

    try:
        for _, elem in _iter_events(data):
            if not elem.text:
                continue
            # 有子元素时 text 只是子元素之间的缩进
            if len(elem) == 0 or elem.text.strip():
                pairs[_local_name(elem.tag)] = elem.text
    except ET.ParseError as e:
        logger.warning("解析 XML 响应失败，已解析 %d 个字段: %s", len(pairs), e)
    return pairs
