"""
Модуль содержащий модель точек континуума
консистентного хеширования
"""
import logging
import operator

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF


class ConversionError(ValueError):
    pass


def to_uint32(number) -> int:
    """
    Приводит число к беззнаковому 32-битному целому
    :param number: исходное значение
    :return: целое из диапазона [0, UINT32_MAX]
    """
    if isinstance(number, bool):
        logger.debug("Rejected boolean ring key %r", number)
        raise ConversionError(f"bool is not a valid ring key: {number!r}")
    try:
        value = operator.index(number)
    except TypeError as e:
        logger.debug("Rejected non-integral ring key %r", number)
        raise ConversionError(f"ring key must be an integer, got {type(number).__name__}") from e
    if value < 0 or value > UINT32_MAX:
        logger.debug("Ring key %d is out of the unsigned 32-bit range", value)
        raise ConversionError(f"ring key {value} is out of range [0, {UINT32_MAX}]")
    return value


class Entry:
    """
    Точка континуума: значение хеша и сервер, которому она принадлежит
    """
    __slots__ = ("value", "server")

    def __init__(self, value: int, server):
        self.value = value
        self.server = server

    def __eq__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self.value == other.value and self.server == other.server

    def __hash__(self):
        return hash((self.value, self.server))

    def __repr__(self):
        host = getattr(self.server, "host", None)
        port = getattr(self.server, "port", None)
        if host is not None and port is not None:
            return f"<{self.value}, {host}:{port}>"
        return f"<{self.value}, {self.server}>"
