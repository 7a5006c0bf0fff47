"""
Модуль содержащий реализацию алгоритма бинарного
поиска точки на континууме
"""
from operator import attrgetter
from typing import Callable, Optional, Sequence

from continuum import to_uint32

_value = attrgetter("value")


def search(sequence: Sequence, item: int, key: Optional[Callable] = None) -> int:
    """
    Выполняет бинарный поиск по отсортированному списку точек
    :param sequence: точки, упорядоченные по возрастанию значения
    :param item: искомое значение
    :param key: функция получения значения точки, по умолчанию атрибут value
    :return: индекс найденной точки, либо индекс ближайшей меньшей,
        -1 если такой нет
    """
    item = to_uint32(item)
    if key is None:
        key = _value

    lower = 0
    upper = len(sequence) - 1

    while lower <= upper:
        idx = (lower + upper) // 2
        value = key(sequence[idx])
        if value == item:
            return idx
        if value > item:
            upper = idx - 1
        else:
            lower = idx + 1

    return upper


def entry_for(sequence: Sequence, item: int, key: Optional[Callable] = None):
    """
    Возвращает точку, отвечающую значению, с переходом через конец кольца
    :param sequence: точки, упорядоченные по возрастанию значения
    :param item: искомое значение
    :param key: функция получения значения точки
    :return: точка континуума или None для пустого списка
    """
    idx = search(sequence, item, key)
    if not sequence:
        return None
    return sequence[idx]
