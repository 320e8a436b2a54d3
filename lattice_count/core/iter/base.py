"""
BoundedSequence — общая основа одометрических перечислителей

Одометрический порядок:
- Последняя координата меняется быстрее всех
- Перенос распространяется от последнего индекса к первому
- Старт — нулевой вектор

Модель владения состоянием:
- Перечислитель хранит только неизменяемую конфигурацию границ
- Рабочий буфер (list[int]) принадлежит вызывающему коду
- advance(x) изменяет буфер на месте, без аллокаций

Исчерпание: когда advance возвращает False, буфер остаётся равным
максимальному вектору (не сбрасывается в ноль).
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterator, List

from lattice_count.core.domain.int_vec import IntVec
from lattice_count.core.math.int_guards import LATTICE_SIZE_WARN_THRESHOLD

logger = logging.getLogger(__name__)


class BoundedSequence(ABC):
    """
    Базовый класс перечислителей SeqLT и SeqLE.

    Подклассы задают dim, advance() и size(); first(), проверка буфера
    и ленивая итерация по снапшотам IntVec реализованы здесь.
    """

    dim: int

    @abstractmethod
    def advance(self, x: List[int]) -> bool:
        """Переход к следующему вектору на месте; False при исчерпании."""

    @abstractmethod
    def size(self) -> int:
        """Число векторов в полном перечислении (включая нулевой)."""

    def first(self) -> List[int]:
        """Новый нулевой буфер длины dim — начальное состояние перечисления."""
        return [0] * self.dim

    def _check_buffer(self, x: List[int]) -> None:
        if len(x) != self.dim:
            raise ValueError(f"buffer length {len(x)} does not match dim {self.dim}")

    def __iter__(self) -> Iterator[IntVec]:
        """
        Ленивая перезапускаемая итерация по всем векторам.

        Каждый вызов начинает с нулевого вектора и выдаёт неизменяемые
        снапшоты IntVec в одометрическом порядке.
        """
        size = self.size()
        if size > LATTICE_SIZE_WARN_THRESHOLD:
            logger.warning(
                "Enumerating %d vectors (threshold %d) for %r",
                size,
                LATTICE_SIZE_WARN_THRESHOLD,
                self,
            )

        x = self.first()
        yield IntVec(x)
        while self.advance(x):
            yield IntVec(x)
