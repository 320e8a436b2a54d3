"""
SeqLE — перечисление с включительной границей по каждой координате

Все векторы x размерности d = bounds.dim(), у которых 0 <= x[i] <= bounds[i].
Полное перечисление содержит Π (bounds[i] + 1) векторов.

Граница 0 фиксирует координату в нуле; нулевой вектор границ даёт
ровно один вектор.
"""

import logging
from dataclasses import dataclass
from typing import List

from lattice_count.core.domain.int_vec import IntVec
from lattice_count.core.iter.base import BoundedSequence
from lattice_count.core.math.int_guards import lattice_size, validate_non_negative_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeqLE(BoundedSequence):
    """
    Одометр с независимой включительной границей для каждой координаты.

    bounds принимается как IntVec либо как последовательность int
    (преобразуется в IntVec).
    """

    bounds: IntVec

    def __post_init__(self) -> None:
        if not isinstance(self.bounds, IntVec):
            object.__setattr__(self, "bounds", IntVec(self.bounds))

        for i, b in enumerate(self.bounds.values):
            validate_non_negative_int(b, f"bounds[{i}]")

        logger.debug("SeqLE configured: bounds=%s", self.bounds)

    @property
    def dim(self) -> int:  # type: ignore[override]
        return self.bounds.dim()

    def advance(self, x: List[int]) -> bool:
        """
        Переход к следующему вектору в одометрическом порядке.

        Сканирование с последнего индекса: первая координата x[i] < bounds[i]
        увеличивается на 1, все координаты правее обнуляются.

        Args:
            x: Рабочий буфер длины dim (изменяется на месте)

        Returns:
            True если переход выполнен, False если x[i] == bounds[i] для всех i
            (буфер при этом не изменяется)

        Raises:
            ValueError: Если длина буфера не равна dim
        """
        self._check_buffer(x)
        b = self.bounds.values
        n = len(b)
        for i in range(n - 1, -1, -1):
            if x[i] < b[i]:
                x[i] += 1
                for j in range(i + 1, n):
                    x[j] = 0
                return True
        return False

    def size(self) -> int:
        return lattice_size(self.bounds.values)
