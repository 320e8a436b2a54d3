"""
SeqLT — перечисление {0, ..., B-1}^d с единой строгой границей

Все векторы размерности d, у которых каждая координата в [0, B).
Полное перечисление содержит B^d векторов.
"""

import logging
from dataclasses import dataclass
from typing import List

from lattice_count.core.iter.base import BoundedSequence
from lattice_count.core.math.int_guards import validate_positive_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeqLT(BoundedSequence):
    """
    Одометр с единой исключающей границей bound для всех координат.

    Examples:
        >>> seq = SeqLT(2, 2)
        >>> x = seq.first()
        >>> seq.advance(x), x
        (True, [0, 1])
        >>> seq.advance(x), x
        (True, [1, 0])
    """

    dim: int
    bound: int

    def __post_init__(self) -> None:
        validate_positive_int(self.dim, "dim")
        validate_positive_int(self.bound, "bound")
        logger.debug("SeqLT configured: dim=%d bound=%d", self.dim, self.bound)

    def advance(self, x: List[int]) -> bool:
        """
        Переход к следующему вектору в одометрическом порядке.

        Сканирование с последнего индекса: первая координата < bound-1
        увеличивается на 1, все координаты правее обнуляются.

        Args:
            x: Рабочий буфер длины dim (изменяется на месте)

        Returns:
            True если переход выполнен, False если x — максимальный вектор
            (буфер при этом не изменяется)

        Raises:
            ValueError: Если длина буфера не равна dim
        """
        self._check_buffer(x)
        top = self.bound - 1
        for i in range(self.dim - 1, -1, -1):
            if x[i] < top:
                x[i] += 1
                for j in range(i + 1, self.dim):
                    x[j] = 0
                return True
        return False

    def size(self) -> int:
        return self.bound**self.dim
