"""
IntVec — Immutable целочисленный вектор фиксированной размерности

Immutable Pydantic модель (frozen=True) со структурной семантикой значений:
- Равенство и hash по размерности и координатам
- Полный порядок: сначала по размерности, затем лексикографически
- Детерминированное строковое представление "[c0, c1, ...]"

Используется для конфигурации перечислителей (границы SeqLE) и как
неизменяемый снапшот рабочего буфера перечисления.
"""

from typing import Iterable, Iterator, List, Tuple

from pydantic import BaseModel, Field, StrictInt

from lattice_count.core.math.int_guards import validate_index, validate_non_negative_int


# =============================================================================
# INTVEC MODEL
# =============================================================================


class IntVec(BaseModel):
    """
    Неизменяемый вектор целых чисел.

    Входная последовательность копируется в tuple, поэтому последующие
    изменения исходного списка не влияют на вектор.

    Examples:
        >>> v = IntVec([1, 2, 3])
        >>> v.dim()
        3
        >>> v.get(1)
        2
        >>> str(v)
        '[1, 2, 3]'
    """

    values: Tuple[StrictInt, ...] = Field(..., description="Координаты в порядке индексов")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, values: Iterable[int]) -> None:
        if values is None:
            raise ValueError("values must not be None")
        try:
            coords = tuple(values)
        except TypeError as e:
            raise ValueError(f"values must be an iterable of int, got {type(values).__name__}") from e
        super().__init__(values=coords)

    @classmethod
    def zeros(cls, dim: int) -> "IntVec":
        """
        Нулевой вектор заданной размерности.

        Raises:
            ValueError: Если dim отрицательная
        """
        validate_non_negative_int(dim, "dim")
        return cls([0] * dim)

    # -------------------------------------------------------------------------
    # Доступ к координатам
    # -------------------------------------------------------------------------

    def dim(self) -> int:
        """Размерность вектора."""
        return len(self.values)

    def get(self, i: int) -> int:
        """
        Координата с индексом i.

        Raises:
            IndexError: Если i вне [0, dim)
        """
        validate_index(i, len(self.values))
        return self.values[i]

    def to_list(self) -> List[int]:
        """Изменяемая копия координат (например, как рабочий буфер перечисления)."""
        return list(self.values)

    def __getitem__(self, i: int) -> int:
        return self.get(i)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.values)

    # -------------------------------------------------------------------------
    # Равенство, hash, порядок
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntVec):
            return NotImplemented
        return self.values == other.values

    def __hash__(self) -> int:
        return hash((len(self.values), self.values))

    def compare_to(self, other: "IntVec") -> int:
        """
        Сравнение векторов: -1, 0 или 1.

        Векторы разной размерности упорядочены по размерности,
        одинаковой — лексикографически по индексам 0..dim-1.

        Raises:
            TypeError: Если other не IntVec
        """
        if not isinstance(other, IntVec):
            raise TypeError(f"cannot compare IntVec with {type(other).__name__}")

        if len(self.values) != len(other.values):
            return -1 if len(self.values) < len(other.values) else 1

        for a, b in zip(self.values, other.values):
            if a != b:
                return -1 if a < b else 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IntVec):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, IntVec):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, IntVec):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, IntVec):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self.values) + "]"
