"""
Integer Guards — проверки целочисленных параметров

Модуль обеспечивает единообразную валидацию целочисленных аргументов:
- Проверка типа (int, но не bool)
- Проверка знака (положительное / неотрицательное)
- Проверка индекса координаты
- Размер решётки для набора включительных границ

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не принимается как int (True/False — не координаты)
2. Отрицательные индексы не оборачиваются (в отличие от list)
3. Все ошибки — ValueError / IndexError, сообщение содержит имя параметра
"""

from typing import Final, Iterable

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Порог размера решётки, после которого перебор логируется как WARNING
LATTICE_SIZE_WARN_THRESHOLD: Final[int] = 10_000_000


# =============================================================================
# ПРОВЕРКА ТИПА
# =============================================================================


def is_strict_int(value: object) -> bool:
    """
    Проверка, является ли значение int (bool исключается).

    Examples:
        >>> is_strict_int(3)
        True
        >>> is_strict_int(True)
        False
        >>> is_strict_int(3.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_int(value: object, name: str) -> None:
    """
    Валидация, что значение является целым числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или является bool
    """
    if not is_strict_int(value):
        raise ValueError(f"{name} must be an int, got {type(value).__name__} {value!r}")


# =============================================================================
# ВАЛИДАЦИЯ ЗНАКА
# =============================================================================


def validate_positive_int(value: object, name: str) -> None:
    """
    Валидация, что значение — положительное целое (>= 1).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value < 1
    """
    validate_int(value, name)

    if value < 1:  # type: ignore[operator]
        raise ValueError(f"{name} must be positive (>= 1), got {value}")


def validate_non_negative_int(value: object, name: str) -> None:
    """
    Валидация, что значение — неотрицательное целое (>= 0).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value < 0
    """
    validate_int(value, name)

    if value < 0:  # type: ignore[operator]
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_index(i: object, dim: int) -> None:
    """
    Валидация индекса координаты.

    Допустимый диапазон: [0, dim). Отрицательные индексы запрещены.

    Args:
        i: Индекс координаты
        dim: Размерность вектора

    Raises:
        IndexError: Если i вне [0, dim) или не int
    """
    if not is_strict_int(i):
        raise IndexError(f"index must be an int, got {type(i).__name__} {i!r}")

    if i < 0 or i >= dim:  # type: ignore[operator]
        raise IndexError(f"index {i} out of range for dim {dim}")


# =============================================================================
# РАЗМЕР РЕШЁТКИ
# =============================================================================


def lattice_size(bounds_inclusive: Iterable[int]) -> int:
    """
    Число точек решётки Π (b_i + 1) для включительных границ.

    Для пустого набора границ возвращает 1 (единственный пустой вектор).

    Args:
        bounds_inclusive: Включительные верхние границы по координатам

    Returns:
        Количество векторов x с 0 <= x_i <= b_i

    Raises:
        ValueError: Если какая-либо граница отрицательна

    Examples:
        >>> lattice_size([0, 1, 2, 3, 0])
        24
        >>> lattice_size([])
        1
    """
    size = 1
    for i, b in enumerate(bounds_inclusive):
        validate_non_negative_int(b, f"bounds[{i}]")
        size *= b + 1
    return size
