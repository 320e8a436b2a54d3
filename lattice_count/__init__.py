"""
lattice-count — перечисление целочисленных точек решётки с ограничениями.

Содержит:
- core/domain/    : IntVec (immutable целочисленный вектор)
- core/iter/      : SeqLT, SeqLE (одометрические перечислители)
- core/math/      : целочисленные guards и размеры решёток
- core/contracts/ : JSON Schema контракты
"""
