"""
Ordering — результат трёхстороннего сравнения

Явный тег LESS / EQUAL / GREATER вместо bool: полный порядок задаётся
одним компаратором, равенство выводится из него же.
"""

from enum import Enum


class Ordering(int, Enum):
    """Результат трёхстороннего сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int) -> "Ordering":
        """Ordering по знаку произвольного int."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def reversed(self) -> "Ordering":
        """Обратный порядок (для отрицательных операндов)."""
        return Ordering(-self.value)
