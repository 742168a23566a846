#
# Interface segregation: вместо одного "толстого" интерфейса фигуры - несколько маленьких.
# Плоской фигуре нужен только area(), объёмной дополнительно volume(), а calculate() -
# единый способ "посчитать фигуру", не зная её конкретного типа.
#
# Проверка соответствия идёт по наличию методов (isinstance с runtime_checkable протоколом),
# а не по глобальным меткам типа.

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsArea(Protocol):
    def area(self) -> float:
        ...


@runtime_checkable
class SupportsVolume(SupportsArea, Protocol):
    def volume(self) -> float:
        ...


@runtime_checkable
class ManageShape(Protocol):
    """Плоские фигуры возвращают площадь, объёмные - объём."""

    def calculate(self) -> float:
        ...
