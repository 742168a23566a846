#
# Те же фигуры, но через фабричные функции вместо классов.

#   Фабрика проверяет размеры, замыкает их в функциях-"способностях" (площадь, объём)
#   и собирает из них одну неизменяемую запись. Никакого наследования: объёмная фигура -
#   это просто запись, в которую добавили ещё одну способность volume.
#   Калькулятору всё равно, как фигура создана, лишь бы у неё был area().

import math
from dataclasses import dataclass, field
from typing import Callable

from .shapes import check_dimension


@dataclass(frozen=True)
class ComposedShape:
    name: str
    dimensions: tuple
    area: Callable[[], float] = field(compare=False, repr=False)

    def calculate(self):
        return self.area()


@dataclass(frozen=True)
class ComposedSolidShape(ComposedShape):
    volume: Callable[[], float] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.volume is None:
            raise TypeError("Объёмной фигуре нужна способность volume")

    def calculate(self):
        return self.volume()


def compose_shape(name, dimensions, area, volume=None):
    """Собирает фигуру из отдельных способностей."""
    if volume is None:
        return ComposedShape(name, tuple(dimensions), area)
    return ComposedSolidShape(name, tuple(dimensions), area, volume)


def circle(radius):
    radius = check_dimension('radius', radius)
    return compose_shape('Круг', (radius,), area=lambda: math.pi * radius ** 2)


def rectangle(width, height):
    width = check_dimension('width', width)
    height = check_dimension('height', height)
    return compose_shape('Прямоугольник', (width, height), area=lambda: width * height)


def square(length):
    length = check_dimension('length', length)
    return compose_shape('Квадрат', (length,), area=lambda: length ** 2)


def triangle(base, height):
    base = check_dimension('base', base)
    height = check_dimension('height', height)
    return compose_shape('Треугольник', (base, height), area=lambda: 0.5 * base * height)


def cuboid(length):
    length = check_dimension('length', length)
    return compose_shape(
        'Куб', (length,),
        area=lambda: 6 * length ** 2,
        volume=lambda: length ** 3,
    )
