#
# Фигуры в "классовом" стиле.

#   Каждая фигура сама знает, как посчитать свою площадь (open/closed: калькулятору не нужно
#   знать про конкретные типы, новая фигура - это просто новый класс с area()).
#   Фигуры неизменяемы: размеры задаются один раз в конструкторе и доступны только на чтение
#   через @property. Поэтому Square спокойно наследуется от Rectangle - поменять у квадрата
#   только ширину нельзя, и подстановка квадрата вместо прямоугольника ничего не ломает (LSP).

import math
from abc import ABC, abstractmethod
from numbers import Real

import numpy as np

from .errors import InvalidShapeError


def check_dimension(name, value):
    """Проверяет, что размер - неотрицательное конечное число, и возвращает его."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidShapeError(f"{name} должен быть числом, получено {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidShapeError(f"{name} должен быть неотрицательным конечным числом, получено {value!r}")
    # numpy-числа приводим к обычным int/float
    return value.item() if isinstance(value, np.generic) else value


class Shape(ABC):
    name = 'Фигура'

    @abstractmethod
    def area(self):
        pass

    @abstractmethod
    def _dimensions(self):
        """Кортеж размеров, по которому фигуры сравниваются."""

    def calculate(self):
        return self.area()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._dimensions() == other._dimensions()

    def __hash__(self):
        return hash((type(self), self._dimensions()))

    def __repr__(self):
        return f"{self.name}{self._dimensions()}"


class SolidShape(Shape):
    name = 'Объёмная фигура'

    @abstractmethod
    def volume(self):
        pass

    def calculate(self):
        return self.volume()


class Circle(Shape):
    name = 'Круг'

    def __init__(self, radius):
        self._radius = check_dimension('radius', radius)

    @property
    def radius(self):
        return self._radius

    def area(self):
        return math.pi * self._radius ** 2

    def _dimensions(self):
        return (self._radius,)

    def __repr__(self):
        return f"{self.name} с радиусом {self.radius}"


class Rectangle(Shape):
    name = 'Прямоугольник'

    def __init__(self, width, height):
        self._width = check_dimension('width', width)
        self._height = check_dimension('height', height)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def area(self):
        return self._width * self._height

    def _dimensions(self):
        return (self._width, self._height)

    def __repr__(self):
        return f"{self.name}, ширина: {self.width} и высота: {self.height}"


class Square(Rectangle):
    name = 'Квадрат'

    def __init__(self, length):
        super().__init__(length, length)

    @property
    def length(self):
        return self._width

    def _dimensions(self):
        return (self._width,)

    def __repr__(self):
        return f"{self.name} со стороной {self.length}"


class Triangle(Shape):
    name = 'Треугольник'

    def __init__(self, base, height):
        self._base = check_dimension('base', base)
        self._height = check_dimension('height', height)

    @property
    def base(self):
        return self._base

    @property
    def height(self):
        return self._height

    def area(self):
        return 0.5 * self._base * self._height

    def _dimensions(self):
        return (self._base, self._height)


class Polygon(Shape):
    """Произвольный простой многоугольник, заданный вершинами по порядку обхода."""

    name = 'Многоугольник'

    def __init__(self, vertices):
        try:
            points = np.array(vertices, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidShapeError(f"vertices должны быть парами чисел: {e}") from e
        if points.ndim != 2 or points.shape[1] != 2 or points.shape[0] < 3:
            raise InvalidShapeError(f"Нужно минимум 3 вершины вида (x, y), получено {points.shape}")
        if not np.isfinite(points).all():
            raise InvalidShapeError("Координаты вершин должны быть конечными числами")
        points.flags.writeable = False
        self._vertices = points

    @property
    def vertices(self):
        return self._vertices

    def area(self):
        # формула шнурования (площадь Гаусса)
        x, y = self._vertices[:, 0], self._vertices[:, 1]
        return float(0.5 * abs(np.dot(x, np.roll(y, 1)) - np.dot(y, np.roll(x, 1))))

    def _dimensions(self):
        return tuple(map(tuple, self._vertices.tolist()))

    def __repr__(self):
        return f"{self.name} с {len(self._vertices)} вершинами"


class Cuboid(SolidShape):
    name = 'Куб'

    def __init__(self, length):
        self._length = check_dimension('length', length)

    @property
    def length(self):
        return self._length

    def area(self):
        # площадь поверхности
        return 6 * self._length ** 2

    def volume(self):
        return self._length ** 3

    def _dimensions(self):
        return (self._length,)

    def __repr__(self):
        return f"{self.name} с ребром {self.length}"


class Sphere(SolidShape):
    name = 'Шар'

    def __init__(self, radius):
        self._radius = check_dimension('radius', radius)

    @property
    def radius(self):
        return self._radius

    def area(self):
        return 4 * math.pi * self._radius ** 2

    def volume(self):
        return 4 / 3 * math.pi * self._radius ** 3

    def _dimensions(self):
        return (self._radius,)

    def __repr__(self):
        return f"{self.name} с радиусом {self.radius}"
