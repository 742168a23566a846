#
# Калькулятор площадей.

#   Single responsibility: калькулятор только считает сумму, а форматирование результата
#   отдано SumCalculatorOutputter (в исходном примере calculator сам печатал html - так не надо).
#   Open/closed: здесь нет ни одной проверки на конкретный тип фигуры, только на наличие area().

import logging
import math
from collections.abc import Sequence
from numbers import Real

from .errors import InvalidShapeError, UnsupportedShapeError
from .interfaces import SupportsArea, SupportsVolume


class AreaCalculator:
    interface = SupportsArea
    method = 'area'
    title = 'Сумма площадей фигур'

    def __init__(self, shapes=()):
        # последовательность не копируется, калькулятор лишь ссылается на неё;
        # генератор читается только один раз, поэтому его сохраняем списком
        self.shapes = shapes if isinstance(shapes, Sequence) else list(shapes)

    def check(self, shapes=None):
        """Проверяет все фигуры до подсчёта, чтобы не вернуть частичную сумму."""
        shapes = self.shapes if shapes is None else shapes
        for position, shape in enumerate(shapes):
            if not isinstance(shape, self.interface) or not callable(getattr(shape, self.method, None)):
                logging.warning(f"{type(self).__name__}: элемент {position} ({type(shape).__name__}) без {self.method}()")
                raise UnsupportedShapeError(shape, position, f"нет метода {self.method}()")

    def measure(self, shape, position):
        try:
            value = getattr(shape, self.method)()
        except OverflowError:
            value = math.inf
        if isinstance(value, bool) or not isinstance(value, Real) or not value >= 0:
            logging.warning(f"{type(self).__name__}: {self.method}() элемента {position} вернул {value!r}")
            raise UnsupportedShapeError(shape, position, f"{self.method}() вернул {value!r}")
        if math.isinf(value):
            # размеры конечные, но результат не поместился во float
            logging.warning(f"{type(self).__name__}: {self.method}() элемента {position} переполнился")
            raise InvalidShapeError(f"{self.method}() фигуры {shape!r} на позиции {position} не помещается в float")
        return value

    def sum(self):
        shapes = list(self.shapes)
        self.check(shapes)

        total = 0
        for position, shape in enumerate(shapes):
            value = self.measure(shape, position)
            logging.debug(f"{shape!r}: {self.method} = {value}")
            total += value
        return total


class VolumeCalculator(AreaCalculator):
    """Тот же калькулятор, но суммирует объёмы. Годится везде, где ждут AreaCalculator."""

    interface = SupportsVolume
    method = 'volume'
    title = 'Сумма объёмов фигур'


def sum_areas(shapes):
    return AreaCalculator(shapes).sum()
