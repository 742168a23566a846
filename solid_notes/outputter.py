import json
import math
from enum import Enum
from numbers import Real

import numpy as np

from . import app
from .calculator import AreaCalculator
from .errors import InvalidTotalError, UnsupportedFormatError


class OutputFormat(Enum):
    JSON = 'json'
    HTML = 'html'
    TEXT = 'text'

    @classmethod
    def parse(cls, value):
        """Принимает член перечисления или его имя в любом регистре."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedFormatError(
                f"Неизвестный формат вывода: {value!r}. Доступны: {[f.value for f in cls]}"
            ) from None


def _sentence(total, precision, title):
    return f"{title}: {round(total, precision)}"


def render(total, output_format=None, precision=None, title=AreaCalculator.title):
    """Форматирует итог. Ничего не печатает - только возвращает строку."""
    output_format = OutputFormat.parse(output_format or app.DEFAULT_FORMAT)
    precision = app.PRECISION if precision is None else precision

    # numpy-числа json не сериализует
    if isinstance(total, np.generic):
        total = total.item()
    if not math.isfinite(total):
        raise InvalidTotalError(f"Итог {total!r} нельзя вывести: нужно конечное число")

    if output_format is OutputFormat.JSON:
        return json.dumps(total)
    if output_format is OutputFormat.HTML:
        return f"<h1>{_sentence(total, precision, title)}</h1>"
    return _sentence(total, precision, title)


class SumCalculatorOutputter:
    def __init__(self, source):
        # source - готовое число или калькулятор, сумма считается при выводе
        if isinstance(source, bool) or not isinstance(source, (Real, AreaCalculator)):
            raise TypeError(f"Ожидался калькулятор или число, получено {type(source).__name__}")
        self.source = source

    @property
    def total(self):
        if isinstance(self.source, AreaCalculator):
            return self.source.sum()
        return self.source

    @property
    def title(self):
        if isinstance(self.source, AreaCalculator):
            return self.source.title
        return AreaCalculator.title

    def render(self, output_format=None):
        return render(self.total, output_format, title=self.title)

    def json(self):
        return self.render(OutputFormat.JSON)

    def html(self):
        return self.render(OutputFormat.HTML)

    def text(self):
        return self.render(OutputFormat.TEXT)
