class SolidNotesError(Exception):
    """Базовое исключение пакета."""


class UnsupportedShapeError(SolidNotesError, TypeError):
    """Элемент не выполняет контракт фигуры (нет area() / volume())."""

    def __init__(self, shape, position=None, reason="не поддерживает нужный интерфейс"):
        self.shape = shape
        self.position = position
        where = f"на позиции {position} " if position is not None else ""
        super().__init__(f"Неподдерживаемая фигура {where}({type(shape).__name__}): {reason}")


class InvalidShapeError(SolidNotesError, ValueError):
    """Некорректные размеры фигуры."""


class UnsupportedFormatError(SolidNotesError, ValueError):
    """Неизвестный формат вывода."""


class InvalidTotalError(SolidNotesError, ValueError):
    """Итог нельзя вывести (бесконечность или NaN)."""
