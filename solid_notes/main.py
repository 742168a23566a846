import logging

from . import factories
from .app import setup_logging
from .calculator import AreaCalculator, VolumeCalculator
from .connection import PasswordReminder, SQLiteConnection
from .errors import UnsupportedShapeError
from .outputter import OutputFormat, SumCalculatorOutputter
from .shapes import Circle, Cuboid, Rectangle, Square, Triangle


def main():
    setup_logging()

    # ==============================
    # S, O: калькулятор считает, outputter форматирует
    # ==============================
    shapes = [Circle(2), Square(5), Square(6)]
    calculator = AreaCalculator(shapes)
    output = SumCalculatorOutputter(calculator)
    for output_format in OutputFormat:
        print(output.render(output_format))
    logging.info(f"Сумма площадей {shapes}: {calculator.sum()}")

    # Добавим треугольник - калькулятор менять не пришлось
    print(SumCalculatorOutputter(AreaCalculator(shapes + [Triangle(3, 4)])).text())

    # Те же фигуры, созданные фабриками, дают ту же сумму
    composed = [factories.circle(2), factories.square(5), factories.square(6)]
    print(SumCalculatorOutputter(AreaCalculator(composed)).text())

    # ==============================
    # L: квадрат подставляется вместо прямоугольника, объёмный калькулятор - вместо обычного
    # ==============================
    for rect in (Rectangle(5, 5), Square(5)):
        print(rect, f"\t#Ширина: {rect.width}, Высота: {rect.height}, Площадь: {rect.area()}")
    print("Сумма объёмов:", VolumeCalculator([Cuboid(2), factories.cuboid(3)]).sum())

    # ==============================
    # I: calculate() у плоских фигур - площадь, у объёмных - объём
    # ==============================
    for shape in (Square(3), Cuboid(3)):
        print(shape, "->", shape.calculate())

    # А вот объект без area() калькулятор не примет
    try:
        AreaCalculator([Square(1), "не фигура"]).sum()
    except UnsupportedShapeError as e:
        print(e)

    # ==============================
    # D: PasswordReminder зависит от интерфейса подключения, а не от sqlite3
    # ==============================
    PasswordReminder(SQLiteConnection()).check()


if __name__ == '__main__':
    main()
