from .calculator import AreaCalculator, VolumeCalculator, sum_areas
from .errors import (
    InvalidShapeError, InvalidTotalError, SolidNotesError, UnsupportedFormatError, UnsupportedShapeError,
)
from .interfaces import ManageShape, SupportsArea, SupportsVolume
from .outputter import OutputFormat, SumCalculatorOutputter, render
from .shapes import Circle, Cuboid, Polygon, Rectangle, Shape, SolidShape, Sphere, Square, Triangle

__all__ = [
    'AreaCalculator', 'VolumeCalculator', 'sum_areas',
    'SolidNotesError', 'InvalidShapeError', 'InvalidTotalError', 'UnsupportedShapeError', 'UnsupportedFormatError',
    'SupportsArea', 'SupportsVolume', 'ManageShape',
    'OutputFormat', 'SumCalculatorOutputter', 'render',
    'Shape', 'SolidShape', 'Circle', 'Square', 'Rectangle', 'Triangle', 'Polygon', 'Cuboid', 'Sphere',
]
