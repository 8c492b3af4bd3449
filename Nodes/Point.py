from typing import NamedTuple


class Point(NamedTuple):
    """Punto 2D inmutable. Dos puntos iguales se guardan por separado."""
    x: float
    y: float

    def __repr__(self):
        return f"Point({self.x}, {self.y})"
