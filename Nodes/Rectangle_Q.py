class Rectangle_Q:
    def __init__(self, x, y, w, h):
        # (x, y) = centro del rectángulo
        if w < 0 or h < 0:
            raise ValueError(f"Rectangle_Q con extensión negativa: w={w}, h={h}")
        self.x = x
        self.y = y
        self.w = w  # mitad del ancho
        self.h = h  # mitad del alto

        # bordes guardados: los hijos los heredan sin recalcular
        self.left = x - w
        self.right = x + w
        self.bottom = y - h
        self.top = y + h

    @classmethod
    def from_edges(cls, left, bottom, right, top):
        """Rectángulo con bordes exactos; centro y semiejes se derivan de ellos."""
        rect = cls((left + right) / 2, (bottom + top) / 2, (right - left) / 2, (top - bottom) / 2)
        rect.left, rect.right = left, right
        rect.bottom, rect.top = bottom, top
        return rect

    def contains(self, point):
        # semiabierto: incluye el borde inferior, excluye el superior
        return (self.left <= point[0] < self.right and
                self.bottom <= point[1] < self.top)

    def intersects(self, range_rect):
        return not (range_rect.left > self.right or
                    range_rect.right < self.left or
                    range_rect.bottom > self.top or
                    range_rect.top < self.bottom)

    def area(self):
        return (self.right - self.left) * (self.top - self.bottom)

    def quadrants(self):
        """Los cuatro cuadrantes en orden NE, NW, SE, SW (+y hacia el norte).

        Los hermanos comparten exactamente la línea de corte (x, y), así que
        todo punto del padre cae en un único cuadrante.
        """
        x, y = self.x, self.y
        return [
            Rectangle_Q.from_edges(x, y, self.right, self.top),
            Rectangle_Q.from_edges(self.left, y, x, self.top),
            Rectangle_Q.from_edges(x, self.bottom, self.right, y),
            Rectangle_Q.from_edges(self.left, self.bottom, x, y),
        ]

    def __eq__(self, other):
        if not isinstance(other, Rectangle_Q):
            return NotImplemented
        return ((self.left, self.bottom, self.right, self.top) ==
                (other.left, other.bottom, other.right, other.top))

    def __repr__(self):
        return f"Rectangle_Q(x={self.x}, y={self.y}, w={self.w}, h={self.h})"
