class Circle_Q:
    """Ventana de consulta circular: centro (x, y) y radio r."""

    def __init__(self, x, y, r):
        if r < 0:
            raise ValueError(f"Circle_Q con radio negativo: r={r}")
        self.x = x
        self.y = y
        self.r = r

    def contains(self, point):
        dx = point[0] - self.x
        dy = point[1] - self.y
        return dx * dx + dy * dy <= self.r * self.r

    def intersects(self, rect):
        """Distancia del centro al punto más cercano del rectángulo (clamp)."""
        nearest_x = min(max(self.x, rect.left), rect.right)
        nearest_y = min(max(self.y, rect.bottom), rect.top)
        dx = self.x - nearest_x
        dy = self.y - nearest_y
        return dx * dx + dy * dy <= self.r * self.r

    def __repr__(self):
        return f"Circle_Q(x={self.x}, y={self.y}, r={self.r})"
