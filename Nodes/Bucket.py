class Bucket:
    def __init__(self, capacity=4):
        self.points = []
        self.capacity = capacity
        # en modo desborde se aceptan puntos sin respetar la capacidad
        self.overflow = False

    def insert(self, point):
        if self.overflow or len(self.points) < self.capacity:
            self.points.append(point)
            return True
        return False

    def force_insert(self, point):
        """Pasa a modo desborde y guarda el punto siempre."""
        self.overflow = True
        self.points.append(point)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __repr__(self):
        return f"Bucket({self.points})"
