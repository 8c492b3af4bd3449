from Nodes.Bucket import Bucket
from Nodes.Point import Point

DEFAULT_CAPACITY = 4
# profundidad máxima: a partir de aquí el bucket acepta desborde
DEFAULT_MAX_DEPTH = 32

# orden fijo de los hijos
NE, NW, SE, SW = 0, 1, 2, 3


class QueryStats:
    """Contador de nodos visitados durante una consulta."""

    def __init__(self):
        self.visited = 0
        self.pruned = 0

    def reset(self):
        self.visited = 0
        self.pruned = 0

    def __repr__(self):
        return f"QueryStats(visited={self.visited}, pruned={self.pruned})"


class QuadNode:
    def __init__(self, boundary, capacity=DEFAULT_CAPACITY, depth=0, max_depth=DEFAULT_MAX_DEPTH):
        if capacity < 1:
            raise ValueError(f"capacity debe ser >= 1 (recibido {capacity})")
        if max_depth < 0:
            raise ValueError(f"max_depth debe ser >= 0 (recibido {max_depth})")

        self.boundary = boundary
        self.capacity = capacity
        self.depth = depth
        self.max_depth = max_depth
        self.bucket = Bucket(capacity)

        # hijos: None hasta subdividir, luego [NE, NW, SE, SW]
        self.children = None

    @property
    def points(self):
        return self.bucket.points

    @property
    def is_leaf(self):
        return self.children is None

    def subdivide(self):
        """Divide el nodo en cuatro cuadrantes.

        Los puntos ya guardados se quedan en este nodo (almacenamiento por
        capas); solo los nuevos bajan a los hijos.
        """
        if self.children is not None:
            raise RuntimeError(f"el nodo {self.boundary!r} ya está subdividido")

        self.children = [
            QuadNode(quadrant, self.capacity, self.depth + 1, self.max_depth)
            for quadrant in self.boundary.quadrants()
        ]

    def insert(self, point):
        if not self.boundary.contains(point):
            return False

        if self.children is None:
            if self.bucket.insert(point):
                return True

            # nivel más profundo: no se subdivide más
            if self.depth >= self.max_depth:
                self.bucket.force_insert(point)
                return True

            self.subdivide()

        return self.children[self._child_index(point)].insert(point)

    def _child_index(self, point):
        # la línea de corte es el centro; los hijos la comparten exactamente
        east = point[0] >= self.boundary.x
        north = point[1] >= self.boundary.y
        if north:
            return NE if east else NW
        return SE if east else SW

    def query(self, region, found=None, stats=None):
        """Puntos del subárbol dentro de `region` (Rectangle_Q o Circle_Q)."""
        if found is None:
            found = []

        if stats is not None:
            stats.visited += 1

        if not region.intersects(self.boundary):
            if stats is not None:
                stats.pruned += 1
            return found

        for p in self.bucket:
            if region.contains(p):
                found.append(p)

        if self.children is not None:
            for child in self.children:
                child.query(region, found, stats)

        return found

    def show(self):
        """Recorrido en preorden: (boundary, puntos) por nodo, raíz primero."""
        yield self.boundary, tuple(self.bucket.points)
        if self.children is not None:
            for child in self.children:
                yield from child.show()

    def iter_nodes(self):
        yield self
        if self.children is not None:
            for child in self.children:
                yield from child.iter_nodes()

    def height(self):
        if self.children is None:
            return 0
        return 1 + max(child.height() for child in self.children)

    def __len__(self):
        return sum(len(node.bucket) for node in self.iter_nodes())

    def __repr__(self):
        kind = "leaf" if self.is_leaf else "internal"
        return f"QuadNode({self.boundary!r}, depth={self.depth}, {kind}, points={len(self.bucket)})"


def as_point(p):
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))
