import numpy as np

from Nodes.Circle_Q import Circle_Q
from Nodes.Quad_node import DEFAULT_CAPACITY, DEFAULT_MAX_DEPTH, QuadNode, QueryStats, as_point
from Nodes.Rectangle_Q import Rectangle_Q


class QuadTree:
    def __init__(self, boundary, capacity=DEFAULT_CAPACITY, max_depth=DEFAULT_MAX_DEPTH):
        self.boundary = boundary
        self.capacity = capacity
        self.max_depth = max_depth
        self.root = QuadNode(boundary, capacity, 0, max_depth)

        # nodos visitados en la última consulta
        self.last_query_visits = 0

    def insert(self, point):
        return self.root.insert(as_point(point))

    def insert_many(self, points):
        """Inserta un arreglo (N, 2). Devuelve una máscara de los aceptados."""
        points = np.asarray(points, dtype=float)
        if points.size == 0:
            return np.zeros(0, dtype=bool)
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"se esperaba un arreglo (N, 2), recibido {points.shape}")

        accepted = np.zeros(len(points), dtype=bool)
        for i, (x, y) in enumerate(points.tolist()):
            accepted[i] = self.root.insert(as_point((x, y)))
        return accepted

    def query(self, region, stats=None):
        if stats is None:
            stats = QueryStats()
        before = stats.visited
        found = self.root.query(region, [], stats)
        self.last_query_visits = stats.visited - before
        return found

    def query_rect(self, x, y, w, h, stats=None):
        return self.query(Rectangle_Q(x, y, w, h), stats)

    def query_circle(self, x, y, r, stats=None):
        return self.query(Circle_Q(x, y, r), stats)

    def show(self):
        return self.root.show()

    def height(self):
        return self.root.height()

    def clear(self):
        # el árbol se descarta completo
        self.root = QuadNode(self.boundary, self.capacity, 0, self.max_depth)
        self.last_query_visits = 0

    def print_tree(self):
        print("Boundary:", self.boundary)
        print("Capacity:", self.capacity, "Max depth:", self.max_depth)
        print("Nodes:")
        for node in self.root.iter_nodes():
            indent = "  " * (node.depth + 1)
            print(f"{indent}{node.boundary}: {list(node.points)}")

    def __len__(self):
        return len(self.root)

    def __repr__(self):
        return f"QuadTree({self.boundary!r}, capacity={self.capacity}, points={len(self)})"
