import numpy as np
import pytest

from Nodes.Rectangle_Q import Rectangle_Q
from trees.Quad_tree import QuadTree


@pytest.fixture
def root_rect():
    return Rectangle_Q(0, 0, 100, 100)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def filled_tree(root_rect, rng):
    tree = QuadTree(root_rect, capacity=4)
    pts = rng.uniform(-99, 99, size=(300, 2))
    tree.insert_many(pts)
    return tree, pts
