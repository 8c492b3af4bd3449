import pytest

from Nodes.Circle_Q import Circle_Q
from Nodes.Point import Point
from Nodes.Rectangle_Q import Rectangle_Q


def test_point_is_immutable_tuple():
    p = Point(1.5, -2.0)
    assert p == (1.5, -2.0)
    assert p.x == 1.5 and p.y == -2.0
    with pytest.raises(AttributeError):
        p.x = 3


def test_rect_contains_is_half_open():
    r = Rectangle_Q(0, 0, 10, 10)
    assert r.contains(Point(-10, -10))
    assert r.contains(Point(0, 0))
    assert not r.contains(Point(10, 0))
    assert not r.contains(Point(0, 10))
    assert r.contains(Point(9.999, 9.999))


def test_degenerate_rect_contains_nothing():
    assert not Rectangle_Q(5, 5, 0, 3).contains(Point(5, 5))
    assert not Rectangle_Q(5, 5, 0, 0).contains(Point(5, 5))


def test_negative_extent_rejected():
    with pytest.raises(ValueError):
        Rectangle_Q(0, 0, -1, 1)


def test_rect_intersects_cases():
    r = Rectangle_Q(0, 0, 10, 10)
    # contenido, contenedor, borde compartido, disjunto
    assert r.intersects(Rectangle_Q(1, 1, 2, 2))
    assert r.intersects(Rectangle_Q(0, 0, 50, 50))
    assert r.intersects(Rectangle_Q(20, 0, 10, 10))
    assert not r.intersects(Rectangle_Q(30, 0, 10, 10))
    assert not r.intersects(Rectangle_Q(0, -25, 5, 5))


def test_quadrants_partition_parent():
    parent = Rectangle_Q(3, -7, 8, 4)
    quads = parent.quadrants()
    ne, nw, se, sw = quads

    assert sum(q.area() for q in quads) == parent.area()
    assert ne.left == nw.right == parent.x
    assert se.left == sw.right == parent.x
    assert ne.bottom == se.top == parent.y
    assert nw.bottom == sw.top == parent.y
    assert min(q.left for q in quads) == parent.left
    assert max(q.right for q in quads) == parent.right
    assert min(q.bottom for q in quads) == parent.bottom
    assert max(q.top for q in quads) == parent.top

    # ningún punto pertenece a dos cuadrantes
    samples = [Point(parent.x, parent.y), Point(parent.x, parent.bottom),
               Point(parent.left, parent.y), Point(4.5, -5.5), Point(-4, -10)]
    for p in samples:
        assert sum(q.contains(p) for q in quads) == (1 if parent.contains(p) else 0)


def test_circle_contains_is_closed():
    c = Circle_Q(0, 0, 5)
    assert c.contains(Point(3, 4))
    assert not c.contains(Point(3, 4.01))


def test_circle_radius_zero_contains_only_center():
    c = Circle_Q(2, 2, 0)
    assert c.contains(Point(2, 2))
    assert not c.contains(Point(2, 2.000001))


def test_circle_negative_radius_rejected():
    with pytest.raises(ValueError):
        Circle_Q(0, 0, -0.5)


def test_circle_intersects_rect():
    r = Rectangle_Q(0, 0, 10, 10)
    assert Circle_Q(0, 0, 1).intersects(r)          # dentro
    assert Circle_Q(0, 0, 500).intersects(r)        # lo contiene
    assert Circle_Q(15, 0, 5).intersects(r)         # toca el lado
    assert not Circle_Q(15, 0, 4.9).intersects(r)
    # esquina: distancia sqrt(2)*5 ~ 7.07
    assert Circle_Q(15, 15, 7.1).intersects(r)
    assert not Circle_Q(15, 15, 7.0).intersects(r)


def test_quadrants_share_split_line_exactly():
    parent = Rectangle_Q(-1.092256118903972, 0.0, 7.218184923084418, 1.0)
    ne, nw, se, sw = parent.quadrants()
    assert nw.right == ne.left == parent.x
    assert sw.right == se.left == parent.x
    assert ne.left == se.left and nw.left == sw.left == parent.left
    assert ne.right == parent.right
    # justo a la izquierda de la línea de corte
    p = Point(-1.0922561189039723, 0.5)
    assert parent.contains(p)
    assert [q.contains(p) for q in (ne, nw, se, sw)] == [False, True, False, False]


def test_from_edges_keeps_edges():
    r = Rectangle_Q.from_edges(0.1, 0.2, 0.7, 1.3)
    assert (r.left, r.bottom, r.right, r.top) == (0.1, 0.2, 0.7, 1.3)
    assert r.contains(Point(0.1, 0.2))
    assert not r.contains(Point(0.7, 0.5))
