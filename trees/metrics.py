import time
import tracemalloc
import gc
from statistics import mean

import numpy as np

from .Quad_tree import QuadTree
from Nodes.Circle_Q import Circle_Q
from Nodes.Quad_node import QueryStats
from Nodes.Rectangle_Q import Rectangle_Q


def _rng(rng):
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    return rng


def uniform_points(n, boundary, rng=None, margin=0.0):
    """Genera n puntos uniformes dentro de boundary (menos un margen por lado)."""
    rng = _rng(rng)
    w = max(boundary.w - margin, 0.0)
    h = max(boundary.h - margin, 0.0)
    # uniform() puede devolver high por redondeo; insert() rechaza ese punto
    xs = rng.uniform(boundary.x - w, boundary.x + w, size=n)
    ys = rng.uniform(boundary.y - h, boundary.y + h, size=n)
    return np.column_stack((xs, ys))


def jittered_cloud(center, n=4, spread=10.0, rng=None):
    """n puntos alrededor de center, desplazados hasta +-spread en cada eje."""
    rng = _rng(rng)
    cx, cy = center
    offsets = rng.uniform(-spread, spread, size=(n, 2))
    return offsets + np.array([cx, cy], dtype=float)


def quadtree_stats(tree):
    # acepta un QuadTree o directamente un QuadNode
    root = tree.root if isinstance(tree, QuadTree) else tree

    num_nodes = 0
    leaves = []
    total_points = 0
    for node in root.iter_nodes():
        num_nodes += 1
        total_points += len(node.bucket)
        if node.is_leaf:
            leaves.append(len(node.bucket))

    num_leaves = len(leaves)
    avg_pts = mean(leaves) if leaves else 0
    lf = avg_pts / root.capacity if root.capacity > 0 else 0

    return {
        'num_nodes': num_nodes,
        'num_leaves': num_leaves,
        'num_points': total_points,
        'height': root.height(),
        'avg_points_per_leaf': avg_pts,
        'load_factor': lf
    }


def benchmark_quadtree(sizes, capacity=4, boundary=None, seed=None):
    """Inserta puntos aleatorios y devuelve métricas para cada tamaño.
    Retorna dict con listas: sizes, times, mem_peaks, load_factors, avg_occupancies, num_nodes, heights, rejected
    """
    if boundary is None:
        boundary = Rectangle_Q(0.5, 0.5, 0.5, 0.5)
    rng = _rng(seed)

    sizes = list(sizes)
    times = []
    mem_peaks = []
    load_factors = []
    avg_occupancies = []
    num_nodes = []
    heights = []
    rejected = []

    for n in sizes:
        pts = uniform_points(n, boundary, rng)

        gc.collect()
        tracemalloc.start()
        start = time.perf_counter()

        tree = QuadTree(boundary, capacity=capacity)
        accepted = tree.insert_many(pts)

        elapsed = time.perf_counter() - start
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        stats = quadtree_stats(tree)

        times.append(elapsed)
        mem_peaks.append(peak)
        load_factors.append(stats['load_factor'])
        avg_occupancies.append(stats['avg_points_per_leaf'])
        num_nodes.append(stats['num_nodes'])
        heights.append(stats['height'])
        rejected.append(int(len(accepted) - accepted.sum()))

    return {
        'sizes': sizes,
        'times': times,
        'mem_peaks': mem_peaks,
        'load_factors': load_factors,
        'avg_occupancies': avg_occupancies,
        'num_nodes': num_nodes,
        'heights': heights,
        'rejected': rejected
    }


def benchmark_queries(tree, n_queries=100, window=50.0, shape="rect", seed=None):
    """Lanza ventanas aleatorias (rect o circle) de semiancho `window` sobre el árbol."""
    if shape not in ("rect", "circle"):
        raise ValueError(f"shape desconocido: {shape!r} (usar 'rect' o 'circle')")

    rng = _rng(seed)
    centers = uniform_points(n_queries, tree.boundary, rng)

    visits = []
    found = []
    stats = QueryStats()
    start = time.perf_counter()
    for cx, cy in centers.tolist():
        if shape == "rect":
            region = Rectangle_Q(cx, cy, window, window)
        else:
            region = Circle_Q(cx, cy, window)
        stats.reset()
        res = tree.query(region, stats)
        visits.append(stats.visited)
        found.append(len(res))
    elapsed = time.perf_counter() - start

    return {
        'n_queries': n_queries,
        'avg_visits': mean(visits) if visits else 0,
        'avg_found': mean(found) if found else 0,
        'total_time': elapsed
    }


def analyze_quadtree_instance(tree):
    """Analiza un QuadTree existente y devuelve métricas similares a benchmark_quadtree para un único tamaño."""
    gc.collect()
    tracemalloc.start()
    start = time.perf_counter()

    stats = quadtree_stats(tree)

    elapsed = time.perf_counter() - start
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    return {
        'sizes': [stats['num_points']],
        'times': [elapsed],
        'mem_peaks': [peak],
        'load_factors': [stats['load_factor']],
        'avg_occupancies': [stats['avg_points_per_leaf']],
        'num_nodes': [stats['num_nodes']],
        'heights': [stats['height']]
    }
