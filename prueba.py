from trees.Quad_tree import QuadTree
from trees.metrics import jittered_cloud, uniform_points, benchmark_queries, quadtree_stats
from Nodes.Rectangle_Q import Rectangle_Q
from Nodes.Circle_Q import Circle_Q
from Nodes.Quad_node import QueryStats

# mismo espacio que la ventana de la demo: 600x400
tree = QuadTree(Rectangle_Q(300, 200, 300, 200), capacity=4)

# llenar con puntos aleatorios
tree.insert_many(uniform_points(500, tree.boundary, rng=7, margin=50))

# "pintar" con el mouse en (150, 100)
for _ in range(10):
    tree.insert_many(jittered_cloud((150, 100), n=4, spread=10))

# Consulta rectangular alrededor del puntero
stats = QueryStats()
res = tree.query(Rectangle_Q(150, 100, 50, 50), stats)
print("Rect:", len(res), "puntos,", stats.visited, "nodos visitados")

# Consulta circular
res = tree.query(Circle_Q(450, 300, 40))
print("Circle:", len(res), "puntos,", tree.last_query_visits, "nodos visitados")

print("Stats:", quadtree_stats(tree))
print("Queries:", benchmark_queries(tree, n_queries=50, window=30, seed=1))
