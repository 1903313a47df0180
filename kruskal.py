from graph import Arc, Graph
from mst_errors import DisconnectedGraphError


class UnionFind:
    def __init__(self, n_verts: int) -> None:
        self.vertices = [i for i in range(n_verts)]

    def find(self, index: int) -> int:
        start = index

        while self.vertices[index] != index:
            index = self.vertices[index]

        self.vertices[start] = index
        return index

    def union(self, i: int, j: int) -> bool:
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False
        self.vertices[i] = j
        return True


def kruskal(g: Graph) -> list[Arc]:
    '''Reference MST: sort every edge by weight, keep the ones joining two components'''
    edges = sorted(g.edges, key=lambda e: e.weight)
    uf = UnionFind(len(g))
    mst = []

    for edge in edges:
        if uf.union(edge.v1.id, edge.v2.id):
            mst.append(edge)

    if len(g) > 0 and len(mst) != len(g) - 1:
        raise DisconnectedGraphError(f'graph is disconnected: spanning forest has {len(mst)} arcs for {len(g)} vertices')

    return mst
