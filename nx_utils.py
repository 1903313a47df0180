import networkx as nx
import random

from typing import Any, Callable, Iterable

from graph import Arc, Graph

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    random.seed(seed)
    return lambda _a, _b: random.randint(low, high)

def from_nx(g: nx.classes.graph.Graph,
            decide_weight: Callable[[Any, Any], int] | None = None,
            nodename: Callable[[Any], str] = str) -> Graph:
    graph = Graph()
    for node in g.nodes:
        graph.add_vertex(nodename(node))

    for u, v, data in g.edges(data=True):
        # Use the stored weight unless told how to pick one
        w = decide_weight(u, v) if decide_weight is not None else data['weight']
        graph.add_edge(graph.vertex(nodename(u)), graph.vertex(nodename(v)), w)

    return graph

def to_nx(g: Graph) -> nx.Graph:
    out = nx.Graph()
    out.add_nodes_from(v.name for v in g.vertices)
    for arc in g.edges:
        a, b = arc.v1.name, arc.v2.name
        # nx.Graph keeps one edge per pair, the cheapest one is the only one an MST can use
        if not out.has_edge(a, b) or arc.weight < out[a][b]['weight']:
            out.add_edge(a, b, weight=arc.weight)
    return out

def arcs_to_nx(arcs: Iterable[Arc]) -> nx.Graph:
    out = nx.Graph()
    for arc in arcs:
        out.add_edge(arc.v1.name, arc.v2.name, weight=arc.weight)
    return out

def to_output_file(g: nx.classes.graph.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   fmt: str='named',
                   nodename: Callable[[Any], str]= str) -> None:
    from_nx(g, decide_weight, nodename).write(fname, fmt)


if __name__ == '__main__':
    import argparse
    import os

    parser = argparse.ArgumentParser(prog='nx_utils',
                                     description='Write networkx graph families as MST test inputs')
    parser.add_argument('-o', '--outdir', default='testfiles')
    parser.add_argument('-s', '--seed', default=0, type=int)
    parser.add_argument('--format', default='named', choices=['named', 'indexed'])
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=500, type=int)

    args = parser.parse_args()
    os.makedirs(args.outdir, exist_ok=True)

    def hypercube_idx(node: tuple[int, ...]) -> str:
        return str(sum(node[-i-1]* 2**i for i in range(len(node))))

    tests = {
        'circulant_n1000': (nx.circulant_graph(1000, [1, 2]), str),
        'hypercube_n1024': (nx.hypercube_graph(10), hypercube_idx),
        'conn_caveman_n1000': (nx.connected_caveman_graph(100, 10), str),
        # disconnected on purpose
        'caveman_n1000': (nx.caveman_graph(100, 10), str),
    }

    for (name, (g, nodename)) in tests.items():
        fname = os.path.join(args.outdir, f'{name}.txt')
        print(f'Writing {fname} ({g.number_of_nodes()} vertices, {g.number_of_edges()} edges)')
        to_output_file(g,
                       arbitrary_weight(args.min_weight, args.max_weight, args.seed),
                       fname,
                       fmt=args.format,
                       nodename=nodename)
