import logging
import random

import numpy as np

from graph import Graph

logger = logging.getLogger(__name__)


def generate(nvertices: int,
             density: float = 0.5,
             min_weight: int = 1,
             max_weight: int = 100,
             seed: int | None = None,
             connected: bool = True) -> np.ndarray:
    '''Random undirected graph as an upper triangular weight matrix.

    A zero entry means "no edge", so weights must be at least 1. With
    ``connected`` a random spanning path is laid down before the remaining
    edges, and the edge count never drops below ``nvertices - 1``.
    '''
    if min_weight < 1 or max_weight < min_weight:
        raise ValueError(f'invalid weight range [{min_weight}, {max_weight}]')
    if not 0.0 <= density <= 1.0:
        raise ValueError(f'density must lie in [0, 1], got {density}')

    rng = random.Random(seed)
    max_edges = nvertices * (nvertices-1) // 2
    total_edges = int(density * max_edges)
    if connected:
        total_edges = max(total_edges, nvertices - 1)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)
    placed = 0

    if connected and nvertices > 1:
        order = list(range(nvertices))
        rng.shuffle(order)
        for a, b in zip(order, order[1:]):
            adj_matrix[min(a, b), max(a, b)] = rng.randint(min_weight, max_weight)
        placed = nvertices - 1

    while placed < total_edges:
        # keep trying until an unoccupied spot is found
        i = rng.randint(0, nvertices-2)
        j = rng.randint(i+1, nvertices-1) # ensure no self-loops
        if adj_matrix[i, j] != 0:
            continue

        # Only bother filling upper triangle for undirected graphs
        adj_matrix[i, j] = rng.randint(min_weight, max_weight)
        placed += 1

    logger.debug('Generated %d edges on %d vertices', placed, nvertices)
    return adj_matrix


def to_graph(adj_matrix: np.ndarray) -> Graph:
    g = Graph()
    nvertices = adj_matrix.shape[0]
    for i in range(nvertices):
        g.add_vertex(str(i))

    for i, j in zip(*np.nonzero(np.triu(adj_matrix, k=1))):
        g.add_edge(g.vertices[i], g.vertices[j], int(adj_matrix[i, j]))

    return g


if __name__ == '__main__':
    import argparse

    from logging_config import configure_logging

    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graphs for MST testing')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('--format', default='named', choices=['named', 'indexed'])
    parser.add_argument('--allow-disconnected', action='store_true',
                        help='do not force a spanning path into the graph')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    adj_matrix = generate(args.nvertices,
                          density=args.density,
                          min_weight=args.min_weight,
                          max_weight=args.max_weight,
                          seed=args.seed,
                          connected=not args.allow_disconnected)
    g = to_graph(adj_matrix)

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({len(g.edges)} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    if args.verbose:
        print()
        print('Graph adjacency matrix:')
        print(adj_matrix)

    g.write(args.outfile, args.format)
