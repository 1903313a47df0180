import logging
import math
import sys

from typing import Iterable

from graph import Arc, Graph, Weight
from mst_errors import DisconnectedGraphError, GraphFormatError
from partial_tree import PartialTree, PartialTreeList

logger = logging.getLogger(__name__)


def initialize(g: Graph) -> PartialTreeList:
    return PartialTreeList.initialize(g)


def _cheapest_outgoing_arc(ptlist: PartialTreeList, ptx: PartialTree) -> Arc:
    arcs = ptx.arcs

    while not arcs.is_empty():
        alpha = arcs.delete_min()
        if ptlist.graph.find_root(alpha.v2) is not ptx.root:
            return alpha
        logger.debug('%s is in %s', alpha, ptx)

    raise DisconnectedGraphError(f'graph is disconnected: no arc leaves the partial tree rooted at {ptx.root.name}')


def execute(ptlist: PartialTreeList) -> list[Arc]:
    '''Run the partial tree algorithm until a single tree is left.

    Each round pops the front tree, takes its cheapest arc that leads to
    another tree, merges that tree in and appends the result to the rear.
    Returns the arcs of the spanning tree in the order they were chosen.
    '''
    mst = []

    while len(ptlist) > 1:
        ptx = ptlist.remove()
        alpha = _cheapest_outgoing_arc(ptlist, ptx)
        mst.append(alpha)

        pty = ptlist.remove_tree_containing(alpha.v2)
        logger.debug('%s is a component of the MST, merging %s into %s', alpha, pty, ptx)
        ptx.merge(pty)
        ptlist.append(ptx)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('Partial trees: %s', ', '.join(str(t) for t in ptlist))

    return mst


def minimum_spanning_tree(g: Graph) -> list[Arc]:
    return execute(initialize(g))


def total_weight(arcs: Iterable[Arc]) -> Weight:
    return sum(arc.weight for arc in arcs)


def main(argv: list[str] | None = None) -> int:
    import argparse

    from kruskal import kruskal
    from logging_config import configure_logging

    parser = argparse.ArgumentParser(prog='mst',
                                     description='Build a minimum spanning tree by merging partial trees')
    parser.add_argument('filename')
    parser.add_argument('-f', '--format',
                        default='auto',
                        choices=['auto', 'named', 'indexed'],
                        help='the graph file format (detected from the header by default)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print the arcs of the spanning tree')
    parser.add_argument('--debug', action='store_true',
                        help='trace every merge step')
    parser.add_argument('--check', action='store_true',
                        help='cross check the total weight against Kruskal\'s algorithm')

    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.debug else logging.WARNING)

    try:
        g = Graph.from_file(args.filename, args.format)
        mst = minimum_spanning_tree(g)
    except (GraphFormatError, DisconnectedGraphError) as e:
        print(f'{args.filename}: {e}', file=sys.stderr)
        return 1

    weight = total_weight(mst)
    print('Final MST sum:', weight)
    if args.verbose:
        print(mst)

    if args.check:
        expected = total_weight(kruskal(g))
        if not math.isclose(expected, weight):
            print(f'Mismatch: Kruskal MST sum is {expected}', file=sys.stderr)
            return 1
        print('Kruskal MST sum matches')

    return 0


if __name__ == '__main__':
    sys.exit(main())
