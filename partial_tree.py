import logging

from archeap import ArcHeap
from graph import Arc, Graph, Vertex
from mst_errors import EmptyListError, MergedTreeError, NotFoundError, UnsupportedOperationError

logger = logging.getLogger(__name__)


class PartialTree:
    def __init__(self, graph: Graph, root: Vertex) -> None:
        self.graph = graph
        self._root = root
        self._arcs: ArcHeap | None = ArcHeap()
        self.nvertices = 1

    @property
    def root(self) -> Vertex:
        return self._root

    @property
    def arcs(self) -> ArcHeap:
        if self._arcs is None:
            raise MergedTreeError(f'tree rooted at {self._root.name} has been merged away')
        return self._arcs

    @property
    def merged(self) -> bool:
        return self._arcs is None

    def contains(self, vertex: Vertex) -> bool:
        return self.graph.find_root(vertex) is self._root

    def merge(self, other: 'PartialTree') -> None:
        if other is self:
            raise ValueError('cannot merge a partial tree with itself')
        if other.graph is not self.graph:
            raise ValueError('cannot merge partial trees of different graphs')

        arcs = self.arcs
        other_arcs = other.arcs

        # union step: other's root now resolves to ours
        other._root.parent = self._root.id
        arcs.merge(other_arcs)
        self.nvertices += other.nvertices
        other._arcs = None

    def __repr__(self):
        if self.merged:
            return f'<{self._root.name}: merged>'
        return f'<{self._root.name}: {self.nvertices} vertices, {len(self._arcs)} arcs>'

    __str__ = __repr__


class _Node:
    __slots__ = ('tree', 'next')

    def __init__(self, tree: PartialTree) -> None:
        self.tree = tree
        self.next: '_Node | None' = None


class PartialTreeList:
    '''Circular singly linked list of partial trees.

    Only the rear node is referenced; the front is ``rear.next``. Trees are
    appended at the rear and removed from the front, so popping and
    re-appending cycles through every tree in turn.
    '''

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._rear: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> 'PartialTreeListIterator':
        return PartialTreeListIterator(self)

    def __repr__(self):
        return f'PartialTreeList({list(self)})'

    @classmethod
    def initialize(cls, graph: Graph) -> 'PartialTreeList':
        graph.reset()
        ptlist = cls(graph)

        for v in graph.vertices:
            tree = PartialTree(graph, v)
            for neighbor in v.neighbors:
                tree.arcs.insert(Arc(v, neighbor.vertex, neighbor.weight))
            ptlist.append(tree)

        logger.debug('Initialized %d singleton partial trees', len(ptlist))
        return ptlist

    def append(self, tree: PartialTree) -> None:
        node = _Node(tree)
        if self._rear is None:
            node.next = node
        else:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._size += 1

    def remove(self) -> PartialTree:
        if self._rear is None:
            raise EmptyListError('partial tree list is empty')

        front = self._rear.next
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._size -= 1
        return front.tree

    def remove_tree_containing(self, vertex: Vertex) -> PartialTree:
        if self._rear is None:
            raise EmptyListError('partial tree list is empty')

        root = self.graph.find_root(vertex)

        prev = self._rear
        for _ in range(self._size):
            node = prev.next
            if node.tree.root is root:
                if node is prev:
                    self._rear = None
                else:
                    prev.next = node.next
                    if node is self._rear:
                        self._rear = prev
                self._size -= 1
                return node.tree
            prev = node

        raise NotFoundError(f'no partial tree contains vertex {vertex.name} (root {root.name})')


class PartialTreeListIterator:
    '''Read-only walk over a PartialTreeList from front to rear'''

    def __init__(self, target: PartialTreeList) -> None:
        self._rest = len(target)
        self._ptr = target._rear.next if self._rest > 0 else None

    def __iter__(self) -> 'PartialTreeListIterator':
        return self

    def __next__(self) -> PartialTree:
        if self._rest <= 0:
            raise StopIteration
        tree = self._ptr.tree
        self._ptr = self._ptr.next
        self._rest -= 1
        return tree

    def remove(self) -> None:
        raise UnsupportedOperationError('partial tree list iterator does not support remove')
