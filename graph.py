import logging
import math

from typing import Iterable, Iterator, NamedTuple

from mst_errors import GraphFormatError

logger = logging.getLogger(__name__)

FORMATS = ('named', 'indexed')

Weight = int | float


class Vertex:
    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.name = name
        self.neighbors: list['Neighbor'] = []
        # index into the owning graph's vertex list
        self.parent = id

    def __repr__(self):
        return self.name

    __str__ = __repr__


class Neighbor(NamedTuple):
    vertex: Vertex
    weight: Weight


class Arc(NamedTuple):
    v1: Vertex
    v2: Vertex
    weight: Weight

    def triple(self) -> tuple[str, str, Weight]:
        return (self.v1.name, self.v2.name, self.weight)

    def __repr__(self):
        return f'({self.v1.name}, {self.v2.name}, {self.weight})'

    __str__ = __repr__


class Graph:
    '''Undirected weighted graph backed by an arena of vertices.

    Vertices are addressed by their position in ``vertices``; a vertex's
    ``parent`` is such a position, so root resolution never holds on to
    vertex objects. ``edges`` keeps every undirected edge in load order.
    '''

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.edges: list[Arc] = []
        self._by_name: dict[str, Vertex] = {}

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __repr__(self):
        return f'Graph({len(self.vertices)} vertices, {len(self.edges)} edges)'

    def vertex(self, name: str) -> Vertex:
        return self._by_name[name]

    def add_vertex(self, name: str) -> Vertex:
        if not name or any(c.isspace() for c in name):
            raise ValueError(f'invalid vertex name {name!r}')
        if name in self._by_name:
            raise ValueError(f'duplicate vertex {name!r}')

        v = Vertex(len(self.vertices), name)
        self.vertices.append(v)
        self._by_name[name] = v
        return v

    def add_edge(self, a: Vertex, b: Vertex, weight: Weight) -> Arc:
        for v in (a, b):
            if v.id >= len(self.vertices) or self.vertices[v.id] is not v:
                raise ValueError(f'vertex {v.name!r} does not belong to this graph')

        a.neighbors.append(Neighbor(b, weight))
        if a is not b:
            b.neighbors.append(Neighbor(a, weight))

        arc = Arc(a, b, weight)
        self.edges.append(arc)
        return arc

    def find_root(self, vertex: Vertex) -> Vertex:
        # no path compression: parents only change when trees merge
        v = vertex
        while v.parent != v.id:
            v = self.vertices[v.parent]
        return v

    def reset(self) -> None:
        for v in self.vertices:
            v.parent = v.id

    @classmethod
    def from_lines(cls, lines: Iterable[str], fmt: str = 'auto') -> 'Graph':
        rows = list(_tokenize(lines))
        if not rows:
            raise GraphFormatError('empty graph description')

        if fmt == 'auto':
            fmt = 'indexed' if len(rows[0][1]) == 2 else 'named'

        if fmt == 'named':
            g = cls._parse_named(rows)
        elif fmt == 'indexed':
            g = cls._parse_indexed(rows)
        else:
            raise ValueError(f'unknown graph format {fmt!r}')

        logger.debug('Loaded %s graph: %d vertices, %d edges', fmt, len(g.vertices), len(g.edges))
        return g

    @classmethod
    def from_file(cls, fname: str, fmt: str = 'auto') -> 'Graph':
        with open(fname, 'r') as f:
            return cls.from_lines(f, fmt)

    @classmethod
    def _parse_named(cls, rows: list[tuple[int, list[str]]]) -> 'Graph':
        lineno, header = rows[0]
        if len(header) != 1:
            raise GraphFormatError('expected the vertex count', lineno)
        nvertices = _parse_count(header[0], lineno)

        if len(rows) - 1 < nvertices:
            raise GraphFormatError(f'expected {nvertices} vertex names, found {len(rows) - 1}')

        g = cls()
        for lineno, tokens in rows[1:nvertices+1]:
            if len(tokens) != 1:
                raise GraphFormatError('expected a single vertex name', lineno)
            if tokens[0] in g:
                raise GraphFormatError(f'duplicate vertex {tokens[0]!r}', lineno)
            g.add_vertex(tokens[0])

        for lineno, tokens in rows[nvertices+1:]:
            if len(tokens) != 3:
                raise GraphFormatError('expected "<vertex> <vertex> <weight>"', lineno)
            a, b, w = tokens
            for name in (a, b):
                if name not in g:
                    raise GraphFormatError(f'unknown vertex {name!r}', lineno)
            g.add_edge(g.vertex(a), g.vertex(b), _parse_weight(w, lineno))

        return g

    @classmethod
    def _parse_indexed(cls, rows: list[tuple[int, list[str]]]) -> 'Graph':
        header_lineno, header = rows[0]
        if len(header) != 2:
            raise GraphFormatError('expected "<nvertices> <nedges>"', header_lineno)
        nvertices = _parse_count(header[0], header_lineno)
        nedges = _parse_count(header[1], header_lineno)

        edge_rows = rows[1:]
        if len(edge_rows) != nedges:
            raise GraphFormatError(f'header declares {nedges} edges, found {len(edge_rows)}', header_lineno)

        g = cls()
        for i in range(nvertices):
            g.add_vertex(str(i))

        for lineno, tokens in edge_rows:
            if len(tokens) != 3:
                raise GraphFormatError('expected "<u> <v> <weight>"', lineno)
            u = _parse_count(tokens[0], lineno)
            v = _parse_count(tokens[1], lineno)
            for idx in (u, v):
                if idx >= nvertices:
                    raise GraphFormatError(f'vertex index {idx} out of range', lineno)
            g.add_edge(g.vertices[u], g.vertices[v], _parse_weight(tokens[2], lineno))

        return g

    def to_lines(self, fmt: str = 'named') -> Iterator[str]:
        if fmt == 'named':
            yield f'{len(self.vertices)}'
            for v in self.vertices:
                yield v.name
            for arc in self.edges:
                yield f'{arc.v1.name} {arc.v2.name} {arc.weight}'
        elif fmt == 'indexed':
            yield f'{len(self.vertices)} {len(self.edges)}'
            for arc in self.edges:
                yield f'{arc.v1.id} {arc.v2.id} {arc.weight}'
        else:
            raise ValueError(f'unknown graph format {fmt!r}')

    def write(self, fname: str, fmt: str = 'named') -> None:
        with open(fname, 'w') as f:
            for line in self.to_lines(fmt):
                f.write(line + '\n')


def _tokenize(lines: Iterable[str]) -> Iterator[tuple[int, list[str]]]:
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        yield lineno, line.split()


def _parse_count(token: str, lineno: int) -> int:
    try:
        n = int(token)
    except ValueError:
        raise GraphFormatError(f'expected a non-negative integer, got {token!r}', lineno) from None
    if n < 0:
        raise GraphFormatError(f'expected a non-negative integer, got {token!r}', lineno)
    return n


def _parse_weight(token: str, lineno: int) -> Weight:
    try:
        return int(token)
    except ValueError:
        pass

    try:
        w = float(token)
    except ValueError:
        raise GraphFormatError(f'invalid weight {token!r}', lineno) from None
    if not math.isfinite(w):
        raise GraphFormatError(f'invalid weight {token!r}', lineno)
    return w
