"""
Tests for graph loading, serialisation and root resolution.
"""

import pytest

from conftest import TRIANGLE, load
from graph import Graph
from mst_errors import GraphFormatError


class TestNamedFormat:
    def test_triangle(self, triangle):
        assert [v.name for v in triangle] == ['A', 'B', 'C']
        assert [arc.triple() for arc in triangle.edges] == [('A', 'B', 1), ('B', 'C', 2), ('A', 'C', 3)]

    def test_neighbors_are_added_to_both_endpoints_in_file_order(self, triangle):
        a = triangle.vertex('A')
        b = triangle.vertex('B')
        assert [(n.vertex.name, n.weight) for n in a.neighbors] == [('B', 1), ('C', 3)]
        assert [(n.vertex.name, n.weight) for n in b.neighbors] == [('A', 1), ('C', 2)]

    def test_every_vertex_starts_as_its_own_parent(self, triangle):
        for v in triangle:
            assert v.parent == v.id
            assert triangle.find_root(v) is v

    def test_float_weights(self):
        g = load('''
            2
            x
            y
            x y 2.5
        ''')
        assert g.edges[0].weight == 2.5

    def test_comments_and_blank_lines_are_ignored(self):
        g = load('''
            # a tiny graph
            2

            x
            y
            # the only edge
            x y 7
        ''')
        assert len(g) == 2
        assert g.edges[0].triple() == ('x', 'y', 7)

    def test_single_vertex(self):
        g = load('''
            1
            solo
        ''')
        assert len(g) == 1
        assert g.edges == []

    @pytest.mark.parametrize('text, lineno', [
        ('3\nA\nB\nC\nA D 1', 5),
        ('2\nA\nA\nA A 1', 3),
        ('2\nA\nB\nA B', 4),
        ('2\nA\nB\nA B heavy', 4),
        ('2\nA\nB\nA B nan', 4),
        ('-1', 1),
        ('2\nA B\nC', 2),
    ])
    def test_malformed_input_reports_the_line(self, text, lineno):
        with pytest.raises(GraphFormatError) as excinfo:
            Graph.from_lines(text.splitlines())
        assert excinfo.value.lineno == lineno
        assert str(excinfo.value).startswith(f'line {lineno}:')

    def test_too_few_vertex_names(self):
        with pytest.raises(GraphFormatError):
            Graph.from_lines(['3', 'A', 'B'])

    def test_empty_input(self):
        with pytest.raises(GraphFormatError):
            Graph.from_lines([])

    def test_format_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Graph.from_lines(['x'])


class TestIndexedFormat:
    def test_detected_from_header(self):
        g = load('''
            3 2
            0 1 4
            1 2 6
        ''')
        assert [v.name for v in g] == ['0', '1', '2']
        assert [arc.triple() for arc in g.edges] == [('0', '1', 4), ('1', '2', 6)]

    def test_edge_count_mismatch(self):
        with pytest.raises(GraphFormatError) as excinfo:
            Graph.from_lines(['3 2', '0 1 4'])
        assert excinfo.value.lineno == 1

    def test_index_out_of_range(self):
        with pytest.raises(GraphFormatError) as excinfo:
            Graph.from_lines(['2 1', '0 2 4'])
        assert excinfo.value.lineno == 2

    def test_forced_format_mismatch(self):
        with pytest.raises(GraphFormatError):
            Graph.from_lines(['3', 'A', 'B', 'C'], 'indexed')

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            Graph.from_lines(['1', 'A'], 'adjacency')


class TestSerialisation:
    @pytest.mark.parametrize('fmt', ['named', 'indexed'])
    def test_written_graph_reloads_with_same_adjacency(self, triangle, fmt, tmp_path):
        path = tmp_path / f'triangle.{fmt}.txt'
        triangle.write(str(path), fmt)
        reloaded = Graph.from_file(str(path))

        assert len(reloaded) == len(triangle)
        for v, w in zip(triangle, reloaded):
            assert [(n.vertex.id, n.weight) for n in v.neighbors] == [(n.vertex.id, n.weight) for n in w.neighbors]

    def test_named_lines(self, triangle):
        assert list(triangle.to_lines('named')) == [line.strip() for line in TRIANGLE.strip().splitlines()]


class TestGraphModel:
    def test_duplicate_vertex(self):
        g = Graph()
        g.add_vertex('A')
        with pytest.raises(ValueError):
            g.add_vertex('A')

    @pytest.mark.parametrize('name', ['', 'two words'])
    def test_invalid_vertex_name(self, name):
        with pytest.raises(ValueError):
            Graph().add_vertex(name)

    def test_edge_to_foreign_vertex(self):
        g, other = Graph(), Graph()
        a = g.add_vertex('A')
        b = other.add_vertex('B')
        with pytest.raises(ValueError):
            g.add_edge(a, b, 1)

    def test_self_loop_is_listed_once(self):
        g = Graph()
        a = g.add_vertex('A')
        g.add_edge(a, a, 3)
        assert len(a.neighbors) == 1

    def test_find_root_follows_parent_chain(self, triangle):
        a, b, c = triangle.vertices
        c.parent = b.id
        b.parent = a.id
        assert triangle.find_root(c) is a
        # no path compression
        assert c.parent == b.id

    def test_reset(self, triangle):
        a, b, _ = triangle.vertices
        b.parent = a.id
        triangle.reset()
        assert triangle.find_root(b) is b
