import textwrap

import pytest

from graph import Graph


def load(text: str, fmt: str = 'auto') -> Graph:
    return Graph.from_lines(textwrap.dedent(text).strip().splitlines(), fmt)


def names(arcs) -> set[frozenset[str]]:
    return {frozenset((arc.v1.name, arc.v2.name)) for arc in arcs}


TRIANGLE = '''
    3
    A
    B
    C
    A B 1
    B C 2
    A C 3
'''

TWO_COMPONENTS = '''
    4
    A
    B
    C
    D
    A B 1
    C D 1
'''


@pytest.fixture
def triangle() -> Graph:
    return load(TRIANGLE)


@pytest.fixture
def two_components() -> Graph:
    return load(TWO_COMPONENTS)
