import gc
import weakref
import pytest

import nnir.graphs.nnir.operations as O
from nnir.graphs.nnir import (
    NNIRGraph,
    NNIRGraphUtils,
    NNIRNode,
    NNIRNodeArena,
    NodeEntry,
    InvalidOutputIndexError,
)
from graphs_utils import diamond_graph, register_test_operators

register_test_operators()


def test_topological_order():
    a, b, c, d = diamond_graph()
    nodes = NNIRGraphUtils.get_nodes_topological([d])
    assert nodes == [a.node, b.node, c.node, d.node]


def test_dfs_visits_control_deps_after_inputs():
    a = O.variable("a")
    (x,) = O.apply("test.add", a, a, name="x")
    (y,) = O.apply("test.add", a, a, name="y", control_deps=[x])
    order = NNIRGraphUtils.get_nodes_topological([y])
    assert order == [a.node, x.node, y.node]


def test_dfs_terminates_on_control_cycle():
    n1, n2 = NNIRNode.create(), NNIRNode.create()
    n1.control_deps.append(n2)
    n2.control_deps.append(n1)
    visited = []
    NNIRGraphUtils.dfs_visit([n1], visited.append)
    assert visited == [n2, n1]


def test_dfs_deep_chain():
    x = O.variable("x")
    for _ in range(5000):
        (x,) = O.apply("test.split", x)
    assert len(NNIRGraphUtils.get_nodes_topological([x])) == 5001


def test_consumers():
    a, b, c, d = diamond_graph()
    nodes = NNIRGraphUtils.get_nodes_topological([d])
    consumers = NNIRGraphUtils.get_nodes_consumers(nodes)
    assert consumers[a.node] == [b.node, d.node]
    assert consumers[b.node] == [c.node]
    assert consumers[d.node] == []


def test_check_entry():
    a, b, c, d = diamond_graph()
    assert NNIRGraphUtils.check_entry(NodeEntry(b.node, 1)) == NodeEntry(b.node, 1)
    with pytest.raises(InvalidOutputIndexError):
        NNIRGraphUtils.check_entry(NodeEntry(b.node, 2))
    with pytest.raises(InvalidOutputIndexError):
        NNIRGraphUtils.check_entry(NodeEntry(a.node, -1))


def test_graph_properties():
    a, b, c, d = diamond_graph()
    graph = NNIRGraph([d], name="diamond")
    assert graph.name == "diamond"
    assert graph.outputs == [d]
    assert graph.nodes == [a.node, b.node, c.node, d.node]
    assert graph.inputs == [a.node]


def test_graphs_share_subgraph_with_independent_roots():
    a, b, c, d = diamond_graph()
    roots = [c]
    g1 = NNIRGraph(roots)
    g2 = NNIRGraph([c, d])
    roots.append(d)
    assert g1.outputs == [c]
    g1.set_outputs([b])
    assert g2.outputs == [c, d]
    assert g1.nodes[0] is g2.nodes[0]


def test_graph_str():
    a, b, c, d = diamond_graph()
    graph_str = str(NNIRGraph([d], name="diamond"))
    expected = (
        "graph:\n"
        "  name: diamond\n"
        "  inputs:\n"
        "  - %a\n"
        "  outputs:\n"
        "  - %d\n"
        "  nodes:\n"
        "    %b = test.split(%a)\n"
        "    %c = test.add(%b[0], %b[1])\n"
        "    %d = test.add(%c, %a)\n"
    )
    assert graph_str == expected


def test_empty_graph_str():
    assert str(NNIRGraph([])) == "graph:\n  inputs: []\n  outputs: []\n  nodes: []\n"


def test_arena_indexing():
    a, b, c, d = diamond_graph()
    arena = NNIRNodeArena.from_heads([d])
    assert len(arena) == 4
    assert [arena.node_id(e.node) for e in (a, b, c, d)] == [0, 1, 2, 3]
    assert arena[2] is c.node
    assert b.node in arena
    assert list(arena) == [a.node, b.node, c.node, d.node]
    assert arena.add(a.node) == 0


def test_arena_entry_ids():
    a, b, c, d = diamond_graph()
    arena = NNIRNodeArena.from_heads([d])
    assert arena.num_node_entries == 5
    ids = [arena.entry_id(e) for e in (a, b, NodeEntry(b.node, 1), c, d)]
    assert ids == [0, 1, 2, 3, 4]
    assert arena.entry(2) == NodeEntry(b.node, 1)
    assert arena.entry(3) == c
    with pytest.raises(InvalidOutputIndexError):
        arena.entry_id(NodeEntry(c.node, 1))
    with pytest.raises(InvalidOutputIndexError):
        arena.entry(5)


def test_arena_collect():
    a, b, c, d = diamond_graph()
    arena = NNIRNodeArena.from_heads([d])
    (orphan,) = O.apply("test.add", a, a, name="orphan")
    arena.add(orphan.node)
    assert arena.collect([d], break_edges=True) == 1
    assert orphan.node not in arena
    assert orphan.node.inputs == []
    assert len(arena) == 4
    assert arena.entry_id(d) == 4


def test_arena_collect_keep_edges():
    a, b, c, d = diamond_graph()
    arena = NNIRNodeArena.from_heads([d])
    assert arena.collect([c]) == 1
    assert d.node not in arena
    assert d.node.inputs == [c, a]


def test_arena_breaks_control_cycles():
    n1, n2 = NNIRNode.create(), NNIRNode.create()
    n1.control_deps.append(n2)
    n2.control_deps.append(n1)
    r1, r2 = weakref.ref(n1), weakref.ref(n2)
    arena = NNIRNodeArena.from_heads([n1])
    del n1, n2
    gc.disable()
    try:
        arena.clear(break_edges=True)
        assert len(arena) == 0
        assert r1() is None and r2() is None
    finally:
        gc.enable()


def test_graph_indexed_and_release():
    a, b, c, d = diamond_graph()
    graph = NNIRGraph([d])
    arena = graph.indexed
    assert graph.indexed is arena
    assert graph.reindex() is not arena
    graph.release()
    assert graph.outputs == []
    assert graph.nodes == []
    assert d.node.inputs == [c, a]


def test_release_keeps_shared_subgraph():
    a, b, c, d = diamond_graph()
    g1 = NNIRGraph([c])
    g2 = NNIRGraph([d])
    g1.indexed
    g1.release()
    assert c.node.inputs == [b, NodeEntry(b.node, 1)]
    assert b.node.inputs == [a]
    assert g2.nodes == [a.node, b.node, c.node, d.node]


def test_release_break_edges_spares_kept_roots():
    a, b, c, d = diamond_graph()
    (e,) = O.apply("test.add", c, c, name="e")
    g1 = NNIRGraph([e])
    g2 = NNIRGraph([c])
    g1.release(break_edges=True, keep=g2.outputs)
    assert e.node.inputs == []
    assert c.node.inputs == [b, NodeEntry(b.node, 1)]
    assert g2.nodes == [a.node, b.node, c.node]


def test_release_break_edges_without_sharing():
    n1, n2 = NNIRNode.create(), NNIRNode.create()
    n1.control_deps.append(n2)
    n2.control_deps.append(n1)
    graph = NNIRGraph([NodeEntry(n1)])
    graph.release(break_edges=True)
    assert n1.control_deps == [] and n2.control_deps == []


def test_arena_clear_keeps_edges_by_default():
    a, b, c, d = diamond_graph()
    arena = NNIRNodeArena.from_heads([d])
    arena.clear()
    assert len(arena) == 0
    assert d.node.inputs == [c, a]


def test_arena_unknown_node_and_released_id():
    a, b, c, d = diamond_graph()
    arena = NNIRNodeArena.from_heads([c])
    with pytest.raises(KeyError, match="not found"):
        arena.node_id(d.node)
    with pytest.raises(KeyError, match="not found"):
        arena.entry_id(d)
    arena.collect([b])
    with pytest.raises(KeyError, match="released"):
        arena[2]
