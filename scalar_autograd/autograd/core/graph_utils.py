"""
Computation graph utilities
Used to print and analyze the structure of a graph rooted at a Node
"""

import numpy as np
from typing import Dict, List, Optional
from collections import Counter

from .engine import forward
from .node import Node


def _label(node: Node) -> str:
    return f"Data: {node.value} & Grad: {node.grad} & op: {node.op.value}"


def tree_lines(root: Node, sep: str = "|--- ", max_depth: Optional[int] = None) -> List[str]:
    """
    Render the graph ending at `root` as an indented tree

    Shared operands are repeated under every consumer (the DAG is unfolded),
    so the output of a large graph grows quickly; use max_depth to cut it.

    Args:
        root: output node
        sep: prefix added once per level of depth
        max_depth: deepest level to render (root is level 0); None renders all

    Returns:
        one line per rendered node, root first
    """
    lines = []
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        lines.append(sep * depth + _label(node))
        if max_depth is not None and depth >= max_depth:
            continue
        for child in reversed(node.operands):
            stack.append((child, depth + 1))
    return lines


def print_tree(root: Node, sep: str = "|--- ", max_depth: Optional[int] = None) -> None:
    print("\n".join(tree_lines(root, sep=sep, max_depth=max_depth)))


def get_graph_stats(root: Node) -> Dict:
    """
    Collect statistics of the graph ending at `root` (no printing)

    Returns:
        dictionary with node/edge/leaf counts, fan-in and fan-out figures and
        an operation breakdown keyed by op tag ("" for leaves)
    """
    order = forward(root)
    n_nodes = len(order)
    n_edges = sum(len(node.operands) for node in order)
    n_leaves = sum(1 for node in order if node.is_leaf)

    # fan-in: operands per node
    fan_ins = [len(node.operands) for node in order]

    # fan-out: consumers per node, keyed by position in the order
    index = {id(node): i for i, node in enumerate(order)}
    fan_outs = [0] * n_nodes
    for node in order:
        for child in node.operands:
            fan_outs[index[id(child)]] += 1

    op_counter = Counter(node.op.value for node in order)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': n_leaves,
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(root: Node, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph ending at `root`

    Args:
        root: output node
        detailed: also list the nodes in topological order (graphs of at most
                  100 nodes)

    Returns:
        the dictionary from get_graph_stats
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_tag, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_tag or 'leaf':12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        order = forward(root)
        index = {id(node): i for i, node in enumerate(order)}
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for i, node in enumerate(order):
            if node.operands:
                operand_info = ", ".join(f"Node{index[id(child)]}" for child in node.operands)
                print(f"Node {i:3d}: {node.op.value:12s} ({node.value:10.6f}) <- [{operand_info}]")
            else:
                print(f"Node {i:3d}: {'leaf':12s} ({node.value:10.6f})")

    print("="*70 + "\n")

    return stats
