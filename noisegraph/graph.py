#!/usr/bin/env python3
"""
noisegraph: Graph Ownership Layer
=================================

Noise graphs are DAGs: one node may be the child of several parents, and
Python references already give every parent shared ownership of it. This
module adds the structural checks and queries on top of that:

- link() is called by every composite constructor and refuses a child
  from which the parent is reachable, so no node can become its own
  descendant.
- walk(), fan_in() and shared_nodes() find subgraphs referenced by more than
  one parent, which are the ones worth wrapping in a Cache.

Nodes are identified by object identity, not equality.

Author: noisegraph contributors
License: MIT
"""

from typing import Dict, Iterator, List

from .core import CycleError, NoiseFn


def sources_of(node: NoiseFn) -> tuple:
    """Children of ``node`` in evaluation order."""
    if not isinstance(node, NoiseFn):
        raise TypeError(f"Expected a NoiseFn, got {type(node).__name__}")
    return tuple(node.sources)


def walk(root: NoiseFn) -> Iterator[NoiseFn]:
    """Depth-first pre-order iteration, yielding each distinct node once."""
    seen = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        # Reversed so the first child is visited first
        stack.extend(reversed(sources_of(node)))


def reachable(start: NoiseFn, target: NoiseFn) -> bool:
    """True if ``target`` is ``start`` or one of its descendants."""
    return any(node is target for node in walk(start))


def fan_in(root: NoiseFn) -> Dict[int, int]:
    """Number of parent links into each node, keyed by ``id(node)``."""
    counts = {id(root): 0}
    for node in walk(root):
        for child in sources_of(node):
            counts[id(child)] = counts.get(id(child), 0) + 1
    return counts


def shared_nodes(root: NoiseFn) -> List[NoiseFn]:
    """Nodes linked from more than one parent, in walk order."""
    counts = fan_in(root)
    return [node for node in walk(root) if counts[id(node)] > 1]


def depth(root: NoiseFn) -> int:
    """Length of the longest root-to-leaf path; a lone leaf has depth 1."""
    memo: Dict[int, int] = {}

    def _depth(node: NoiseFn, active: frozenset) -> int:
        key = id(node)
        if key in active:
            raise CycleError(f"Cycle detected at {node!r}")
        if key not in memo:
            children = sources_of(node)
            active = active | {key}
            memo[key] = 1 + max((_depth(c, active) for c in children), default=0)
        return memo[key]

    return _depth(root, frozenset())


def validate_acyclic(root: NoiseFn) -> None:
    """
    Raise CycleError if any node under ``root`` is its own descendant.

    Uses an explicit stack with white/grey/black colouring so deep graphs do
    not hit the recursion limit.
    """
    GREY, BLACK = 1, 2
    colour: Dict[int, int] = {}
    stack = [(root, iter(sources_of(root)))]
    colour[id(root)] = GREY

    while stack:
        node, children = stack[-1]
        for child in children:
            state = colour.get(id(child))
            if state == GREY:
                raise CycleError(f"Cycle detected: {child!r} is its own descendant")
            if state is None:
                colour[id(child)] = GREY
                stack.append((child, iter(sources_of(child))))
                break
        else:
            colour[id(node)] = BLACK
            stack.pop()


def link(parent: NoiseFn, child: NoiseFn) -> NoiseFn:
    """
    Check that ``child`` may become a source of ``parent`` and return it.

    Raises:
        TypeError: child is not a NoiseFn
        CycleError: parent is reachable from child
    """
    if not isinstance(child, NoiseFn):
        raise TypeError(
            f"{type(parent).__name__} source must be a NoiseFn, got {type(child).__name__}"
        )
    if reachable(child, parent):
        raise CycleError(
            f"Linking {child!r} under {type(parent).__name__} would create a cycle"
        )
    return child
