"""
Consolidation of directory paths into a minimal match tree for ECCU.

A tree maps a path segment to its subtree. An empty subtree is a leaf,
meaning everything at and below that path is invalidated. An ancestor leaf
always absorbs its descendants.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from xml.etree import ElementTree

__all__ = ["PathTree", "insert_path", "build_path_tree", "iter_leaves", "depth", "to_eccu_xml"]

PathTree = dict[str, "PathTree"]

ECCU_ROOT_TAG = "eccu"
ECCU_MATCH_TAG = "match:recursive-dirs"
ECCU_REVALIDATE_TAG = "revalidate"


def insert_path(tree: PathTree, segments: Sequence[str]) -> PathTree:
    """Return a new tree which also covers the given path."""
    if not segments:
        # leaf, replaces any deeper paths
        return {}

    head, rest = segments[0], segments[1:]
    child = tree.get(head)

    if child is None:
        return {**tree, head: insert_path({}, rest)}
    if not child:
        # already covered by a leaf
        return tree
    return {**tree, head: insert_path(child, rest)}


def build_path_tree(paths: Iterable[Sequence[str]]) -> PathTree:
    """Consolidate segment lists into a tree, keeping first-seen order."""
    paths = list(paths)

    # the root path covers the whole host
    if any(not segments for segments in paths):
        return {}

    tree: PathTree = {}
    for segments in paths:
        tree = insert_path(tree, segments)
    return tree


def iter_leaves(tree: PathTree, prefix: tuple[str, ...] = ()) -> Iterator[tuple[str, ...]]:
    """Yield the segment path of every leaf."""
    if not tree:
        yield prefix
        return
    for segment, subtree in tree.items():
        yield from iter_leaves(subtree, prefix + (segment,))


def depth(tree: PathTree) -> int:
    if not tree:
        return 0
    return 1 + max(depth(subtree) for subtree in tree.values())


def _append_matches(parent: ElementTree.Element, tree: PathTree):
    if not tree:
        ElementTree.SubElement(parent, ECCU_REVALIDATE_TAG).text = "now"
        return

    for segment, subtree in tree.items():
        match = ElementTree.SubElement(parent, ECCU_MATCH_TAG, value=segment)
        _append_matches(match, subtree)


def to_eccu_xml(tree: PathTree) -> str:
    """
    Render a tree as ECCU metadata, e.g. {"a": {"b": {}}} becomes
    <eccu><match:recursive-dirs value="a"><match:recursive-dirs value="b">
    <revalidate>now</revalidate></match:recursive-dirs></match:recursive-dirs></eccu>
    """
    root = ElementTree.Element(ECCU_ROOT_TAG)
    _append_matches(root, tree)
    return ElementTree.tostring(root, encoding="unicode")
