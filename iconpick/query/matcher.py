"""Evaluate parsed query trees against candidate identifiers."""

from __future__ import annotations

from collections.abc import Iterable

from .parser import And, Group, Not, Or, Phrase, Symbol


def _evaluate(tree: Symbol, candidate: str) -> bool:
    # Left-folded And/Or chains grow with query length, so walk their left
    # spine in a loop and recurse only into right operands and nested nodes.
    spine: list[And | Or] = []
    while isinstance(tree, (And, Or)):
        spine.append(tree)
        tree = tree.left

    if isinstance(tree, Phrase):
        result = tree.text in candidate
    elif isinstance(tree, Group):
        result = all(_evaluate(child, candidate) for child in tree.children)
    elif isinstance(tree, Not):
        result = not _evaluate(tree.inner, candidate)
    else:
        raise TypeError(f"unsupported query node: {tree!r}")

    for node in reversed(spine):
        if isinstance(node, And):
            result = result and _evaluate(node.right, candidate)
        else:
            result = result or _evaluate(node.right, candidate)
    return result


def matches(tree: Symbol | None, candidate: str) -> bool:
    """Return whether ``candidate`` satisfies ``tree``.

    Phrases are case-sensitive substring tests. ``None`` matches everything.
    """
    if tree is None:
        return True
    return _evaluate(tree, candidate)


def filter_candidates(tree: Symbol | None, candidates: Iterable[str]) -> list[str]:
    """Keep matching candidates in their original order."""
    if tree is None:
        return list(candidates)
    return [candidate for candidate in candidates if matches(tree, candidate)]
