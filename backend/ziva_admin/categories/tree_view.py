"""Expansion state and the flattened row walk used by the tree templates."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ziva_admin.categories.nodes import NodeRef, node_ref
from ziva_admin.categories.store import CategoryStore
from ziva_admin.core.constants import TREE_INDENT_BASE_PX, TREE_INDENT_STEP_PX
from ziva_admin.schemas.category import CategoryNode


@dataclass
class ExpansionState:
    """Ids of the nodes currently shown expanded, at any depth."""

    expanded: set[str] = field(default_factory=set)

    def is_expanded(self, node_id: str) -> bool:
        return node_id in self.expanded

    def toggle(self, node_id: str) -> bool:
        """Flip a node and return its new state."""
        if node_id in self.expanded:
            self.expanded.discard(node_id)
            return False
        self.expanded.add(node_id)
        return True

    def expand_all(self, store: CategoryStore) -> None:
        self.expanded = set(store.root_ids())

    def collapse_all(self) -> None:
        self.expanded.clear()


@dataclass(frozen=True)
class TreeRow:
    node: CategoryNode
    ref: NodeRef
    depth: int
    has_children: bool
    is_expanded: bool

    @property
    def indent(self) -> int:
        return self.depth * TREE_INDENT_STEP_PX + TREE_INDENT_BASE_PX


def walk_tree(
    nodes: Iterable[CategoryNode], expansion: ExpansionState, depth: int = 0
) -> Iterator[TreeRow]:
    """Yield visible rows; children only appear below expanded nodes."""
    for node in nodes:
        has_children = bool(node.subtitles)
        is_expanded = has_children and expansion.is_expanded(node.id)
        yield TreeRow(
            node=node,
            ref=node_ref(node),
            depth=depth,
            has_children=has_children,
            is_expanded=is_expanded,
        )
        if is_expanded:
            yield from walk_tree(node.subtitles, expansion, depth + 1)


def tree_rows(store: CategoryStore, expansion: ExpansionState) -> list[TreeRow]:
    return list(walk_tree(store, expansion))
