"""
Node identity for the category tree.

The storefront marks subtitles only by the presence of ``categoryId`` (the
id of the owning root category). Identity is classified once into a tagged
union so the root check always runs before the chain-top check.
"""

from dataclasses import dataclass
from typing import Literal, NamedTuple

from ziva_admin.schemas.category import CategoryDraft, CategoryNode, NodeIdentity


@dataclass(frozen=True)
class RootRef:
    """A top-level category."""

    id: str
    kind: Literal["root"] = "root"

    @property
    def category_id(self) -> str:
        return self.id


@dataclass(frozen=True)
class SubtitleRef:
    """A subtitle at any depth, tagged with its owning root category."""

    id: str
    category_id: str
    kind: Literal["subtitle"] = "subtitle"

    @property
    def is_chain_top(self) -> bool:
        # The root itself offered as a subtitle target.
        return self.id == self.category_id


NodeRef = RootRef | SubtitleRef


class SubtitleParent(NamedTuple):
    category_id: str
    parent_subtitle_id: str | None


def node_ref(node: CategoryNode | NodeIdentity | CategoryDraft) -> NodeRef:
    """Classify a node: no ``categoryId`` means a root category."""
    if node.id is None:
        raise ValueError("Node has no id")
    if not node.category_id:
        return RootRef(id=node.id)
    return SubtitleRef(id=node.id, category_id=node.category_id)


def resolve_subtitle_parent(target: NodeRef) -> SubtitleParent:
    """Work out where a new subtitle goes when added under ``target``.

    Only the root id and the target id are known here; the storefront finds
    the target inside the root's subtree.
    """
    if isinstance(target, RootRef):
        return SubtitleParent(target.id, None)
    if target.is_chain_top:
        return SubtitleParent(target.category_id, None)
    return SubtitleParent(target.category_id, target.id)
