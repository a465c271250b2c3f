"""
In-memory category store for one admin session.

Transitions never modify a store in place: each returns a new store, and
root categories that were not replaced are carried over as the same objects.
"""

from collections.abc import Iterable, Iterator

from ziva_admin.schemas.category import CategoryNode


def count_descendants(category: CategoryNode) -> int:
    """Count every subtitle below ``category``, at any depth."""
    count = 0
    for subtitle in category.subtitles:
        count += 1
        if subtitle.subtitles:
            count += count_descendants(subtitle)
    return count


def iter_nodes(nodes: Iterable[CategoryNode]) -> Iterator[CategoryNode]:
    """Depth-first, pre-order walk over nodes and all their subtitles."""
    for node in nodes:
        yield node
        yield from iter_nodes(node.subtitles)


class CategoryStore:
    """Ordered sequence of root categories."""

    def __init__(self, categories: Iterable[CategoryNode] = ()):
        self._categories = tuple(categories)

    @classmethod
    def from_payload(cls, categories: Iterable[dict]) -> "CategoryStore":
        return cls(CategoryNode.model_validate(item) for item in categories)

    @property
    def categories(self) -> tuple[CategoryNode, ...]:
        return self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[CategoryNode]:
        return iter(self._categories)

    def __repr__(self) -> str:
        return f"CategoryStore({len(self)} roots)"

    def root_ids(self) -> list[str]:
        return [category.id for category in self._categories]

    def find_root(self, category_id: str) -> CategoryNode | None:
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def find_node(self, node_id: str) -> CategoryNode | None:
        for node in iter_nodes(self._categories):
            if node.id == node_id:
                return node
        return None

    def total_subtitles(self) -> int:
        return sum(count_descendants(category) for category in self._categories)

    def append(self, category: CategoryNode) -> "CategoryStore":
        return CategoryStore((*self._categories, category))

    def replace_root(
        self, updated: CategoryNode, category_id: str | None = None
    ) -> "CategoryStore":
        """Swap in a server-confirmed root category.

        The root to replace is the one whose id is ``category_id``, or
        ``updated.id`` when no key is given.
        """
        key = category_id or updated.id
        return CategoryStore(
            updated if category.id == key else category for category in self._categories
        )

    def remove_root(self, category_id: str) -> "CategoryStore":
        return CategoryStore(
            category for category in self._categories if category.id != category_id
        )
