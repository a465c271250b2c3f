"""
Category tree mutations.

Each operation validates the draft, makes one storefront call, and only
then folds the storefront's answer into the session's store. The client
never splices the tree itself: after a subtitle change the whole root
category returned by the storefront replaces the local one. Two overlapping
mutations on the same root resolve as last response wins.
"""

import logging

from ziva_admin.categories.nodes import (
    NodeRef,
    RootRef,
    node_ref,
    resolve_subtitle_parent,
)
from ziva_admin.categories.store import CategoryStore, count_descendants
from ziva_admin.core.constants import (
    MSG_CATEGORY_CREATED,
    MSG_CATEGORY_DELETED,
    MSG_CATEGORY_UPDATED,
    MSG_ID_MISSING,
    MSG_NAME_REQUIRED,
    MSG_SUBTITLE_ADDED,
    MSG_SUBTITLE_DELETED,
    MSG_SUBTITLE_UPDATED,
)
from ziva_admin.core.errors import CategoryValidationError
from ziva_admin.schemas.category import CategoryDraft, CategoryNode, NodeIdentity
from ziva_admin.sessions import AdminSession
from ziva_admin.storefront.client import StorefrontClient

logger = logging.getLogger(__name__)


def _require_name(draft: CategoryDraft) -> str:
    name = (draft.name or "").strip()
    if not name:
        raise CategoryValidationError(MSG_NAME_REQUIRED)
    return name


class CategoryTreeMutator:
    """Applies admin intents to one session's category store."""

    count_descendants = staticmethod(count_descendants)

    def __init__(self, session: AdminSession, client: StorefrontClient):
        self.session = session
        self.client = client

    @property
    def store(self) -> CategoryStore:
        return self.session.store

    async def refresh(self) -> CategoryStore:
        """Reload every root category from the storefront."""
        categories = await self.client.list_categories()
        self.session.store = CategoryStore.from_payload(categories)
        logger.info(f"Loaded {len(self.session.store)} root categories")
        return self.session.store

    async def add_category(self, draft: CategoryDraft) -> str:
        _require_name(draft)

        data = await self.client.create_category(draft.to_payload())
        category = CategoryNode.model_validate(data["category"])

        self.session.store = self.store.append(category)
        logger.info(f"Created category {category.id} ({category.name})")
        return data.get("message") or MSG_CATEGORY_CREATED

    async def add_subtitle(self, target: NodeRef, draft: CategoryDraft) -> str:
        _require_name(draft)
        parent = resolve_subtitle_parent(target)

        data = await self.client.add_subtitle(
            parent.category_id,
            {"name": draft.name, "description": draft.description},
            parent_subtitle_id=parent.parent_subtitle_id,
        )
        updated = CategoryNode.model_validate(data)

        self.session.store = self.store.replace_root(updated)
        logger.info(
            f"Added subtitle under {parent.parent_subtitle_id or parent.category_id} "
            f"in category {parent.category_id}"
        )
        return MSG_SUBTITLE_ADDED

    async def update_node(self, draft: CategoryDraft) -> str:
        if not draft.id:
            raise CategoryValidationError(MSG_ID_MISSING)

        ref = node_ref(draft)
        if isinstance(ref, RootRef):
            data = await self.client.update_category(ref.id, draft.to_payload())
            updated = CategoryNode.model_validate(data["category"])
            message = MSG_CATEGORY_UPDATED
        else:
            data = await self.client.update_subtitle(
                ref.category_id, ref.id, draft.name, draft.description
            )
            updated = CategoryNode.model_validate(data)
            message = MSG_SUBTITLE_UPDATED

        self.session.store = self.store.replace_root(updated, ref.category_id)
        logger.info(f"Updated {ref.kind} {ref.id}")
        return message

    async def delete_node(self, node: CategoryNode | NodeIdentity) -> str:
        ref = node_ref(node)
        if isinstance(ref, RootRef):
            await self.client.delete_category(ref.id)
            self.session.store = self.store.remove_root(ref.id)
            message = MSG_CATEGORY_DELETED
        else:
            data = await self.client.delete_subtitle(ref.category_id, ref.id)
            updated = CategoryNode.model_validate(data)
            self.session.store = self.store.replace_root(updated, ref.category_id)
            message = MSG_SUBTITLE_DELETED

        logger.info(f"Deleted {ref.kind} {ref.id}")
        return message
