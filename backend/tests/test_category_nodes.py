"""Tests for node classification and subtitle parent resolution."""

import pytest

from ziva_admin.categories.nodes import (
    RootRef,
    SubtitleParent,
    SubtitleRef,
    node_ref,
    resolve_subtitle_parent,
)
from ziva_admin.schemas.category import CategoryDraft, NodeIdentity


class TestNodeRef:
    """A node is a root exactly when it has no categoryId."""

    def test_root_category(self, category_store):
        ref = node_ref(category_store.find_root("cat1"))

        assert ref == RootRef(id="cat1")
        assert ref.category_id == "cat1"

    def test_nested_subtitle(self, category_store):
        ref = node_ref(category_store.find_node("sub2"))

        assert ref == SubtitleRef(id="sub2", category_id="cat1")
        assert not ref.is_chain_top

    def test_identity_from_wire_aliases(self):
        ref = node_ref(NodeIdentity.model_validate({"_id": "sub1", "categoryId": "cat1"}))
        assert isinstance(ref, SubtitleRef)

    def test_empty_category_id_counts_as_root(self):
        assert isinstance(node_ref(CategoryDraft(id="cat1", category_id="")), RootRef)

    def test_missing_id_rejected(self):
        with pytest.raises(ValueError):
            node_ref(CategoryDraft(name="No id"))


class TestResolveSubtitleParent:
    """Where a new subtitle is attached for each kind of target."""

    def test_root_target_has_no_parent_subtitle(self):
        assert resolve_subtitle_parent(RootRef(id="cat1")) == SubtitleParent("cat1", None)

    def test_nested_target_becomes_parent_subtitle(self):
        parent = resolve_subtitle_parent(SubtitleRef(id="sub1", category_id="cat1"))
        assert parent == SubtitleParent("cat1", "sub1")

    def test_chain_top_target_attaches_to_root(self):
        """A subtitle whose id equals its categoryId is the top of its chain."""
        ref = SubtitleRef(id="cat1", category_id="cat1")

        assert ref.is_chain_top
        assert resolve_subtitle_parent(ref) == SubtitleParent("cat1", None)

    def test_root_check_runs_first(self):
        """A node without categoryId is a root even if other fields look subtitle-like."""
        draft = CategoryDraft(id="cat1", name="Sarees", slug="sarees")
        ref = node_ref(draft)

        assert resolve_subtitle_parent(ref).parent_subtitle_id is None
