from fastapi import APIRouter, Body, Depends, status

from ziva_admin.api.routes.errors import to_http_exception
from ziva_admin.categories.mutator import CategoryTreeMutator
from ziva_admin.categories.nodes import node_ref
from ziva_admin.categories.stats import compute_stats, refresh_product_count
from ziva_admin.core.errors import AdminError
from ziva_admin.schemas.category import (
    CategoryDraft,
    CategoryTreeResponse,
    MutationResponse,
    NodeIdentity,
    SubtitleCreate,
)
from ziva_admin.sessions import AdminSession
from ziva_admin.storefront.client import StorefrontClient
from ziva_admin.utils.auth import get_admin_session, get_session_client

router = APIRouter()


def _tree_response(session: AdminSession) -> CategoryTreeResponse:
    return CategoryTreeResponse(
        categories=list(session.store),
        stats=compute_stats(session),
    )


def _mutation_response(session: AdminSession, message: str) -> MutationResponse:
    return MutationResponse(message=message, categories=list(session.store))


@router.get("", response_model=CategoryTreeResponse)
async def list_categories(session: AdminSession = Depends(get_admin_session)):
    """Get the session's category tree with dashboard statistics"""
    return _tree_response(session)


@router.post("/refresh", response_model=CategoryTreeResponse)
async def refresh_categories(
    session: AdminSession = Depends(get_admin_session),
    client: StorefrontClient = Depends(get_session_client),
):
    """Reload categories and the product count from the storefront"""
    try:
        await CategoryTreeMutator(session, client).refresh()
    except AdminError as e:
        raise to_http_exception(e)
    await refresh_product_count(session, client)
    return _tree_response(session)


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    draft: CategoryDraft,
    session: AdminSession = Depends(get_admin_session),
    client: StorefrontClient = Depends(get_session_client),
):
    """Create a root category"""
    try:
        message = await CategoryTreeMutator(session, client).add_category(draft)
    except AdminError as e:
        raise to_http_exception(e)
    return _mutation_response(session, message)


@router.post(
    "/subtitles", response_model=MutationResponse, status_code=status.HTTP_201_CREATED
)
async def create_subtitle(
    data: SubtitleCreate,
    session: AdminSession = Depends(get_admin_session),
    client: StorefrontClient = Depends(get_session_client),
):
    """Add a subtitle under any node of the tree"""
    draft = CategoryDraft(name=data.name, description=data.description)
    try:
        message = await CategoryTreeMutator(session, client).add_subtitle(
            node_ref(data.target), draft
        )
    except AdminError as e:
        raise to_http_exception(e)
    return _mutation_response(session, message)


@router.put("/node", response_model=MutationResponse)
async def update_node(
    draft: CategoryDraft,
    session: AdminSession = Depends(get_admin_session),
    client: StorefrontClient = Depends(get_session_client),
):
    """Update a root category or a subtitle"""
    try:
        message = await CategoryTreeMutator(session, client).update_node(draft)
    except AdminError as e:
        raise to_http_exception(e)
    return _mutation_response(session, message)


@router.delete("/node", response_model=MutationResponse)
async def delete_node(
    node: NodeIdentity = Body(...),
    session: AdminSession = Depends(get_admin_session),
    client: StorefrontClient = Depends(get_session_client),
):
    """Delete a root category or a subtitle"""
    try:
        message = await CategoryTreeMutator(session, client).delete_node(node)
    except AdminError as e:
        raise to_http_exception(e)
    return _mutation_response(session, message)
