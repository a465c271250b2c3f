"""HTMX routes for the category tree dashboard."""

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ziva_admin.categories.mutator import CategoryTreeMutator
from ziva_admin.categories.nodes import node_ref
from ziva_admin.categories.stats import refresh_product_count
from ziva_admin.core.errors import AdminError
from ziva_admin.schemas.category import CategoryDraft, NodeIdentity
from ziva_admin.sessions import AdminSession
from ziva_admin.storefront.client import StorefrontClient
from ziva_admin.utils.auth import (
    get_admin_session,
    get_optional_admin_session,
    get_session_client,
)

from .utils import render_mutation, templates, toast_response, tree_context

logger = logging.getLogger(__name__)

router = APIRouter()


def _identity(node_id: str, category_id: str | None) -> NodeIdentity:
    # Empty form fields arrive as "", which means "no owning category"
    return NodeIdentity(id=node_id, category_id=category_id or None)


def _render_tree(request: Request, session: AdminSession) -> HTMLResponse:
    return templates.TemplateResponse(
        request=request,
        name="components/category_tree.html",
        context=tree_context(session),
    )


# =============================================================================
# Pages and partials
# =============================================================================


@router.get("/categories", response_class=HTMLResponse)
async def categories_page(
    request: Request,
    session: AdminSession | None = Depends(get_optional_admin_session),
):
    """Category management page."""
    if session is None:
        return RedirectResponse(url="/app/login", status_code=303)

    return templates.TemplateResponse(
        request=request,
        name="pages/categories.html",
        context={
            "current_path": "/app/categories",
            "mode": None,
            **tree_context(session),
        },
    )


@router.get("/categories/tree", response_class=HTMLResponse)
async def category_tree_partial(
    request: Request,
    session: AdminSession = Depends(get_admin_session),
):
    """Tree partial for the current expansion state."""
    return _render_tree(request, session)


@router.post("/categories/tree/toggle/{node_id}", response_class=HTMLResponse)
async def toggle_node(
    request: Request,
    node_id: str,
    session: AdminSession = Depends(get_admin_session),
):
    session.expansion.toggle(node_id)
    return _render_tree(request, session)


@router.post("/categories/tree/expand-all", response_class=HTMLResponse)
async def expand_all(request: Request, session: AdminSession = Depends(get_admin_session)):
    session.expansion.expand_all(session.store)
    return _render_tree(request, session)


@router.post("/categories/tree/collapse-all", response_class=HTMLResponse)
async def collapse_all(request: Request, session: AdminSession = Depends(get_admin_session)):
    session.expansion.collapse_all()
    return _render_tree(request, session)


@router.post("/categories/refresh", response_class=HTMLResponse)
async def refresh_tree(
    request: Request,
    session: AdminSession = Depends(get_admin_session),
    client: StorefrontClient = Depends(get_session_client),
):
    """Reload the tree from the storefront."""
    try:
        await CategoryTreeMutator(session, client).refresh()
    except AdminError as e:
        return toast_response(request, "error", e.message)
    await refresh_product_count(session, client)
    return render_mutation(session, "Categories reloaded")


# =============================================================================
# Editor panel
# =============================================================================


@router.get("/categories/editor/new", response_class=HTMLResponse)
async def new_category_editor(
    request: Request,
    session: AdminSession = Depends(get_admin_session),
):
    return templates.TemplateResponse(
        request=request,
        name="components/category_editor.html",
        context={"mode": "add", "draft": CategoryDraft()},
    )


@router.get("/categories/editor/edit", response_class=HTMLResponse)
async def edit_node_editor(
    request: Request,
    node_id: str,
    category_id: str | None = None,
    session: AdminSession = Depends(get_admin_session),
):
    """Edit form, populated from the selected node."""
    node = session.store.find_node(node_id)
    if node is None:
        return toast_response(request, "error", "Category not found")

    draft = CategoryDraft.from_node(node)
    # The tree posts back the identity it rendered; keep its owning category
    draft.category_id = category_id or node.category_id

    return templates.TemplateResponse(
        request=request,
        name="components/category_editor.html",
        context={"mode": "edit", "draft": draft, "target_name": node.name},
    )


@router.get("/categories/editor/subtitle", response_class=HTMLResponse)
async def subtitle_editor(
    request: Request,
    node_id: str,
    category_id: str | None = None,
    session: AdminSession = Depends(get_admin_session),
):
    """Empty subtitle form bound to the node it will be added under."""
    node = session.store.find_node(node_id)
    if node is None:
        return toast_response(request, "error", "Category not found")

    return templates.TemplateResponse(
        request=request,
        name="components/category_editor.html",
        context={
            "mode": "subtitle",
            "draft": CategoryDraft(),
            "target": _identity(node_id, category_id),
            "target_name": node.name,
        },
    )


@router.get("/categories/editor/cancel", response_class=HTMLResponse)
async def cancel_editor(
    request: Request,
    session: AdminSession = Depends(get_admin_session),
):
    return templates.TemplateResponse(
        request=request,
        name="components/category_editor.html",
        context={"mode": None},
    )


# =============================================================================
# Mutations
# =============================================================================


@router.post("/categories", response_class=HTMLResponse)
async def create_category(
    request: Request,
    name: str = Form(""),
    description: str = Form(""),
    slug: str | None = Form(None),
    category_status: str | None = Form(None, alias="status"),
    session: AdminSession = Depends(get_admin_session),
    client: StorefrontClient = Depends(get_session_client),
):
    """Create a root category from the editor form."""
    draft = CategoryDraft(
        name=name, description=description, slug=slug or None, status=category_status
    )
    try:
        message = await CategoryTreeMutator(session, client).add_category(draft)
    except AdminError as e:
        return toast_response(request, "error", e.message)
    return render_mutation(session, message)


@router.post("/categories/subtitles", response_class=HTMLResponse)
async def create_subtitle(
    request: Request,
    target_id: str = Form(...),
    target_category_id: str | None = Form(None),
    name: str = Form(""),
    description: str = Form(""),
    session: AdminSession = Depends(get_admin_session),
    client: StorefrontClient = Depends(get_session_client),
):
    """Add a subtitle under the node the editor was opened for."""
    target = node_ref(_identity(target_id, target_category_id))
    draft = CategoryDraft(name=name, description=description)
    try:
        message = await CategoryTreeMutator(session, client).add_subtitle(target, draft)
    except AdminError as e:
        return toast_response(request, "error", e.message)

    # Show the new child straight away
    session.expansion.expanded.add(target.id)
    return render_mutation(session, message)


@router.post("/categories/update", response_class=HTMLResponse)
async def update_node(
    request: Request,
    node_id: str = Form(""),
    category_id: str | None = Form(None),
    name: str = Form(""),
    description: str = Form(""),
    slug: str | None = Form(None),
    category_status: str | None = Form(None, alias="status"),
    session: AdminSession = Depends(get_admin_session),
    client: StorefrontClient = Depends(get_session_client),
):
    """Save the edit form for a root category or a subtitle."""
    draft = CategoryDraft(id=node_id or None, category_id=category_id or None)
    node = session.store.find_node(node_id) if node_id else None
    if node is not None:
        draft = CategoryDraft.from_node(node)
        draft.category_id = category_id or None

    draft.name = name
    draft.description = description
    if slug is not None:
        draft.slug = slug or None
    if category_status:
        draft.status = category_status

    try:
        message = await CategoryTreeMutator(session, client).update_node(draft)
    except AdminError as e:
        return toast_response(request, "error", e.message)
    return render_mutation(session, message)


@router.delete("/categories/node", response_class=HTMLResponse)
async def delete_node(
    request: Request,
    node_id: str,
    category_id: str | None = None,
    session: AdminSession = Depends(get_admin_session),
    client: StorefrontClient = Depends(get_session_client),
):
    """Delete the node a tree row was rendered for."""
    try:
        message = await CategoryTreeMutator(session, client).delete_node(
            _identity(node_id, category_id)
        )
    except AdminError as e:
        return toast_response(request, "error", e.message)

    session.expansion.expanded.discard(node_id)
    return render_mutation(session, message)
