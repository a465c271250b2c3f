from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ziva_admin.categories.stats import compute_stats
from ziva_admin.categories.tree_view import tree_rows
from ziva_admin.sessions import AdminSession

# Template configuration
# backend/ziva_admin/api/htmx/utils.py -> backend/templates
TEMPLATES_DIR = Path(__file__).parent.parent.parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def tree_context(session: AdminSession) -> dict:
    """Everything the tree, stats and editor partials read from a session."""
    return {
        "rows": tree_rows(session.store, session.expansion),
        "stats": compute_stats(session),
        "has_categories": len(session.store) > 0,
    }


def render_toast(toast_type: str, toast_message: str) -> str:
    return templates.get_template("components/toast.html").render(
        toast_type=toast_type,
        toast_message=toast_message,
    )


def toast_response(request: Request, toast_type: str, toast_message: str) -> HTMLResponse:
    """A bare toast; htmx leaves the rest of the page alone."""
    response = templates.TemplateResponse(
        request=request,
        name="components/toast.html",
        context={
            "toast_type": toast_type,
            "toast_message": toast_message,
        },
    )
    response.headers["HX-Reswap"] = "none"
    return response


def render_mutation(session: AdminSession, message: str) -> HTMLResponse:
    """Refreshed tree plus out-of-band stats, a closed editor and a success toast."""
    context = tree_context(session)
    tree_html = templates.get_template("components/category_tree.html").render(**context)
    stats_html = templates.get_template("components/category_stats.html").render(
        oob=True, **context
    )
    editor_html = templates.get_template("components/category_editor.html").render(
        oob=True, mode=None
    )
    return HTMLResponse(
        content=tree_html + stats_html + editor_html + render_toast("success", message)
    )
