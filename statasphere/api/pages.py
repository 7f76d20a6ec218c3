"""
Page routes - serve HTML templates

``/`` renders the shell (sidebar + default view). The browser keeps the view
in the URL fragment, which never reaches the server, so the shell's script
asks ``/views/{view}`` for the matching fragment on load and on every
``hashchange``.
"""
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from statasphere.api.deps import get_diagnose_service
from statasphere.config import get_settings
from statasphere.services.diagnose_service import DiagnoseService
from statasphere.views import sample_data
from statasphere.views.composer import View, compose, sidebar_items
from statasphere.views.formatting import register_filters
from statasphere.views.router import DEFAULT_VIEW

router = APIRouter(tags=["Pages"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
register_filters(templates.env)


async def _view_context(view: View, service: DiagnoseService) -> dict:
    """Data each display component needs"""
    if view is View.DIAGNOSE:
        return {
            "diagnose": await run_in_threadpool(service.get_dashboard),
            "products": sample_data.DIAGNOSE_PRODUCTS,
        }
    if view is View.OPTIMIZE:
        return {
            "segments": sample_data.OPTIMIZE_SEGMENTS,
            "actions": sample_data.OPTIMIZE_ACTIONS,
        }
    if view is View.IMPACT:
        return {
            "time_ranges": sample_data.IMPACT_TIME_RANGES,
            "performance": sample_data.IMPACT_PERFORMANCE,
            "categories": sample_data.IMPACT_CATEGORIES,
            "optimization_impact": sample_data.OPTIMIZATION_IMPACT,
        }
    return {
        "date_ranges": sample_data.DATE_RANGE_OPTIONS,
        "visibility": sample_data.VISIBILITY_OVERVIEW,
        "metrics": sample_data.HEADLINE_METRICS,
        "alerts": sample_data.PROBLEM_ALERTS,
        "feed_sources": sample_data.FEED_SOURCES,
        "signals": sample_data.OPPORTUNITY_SIGNALS,
    }


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, service: DiagnoseService = Depends(get_diagnose_service)):
    """Dashboard shell with the default view"""
    view = View.resolve(DEFAULT_VIEW)
    context = await _view_context(view, service)
    return templates.TemplateResponse(request, "index.html", {
        "app_name": get_settings().app_name,
        "nav_items": sidebar_items(DEFAULT_VIEW),
        "active_view": DEFAULT_VIEW,
        "view_template": compose(DEFAULT_VIEW),
        **context,
    })


@router.get("/views/{active_view:path}", response_class=HTMLResponse)
async def view_fragment(
    request: Request,
    active_view: str,
    service: DiagnoseService = Depends(get_diagnose_service),
):
    """Rendered display component for a fragment identifier (unknown → dashboard)"""
    view = View.resolve(active_view)
    context = await _view_context(view, service)
    response = templates.TemplateResponse(request, compose(active_view), context)
    response.headers["X-Active-View"] = view.value
    return response


@router.get("/products", response_class=HTMLResponse)
async def products_page(request: Request):
    """Product catalog"""
    return templates.TemplateResponse(request, "products.html", {
        "app_name": get_settings().app_name,
        "products": sample_data.SAMPLE_PRODUCTS,
    })
