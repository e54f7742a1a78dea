"""Current page view and paginator navigation."""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from artpager.api.state import AppState, get_state
from artpager.core.artworks_client import CatalogFetchError
from artpager.core.selection_controller import SelectionController
from artpager.models.artwork import artwork_to_dict

router = APIRouter()


class PageBody(BaseModel):
    page: int


def page_view(controller: SelectionController) -> dict:
    """Everything the table, paginator and auto-select popup render."""
    selected = {a.key for a in controller.visible_selection()}
    return {
        "page": controller.current_page,
        "page_size": controller.page_size,
        "total_records": controller.total_records,
        "total_pages": controller.total_pages,
        "report": controller.page_report(),
        "loading": controller.is_loading,
        "pending_auto_select": controller.pending_auto_select,
        "auto_select_popup_open": controller.auto_select_popup_open,
        "records": [
            {**artwork_to_dict(a), "selected": a.key in selected}
            for a in controller.records
        ],
    }


@router.get("")
def get_page(state: AppState = Depends(get_state)):
    """Return the visible page with per-row selection flags."""
    return page_view(state.controller)


@router.post("/page")
def change_page(body: PageBody, state: AppState = Depends(get_state)):
    """Navigate to a page (1-indexed) and return its view."""
    try:
        state.controller.change_page(body.page)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CatalogFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return page_view(state.controller)


@router.post("/refresh")
def refresh(state: AppState = Depends(get_state)):
    """Refetch the current page."""
    try:
        state.controller.refresh()
    except CatalogFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return page_view(state.controller)
