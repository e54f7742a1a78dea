"""Row selection across pages and auto-select of the next N rows."""
from typing import List, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from artpager.api.routes.artworks import page_view
from artpager.api.state import AppState, get_state
from artpager.core.artworks_client import CatalogFetchError
from artpager.models.artwork import artwork_to_dict

router = APIRouter()


class SelectionBody(BaseModel):
    """Ids currently checked in the visible page's table."""
    ids: List[Union[int, str]] = Field(default_factory=list)


class AutoSelectBody(BaseModel):
    count: int = Field(ge=0)


def _rows(artworks) -> dict:
    return {"count": len(artworks), "rows": [artwork_to_dict(a) for a in artworks]}


@router.get("")
def get_selection(state: AppState = Depends(get_state)):
    """All selected rows across every visited page."""
    return _rows(state.controller.selected_rows())


@router.put("")
def put_selection(body: SelectionBody, state: AppState = Depends(get_state)):
    """Reconcile the visible page's rows with the checked ids; other pages are untouched."""
    return _rows(state.controller.set_selection(body.ids))


@router.get("/visible")
def get_visible_selection(state: AppState = Depends(get_state)):
    """Selected rows on the visible page."""
    return _rows(state.controller.visible_selection())


@router.post("/auto-select")
def auto_select(body: AutoSelectBody, state: AppState = Depends(get_state)):
    """Select the next `count` rows starting at the current page; the rest carry over to later pages."""
    try:
        state.controller.request_auto_select(body.count)
    except CatalogFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return page_view(state.controller)


@router.post("/auto-select/popup")
def toggle_popup(state: AppState = Depends(get_state)):
    """Open or close the auto-select count input."""
    return {"open": state.controller.toggle_auto_select_popup()}
