# portfolio_api/api/endpoints/portfolio_items.py
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from portfolio_api.api.deps import get_portfolio_store
from portfolio_api.core.logging import logger
from portfolio_api.middleware.auth import AdminGuardRoute, require_admin
from portfolio_api.schemas.portfolio_item import Message, PortfolioItem
from portfolio_api.services.portfolio import PortfolioItemStore

router = APIRouter(route_class=AdminGuardRoute)


@router.get("", response_model=List[PortfolioItem])
def get_portfolio_items(store: PortfolioItemStore = Depends(get_portfolio_store)):
    try:
        return store.list_items()
    except Exception as e:
        logger.exception(f"Error retrieving portfolio items: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch portfolio items"
        )


@router.post("", response_model=Message, dependencies=[Depends(require_admin)])
def save_portfolio_items(
    items: List[PortfolioItem],
    store: PortfolioItemStore = Depends(get_portfolio_store),
):
    """
    Replace the whole portfolio with the submitted array
    """
    try:
        store.replace_items(items)
    except Exception as e:
        logger.exception(f"Error saving portfolio items: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save portfolio items"
        )
    return Message(message="Portfolio items saved successfully")
