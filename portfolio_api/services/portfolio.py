# portfolio_api/services/portfolio.py
import os
from typing import Any, Dict, List

from portfolio_api.core.logging import logger
from portfolio_api.schemas.portfolio_item import PortfolioItem
from portfolio_api.services.documents import JsonDocument


def default_portfolio_items() -> List[Dict[str, Any]]:
    item = PortfolioItem(
        id=1,
        name="Photography Portfolio",
        description=(
            "A modern photography portfolio showcasing nature, macro, and social "
            "photography with advanced image management."
        ),
        technologies=["React", "TypeScript", "Vite", "TailwindCSS", "shadcn/ui"],
        url="https://portfolio.ronnyreyes.com",
        github="https://github.com/ronnyreyes/portfolio",
    )
    return [item.model_dump(mode="json", by_alias=True)]


class PortfolioItemStore:
    """
    Portfolio items kept in portfolio-items.json.

    The client owns the collection: every save replaces the whole array,
    and id uniqueness inside it is the caller's concern.
    """

    def __init__(self, data_dir: str):
        self.document = JsonDocument(os.path.join(data_dir, "portfolio-items.json"), default_portfolio_items)

    def list_items(self) -> List[PortfolioItem]:
        return [PortfolioItem.model_validate(item) for item in self.document.read()]

    def replace_items(self, items: List[PortfolioItem]) -> None:
        self.document.write([item.model_dump(mode="json", by_alias=True) for item in items])
        logger.info(f"Saved {len(items)} portfolio items")
