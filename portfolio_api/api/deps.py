# portfolio_api/api/deps.py
from typing import Callable

from fastapi import Request

from portfolio_api.core.config import Settings
from portfolio_api.services.blog import BlogPostStore
from portfolio_api.services.image_analysis import PhotoAnalysis, analyze_photo
from portfolio_api.services.portfolio import PortfolioItemStore
from portfolio_api.services.storage import PortfolioStorage


# Components are built once by create_app and live on app.state

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> PortfolioStorage:
    return request.app.state.storage


def get_blog_store(request: Request) -> BlogPostStore:
    return request.app.state.blog_store


def get_portfolio_store(request: Request) -> PortfolioItemStore:
    return request.app.state.portfolio_store


def get_image_analyzer() -> Callable[[str], PhotoAnalysis]:
    return analyze_photo
