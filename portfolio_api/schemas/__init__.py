# Import schemas so they can be imported from portfolio_api.schemas
from portfolio_api.schemas.base import BaseSchema
from portfolio_api.schemas.photo import PhotoBase, PhotoCreate, PhotoUpdate, Photo
from portfolio_api.schemas.profile import ProfileBase, ProfileUpdate, Profile, default_profile, PROFILE_ID
from portfolio_api.schemas.blog_post import BlogPostCreate, BlogPostUpdate, BlogPost
from portfolio_api.schemas.portfolio_item import PortfolioItem, Message
from portfolio_api.schemas.auth import LoginRequest, LoginResponse
