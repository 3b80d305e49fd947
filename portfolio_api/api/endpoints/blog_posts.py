# portfolio_api/api/endpoints/blog_posts.py
from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List

from portfolio_api.api.deps import get_blog_store
from portfolio_api.core.errors import NotFoundError
from portfolio_api.core.logging import logger
from portfolio_api.middleware.auth import AdminGuardRoute, require_admin
from portfolio_api.schemas.blog_post import BlogPost as BlogPostSchema, BlogPostCreate, BlogPostUpdate
from portfolio_api.services.blog import BlogPostStore

router = APIRouter(route_class=AdminGuardRoute)


@router.get("", response_model=List[BlogPostSchema])
def get_blog_posts(store: BlogPostStore = Depends(get_blog_store)):
    """
    List blog posts (a welcome post until the first one is saved)
    """
    try:
        return store.list_posts()
    except Exception as e:
        logger.exception(f"Error retrieving blog posts: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch blog posts"
        )


@router.get("/{post_id}", response_model=BlogPostSchema)
def get_blog_post(post_id: int, store: BlogPostStore = Depends(get_blog_store)):
    try:
        return store.get_post(post_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Blog post not found"
        )
    except Exception as e:
        logger.exception(f"Error retrieving blog post {post_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch blog post"
        )


@router.post(
    "",
    response_model=BlogPostSchema,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_blog_post(post_in: BlogPostCreate, store: BlogPostStore = Depends(get_blog_store)):
    """
    Create a blog post; createdAt and updatedAt are both set to now
    """
    try:
        return store.create_post(post_in.model_dump(exclude_unset=True))
    except Exception as e:
        logger.exception(f"Blog post creation error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create blog post"
        )


@router.patch("/{post_id}", response_model=BlogPostSchema, dependencies=[Depends(require_admin)])
def update_blog_post(
    post_id: int,
    post_in: BlogPostUpdate,
    store: BlogPostStore = Depends(get_blog_store),
):
    """
    Update some fields of a blog post and refresh updatedAt
    """
    try:
        return store.update_post(post_id, post_in.model_dump(exclude_unset=True))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Blog post not found"
        )
    except Exception as e:
        logger.exception(f"Blog post update error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update blog post"
        )


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_admin)],
)
def delete_blog_post(post_id: int, store: BlogPostStore = Depends(get_blog_store)):
    try:
        store.delete_post(post_id)
    except Exception as e:
        logger.exception(f"Blog post deletion error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete blog post"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
