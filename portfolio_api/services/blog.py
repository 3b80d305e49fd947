# portfolio_api/services/blog.py
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

from portfolio_api.core.errors import NotFoundError
from portfolio_api.core.logging import logger
from portfolio_api.schemas.blog_post import BlogPost
from portfolio_api.services.documents import JsonDocument, next_id

# Fixed at import so the default post has stable timestamps between requests
_DEFAULTS_CREATED_AT = datetime.now(timezone.utc)


def default_blog_posts() -> List[Dict[str, Any]]:
    post = BlogPost(
        id=1,
        title="Welcome to My Photography Blog",
        content=(
            "Hello everyone! This is where I'll be sharing my photography journey, "
            "latest shoots, and creative ideas."
        ),
        created_at=_DEFAULTS_CREATED_AT,
        updated_at=_DEFAULTS_CREATED_AT,
        tags=["welcome", "photography"],
    )
    return [post.model_dump(mode="json", by_alias=True)]


def _now_after(previous: datetime) -> datetime:
    # updatedAt must move forward even when the clock is coarse
    now = datetime.now(timezone.utc)
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    return max(now, previous + timedelta(microseconds=1))


class BlogPostStore:
    """Blog posts kept in blog-posts.json, one record per post."""

    def __init__(self, data_dir: str):
        self.document = JsonDocument(os.path.join(data_dir, "blog-posts.json"), default_blog_posts)

    def list_posts(self) -> List[BlogPost]:
        return [BlogPost.model_validate(item) for item in self.document.read()]

    def get_post(self, post_id: int) -> BlogPost:
        for item in self.document.read():
            if item["id"] == post_id:
                return BlogPost.model_validate(item)
        raise NotFoundError("Blog post", post_id)

    def create_post(self, data: Dict[str, Any]) -> BlogPost:
        now = datetime.now(timezone.utc)
        with self.document.transaction() as items:
            post = BlogPost(id=next_id(items), created_at=now, updated_at=now, **data)
            items.append(post.model_dump(mode="json", by_alias=True))
        logger.info(f"Created blog post {post.id}")
        return post

    def update_post(self, post_id: int, data: Dict[str, Any]) -> BlogPost:
        with self.document.transaction() as items:
            for index, item in enumerate(items):
                if item["id"] == post_id:
                    current = BlogPost.model_validate(item)
                    updated = current.model_copy(
                        update={**data, "updated_at": _now_after(current.updated_at)}
                    )
                    items[index] = updated.model_dump(mode="json", by_alias=True)
                    return updated
            raise NotFoundError("Blog post", post_id)

    def delete_post(self, post_id: int) -> None:
        with self.document.transaction() as items:
            items[:] = [item for item in items if item["id"] != post_id]
