"""
Pydantic models for API request/response validation.

Fields are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .catalog import Article, AuthorInfo, Comment, CommentWithUser


class ApiModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ─────────────────────────────────────────────────────────────
# Article Schemas
# ─────────────────────────────────────────────────────────────

class AuthorInfoResponse(ApiModel):
    """Author summary embedded in an article."""
    id: int
    name: str
    avatar_url: str
    bio: str
    description: str

    @classmethod
    def from_catalog(cls, author: AuthorInfo) -> "AuthorInfoResponse":
        return cls(
            id=author.id,
            name=author.name,
            avatar_url=author.avatar_url,
            bio=author.bio,
            description=author.description,
        )


class CommentUserResponse(ApiModel):
    id: int
    name: str
    avatar_url: str


class CommentWithUserResponse(ApiModel):
    """Comment with its author and a relative timestamp."""
    id: int
    content: str
    user: CommentUserResponse
    time_ago: str
    likes: int

    @classmethod
    def from_catalog(cls, comment: CommentWithUser) -> "CommentWithUserResponse":
        return cls(
            id=comment.id,
            content=comment.content,
            user=CommentUserResponse(
                id=comment.user.id,
                name=comment.user.name,
                avatar_url=comment.user.avatar_url,
            ),
            time_ago=comment.time_ago,
            likes=comment.likes,
        )


class ArticleResponse(ApiModel):
    """Article with author info and comments."""
    id: int
    title: str
    excerpt: str
    content: str
    image_url: str
    published_date: str
    author: AuthorInfoResponse
    category: str
    price: float
    read_time: int
    featured: bool
    comments: list[CommentWithUserResponse]
    publication: str | None = None  # Source publication label

    @classmethod
    def from_catalog(cls, article: Article) -> "ArticleResponse":
        return cls(
            id=article.id,
            title=article.title,
            excerpt=article.excerpt,
            content=article.content,
            image_url=article.image_url,
            published_date=article.published_date.isoformat(),
            author=AuthorInfoResponse.from_catalog(article.author),
            category=article.category,
            price=article.price,
            read_time=article.read_time,
            featured=article.featured,
            comments=[CommentWithUserResponse.from_catalog(c) for c in article.comments],
            publication=article.publication,
        )


# ─────────────────────────────────────────────────────────────
# Comment Schemas
# ─────────────────────────────────────────────────────────────

class CommentResponse(ApiModel):
    """A stored comment as created or liked."""
    id: int
    content: str
    article_id: int
    user_id: int
    created_at: str
    likes: int

    @classmethod
    def from_catalog(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            content=comment.content,
            article_id=comment.article_id,
            user_id=comment.user_id,
            created_at=comment.created_at.isoformat(),
            likes=comment.likes,
        )


class CommentCreateRequest(ApiModel):
    """Request to post a comment. The article comes from the URL."""
    content: str
    user_id: int


class CommentLikeRequest(ApiModel):
    """Optional body for liking a comment; a user makes the like count once."""
    user_id: int | None = None


# ─────────────────────────────────────────────────────────────
# Misc Schemas
# ─────────────────────────────────────────────────────────────

class StatusResponse(ApiModel):
    """API health check."""
    status: str
    version: str
    articles: int
