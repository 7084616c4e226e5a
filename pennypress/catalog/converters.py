"""
View converters - join stored records into the shapes returned to callers.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from .models import (
    Article,
    Author,
    AuthorInfo,
    Comment,
    CommentUser,
    CommentWithUser,
    RawArticle,
    User,
)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def format_time_ago(elapsed: timedelta) -> str:
    """
    Render an elapsed duration as "N days/hours/minutes ago".

    Days win over hours, hours over minutes; each count is floored.
    Negative durations are treated as zero.
    """
    seconds = max(0, int(elapsed.total_seconds()))
    days = seconds // 86400
    if days >= 1:
        return _plural(days, "day")
    hours = seconds // 3600
    if hours >= 1:
        return _plural(hours, "hour")
    return _plural(seconds // 60, "minute")


def price_to_number(price: str) -> float:
    """Convert a decimal price string ("0.10") to a JSON-friendly number."""
    return float(Decimal(price))


def to_author_info(author: Author, user: User) -> AuthorInfo:
    return AuthorInfo(
        id=author.id,
        name=user.name,
        avatar_url=user.avatar_url or "",
        bio=user.bio or "",
        description=author.description or "",
    )


def to_comment_with_user(comment: Comment, user: User, now: datetime) -> CommentWithUser:
    return CommentWithUser(
        id=comment.id,
        content=comment.content,
        user=CommentUser(id=user.id, name=user.name, avatar_url=user.avatar_url or ""),
        time_ago=format_time_ago(now - comment.created_at),
        likes=comment.likes,
    )


def to_article(
    article: RawArticle,
    author: AuthorInfo,
    comments: list[CommentWithUser],
) -> Article:
    return Article(
        id=article.id,
        title=article.title,
        excerpt=article.excerpt,
        content=article.content,
        image_url=article.image_url,
        published_date=article.published_date,
        author=author,
        category=article.category,
        price=price_to_number(article.price),
        read_time=article.read_time,
        featured=article.featured,
        comments=comments,
        publication=article.publication,
    )
