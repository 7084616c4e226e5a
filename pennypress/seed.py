"""
Mock data for the in-memory catalog.

Seed data uses the API's camelCase keys. Records refer to each other by
1-based position in their list, which matches the ids an empty catalog
assigns.
"""

import json
import logging
from datetime import datetime, timedelta
from pathlib import Path

from bs4 import BeautifulSoup

from .catalog import ArticleCatalog

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 225


MOCK_DATA: dict = {
    "users": [
        {
            "username": "sarahj",
            "password": "password123",
            "name": "Sarah Johnson",
            "email": "sarah@example.com",
            "avatarUrl": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?w=150",
            "bio": "Technology journalist covering AI, chips and the people who build them.",
        },
        {
            "username": "mchen",
            "password": "password123",
            "name": "Michael Chen",
            "email": "michael@example.com",
            "avatarUrl": "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?w=150",
            "bio": "Science writer and former astrophysics researcher.",
        },
        {
            "username": "epatel",
            "password": "password123",
            "name": "Elena Patel",
            "email": "elena@example.com",
            "avatarUrl": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=150",
            "bio": "Health and wellness correspondent.",
        },
        {
            "username": "dwright",
            "password": "password123",
            "name": "David Wright",
            "email": "david@example.com",
            "avatarUrl": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150",
            "bio": "Business and markets editor.",
        },
        {
            "username": "reader1",
            "password": "password123",
            "name": "Alex Rivera",
            "email": "alex@example.com",
            "avatarUrl": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150",
        },
        {
            "username": "reader2",
            "password": "password123",
            "name": "Priya Nair",
            "email": "priya@example.com",
        },
    ],
    "authors": [
        {"user": 1, "description": "Senior Technology Correspondent", "followers": 12400},
        {"user": 2, "description": "Science Editor", "followers": 8900},
        {"user": 3, "description": "Health Reporter", "followers": 5600},
        {"user": 4, "description": "Business Editor", "followers": 7300},
    ],
    "articles": [
        {
            "title": "The Quiet Race to Build a Useful Quantum Computer",
            "excerpt": "Error correction, not qubit counts, now decides who wins.",
            "content": (
                "<p>For a decade the headline number was the qubit count. Labs announced "
                "ever larger chips and the press dutifully compared them.</p>"
                "<p>That era is ending. The groups now pulling ahead are the ones that can "
                "keep a logical qubit alive long enough to finish a calculation, which "
                "means error correction at scale.</p>"
                "<h2>Why error rates matter</h2>"
                "<p>A quantum processor that makes one mistake in a thousand operations "
                "sounds impressive until you need a million operations in a row.</p>"
            ),
            "imageUrl": "https://images.unsplash.com/photo-1635070041078-e363dbe005cb?w=1200",
            "publishedDate": "2024-05-14T09:00:00+00:00",
            "author": 1,
            "category": "Technology",
            "price": "0.10",
            "readTime": 6,
            "featured": True,
            "publication": "The Verge",
        },
        {
            "title": "What the New Space Telescope Saw First",
            "excerpt": "The first deep-field images reveal galaxies older than expected.",
            "content": (
                "<p>The telescope's first deep-field exposure took twelve hours and "
                "captured thousands of galaxies in a patch of sky the size of a grain "
                "of sand held at arm's length.</p>"
                "<p>Several of them appear to have formed barely 300 million years "
                "after the Big Bang.</p>"
            ),
            "imageUrl": "https://images.unsplash.com/photo-1462331940025-496dfbfc7564?w=1200",
            "publishedDate": "2024-05-12T14:30:00+00:00",
            "author": 2,
            "category": "Science",
            "price": "0.15",
            "readTime": 5,
            "featured": True,
            "publication": "Scientific American",
        },
        {
            "title": "Sleep Is the Most Underrated Performance Drug",
            "excerpt": "New studies link consistent sleep to memory, mood and metabolism.",
            "content": (
                "<p>Researchers tracked 2,000 adults for three years and found that "
                "consistency of sleep mattered more than its total duration.</p>"
                "<p>Participants with irregular schedules showed measurable declines in "
                "working memory.</p>"
            ),
            "imageUrl": "https://images.unsplash.com/photo-1541781774459-bb2af2f05b55?w=1200",
            "publishedDate": "2024-05-10T07:15:00+00:00",
            "author": 3,
            "category": "Health",
            "price": "0.10",
            "readTime": 4,
            "featured": False,
            "publication": "The Atlantic",
        },
        {
            "title": "Why Chipmakers Are Building Factories Everywhere at Once",
            "excerpt": "Subsidies, supply shocks and geopolitics are redrawing the semiconductor map.",
            "content": (
                "<p>Five years ago almost every advanced chip came from a handful of "
                "fabs in East Asia.</p>"
                "<p>Today new plants are rising in Arizona, Ohio, Germany and Japan, "
                "each backed by billions in public money.</p>"
            ),
            "imageUrl": "https://images.unsplash.com/photo-1518770660439-4636190af475?w=1200",
            "publishedDate": "2024-05-08T11:00:00+00:00",
            "author": 4,
            "category": "Business",
            "price": "0.25",
            "readTime": 7,
            "featured": True,
            "publication": "Financial Times",
        },
        {
            "title": "Inside the Lab Teaching Robots to Fold Laundry",
            "excerpt": "Household chores turn out to be one of the hardest problems in robotics.",
            "content": (
                "<p>A towel has no fixed shape. That single fact has defeated robotics "
                "researchers for decades.</p>"
                "<p>The lab's latest system learns from thousands of human demonstrations "
                "recorded with cheap cameras.</p>"
            ),
            "imageUrl": "https://images.unsplash.com/photo-1485827404703-89b55fcc595e?w=1200",
            "publishedDate": "2024-05-05T16:45:00+00:00",
            "author": 1,
            "category": "Technology",
            "price": "0.10",
            "readTime": 5,
            "featured": False,
            "publication": "Wired",
        },
        {
            "title": "The Microbes That Could Clean Up Plastic",
            "excerpt": "Engineered enzymes break down PET bottles in hours instead of centuries.",
            "content": (
                "<p>Plastic bottles take hundreds of years to degrade in a landfill.</p>"
                "<p>An enzyme discovered in a compost heap and tuned in the lab can do it "
                "in under a day at industrial temperatures.</p>"
            ),
            "imageUrl": "https://images.unsplash.com/photo-1532187863486-abf9dbad1b69?w=1200",
            "publishedDate": "2024-05-02T10:00:00+00:00",
            "author": 2,
            "category": "Science",
            "price": "0.15",
            "readTime": 6,
            "featured": False,
            "publication": "Nature",
        },
    ],
    "comments": [
        {
            "article": 1,
            "user": 5,
            "content": "Great explainer. Finally someone talks about logical qubits.",
            "minutesAgo": 90,
            "likes": 4,
        },
        {
            "article": 1,
            "user": 6,
            "content": "Would love a follow-up on the error-correction codes themselves.",
            "minutesAgo": 30,
            "likes": 1,
        },
        {
            "article": 2,
            "user": 5,
            "content": "Those deep-field images are unreal.",
            "minutesAgo": 60 * 26,
            "likes": 7,
        },
        {
            "article": 4,
            "user": 6,
            "content": "The subsidy numbers here are eye-opening.",
            "minutesAgo": 60 * 5,
            "likes": 2,
        },
    ],
}


def estimate_read_time(html: str) -> int:
    """Estimate reading time in minutes from an HTML body."""
    text = BeautifulSoup(html, "html.parser").get_text(" ")
    words = len(text.split())
    return max(1, round(words / WORDS_PER_MINUTE))


def load_seed_file(path: Path) -> dict:
    """Load seed data from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _parse_date(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)


def seed_catalog(catalog: ArticleCatalog, data: dict | None = None, now: datetime | None = None) -> dict:
    """
    Populate a catalog with users, authors, articles and comments.

    Args:
        catalog: Catalog to fill; expected to be empty
        data: Seed data, defaults to the bundled mock data
        now: Reference time for comment "minutesAgo" offsets

    Returns:
        Counts of records created per kind
    """
    data = MOCK_DATA if data is None else data
    now = now or catalog.now()

    users = [
        catalog.create_user(
            username=u["username"],
            password=u["password"],
            name=u["name"],
            email=u["email"],
            avatar_url=u.get("avatarUrl"),
            bio=u.get("bio"),
        )
        for u in data.get("users", [])
    ]

    authors = [
        catalog.create_author(
            user_id=a["user"],
            description=a.get("description"),
            followers=a.get("followers", 0),
        )
        for a in data.get("authors", [])
    ]

    articles = []
    for a in data.get("articles", []):
        read_time = a.get("readTime") or estimate_read_time(a["content"])
        articles.append(catalog.create_article(
            title=a["title"],
            excerpt=a["excerpt"],
            content=a["content"],
            image_url=a["imageUrl"],
            author_id=a["author"],
            category=a["category"],
            price=str(a["price"]),
            read_time=read_time,
            published_date=_parse_date(a.get("publishedDate")),
            featured=a.get("featured", False),
            publication=a.get("publication"),
        ))

    comments = []
    for c in data.get("comments", []):
        comment = catalog.comments.add(
            article_id=c["article"],
            user_id=c["user"],
            content=c["content"],
            created_at=now - timedelta(minutes=c.get("minutesAgo", 0)),
            likes=c.get("likes", 0),
        )
        comments.append(comment)

    counts = {
        "users": len(users),
        "authors": len(authors),
        "articles": len(articles),
        "comments": len(comments),
    }
    logger.info(
        f"Seeded catalog: {counts['users']} users, {counts['authors']} authors, "
        f"{counts['articles']} articles, {counts['comments']} comments"
    )
    return counts
