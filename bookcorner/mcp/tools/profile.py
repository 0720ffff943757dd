from collections import Counter

from bookcorner.mcp.client import LibraryClient


async def _fetch_all_reviews(client: LibraryClient) -> list[dict]:
    """Paginate through all reviews (API caps at 200 per request)."""
    all_reviews: list[dict] = []
    offset = 0
    while True:
        batch = await client.get("/api/reviews", params={"limit": 200, "offset": offset})
        if client.is_error(batch) or not batch:
            break
        all_reviews.extend(batch)
        if len(batch) < 200:
            break
        offset += 200
    return all_reviews


async def library_profile(client: LibraryClient) -> dict:
    stats = await client.get("/api/books/stats")
    if client.is_error(stats):
        stats = {}

    books = await client.get("/api/books", params={"limit": 1000})
    if client.is_error(books):
        books = []

    favorites = await client.get("/api/favorites")
    if client.is_error(favorites):
        favorites = []

    reviews = await _fetch_all_reviews(client)
    rating_dist = Counter(str(r["rating"]) for r in reviews if r.get("rating"))

    rated = [b for b in books if b["average_rating"] > 0]
    rated.sort(key=lambda b: (-b["average_rating"], -b["total_reviews"]))

    readers = Counter(r["reviewer_name"] for r in reviews)

    return {
        "total_books": stats.get("total_books", 0),
        "total_authors": stats.get("total_authors", 0),
        "total_reviews": stats.get("total_reviews", 0),
        "loaned_books": stats.get("loaned_books", 0),
        "favorite_authors": favorites,
        "rating_distribution": dict(rating_dist),
        "top_rated": [
            {"title": b["title"], "author": b["author"], "average_rating": round(b["average_rating"], 2)}
            for b in rated[:5]
        ],
        "most_active_reviewers": [
            {"name": name, "reviews": count} for name, count in readers.most_common(5)
        ],
    }
