from bookcorner.models.book import Book
from bookcorner.models.favorite import FavoriteAuthor
from bookcorner.models.review import Review
from bookcorner.models.wishlist import WishlistItem

__all__ = ["Book", "FavoriteAuthor", "Review", "WishlistItem"]
