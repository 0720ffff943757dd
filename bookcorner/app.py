import logging

from fastapi import FastAPI

from bookcorner.config import API_TITLE, LOG_LEVEL
from bookcorner.routers import authors, books, favorites, import_export, loans, reviews, wishlist


def create_app() -> FastAPI:
    logging.getLogger("bookcorner").setLevel(LOG_LEVEL)
    app = FastAPI(title=API_TITLE, version="0.1.0")
    app.include_router(books.router)
    app.include_router(reviews.router)
    app.include_router(loans.router)
    app.include_router(wishlist.router)
    app.include_router(authors.router)
    app.include_router(favorites.router)
    app.include_router(import_export.router)
    return app


app = create_app()
