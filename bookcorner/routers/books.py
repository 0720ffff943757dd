from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookcorner.database import get_session
from bookcorner.models import Book, Review
from bookcorner.schemas.book import (
    AuthorBooks,
    BookCreate,
    BookDetail,
    BookResponse,
    BookUpdate,
    LibraryStats,
)
from bookcorner.schemas.review import ReviewResponse
from bookcorner.services.catalog import author_id, filter_by_author, group_by_author, name_key, sort_by_author
from bookcorner.services.favorites import favorite_ids, only_favorites

router = APIRouter(prefix="/api/books", tags=["books"])

LETTER_PATTERN = "^[A-Za-z]$"


async def get_book_or_404(session: AsyncSession, book_id: int) -> Book:
    book = await session.get(Book, book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


async def find_book(session: AsyncSession, title: str, author: str) -> Book | None:
    result = await session.execute(select(Book).where(Book.name_key == name_key(title, author)))
    return result.scalar_one_or_none()


async def _filtered_books(
    session: AsyncSession,
    q: str | None,
    letter: str | None,
    favorites_only: bool,
) -> list[Book]:
    books = (await session.execute(select(Book))).scalars().all()
    selected = filter_by_author(books, query=q, letter=letter)
    if favorites_only:
        selected = only_favorites(selected, await favorite_ids(session))
    return selected


@router.get("/stats", response_model=LibraryStats)
async def book_stats(session: AsyncSession = Depends(get_session)):
    total_books = (await session.execute(select(func.count(Book.id)))).scalar()
    total_authors = (await session.execute(select(func.count(func.distinct(Book.author))))).scalar()
    total_reviews = (await session.execute(select(func.count(Review.id)))).scalar()
    loaned_books = (
        await session.execute(select(func.count(Book.id)).where(Book.loaned_to.is_not(None)))
    ).scalar()
    return LibraryStats(
        total_books=total_books,
        total_authors=total_authors,
        total_reviews=total_reviews,
        loaned_books=loaned_books,
    )


@router.get("", response_model=list[BookResponse])
async def list_books(
    q: str | None = Query(None, description="Author prefix (accent and case insensitive)"),
    letter: str | None = Query(None, pattern=LETTER_PATTERN, description="First letter of the author"),
    favorites_only: bool = Query(False, description="Only books by favourite authors"),
    limit: int = Query(200, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    books = sort_by_author(await _filtered_books(session, q, letter, favorites_only))
    return books[offset:offset + limit]


@router.get("/by-author", response_model=list[AuthorBooks])
async def list_books_by_author(
    q: str | None = Query(None, description="Author prefix (accent and case insensitive)"),
    letter: str | None = Query(None, pattern=LETTER_PATTERN),
    favorites_only: bool = False,
    session: AsyncSession = Depends(get_session),
):
    books = await _filtered_books(session, q, letter, favorites_only)
    favorites = await favorite_ids(session)
    return [
        AuthorBooks(
            author=author,
            is_favorite=author_id(author) in favorites,
            books=[BookResponse.model_validate(b) for b in group],
        )
        for author, group in group_by_author(books)
    ]


async def _book_detail(session: AsyncSession, book: Book) -> BookDetail:
    reviews = (
        await session.execute(
            select(Review).where(Review.book_id == book.id).order_by(Review.created_at.desc(), Review.id.desc())
        )
    ).scalars().all()
    favorites = await favorite_ids(session)
    book_dict = BookResponse.model_validate(book).model_dump()
    book_dict["is_favorite"] = author_id(book.author) in favorites
    book_dict["reviews"] = [ReviewResponse.model_validate(r) for r in reviews]
    return BookDetail(**book_dict)


async def _book_by_name_or_404(session: AsyncSession, title: str, author: str) -> Book:
    book = await find_book(session, title, author)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.get("/lookup", response_model=BookDetail)
async def lookup_book(
    title: str = Query(..., min_length=1),
    author: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    """Find a book by title and author, ignoring case, accents and punctuation."""
    book = await _book_by_name_or_404(session, title, author)
    return await _book_detail(session, book)


@router.get("/by-name/{title}/{author}", response_model=BookDetail)
async def get_book_by_name(
    title: str, author: str, session: AsyncSession = Depends(get_session)
):
    book = await _book_by_name_or_404(session, title, author)
    return await _book_detail(session, book)


@router.get("/{book_id}", response_model=BookDetail)
async def get_book(book_id: int, session: AsyncSession = Depends(get_session)):
    book = await get_book_or_404(session, book_id)
    return await _book_detail(session, book)


@router.post("", response_model=BookDetail, status_code=201)
async def create_book(data: BookCreate, session: AsyncSession = Depends(get_session)):
    if await find_book(session, data.title, data.author) is not None:
        raise HTTPException(status_code=409, detail="Book already exists")

    first = data.review if data.review is not None and data.review.has_content() else None
    book = Book(
        name_key=name_key(data.title, data.author),
        title=data.title,
        author=data.author,
        added_by=data.added_by,
        average_rating=float(first.rating) if first and first.rating else 0.0,
        total_reviews=1 if first else 0,
    )
    session.add(book)
    try:
        await session.flush()
        if first:
            session.add(Review(
                book_id=book.id,
                reviewer_name=first.reviewer_name or data.added_by,
                rating=first.rating,
                comment=first.comment,
            ))
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise HTTPException(status_code=409, detail="Book already exists")
    await session.refresh(book)
    return await _book_detail(session, book)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: int, data: BookUpdate, session: AsyncSession = Depends(get_session)
):
    book = await get_book_or_404(session, book_id)
    for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(book, key, value)

    new_key = name_key(book.title, book.author)
    if new_key != book.name_key:
        clash = await find_book(session, book.title, book.author)
        if clash is not None:
            raise HTTPException(status_code=409, detail="Book already exists")
        book.name_key = new_key
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise HTTPException(status_code=409, detail="Book already exists")
    await session.refresh(book)
    return book


@router.delete("/{book_id}", status_code=204)
async def delete_book(book_id: int, session: AsyncSession = Depends(get_session)):
    book = await get_book_or_404(session, book_id)
    await session.delete(book)
    await session.commit()
