from fastapi import APIRouter, Depends, HTTPException, Response, UploadFile
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookcorner.database import get_session
from bookcorner.models import Book
from bookcorner.schemas.book import ImportResponse
from bookcorner.services.catalog import sort_by_author
from bookcorner.services.catalog_csv import parse_catalog_csv, render_catalog_csv
from bookcorner.services.import_service import import_catalog_rows

router = APIRouter(tags=["import"])


@router.post("/api/import/books", response_model=ImportResponse)
async def import_books(file: UploadFile, session: AsyncSession = Depends(get_session)):
    try:
        content = (await file.read()).decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Catalog file must be UTF-8 text")
    rows = parse_catalog_csv(content)
    result = await import_catalog_rows(session, rows)
    return ImportResponse(
        books_created=result.books_created,
        books_skipped=result.books_skipped,
        errors=result.errors,
    )


@router.get("/api/export/books")
async def export_books(session: AsyncSession = Depends(get_session)):
    books = sort_by_author((await session.execute(select(Book))).scalars().all())
    return Response(
        content=render_catalog_csv(books),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="bookcorner.csv"'},
    )
