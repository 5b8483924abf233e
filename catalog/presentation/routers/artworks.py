#Fastapi
from fastapi import APIRouter, Query, Path

#Project files
import catalog.application.dependencies as deps
import catalog.presentation.schemas as schemas
from catalog.common.config import Config
#Typing
import typing as t


router = APIRouter(
    tags = ["catalog"],
    responses={404: {"description": "Requested resource is not found"}}
    )


@router.get('/artworks')
async def list_artworks(
        query_service: deps.QueryServiceDependency,
        page: t.Annotated[int, Query()] = 1,
        limit: t.Annotated[int, Query(description='Page size')] = Config.DEFAULT_PAGE_SIZE,
    ) -> schemas.ArtworkPage:
    '''Approved artworks, one page at a time'''
    page = max(page, 1)
    limit = min(max(limit, 1), Config.MAX_PAGE_SIZE)
    return await query_service.list_approved(page, limit)


@router.get('/artworks/search')
async def search_artworks(
        query_service: deps.QueryServiceDependency,
        q: t.Annotated[str, Query(description='Matched against title, description and artist')] = '',
        type: t.Annotated[str | None, Query(description='Exact art type')] = None,
        period: t.Annotated[str | None, Query(description='Substring of the period')] = None,
    ) -> schemas.ArtworkList:
    return await query_service.search(q, type, period)


@router.get('/artworks/{artwork_id}')
async def get_artwork(
        query_service: deps.QueryServiceDependency,
        artwork_id: t.Annotated[int, Path(description='Artwork to return')],
    ) -> schemas.ArtworkDetail:
    '''Returns an artwork together with up to three artworks of the same type'''
    return await query_service.get_with_similar(artwork_id)


@router.get('/categories')
async def list_categories(category_service: deps.CategoryServiceDependency) -> schemas.CategoryList:
    return schemas.CategoryList(categories=await category_service.list())
