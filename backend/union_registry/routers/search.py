"""Cross-tenant search endpoints, open to any authenticated principal."""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session, get_principal
from ..schemas import GlobalSearchResult, Principal
from ..services import search

router = APIRouter(tags=["search"])


@router.get("/search", response_model=list[GlobalSearchResult])
async def universal_search(
    q: str = Query(min_length=1),
    include_customers: bool = False,
    limit: int | None = Query(default=None, ge=1),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db_session),
) -> list[GlobalSearchResult]:
    """Search employees (and optionally customers) of every dealer."""

    return await search.search(
        session, principal, q, include_customers=include_customers, limit=limit
    )


@router.get("/employees/check-aadhar", response_model=GlobalSearchResult | None)
async def check_aadhar(
    aadhar: str = Query(min_length=1),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db_session),
) -> GlobalSearchResult | None:
    """Return the active employee holding this Aadhar anywhere, or null."""

    return await search.check_identity(session, principal, aadhar)
