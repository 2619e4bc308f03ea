"""Locomotive Routes — list, tags, details, add, edit, delete.

Invariants:
    - Routes never contain business logic: bind parameters, delegate to LocomotiveService
    - Repeatable query params (tags, scales, ...) bind to FilterOptions; absent → empty → no filter
    - order_by is passed through raw so the core reports unknown keys as INVALID_ORDER_BY
    - PUT body id must match the path id

Design Decisions:
    - `pg` query parameter name kept for the page number (storefront links use it)
    - /tags registered before /{locomotive_id} so it is not captured by the path parameter
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from trainshop.config import get_settings
from trainshop.core.domain_types import Control, Epoch, LocoType, Scale
from trainshop.core.errors import ValidationError
from trainshop.core.query_options import FilterOptions, QueryOptions
from trainshop.infrastructure.database import get_db
from trainshop.schemas.locomotive import (
    AddLocomotiveDto, DetailsLocomotiveDto, EditLocomotiveDto, LocomotivePage,
)
from trainshop.services.locomotive_service import LocomotiveService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/locomotives", tags=["locomotives"])


def get_locomotive_service(db: AsyncSession = Depends(get_db)) -> LocomotiveService:
    return LocomotiveService(db, get_settings().locomotive_page_size)


@router.get("", response_model=LocomotivePage)
async def list_locomotives(
    search: str | None = Query(None, max_length=200),
    tags: list[str] = Query([]),
    scales: list[Scale] = Query([]),
    epochs: list[Epoch] = Query([]),
    controls: list[Control] = Query([]),
    loco_types: list[LocoType] = Query([]),
    order_by: str = Query("name_asc"),
    pg: int = Query(1),
    service: LocomotiveService = Depends(get_locomotive_service),
):
    """List locomotives: search, filter, order, paginate."""
    query_options = QueryOptions(
        search_string=search,
        filter_options=FilterOptions(
            tags=frozenset(tags),
            scales=frozenset(scales),
            epochs=frozenset(epochs),
            controls=frozenset(controls),
            loco_types=frozenset(loco_types),
        ),
        order_by=order_by,
        page_number=pg,
    )
    return await service.get_list(query_options)


@router.get("/tags", response_model=list[str])
async def list_tags(service: LocomotiveService = Depends(get_locomotive_service)):
    """All tags usable as list filters."""
    return await service.get_tags()


@router.get("/{locomotive_id}", response_model=DetailsLocomotiveDto)
async def get_locomotive(
    locomotive_id: int,
    service: LocomotiveService = Depends(get_locomotive_service),
):
    return await service.get_details(locomotive_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_locomotive(
    body: AddLocomotiveDto,
    service: LocomotiveService = Depends(get_locomotive_service),
):
    """Create a locomotive. Returns its id."""
    return {"id": await service.add(body)}


@router.put("/{locomotive_id}", response_model=DetailsLocomotiveDto)
async def edit_locomotive(
    locomotive_id: int,
    body: EditLocomotiveDto,
    service: LocomotiveService = Depends(get_locomotive_service),
):
    """Update locomotive-specific fields."""
    if body.id != locomotive_id:
        logger.info(
            f"Edit rejected: body id {body.id} does not match path id",
            extra={"locomotive_id": locomotive_id},
        )
        raise ValidationError(
            f"Body id {body.id} does not match path id {locomotive_id}", "id",
        )
    return await service.edit(body)


@router.delete("/{locomotive_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_locomotive(
    locomotive_id: int,
    service: LocomotiveService = Depends(get_locomotive_service),
):
    await service.delete(locomotive_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
