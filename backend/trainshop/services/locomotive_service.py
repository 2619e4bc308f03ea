"""Locomotive Service — list, details, add, edit and delete around the pure catalogue core.

Invariants:
    - Listing: entities → ListLocomotiveDto (lazy) → search → filters → order → page
    - Page size comes from configuration, never from the caller
    - Missing locomotive, reused image, tag, railway company or decoder → ResourceNotFoundError
    - Edit only changes locomotive-specific fields (see dto_mapper.map_edit_locomotive_properties)

Design Decisions:
    - Imperative shell: all IO here, all shaping in core/ (ADR: functional core, imperative shell)
    - Base query ordered by id so equal sort keys keep a deterministic relative order
    - Referenced rows checked explicitly: SQLite does not enforce foreign keys by default,
      and a dangling id is a caller error (404), not a database failure
    - Reused images load their current owner: attaching moves the image, and the
      previous owner's collection must be loaded for that in async code
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from trainshop.core.domain_types import ProductId, TagId
from trainshop.core.errors import ResourceNotFoundError
from trainshop.core.locomotive_listing import get_page
from trainshop.core.query_options import QueryOptions
from trainshop.models.image import Image
from trainshop.models.locomotive import Locomotive
from trainshop.models.railway_company import RailwayCompany
from trainshop.models.tag import DigitalDecoder, Tag
from trainshop.schemas.locomotive import (
    AddLocomotiveDto, DetailsLocomotiveDto, EditLocomotiveDto, LocomotivePage,
)
from trainshop.services.dto_mapper import (
    apply_add_locomotive_properties, map_edit_locomotive_properties,
    to_details_dto, to_list_dto,
)

logger = logging.getLogger(__name__)


class LocomotiveService:
    """Catalogue operations for locomotives."""

    def __init__(self, db: AsyncSession, page_size: int):
        self.db = db
        self.page_size = page_size

    async def get_list(self, query_options: QueryOptions) -> LocomotivePage:
        """One page of locomotives matching the query options."""
        result = await self.db.execute(select(Locomotive).order_by(Locomotive.id))
        rows = (to_list_dto(locomotive) for locomotive in result.scalars().all())
        items, page_number, number_of_pages = get_page(
            rows, query_options, self.page_size,
        )
        logger.info(
            "Locomotive list served",
            extra={
                "page_number": page_number,
                "number_of_pages": number_of_pages,
                "result_count": len(items),
            },
        )
        return LocomotivePage(
            items=items, page_number=page_number, number_of_pages=number_of_pages,
        )

    async def get_tags(self) -> list[TagId]:
        result = await self.db.execute(select(Tag.id).order_by(Tag.id))
        return list(result.scalars().all())

    async def get_details(self, locomotive_id: ProductId) -> DetailsLocomotiveDto:
        locomotive = await self._get_or_404(locomotive_id)
        return to_details_dto(locomotive)

    async def add(self, properties: AddLocomotiveDto) -> ProductId:
        """Create a locomotive; reused image ids must refer to stored images."""
        await self._require(Tag, properties.tag, "Tag")
        await self._require(
            RailwayCompany, properties.railway_company_id, "RailwayCompany",
        )
        await self._require(
            DigitalDecoder, properties.digital_decoder_id, "DigitalDecoder",
        )

        locomotive = apply_add_locomotive_properties(Locomotive(), properties)
        locomotive.images = [
            await self._resolve_image(image) for image in locomotive.images
        ]
        locomotive.images.reorder()
        self.db.add(locomotive)
        await self.db.commit()
        logger.info("Locomotive added", extra={"locomotive_id": locomotive.id})
        return ProductId(locomotive.id)

    async def edit(self, properties: EditLocomotiveDto) -> DetailsLocomotiveDto:
        locomotive = await self._get_or_404(properties.id)
        await self._require(
            DigitalDecoder, properties.digital_decoder_id, "DigitalDecoder",
        )
        map_edit_locomotive_properties(locomotive, properties)
        await self.db.commit()
        logger.info("Locomotive edited", extra={"locomotive_id": locomotive.id})
        return to_details_dto(locomotive)

    async def delete(self, locomotive_id: ProductId) -> None:
        locomotive = await self._get_or_404(locomotive_id)
        await self.db.delete(locomotive)
        await self.db.commit()
        logger.info("Locomotive deleted", extra={"locomotive_id": locomotive_id})

    # ─── Helpers ─────────────────────────────────────────────────

    async def _get_or_404(self, locomotive_id: ProductId) -> Locomotive:
        result = await self.db.execute(
            select(Locomotive).where(Locomotive.id == locomotive_id),
        )
        locomotive = result.scalar_one_or_none()
        if locomotive is None:
            raise ResourceNotFoundError("Locomotive", str(locomotive_id))
        return locomotive

    async def _require(self, model: type, key: object, resource_type: str) -> None:
        """Raise 404 when an optional reference points at a missing row."""
        if key is None:
            return
        if await self.db.get(model, key) is None:
            raise ResourceNotFoundError(resource_type, str(key))

    async def _resolve_image(self, image: Image) -> Image:
        """Swap an id-only reuse record for the stored image; new images pass through."""
        if image.id is None:
            return image
        result = await self.db.execute(
            select(Image)
            .options(selectinload(Image.product))
            .where(Image.id == image.id),
        )
        stored = result.scalar_one_or_none()
        if stored is None:
            raise ResourceNotFoundError("Image", str(image.id))
        return stored
