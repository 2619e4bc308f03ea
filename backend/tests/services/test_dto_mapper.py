"""DTO Mapper tests — pure mapping between transient entities and DTOs.

Tests cover:
    - Null-safe image and stock status mapping
    - Add mapping: every field group lands on the entity, images keep reuse-then-new order
    - Edit mapping leaves product fields untouched
    - List/details projections tolerate missing tag, company and country
"""

from datetime import date
from decimal import Decimal

from trainshop.core.domain_types import Control, Epoch, LocoType, Scale
from trainshop.models import Country, Image, Locomotive, RailwayCompany, StockStatus
from trainshop.schemas.locomotive import (
    AddImageDto, AddLocomotiveDto, EditLocomotiveDto, ImageDto, StockStatusDto,
)
from trainshop.services.dto_mapper import (
    apply_add_locomotive_properties, map_edit_locomotive_properties, map_images,
    map_stock_status, to_details_dto, to_list_dto,
)


def _add_dto(**overrides) -> AddLocomotiveDto:
    fields = dict(
        name="  BR 218  ",
        description="Diesel-hydraulic",
        price=Decimal("189.00"),
        tag="diesel",
        stock_status=StockStatusDto(amount=3, next_stock=date(2026, 11, 2)),
        reused_images=[7, 3],
        added_images=[AddImageDto(url="https://img.example/a.jpg")],
        scale=Scale.H0,
        epoch=Epoch.IV,
        length=191.0,
        num_of_axles=4,
        railway_company_id=1,
        control=Control.DIGITAL_SOUND,
        loco_type=LocoType.DIESEL,
        auto_coupling=True,
        num_of_driven_axles=4,
        digital_decoder_id=2,
    )
    fields.update(overrides)
    return AddLocomotiveDto(**fields)


def _stored_locomotive() -> Locomotive:
    return Locomotive(
        id=11,
        name="BR 110",
        description=None,
        price=Decimal("149.00"),
        tag_id="electric",
        images=[Image(id=1, url="https://img.example/110.jpg")],
        stock_status=StockStatus(amount=0, next_stock=None),
        scale=Scale.H0,
        epoch=Epoch.III,
        length=190.0,
        num_of_axles=4,
        railway_company=RailwayCompany(name="DB", country=Country(name="Germany")),
        control=Control.ANALOG,
        loco_type=LocoType.ELECTRIC,
        auto_coupling=False,
        num_of_driven_axles=4,
    )


class TestGeneralMappers:

    def test_no_images_maps_to_empty_list(self):
        assert map_images(None) == []
        assert map_images([]) == []

    def test_images_keep_order(self):
        images = [Image(id=2, url="b"), Image(id=1, url="a")]
        assert map_images(images) == [ImageDto(id=2, url="b"), ImageDto(id=1, url="a")]

    def test_untracked_stock_maps_to_none(self):
        assert map_stock_status(None) is None

    def test_stock_status_copied(self):
        dto = map_stock_status(StockStatus(amount=0, next_stock=date(2027, 1, 5)))
        assert dto == StockStatusDto(amount=0, next_stock=date(2027, 1, 5))


class TestAddMapping:

    def test_all_field_groups_applied(self):
        loco = apply_add_locomotive_properties(Locomotive(), _add_dto())
        assert loco.name == "BR 218"
        assert loco.price == Decimal("189.00")
        assert loco.tag_id == "diesel"
        assert (loco.scale, loco.epoch) == (Scale.H0, Epoch.IV)
        assert (loco.length, loco.num_of_axles, loco.railway_company_id) == (191.0, 4, 1)
        assert loco.control is Control.DIGITAL_SOUND
        assert loco.auto_coupling is True
        assert loco.digital_decoder_id == 2
        assert loco.stock_status.amount == 3

    def test_reused_images_come_first_then_new_ones(self):
        loco = apply_add_locomotive_properties(Locomotive(), _add_dto())
        assert [(i.id, i.url) for i in loco.images] == [
            (7, None), (3, None), (None, "https://img.example/a.jpg"),
        ]

    def test_reused_image_ids_validated_as_image_ids(self):
        assert _add_dto(reused_images=["7", 3]).reused_images == [7, 3]

    def test_no_images_gives_empty_collection(self):
        loco = apply_add_locomotive_properties(
            Locomotive(), _add_dto(reused_images=[], added_images=[]),
        )
        assert loco.images == []

    def test_round_trip_through_details(self):
        loco = apply_add_locomotive_properties(
            Locomotive(), _add_dto(),
        )
        details = to_details_dto(loco)
        assert details.id is None
        assert details.name == "BR 218"
        assert details.description == "Diesel-hydraulic"
        assert details.price == Decimal("189.00")
        assert details.tag == "diesel"
        assert details.scale is Scale.H0
        assert details.epoch is Epoch.IV
        assert details.stock_status == StockStatusDto(
            amount=3, next_stock=date(2026, 11, 2),
        )
        assert details.images == [
            ImageDto(id=7), ImageDto(id=3), ImageDto(url="https://img.example/a.jpg"),
        ]


class TestEditMapping:

    def test_only_locomotive_fields_change(self):
        loco = _stored_locomotive()
        images_before = list(loco.images)
        stock_before = loco.stock_status

        map_edit_locomotive_properties(loco, EditLocomotiveDto(
            id=11, control=Control.DIGITAL, loco_type=LocoType.ELECTRIC,
            auto_coupling=True, num_of_driven_axles=2, digital_decoder_id=5,
        ))

        assert loco.control is Control.DIGITAL
        assert loco.auto_coupling is True
        assert loco.num_of_driven_axles == 2
        assert loco.digital_decoder_id == 5
        assert loco.name == "BR 110"
        assert loco.price == Decimal("149.00")
        assert loco.images == images_before
        assert loco.stock_status is stock_before


class TestSelectMapping:

    def test_list_dto_flattens_relationships(self):
        row = to_list_dto(_stored_locomotive())
        assert row.id == 11
        assert row.railway_company_name == "DB"
        assert row.tag == "electric"
        assert row.images == [ImageDto(id=1, url="https://img.example/110.jpg")]
        assert row.stock_status == StockStatusDto(amount=0)

    def test_details_include_country(self):
        details = to_details_dto(_stored_locomotive())
        assert details.railway_company_country_name == "Germany"
        assert details.num_of_driven_axles == 4

    def test_missing_company_tag_and_stock_map_to_none(self):
        loco = _stored_locomotive()
        loco.railway_company = None
        loco.tag_id = None
        loco.stock_status = None

        row = to_list_dto(loco)
        details = to_details_dto(loco)
        assert row.railway_company_name is None
        assert row.tag is None
        assert row.stock_status is None
        assert details.railway_company_country_name is None

    def test_company_without_country(self):
        loco = _stored_locomotive()
        loco.railway_company = RailwayCompany(name="SBB", country=None)
        assert to_details_dto(loco).railway_company_country_name is None
