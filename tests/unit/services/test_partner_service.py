"""Tests for the partner profile store service."""

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from app.models.partner import FitnessLevel, Sex, WeightUnit
from app.schemas.partner import PartnerCreate, PartnerUpdate
from app.services.partner_service import PartnerService


@pytest.fixture
def service(session):
    return PartnerService(session)


class TestPartnerService:
    def test_create_with_defaults(self, service):
        partner = service.create(PartnerCreate(name="Kristina"))
        assert partner.id is not None
        assert partner.weekly_goal == 5
        assert partner.calorie_goal == 2000
        assert partner.streak == 0
        assert partner.weight_unit == WeightUnit.KG
        assert partner.fitness_level == FitnessLevel.INTERMEDIATE

    def test_list_in_id_order(self, service):
        a = service.create(PartnerCreate(name="A"))
        b = service.create(PartnerCreate(name="B"))
        assert [p.id for p in service.list_partners()] == [a.id, b.id]

    def test_get_missing(self, service):
        with pytest.raises(HTTPException) as exc:
            service.get(7)
        assert exc.value.status_code == 404

    def test_partial_update(self, service):
        partner = service.create(PartnerCreate(name="Obed", weight=181, weight_unit=WeightUnit.LB, age=28))
        updated = service.update_profile(partner.id, PartnerUpdate(sex=Sex.MALE, age=29))
        assert updated.sex == Sex.MALE
        assert updated.age == 29
        assert updated.weight == 181
        assert updated.weight_unit == WeightUnit.LB

    def test_explicit_null_clears_optional_fields(self, service):
        partner = service.create(PartnerCreate(name="Obed", weight=80, age=28))
        updated = service.update_profile(partner.id, PartnerUpdate.model_validate({"weight": None, "age": None}))
        assert updated.weight is None
        assert updated.age is None
        assert updated.name == "Obed"

    @pytest.mark.parametrize("field", ["name", "color", "weekly_goal", "calorie_goal", "weight_unit"])
    def test_explicit_null_on_required_field_rejected(self, field):
        with pytest.raises(ValidationError, match=field):
            PartnerUpdate.model_validate({field: None})

    @pytest.mark.parametrize("weight", [0, 5, 1001])
    def test_weight_out_of_range_rejected(self, weight):
        with pytest.raises(ValidationError):
            PartnerUpdate(weight=weight)
