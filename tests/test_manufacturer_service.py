"""Tests for manufacturer lookups."""

from datetime import datetime, timezone

import pytest

from catalogue.exceptions import ManufacturerNotFound, Unauthorized
from catalogue.filters import ManufacturerFilterList, StringFilter
from catalogue.services.authorization import VIEW_INACTIVE_MANUFACTURER


def test_manufacturer_fields(services_for):
    manufacturer = services_for().manufacturers.manufacturer("man-naish")

    assert manufacturer.title == "Naish"
    assert manufacturer.icon == "naish.png"
    assert manufacturer.url == "Nach-Hersteller/Naish/"
    assert manufacturer.active is True
    assert manufacturer.timestamp == datetime(2020, 6, 1, 12, 30, tzinfo=timezone.utc)


def test_manufacturer_without_timestamp_has_none(services_for):
    assert services_for().manufacturers.manufacturer("man-core").timestamp is None


def test_inactive_manufacturer_requires_permission(services_for):
    with pytest.raises(Unauthorized):
        services_for().manufacturers.manufacturer("man-inactive")

    manufacturer = services_for([VIEW_INACTIVE_MANUFACTURER]).manufacturers.manufacturer("man-inactive")
    assert manufacturer.active is False


def test_missing_manufacturer(services_for):
    with pytest.raises(ManufacturerNotFound):
        services_for().manufacturers.manufacturer("DOES-NOT-EXIST")


def test_manufacturers_list_is_scoped(services_for):
    anonymous = services_for().manufacturers.manufacturers(ManufacturerFilterList())
    privileged = services_for([VIEW_INACTIVE_MANUFACTURER]).manufacturers.manufacturers(ManufacturerFilterList())

    assert [m.id for m in anonymous] == ["man-core", "man-naish"]
    assert [m.id for m in privileged] == ["man-core", "man-inactive", "man-naish"]


def test_manufacturers_title_filter(services_for):
    manufacturers = services_for().manufacturers.manufacturers(
        ManufacturerFilterList(title=StringFilter(begins_with="nai"))
    )

    assert [m.id for m in manufacturers] == ["man-naish"]
