import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from datetime import date

import pytest

from toolrental.models.holiday import HolidayCalendar
from toolrental.models.inventory import Inventory
from toolrental.services.rental_service import RentalService


@pytest.fixture
def inventory():
    """The standard catalogue: CHNS, LADW, JAKD, JAKR."""
    return Inventory.default()


@pytest.fixture
def service(inventory):
    """Checkout service without a holiday calendar."""
    return RentalService(inventory)


@pytest.fixture
def july_holidays():
    """
    Independence Day as observed: 2015-07-03 (Fri, for Sat 07-04)
    and 2020-07-03 (Fri, for Sat 07-04), plus Labor Day 2015-09-07.
    """
    return HolidayCalendar([date(2015, 7, 3), date(2020, 7, 3), date(2015, 9, 7)])


@pytest.fixture
def holiday_service(inventory, july_holidays):
    return RentalService(inventory, holidays=july_holidays)
