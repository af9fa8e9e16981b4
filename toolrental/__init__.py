from .config import Config
from .models.holiday import HolidayCalendar
from .models.inventory import Inventory
from .models.policy import DEFAULT_POLICIES
from .services.rental_service import RentalService


def create_service(inventory=None, policies=None, holidays=None):
    """
    Build a RentalService with the standard catalogue and policies.
    Holidays default to the dates listed in TOOLRENTAL_HOLIDAYS (none if unset).
    """
    if holidays is None:
        holidays = HolidayCalendar(Config.holiday_dates())
    return RentalService(
        inventory if inventory is not None else Inventory.default(),
        policies if policies is not None else DEFAULT_POLICIES,
        holidays,
    )
