"""Value objects and factories used across the test suite."""

from tests.model.factory import make_town, make_user, make_users
from tests.model.record import FlatRecord, OtherRecord, PlainRecord, Record
from tests.model.town import Town
from tests.model.user import User

__all__ = [
    "Record",
    "OtherRecord",
    "FlatRecord",
    "PlainRecord",
    "User",
    "Town",
    "make_user",
    "make_users",
    "make_town",
]
