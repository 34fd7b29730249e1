from datetime import date, datetime, timedelta
from decimal import Decimal
import uuid

import pytest
from pydantic import ValidationError

from travelhub.schemas.schemas import (
    BookingItemSeed,
    ChatMessageSeed,
    FlightSearchCacheSeed,
    UserSeed,
)

NOW = datetime(2024, 6, 1, 12, 0)


def _cache(**overrides):
    fields = dict(
        id=uuid.uuid4(),
        search_hash="abc",
        origin="JFK",
        destination="CDG",
        departure_date=date(2024, 6, 15),
        results=[{"airline": "Delta", "price": 920}],
        result_count=1,
        created_at=NOW,
        expires_at=NOW + timedelta(minutes=30),
    )
    fields.update(overrides)
    return FlightSearchCacheSeed(**fields)


def test_user_consent_requires_timestamp():
    with pytest.raises(ValidationError, match="consent_granted_at"):
        UserSeed(id=uuid.uuid4(), email="a@b.com", full_name="A", data_processing_consent=True)


def test_user_timestamp_requires_consent():
    with pytest.raises(ValidationError):
        UserSeed(id=uuid.uuid4(), email="a@b.com", full_name="A", consent_granted_at=NOW)


def test_user_without_consent_is_valid():
    user = UserSeed(id=uuid.uuid4(), email="A@B.com", full_name="A")
    assert user.consent_granted_at is None
    assert user.email == "a@b.com"
    assert user.role == "user"


def test_user_email_needs_at_sign():
    with pytest.raises(ValidationError, match="invalid email"):
        UserSeed(id=uuid.uuid4(), email="nobody", full_name="A")


def test_cache_result_count_must_match_results():
    with pytest.raises(ValidationError, match="result_count"):
        _cache(result_count=2)


def test_cache_must_expire_after_creation():
    with pytest.raises(ValidationError, match="expires_at"):
        _cache(expires_at=NOW)


def test_valid_cache_entry():
    entry = _cache()
    assert entry.expires_at > entry.created_at
    assert entry.passengers_adults == 1


def test_booking_item_needs_exactly_one_detail_record():
    with pytest.raises(ValidationError, match="exactly one"):
        BookingItemSeed(booking_id=uuid.uuid4(), item_type="flight", item_price=Decimal("1"))

    with pytest.raises(ValidationError, match="exactly one"):
        BookingItemSeed(
            booking_id=uuid.uuid4(),
            item_type="flight",
            flight_booking_id=uuid.uuid4(),
            hotel_booking_id=uuid.uuid4(),
            item_price=Decimal("1"),
        )


def test_booking_item_type_must_match_reference():
    with pytest.raises(ValidationError, match="does not match"):
        BookingItemSeed(
            booking_id=uuid.uuid4(),
            item_type="hotel",
            flight_booking_id=uuid.uuid4(),
            item_price=Decimal("1200.00"),
        )


def test_chat_message_role_is_restricted():
    with pytest.raises(ValidationError):
        ChatMessageSeed(id=uuid.uuid4(), session_id=uuid.uuid4(), role="robot", content="hi")
