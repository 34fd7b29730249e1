"""
Sample data for local development and testing.

Fixed ids, emails, booking references and search hashes make the rows
cross-reference each other deterministically. Re-seeding a database that
already holds them fails on the unique constraints.
"""
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Optional

from travelhub.core.database import utcnow
from travelhub.models.models import (
    AnalyticsEvent,
    Booking,
    BookingItem,
    ChatMessage,
    ChatSession,
    FlightBooking,
    FlightSearchCache,
    HotelBooking,
    HotelSearchCache,
    OAuthAccount,
    User,
)
from travelhub.schemas.schemas import (
    AnalyticsEventSeed,
    BookingItemSeed,
    BookingSeed,
    ChatMessageSeed,
    ChatSessionSeed,
    FlightBookingSeed,
    FlightSearchCacheSeed,
    HotelBookingSeed,
    HotelSearchCacheSeed,
    OAuthAccountSeed,
    UserSeed,
)
from travelhub.seed.plan import SeedPlan, SeedStep

CACHE_TTL = timedelta(minutes=30)

ADMIN_USER_ID = "550e8400-e29b-41d4-a716-446655440000"
TEST_USER_ID = "550e8400-e29b-41d4-a716-446655440001"
JOHN_DOE_ID = "550e8400-e29b-41d4-a716-446655440002"

PARIS_SESSION_ID = "660e8400-e29b-41d4-a716-446655440000"
TOKYO_SESSION_ID = "660e8400-e29b-41d4-a716-446655440001"

WEB_SESSION_ID = "sess-123"


def _user(user_id: str, email: str, full_name: str, role: str, now: datetime) -> UserSeed:
    return UserSeed(
        id=user_id,
        email=email,
        full_name=full_name,
        role=role,
        status="active",
        data_processing_consent=True,
        consent_granted_at=now,
    )


def build_seed_plan(now: Optional[datetime] = None) -> SeedPlan:
    """Build the sample-data plan. ``now`` pins the current time for timestamps."""
    now = now or utcnow()

    def users(created):
        return [
            _user(ADMIN_USER_ID, "admin@globaltravelhub.com", "Admin User", "admin", now),
            _user(TEST_USER_ID, "test.user@gmail.com", "Test User", "user", now),
            _user(JOHN_DOE_ID, "john.doe@example.com", "John Doe", "user", now),
        ]

    def oauth_accounts(created):
        _, test_user, john = created["users"]
        return [
            OAuthAccountSeed(
                user_id=test_user.id,
                provider="google",
                provider_user_id="google-123456",
                provider_email="test.user@gmail.com",
            ),
            OAuthAccountSeed(
                user_id=john.id,
                provider="google",
                provider_user_id="google-789012",
                provider_email="john.doe@example.com",
            ),
        ]

    def chat_sessions(created):
        test_user = created["users"][1]
        return [
            ChatSessionSeed(
                id=PARIS_SESSION_ID,
                user_id=test_user.id,
                title="Trip to Paris",
                status="active",
                thread_id="770e8400-e29b-41d4-a716-446655440000",
                context={"destination": "Paris", "intent": "flight_search"},
                message_count=5,
            ),
            ChatSessionSeed(
                id=TOKYO_SESSION_ID,
                user_id=test_user.id,
                title="Hotel in Tokyo",
                status="active",
                thread_id="770e8400-e29b-41d4-a716-446655440001",
                context={"destination": "Tokyo", "intent": "hotel_search"},
                message_count=3,
            ),
        ]

    def chat_messages(created):
        paris = created["chat_sessions"][0]
        return [
            ChatMessageSeed(
                id="880e8400-e29b-41d4-a716-446655440000",
                session_id=paris.id,
                role="user",
                content="I want to book a flight from NYC to Paris in June",
            ),
            ChatMessageSeed(
                id="880e8400-e29b-41d4-a716-446655440001",
                session_id=paris.id,
                role="ai",
                content="I'd be happy to help you find flights from NYC to Paris in June!",
                model="gpt-4",
                tokens_total=45,
                latency_ms=850,
            ),
        ]

    def flight_search_cache(created):
        return [
            FlightSearchCacheSeed(
                id="f1e2d3c4-b5a6-7890-abcd-ef1234567890",
                search_hash="a1b2c3d4e5f6789012345678901234567890abcd1234567890abcdef12345678",
                origin="JFK",
                destination="CDG",
                departure_date=date(2024, 6, 15),
                return_date=date(2024, 6, 22),
                passengers_adults=1,
                cabin_class="economy",
                results=[
                    {"airline": "Air France", "flightNumber": "AF006", "price": 850},
                    {"airline": "Delta", "flightNumber": "DL264", "price": 920},
                ],
                result_count=2,
                created_at=now,
                expires_at=now + CACHE_TTL,
                hit_count=15,
            ),
        ]

    def hotel_search_cache(created):
        return [
            HotelSearchCacheSeed(
                id="a1b2c3d4-e5f6-7890-abcd-ef1234567891",
                search_hash="b2c3d4e5f6a789012345678901234567890abcde1234567890abcdef123456789",
                location="Tokyo",
                check_in=date(2024, 7, 1),
                check_out=date(2024, 7, 5),
                guests=2,
                rooms=1,
                results=[
                    {"hotelId": "HT123", "hotelName": "Park Hyatt Tokyo", "pricePerNight": 450},
                    {"hotelId": "HT456", "hotelName": "Shibuya Excel Hotel", "pricePerNight": 180},
                ],
                result_count=2,
                created_at=now,
                expires_at=now + CACHE_TTL,
                hit_count=8,
            ),
        ]

    def bookings(created):
        _, test_user, john = created["users"]
        paris, tokyo = created["chat_sessions"]
        return [
            BookingSeed(
                id="990e8400-e29b-41d4-a716-446655440000",
                user_id=john.id,
                booking_reference="GTH-ABC123",
                status="confirmed",
                payment_status="completed",
                total_amount=Decimal("1250.00"),
                currency="USD",
                contact_email="john.doe@example.com",
                contact_phone="+1-555-0123",
                chat_session_id=tokyo.id,
                confirmed_at=now,
            ),
            BookingSeed(
                id="990e8400-e29b-41d4-a716-446655440001",
                user_id=test_user.id,
                booking_reference="GTH-DEF456",
                status="confirmed",
                payment_status="completed",
                total_amount=Decimal("2100.00"),
                currency="USD",
                contact_email="test.user@gmail.com",
                contact_phone="+1-555-0456",
                chat_session_id=paris.id,
                confirmed_at=now,
            ),
        ]

    def flight_bookings(created):
        return [
            FlightBookingSeed(
                id="aa0e8400-e29b-41d4-a716-446655440000",
                booking_reference="ABC123",
                airline_code="BA",
                airline_name="British Airways",
                flight_number="BA112",
                origin="JFK",
                destination="LHR",
                departure_time=datetime(2024, 3, 15, 22, 30),
                arrival_time=datetime(2024, 3, 16, 8, 45),
                cabin_class="business",
                passengers=[{"name": "John Doe", "type": "adult", "price": 1200}],
                passenger_count=1,
                external_booking_id="EXT-12345",
            ),
        ]

    def hotel_bookings(created):
        return [
            HotelBookingSeed(
                id="bb0e8400-e29b-41d4-a716-446655440000",
                booking_reference="DEF456",
                hotel_id="HT789",
                hotel_name="The Peninsula Paris",
                hotel_address="19 Avenue Kléber, 75116 Paris, France",
                hotel_rating=5.0,
                room_type="Deluxe Room",
                check_in=date(2024, 6, 15),
                check_out=date(2024, 6, 22),
                nights=7,
                guests=2,
                rooms=1,
                breakfast_included=True,
                guests_details=[{"name": "Test User", "type": "adult"}],
                external_booking_id="EXT-67890",
            ),
        ]

    def booking_items(created):
        john_booking, test_booking = created["bookings"]
        return [
            BookingItemSeed(
                booking_id=john_booking.id,
                item_type="flight",
                item_sequence=1,
                flight_booking_id=created["flight_bookings"][0].id,
                item_price=Decimal("1200.00"),
            ),
            BookingItemSeed(
                booking_id=test_booking.id,
                item_type="hotel",
                item_sequence=1,
                hotel_booking_id=created["hotel_bookings"][0].id,
                item_price=Decimal("2100.00"),
            ),
        ]

    def analytics_events(created):
        test_user = created["users"][1]
        test_booking = created["bookings"][1]
        return [
            AnalyticsEventSeed(
                event_type="page_view",
                user_id=test_user.id,
                session_id=WEB_SESSION_ID,
                event_data={"page": "/flights/search", "referrer": "google"},
            ),
            AnalyticsEventSeed(
                event_type="search_flight",
                user_id=test_user.id,
                session_id=WEB_SESSION_ID,
                event_data={"origin": "JFK", "destination": "CDG", "resultsCount": 2},
            ),
            AnalyticsEventSeed(
                event_type="booking_completed",
                user_id=test_user.id,
                session_id=WEB_SESSION_ID,
                event_data={"bookingId": str(test_booking.id), "amount": 2100},
            ),
        ]

    return SeedPlan([
        SeedStep(
            "users", User, users,
            message=lambda rows: "Created users: " + ", ".join(u.email for u in rows),
        ),
        SeedStep(
            "oauth_accounts", OAuthAccount, oauth_accounts,
            depends_on=("users",),
            message=lambda rows: "Created OAuth accounts",
        ),
        SeedStep(
            "chat_sessions", ChatSession, chat_sessions,
            depends_on=("users",),
            message=lambda rows: "Created chat sessions: " + ", ".join(s.title for s in rows),
        ),
        SeedStep(
            "chat_messages", ChatMessage, chat_messages,
            depends_on=("chat_sessions",),
            message=lambda rows: "Created chat messages",
        ),
        SeedStep(
            "flight_search_cache", FlightSearchCache, flight_search_cache,
            message=lambda rows: None,
        ),
        SeedStep(
            "hotel_search_cache", HotelSearchCache, hotel_search_cache,
            message=lambda rows: "Created cache entries",
        ),
        SeedStep(
            "bookings", Booking, bookings,
            depends_on=("users", "chat_sessions"),
            message=lambda rows: "Created bookings: " + ", ".join(b.booking_reference for b in rows),
        ),
        SeedStep(
            "flight_bookings", FlightBooking, flight_bookings,
            message=lambda rows: None,
        ),
        SeedStep(
            "hotel_bookings", HotelBooking, hotel_bookings,
            message=lambda rows: "Created flight and hotel bookings",
        ),
        SeedStep(
            "booking_items", BookingItem, booking_items,
            depends_on=("bookings", "flight_bookings", "hotel_bookings"),
            message=lambda rows: "Created booking items",
        ),
        SeedStep(
            "analytics_events", AnalyticsEvent, analytics_events,
            depends_on=("users", "bookings"),
            message=lambda rows: "Created analytics events",
        ),
    ])
