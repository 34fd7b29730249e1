"""Initial schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2024-11-03 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=True),
        sa.Column('role', sa.String(length=50), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('data_processing_consent', sa.Boolean(), nullable=False),
        sa.Column('consent_granted_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            '(data_processing_consent AND consent_granted_at IS NOT NULL) '
            'OR (NOT data_processing_consent AND consent_granted_at IS NULL)',
            name='ck_users_consent_timestamp'
        ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'oauth_accounts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('provider', sa.String(length=50), nullable=False),
        sa.Column('provider_user_id', sa.String(length=255), nullable=False),
        sa.Column('provider_email', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('provider', 'provider_user_id', name='uq_oauth_provider_user')
    )
    op.create_index('ix_oauth_accounts_user_id', 'oauth_accounts', ['user_id'])

    op.create_table(
        'chat_sessions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('thread_id', sa.String(length=255), nullable=True),
        sa.Column('context', sa.JSON(), nullable=True),
        sa.Column('message_count', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_chat_sessions_user_id', 'chat_sessions', ['user_id'])

    op.create_table(
        'chat_messages',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('session_id', sa.Uuid(), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('model', sa.String(length=100), nullable=True),
        sa.Column('tokens_total', sa.Integer(), nullable=True),
        sa.Column('latency_ms', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['session_id'], ['chat_sessions.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_chat_messages_session_id', 'chat_messages', ['session_id'])

    op.create_table(
        'flight_search_cache',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('search_hash', sa.String(length=64), nullable=False),
        sa.Column('origin', sa.String(length=3), nullable=False),
        sa.Column('destination', sa.String(length=3), nullable=False),
        sa.Column('departure_date', sa.Date(), nullable=False),
        sa.Column('return_date', sa.Date(), nullable=True),
        sa.Column('passengers_adults', sa.Integer(), nullable=False),
        sa.Column('cabin_class', sa.String(length=50), nullable=True),
        sa.Column('results', sa.JSON(), nullable=False),
        sa.Column('result_count', sa.Integer(), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('hit_count', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_flight_search_cache_search_hash', 'flight_search_cache', ['search_hash'], unique=True)

    op.create_table(
        'hotel_search_cache',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('search_hash', sa.String(length=64), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('check_in', sa.Date(), nullable=False),
        sa.Column('check_out', sa.Date(), nullable=False),
        sa.Column('guests', sa.Integer(), nullable=False),
        sa.Column('rooms', sa.Integer(), nullable=False),
        sa.Column('results', sa.JSON(), nullable=False),
        sa.Column('result_count', sa.Integer(), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('hit_count', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_hotel_search_cache_search_hash', 'hotel_search_cache', ['search_hash'], unique=True)

    op.create_table(
        'bookings',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('booking_reference', sa.String(length=50), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('payment_status', sa.String(length=50), nullable=False),
        sa.Column('total_amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column('contact_email', sa.String(length=255), nullable=True),
        sa.Column('contact_phone', sa.String(length=50), nullable=True),
        sa.Column('chat_session_id', sa.Uuid(), nullable=True),
        sa.Column('confirmed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['chat_session_id'], ['chat_sessions.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_bookings_user_id', 'bookings', ['user_id'])
    op.create_index('ix_bookings_booking_reference', 'bookings', ['booking_reference'], unique=True)

    op.create_table(
        'flight_bookings',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('booking_reference', sa.String(length=50), nullable=False),
        sa.Column('airline_code', sa.String(length=3), nullable=False),
        sa.Column('airline_name', sa.String(length=255), nullable=True),
        sa.Column('flight_number', sa.String(length=20), nullable=False),
        sa.Column('origin', sa.String(length=3), nullable=False),
        sa.Column('destination', sa.String(length=3), nullable=False),
        sa.Column('departure_time', sa.DateTime(), nullable=False),
        sa.Column('arrival_time', sa.DateTime(), nullable=False),
        sa.Column('cabin_class', sa.String(length=50), nullable=True),
        sa.Column('passengers', sa.JSON(), nullable=False),
        sa.Column('passenger_count', sa.Integer(), nullable=False),
        sa.Column('external_booking_id', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'hotel_bookings',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('booking_reference', sa.String(length=50), nullable=False),
        sa.Column('hotel_id', sa.String(length=100), nullable=False),
        sa.Column('hotel_name', sa.String(length=255), nullable=False),
        sa.Column('hotel_address', sa.Text(), nullable=True),
        sa.Column('hotel_rating', sa.Float(), nullable=True),
        sa.Column('room_type', sa.String(length=100), nullable=True),
        sa.Column('check_in', sa.Date(), nullable=False),
        sa.Column('check_out', sa.Date(), nullable=False),
        sa.Column('nights', sa.Integer(), nullable=False),
        sa.Column('guests', sa.Integer(), nullable=False),
        sa.Column('rooms', sa.Integer(), nullable=False),
        sa.Column('breakfast_included', sa.Boolean(), nullable=False),
        sa.Column('guests_details', sa.JSON(), nullable=True),
        sa.Column('external_booking_id', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'booking_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('booking_id', sa.Uuid(), nullable=False),
        sa.Column('item_type', sa.String(length=20), nullable=False),
        sa.Column('item_sequence', sa.Integer(), nullable=False),
        sa.Column('flight_booking_id', sa.Uuid(), nullable=True),
        sa.Column('hotel_booking_id', sa.Uuid(), nullable=True),
        sa.Column('item_price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "(item_type = 'flight' AND flight_booking_id IS NOT NULL AND hotel_booking_id IS NULL) "
            "OR (item_type = 'hotel' AND hotel_booking_id IS NOT NULL AND flight_booking_id IS NULL)",
            name='ck_booking_items_detail_ref'
        ),
        sa.ForeignKeyConstraint(['booking_id'], ['bookings.id']),
        sa.ForeignKeyConstraint(['flight_booking_id'], ['flight_bookings.id']),
        sa.ForeignKeyConstraint(['hotel_booking_id'], ['hotel_bookings.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_booking_items_booking_id', 'booking_items', ['booking_id'])

    op.create_table(
        'analytics_events',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_type', sa.String(length=100), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=True),
        sa.Column('session_id', sa.String(length=255), nullable=True),
        sa.Column('event_data', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_analytics_events_event_type', 'analytics_events', ['event_type'])
    op.create_index('ix_analytics_events_user_id', 'analytics_events', ['user_id'])


def downgrade() -> None:
    op.drop_table('analytics_events')
    op.drop_table('booking_items')
    op.drop_table('hotel_bookings')
    op.drop_table('flight_bookings')
    op.drop_table('bookings')
    op.drop_table('hotel_search_cache')
    op.drop_table('flight_search_cache')
    op.drop_table('chat_messages')
    op.drop_table('chat_sessions')
    op.drop_table('oauth_accounts')
    op.drop_table('users')
