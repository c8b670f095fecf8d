"""Initial schema

Revision ID: 001
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = '001'
down_revision = None
branch_labels = None
depends_on = None

SEAT_CLASSES = ('economy', 'business', 'first', 'sleeper', 'ac1', 'ac2', 'ac3')
TRAVEL_TYPES = ('flight', 'hotel', 'train', 'bus')
BOOKING_STATUSES = ('pending', 'confirmed', 'cancelled', 'completed')
CHECKOUT_STEPS = ('passengers', 'payment', 'confirmed')


def _shared_enum(name, values):
    # Postgres types used by more than one table are created once, up front
    return sa.Enum(*values, name=name).with_variant(
        postgresql.ENUM(*values, name=name, create_type=False), 'postgresql'
    )


def _route_columns():
    return [
        sa.Column('from_destination_id', sa.String(36), sa.ForeignKey('destinations.id'), nullable=False, index=True),
        sa.Column('to_destination_id', sa.String(36), sa.ForeignKey('destinations.id'), nullable=False, index=True),
        sa.Column('departure_time', sa.DateTime(), nullable=False, index=True),
        sa.Column('arrival_time', sa.DateTime(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('available_seats', sa.Integer(), nullable=False),
    ]


def upgrade():
    bind = op.get_bind()
    if bind.dialect.name == 'postgresql':
        postgresql.ENUM(*SEAT_CLASSES, name='seat_class').create(bind, checkfirst=True)
        postgresql.ENUM(*TRAVEL_TYPES, name='travel_type').create(bind, checkfirst=True)

    op.create_table(
        'users',
        sa.Column('id', sa.String(255), primary_key=True),
        sa.Column('email', sa.String(255), unique=True),
        sa.Column('first_name', sa.String(255)),
        sa.Column('last_name', sa.String(255)),
        sa.Column('profile_image_url', sa.String(1024)),
        sa.Column('phone', sa.String(32)),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'destinations',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('city', sa.String(255), nullable=False, index=True),
        sa.Column('state', sa.String(255), nullable=False),
        sa.Column('country', sa.String(255), nullable=False, server_default='India'),
        sa.Column('description', sa.Text()),
        sa.Column('image_url', sa.String(1024)),
        sa.Column('popularity_score', sa.Integer(), server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'airlines',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('code', sa.String(8), nullable=False, unique=True),
        sa.Column('logo_url', sa.String(1024)),
    )

    op.create_table(
        'flights',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('airline_id', sa.String(36), sa.ForeignKey('airlines.id'), nullable=False),
        sa.Column('flight_number', sa.String(16), nullable=False),
        *_route_columns(),
        sa.Column('total_seats', sa.Integer(), nullable=False),
        sa.Column('seat_class', _shared_enum('seat_class', SEAT_CLASSES), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'trains',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('train_number', sa.String(16), nullable=False),
        sa.Column('train_name', sa.String(255), nullable=False),
        *_route_columns(),
        sa.Column('seat_class', _shared_enum('seat_class', SEAT_CLASSES), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'buses',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('operator_name', sa.String(255), nullable=False),
        sa.Column('bus_type', sa.String(64), nullable=False),
        *_route_columns(),
        sa.Column('total_seats', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'hotels',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('destination_id', sa.String(36), sa.ForeignKey('destinations.id'), nullable=False, index=True),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('rating', sa.Numeric(2, 1)),
        sa.Column('price_per_night', sa.Numeric(10, 2), nullable=False),
        sa.Column('amenities', sa.JSON()),
        sa.Column('image_url', sa.String(1024)),
        sa.Column('description', sa.Text()),
        sa.Column('available_rooms', sa.Integer(), nullable=False),
        sa.Column('total_rooms', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'bookings',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('travel_type', _shared_enum('travel_type', TRAVEL_TYPES), nullable=False),
        sa.Column('flight_id', sa.String(36), sa.ForeignKey('flights.id')),
        sa.Column('hotel_id', sa.String(36), sa.ForeignKey('hotels.id')),
        sa.Column('train_id', sa.String(36), sa.ForeignKey('trains.id')),
        sa.Column('bus_id', sa.String(36), sa.ForeignKey('buses.id')),
        sa.Column('passenger_details', sa.JSON(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('status', sa.Enum(*BOOKING_STATUSES, name='booking_status'), nullable=False),
        sa.Column('booking_date', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('travel_date', sa.DateTime(), nullable=False),
        sa.Column('check_in_date', sa.DateTime()),
        sa.Column('check_out_date', sa.DateTime()),
        sa.Column('payment_id', sa.String(64)),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), index=True),
    )

    op.create_table(
        'travel_guide_articles',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('excerpt', sa.String(512)),
        sa.Column('image_url', sa.String(1024)),
        sa.Column('slug', sa.String(255), nullable=False, unique=True),
        sa.Column('author_id', sa.String(255), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('destination_id', sa.String(36), sa.ForeignKey('destinations.id')),
        sa.Column('published', sa.Boolean(), server_default=sa.false()),
        sa.Column('published_at', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'checkout_drafts',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('travel_type', _shared_enum('travel_type', TRAVEL_TYPES), nullable=False),
        sa.Column('item_id', sa.String(36), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('travel_date', sa.DateTime(), nullable=False),
        sa.Column('check_in_date', sa.DateTime()),
        sa.Column('check_out_date', sa.DateTime()),
        sa.Column('step', sa.Enum(*CHECKOUT_STEPS, name='checkout_step'), nullable=False),
        sa.Column('passenger_details', sa.JSON()),
        sa.Column('base_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('tax_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('booking_id', sa.String(36), sa.ForeignKey('bookings.id')),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )


def downgrade():
    op.drop_table('checkout_drafts')
    op.drop_table('travel_guide_articles')
    op.drop_table('bookings')
    op.drop_table('hotels')
    op.drop_table('buses')
    op.drop_table('trains')
    op.drop_table('flights')
    op.drop_table('airlines')
    op.drop_table('destinations')
    op.drop_table('users')

    bind = op.get_bind()
    if bind.dialect.name == 'postgresql':
        for name in ('checkout_step', 'booking_status', 'travel_type', 'seat_class'):
            postgresql.ENUM(name=name).drop(bind, checkfirst=True)
