"""Create location, weather, event and movie cache tables

Revision ID: 3b1c9e0d7a42
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b1c9e0d7a42'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('search_query', sa.Text(), nullable=False),
        sa.Column('formatted_query', sa.String(length=512), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('search_query'),
    )

    op.create_table(
        'weathers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('forecast', sa.Text(), nullable=True),
        sa.Column('time', sa.String(length=32), nullable=True),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_weathers_location_id', 'weathers', ['location_id'], unique=False)

    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('link', sa.String(length=2048), nullable=True),
        sa.Column('event_name', sa.String(length=512), nullable=True),
        sa.Column('event_date', sa.String(length=32), nullable=True),
        sa.Column('summary', sa.Text(), nullable=True),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_events_location_id', 'events', ['location_id'], unique=False)

    op.create_table(
        'movies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=512), nullable=True),
        sa.Column('overview', sa.Text(), nullable=True),
        sa.Column('average_votes', sa.Float(), nullable=True),
        sa.Column('total_votes', sa.Integer(), nullable=True),
        sa.Column('image_url', sa.String(length=2048), nullable=True),
        sa.Column('popularity', sa.Float(), nullable=True),
        sa.Column('released_on', sa.String(length=32), nullable=True),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_movies_location_id', 'movies', ['location_id'], unique=False)


def downgrade():
    op.drop_index('ix_movies_location_id', table_name='movies')
    op.drop_table('movies')
    op.drop_index('ix_events_location_id', table_name='events')
    op.drop_table('events')
    op.drop_index('ix_weathers_location_id', table_name='weathers')
    op.drop_table('weathers')
    op.drop_table('locations')
