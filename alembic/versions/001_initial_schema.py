"""Initial schema - stores, customers, employees, packages, bookings

Revision ID: 001
Revises:
Create Date: 2026-10-18

WHY: Creates the five admin tables. The unique indexes on employees.email
and employees.phone are what settle concurrent duplicate employee
creations; the service pre-check only gives the early error message.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    ]


def upgrade() -> None:
    """
    Create all tables, enum types and indexes.

    Enum types are created explicitly so downgrade can drop them by name.
    """
    op.execute("CREATE TYPE employeerole AS ENUM ('ADMIN', 'STAFF')")
    op.execute("CREATE TYPE bookingtype AS ENUM ('Package', 'Custom')")

    op.create_table(
        'stores',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('store_location', sa.JSON(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_stores_id', 'stores', ['id'])
    op.create_index('ix_stores_created_at', 'stores', ['created_at'])

    op.create_table(
        'customers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_customers_id', 'customers', ['id'])
    op.create_index('ix_customers_email', 'customers', ['email'], unique=True)
    op.create_index('ix_customers_phone', 'customers', ['phone'], unique=True)
    op.create_index('ix_customers_created_at', 'customers', ['created_at'])

    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('store_id', sa.Integer(), nullable=False),
        sa.Column('role', sa.Enum('ADMIN', 'STAFF', name='employeerole', create_type=False), nullable=False, server_default='STAFF'),
        sa.Column('access_to', sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column('employee_id', sa.String(length=100), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['store_id'], ['stores.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_employees_id', 'employees', ['id'])
    op.create_index('ix_employees_email', 'employees', ['email'], unique=True)
    op.create_index('ix_employees_phone', 'employees', ['phone'], unique=True)
    op.create_index('ix_employees_store_id', 'employees', ['store_id'])
    op.create_index('ix_employees_created_at', 'employees', ['created_at'])

    op.create_table(
        'packages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('overs', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('price > 0', name='ck_packages_price_positive'),
        sa.CheckConstraint('overs > 0', name='ck_packages_overs_positive'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_packages_id', 'packages', ['id'])
    op.create_index('ix_packages_created_at', 'packages', ['created_at'])

    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('store_id', sa.Integer(), nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.Column('booking_type', sa.Enum('Package', 'Custom', name='bookingtype', create_type=False), nullable=False),
        sa.Column('package_id', sa.Integer(), nullable=True),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('overs', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.CheckConstraint('price > 0', name='ck_bookings_price_positive'),
        sa.CheckConstraint('overs > 0', name='ck_bookings_overs_positive'),
        sa.ForeignKeyConstraint(['store_id'], ['stores.id']),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id']),
        sa.ForeignKeyConstraint(['package_id'], ['packages.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_bookings_id', 'bookings', ['id'])
    op.create_index('ix_bookings_store_id', 'bookings', ['store_id'])
    op.create_index('ix_bookings_customer_id', 'bookings', ['customer_id'])
    op.create_index('ix_bookings_package_id', 'bookings', ['package_id'])
    op.create_index('ix_bookings_created_at', 'bookings', ['created_at'])


def downgrade() -> None:
    """Drop tables in reverse dependency order, then the enum types."""
    op.drop_table('bookings')
    op.drop_table('packages')
    op.drop_table('employees')
    op.drop_table('customers')
    op.drop_table('stores')

    op.execute("DROP TYPE IF EXISTS bookingtype")
    op.execute("DROP TYPE IF EXISTS employeerole")
