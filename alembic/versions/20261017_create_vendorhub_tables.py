"""create_vendorhub_tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from fastapi_users_db_sqlalchemy.generics import GUID


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MONEY = sa.Numeric(12, 2)


def _owned(*columns):
    """id + vendor_id shared by every tenant-owned table."""
    return (
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('vendor_id', sa.Integer(), sa.ForeignKey('profiles.id'), nullable=False, index=True),
    ) + columns


def upgrade():
    # 1. Auth subjects (fastapi-users)
    op.create_table(
        'user',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('hashed_password', sa.String(length=1024), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_superuser', sa.Boolean(), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_user_email', 'user', ['email'], unique=True)

    # 2. Vendor profiles (tenants)
    op.create_table(
        'profiles',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', GUID(), sa.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('business_name', sa.String(), nullable=False),
        sa.Column('owner_name', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('city', sa.String(), nullable=True),
        sa.Column('state', sa.String(), nullable=True),
        sa.Column('pincode', sa.String(), nullable=True),
        sa.Column('business_type', sa.String(), nullable=True),
        sa.Column('gst_number', sa.String(), nullable=True),
        sa.Column('upi_id', sa.String(), nullable=True),
        sa.Column('whatsapp_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('whatsapp_number', sa.String(), nullable=True),
        sa.Column('google_review_link', sa.String(), nullable=True),
        sa.Column(
            'onboarding_status',
            sa.Enum('pending', 'active', 'rejected', name='onboarding_status', native_enum=False),
            nullable=False,
            server_default='pending',
        ),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('preferred_language', sa.String(), nullable=False, server_default='hinglish'),
        sa.Column('subscription_plan', sa.String(), nullable=False, server_default='starter'),
        sa.Column('dashboard_config', sa.JSON(), nullable=True),
        sa.Column('stores', sa.JSON(), nullable=True),
        sa.Column('promo_video_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    # 3. Feature toggles
    flags = [
        'whatsapp_billing', 'loyalty', 'inventory', 'table_qr', 'online_ordering', 'kitchen_display',
        'staff_management', 'face_attendance', 'expense_tracking', 'analytics', 'messaging', 'ai_support',
    ]
    op.create_table(
        'vendor_features',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('vendor_id', sa.Integer(), sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, unique=True),
        *[sa.Column(flag, sa.Boolean(), nullable=False, server_default=sa.true()) for flag in flags],
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('updated_by', sa.Integer(), sa.ForeignKey('profiles.id'), nullable=True),
    )

    # 4. Customers and loyalty
    op.create_table(
        'customers',
        *_owned(
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('phone', sa.String(), nullable=False),
            sa.Column('gender', sa.String(), nullable=True),
            sa.Column('visit_count', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('total_spend', MONEY, nullable=False, server_default='0'),
            sa.Column('favorite_item', sa.String(), nullable=True),
            sa.Column('opted_out', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('last_visit', sa.DateTime(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        ),
    )
    op.create_table(
        'loyalty_points',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('customer_id', sa.String(), sa.ForeignKey('customers.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('lifetime_points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('tier', sa.String(), nullable=False, server_default='bronze'),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_table(
        'loyalty_rewards',
        *_owned(
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('points_required', sa.Integer(), nullable=False),
            sa.Column('reward_value', MONEY, nullable=True),
            sa.Column('reward_type', sa.String(), nullable=False, server_default='discount'),
            sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        ),
    )

    # 5. Menu, inventory, bills
    op.create_table(
        'menu_items',
        *_owned(
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('price', MONEY, nullable=False),
            sa.Column('size', sa.String(), nullable=True),
            sa.Column('category', sa.String(), nullable=True),
            sa.Column('is_available', sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('image_url', sa.String(), nullable=True),
            sa.Column('store_id', sa.String(), nullable=True),
        ),
    )
    op.create_table(
        'inventory',
        *_owned(
            sa.Column('menu_item_id', sa.String(), sa.ForeignKey('menu_items.id', ondelete='SET NULL'), nullable=True),
            sa.Column('item_name', sa.String(), nullable=False),
            sa.Column('current_stock', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('min_stock_level', sa.Integer(), nullable=False, server_default='10'),
            sa.Column('unit', sa.String(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
        ),
    )
    op.create_table(
        'bills',
        *_owned(
            sa.Column('customer_id', sa.String(), sa.ForeignKey('customers.id', ondelete='SET NULL'), nullable=True),
            sa.Column('customer_name', sa.String(), nullable=True),
            sa.Column('items', sa.JSON(), nullable=False),
            sa.Column('total_amount', MONEY, nullable=False),
            sa.Column('discount', MONEY, nullable=False, server_default='0'),
            sa.Column('extra_charges', MONEY, nullable=False, server_default='0'),
            sa.Column('final_amount', MONEY, nullable=False),
            sa.Column('payment_mode', sa.String(), nullable=False, server_default='cash'),
            sa.Column('status', sa.String(), nullable=False, server_default='completed'),
            sa.Column('whatsapp_message_id', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        ),
    )
    op.create_index('ix_bills_vendor_created', 'bills', ['vendor_id', 'created_at'])

    # 6. Tables and table orders
    op.create_table(
        'tables',
        *_owned(
            sa.Column('table_number', sa.String(), nullable=False),
            sa.Column('qr_code', sa.String(), nullable=True),
            sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        ),
    )
    op.create_table(
        'table_orders',
        *_owned(
            sa.Column('table_id', sa.String(), sa.ForeignKey('tables.id', ondelete='SET NULL'), nullable=True),
            sa.Column('customer_name', sa.String(), nullable=True),
            sa.Column('customer_phone', sa.String(), nullable=True),
            sa.Column('items', sa.JSON(), nullable=False),
            sa.Column('total_amount', MONEY, nullable=False),
            sa.Column('status', sa.String(), nullable=False, server_default='pending'),
            sa.Column('order_source', sa.String(), nullable=False, server_default='table_qr'),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        ),
    )

    # 7. Notifications and messaging
    op.create_table(
        'notifications',
        *_owned(
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('message', sa.Text(), nullable=False),
            sa.Column('type', sa.String(), nullable=False, server_default='info'),
            sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('link', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        ),
    )
    op.create_table(
        'customer_messages',
        *_owned(
            sa.Column('type', sa.String(), nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('recipient_type', sa.String(), nullable=False, server_default='all'),
            sa.Column('recipient_ids', sa.JSON(), nullable=True),
            sa.Column('status', sa.String(), nullable=False, server_default='scheduled'),
            sa.Column('scheduled_for', sa.DateTime(), nullable=True),
            sa.Column('sent_at', sa.DateTime(), nullable=True),
            sa.Column('delivered_count', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('failed_count', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        ),
    )
    op.create_table(
        'customer_automations',
        *_owned(
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('trigger', sa.String(), nullable=False),
            sa.Column('trigger_value', sa.String(), nullable=True),
            sa.Column('message_template', sa.Text(), nullable=False),
            sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column('sent_count', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        ),
    )

    # 8. Staff, attendance, expenses
    op.create_table(
        'staff',
        *_owned(
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('phone', sa.String(), nullable=False),
            sa.Column('role', sa.String(), nullable=False),
            sa.Column('salary', MONEY, nullable=True),
            sa.Column('join_date', sa.DateTime(), nullable=True),
            sa.Column('status', sa.String(), nullable=False, server_default='active'),
            sa.Column('emergency_contact', sa.String(), nullable=True),
            sa.Column('address', sa.String(), nullable=True),
            sa.Column('photo_url', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        ),
    )
    op.create_table(
        'staff_attendance',
        *_owned(
            sa.Column('staff_id', sa.String(), sa.ForeignKey('staff.id', ondelete='CASCADE'), nullable=False),
            sa.Column('check_in', sa.DateTime(), nullable=False),
            sa.Column('check_out', sa.DateTime(), nullable=True),
            sa.Column('status', sa.String(), nullable=False, server_default='present'),
            sa.Column('manual_override', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('date', sa.DateTime(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        ),
    )
    op.create_table(
        'expenses',
        *_owned(
            sa.Column('category', sa.String(), nullable=False),
            sa.Column('description', sa.String(), nullable=False),
            sa.Column('amount', MONEY, nullable=False),
            sa.Column('payment_mode', sa.String(), nullable=False, server_default='cash'),
            sa.Column('expense_date', sa.DateTime(), nullable=False),
            sa.Column('receipt_url', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        ),
    )

    # 9. Public contact form
    op.create_table(
        'contact_queries',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('business_name', sa.String(), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', sa.String(), nullable=False, server_default='new'),
        sa.Column('admin_notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )


def downgrade():
    for table in (
        'contact_queries', 'expenses', 'staff_attendance', 'staff', 'customer_automations',
        'customer_messages', 'notifications', 'table_orders', 'tables',
    ):
        op.drop_table(table)
    op.drop_index('ix_bills_vendor_created', table_name='bills')
    for table in (
        'bills', 'inventory', 'menu_items', 'loyalty_rewards', 'loyalty_points', 'customers',
        'vendor_features', 'profiles',
    ):
        op.drop_table(table)
    op.drop_index('ix_user_email', table_name='user')
    op.drop_table('user')
