"""create expenses table

Revision ID: 0001_create_expenses
Revises:
Create Date: 2023-11-25 21:40:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_create_expenses'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # The app's start-up create_all may already have built the table
    if sa.inspect(op.get_bind()).has_table('expenses'):
        return

    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('description', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('category', sa.String(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_expenses_id', 'expenses', ['id'])
    op.create_index('ix_expenses_date', 'expenses', ['date'])


def downgrade():
    op.drop_index('ix_expenses_date', table_name='expenses')
    op.drop_index('ix_expenses_id', table_name='expenses')
    op.drop_table('expenses')
