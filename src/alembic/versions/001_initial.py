"""Initial migration

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

CATALOG_TABLES = ("themes", "decorations", "food", "drinks", "activities")
SELECTION_COLUMNS = CATALOG_TABLES


def upgrade() -> None:
    # 1. Users table
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("hashed_password", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("access_token", sqlmodel.sql.sqltypes.AutoString(length=512), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_access_token", "users", ["access_token"], unique=True)

    # 2. Catalog tables (themes carry no belongs_to_themes column)
    for table in CATALOG_TABLES:
        columns = [
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
            sa.Column("image", sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
            sa.Column("type", sa.JSON(), nullable=False),
        ]
        if table != "themes":
            columns.append(sa.Column("belongs_to_themes", sa.JSON(), nullable=False))
        op.create_table(table, *columns, sa.PrimaryKeyConstraint("id"))

    # 3. Projects table with embedded guests and selections
    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=30), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column("due_date", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("guest_list", sa.JSON(), nullable=False),
        *[sa.Column(column, sa.JSON(), nullable=True) for column in SELECTION_COLUMNS],
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_owner_id", "projects", ["owner_id"], unique=False)
    op.create_index("ix_projects_created_at", "projects", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_projects_created_at", table_name="projects")
    op.drop_index("ix_projects_owner_id", table_name="projects")
    op.drop_table("projects")
    for table in reversed(CATALOG_TABLES):
        op.drop_table(table)
    op.drop_index("ix_users_access_token", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
