"""Initial schema with users and their posts."""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision = "20261017000001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "User",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=True),
        sa.UniqueConstraint("email", name="User_email_key"),
    )

    op.create_table(
        "Post",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column(
            "published",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
        ),
        sa.Column(
            "authorId",
            sa.Integer(),
            sa.ForeignKey("User.id", name="Post_authorId_fkey"),
            nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("Post")
    op.drop_table("User")
