"""Card tables

Revision ID: 0001_cards
Revises:
Create Date: 2026-02-02
"""
from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_cards"
down_revision = None
branch_labels = None
depends_on = None


def _card_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("day", sa.String(length=10), nullable=False),
        sa.Column("time", sa.String(length=10), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "nutri-card",
        *_card_columns(),
        sa.Column("carbs", sa.Integer()),
        sa.Column("protein", sa.Integer()),
        sa.Column("fat", sa.Integer()),
        sa.Column("base", sa.Text()),
        sa.Column("main", sa.Text()),
        sa.Column("side", sa.Text()),
        sa.Column("extras", sa.Text()),
        sa.Column("notes", sa.Text()),
    )
    op.create_table(
        "fit-card",
        *_card_columns(),
        sa.Column("exerciseType", sa.String(length=50), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("intensity", sa.String(length=20), nullable=False),
        sa.Column("muscleGroups", sa.Text()),
        sa.Column("equipment", sa.Text()),
        sa.Column("notes", sa.Text()),
    )
    op.create_table(
        "recovery-card",
        *_card_columns(),
        sa.Column("exerciseType", sa.String(length=50), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("intensity", sa.String(length=20), nullable=False),
        sa.Column("bodyPart", sa.String(length=200)),
        sa.Column("precautions", sa.Text()),
        sa.Column("equipment", sa.Text()),
        sa.Column("instructions", sa.Text()),
    )


def downgrade() -> None:
    op.drop_table("recovery-card")
    op.drop_table("fit-card")
    op.drop_table("nutri-card")
