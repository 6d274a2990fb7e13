"""create songs table

Revision ID: 0001_create_songs
Revises:
Create Date: 2026-10-17 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from infra.database.schema import get_schema_statements


# revision identifiers, used by Alembic.
revision: str = "0001_create_songs"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # init_raw_db と同じ DDL (IF NOT EXISTS で冪等)
    for stmt in get_schema_statements():
        op.execute(sa.text(stmt))


def downgrade() -> None:
    op.execute(sa.text("DROP TABLE IF EXISTS songs"))
    op.execute(sa.text("DROP SEQUENCE IF EXISTS seq_songs_id"))
