"""create songs table

Revision ID: 20240929171548
Revises:
Create Date: 2024-09-29 17:15:48

"""
from alembic import op
import sqlalchemy as sa


revision = "20240929171548"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "songs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("group", sa.Text(), nullable=False, quote=True),
        sa.Column("song", sa.Text(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("link", sa.Text(), nullable=False),
        sa.Column("release_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("idx_songs_group", "songs", ["group"])
    op.create_index("idx_songs_song", "songs", ["song"])
    op.create_index("idx_songs_release_date", "songs", ["release_date"])


def downgrade() -> None:
    op.drop_index("idx_songs_release_date", table_name="songs")
    op.drop_index("idx_songs_song", table_name="songs")
    op.drop_index("idx_songs_group", table_name="songs")
    op.drop_table("songs")
