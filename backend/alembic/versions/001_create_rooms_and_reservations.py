"""Create rooms and reservations tables

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Creates the `rooms` and `reservations` tables.
How:   Integer identity keys; reservations.id_room is indexed but carries no
       foreign key (reservations may reference rooms that do not exist).

Rollback: downgrade() drops both tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create both tables and the per-room reservation index."""
    op.create_table(
        "rooms",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False,
                  comment="Room identifier, assigned on insert"),
        sa.Column("description", sa.Text(), nullable=True,
                  comment="Free-text room description"),
        sa.Column("number_of_person", sa.Integer(), nullable=True,
                  comment="Occupancy capacity"),
        sa.Column("has_private_bathroom", sa.Boolean(), nullable=True,
                  comment="Whether the room has its own bathroom"),
        sa.Column("price", sa.Numeric(10, 2), nullable=True,
                  comment="Nightly price"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "reservations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False,
                  comment="Reservation identifier, assigned on insert"),
        sa.Column("id_room", sa.Integer(), nullable=False,
                  comment="Identifier of the reserved room (no FK)"),
        # Nullable: rows with a missing date never block availability
        sa.Column("check_in_date", sa.Date(), nullable=True,
                  comment="First night of the stay"),
        sa.Column("check_out_date", sa.Date(), nullable=True,
                  comment="Departure day"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_reservations_id_room", "reservations", ["id_room"])


def downgrade() -> None:
    """Drop both tables. WARNING: destroys all room and reservation data."""
    op.drop_index("idx_reservations_id_room", table_name="reservations")
    op.drop_table("reservations")
    op.drop_table("rooms")
