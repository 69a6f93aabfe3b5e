"""Index deceased_records.date_of_death for date searches

Revision ID: 8c2d4e6f1a93
Revises: 3f1a9c7e2b40
Create Date: 2026-10-18 15:40:07.221904

"""

from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8c2d4e6f1a93"
down_revision: Union[str, Sequence[str], None] = "3f1a9c7e2b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_index(
        op.f("ix_deceased_records_date_of_death"),
        "deceased_records",
        ["date_of_death"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(
        op.f("ix_deceased_records_date_of_death"), table_name="deceased_records"
    )
