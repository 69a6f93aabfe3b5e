"""Initial schema: deceased_records, police_reports, audit_logs

Revision ID: 3f1a9c7e2b40
Revises:
Create Date: 2026-10-18 10:12:41.508211

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1a9c7e2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create initial schema."""
    # Create deceased_records table
    op.create_table(
        "deceased_records",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("date_of_death", sa.Date(), nullable=True),
        sa.Column("time_of_death", sa.Time(), nullable=True),
        sa.Column("date_found", sa.Date(), nullable=True),
        sa.Column("time_found", sa.Time(), nullable=True),
        sa.Column("location_found", sa.String(length=500), nullable=True),
        sa.Column("condition_of_body", sa.Text(), nullable=True),
        sa.Column("clothing_description", sa.Text(), nullable=True),
        sa.Column("personal_effects", sa.Text(), nullable=True),
        sa.Column("distinguishing_marks", sa.Text(), nullable=True),
        sa.Column(
            "identification_status",
            sa.String(length=32),
            server_default=sa.text("'unidentified'"),
            nullable=False,
        ),
        sa.Column(
            "is_public_viewable",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
        ),
        sa.Column("created_by", sa.String(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "identification_status IN ('unidentified', 'pending_confirmation', 'identified')",
            name="deceased_records_identification_status_check",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_deceased_records_created_at"),
        "deceased_records",
        ["created_at"],
        unique=False,
    )
    op.create_index(
        op.f("ix_deceased_records_created_by"),
        "deceased_records",
        ["created_by"],
        unique=False,
    )
    op.create_index(
        op.f("ix_deceased_records_is_public_viewable"),
        "deceased_records",
        ["is_public_viewable"],
        unique=False,
    )

    # Create police_reports table
    op.create_table(
        "police_reports",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("case_id", sa.String(length=64), nullable=False),
        sa.Column("deceased_record_id", sa.String(), nullable=False),
        sa.Column("jurisdiction", sa.String(length=255), nullable=True),
        sa.Column("circumstances_of_discovery", sa.Text(), nullable=True),
        sa.Column("evidence_collected", sa.Text(), nullable=True),
        sa.Column("officer_notes", sa.Text(), nullable=True),
        sa.Column(
            "report_status",
            sa.String(length=32),
            server_default=sa.text("'draft'"),
            nullable=False,
        ),
        sa.Column("created_by", sa.String(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "report_status IN ('draft', 'submitted', 'under_review', 'closed')",
            name="police_reports_report_status_check",
        ),
        sa.ForeignKeyConstraint(
            ["deceased_record_id"], ["deceased_records.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("case_id"),
    )
    op.create_index(
        op.f("ix_police_reports_created_at"),
        "police_reports",
        ["created_at"],
        unique=False,
    )
    op.create_index(
        op.f("ix_police_reports_created_by"),
        "police_reports",
        ["created_by"],
        unique=False,
    )
    op.create_index(
        op.f("ix_police_reports_deceased_record_id"),
        "police_reports",
        ["deceased_record_id"],
        unique=False,
    )

    # Create audit_logs table
    op.create_table(
        "audit_logs",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=True),
        sa.Column("action", sa.String(), nullable=False),
        sa.Column("table_name", sa.String(), nullable=True),
        sa.Column("record_id", sa.String(), nullable=True),
        sa.Column("details", sa.JSON(), nullable=True),
        sa.Column("ip_address", sa.String(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_audit_logs_action"), "audit_logs", ["action"], unique=False)
    op.create_index(
        op.f("ix_audit_logs_user_id"), "audit_logs", ["user_id"], unique=False
    )


def downgrade() -> None:
    """Drop initial schema."""
    op.drop_index(op.f("ix_audit_logs_user_id"), table_name="audit_logs")
    op.drop_index(op.f("ix_audit_logs_action"), table_name="audit_logs")
    op.drop_table("audit_logs")
    op.drop_index(
        op.f("ix_police_reports_deceased_record_id"), table_name="police_reports"
    )
    op.drop_index(op.f("ix_police_reports_created_by"), table_name="police_reports")
    op.drop_index(op.f("ix_police_reports_created_at"), table_name="police_reports")
    op.drop_table("police_reports")
    op.drop_index(
        op.f("ix_deceased_records_is_public_viewable"), table_name="deceased_records"
    )
    op.drop_index(
        op.f("ix_deceased_records_created_by"), table_name="deceased_records"
    )
    op.drop_index(
        op.f("ix_deceased_records_created_at"), table_name="deceased_records"
    )
    op.drop_table("deceased_records")
