"""Initial schema - records, record_hashes, record_disposals.

Revision ID: 001
Revises:
Create Date: 2025-10-21

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "records",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("record_number", sa.String(50), nullable=False),
        sa.Column("filename", sa.Text(), nullable=False),
        sa.Column("archive_path", sa.Text(), nullable=False),
        sa.Column("size", sa.BigInteger(), nullable=False),
        sa.Column("hash", sa.String(128), nullable=False),
        sa.Column("hash_algorithm", sa.String(20), nullable=False, server_default="SHA256"),
        sa.Column("category", sa.String(32), nullable=False, server_default="DOCUMENT"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("retain_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("legal_hold", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("legal_hold_reason", sa.Text(), nullable=True),
        sa.Column("legal_hold_by", sa.String(255), nullable=True),
        sa.Column("legal_hold_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("verification_status", sa.String(16), nullable=False, server_default="PENDING"),
        sa.Column("last_verified_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("disposed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("disposed_by", sa.String(255), nullable=True),
        sa.Column("disposal_reason", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "verification_status IN ('PENDING', 'VERIFIED', 'FAILED', 'ERROR')",
            name="ck_records_verification_status",
        ),
    )
    op.create_index("ix_records_record_number", "records", ["record_number"], unique=True)
    op.create_index("ix_records_archive_path", "records", ["archive_path"], unique=True)
    op.create_index("ix_records_hash", "records", ["hash"], unique=True)
    op.create_index("ix_records_category", "records", ["category"])
    op.create_index("ix_records_retain_until", "records", ["retain_until"])
    op.create_index("ix_records_legal_hold", "records", ["legal_hold"])
    op.create_index("ix_records_verification_status", "records", ["verification_status"])
    op.create_index(
        "ix_records_active",
        "records",
        ["id"],
        postgresql_where=sa.text("disposed_at IS NULL"),
    )

    # Append-only: no foreign key so audit entries outlive record rows.
    op.create_table(
        "record_hashes",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("record_id", sa.UUID(), nullable=False),
        sa.Column("computed_hash", sa.String(128), nullable=False),
        sa.Column("expected_hash", sa.String(128), nullable=False),
        sa.Column("matched", sa.Boolean(), nullable=False),
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("verified_by", sa.String(255), nullable=True),
        sa.Column("file_exists", sa.Boolean(), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=True),
        sa.Column("error", sa.Text(), nullable=True),
    )
    op.create_index("ix_record_hashes_record_id", "record_hashes", ["record_id"])
    op.create_index("ix_record_hashes_verified_at", "record_hashes", ["verified_at"])
    op.create_index("ix_record_hashes_matched", "record_hashes", ["matched"])

    op.create_table(
        "record_disposals",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("record_id", sa.UUID(), nullable=False),
        sa.Column("record_number", sa.String(50), nullable=False),
        sa.Column("filename", sa.Text(), nullable=False),
        sa.Column("disposed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("disposed_by", sa.String(255), nullable=False),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column("content_deleted", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_record_disposals_record_id", "record_disposals", ["record_id"])
    op.create_index("ix_record_disposals_disposed_at", "record_disposals", ["disposed_at"])


def downgrade() -> None:
    op.drop_table("record_disposals")
    op.drop_table("record_hashes")
    op.drop_table("records")
