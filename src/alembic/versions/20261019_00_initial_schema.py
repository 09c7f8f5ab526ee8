"""initial schema: documents, summaries and free-trial usage logs

Revision ID: 20261019_00
Revises:
Create Date: 2026-10-19

"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op


# revision identifiers, used by Alembic.
revision = "20261019_00"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # documents.summary_id and summaries.document_id reference each other, so
    # the documents -> summaries key is added once both tables exist.
    op.create_table(
        "documents",
        sa.Column("id", sa.UUID(as_uuid=True), primary_key=True),
        sa.Column("file_name", sa.String(length=255), nullable=False),
        sa.Column(
            "file_type",
            sa.String(length=150),
            nullable=False,
            comment="Declared media type of the upload",
        ),
        sa.Column("file_path", sa.Text(), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("processing_error", sa.Text(), nullable=True),
        sa.Column("summary_id", sa.UUID(as_uuid=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )

    op.create_table(
        "summaries",
        sa.Column("id", sa.UUID(as_uuid=True), primary_key=True),
        sa.Column("document_id", sa.UUID(as_uuid=True), nullable=False),
        sa.Column("document_overview", sa.Text(), nullable=False),
        sa.Column("key_parties", sa.JSON(), nullable=False),
        sa.Column("important_clauses", sa.JSON(), nullable=False),
        sa.Column(
            "obligations",
            sa.JSON(),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("critical_dates", sa.JSON(), nullable=False),
        sa.Column("potential_concerns", sa.JSON(), nullable=False),
        sa.Column("plain_language_summary", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.ForeignKeyConstraint(
            ["document_id"],
            ["documents.id"],
            name="fk_summaries_document_id",
            ondelete="CASCADE",
        ),
    )
    op.create_index("ix_summaries_document_id", "summaries", ["document_id"])

    op.create_foreign_key(
        "fk_documents_summary_id",
        "documents",
        "summaries",
        ["summary_id"],
        ["id"],
        ondelete="SET NULL",
    )

    op.create_table(
        "free_trial_logs",
        sa.Column("id", sa.UUID(as_uuid=True), primary_key=True),
        sa.Column("ip_address", sa.String(length=64), nullable=False),
        sa.Column("document_name", sa.String(length=255), nullable=False),
        sa.Column("document_size", sa.BigInteger(), nullable=False),
        sa.Column(
            "document_type",
            sa.String(length=16),
            nullable=False,
            comment="File extension without the dot",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "ix_free_trial_logs_ip_address", "free_trial_logs", ["ip_address"]
    )


def downgrade() -> None:
    op.drop_index("ix_free_trial_logs_ip_address", table_name="free_trial_logs")
    op.drop_table("free_trial_logs")
    op.drop_constraint("fk_documents_summary_id", "documents", type_="foreignkey")
    op.drop_index("ix_summaries_document_id", table_name="summaries")
    op.drop_table("summaries")
    op.drop_table("documents")
