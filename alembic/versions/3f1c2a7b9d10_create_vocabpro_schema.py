"""create vocabpro schema

Revision ID: 3f1c2a7b9d10
Revises:
Create Date: 2026-10-17 00:00:00.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a7b9d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("createdAt", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updatedAt", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    tables = set(sa.inspect(bind).get_table_names())

    if "users" not in tables:
        op.create_table(
            "users",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("name", sa.Unicode(length=255), nullable=True),
            sa.Column("passwordHash", sa.String(length=255), nullable=True),
            sa.Column("role", sa.String(length=50), server_default="user", nullable=False),
            sa.Column("settings", sa.UnicodeText(), nullable=True),
            sa.Column("googleId", sa.String(length=255), nullable=True),
            sa.Column("emailVerified", sa.Boolean(), server_default="0", nullable=False),
            sa.PrimaryKeyConstraint("id", name="PK_users"),
            sa.UniqueConstraint("email", name="UQ_users_email"),
        )
        op.create_index("IX_users_googleId", "users", ["googleId"], unique=False)

    if "sessions" not in tables:
        op.create_table(
            "sessions",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("sid", sa.String(length=255), nullable=False),
            sa.Column("userId", sa.Uuid(), nullable=False),
            sa.Column("expiresAt", sa.DateTime(), nullable=False),
            sa.Column("date", sa.UnicodeText(), nullable=True),
            sa.PrimaryKeyConstraint("id", name="PK_sessions"),
            sa.UniqueConstraint("sid", name="UQ_sessions_sid"),
            sa.ForeignKeyConstraint(
                ["userId"], ["users.id"], name="FK_sessions_users_userId", ondelete="CASCADE", onupdate="CASCADE"
            ),
        )

    if "vocabularies" not in tables:
        op.create_table(
            "vocabularies",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("userId", sa.Uuid(), nullable=False),
            sa.Column("word", sa.String(length=255), nullable=False),
            sa.Column("pronunciation", sa.String(length=255), nullable=True),
            sa.Column("definition", sa.UnicodeText(), nullable=True),
            sa.Column("example", sa.UnicodeText(), nullable=True),
            sa.Column("partOfSpeech", sa.String(length=255), nullable=True),
            sa.Column("difficulty", sa.Integer(), server_default="1", nullable=False),
            sa.Column("imageUrl", sa.String(length=255), nullable=True),
            sa.Column("audioUrl", sa.String(length=255), nullable=True),
            *_timestamps(),
            sa.PrimaryKeyConstraint("id", name="PK_vocabularies"),
            sa.ForeignKeyConstraint(
                ["userId"], ["users.id"], name="FK_vocabularies_users_userId", ondelete="CASCADE", onupdate="CASCADE"
            ),
        )
        op.create_index("IX_vocabularies_userId", "vocabularies", ["userId"], unique=False)
        op.create_index("IX_vocabularies_word", "vocabularies", ["word"], unique=False)

    if "tags" not in tables:
        op.create_table(
            "tags",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("userId", sa.Uuid(), nullable=False),
            sa.Column("name", sa.Unicode(length=255), nullable=False),
            sa.Column("color", sa.String(length=50), nullable=True),
            *_timestamps(),
            sa.PrimaryKeyConstraint("id", name="PK_tags"),
            sa.UniqueConstraint("userId", "name", name="UQ_tags_userId_name"),
            sa.ForeignKeyConstraint(
                ["userId"], ["users.id"], name="FK_tags_users_userId", ondelete="CASCADE", onupdate="CASCADE"
            ),
        )
        op.create_index("IX_tags_userId", "tags", ["userId"], unique=False)

    if "vocabulariesTags" not in tables:
        op.create_table(
            "vocabulariesTags",
            sa.Column("vocabularyId", sa.Uuid(), nullable=False),
            sa.Column("tagId", sa.Uuid(), nullable=False),
            sa.PrimaryKeyConstraint("vocabularyId", "tagId", name="PK_vocabulariesTags"),
            sa.ForeignKeyConstraint(
                ["vocabularyId"], ["vocabularies.id"], name="FK_vocabulariesTags_vocabularies_vocabularyId"
            ),
            sa.ForeignKeyConstraint(
                ["tagId"], ["tags.id"], name="FK_vocabulariesTags_tags_tagId", ondelete="CASCADE", onupdate="CASCADE"
            ),
        )

    if "reviews" not in tables:
        op.create_table(
            "reviews",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("userId", sa.Uuid(), nullable=False),
            sa.Column("vocabularyId", sa.Uuid(), nullable=False),
            sa.Column("easeFactor", sa.Float(), server_default="2.5", nullable=True),
            sa.Column("interval", sa.Integer(), server_default="0", nullable=False),
            sa.Column("repetitions", sa.Integer(), server_default="0", nullable=False),
            sa.Column("nextReview", sa.DateTime(), nullable=False),
            sa.Column("lastReviewed", sa.DateTime(), nullable=True),
            sa.Column("quality", sa.Integer(), nullable=True),
            sa.Column("createdAt", sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.PrimaryKeyConstraint("id", name="PK_reviews"),
            sa.UniqueConstraint("userId", "vocabularyId", name="UQ_reviews_userId_vocabularyId"),
            sa.ForeignKeyConstraint(["userId"], ["users.id"], name="FK_reviews_users_userId"),
            sa.ForeignKeyConstraint(
                ["vocabularyId"], ["vocabularies.id"], name="FK_reviews_vocabularies", ondelete="CASCADE"
            ),
        )
        op.create_index("IX_reviews_userId", "reviews", ["userId"], unique=False)
        op.create_index("IX_reviews_nextReview", "reviews", ["nextReview"], unique=False)

    if "apiUsage" not in tables:
        op.create_table(
            "apiUsage",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("endpoint", sa.String(length=255), nullable=False),
            sa.Column("date", sa.DateTime(), nullable=False),
            sa.Column("count", sa.Integer(), server_default="0", nullable=False),
            sa.Column("createdAt", sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.PrimaryKeyConstraint("id", name="PK_apiUsage"),
            sa.UniqueConstraint("endpoint", "date", name="UQ_apiUsage_endpoint_date"),
        )
        op.create_index("IX_apiUsage_endpoint", "apiUsage", ["endpoint"], unique=False)
        op.create_index("IX_apiUsage_date", "apiUsage", ["date"], unique=False)


def downgrade() -> None:
    op.drop_table("apiUsage")
    op.drop_table("reviews")
    op.drop_table("vocabulariesTags")
    op.drop_table("tags")
    op.drop_table("vocabularies")
    op.drop_table("sessions")
    op.drop_index("IX_users_googleId", table_name="users")
    op.drop_table("users")
