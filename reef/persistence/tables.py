"""SQLAlchemy table definitions for Reef accounts.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# PERSONS TABLE
# ============================================================================
persons_table = Table(
    "persons",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("slug", String(100), nullable=False),
    Column("name", String(255), nullable=False),
    Column("gitlab_id", BigInteger, nullable=True),  # Provider-side user id
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("slug", name="uq_persons_slug"),
)

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(100), nullable=False),
    Column("email", String(255), nullable=False),  # Stored lower-cased
    Column("password_hash", Text, nullable=False),
    Column(
        "person_id",
        UUID,
        ForeignKey("persons.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name="uq_accounts_username"),
    UniqueConstraint("email", name="uq_accounts_email"),
    UniqueConstraint("person_id", name="uq_accounts_person_id"),
)

# ============================================================================
# ACCOUNT TOKENS TABLE
# ============================================================================
account_tokens_table = Table(
    "account_tokens",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("token", Text, nullable=False),
    Column("kind", String(20), nullable=False),  # 'permanent', 'oauth'
    Column("generation", Integer, nullable=False, server_default="0"),
    Column("refresh_token", Text, nullable=True),
    Column("token_type", String(50), nullable=True),
    Column("scope", String(255), nullable=True),
    Column("issued_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("account_id", "kind", name="uq_account_tokens_account_kind"),
)

Index("idx_account_tokens_token", account_tokens_table.c.token)
