"""SQLAlchemy table definitions for the User API.

These definitions match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from userapi.domain.model.user import NAME_MAX_LENGTH

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("first_name", String(NAME_MAX_LENGTH), nullable=False),
    Column("last_name", String(NAME_MAX_LENGTH), nullable=True),
    Column("email", String(320), nullable=False),  # Stored lower-cased
    Column("password_hash", Text, nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("email", name="uq_users_email"),
    CheckConstraint("email = lower(email)", name="ck_users_email_lowercase"),
)
