"""SQLAlchemy table definitions for Playtrack.

These definitions match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (local and Steam accounts)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False),
    Column("email", String(255), nullable=True),  # Local accounts only
    Column("birthday", Date, nullable=True),
    Column("steam_id", String(32), nullable=True),  # Steam accounts only
    Column("password_hash", String(255), nullable=False),
    Column("profile_url", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("game_now_playing", String(255), nullable=True),
    Column("role_id", Integer, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_users_email"),
    UniqueConstraint("steam_id", name="uq_users_steam_id"),
)

# ============================================================================
# ACTIVITY RECORDS TABLE (recently played games, one row per user and app)
# ============================================================================
activity_records_table = Table(
    "activity_records",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("app_id", Integer, nullable=False),
    Column("name", String(255), nullable=False),
    Column("playtime_2weeks", Integer, nullable=True),
    Column("playtime_forever", Integer, nullable=False),
    Column("img_icon_url", String(255), nullable=True),
    Column("img_logo_url", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "app_id", name="pk_activity_records"),
)

# ============================================================================
# SESSIONS TABLE (server-side session markers)
# ============================================================================
sessions_table = Table(
    "sessions",
    metadata,
    Column("id", String(64), primary_key=True),
    # Plain column: deleting a user leaves its sessions in place
    Column("user_id", UUID, nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_sessions_user_id", sessions_table.c.user_id)
Index("idx_sessions_expires_at", sessions_table.c.expires_at)
