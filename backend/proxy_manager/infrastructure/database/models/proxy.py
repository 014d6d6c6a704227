"""SQLAlchemy ORM models for proxies and their usage sessions."""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from proxy_manager.infrastructure.database.base import Base


class ProxyModel(Base):
    """ORM model: maps to the 'proxies' table."""

    __tablename__ = "proxies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    device_name: Mapped[str] = mapped_column(Text, nullable=False)
    internal_address: Mapped[str] = mapped_column(String(45), nullable=False)
    public_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    port: Mapped[int] = mapped_column(Integer, nullable=False)
    username: Mapped[str] = mapped_column(Text, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default="offline", nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ProxyModel(id={self.id}, device_name='{self.device_name}', status='{self.status}')>"


class ProxySessionModel(Base):
    """ORM model: maps to the 'proxy_sessions' table."""

    __tablename__ = "proxy_sessions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    proxy_id: Mapped[int] = mapped_column(
        ForeignKey("proxies.id"), nullable=False, index=True,
    )
    client_address: Mapped[str] = mapped_column(String(45), nullable=False)
    login_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    logout_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    bytes_transferred: Mapped[int] = mapped_column(BigInteger, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_proxy_sessions_recent", "created_at", "id"),
    )

    def __repr__(self) -> str:
        return f"<ProxySessionModel(id={self.id}, proxy_id={self.proxy_id}, client='{self.client_address}')>"
