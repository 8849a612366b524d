"""User SQLAlchemy model."""

from datetime import datetime
from sqlalchemy import DateTime, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class UserModel(Base):
    """SQLAlchemy model for users."""
    
    __tablename__ = "users"
    
    # Primary key (canonical UUID string)
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    
    # Uniqueness is enforced case-insensitively by uq_users_email_lower
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<UserModel(id={self.id})>"


Index("uq_users_email_lower", func.lower(UserModel.email), unique=True)
