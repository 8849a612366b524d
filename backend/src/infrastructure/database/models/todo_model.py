"""Todo SQLAlchemy model."""

from datetime import datetime
from sqlalchemy import String, DateTime, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class TodoModel(Base):
    """SQLAlchemy model for todos."""
    
    __tablename__ = "todos"
    
    # Primary key (canonical UUID string)
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    
    # Owning user
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    # Empty body is stored as NULL
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    
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
        return f"<TodoModel(id={self.id}, user_id={self.user_id})>"
