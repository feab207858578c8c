
from sqlalchemy import Column, String, BigInteger, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from wikilens.core.database import Base, PrimaryKey

class History(Base):
    __tablename__ = "histories"

    id = Column(PrimaryKey, primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    search_text = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint('user_id', 'search_text', name='uq_history_user_search'),
    )
