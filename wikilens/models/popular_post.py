
from sqlalchemy import Column, String, BigInteger, Text, DateTime
from sqlalchemy.sql import func
from wikilens.core.database import Base, PrimaryKey

class PopularPost(Base):
    __tablename__ = "popular_posts"

    id = Column(PrimaryKey, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    text = Column(Text, nullable=True)
    img_src = Column(String(500), nullable=True)
    views = Column(BigInteger, nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    created_at = Column(DateTime(timezone=True), server_default=func.now())
