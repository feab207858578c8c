from sqlalchemy import Column, String, BigInteger, Text, DateTime
from sqlalchemy.sql import func
from wikilens.core.database import Base, PrimaryKey

class Post(Base):
    __tablename__ = "posts"

    id = Column(PrimaryKey, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    body = Column(Text, nullable=True)
    img_src = Column(String(500), nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    created_at = Column(DateTime(timezone=True), server_default=func.now())
