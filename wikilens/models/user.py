
from sqlalchemy import Column, String, BigInteger, DateTime
from sqlalchemy.sql import func
from wikilens.core.database import Base, PrimaryKey

class User(Base):
    __tablename__ = "users"

    id = Column(PrimaryKey, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    phone_number = Column(String(32), nullable=True)
    gender = Column(String(16), nullable=True)
    avatar = Column(String(500), nullable=True)
    password_hash = Column(String(255), nullable=False)
    email_verified_at = Column(DateTime(timezone=True), nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    created_at = Column(DateTime(timezone=True), server_default=func.now())
