
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import declarative_base
from wikilens.core.settings import settings

engine = create_async_engine(settings.database_url, echo=False)
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()

async def get_db():
    async with async_session_maker() as session:
        yield session

# sqlite only autoincrements INTEGER PRIMARY KEY
PrimaryKey = BigInteger().with_variant(Integer, "sqlite")
