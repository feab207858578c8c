
import logging
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from pathlib import Path
from contextlib import asynccontextmanager
from starlette.middleware.sessions import SessionMiddleware
from wikilens.core.settings import settings
from wikilens.core.logging import setup_logging
from wikilens.api.endpoints import assist as assist_ep
from wikilens.api.endpoints import auth as auth_ep
from wikilens.api.endpoints import health as health_ep
from wikilens.api.endpoints import profile as profile_ep
from wikilens.api.endpoints import records as records_ep
from wikilens.api.endpoints import search as search_ep

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    from wikilens.core.database import engine, Base
    from wikilens.core.redis import close_redis
    import wikilens.models  # noqa: F401  register tables

    logger.info("Creating database tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created.")

    yield

    await close_redis()
    await engine.dispose()

app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(SessionMiddleware, secret_key=settings.session_secret, same_site="lax")

app.include_router(health_ep.router)
app.include_router(search_ep.router)
app.include_router(search_ep.page_router)
app.include_router(records_ep.router)
app.include_router(assist_ep.router)
app.include_router(auth_ep.router)
app.include_router(profile_ep.router)

storage_path = Path(settings.storage_dir)
storage_path.mkdir(parents=True, exist_ok=True)
app.mount("/storage", StaticFiles(directory=str(storage_path)), name="storage")

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.app_port)
