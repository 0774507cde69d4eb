import httpx
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.local_account_service import LocalAccountService
from src.adapter.services.supabase_account_service import SupabaseAccountService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ServerError

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def init_db():
    """Create the local account and profile tables if missing"""
    # Register table models on SQLModel.metadata
    import src.domain.entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_account_service():
    """
    Dependency providing the configured Account & Profile Service.

    Raises:
        ServerError: ACCOUNT_BACKEND is unknown or Supabase is not configured
    """
    backend = ApplicationConfig.ACCOUNT_BACKEND

    if backend == "local":
        async with AsyncSessionLocal() as session:
            yield LocalAccountService(SqlAlchemyUnitOfWork(session))
        return

    if backend == "supabase":
        if not ApplicationConfig.SUPABASE_URL or not ApplicationConfig.SUPABASE_ANON_KEY:
            raise ServerError(
                Error("BACKEND_NOT_CONFIGURED", "SUPABASE_URL and SUPABASE_ANON_KEY are required")
            )
        async with httpx.AsyncClient(
            timeout=ApplicationConfig.BACKEND_TIMEOUT_SECONDS
        ) as client:
            yield SupabaseAccountService(
                client, ApplicationConfig.SUPABASE_URL, ApplicationConfig.SUPABASE_ANON_KEY
            )
        return

    raise ServerError(
        Error("BACKEND_NOT_CONFIGURED", f"Unknown ACCOUNT_BACKEND: {backend}")
    )
