"""
数据库引擎与会话工厂

DATABASE__URL 可写同步驱动名（postgresql://、mysql://、sqlite://），
这里统一换成对应的异步驱动。
"""
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.config import settings
from infrastructure.models import Base


_ASYNC_DRIVERS = {
    "postgresql": "postgresql+asyncpg",
    "postgres": "postgresql+asyncpg",
    "mysql": "mysql+aiomysql",
    "sqlite": "sqlite+aiosqlite",
}


def _build_async_url(database_url: str) -> str:
    url = make_url(database_url)
    if "+" in url.drivername:
        return database_url
    if url.drivername not in _ASYNC_DRIVERS:
        raise ValueError(f"不支持的数据库驱动: {url.drivername}. 请使用 async 驱动或更新 DATABASE__URL")
    return url.set(drivername=_ASYNC_DRIVERS[url.drivername]).render_as_string(hide_password=False)


def create_engine_from_url(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """创建异步引擎；SQLite 内存库使用单连接池，保证所有会话看到同一份数据"""
    async_url = _build_async_url(database_url)
    url = make_url(async_url)
    options: dict = {"echo": echo}
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        options.update(poolclass=StaticPool, connect_args={"check_same_thread": False})
    return create_async_engine(async_url, **options)


engine = create_engine_from_url(settings.database.url, echo=settings.DEBUG)

AsyncSessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)


async def create_tables(bind: AsyncEngine = engine) -> None:
    """创建 employees 表（已存在则跳过）；服务启动时调用"""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
