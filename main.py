"""
FastAPI应用主入口
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import employees
from api.middleware import RequestIDMiddleware, LoggingMiddleware
from application.services.employee_event_service import EmployeeEventService
from core.config import settings
from core.exceptions import register_exception_handlers
from core.logging_config import get_logger, configure_logging
from infrastructure.adapters.messaging_port import PublisherPortAdapter
from infrastructure.database import create_tables
from infrastructure.external.messaging.client import init_publisher


# 初始化日志：在入口处显式配置，避免模块导入时的副作用
configure_logging()
logger = get_logger(__name__)


def build_event_service() -> EmployeeEventService:
    """按配置装配事件通知器；关闭事件时不创建任何 Kafka 客户端"""
    if not settings.events.enabled:
        logger.info("employee_events_disabled", topic=settings.events.topic)
        return EmployeeEventService(None, topic=settings.events.topic, enabled=False)
    publisher = init_publisher(settings.kafka)
    return EmployeeEventService(
        PublisherPortAdapter(publisher),
        topic=settings.events.topic,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 不提供迁移工具，所有环境启动时均建表（已存在则跳过）
    await create_tables()
    logger.info("database_initialized", message="Database tables ensured")

    app.state.employee_events = build_event_service()
    logger.info("employee_events_initialized", topic=settings.events.topic)

    yield

    # 等待在途通知发送完成后关闭 Publisher
    await app.state.employee_events.aclose()
    logger.info("application_shutdown", message="Application shutdown")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    description="员工信息管理服务（REST + gRPC，操作事件发布到 Kafka）",
)

# 添加中间件（后添加的在外层，先执行）
# 日志中间件依赖 request_id 等上下文，必须位于 RequestIDMiddleware 内层
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestIDMiddleware)

# CORS 中间件（最外层）
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册全局异常处理器
register_exception_handlers(app)

# 注册路由
app.include_router(employees.router, prefix=settings.API_PREFIX)


# 健康检查
@app.get("/health", tags=["Health"])
async def health_check():
    """健康检查端点"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info"
    )
