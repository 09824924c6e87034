"""
员工事件通知服务 - 将 CRUD 操作以领域事件形式异步发布到消息主题

发布是“尽力而为”的：发送在后台任务中执行，任何失败只记录日志，
不会影响调用方看到的结果。
"""
from __future__ import annotations

import asyncio
from typing import Optional, Sequence, Set

from core.logging_config import get_logger
from domain.employee.entity import Employee
from domain.employee.events import EmployeeEvent
from application.ports.messaging import EVENT_OPERATION_HEADER, MessagePublisherPort


logger = get_logger(__name__)

DEFAULT_TOPIC = "employee-events"


class EmployeeEventService:
    """员工事件通知器"""

    def __init__(
        self,
        port: Optional[MessagePublisherPort],
        topic: str = DEFAULT_TOPIC,
        *,
        enabled: bool = True,
    ) -> None:
        self._port = port
        self._topic = topic
        self._enabled = enabled and port is not None
        self._pending: Set[asyncio.Task] = set()

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def pending(self) -> int:
        """仍在发送中的通知数量"""
        return len(self._pending)

    def publish_create_event(self, employee: Employee) -> None:
        self.publish(EmployeeEvent.created(employee))

    def publish_read_event(self, employee: Employee) -> None:
        self.publish(EmployeeEvent.retrieved(employee))

    def publish_read_all_event(self, employees: Sequence[Employee]) -> None:
        self.publish(EmployeeEvent.retrieved_all(len(employees)))

    def publish_update_event(self, employee: Employee) -> None:
        self.publish(EmployeeEvent.updated(employee))

    def publish_delete_event(self, employee_id: int) -> None:
        self.publish(EmployeeEvent.deleted(employee_id))

    def publish(self, event: EmployeeEvent) -> None:
        """调度一次发送后立即返回；绝不向调用方抛出异常"""
        if not self._enabled:
            logger.debug(
                "employee_event_dropped",
                operation=event.operation.value,
                key=event.routing_key,
                reason="disabled",
            )
            return
        try:
            task = asyncio.get_running_loop().create_task(self._send(event))
        except Exception as exc:
            logger.error(
                "employee_event_publish_failed",
                topic=self._topic,
                operation=event.operation.value,
                key=event.routing_key,
                error=str(exc),
            )
            return
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _send(self, event: EmployeeEvent) -> None:
        key = event.routing_key
        try:
            await self._port.send(  # type: ignore[union-attr]
                self._topic,
                key,
                event.to_payload(),
                headers={EVENT_OPERATION_HEADER: event.operation.value},
            )
        except Exception as exc:
            logger.error(
                "employee_event_publish_failed",
                topic=self._topic,
                operation=event.operation.value,
                key=key,
                error=str(exc),
            )
            return
        logger.info(
            "employee_event_published",
            topic=self._topic,
            operation=event.operation.value,
            key=key,
        )

    async def drain(self) -> None:
        """等待所有在途通知完成（关闭前、测试中使用）"""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        await self.drain()
        if self._port is not None:
            try:
                await self._port.aclose()
            except Exception as exc:
                logger.warning("employee_event_port_close_failed", error=str(exc))
