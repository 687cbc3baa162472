# xsd_editor/channel.py
"""
Editor-side request/response over the asynchronous message boundary.

Sending never blocks; the matching commandResult arrives later through
receive(). The envelope has no correlation id, so only one command may be
in flight at a time and a result always answers the pending command.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, List, Optional, Union

from xsd_editor.commands import AnyCommand, CommandResponse
from xsd_editor.errors import ExecutionError
from xsd_editor.messages import (
    BaseMessage,
    CommandResultMessage,
    ErrorMessage,
    MessageType,
    NodeClickedData,
    NodeClickedMessage,
    execute_command_message,
    parse_inbound_message,
)

logger = logging.getLogger(__name__)

SendFn = Callable[[dict], Union[None, Awaitable[None]]]
Listener = Callable[[BaseMessage], None]


class CommandChannel:
    def __init__(self, send: SendFn):
        self._send = send
        self._lock: Optional[asyncio.Lock] = None
        self._pending: Optional[asyncio.Future] = None
        self._listeners: Dict[MessageType, List[Listener]] = {}

    @property
    def busy(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def on(self, message_type: MessageType, listener: Listener) -> None:
        """Registers a listener for inbound messages that are not command results."""
        self._listeners.setdefault(MessageType(message_type), []).append(listener)

    async def execute(self, command: AnyCommand) -> CommandResponse:
        """
        Sends one executeCommand and waits for its result.
        An inbound error message while waiting raises ExecutionError.
        Timeouts are up to the caller (asyncio.wait_for).
        """
        # Created on first use so it binds to the running loop.
        if self._lock is None:
            self._lock = asyncio.Lock()
        async with self._lock:
            loop = asyncio.get_running_loop()
            self._pending = loop.create_future()
            try:
                await self._post(execute_command_message(command).to_wire())
                return await self._pending
            finally:
                self._pending = None

    def submit(self, command: AnyCommand, callback: Callable[[asyncio.Future], None]) -> asyncio.Task:
        """Continuation style: `callback` receives the finished task."""
        task = asyncio.ensure_future(self.execute(command))
        task.add_done_callback(callback)
        return task

    async def node_clicked(self, node_address: str) -> None:
        message = NodeClickedMessage(data=NodeClickedData(node_address=node_address))
        await self._post(message.to_wire())

    def receive(self, raw) -> None:
        """Routes one inbound message (dict, JSON text or decoded message)."""
        message = raw if isinstance(raw, BaseMessage) else parse_inbound_message(raw)

        if isinstance(message, CommandResultMessage):
            self._resolve(message)
        elif isinstance(message, ErrorMessage) and self.busy:
            data = message.data
            self._pending.set_exception(ExecutionError(data.message, code=data.code, stack=data.stack))
        else:
            for listener in self._listeners.get(MessageType(message.command), []):
                listener(message)

    def _resolve(self, message: CommandResultMessage) -> None:
        if not self.busy:
            logger.warning("Dropping commandResult with no command pending")
            return
        self._pending.set_result(message.data)

    async def _post(self, payload: dict) -> None:
        result = self._send(payload)
        if asyncio.iscoroutine(result) or isinstance(result, asyncio.Future):
            await result
