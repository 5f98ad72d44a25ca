import asyncio
import math
import os
from typing import Callable, Optional

from campus_robot.errors import InvalidCommand, InvalidMode
from campus_robot.models import Activity, Command, Mode, RobotState

TURN_DEGREES = 15
STEP_UNITS = 1.0


class CommandExecutor:
    """
    Owns the robot's RobotState and applies atomic commands to it.

    Every mutation happens while holding one asyncio.Lock. A motion command
    keeps the lock through its settle latency, so a second driver queues behind
    it instead of reading or writing a half-updated pose.
    """

    def __init__(
        self,
        state: Optional[RobotState] = None,
        settle_ms: Optional[float] = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.state = state or RobotState()
        self.settle_ms = settle_ms if settle_ms is not None else float(os.getenv("ROBOT_SETTLE_MS", "150"))
        self.on_change = on_change
        self._lock = asyncio.Lock()
        # Activity a command settles back to: executing-path while a run owns the robot.
        self._resting = Activity.READY

    @staticmethod
    def parse_command(command) -> Command:
        if isinstance(command, Command):
            return command
        try:
            return Command(str(command or "").strip().upper())
        except ValueError:
            raise InvalidCommand("cmd must be LEFT|RIGHT|FORWARD|BACK") from None

    @staticmethod
    def parse_mode(mode) -> Mode:
        if isinstance(mode, Mode):
            return mode
        try:
            return Mode(mode)
        except ValueError:
            raise InvalidMode("mode must be manual|auto") from None

    def snapshot(self) -> RobotState:
        return self.state.model_copy()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    async def execute(self, command) -> RobotState:
        cmd = self.parse_command(command)
        async with self._lock:
            self.state.activity = Activity.MOVING
            self._notify()
            try:
                self._apply(cmd)
                if self.settle_ms > 0:
                    await asyncio.sleep(self.settle_ms / 1000.0)
            finally:
                self.state.activity = self._resting
                self._notify()
            return self.snapshot()

    def _apply(self, cmd: Command):
        if cmd == Command.LEFT:
            self.state.heading = (self.state.heading - TURN_DEGREES) % 360
        elif cmd == Command.RIGHT:
            self.state.heading = (self.state.heading + TURN_DEGREES) % 360
        else:
            sign = 1.0 if cmd == Command.FORWARD else -1.0
            rad = math.radians(self.state.heading)
            self.state.x += sign * math.cos(rad) * STEP_UNITS
            self.state.y += sign * math.sin(rad) * STEP_UNITS

    async def set_mode(self, mode) -> RobotState:
        new_mode = self.parse_mode(mode)
        async with self._lock:
            self.state.mode = new_mode
            self._notify()
            return self.snapshot()

    async def reset(self, x: float = 0.0, y: float = 0.0, heading: int = 0) -> RobotState:
        async with self._lock:
            self.state.x = float(x)
            self.state.y = float(y)
            self.state.heading = int(heading) % 360
            self.state.activity = Activity.READY
            self._notify()
            return self.snapshot()

    async def enter_path(self) -> RobotState:
        async with self._lock:
            self._resting = Activity.EXECUTING_PATH
            self.state.mode = Mode.AUTO
            self.state.activity = Activity.EXECUTING_PATH
            self._notify()
            return self.snapshot()

    async def leave_path(self, activity: Activity = Activity.READY) -> RobotState:
        async with self._lock:
            self._resting = Activity.READY
            self.state.mode = Mode.MANUAL
            self.state.activity = activity
            self._notify()
            return self.snapshot()

    def _notify(self):
        if self.on_change is not None:
            self.on_change()
