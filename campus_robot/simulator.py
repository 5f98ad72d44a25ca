"""
Scripted driver that exercises the manual control endpoint.

Drives a square: for each side one RIGHT turn followed by a run of FORWARD
commands, pausing between moves like an operator holding an arrow key.
"""

import asyncio
import json
import logging
import os
from typing import Any, Dict, Optional

from tornado.httpclient import AsyncHTTPClient

from campus_robot.main import setup_logger

logger = logging.getLogger(__name__)


class RobotSimulator:
    def __init__(self, backend_url: Optional[str] = None, client: Optional[AsyncHTTPClient] = None):
        self.backend_url = (backend_url or os.getenv("BACKEND_URL", "http://localhost:8000")).rstrip("/")
        self.client = client or AsyncHTTPClient()

    async def send(self, cmd: str) -> Dict[str, Any]:
        response = await self.client.fetch(
            f"{self.backend_url}/tx",
            method="POST",
            headers={"Content-Type": "application/json"},
            body=json.dumps({"cmd": cmd}),
        )
        return json.loads(response.body)

    async def forward(self):
        return await self.send("FORWARD")

    async def back(self):
        return await self.send("BACK")

    async def left(self):
        return await self.send("LEFT")

    async def right(self):
        return await self.send("RIGHT")

    async def drive_square(self, sides: int = 4, side_length: int = 10, pause_s: float = 0.2) -> Dict[str, Any]:
        robot: Dict[str, Any] = {}
        for side in range(sides):
            robot = await self.right()
            for _ in range(side_length):
                robot = await self.forward()
                if pause_s > 0:
                    await asyncio.sleep(pause_s)
            logger.info(
                "side %d/%d done at (%.1f, %.1f) heading %s",
                side + 1, sides, robot["x"], robot["y"], robot["heading"],
            )
        return robot


async def run() -> None:
    simulator = RobotSimulator()
    logger.info("simulator: driving a square pattern against %s", simulator.backend_url)
    await simulator.drive_square()
    logger.info("done")


def main() -> None:
    setup_logger("campus_robot")
    asyncio.run(run())


if __name__ == "__main__":
    main()
