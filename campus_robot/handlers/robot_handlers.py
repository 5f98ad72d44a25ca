from campus_robot.handlers.base_handler import BaseHandler
from campus_robot.models import CommandRequest, ModeRequest, ResetRequest


class CommandHandler(BaseHandler):
    """Transmitter endpoint: one LEFT/RIGHT/FORWARD/BACK per request."""

    async def post(self):
        body = self.parse_body(CommandRequest)
        robot = await self.service.send_command(body.cmd)
        self.write_json(robot)


class ModeHandler(BaseHandler):
    async def post(self):
        body = self.parse_body(ModeRequest)
        robot = await self.service.set_mode(body.mode)
        self.write_json(robot)


class RobotHandler(BaseHandler):
    def get(self):
        self.write_json(self.service.robot())


class RobotResetHandler(BaseHandler):
    async def post(self):
        body = self.parse_body(ResetRequest)
        robot = await self.service.reset_robot(body.x, body.y, body.heading)
        self.write_json(robot)
