import json
import logging
from typing import Any, Type, TypeVar

import tornado.web
from pydantic import BaseModel, ValidationError

from campus_robot.errors import DeliveryError, InvalidRequest
from campus_robot.services.delivery_service import DeliveryService

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def to_jsonable(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True)
    if isinstance(payload, dict):
        return {key: to_jsonable(value) for key, value in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [to_jsonable(item) for item in payload]
    return payload


class BaseHandler(tornado.web.RequestHandler):
    """JSON request handler with DeliveryError -> status code mapping."""

    def initialize(self, service: DeliveryService):
        self.service = service

    def set_default_headers(self):
        # Open CORS for the browser console (lock down in production).
        self.set_header("Access-Control-Allow-Origin", "*")
        self.set_header("Access-Control-Allow-Headers", "Content-Type")
        self.set_header("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
        self.set_header("Content-Type", "application/json")

    def options(self, *args):
        self.set_status(204)
        self.finish()

    def parse_body(self, model: Type[ModelT]) -> ModelT:
        raw = self.request.body or b"{}"
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise InvalidRequest("request body must be JSON") from None
        if not isinstance(payload, dict):
            raise InvalidRequest("request body must be a JSON object")
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise InvalidRequest(f"invalid request body: {exc.errors()[0]['msg']}") from None

    def write_json(self, payload: Any, status: int = 200):
        self.set_status(status)
        self.finish(json.dumps(to_jsonable(payload)))

    def write_error(self, status_code: int, **kwargs):
        exc_info = kwargs.get("exc_info")
        error = exc_info[1] if exc_info else None
        if isinstance(error, DeliveryError):
            self.set_status(error.status_code)
            self.finish(json.dumps(error.to_dict()))
            return
        self.finish(json.dumps({"error": self._reason, "message": self._reason}))

    def log_exception(self, typ, value, tb):
        if isinstance(value, DeliveryError):
            logger.warning(
                "%s %s -> %d %s: %s",
                self.request.method,
                self.request.uri,
                value.status_code,
                value.name,
                value.message,
            )
            return
        super().log_exception(typ, value, tb)
