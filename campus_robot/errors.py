class DeliveryError(Exception):
    """Request-local failure surfaced to the caller with an HTTP status."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {"error": self.name, "message": self.message}


class InvalidRequest(DeliveryError):
    pass


class InvalidCommand(DeliveryError):
    pass


class InvalidMode(DeliveryError):
    pass


class MissingEndpoint(DeliveryError):
    pass


class InvalidOrderState(DeliveryError):
    pass


class OrderNotFound(DeliveryError):
    status_code = 404


class RobotBusy(DeliveryError):
    status_code = 409


class PlanUnresolved(DeliveryError):
    """Soft failure: an unknown location name. Callers fall back to an empty plan."""
