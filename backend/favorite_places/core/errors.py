class PlacesError(Exception):
    """Base class for favorite places failures."""


class DatasetError(PlacesError):
    """The bundled places dataset is missing or unreadable. Fatal at startup."""


class ServiceStateError(PlacesError):
    """The places server did not answer the way a healthy instance should."""


class ForeignServiceError(ServiceStateError):
    """Something answered on the configured port, but it is not this service."""

    def __init__(self, port: int, body: str):
        self.port = port
        self.body = body
        super().__init__(f"Another server is running on {port}")
