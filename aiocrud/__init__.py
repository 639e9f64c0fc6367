__version__ = "0.1.0.dev0"

from . import hdrs
from .abc import AbstractTransport
from .connector import Connector, create_frontend_connector, response_data
from .connector_exceptions import (
    ConnectorConfigurationError,
    ConnectorError,
    OperationNotImplemented,
    ResponseError,
)
from .crud_to_http import HttpMethodMapping, crud_to_http
from .http_transport import HttpResponse, HttpTransport, create_backend_connector
from .middlewares import PartialConnector, connector_middleware
from .typedefs import CrudRequest, MiddlewareFactory, OperationHandler

__all__ = (
    "hdrs",
    # abc
    "AbstractTransport",
    # connector
    "Connector",
    "create_frontend_connector",
    "response_data",
    # connector_exceptions
    "ConnectorConfigurationError",
    "ConnectorError",
    "OperationNotImplemented",
    "ResponseError",
    # crud_to_http
    "HttpMethodMapping",
    "crud_to_http",
    # http_transport
    "HttpResponse",
    "HttpTransport",
    "create_backend_connector",
    # middlewares
    "PartialConnector",
    "connector_middleware",
    # typedefs
    "CrudRequest",
    "MiddlewareFactory",
    "OperationHandler",
)
