import logging

connector_logger = logging.getLogger("aiocrud.connector")
transport_logger = logging.getLogger("aiocrud.transport")
