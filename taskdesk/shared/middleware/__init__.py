from .request_logger import REQUEST_ID_HEADER, configure_request_logging

__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
