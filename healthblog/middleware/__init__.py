from healthblog.middleware.middleware import REQUEST_ID_HEADER, LoggingMiddleware, lifespan

__all__ = ["REQUEST_ID_HEADER", "LoggingMiddleware", "lifespan"]
