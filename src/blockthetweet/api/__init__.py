"""
HTTP layer.

- routes.py: POST / (classify) and GET / (metadata)
- middleware.py: request tracing and CORS
- error_handlers.py: error taxonomy -> HTTP status mapping
- dependencies.py: singleton providers for pipeline components
- models.py: request/response schemas
"""
