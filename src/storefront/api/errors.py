"""HTTP mapping for storefront errors.

Protean's handlers cover ``ValidationError`` (400) and
``ObjectNotFoundError`` (404). Order submission failures get a body that
carries their stable ``code``; admin authentication failures become 401.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.shared.errors import AuthError, OrderSubmissionError


async def _order_submission_error(request: Request, exc: OrderSubmissionError):
    return JSONResponse(status_code=400, content={"error": exc.code, "messages": exc.messages})


async def _auth_error(request: Request, exc: AuthError):
    return JSONResponse(
        status_code=401,
        content={"error": exc.code, "message": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(OrderSubmissionError, _order_submission_error)
    app.add_exception_handler(AuthError, _auth_error)
