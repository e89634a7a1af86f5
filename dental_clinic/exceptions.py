from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


def create_error_response(error_message) -> dict:
    """Standard error envelope shared by handlers and middleware"""
    return {
        "success": False,
        "data": None,
        "error": error_message,
    }


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    # Scheduling conflicts (409) carry a user-facing detail that is passed through unchanged
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(p) for p in err.get("loc", ()) if p != "body") for err in exc.errors()]
    return JSONResponse(
        status_code=422,
        content=create_error_response(f"Invalid request fields: {', '.join(f for f in fields if f)}"),
    )
