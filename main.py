from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.exceptions import AppError
from app.core.logging import configure_logging
from app.endpoints import account, accommodation, notification, trip_request
from app.middleware.exceptions import (
    app_exception_handler,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from app.middleware.logging import RequestLoggingMiddleware

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(AppError, app_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(account.router, prefix="/account", tags=["Account"])
app.include_router(notification.router, prefix="/notification", tags=["Notifications"])
app.include_router(trip_request.router, prefix="/requests", tags=["Requests"])
app.include_router(accommodation.router, prefix="/accommodations", tags=["Accommodations"])

@app.get("/health", tags=["Health"])
async def health():
    return {"status": "success", "message": "ok"}

@app.on_event("startup")
async def startup_event():
    configure_logging()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
