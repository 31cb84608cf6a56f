from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from registration.config import get_settings
from registration.database import StorageError
from registration.deps import templates


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.APP_TITLE)

    from registration.routes.pages import router as pages_router
    from registration.routes.register import router as register_router
    from registration.routes.users import router as users_router

    app.include_router(pages_router)
    app.include_router(register_router)
    app.include_router(users_router)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        return JSONResponse(
            {"success": False, "message": "Database error. Please try again later."},
            status_code=500,
        )

    templates.env.globals["app_title"] = settings.APP_TITLE

    return app


app = create_app()
