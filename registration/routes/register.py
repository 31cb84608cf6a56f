from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from registration.database import get_db
from registration.schemas.registration import RegistrationForm
from registration.services.registration import register_user

router = APIRouter(tags=["registration"])


# Every method is routed here so that non-POST requests get the same JSON
# shape as other failures instead of the framework's default 405.
@router.api_route(
    "/register",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
)
async def register(request: Request, db: Session = Depends(get_db)):
    if request.method == "POST":
        form = RegistrationForm.from_mapping(await request.form())
    else:
        form = RegistrationForm()
    result = register_user(request.method, form, db)
    return JSONResponse(result.to_payload(), status_code=result.status_code)
