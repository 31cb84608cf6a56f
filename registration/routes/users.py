from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from registration.database import get_db, init_storage
from registration.deps import templates
from registration.models.user import User

router = APIRouter(tags=["users"])


@router.get("/users", response_class=HTMLResponse)
async def list_users(request: Request, db: Session = Depends(get_db)):
    """Development-only listing of every registered user. Not access controlled."""
    init_storage(db.get_bind())
    users = (
        db.query(User)
        .order_by(User.created_at.desc(), User.id.desc())
        .all()
    )
    return templates.TemplateResponse(
        request,
        "users.html",
        {"users": users, "total": len(users)},
    )
