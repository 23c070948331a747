# bloglist/api/login.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from bloglist.core.auth import authenticate
from bloglist.core.schemas import LoginRequest, LoginResponse
from bloglist.database import get_db


router = APIRouter(prefix="/api/login", tags=["login"])


@router.post("", response_model=LoginResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    return authenticate(db, body.username, body.password)
