"""Email and password signup/signin endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from database import get_db
from schemas.api.auth import SigninRequest, SigninResponse, SignupRequest
from services.auth import login_user, register_user
from services.errors import ServiceError
from web.deps import raise_http

router = APIRouter(tags=["Auth"])


@router.post(
    "/signup",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Create an account",
)
def signup(payload: SignupRequest, db: Session = Depends(get_db)) -> Response:
    try:
        register_user(db, payload.model_dump())
    except ServiceError as exc:
        raise_http(exc)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/signin", response_model=SigninResponse, summary="Exchange credentials for a bearer token")
def signin(payload: SigninRequest, db: Session = Depends(get_db)) -> SigninResponse:
    try:
        result = login_user(db, payload.model_dump())
    except ServiceError as exc:
        raise_http(exc)
    return SigninResponse(token=result.token)


__all__ = ["router"]
