from fastapi import APIRouter, Depends, HTTPException, Request

from todolists.dependencies import get_auth_service
from todolists.schemas.user import SignedIn, SignIn
from todolists.services.auth_service import AuthService

router = APIRouter()


@router.post("/signin", response_model=SignedIn)
async def signin(body: SignIn, request: Request, service: AuthService = Depends(get_auth_service)):
    if not await service.authenticate(body.username, body.password):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["username"] = body.username
    request.session["signed_in"] = True
    return SignedIn(username=body.username)


@router.post("/signout", status_code=204)
async def signout(request: Request):
    request.session.pop("username", None)
    request.session.pop("signed_in", None)
