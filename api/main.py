from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from jose import JWTError, jwt
from pydantic import BaseModel, ConfigDict, Field

from clubs.credentials import AuthResult
from clubs.models import Club, Member, Role
from clubs.service import ClubService
from config import clubs_data_path, get_env_var, token_minutes, users_data_path

JWT_SECRET = get_env_var("CLUB_API_JWT_SECRET")
JWT_ALGORITHM = "HS256"
# Club fields are stored one record per line, so line breaks are refused.
SINGLE_LINE = r"^[^\r\n]*$"

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Club Management API",
    version="0.1.0",
    description="JSON front end for the club registry and membership workflow.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class LoginPayload(BaseModel):
    user_id: str = Field(min_length=1)
    password: str = Field(min_length=1)
    role: Role


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: Role


class ClubPayload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, pattern=SINGLE_LINE)
    president: str = Field(min_length=1, pattern=SINGLE_LINE)
    description: str = Field(min_length=1, pattern=SINGLE_LINE)


class ApplicationPayload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    application_text: str = Field(min_length=1)


class ApprovalPayload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)


class AuthContext(BaseModel):
    user_id: str
    role: Role


@lru_cache(maxsize=1)
def get_service() -> ClubService:
    service = ClubService.from_paths(clubs_data_path(), users_data_path())
    service.load()
    return service


def _require_secret() -> str:
    if JWT_SECRET:
        return JWT_SECRET
    try:
        return get_env_var("CLUB_API_JWT_SECRET", required=True)
    except RuntimeError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


def issue_token(user_id: str, role: Role) -> str:
    expires = datetime.now(timezone.utc) + timedelta(minutes=token_minutes())
    claims = {"sub": user_id, "role": role.value, "exp": expires}
    return jwt.encode(claims, _require_secret(), algorithm=JWT_ALGORITHM)


def require_auth(authorization: Optional[str] = Header(default=None)) -> AuthContext:
    secret = _require_secret()
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=401, detail="Missing Bearer token.")
    token = authorization.split(" ", 1)[1]
    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token.")
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing subject claim.")
    try:
        role = Role(payload.get("role"))
    except ValueError:
        raise HTTPException(status_code=401, detail="Token carries an unknown role.")
    return AuthContext(user_id=user_id, role=role)


def require_role(role: Role) -> Callable[..., AuthContext]:
    def dependency(auth: AuthContext = Depends(require_auth)) -> AuthContext:
        if auth.role != role:
            raise HTTPException(status_code=403, detail=f"This action requires the {role.value} role.")
        return auth

    return dependency


def serialize_club(club: Club) -> Dict[str, Any]:
    return {"name": club.name, "president": club.president, "description": club.description}


def serialize_member(member: Member) -> Dict[str, Any]:
    return {"name": member.name, "application_text": member.application_text}


def fetch_club(service: ClubService, name: str) -> Club:
    club = service.get_club(name)
    if club is None:
        raise HTTPException(status_code=404, detail="Club not found")
    return club


@app.get("/health")
def healthcheck():
    return {"status": "ok"}


@app.post("/login", response_model=TokenResponse)
def login(payload: LoginPayload, service: ClubService = Depends(get_service)):
    result = service.login(payload.user_id, payload.password, payload.role)
    if result is AuthResult.INVALID_CREDENTIALS:
        raise HTTPException(status_code=401, detail="Invalid ID or password.")
    if result is AuthResult.WRONG_ROLE:
        raise HTTPException(status_code=403, detail=f"Account is not registered as {payload.role.value}.")
    return TokenResponse(access_token=issue_token(payload.user_id, payload.role), role=payload.role)


@app.get("/clubs")
def list_clubs(
    service: ClubService = Depends(get_service),
    auth: AuthContext = Depends(require_auth),
):
    rows: List[Dict[str, Any]] = [serialize_club(club) for club in service.list_clubs()]
    return {"count": len(rows), "results": rows}


@app.get("/clubs/{name}")
def club_detail(
    name: str,
    service: ClubService = Depends(get_service),
    auth: AuthContext = Depends(require_auth),
):
    return serialize_club(fetch_club(service, name))


@app.post("/clubs", status_code=201)
def create_club(
    payload: ClubPayload,
    service: ClubService = Depends(get_service),
    auth: AuthContext = Depends(require_role(Role.ADMINISTRATOR)),
):
    club = service.add_club(payload.name, payload.president, payload.description)
    return serialize_club(club)


@app.delete("/clubs/{name}", status_code=204)
def delete_club(
    name: str,
    service: ClubService = Depends(get_service),
    auth: AuthContext = Depends(require_role(Role.ADMINISTRATOR)),
):
    if not service.remove_club(name):
        raise HTTPException(status_code=404, detail="Club not found")
    return Response(status_code=204)


@app.post("/clubs/{name}/applications", status_code=201)
def submit_application(
    name: str,
    payload: ApplicationPayload,
    service: ClubService = Depends(get_service),
    auth: AuthContext = Depends(require_role(Role.STUDENT)),
):
    member = service.submit_application(name, payload.name, payload.application_text)
    if member is None:
        raise HTTPException(status_code=404, detail="Club not found")
    return serialize_member(member)


@app.get("/clubs/{name}/applications")
def list_applications(
    name: str,
    service: ClubService = Depends(get_service),
    auth: AuthContext = Depends(require_role(Role.CLUB_PRESIDENT)),
):
    applications = service.pending_applications(name)
    if applications is None:
        raise HTTPException(status_code=404, detail="Club not found")
    rows = [serialize_member(member) for member in applications]
    return {"count": len(rows), "results": rows}


@app.post("/clubs/{name}/applications/approve")
def approve_application(
    name: str,
    payload: ApprovalPayload,
    service: ClubService = Depends(get_service),
    auth: AuthContext = Depends(require_role(Role.CLUB_PRESIDENT)),
):
    fetch_club(service, name)
    member = service.approve_application(name, payload.name)
    if member is None:
        raise HTTPException(status_code=404, detail="No pending application from that applicant")
    logger.info("%s approved %s for %s", auth.user_id, member.name, name)
    return serialize_member(member)
