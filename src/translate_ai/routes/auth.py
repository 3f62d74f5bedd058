"""Credential check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form

from translate_ai.dependencies import get_access_gate
from translate_ai.domain import AccessGate
from translate_ai.response_models import AuthResponse

router = APIRouter(prefix="/api", tags=["auth"])

GateDep = Annotated[AccessGate, Depends(get_access_gate)]


@router.post("/auth", response_model=AuthResponse)
def authenticate(
    gate: GateDep,
    name: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
) -> AuthResponse:
    """Checks a name and password against the configured pair."""
    return AuthResponse.from_result(gate.authenticate(name, password))
