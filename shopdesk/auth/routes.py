from fastapi import APIRouter, Depends, Request

from shopdesk.routing import LOGIN_ROUTE
from shopdesk.session import SessionStore, get_session_store
from shopdesk.utils import NotFoundError, success_response
from .schemas import DemoLoginRequest, LoginRequest
from .service import AuthService, LoginResult, get_auth_service

auth_router = APIRouter()


def _login_payload(result: LoginResult) -> dict:
    return {"session": result.session.to_public(), "redirect_to": result.redirect_to}


@auth_router.post("/login")
def login(
    body: LoginRequest,
    svc: AuthService = Depends(get_auth_service),
):
    """Authenticate against the credential directory and start a session."""
    result = svc.authenticate(email=body.email, password=body.password)
    return success_response(data=_login_payload(result), message="Login successful")


@auth_router.post("/login/demo")
def demo_login(
    request: Request,
    body: DemoLoginRequest,
    svc: AuthService = Depends(get_auth_service),
):
    """One-click login as the first account of the chosen role."""
    if not request.app.state.settings.demo_logins_enabled:
        raise NotFoundError("Demo logins are disabled")
    record = svc.demo_record(body.role)
    if record is None:
        raise NotFoundError(f"No {body.role} account configured")
    result = svc.login_as(record)
    return success_response(data=_login_payload(result), message="Login successful")


@auth_router.post("/logout")
def logout(svc: AuthService = Depends(get_auth_service)):
    """Clear the session and its persisted copy."""
    svc.logout()
    return success_response(data={"redirect_to": LOGIN_ROUTE}, message="Logged out")


@auth_router.get("/me")
def me(store: SessionStore = Depends(get_session_store)):
    """Return the current session, or null when nobody is logged in."""
    session = store.current()
    return success_response(data={"session": session.to_public() if session else None})
