"""Server-rendered upload page."""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from translate_ai.dependencies import get_access_gate, get_submission_handler
from translate_ai.domain import AccessGate, AuthResult, FormView
from translate_ai.handlers import SubmissionHandler
from translate_ai.routes.forms import to_uploaded_file

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))

router = APIRouter(tags=["pages"])

GateDep = Annotated[AccessGate, Depends(get_access_gate)]
HandlerDep = Annotated[SubmissionHandler, Depends(get_submission_handler)]


def render(request: Request, view: FormView) -> HTMLResponse:
    return templates.TemplateResponse(request, "index.html", {"view": view})


@router.get("/", response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    return render(request, FormView())


@router.post("/login", response_class=HTMLResponse)
def login(
    request: Request,
    gate: GateDep,
    name: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
) -> HTMLResponse:
    view = FormView().login(gate.authenticate(name, password))
    return render(request, view)


@router.post("/upload", response_class=HTMLResponse)
def upload(
    request: Request,
    handler: HandlerDep,
    file: Annotated[UploadFile | None, File()] = None,
) -> HTMLResponse:
    uploaded = to_uploaded_file(file)
    view = (
        FormView()
        .login(AuthResult.allow())
        .select_file(uploaded.name if uploaded else None)
        .submit()
    )
    result = handler.handle_submit(uploaded)
    view = view.complete(result) if view.pending else view.reject(result)
    return render(request, view.reloaded())
