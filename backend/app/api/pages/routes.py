import httpx
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from app.api.pages.form import FormController
from app.api.pages.result import resolve_result
from app.api.pages.templates.renderer import (
    render_registration_form,
    render_result_page,
)
from app.core import config

router = APIRouter(tags=["pages"])


async def get_registration_client(request: Request):
    if config.REGISTRATION_API_URL:
        client = httpx.AsyncClient(base_url=config.REGISTRATION_API_URL, timeout=10.0)
    else:
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=request.app),
            base_url="http://registration",
        )
    async with client:
        yield client


@router.get("/", response_class=HTMLResponse)
async def registration_page():
    return HTMLResponse(render_registration_form())


@router.post("/", response_class=HTMLResponse)
async def submit_registration(
    identifier: str = Form(""),
    client: httpx.AsyncClient = Depends(get_registration_client),
):
    # one controller per page load; duplicate clicks are stopped by the disabled button
    submission = await FormController(client).submit(identifier)

    if submission.navigation is None:
        return HTMLResponse(render_registration_form(submission))
    return RedirectResponse(submission.navigation.url, status_code=303)


@router.get("/result", response_class=HTMLResponse)
@router.get("/error", response_class=HTMLResponse)
async def result_page(request: Request):
    view = resolve_result(request.query_params)
    return HTMLResponse(render_result_page(view))
