import secrets
from dataclasses import dataclass

from fastapi import Depends, Request

from vcode.application.registry import ProcessorRegistry
from vcode.settings import Settings, get_settings


@dataclass
class SessionHandle:
    id: str
    is_new: bool = False


def get_app_settings() -> Settings:
    return get_settings()


def get_processors(request: Request) -> ProcessorRegistry:
    # This is set in vcode.main lifespan()
    return request.app.state.processors


def get_session(
    request: Request, settings: Settings = Depends(get_app_settings)
) -> SessionHandle:
    session_id = request.cookies.get(settings.session_cookie_name)
    if session_id:
        return SessionHandle(id=session_id)
    return SessionHandle(id=secrets.token_urlsafe(32), is_new=True)


async def get_request_params(request: Request) -> dict[str, list]:
    """Query string and form fields merged, multi-valued, query first."""
    params: dict[str, list] = {}
    for key, value in request.query_params.multi_items():
        params.setdefault(key, []).append(value)

    content_type = request.headers.get("content-type", "")
    if content_type.startswith(
        ("application/x-www-form-urlencoded", "multipart/form-data")
    ):
        form = await request.form()
        for key, value in form.multi_items():
            # UploadFile values are kept; RequestContext rejects them.
            params.setdefault(key, []).append(value)
    return params
