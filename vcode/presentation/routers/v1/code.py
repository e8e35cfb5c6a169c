import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from vcode.application.registry import ProcessorRegistry
from vcode.domain.entities import RequestContext
from vcode.domain.errors import (
    CodeDeliveryError,
    ProcessorNotFound,
    ValidateCodeError,
)
from vcode.presentation.dependencies import (
    SessionHandle,
    get_app_settings,
    get_processors,
    get_request_params,
    get_session,
)
from vcode.schemas.responses import ErrorOut, OkOut
from vcode.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/code", tags=["Verification code"])


def _to_http(exc: ValidateCodeError) -> HTTPException:
    if isinstance(exc, ProcessorNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, CodeDeliveryError):
        logger.error("verification code delivery failed", extra={"error": str(exc)})
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def _bind_session(response: Response, session: SessionHandle, settings: Settings) -> None:
    if session.is_new:
        response.set_cookie(
            settings.session_cookie_name,
            session.id,
            max_age=settings.session_ttl_seconds,
            httponly=True,
            samesite="lax",
        )


@router.get(
    "/{code_type}",
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}, 502: {"model": ErrorOut}},
)
async def get_create_code(
    code_type: str,
    processors: Annotated[ProcessorRegistry, Depends(get_processors)],
    session: Annotated[SessionHandle, Depends(get_session)],
    params: Annotated[dict, Depends(get_request_params)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    context = RequestContext(session_id=session.id, params=params)
    try:
        processor = processors.find_by_name(code_type)
        await processor.create(context)
    except ValidateCodeError as e:
        raise _to_http(e)

    out = context.response
    response = Response(
        content=out.body or b"",
        media_type=out.media_type,
        headers=out.headers,
    )
    _bind_session(response, session, settings)
    return response


@router.post(
    "/{code_type}/validate",
    response_model=OkOut,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)
async def post_validate_code(
    code_type: str,
    processors: Annotated[ProcessorRegistry, Depends(get_processors)],
    session: Annotated[SessionHandle, Depends(get_session)],
    params: Annotated[dict, Depends(get_request_params)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    context = RequestContext(session_id=session.id, params=params)
    try:
        processor = processors.find_by_name(code_type)
        await processor.validate(context)
    except ValidateCodeError as e:
        raise _to_http(e)

    response = JSONResponse(OkOut().model_dump())
    _bind_session(response, session, settings)
    return response
