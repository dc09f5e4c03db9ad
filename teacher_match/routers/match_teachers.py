from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from teacher_match.config import settings
from teacher_match.db import get_db
from teacher_match.schemas import ErrorOut, MatchTeachersOut
from teacher_match.services.directory import TeacherDirectory
from teacher_match.services.enrichment import DescriptionEnricher
from teacher_match.services.errors import MatchError
from teacher_match.services.llm import get_llm_client
from teacher_match.services.match_service import TeacherMatchService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["matching"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def get_match_service(db: Session = Depends(get_db)) -> TeacherMatchService:
    enricher = DescriptionEnricher(get_llm_client(), limit=settings.enrichment_limit)
    return TeacherMatchService(TeacherDirectory(db), enricher)


@router.options("/match-teachers", include_in_schema=False)
def match_teachers_options() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post(
    "/match-teachers",
    response_model=MatchTeachersOut,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def match_teachers(request: Request, service: TeacherMatchService = Depends(get_match_service)):
    try:
        body = await request.json()
    except ValueError:
        return _error_response("Request body must be valid JSON", 400)
    if not isinstance(body, dict):
        return _error_response("Request body must be a JSON object", 400)

    try:
        result = await service.match(body.get("skill"))
    except MatchError as exc:
        if exc.status_code >= 500:
            logger.error("Error in match-teachers: %s", exc.__cause__ or exc)
        return _error_response(exc.message, exc.status_code)
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error in match-teachers")
        return _error_response("An error occurred", 500)

    return JSONResponse(result.model_dump(mode="json", by_alias=True, exclude_unset=True))


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorOut(error=message).model_dump(), status_code=status_code)
