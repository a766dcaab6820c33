"""
MongoDB Records API

Aggregates the records collection. Every response uses the
`{"code": ..., "msg": ..., "records": ...}` envelope.
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from kvgateway.api.deps import get_backends, is_json_request
from kvgateway.api.errors import (
    ERR_FETCH,
    ERR_INVALID_CONTENT_TYPE,
    ERR_MARSHAL,
    ERR_METHOD_NOT_ALLOWED,
)
from kvgateway.common.errors import BackendNotConfiguredError
from kvgateway.db.backends import MONGODB
from kvgateway.domain.record import RecordFilter, RecordsResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["MongoDB - Records"])


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(content=RecordsResponse.failure(message).to_dict(), status_code=status_code)


async def retrieve_records(request: Request) -> JSONResponse:
    """
    Fetch grouped record counts

    An empty or `null` body runs the query without filters. Otherwise the body may
    carry `startDate`/`endDate` (`YYYY-MM-DD`) and `minCount`/`maxCount`.
    """
    if request.method != "POST":
        return _fail(status.HTTP_405_METHOD_NOT_ALLOWED, ERR_METHOD_NOT_ALLOWED)
    if not is_json_request(request):
        return _fail(status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, ERR_INVALID_CONTENT_TYPE)

    body = await request.body()
    try:
        if not body or body.strip() == b"null":
            record_filter = RecordFilter()
        else:
            record_filter = RecordFilter.model_validate_json(body)
    except ValidationError as e:
        logger.debug("Invalid records filter: %s", e)
        return _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, ERR_MARSHAL)

    backends = get_backends(request)
    try:
        if backends.records is None:
            raise BackendNotConfiguredError(MONGODB)
        records = await backends.records.fetch(record_filter)
    except Exception as e:
        logger.error("Records fetch failed: %s", e)
        return _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, ERR_FETCH)

    return JSONResponse(content=RecordsResponse.success(records).to_dict(), status_code=status.HTTP_200_OK)


router.add_route("/mongodb/records", retrieve_records)
