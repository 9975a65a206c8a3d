"""Shared plumbing for resource services: call the client, validate the body."""

from typing import Any, Optional, Type, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

from samira.riot_api.either import Either, left, right
from samira.riot_api.errors import ApiError, validation_error
from samira.riot_api.http_client import HttpClient, QueryParams

logger = structlog.get_logger(__name__)

M = TypeVar("M")


def parse_payload(payload: Any, model_type: Type[M], resource: str) -> Either[ApiError, M]:
    """
    Validate a decoded response body against ``model_type``.

    :param payload: Decoded JSON body
    :param model_type: Pydantic model or typing construct (``List[Model]``...)
    :param resource: Resource name used in the validation error message
    :returns: Right(parsed) or Left(ApiError) with status 400 "Validation Error"
    """
    try:
        return right(TypeAdapter(model_type).validate_python(payload))
    except ValidationError as e:
        logger.warning(
            "Response validation failed",
            resource=resource,
            error_count=e.error_count(),
        )
        return left(validation_error(resource, e))


class BaseService:
    """Base class for services built on one HttpClient."""

    def __init__(self, http_client: HttpClient):
        self._client = http_client

    async def _fetch(
        self,
        url: str,
        model_type: Type[M],
        resource: str,
        params: Optional[QueryParams] = None,
    ) -> Either[ApiError, M]:
        response = await self._client.get(url, params=params)
        if response.is_left():
            return response
        return parse_payload(response.value.data, model_type, resource)
