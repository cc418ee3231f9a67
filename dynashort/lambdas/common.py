"""Shared plumbing for the API Gateway lambda handlers.

Functions:
    get_service() -> ShortenerService
        Lazily build one ShortenerService per warm container.
    response(status_code, body, headers=None) -> dict
        Build an API Gateway Lambda Proxy response.
"""

import json
import logging
import threading
from typing import Any

from dynashort.types import LambdaResponse
from dynashort.services import ShortenerService, build_service
from dynashort.utils.config import load_config


logger = logging.getLogger(__name__)

_service: ShortenerService | None = None
_service_lock = threading.Lock()

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET',
}


def get_service() -> ShortenerService:
    """Return the container-wide ShortenerService, building it on first use."""
    global _service
    with _service_lock:
        if _service is None:
            logger.debug('Building ShortenerService for this container.')
            _service = build_service(load_config())
        return _service


def response(status_code: int, body: dict[str, Any], headers: dict[str, str] | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def response_500(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    body = {'message': message or 'Internal Server Error'}
    if error_code:
        body['errorCode'] = error_code
    return response(500, body)
