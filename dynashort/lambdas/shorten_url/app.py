import json
import logging

from dynashort.types import LambdaEvent, LambdaContext, LambdaResponse
from dynashort.constants import INVALID_INPUT, INVALID_JSON_BODY, GENERATION_EXHAUSTED, DATA_STORE_UNAVAILABLE
from dynashort.exceptions import InvalidInputError, GenerationExhaustedError
from dynashort.dao.exceptions import DataStoreError
from dynashort.lambdas.common import get_service, response, response_500
from dynashort.utils.helpers import guarantee_500_response


logger = logging.getLogger(__name__)


def response_400(message: str, error_code: str) -> LambdaResponse:
    return response(400, {'message': f'Bad Request ({message})', 'errorCode': error_code})


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs (POST /newurl)

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract domain and original URL from request body
    - Step 2: Create the short URL mapping (via ShortenerService)
    - Step 3: Respond to user with 201 created

    HTTP responses:
        201: Successful URL shortening
            url: original url (provided in request)
            shortenUrl: newly generated short url
            shortcode: newly generated shortcode
        400: Bad client request
            message: invalid JSON, missing parameters or invalid URL format
        500: Internal server error
            message: shortcode generation exhausted or data store unavailable

    Example:
        >>> event = {'body': '{"domain": "short.ly", "url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
    """
    # 1- Extract domain and original URL from request body
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400('invalid JSON body', INVALID_JSON_BODY)
    if not isinstance(request_body, dict):
        logger.info('JSON body is not an object. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400('JSON body must be an object', INVALID_JSON_BODY)

    domain = request_body.get('domain')
    url = request_body.get('url')

    # 2- Create the short URL mapping
    try:
        created = get_service().create_mapping(domain, url)
    except InvalidInputError as e:
        logger.info('Invalid input. Responding with 400.', extra={'event': INVALID_INPUT, 'reason': str(e)})
        return response_400(str(e), INVALID_INPUT)
    except GenerationExhaustedError:
        logger.warning('Shortcode generation exhausted. Responding with 500.', extra={'event': GENERATION_EXHAUSTED})
        return response_500('Could not generate unique code, please try again', GENERATION_EXHAUSTED)
    except DataStoreError:
        logger.exception('Data store unavailable. Responding with 500.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_500()

    # 3- Return successful response to user
    return response(
        201,
        {
            'url': created.target,
            'shortenUrl': created.short_url,
            'shortcode': created.shortcode,
        },
    )
