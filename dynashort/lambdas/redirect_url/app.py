import logging

from dynashort.types import LambdaEvent, LambdaContext, LambdaResponse
from dynashort.constants import MISSING_SHORTCODE, SHORT_URL_NOT_FOUND, REDIRECT_SUCCESS, DATA_STORE_UNAVAILABLE
from dynashort.dao.exceptions import ShortURLNotFoundError, DataStoreError
from dynashort.lambdas.common import get_service, response, response_500, CORS_HEADERS
from dynashort.utils.helpers import guarantee_500_response


logger = logging.getLogger(__name__)


def response_302(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 302,
        'headers': {'Location': location, **CORS_HEADERS},
        'body': '',  # no body needed for redirects
    }


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs (GET /{shortcode})

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Resolve shortcode (cache, then data store)
    - Step 3: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: missing shortcode in path parameters
        404: Not found
            message: unknown or malformed shortcode
        500: Internal server error
            message: server experienced an internal error

    Example:
        >>> event = {'pathParameters': {'shortcode': 'Gh71WPTx9'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response(400, {'message': "Bad Request (missing 'shortcode' in path)", 'errorCode': MISSING_SHORTCODE})

    # 2- Resolve shortcode
    try:
        target_url = get_service().resolve_mapping(shortcode)
    except ShortURLNotFoundError:
        logger.info(
            'Short URL not found. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response(404, {'message': 'Short URL not found', 'errorCode': SHORT_URL_NOT_FOUND})
    except DataStoreError:
        logger.exception(
            'Data store unavailable. Responding with 500.',
            extra={'shortcode': shortcode, 'event': DATA_STORE_UNAVAILABLE},
        )
        return response_500()

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=target_url)
