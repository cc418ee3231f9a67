import logging

from dynashort.types import LambdaEvent, LambdaContext, LambdaResponse
from dynashort.constants import Defaults
from dynashort.lambdas.common import get_service, response
from dynashort.utils.helpers import guarantee_500_response


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle load balancer health checks (GET /health)

    HTTP responses:
        200: cache and data store reachable
        500: at least one dependency unreachable

    Example:
        >>> lambda_handler({}, None)['statusCode']
        200
    """
    summary = get_service().health_summary()
    healthy = summary['status'] == 'OK'
    if not healthy:
        logger.warning('Healthcheck failed.', extra={'summary': summary})
    return response(200 if healthy else 500, {'service': Defaults.SERVICE_NAME, **summary})
