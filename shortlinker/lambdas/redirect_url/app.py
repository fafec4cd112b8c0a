import logging

from shortlinker.constants import REDIRECT_SUCCESS
from shortlinker.exceptions import BadRequestError, ConfigurationError, ShortLinkerError
from shortlinker.lambdas.common import respond_to_error, run_in_store
from shortlinker.lambdas.responses import response_302
from shortlinker.models import ResolveRequest
from shortlinker.store import resolve
from shortlinker.types import LambdaContext, LambdaEvent, LambdaResponse
from shortlinker.utils import get_short_url, guarantee_500_response, load_config


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect short URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Load the Lambda's data store config
    - Step 2: Extract alias from request path
    - Step 3: Resolve the alias (via the mapping store), checking its expiry
    - Step 4: Redirect client to the destination

    HTTP responses:
        302: Successful redirect
            headers:
                Location: destination URL
        400: Bad client request
            message: missing alias in path parameters
        404: Not found
            message: alias doesn't exist
        410: Gone
            message: the mapping exists, but has expired
        500: Internal server error
            message: server experienced an internal error

    Example:
        >>> event = {'pathParameters': {'alias': 'Gh71TCN'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Load the Lambda's config
    try:
        app_config = load_config('redirect_url')
    except ConfigurationError as e:
        return respond_to_error(e)

    # 2- Extract alias from request's path
    try:
        request = ResolveRequest.from_event(event)
    except BadRequestError as e:
        return respond_to_error(e)
    logger.debug('Client requested short URL %s.', get_short_url(request.alias, event))

    # 3- Resolve alias
    try:
        destination = run_in_store(app_config, resolve, request.alias)
    except ShortLinkerError as e:
        return respond_to_error(e, alias=request.alias)

    # 4- Redirect client to destination
    logger.info('Redirecting client to destination. Responding with 302.', extra={'alias': request.alias, 'event': REDIRECT_SUCCESS})
    return response_302(location=destination)
