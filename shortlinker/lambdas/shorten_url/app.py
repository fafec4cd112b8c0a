import logging

from shortlinker.constants import SHORTEN_SUCCESS
from shortlinker.exceptions import ConfigurationError, ShortLinkerError
from shortlinker.lambdas.common import respond_to_error, run_in_store
from shortlinker.lambdas.responses import response_200
from shortlinker.models import ShortenRequest
from shortlinker.store import create_or_get
from shortlinker.types import LambdaContext, LambdaEvent, LambdaResponse
from shortlinker.utils import get_short_url, guarantee_500_response, load_config


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Load the Lambda's data store config
    - Step 2: Extract the destination URL from the request body
    - Step 3: Get or create the mapping for the destination (via the mapping store)
    - Step 4: Respond to user with 200 success

    Shortening a destination that was shortened before returns the existing alias.

    HTTP responses:
        200: Successful URL shortening
            message: success message
            destination_url: original url (provided in request)
            alias: alias of the mapping
            short_url: alias presented under the public base URL
        400: Bad client request
            message: invalid JSON, missing destination_url or invalid URL
        500: Internal server error
            message: indicate the server experienced an internal error

    Example:
        >>> event = {'body': '{"destination_url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['short_url']
        'http://localhost:3000/Gh71TCN'
    """
    # 1- Load the Lambda's config
    try:
        app_config = load_config('shorten_url')
    except ConfigurationError as e:
        return respond_to_error(e)

    # 2- Extract destination URL from request body
    # 3- Get or create the mapping
    try:
        request = ShortenRequest.from_event(event)
        alias = run_in_store(app_config, create_or_get, request.destination_url)
    except ShortLinkerError as e:
        return respond_to_error(e)

    # 4- Return successful response to user
    short_url = get_short_url(alias, event)
    logger.info('Shortened destination. Responding with 200.', extra={'alias': alias, 'event': SHORTEN_SUCCESS})
    return response_200(
        message=f'Successfully shortened {request.destination_url} to {short_url}',
        destination_url=request.destination_url,
        alias=alias,
        short_url=short_url,
    )
