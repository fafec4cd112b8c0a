import logging

from shortlinker.constants import UPDATE_SUCCESS
from shortlinker.exceptions import BadRequestError, ConfigurationError, ShortLinkerError
from shortlinker.lambdas.common import respond_to_error, run_in_store
from shortlinker.lambdas.responses import response_200
from shortlinker.models import UpdateRequest
from shortlinker.store import update
from shortlinker.types import LambdaContext, LambdaEvent, LambdaResponse
from shortlinker.utils import guarantee_500_response, load_config


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to re-point an alias

    Request body:
        alias: alias, or the full short URL
        destination_url: new destination

    HTTP responses:
        200: destination updated (success: true)
        400: invalid JSON, missing fields or invalid URL
        404: alias doesn't exist
        500: internal server error
    """
    try:
        app_config = load_config('update_url')
    except ConfigurationError as e:
        return respond_to_error(e)

    try:
        request = UpdateRequest.from_event(event)
    except BadRequestError as e:
        return respond_to_error(e)

    try:
        run_in_store(app_config, update, request.alias, request.destination_url)
    except ShortLinkerError as e:
        return respond_to_error(e, alias=request.alias)

    logger.info('Updated destination. Responding with 200.', extra={'alias': request.alias, 'event': UPDATE_SUCCESS})
    return response_200(message=f'Alias {request.alias} now redirects to {request.destination_url}', success=True)
