import logging

from shortlinker.constants import EXPIRY_EXTENDED
from shortlinker.exceptions import BadRequestError, ConfigurationError, ShortLinkerError
from shortlinker.lambdas.common import respond_to_error, run_in_store
from shortlinker.lambdas.responses import response_200
from shortlinker.models import ExtendExpiryRequest
from shortlinker.store import extend_expiry
from shortlinker.types import LambdaContext, LambdaEvent, LambdaResponse
from shortlinker.utils import guarantee_500_response, load_config


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to reset an alias' expiry

    The new expiry is counted from now, not from the previous expiry.

    Request body:
        alias: alias, or the full short URL
        days_to_add: integer number of days (negative values expire the alias)

    HTTP responses:
        200: expiry updated (success: true)
        400: invalid JSON, missing alias, non-integer or out of range days_to_add
        404: alias doesn't exist
        500: internal server error
    """
    try:
        app_config = load_config('extend_expiry')
    except ConfigurationError as e:
        return respond_to_error(e)

    try:
        request = ExtendExpiryRequest.from_event(event)
    except BadRequestError as e:
        return respond_to_error(e)

    try:
        run_in_store(app_config, extend_expiry, request.alias, request.days_to_add)
    except ShortLinkerError as e:
        return respond_to_error(e, alias=request.alias)

    logger.info('Extended expiry. Responding with 200.', extra={'alias': request.alias, 'event': EXPIRY_EXTENDED})
    return response_200(message=f'Alias {request.alias} expires in {request.days_to_add} day(s)', success=True)
