from shortlinker.models.mapping_model import MappingModel
from shortlinker.models.requests import ShortenRequest, UpdateRequest, ResolveRequest, ExtendExpiryRequest


__all__ = [
    'MappingModel',
    'ShortenRequest',
    'UpdateRequest',
    'ResolveRequest',
    'ExtendExpiryRequest',
]
