from shortlinker.dao.redis.redis_key_schema import RedisKeySchema
from shortlinker.dao.redis.mixins import RedisClientMixin
from shortlinker.dao.redis.mapping_redis_dao import MappingRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'MappingRedisDAO',
]
