from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeAlias


# Type aliases for Python dictionaries
LambdaEvent: TypeAlias = dict[str, Any]
LambdaContext: TypeAlias = Any
LambdaResponse: TypeAlias = dict[str, Any]
LambdaConfiguration: TypeAlias = dict[str, Any]
HttpHeaders: TypeAlias = dict[str, str]

# Source of the current time for the mapping store
Clock: TypeAlias = Callable[[], datetime]
