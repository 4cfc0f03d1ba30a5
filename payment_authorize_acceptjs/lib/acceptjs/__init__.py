from .configuration import Configuration
from .configuration import Credentials
from .environment import Environment
from .exceptions import AcceptJsError
from .exceptions import RemoteError
from .exceptions import UnsupportedOperationError
from .exceptions import ValidationError
from .apis import ApiType
from .apis import AuthorizeNetClient
from .log import RequestLog
from .log import mask_data_recursive
from . import apis
