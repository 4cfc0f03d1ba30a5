from . import controllers
from . import models
from .controllers.main import AuthorizeNetAcceptjs
from .lib.acceptjs import (
    AcceptJsError,
    ApiType,
    Credentials,
    RemoteError,
    UnsupportedOperationError,
    ValidationError,
)
from .models.authorize_acceptjs import ProfileReference, TransactionResult

__version__ = '1.0.0'
