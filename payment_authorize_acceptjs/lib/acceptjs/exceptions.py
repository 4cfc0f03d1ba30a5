# -*- coding: utf-8 -*-


class AcceptJsError(Exception):
    """Base class for every error raised by the Accept.js gateway layer."""

    def __init__(self, message, field=None):
        super(AcceptJsError, self).__init__(message)
        self.message = message
        self.field = field


class ValidationError(AcceptJsError):
    """Gateway settings are invalid or the credentials could not connect."""


class UnsupportedOperationError(AcceptJsError):
    """The requested operation is not offered by this gateway."""


class RemoteError(AcceptJsError):
    """The Authorize.net API failed or answered with a non-Ok result."""

    def __init__(self, message, field=None, response=None):
        super(RemoteError, self).__init__(message, field)
        self.response = response
