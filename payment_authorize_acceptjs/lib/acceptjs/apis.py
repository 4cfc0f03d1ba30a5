# -*- coding: utf-8 -*-

import enum
import logging

from authorizenet import apicontractsv1
from authorizenet.apicontrollers import (
    authenticateTestController,
    createCustomerProfileController,
    createTransactionController,
    getMerchantDetailsController,
    getTransactionDetailsController,
)

from .exceptions import RemoteError

_logger = logging.getLogger(__name__)

RESULT_OK = 'Ok'


class ApiType(enum.Enum):
    # payment profiles and transactions built from Accept.js tokens
    ACCEPT = 'accept'
    # merchant-level CIM calls (client key lookup, credential checks)
    CIM = 'cim'


def text(node):
    """Return the text of an objectified response node, or None."""
    if node is None:
        return None
    value = getattr(node, 'text', node)
    if value is None:
        return None
    return str(value)


def result_code(response):
    messages = getattr(response, 'messages', None)
    return text(getattr(messages, 'resultCode', None))


def is_ok(response):
    return result_code(response) == RESULT_OK


def response_message(response):
    """First message text of an API response."""
    messages = getattr(response, 'messages', None)
    try:
        message = messages.message[0]
    except (AttributeError, IndexError, TypeError):
        return None
    try:
        return text(message['text'])
    except (KeyError, TypeError):
        return text(getattr(message, 'text', None))


def transaction_message(response):
    """Most specific message of a createTransaction response.

    Transaction-level errors (declines, AVS failures) are reported inside
    transactionResponse rather than in the top level messages.
    """
    transaction = getattr(response, 'transactionResponse', None)
    errors = getattr(transaction, 'errors', None)
    if errors is not None:
        try:
            return text(errors.error[0].errorText)
        except (AttributeError, IndexError, TypeError):
            pass
    return response_message(response)


def response_summary(response):
    """Plain dict of the parts of a response worth logging."""
    summary = {
        'result_code': result_code(response),
        'message': response_message(response),
    }
    transaction = getattr(response, 'transactionResponse', None)
    if transaction is not None:
        summary['transaction_id'] = text(getattr(transaction, 'transId', None))
    if not is_ok(response):
        summary['error'] = transaction_message(response)
    return summary


class AuthorizeNetClient(object):
    """One authenticated handle onto the Authorize.net XML API."""

    def __init__(self, configuration, api_type=ApiType.ACCEPT, validation_mode=None):
        self.configuration = configuration
        self.api_type = api_type
        self.validation_mode = validation_mode
        self._merchant_authentication = configuration.merchant_authentication()

    @property
    def environment(self):
        return self.configuration.environment

    def execute(self, controller_class, request):
        request.merchantAuthentication = self._merchant_authentication
        controller = controller_class(request)
        controller.setenvironment(self.environment)

        _logger.debug('%s %s request sent to %s', self.api_type.value, type(request).__name__, self.environment)
        try:
            controller.execute()
        except Exception as e:
            raise RemoteError(str(e)) from e

        response = controller.getresponse()
        if response is None:
            raise RemoteError('No response received from %s' % self.environment)
        return response

    def authenticate_test(self):
        request = apicontractsv1.authenticateTestRequest()
        return self.execute(authenticateTestController, request)

    def merchant_details(self):
        request = apicontractsv1.getMerchantDetailsRequest()
        return self.execute(getMerchantDetailsController, request)

    def create_customer_profile(self, profile, ref_id=None):
        request = apicontractsv1.createCustomerProfileRequest()
        if ref_id:
            request.refId = ref_id
        request.profile = profile
        if self.validation_mode and self.validation_mode != 'none':
            request.validationMode = self.validation_mode
        return self.execute(createCustomerProfileController, request)

    def create_transaction(self, transaction_request, ref_id=None):
        request = apicontractsv1.createTransactionRequest()
        if ref_id:
            request.refId = ref_id
        request.transactionRequest = transaction_request
        return self.execute(createTransactionController, request)

    def transaction_details(self, transaction_id):
        request = apicontractsv1.getTransactionDetailsRequest()
        request.transId = transaction_id
        response = self.execute(getTransactionDetailsController, request)
        if not is_ok(response):
            raise RemoteError(response_message(response) or 'Transaction not found', response=response)
        return response
