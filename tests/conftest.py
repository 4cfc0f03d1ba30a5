# -*- coding: utf-8 -*-

from types import SimpleNamespace

import pytest

from payment_authorize_acceptjs import AuthorizeNetAcceptjs
from payment_authorize_acceptjs.lib.acceptjs import ApiType, Environment


META = {
    'login_id': 'api-login',
    'transaction_key': 'trans-key',
    'sandbox': 'true',
    'api': 'cim',
    'validation_mode': 'none',
}

CARD_INFO = {
    'first_name': 'Jane',
    'last_name': 'Doe',
    'address1': '1 Main St',
    'address2': 'Suite 2',
    'city': 'Albany',
    'state': {'code': 'NY', 'name': 'New York'},
    'country': {'alpha2': 'US', 'alpha3': 'USA', 'name': 'United States', 'alt_name': 'United States'},
    'zip': '12207',
    'reference_id': 'eyJjb2RlIjoiNTBfMl8wNjAw|COMMON.ACCEPT.INAPP.PAYMENT',
}


def messages(result_code='Ok', text='Successful.', code='I00001'):
    return SimpleNamespace(
        resultCode=result_code,
        message=[{'code': SimpleNamespace(text=code), 'text': SimpleNamespace(text=text)}],
    )


def ok_response(**fields):
    return SimpleNamespace(messages=messages(), **fields)


def error_response(text='An error occurred during processing.', code='E00027', **fields):
    return SimpleNamespace(messages=messages('Error', text, code), **fields)


def profile_response(profile_id='1234', payment_profile_id='5678'):
    return ok_response(
        customerProfileId=profile_id,
        customerPaymentProfileIdList=SimpleNamespace(numericString=[payment_profile_id]),
    )


def transaction_response(trans_id='60001', error_text=None):
    transaction = SimpleNamespace(transId=trans_id, responseCode='1')
    if error_text is None:
        return ok_response(transactionResponse=transaction)
    transaction.responseCode = '2'
    transaction.errors = SimpleNamespace(error=[SimpleNamespace(errorCode='2', errorText=error_text)])
    return error_response(transactionResponse=transaction)


def transaction_details_response(card_number='XXXX1111', expiration_date='XXXX'):
    credit_card = SimpleNamespace(cardNumber=card_number, expirationDate=expiration_date)
    return ok_response(transaction=SimpleNamespace(payment=SimpleNamespace(creditCard=credit_card)))


class FakeClient(object):
    """Stands in for AuthorizeNetClient; records every call it receives."""

    def __init__(self):
        self.configuration = None
        self.environment = Environment.TEST
        self.api_types = []
        self.validation_modes = []
        self.calls = []
        self.responses = {}

    def _respond(self, name, *args):
        self.calls.append((name,) + args)
        response = self.responses.get(name)
        if isinstance(response, Exception):
            raise response
        return response

    def call_names(self):
        return [call[0] for call in self.calls]

    def authenticate_test(self):
        return self._respond('authenticate_test')

    def merchant_details(self):
        return self._respond('merchant_details')

    def create_customer_profile(self, profile, ref_id=None):
        return self._respond('create_customer_profile', profile, ref_id)

    def create_transaction(self, transaction_request, ref_id=None):
        return self._respond('create_transaction', transaction_request, ref_id)

    def transaction_details(self, transaction_id):
        return self._respond('transaction_details', transaction_id)


class GatewayLog(object):

    def __init__(self):
        self.entries = []

    def __call__(self, url, data, direction, success):
        self.entries.append((url, data, direction, success))


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def gateway_log():
    return GatewayLog()


@pytest.fixture
def client_factory(client):
    def factory(configuration, api_type=ApiType.ACCEPT, validation_mode=None):
        client.configuration = configuration
        client.environment = configuration.environment
        client.api_types.append(api_type)
        client.validation_modes.append(validation_mode)
        return client
    return factory


@pytest.fixture
def gateway(client_factory, gateway_log):
    return AuthorizeNetAcceptjs(dict(META), client_factory=client_factory, gateway_log=gateway_log)
