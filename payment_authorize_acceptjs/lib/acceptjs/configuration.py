# -*- coding: utf-8 -*-

from collections import namedtuple

from authorizenet import apicontractsv1

from .environment import Environment


class Credentials(namedtuple('Credentials', ['login_id', 'transaction_key', 'sandbox'])):
    __slots__ = ()

    @classmethod
    def from_meta(cls, meta):
        meta = meta or {}
        return cls(
            meta.get('login_id') or '',
            meta.get('transaction_key') or '',
            meta.get('sandbox') == 'true',
        )


class Configuration(object):
    """Credentials plus the endpoint they are valid for."""

    def __init__(self, credentials, environment=None):
        self.credentials = credentials
        if environment is None:
            environment = Environment.from_sandbox(credentials.sandbox)
        self.environment = environment

    @classmethod
    def configure(cls, login_id, transaction_key, sandbox=False):
        return cls(Credentials(login_id, transaction_key, sandbox))

    def merchant_authentication(self):
        auth = apicontractsv1.merchantAuthenticationType()
        auth.name = self.credentials.login_id
        auth.transactionKey = self.credentials.transaction_key
        return auth
