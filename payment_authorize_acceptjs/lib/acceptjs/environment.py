# -*- coding: utf-8 -*-

from authorizenet.constants import constants


class Environment(object):
    TEST = constants.SANDBOX
    PRODUCTION = constants.PRODUCTION

    # Accept.js is served from a different host per environment
    ACCEPT_JS_URLS = {
        constants.SANDBOX: 'https://jstest.authorize.net/v1/Accept.js',
        constants.PRODUCTION: 'https://js.authorize.net/v1/Accept.js',
    }

    @classmethod
    def from_sandbox(cls, sandbox):
        if sandbox:
            return cls.TEST
        return cls.PRODUCTION

    @classmethod
    def accept_js_url(cls, environment):
        return cls.ACCEPT_JS_URLS.get(environment, cls.ACCEPT_JS_URLS[cls.PRODUCTION])
