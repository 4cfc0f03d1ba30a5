# -*- coding: utf-8 -*-

LANG = {
    # Errors
    'AuthorizeNetAcceptjs.!error.auth': 'The gateway could not authenticate.',
    'AuthorizeNetAcceptjs.!error.transaction_key.empty': 'Please enter a Transaction Key.',
    'AuthorizeNetAcceptjs.!error.login_id.empty': 'Please enter a Login ID.',
    'AuthorizeNetAcceptjs.!error.login_id.valid': 'Unable to connect to the Authorize.net API using the given Login ID.',
    'AuthorizeNetAcceptjs.!error.sandbox.valid': 'Sandbox must be set to "true" if given.',
    'AuthorizeNetAcceptjs.!error.api.valid': 'Please select a valid API.',
    'AuthorizeNetAcceptjs.!error.validation_mode.valid': 'Please select a valid Payment Account Validation Mode.',
    'AuthorizeNetAcceptjs.!error.reference_id.valid': 'The transaction reference could not be read.',
    'AuthorizeNetAcceptjs.!error.unsupported': 'This gateway does not support the requested operation.',

    'AuthorizeNetAcceptjs.name': 'Authorize.Net Accept.js',
    'AuthorizeNetAcceptjs.description': 'Send secure payment data directly to Authorize.net. Accept.js captures the payment data and submits it directly to Authorize.net.',

    # Form
    'AuthorizeNetAcceptjs.field_number': 'Number',
    'AuthorizeNetAcceptjs.field_security': 'Security Code',
    'AuthorizeNetAcceptjs.field_expiration': 'Expiration Date',

    # Settings
    'AuthorizeNetAcceptjs.login_id': 'Login ID',
    'AuthorizeNetAcceptjs.transaction_key': 'Transaction Key',
    'AuthorizeNetAcceptjs.apis_aim': 'AIM',
    'AuthorizeNetAcceptjs.apis_cim': 'CIM',
    'AuthorizeNetAcceptjs.validation_mode': 'Payment Account Validation Mode',
    'AuthorizeNetAcceptjs.validation_modes_none': 'None',
    'AuthorizeNetAcceptjs.validation_modes_test': 'Test',
    'AuthorizeNetAcceptjs.validation_modes_live': 'Live',
    'AuthorizeNetAcceptjs.sandbox': 'Sandbox',

    # Charge description
    'AuthorizeNetAcceptjs.charge_description_default': 'Charge for specified amount',
    'AuthorizeNetAcceptjs.charge_description': 'Charge for %s',
}


def _(key, *args):
    message = LANG.get(key, key)
    if args:
        message = message % args
    return message
