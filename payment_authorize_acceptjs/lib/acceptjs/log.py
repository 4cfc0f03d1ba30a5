# -*- coding: utf-8 -*-

import json
import logging

_logger = logging.getLogger(__name__)

MASK_FIELDS = (
    'number',
    'card_number',
    'cardNumber',
    'exp_month',
    'exp_year',
    'expirationDate',
    'cvc',
    'card_security_code',
    'cardCode',
)


def mask_value(value):
    """Blank out value; containers keep their shape with every scalar masked."""
    if isinstance(value, dict):
        return dict((key, mask_value(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return [mask_value(item) for item in value]
    if value is None:
        return None
    return 'x' * len(str(value))


def mask_data_recursive(data, mask_fields=MASK_FIELDS):
    """Copy of data with every masked key blanked out, at any depth."""
    if isinstance(data, dict):
        masked = {}
        for key, value in data.items():
            if key in mask_fields:
                masked[key] = mask_value(value)
            else:
                masked[key] = mask_data_recursive(value, mask_fields)
        return masked
    if isinstance(data, (list, tuple)):
        return [mask_data_recursive(item, mask_fields) for item in data]
    return data


def default_gateway_log(url, data, direction, success):
    level = logging.INFO if success else logging.WARNING
    _logger.log(level, '%s %s: %s', direction, url, data)


class RequestLog(object):
    """Hands masked request/response pairs to the host's gateway log."""

    def __init__(self, gateway_log=None, mask_fields=MASK_FIELDS):
        self.gateway_log = gateway_log or default_gateway_log
        self.mask_fields = mask_fields

    def serialize(self, data):
        return json.dumps(mask_data_recursive(data, self.mask_fields), sort_keys=True, default=str)

    def log_request(self, url, params, response, errors=None):
        params = params or {}
        response = response or {}
        success = not (errors or 'error' in response)

        self.gateway_log(url, self.serialize(params), 'input', 'error' not in params)
        self.gateway_log(url, self.serialize(response), 'output', success)
