# -*- coding: utf-8 -*-

import base64
import binascii
import hashlib
import json
from collections import namedtuple

from ..messages import _


STATUSES = ('approved', 'declined', 'void', 'pending', 'reconciled', 'refunded', 'returned', 'error')

APIS = ('aim', 'cim')
VALIDATION_MODES = ('none', 'testMode', 'liveMode')
SANDBOX_VALUES = ('true', 'false')

ENCRYPTABLE_FIELDS = ['login_id', 'transaction_key']

# authorize.net caps refId at 20 characters
REF_TAG_LENGTH = 18
MAX_DESCRIPTION_LENGTH = 1000


def _is_empty(value):
    return value is None or str(value).strip() == ''


def validate_settings(meta, connection_check=None):
    """Validate and normalize gateway settings.

    Returns a ``(meta, errors)`` pair. ``errors`` maps each failing field to
    ``{rule: message}`` and is empty when the settings are acceptable.
    ``connection_check`` is called with the credentials only once both are
    present, and must return True for them to be accepted.
    """
    meta = dict(meta or {})
    errors = {}

    if _is_empty(meta.get('transaction_key')):
        errors['transaction_key'] = {'empty': _('AuthorizeNetAcceptjs.!error.transaction_key.empty')}

    if _is_empty(meta.get('login_id')):
        errors['login_id'] = {'empty': _('AuthorizeNetAcceptjs.!error.login_id.empty')}

    if 'sandbox' in meta and meta['sandbox'] not in SANDBOX_VALUES:
        errors['sandbox'] = {'valid': _('AuthorizeNetAcceptjs.!error.sandbox.valid')}

    if meta.get('api') and meta['api'] not in APIS:
        errors['api'] = {'valid': _('AuthorizeNetAcceptjs.!error.api.valid')}

    if meta.get('validation_mode') and meta['validation_mode'] not in VALIDATION_MODES:
        errors['validation_mode'] = {'valid': _('AuthorizeNetAcceptjs.!error.validation_mode.valid')}

    # Set checkbox if not set
    if 'sandbox' not in meta:
        meta['sandbox'] = 'false'

    if connection_check is not None and not errors:
        if not connection_check(meta['login_id'], meta['transaction_key'], meta['sandbox'] == 'true'):
            errors['login_id'] = {'valid': _('AuthorizeNetAcceptjs.!error.login_id.valid')}

    return meta, errors


class TransactionResult(namedtuple('TransactionResult', ['status', 'reference_id', 'transaction_id', 'message'])):
    __slots__ = ()

    def __new__(cls, status, reference_id=None, transaction_id=None, message=None):
        if status not in STATUSES:
            raise ValueError('Unknown transaction status %r' % status)
        return super(TransactionResult, cls).__new__(cls, status, reference_id, transaction_id, message)

    def to_dict(self):
        return dict(self._asdict())


class InvoiceAllocation(namedtuple('InvoiceAllocation', ['invoice_id', 'amount'])):
    __slots__ = ()

    @classmethod
    def from_dict(cls, values):
        invoice_id = values.get('invoice_id', values.get('id'))
        return cls(invoice_id, values.get('amount'))


class OpaqueToken(namedtuple('OpaqueToken', ['data_value', 'data_descriptor'])):
    """Payment nonce produced by Accept.js in the customer's browser."""
    __slots__ = ()

    @classmethod
    def parse(cls, reference_id):
        parts = (reference_id or '').split('|', 1)
        return cls(parts[0], parts[1] if len(parts) > 1 else '')


class ProfileReference(namedtuple('ProfileReference', ['tag', 'profile_id', 'payment_profile_id'])):
    """Reference to a customer payment profile created during authorization.

    Serialized as ``v1:`` followed by the urlsafe base64 of a JSON array
    ``[tag, profile_id, payment_profile_id]``. Values written by earlier
    releases, plain base64 of ``tag|profile_id|payment_profile_id``, are
    still read.
    """
    __slots__ = ()

    VERSION = 'v1'

    def encode(self):
        payload = json.dumps([self.tag, self.profile_id, self.payment_profile_id], separators=(',', ':'))
        return '%s:%s' % (self.VERSION, base64.urlsafe_b64encode(payload.encode('utf-8')).decode('ascii'))

    @classmethod
    def decode(cls, reference_id):
        if not reference_id:
            raise ValueError('Empty profile reference')

        version, sep, payload = reference_id.partition(':')
        try:
            if sep and version == cls.VERSION:
                values = json.loads(base64.urlsafe_b64decode(payload.encode('ascii')).decode('utf-8'))
                if not isinstance(values, list) or len(values) != 3:
                    raise ValueError('Malformed profile reference')
                return cls(*[str(value) for value in values])

            # legacy pipe delimited reference
            values = base64.b64decode(reference_id.encode('ascii'), validate=True).decode('utf-8').split('|')
        except (binascii.Error, UnicodeError) as e:
            raise ValueError('Malformed profile reference: %s' % e)

        values = (values + ['', '', ''])[:3]
        return cls(*values)


def profile_reference_tag(reference_id):
    return hashlib.md5((reference_id or '').encode('utf-8')).hexdigest()[:REF_TAG_LENGTH]


def truncate(text, length):
    if len(text) <= length:
        return text
    return text[:length - 3] + '...'


def charge_description(invoice_amounts=None, invoice_lookup=None):
    """Human readable description of what a charge pays for."""
    if not invoice_amounts:
        return _('AuthorizeNetAcceptjs.charge_description_default')

    id_codes = []
    for invoice_amount in invoice_amounts:
        if not isinstance(invoice_amount, InvoiceAllocation):
            invoice_amount = InvoiceAllocation.from_dict(invoice_amount)
        if invoice_amount.invoice_id is None:
            continue
        id_code = invoice_lookup(invoice_amount.invoice_id) if invoice_lookup else invoice_amount.invoice_id
        if id_code:
            id_codes.append(str(id_code))

    if not id_codes:
        return _('AuthorizeNetAcceptjs.charge_description_default')

    return truncate(_('AuthorizeNetAcceptjs.charge_description', ', '.join(id_codes)), MAX_DESCRIPTION_LENGTH)
