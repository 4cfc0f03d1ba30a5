# -*- coding: utf-8 -*-

import calendar
import datetime
import functools
import logging
import time
from decimal import Decimal, ROUND_HALF_UP

from authorizenet import apicontractsv1

from ..lib.acceptjs import ApiType, AuthorizeNetClient, Configuration, Credentials, Environment, RequestLog
from ..lib.acceptjs.apis import is_ok, response_message, response_summary, text, transaction_message
from ..lib.acceptjs.exceptions import RemoteError, UnsupportedOperationError, ValidationError
from ..messages import _
from ..models.authorize_acceptjs import (
    ENCRYPTABLE_FIELDS,
    OpaqueToken,
    ProfileReference,
    TransactionResult,
    charge_description,
    profile_reference_tag,
    truncate,
    validate_settings,
)
from ..models.interfaces import MerchantCc, MerchantCcForm, MerchantCcOffsite

_logger = logging.getLogger(__name__)

MAX_REF_ID_LENGTH = 20
MAX_ORDER_DESCRIPTION_LENGTH = 255


def format_amount(amount):
    return Decimal(str(amount)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def build_customer_address(card_info):
    state = card_info.get('state') or {}
    country = card_info.get('country') or {}

    address = apicontractsv1.customerAddressType()
    address.firstName = card_info.get('first_name') or ''
    address.lastName = card_info.get('last_name') or ''
    address.address = card_info.get('address1') or ''
    address.city = card_info.get('city') or ''
    address.state = state.get('code') or ''
    address.zip = card_info.get('zip') or '00000'
    address.country = country.get('alpha3') or ''
    return address


def address_params(card_info):
    state = card_info.get('state') or {}
    country = card_info.get('country') or {}
    return {
        'first_name': card_info.get('first_name') or '',
        'last_name': card_info.get('last_name') or '',
        'address': card_info.get('address1') or '',
        'city': card_info.get('city') or '',
        'state': state.get('code') or '',
        'zip': card_info.get('zip') or '00000',
        'country': country.get('alpha3') or '',
    }


def first_payment_profile_id(response):
    try:
        return text(response.customerPaymentProfileIdList.numericString[0]) or ''
    except (AttributeError, IndexError, TypeError):
        return ''


def gateway_operation(name):
    """Run a host-facing operation, turning gateway errors into input errors.

    The wrapped call returns None whenever it fails; the reason is left in
    the adapter's error set.
    """
    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            self._errors = {}
            try:
                return method(self, *args, **kwargs)
            except UnsupportedOperationError as e:
                self._set_errors({'unsupported': {'response': e.message}})
            except ValidationError as e:
                self._set_errors({e.field or name: {'valid': e.message}})
            except RemoteError as e:
                _logger.warning('Authorize.net %s failed: %s', name, e.message)
                self._set_errors({'authnet_error': {name: e.message}})
            return None
        return wrapper
    return decorator


class AuthorizeNetAcceptjs(MerchantCc, MerchantCcOffsite, MerchantCcForm):
    """Authorize.net Accept.js credit card gateway.

    Card data is tokenized by Accept.js in the customer's browser; this class
    only ever sees the opaque payment nonce, stores it as a CIM customer
    payment profile on authorization and charges that profile on capture.
    """

    def __init__(self, meta=None, client_factory=None, gateway_log=None, invoice_lookup=None):
        self.client_factory = client_factory or AuthorizeNetClient
        self.request_log = RequestLog(gateway_log)
        self.invoice_lookup = invoice_lookup
        self.currency = None
        self.meta = {}
        self.credentials = None
        self.clients = {}
        self._errors = {}

        if meta is not None:
            self.set_meta(meta)

    def get_name(self):
        return _('AuthorizeNetAcceptjs.name')

    def get_description(self):
        return _('AuthorizeNetAcceptjs.description')

    def set_currency(self, currency):
        self.currency = currency

    def set_meta(self, meta=None):
        self.meta = dict(meta or {})
        self.credentials = Credentials.from_meta(self.meta)

        configuration = Configuration(self.credentials)
        self.clients = {
            ApiType.ACCEPT: self.client_factory(
                configuration, ApiType.ACCEPT, self.meta.get('validation_mode')),
            ApiType.CIM: self.client_factory(configuration, ApiType.CIM),
        }

    def errors(self):
        return self._errors or None

    def _set_errors(self, errors):
        for field, rules in errors.items():
            self._errors.setdefault(field, {}).update(rules)

    def _client(self, api_type):
        client = self.clients.get(api_type)
        if client is None or not (self.credentials and self.credentials.login_id):
            raise RemoteError(_('AuthorizeNetAcceptjs.!error.auth'))
        return client

    def _send(self, client, params, call, *args):
        try:
            response = call(*args)
        except RemoteError as e:
            logged = response_summary(e.response) if e.response is not None else {}
            logged['error'] = e.message
            self.request_log.log_request(client.environment, params, logged, self.errors())
            raise
        self.request_log.log_request(client.environment, params, response_summary(response), self.errors())
        return response

    def _ref_id(self, reference_id):
        if not reference_id:
            return None
        try:
            tag = ProfileReference.decode(reference_id).tag
        except ValueError:
            tag = reference_id
        return tag[:MAX_REF_ID_LENGTH] or None

    def _decode_reference(self, reference_id):
        try:
            reference = ProfileReference.decode(reference_id)
        except ValueError as e:
            _logger.warning('Unreadable profile reference %r: %s', reference_id, e)
            raise ValidationError(_('AuthorizeNetAcceptjs.!error.reference_id.valid'), field='reference_id')

        if not (reference.profile_id.isdigit() and reference.payment_profile_id.isdigit()):
            raise ValidationError(_('AuthorizeNetAcceptjs.!error.reference_id.valid'), field='reference_id')
        return reference

    def _unsupported(self):
        raise UnsupportedOperationError(_('AuthorizeNetAcceptjs.!error.unsupported'))

    ####################################################################
    # Settings
    ####################################################################

    def get_settings(self, meta=None):
        return {
            'apis': {
                'aim': _('AuthorizeNetAcceptjs.apis_aim'),
                'cim': _('AuthorizeNetAcceptjs.apis_cim'),
            },
            'validation_modes': {
                'none': _('AuthorizeNetAcceptjs.validation_modes_none'),
                'testMode': _('AuthorizeNetAcceptjs.validation_modes_test'),
                'liveMode': _('AuthorizeNetAcceptjs.validation_modes_live'),
            },
            'labels': {
                'login_id': _('AuthorizeNetAcceptjs.login_id'),
                'transaction_key': _('AuthorizeNetAcceptjs.transaction_key'),
                'validation_mode': _('AuthorizeNetAcceptjs.validation_mode'),
                'sandbox': _('AuthorizeNetAcceptjs.sandbox'),
            },
            'meta': meta if meta is not None else self.meta,
        }

    def edit_settings(self, meta, validate_connection=True):
        self._errors = {}
        connection_check = self.validate_connection if validate_connection else None

        meta, errors = validate_settings(meta, connection_check)
        if errors:
            self._set_errors(errors)
        return meta

    configure = edit_settings

    def validate_connection(self, login_id, transaction_key, sandbox=False):
        self._errors = {}
        client =self.client_factory(Configuration.configure(login_id, transaction_key, sandbox), ApiType.CIM)
        try:
            response = self._send(client, {'sandbox': sandbox}, client.authenticate_test)
        except RemoteError as e:
            _logger.warning('Could not connect to Authorize.net: %s', e.message)
            return False
        return is_ok(response)

    def encryptable_fields(self):
        return list(ENCRYPTABLE_FIELDS)

    sensitive_fields = encryptable_fields

    def requires_customer_present(self):
        return False

    def requires_cc_storage(self):
        return self.meta.get('api') == 'cim'

    ####################################################################
    # Card form
    ####################################################################

    def build_cc_form(self):
        self._errors = {}
        this_year = datetime.date.today().year
        expiration = {
            'months': dict(('%02d' % month, calendar.month_name[month]) for month in range(1, 13)),
            'years': dict((str(year), str(year)) for year in range(this_year, this_year + 11)),
        }

        # Accept.js needs the public client key alongside the login id
        client_key = ''
        environment = Environment.from_sandbox(self.meta.get('sandbox') == 'true')
        client = self.clients.get(ApiType.CIM)
        if client is not None:
            environment = client.environment
            try:
                response = self._send(client, {}, client.merchant_details)
                client_key = text(getattr(response, 'publicClientKey', None)) or ''
            except RemoteError as e:
                _logger.warning('Could not fetch the Accept.js client key: %s', e.message)

        return {
            'meta': self.meta,
            'expiration': expiration,
            'client_key': client_key,
            'accept_js_url': Environment.accept_js_url(environment),
            'labels': {
                'number': _('AuthorizeNetAcceptjs.field_number'),
                'security': _('AuthorizeNetAcceptjs.field_security'),
                'expiration': _('AuthorizeNetAcceptjs.field_expiration'),
            },
        }

    def build_payment_confirmation(self, reference_id, transaction_id, amount):
        return {
            'meta': self.meta,
            'reference_id': reference_id,
            'transaction_id': transaction_id,
            'amount': amount,
        }

    ####################################################################
    # Credit card operations
    ####################################################################

    @gateway_operation('charge')
    def process_cc(self, card_info, amount, invoice_amounts=None):
        return self.process_stored_cc(None, card_info.get('reference_id'), amount, invoice_amounts)

    @gateway_operation('authorize')
    def authorize_cc(self, card_info, amount, invoice_amounts=None):
        client = self._client(ApiType.ACCEPT)
        token = OpaqueToken.parse(card_info.get('reference_id'))

        opaque_data = apicontractsv1.opaqueDataType()
        opaque_data.dataDescriptor = token.data_descriptor
        opaque_data.dataValue = token.data_value

        payment = apicontractsv1.paymentType()
        payment.opaqueData = opaque_data

        payment_profile = apicontractsv1.customerPaymentProfileType()
        payment_profile.customerType = 'individual'
        payment_profile.billTo = build_customer_address(card_info)
        payment_profile.payment = payment

        name = ('%s %s' % (card_info.get('first_name') or '', card_info.get('last_name') or '')).strip()
        merchant_customer_id = 'M_%d' % int(time.time())

        profile = apicontractsv1.customerProfileType()
        profile.description = name
        profile.merchantCustomerId = merchant_customer_id
        profile.paymentProfiles.append(payment_profile)
        profile.shipToList.append(build_customer_address(card_info))

        ref_tag = profile_reference_tag(card_info.get('reference_id'))
        params = {
            'ref_id': ref_tag,
            'amount': str(amount),
            'description': name,
            'merchant_customer_id': merchant_customer_id,
            'bill_to': address_params(card_info),
        }
        response = self._send(client, params, client.create_customer_profile, profile, ref_tag)

        if not is_ok(response):
            return TransactionResult('declined', message=response_message(response)).to_dict()

        reference = ProfileReference(
            ref_tag,
            text(getattr(response, 'customerProfileId', None)) or '',
            first_payment_profile_id(response),
        )
        return TransactionResult('pending', reference.encode(), None, response_message(response)).to_dict()

    @gateway_operation('capture')
    def capture_cc(self, reference_id, transaction_id, amount, invoice_amounts=None):
        client = self._client(ApiType.ACCEPT)
        reference = self._decode_reference(reference_id)

        payment_profile = apicontractsv1.paymentProfile()
        payment_profile.paymentProfileId = reference.payment_profile_id

        profile = apicontractsv1.customerProfilePaymentType()
        profile.customerProfileId = reference.profile_id
        profile.paymentProfile = payment_profile

        description = charge_description(invoice_amounts, self.invoice_lookup)
        order = apicontractsv1.orderType()
        order.description = truncate(description, MAX_ORDER_DESCRIPTION_LENGTH)

        transaction = apicontractsv1.transactionRequestType()
        transaction.transactionType = 'authCaptureTransaction'
        transaction.amount = format_amount(amount)
        if self.currency:
            transaction.currencyCode = self.currency
        transaction.profile = profile
        transaction.order = order

        ref_id = self._ref_id(reference_id)
        params = {
            'ref_id': ref_id,
            'amount': str(amount),
            'currency': self.currency,
            'description': description,
            'profile_id': reference.profile_id,
            'payment_profile_id': reference.payment_profile_id,
        }
        response = self._send(client, params, client.create_transaction, transaction, ref_id)

        transaction_response = getattr(response, 'transactionResponse', None)
        return TransactionResult(
            'approved' if is_ok(response) else 'declined',
            reference_id,
            text(getattr(transaction_response, 'transId', None)),
            transaction_message(response),
        ).to_dict()

    @gateway_operation('void')
    def void_cc(self, reference_id, transaction_id):
        self._unsupported()

    @gateway_operation('refund')
    def refund_cc(self, reference_id, transaction_id, amount):
        client = self._client(ApiType.ACCEPT)

        # Refunds must quote the card the original charge was made on
        details = self._send(client, {'transaction_id': transaction_id}, client.transaction_details, transaction_id)
        try:
            masked_card = details.transaction.payment.creditCard
            card_number = text(masked_card.cardNumber)
            expiration_date = text(masked_card.expirationDate)
        except AttributeError:
            raise RemoteError('Transaction %s was not paid by credit card' % transaction_id)

        credit_card = apicontractsv1.creditCardType()
        credit_card.cardNumber = card_number
        credit_card.expirationDate = expiration_date

        payment = apicontractsv1.paymentType()
        payment.creditCard = credit_card

        transaction = apicontractsv1.transactionRequestType()
        transaction.transactionType = 'refundTransaction'
        transaction.amount = format_amount(amount)
        if self.currency:
            transaction.currencyCode = self.currency
        transaction.payment = payment
        transaction.refTransId = transaction_id

        ref_id = self._ref_id(reference_id)
        params = {
            'ref_id': ref_id,
            'amount': str(amount),
            'currency': self.currency,
            'ref_trans_id': transaction_id,
            'credit_card': {'card_number': card_number, 'expirationDate': expiration_date},
        }
        response = self._send(client, params, client.create_transaction, transaction, ref_id)

        return TransactionResult(
            'refunded' if is_ok(response) else 'error',
            reference_id,
            transaction_id,
            transaction_message(response),
        ).to_dict()

    ####################################################################
    # Stored credit card operations
    ####################################################################

    @gateway_operation('store')
    def store_cc(self, card_info, contact, client_reference_id=None):
        self._unsupported()

    @gateway_operation('update')
    def update_cc(self, card_info, contact, client_reference_id, account_reference_id):
        self._unsupported()

    @gateway_operation('remove')
    def remove_cc(self, client_reference_id, account_reference_id):
        self._unsupported()

    @gateway_operation('charge')
    def process_stored_cc(self, client_reference_id, account_reference_id, amount, invoice_amounts=None):
        self._unsupported()

    @gateway_operation('authorize')
    def authorize_stored_cc(self, client_reference_id, account_reference_id, amount, invoice_amounts=None):
        self._unsupported()

    @gateway_operation('capture')
    def capture_stored_cc(self, client_reference_id, account_reference_id, transaction_reference_id,
                          transaction_id, amount, invoice_amounts=None):
        self._unsupported()

    def void_stored_cc(self, client_reference_id, account_reference_id, transaction_reference_id, transaction_id):
        return self.void_cc(transaction_reference_id, transaction_id)

    def refund_stored_cc(self, client_reference_id, account_reference_id, transaction_reference_id,
                         transaction_id, amount):
        return self.refund_cc(transaction_reference_id, transaction_id, amount)
