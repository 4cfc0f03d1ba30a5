# -*- coding: utf-8 -*-

import datetime

from payment_authorize_acceptjs import AuthorizeNetAcceptjs
from payment_authorize_acceptjs.lib.acceptjs import ApiType, Environment, RemoteError
from payment_authorize_acceptjs.models.interfaces import MerchantCc, MerchantCcForm, MerchantCcOffsite

from conftest import META, error_response, ok_response


class TestSetup:

    def test_implements_host_capabilities(self, gateway):
        assert isinstance(gateway, MerchantCc)
        assert isinstance(gateway, MerchantCcOffsite)
        assert isinstance(gateway, MerchantCcForm)

    def test_clients_built_when_meta_is_set(self, gateway, client):
        assert client.api_types == [ApiType.ACCEPT, ApiType.CIM]
        assert client.validation_modes == ['none', None]
        assert client.configuration.credentials == ('api-login', 'trans-key', True)
        assert client.environment == Environment.TEST

    def test_without_meta_no_clients(self, client_factory, client):
        gateway = AuthorizeNetAcceptjs(client_factory=client_factory)

        assert gateway.clients == {}
        assert client.api_types == []

    def test_encryptable_fields(self, gateway):
        assert gateway.encryptable_fields() == ['login_id', 'transaction_key']
        assert gateway.sensitive_fields() == ['login_id', 'transaction_key']

    def test_requires_cc_storage_only_for_cim(self, gateway):
        assert gateway.requires_cc_storage()

        gateway.set_meta(dict(META, api='aim'))

        assert not gateway.requires_cc_storage()
        assert not gateway.requires_customer_present()

    def test_name(self, gateway):
        assert gateway.get_name() == 'Authorize.Net Accept.js'
        assert 'Accept.js' in gateway.get_description()


class TestEditSettings:

    def test_valid_settings_pass_connection_check(self, gateway, client):
        client.responses['authenticate_test'] = ok_response()

        meta = gateway.edit_settings({'login_id': 'new-login', 'transaction_key': 'new-key'})

        assert gateway.errors() is None
        assert meta == {'login_id': 'new-login', 'transaction_key': 'new-key', 'sandbox': 'false'}
        assert client.call_names() == ['authenticate_test']
        assert client.configuration.credentials == ('new-login', 'new-key', False)
        assert client.environment == Environment.PRODUCTION

    def test_rejected_credentials(self, gateway, client):
        client.responses['authenticate_test'] = error_response('User authentication failed due to invalid authentication values.', 'E00007')

        gateway.configure({'login_id': 'bad', 'transaction_key': 'bad', 'sandbox': 'true'})

        assert gateway.errors() == {
            'login_id': {'valid': 'Unable to connect to the Authorize.net API using the given Login ID.'}}

    def test_unreachable_gateway(self, gateway, client):
        client.responses['authenticate_test'] = RemoteError('Name or service not known')

        gateway.configure({'login_id': 'id', 'transaction_key': 'key'})

        assert 'valid' in gateway.errors()['login_id']

    def test_empty_credentials_skip_connection_check(self, gateway, client):
        gateway.edit_settings({'login_id': '', 'transaction_key': '', 'sandbox': 'maybe'})

        assert set(gateway.errors()) == {'login_id', 'transaction_key', 'sandbox'}
        assert client.calls == []

    def test_connection_check_logged_as_successful(self, gateway, client, gateway_log):
        gateway.void_cc('ref', '60001')
        client.responses['authenticate_test'] = ok_response()

        assert gateway.validate_connection('id', 'key', True)
        assert gateway_log.entries[-1][2:] == ('output', True)

    def test_connection_check_can_be_skipped(self, gateway, client):
        gateway.edit_settings({'login_id': 'id', 'transaction_key': 'key'}, validate_connection=False)

        assert gateway.errors() is None
        assert client.calls == []

    def test_get_settings(self, gateway):
        settings = gateway.get_settings()

        assert settings['apis'] == {'aim': 'AIM', 'cim': 'CIM'}
        assert list(settings['validation_modes']) == ['none', 'testMode', 'liveMode']
        assert settings['meta'] == META


class TestCardForm:

    def test_client_key_from_merchant_details(self, gateway, client):
        client.responses['merchant_details'] = ok_response(publicClientKey='5FcB6WrfHGS76gHW3v7btBCE3HuuBuke9Pj96Ztfn5R32G5ep42vne7MCWZtAucY')

        form = gateway.build_cc_form()

        assert form['client_key'].startswith('5FcB6Wrf')
        assert form['accept_js_url'] == 'https://jstest.authorize.net/v1/Accept.js'
        assert form['meta'] == META
        assert client.call_names() == ['merchant_details']

    def test_expiration_ranges(self, gateway, client):
        client.responses['merchant_details'] = ok_response(publicClientKey='key')
        this_year = datetime.date.today().year

        expiration = gateway.build_cc_form()['expiration']

        assert list(expiration['months']) == ['%02d' % month for month in range(1, 13)]
        assert list(expiration['years']) == [str(year) for year in range(this_year, this_year + 11)]

    def test_client_key_unavailable(self, gateway, client):
        client.responses['merchant_details'] = RemoteError('timed out')

        form = gateway.build_cc_form()

        assert form['client_key'] == ''
        assert gateway.errors() is None

    def test_earlier_errors_do_not_mark_lookup_failed(self, gateway, client, gateway_log):
        gateway.void_cc('ref', '60001')
        client.responses['merchant_details'] = ok_response(publicClientKey='key')

        gateway.build_cc_form()

        assert gateway.errors() is None
        assert gateway_log.entries[-1][2:] == ('output', True)

    def test_production_library(self, gateway, client):
        gateway.set_meta(dict(META, sandbox='false'))
        client.responses['merchant_details'] = ok_response(publicClientKey='key')

        assert gateway.build_cc_form()['accept_js_url'] == 'https://js.authorize.net/v1/Accept.js'

    def test_payment_confirmation(self, gateway):
        confirmation = gateway.build_payment_confirmation('ref', '60001', 10)

        assert confirmation['transaction_id'] == '60001'
        assert confirmation['meta'] == META
