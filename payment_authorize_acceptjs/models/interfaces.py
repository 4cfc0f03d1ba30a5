# -*- coding: utf-8 -*-

from abc import ABC, abstractmethod


class MerchantCc(ABC):
    """Gateways that charge cards directly."""

    @abstractmethod
    def process_cc(self, card_info, amount, invoice_amounts=None):
        pass

    @abstractmethod
    def authorize_cc(self, card_info, amount, invoice_amounts=None):
        pass

    @abstractmethod
    def capture_cc(self, reference_id, transaction_id, amount, invoice_amounts=None):
        pass

    @abstractmethod
    def void_cc(self, reference_id, transaction_id):
        pass

    @abstractmethod
    def refund_cc(self, reference_id, transaction_id, amount):
        pass


class MerchantCcOffsite(ABC):
    """Gateways that keep card data on their own servers."""

    @abstractmethod
    def requires_cc_storage(self):
        pass

    @abstractmethod
    def store_cc(self, card_info, contact, client_reference_id=None):
        pass

    @abstractmethod
    def update_cc(self, card_info, contact, client_reference_id, account_reference_id):
        pass

    @abstractmethod
    def remove_cc(self, client_reference_id, account_reference_id):
        pass

    @abstractmethod
    def process_stored_cc(self, client_reference_id, account_reference_id, amount, invoice_amounts=None):
        pass

    @abstractmethod
    def authorize_stored_cc(self, client_reference_id, account_reference_id, amount, invoice_amounts=None):
        pass

    @abstractmethod
    def capture_stored_cc(self, client_reference_id, account_reference_id, transaction_reference_id,
                          transaction_id, amount, invoice_amounts=None):
        pass

    @abstractmethod
    def void_stored_cc(self, client_reference_id, account_reference_id, transaction_reference_id, transaction_id):
        pass

    @abstractmethod
    def refund_stored_cc(self, client_reference_id, account_reference_id, transaction_reference_id,
                         transaction_id, amount):
        pass


class MerchantCcForm(ABC):
    """Gateways that render their own card capture form."""

    @abstractmethod
    def build_cc_form(self):
        pass

    @abstractmethod
    def build_payment_confirmation(self, reference_id, transaction_id, amount):
        pass
