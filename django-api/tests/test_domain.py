"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from tickets.domain import (
    AccountId,
    ErrorCode,
    InvalidAccountIdError,
    Money,
    PurchasePolicy,
    PurchaseTotals,
    Quantity,
    TicketLimitExceededError,
    TicketType,
    TicketTypeRequest,
)


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(25).amount == 25

    def test_money_accepts_zero(self):
        assert Money.zero() == Money(0)

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(-1)

    def test_money_adds_and_multiplies(self):
        assert Money(25).times(2) + Money(15) == Money(65)

    def test_money_str_format(self):
        assert str(Money(40)) == "40"


class TestAccountId:
    """Tests for AccountId value object."""

    def test_accepts_positive_integer(self):
        assert int(AccountId(7)) == 7

    @pytest.mark.parametrize("value", [0, -1, None, "7", True, 1.5])
    def test_rejects_non_positive_or_non_integer(self, value):
        with pytest.raises(ValueError):
            AccountId(value)


class TestQuantity:
    """Tests for Quantity value object."""

    def test_quantity_accepts_zero(self):
        assert Quantity(0).value == 0

    def test_quantity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Quantity(-3)


class TestTicketTypeRequest:
    """Tests for TicketTypeRequest line items."""

    def test_is_immutable(self):
        request = TicketTypeRequest(TicketType.ADULT, 2)
        with pytest.raises(AttributeError):
            request.quantity = 3

    def test_rejects_negative_quantity(self):
        with pytest.raises(ValueError):
            TicketTypeRequest(TicketType.CHILD, -1)

    def test_rejects_unknown_ticket_type(self):
        with pytest.raises(ValueError):
            TicketTypeRequest("SENIOR", 1)


class TestPurchaseTotals:
    """Tests for PurchaseTotals."""

    def test_total_tickets_sums_every_type(self):
        totals = PurchaseTotals(
            quantities={TicketType.ADULT: 2, TicketType.CHILD: 1, TicketType.INFANT: 3},
            total_amount=Money(65),
            total_seats=3,
        )

        assert totals.total_tickets == 6
        assert totals.quantity_of(TicketType.INFANT) == 3

    def test_missing_type_counts_as_zero(self):
        assert PurchaseTotals().quantity_of(TicketType.CHILD) == 0


class TestPurchasePolicy:
    """Tests for PurchasePolicy configuration."""

    def test_default_prices_and_seating(self):
        policy = PurchasePolicy()

        assert policy.max_tickets == 25
        assert policy.unit_price(TicketType.ADULT) == Money(25)
        assert policy.unit_price(TicketType.CHILD) == Money(15)
        assert policy.unit_price(TicketType.INFANT) == Money(0)
        assert policy.occupies_seat(TicketType.ADULT)
        assert policy.occupies_seat(TicketType.CHILD)
        assert not policy.occupies_seat(TicketType.INFANT)

    def test_every_ticket_type_needs_a_price(self):
        with pytest.raises(ValueError, match="INFANT"):
            PurchasePolicy(prices={TicketType.ADULT: Money(25), TicketType.CHILD: Money(15)})

    @pytest.mark.parametrize("max_tickets", [0, -5])
    def test_rejects_non_positive_max(self, max_tickets):
        with pytest.raises(ValueError):
            PurchasePolicy(max_tickets=max_tickets)

    def test_from_config_overrides_named_prices(self):
        policy = PurchasePolicy.from_config(max_tickets=10, prices={"child": 12})

        assert policy.max_tickets == 10
        assert policy.unit_price(TicketType.CHILD) == Money(12)
        assert policy.unit_price(TicketType.ADULT) == Money(25)

    def test_from_config_rejects_unknown_type(self):
        with pytest.raises(ValueError, match="SENIOR"):
            PurchasePolicy.from_config(prices={"SENIOR": 10})

    def test_from_config_rejects_negative_price(self):
        with pytest.raises(ValueError):
            PurchasePolicy.from_config(prices={"ADULT": -1})

    def test_prices_must_be_money(self):
        with pytest.raises(ValueError, match="ADULT, CHILD"):
            PurchasePolicy(
                prices={TicketType.ADULT: 25, TicketType.CHILD: 15, TicketType.INFANT: Money(0)}
            )

    def test_from_config_rejects_non_string_keys(self):
        with pytest.raises(ValueError, match="ticket type names"):
            PurchasePolicy.from_config(prices={TicketType.ADULT: 30})


class TestDomainErrors:
    """Tests for purchase errors."""

    def test_error_carries_code_and_message(self):
        error = InvalidAccountIdError()

        assert error.code is ErrorCode.INVALID_ACCOUNT_ID
        assert error.message == "Account ID is not valid."
        assert str(error) == "INVALID_ACCOUNT_ID: Account ID is not valid."

    def test_limit_message_uses_configured_max(self):
        error = TicketLimitExceededError(max_tickets=10, requested=11)

        assert error.message == "Cannot purchase more than 10 tickets at a time."
        assert error.requested == 11
