# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import copy
import math
import unittest
from dataclasses import dataclass

from swissqr.core.errors import (
    AccountError,
    CharacterSetError,
    CrossFieldError,
    FieldError,
    PayloadError,
    UnsupportedAddressError,
    UnsupportedReferenceError,
)
from swissqr.core.models import (
    AlternativeProcedure,
    BillInformation,
    CombinedAddress,
    Entity,
    PaymentAmount,
    PaymentCondition,
    PaymentInformation,
    StructuredAddress,
    TaxRate,
    account_or_die,
    creditor_reference_or_die,
    date_range,
    one_date,
    qr_reference_or_die,
)
from swissqr.core.validation import (
    is_valid_payment,
    validate_amount,
    validate_bill_information,
    validate_entity,
    validate_payment,
    validate_structured_address,
)
from test_support import (
    EXAMPLE_PAYMENT_1,
    EXAMPLE_PAYMENT_2,
    EXAMPLE_PAYMENT_3,
    MINIMAL_ENTITY,
    MINIMAL_PAYMENT,
    TEST_CREDITOR_REFERENCE,
    TEST_IBAN,
    TEST_QR_IBAN,
    TEST_QR_REFERENCE,
    with_payment,
)


@dataclass(frozen=True)
class _OtherAddress:
    line: str = ""


@dataclass(frozen=True)
class _OtherReference:
    number: str = ""


class TestValidatePayment(unittest.TestCase):
    def test_valid_records(self) -> None:
        for name, record in (
            ("minimal", MINIMAL_PAYMENT),
            ("example1", EXAMPLE_PAYMENT_1),
            ("example2", EXAMPLE_PAYMENT_2),
            ("example3", EXAMPLE_PAYMENT_3),
        ):
            with self.subTest(name=name):
                validate_payment(record)
                self.assertTrue(is_valid_payment(record))

    def test_validation_is_repeatable(self) -> None:
        # A QR reference needs a QR-IBAN.
        invalid = with_payment(EXAMPLE_PAYMENT_2, account=account_or_die(TEST_IBAN))
        for name, record, valid in (
            ("valid", EXAMPLE_PAYMENT_2, True),
            ("invalid", invalid, False),
        ):
            with self.subTest(name=name):
                before = copy.deepcopy(record)
                outcomes = []
                for _ in range(2):
                    try:
                        validate_payment(record)
                    except PayloadError as exc:
                        outcomes.append((type(exc), str(exc)))
                    else:
                        outcomes.append(None)
                self.assertEqual(outcomes[0], outcomes[1])
                self.assertEqual(outcomes[0] is None, valid)
                self.assertEqual(record, before)

    def test_creditor_required(self) -> None:
        record = with_payment(MINIMAL_PAYMENT, creditor=Entity())
        with self.assertRaises(FieldError) as ctx:
            validate_payment(record)
        self.assertEqual(str(ctx.exception), "no creditor name specified")
        self.assertFalse(is_valid_payment(record))

    def test_ultimate_creditor_not_supported(self) -> None:
        record = with_payment(MINIMAL_PAYMENT, ultimate_creditor=MINIMAL_ENTITY)
        with self.assertRaises(CrossFieldError) as ctx:
            validate_payment(record)
        self.assertIn("ultimate creditor is currently not supported", str(ctx.exception))

    def test_account_required(self) -> None:
        record = with_payment(MINIMAL_PAYMENT, account=None)
        with self.assertRaises(AccountError):
            validate_payment(record)

    def test_foreign_account_rejected(self) -> None:
        record = with_payment(MINIMAL_PAYMENT, account=account_or_die("DE89370400440532013000"))
        with self.assertRaises(AccountError) as ctx:
            validate_payment(record)
        self.assertIn("only CH and LI accounts allowed", str(ctx.exception))

    def test_reference_must_match_account(self) -> None:
        qr_reference = qr_reference_or_die(TEST_QR_REFERENCE)
        creditor_reference = creditor_reference_or_die(TEST_CREDITOR_REFERENCE)
        cases = (
            (TEST_QR_IBAN, None, "QR reference number required for QR-IBAN"),
            (TEST_QR_IBAN, creditor_reference, "QR reference number required for QR-IBAN"),
            (TEST_QR_IBAN, qr_reference, None),
            (TEST_IBAN, None, None),
            (TEST_IBAN, creditor_reference, None),
            (TEST_IBAN, qr_reference, "QR reference not allowed for IBAN"),
        )
        for account, reference, message in cases:
            with self.subTest(account=account, reference=reference):
                record = with_payment(
                    MINIMAL_PAYMENT,
                    account=account_or_die(account),
                    reference=reference,
                )
                if message is None:
                    validate_payment(record)
                    continue
                with self.assertRaises(CrossFieldError) as ctx:
                    validate_payment(record)
                self.assertIn(message, str(ctx.exception))

    def test_unknown_reference_type(self) -> None:
        record = with_payment(MINIMAL_PAYMENT, reference=_OtherReference("x"))
        with self.assertRaises(UnsupportedReferenceError):
            validate_payment(record)

    def test_alternative_procedures(self) -> None:
        procedure = AlternativeProcedure(label="Name AV1", procedure="UV;UltraPay005;12345")
        cases = (
            ((procedure, procedure), None),
            ((procedure, procedure, procedure), CrossFieldError),
            ((AlternativeProcedure(label="", procedure="x"),), FieldError),
            ((AlternativeProcedure(label="x", procedure=""),), FieldError),
            ((AlternativeProcedure(label="x", procedure="p" * 101),), FieldError),
            ((AlternativeProcedure(label="sær", procedure="x"),), CharacterSetError),
        )
        for procedures, error in cases:
            with self.subTest(procedures=procedures):
                record = with_payment(MINIMAL_PAYMENT, alternative_procedures=procedures)
                if error is None:
                    validate_payment(record)
                else:
                    with self.assertRaises(error):
                        validate_payment(record)

    def test_information_length_limit(self) -> None:
        cases = (("m" * 140, True), ("m" * 141, False))
        for message, valid in cases:
            with self.subTest(length=len(message)):
                record = with_payment(
                    MINIMAL_PAYMENT,
                    information=PaymentInformation(unstructured_message=message),
                )
                self.assertIs(is_valid_payment(record), valid)

    def test_information_limit_counts_bill_information(self) -> None:
        # "//S1/10/" plus 20 characters.
        bill = BillInformation(invoice_number="n" * 20)
        cases = (("m" * 112, True), ("m" * 113, False))
        for message, valid in cases:
            with self.subTest(length=len(message)):
                record = with_payment(
                    MINIMAL_PAYMENT,
                    information=PaymentInformation(
                        unstructured_message=message,
                        bill_information=bill,
                    ),
                )
                self.assertIs(is_valid_payment(record), valid)

    def test_errors_share_a_base_class(self) -> None:
        for error in (AccountError, CharacterSetError, CrossFieldError, UnsupportedAddressError):
            with self.subTest(error=error.__name__):
                self.assertTrue(issubclass(error, PayloadError))
                self.assertTrue(issubclass(error, ValueError))


class TestValidateEntity(unittest.TestCase):
    def test_entity_cases(self) -> None:
        combined = CombinedAddress(line2="8000 Zürich")
        cases = (
            (Entity(), None, ""),
            (Entity(name="Name"), FieldError, "country code must be specified for name"),
            (Entity(name="Name", country_code="CH"), UnsupportedAddressError, ""),
            (
                Entity(name="Name", address=_OtherAddress("x"), country_code="CH"),
                UnsupportedAddressError,
                "unsupported address type",
            ),
            (
                Entity(
                    name="Name",
                    address=StructuredAddress(post_code="8000", town="Zürich"),
                    country_code="CH",
                ),
                None,
                "",
            ),
            (Entity(name="Name", address=combined, country_code="CH"), None, ""),
            (
                Entity(name="Næjm", address=combined, country_code="CH"),
                CharacterSetError,
                "U+00E6 'æ'",
            ),
            (
                Entity(name="Name" * 18, address=combined, country_code="CH"),
                FieldError,
                "maximum name length is 70 characters",
            ),
            (
                Entity(name="Name", address=combined, country_code="CHE"),
                FieldError,
                "country should be given as two-letter code",
            ),
            (
                Entity(name="Name", address=combined, country_code="рф"),
                FieldError,
                "invalid country code",
            ),
            (
                Entity(address=combined, country_code="CH"),
                FieldError,
                "name must be specified",
            ),
        )
        for entity, error, message in cases:
            with self.subTest(entity=entity):
                if error is None:
                    validate_entity(entity)
                    continue
                with self.assertRaises(error) as ctx:
                    validate_entity(entity)
                self.assertIn(message, str(ctx.exception))

    def test_combined_address_requires_second_line(self) -> None:
        entity = Entity(name="Name", address=CombinedAddress(line1="Street 1"), country_code="CH")
        with self.assertRaises(FieldError) as ctx:
            validate_entity(entity)
        self.assertIn("address line 2 must be set", str(ctx.exception))

    def test_structured_address_cases(self) -> None:
        cases = (
            (StructuredAddress(), FieldError, "must specify post code and town"),
            (StructuredAddress(post_code="code", town="town"), None, ""),
            (
                StructuredAddress(
                    street="street", building_number="no", post_code="code", town="town"
                ),
                None,
                "",
            ),
            (
                StructuredAddress(
                    street="strĳt", building_number="no", post_code="code", town="town"
                ),
                CharacterSetError,
                "U+0133",
            ),
            (
                StructuredAddress(
                    street="street", building_number="nø", post_code="code", town="town"
                ),
                CharacterSetError,
                "U+00F8",
            ),
            (
                StructuredAddress(
                    street="street", building_number="no", post_code="cœde", town="town"
                ),
                CharacterSetError,
                "U+0153",
            ),
            (
                StructuredAddress(
                    street="street" * 12, building_number="no", post_code="code", town="town"
                ),
                FieldError,
                "maximum street name length is 70 characters",
            ),
            (
                StructuredAddress(
                    street="street",
                    building_number="12345678901234567",
                    post_code="code",
                    town="town",
                ),
                FieldError,
                "maximum building number length is 16 characters",
            ),
            (
                StructuredAddress(post_code="12345678901234567", town="town"),
                FieldError,
                "maximum post code length is 16 characters",
            ),
            (
                StructuredAddress(post_code="code", town="town" * 9),
                FieldError,
                "maximum town name length is 35 characters",
            ),
        )
        for address, error, message in cases:
            with self.subTest(address=address):
                if error is None:
                    validate_structured_address(address)
                    continue
                with self.assertRaises(error) as ctx:
                    validate_structured_address(address)
                self.assertIn(message, str(ctx.exception))


class TestValidateAmount(unittest.TestCase):
    def test_amount_cases(self) -> None:
        cases = (
            (PaymentAmount(currency="CHF"), None),
            (PaymentAmount(currency="EUR", amount=0.0), None),
            (PaymentAmount(currency="CHF", amount=999999999.99), None),
            (PaymentAmount(currency="CHF", amount=1000000000.0), "amount too large"),
            (PaymentAmount(currency="CHF", amount=-0.01), "amount cannot be negative"),
            (PaymentAmount(currency="USD", amount=1.0), "currency must be CHF or EUR"),
        )
        for amount, message in cases:
            with self.subTest(amount=amount):
                if message is None:
                    validate_amount(amount)
                    continue
                with self.assertRaises(FieldError) as ctx:
                    validate_amount(amount)
                self.assertIn(message, str(ctx.exception))

    def test_non_finite_amounts(self) -> None:
        for value in (math.nan, math.inf, -math.inf):
            with self.subTest(value=value):
                with self.assertRaises(FieldError) as ctx:
                    validate_amount(PaymentAmount(currency="CHF", amount=value))
                self.assertIn("amount must be a finite number", str(ctx.exception))
        with self.assertRaises(FieldError):
            validate_payment(
                with_payment(MINIMAL_PAYMENT, amount=PaymentAmount(currency="CHF", amount=math.inf))
            )


class TestValidateBillInformation(unittest.TestCase):
    def test_bill_information_cases(self) -> None:
        cases = (
            (BillInformation(), None),
            (BillInformation(invoice_date=date_range(2019, 1, 1, 2019, 1, 2)), "end date"),
            (BillInformation(vat_number="CHE-106.017.086"), "only contain digits"),
            (
                BillInformation(vat_dates=date_range(2018, 2, 27, 2018, 2, 26)),
                "end date must come after start date",
            ),
            (
                BillInformation(vat_dates=date_range(2018, 2, 26, 2018, 2, 26)),
                "end date must come after start date",
            ),
            (BillInformation(vat_dates=one_date(2018, 2, 26)), None),
            (BillInformation(vat_rates=(TaxRate(rate_percent=-1),)), "VAT rate may not"),
            (
                BillInformation(import_tax_rates=(TaxRate(rate_percent=7.7, amount=-1),)),
                "import tax amount may not",
            ),
            (
                BillInformation(conditions=(PaymentCondition(discount_percent=-2, days=10),)),
                "discount may not be negative",
            ),
            (
                BillInformation(conditions=(PaymentCondition(discount_percent=2, days=-10),)),
                "number of days may not be negative",
            ),
        )
        for info, message in cases:
            with self.subTest(info=info):
                if message is None:
                    validate_bill_information(info)
                    continue
                with self.assertRaises(FieldError) as ctx:
                    validate_bill_information(info)
                self.assertIn(message, str(ctx.exception))

    def test_non_finite_numbers(self) -> None:
        cases = (
            (BillInformation(vat_rates=(TaxRate(rate_percent=math.nan),)), "VAT rate"),
            (
                BillInformation(vat_rates=(TaxRate(rate_percent=7.7, amount=math.inf),)),
                "VAT rate",
            ),
            (
                BillInformation(import_tax_rates=(TaxRate(rate_percent=-math.inf),)),
                "import tax rate",
            ),
            (
                BillInformation(conditions=(PaymentCondition(discount_percent=math.nan, days=10),)),
                "discount must be a finite number",
            ),
        )
        for info, message in cases:
            with self.subTest(info=info):
                with self.assertRaises(FieldError) as ctx:
                    validate_bill_information(info)
                self.assertIn(message, str(ctx.exception))

    def test_invoice_number_character_set(self) -> None:
        with self.assertRaises(CharacterSetError):
            validate_bill_information(BillInformation(invoice_number="nø"))


if __name__ == "__main__":
    unittest.main()
