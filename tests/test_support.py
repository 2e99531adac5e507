import os
import tempfile
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator
from unittest import mock

from swissqr.core.models import (
    AlternativeProcedure,
    BillInformation,
    CombinedAddress,
    Entity,
    PaymentAmount,
    PaymentCondition,
    PaymentInformation,
    PaymentRecord,
    StructuredAddress,
    TaxRate,
    account_or_die,
    one_date,
    qr_reference_or_die,
)

# =============================================================================
# Test Constants
# =============================================================================

TEST_IBAN = "CH5604835012345678009"
TEST_QR_IBAN = "CH4431999123000889012"
TEST_QR_REFERENCE = "210000000003139471430009017"
TEST_CREDITOR_REFERENCE = "RF8312345678912345678912"

LOREM_LINES = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit,",
    "sed do eiusmod tempor incididunt ut labore et dolore magna aliqua.",
)

# =============================================================================
# Payment Records
# =============================================================================

MINIMAL_ENTITY = Entity(
    name="Test Creditor",
    address=CombinedAddress(line2="Test Address"),
    country_code="CH",
)

MINIMAL_PAYMENT = PaymentRecord(
    account=account_or_die(TEST_IBAN),
    creditor=MINIMAL_ENTITY,
    amount=PaymentAmount(currency="CHF"),
)

# Examples 1-3 of the Swiss Implementation Guidelines for the QR-bill.
EXAMPLE_PAYMENT_1 = PaymentRecord(
    account=account_or_die("CH5800791123000889012"),
    creditor=Entity(
        name="Robert Schneider AG",
        address=StructuredAddress(
            street="Rue du Lac",
            building_number="1268",
            post_code="2501",
            town="Biel",
        ),
        country_code="CH",
    ),
    amount=PaymentAmount(currency="CHF", amount=3949.75),
    ultimate_debtor=Entity(
        name="Pia Rutschmann",
        address=StructuredAddress(
            street="Marktgasse",
            building_number="28",
            post_code="9400",
            town="Rorschach",
        ),
        country_code="CH",
    ),
    information=PaymentInformation(
        unstructured_message=(
            "Rechnung Nr. 3139 für Gartenarbeiten und Entsorgung Schnittmaterial"
        ),
    ),
)

EXAMPLE_BILL_INFORMATION = BillInformation(
    invoice_number="10201409",
    invoice_date=one_date(2019, 5, 12),
    customer_reference="1400.000-53",
    vat_number="106017086",
    vat_dates=one_date(2018, 5, 8),
    vat_rates=(TaxRate(rate_percent=7.7),),
    conditions=(
        PaymentCondition(discount_percent=2, days=10),
        PaymentCondition(discount_percent=0, days=30),
    ),
)

EXAMPLE_PAYMENT_2 = PaymentRecord(
    account=account_or_die(TEST_QR_IBAN),
    creditor=EXAMPLE_PAYMENT_1.creditor,
    amount=PaymentAmount(currency="CHF", amount=1949.75),
    ultimate_debtor=Entity(
        name="Pia-Maria Rutschmann-Schnyder",
        address=StructuredAddress(
            street="Grosse Marktgasse",
            building_number="28",
            post_code="9400",
            town="Rorschach",
        ),
        country_code="CH",
    ),
    reference=qr_reference_or_die(TEST_QR_REFERENCE),
    information=PaymentInformation(
        unstructured_message="Auftrag vom 18.06.2020",
        bill_information=EXAMPLE_BILL_INFORMATION,
    ),
    alternative_procedures=(
        AlternativeProcedure(label="Name AV1", procedure="UV;UltraPay005;12345"),
        AlternativeProcedure(label="Name AV2", procedure="XY;XYService;54321"),
    ),
)

EXAMPLE_PAYMENT_3 = PaymentRecord(
    account=account_or_die("CH3709000000304442225"),
    creditor=Entity(
        name="Salvation Army Foundation Switzerland",
        address=StructuredAddress(post_code="3000", town="Bern"),
        country_code="CH",
    ),
    amount=PaymentAmount(currency="CHF"),
    information=PaymentInformation(unstructured_message="Donation to the Winterfest Campaign"),
)

EXAMPLE_INVOICE_TOML = """
account = "CH44 3199 9123 0008 8901 2"
reference = "21 00000 00003 13947 14300 09017"

[creditor]
name = "Robert Schneider AG"
street = "Rue du Lac"
building_number = "1268"
post_code = "2501"
town = "Biel"
country = "CH"

[amount]
currency = "CHF"
value = 1949.75

[debtor]
name = "Pia-Maria Rutschmann-Schnyder"
street = "Grosse Marktgasse"
building_number = "28"
post_code = "9400"
town = "Rorschach"
country = "CH"

[information]
message = "Auftrag vom 18.06.2020"

[information.bill]
invoice_number = "10201409"
invoice_date = 2019-05-12
customer_reference = "1400.000-53"
vat_number = "106017086"
vat_start_date = 2018-05-08
vat_rates = [{ rate = 7.7 }]
conditions = [{ discount = 2, days = 10 }, { discount = 0, days = 30 }]

[[alternative_procedures]]
label = "Name AV1"
procedure = "UV;UltraPay005;12345"

[[alternative_procedures]]
label = "Name AV2"
procedure = "XY;XYService;54321"
"""


def with_payment(record: PaymentRecord, **changes: object) -> PaymentRecord:
    return replace(record, **changes)


# =============================================================================
# Environment Helpers
# =============================================================================


def build_cli_env(*, overrides: dict[str, str] | None = None) -> dict[str, str]:
    env = os.environ.copy()
    src_root = str(Path(__file__).resolve().parents[1] / "src")
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = src_root if not existing else os.pathsep.join((src_root, existing))
    if overrides:
        env.update(overrides)
    return env


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield


@contextmanager
def temp_invoice(content: str = EXAMPLE_INVOICE_TOML) -> Generator[Path, None, None]:
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "invoice.toml"
        path.write_text(content, encoding="utf-8")
        yield path
