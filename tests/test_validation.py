import unittest

from autocare_console.errors import ValidationFailed
from autocare_console.schemas import (
    CreateTransaction, JobOptionFormData, LabourLine, PartLine, ServiceFormData, SparePart, VendorDto,
)
from autocare_console.validation import (
    REQUIRED_FIELDS_MESSAGE, ensure_valid, is_blank, missing_fields, validate_job_option,
    validate_quotation_line, validate_record, validate_service, validate_sign_up, validate_spare_part,
    validate_transaction, validate_user, validate_vehicle_registration, validate_vendor,
)


class TestRequiredFields(unittest.TestCase):

    def test_is_blank(self):
        self.assertTrue(is_blank(None))
        self.assertTrue(is_blank("   "))
        self.assertFalse(is_blank("x"))
        self.assertFalse(is_blank(0))

    def test_missing_fields_on_dict_and_model(self):
        self.assertEqual(missing_fields({"a": "x", "b": ""}, ["a", "b", "c"]), ["b", "c"])
        self.assertEqual(missing_fields(JobOptionFormData(job_name="Wash"), ["job_name", "job_type"]), ["job_type"])

    def test_job_option(self):
        errors = validate_job_option(JobOptionFormData())

        self.assertEqual([e.field for e in errors], ["job_name", "job_type"])
        self.assertEqual(errors[0].message, REQUIRED_FIELDS_MESSAGE)
        self.assertEqual(validate_job_option(JobOptionFormData(job_name="Wash", job_type="Problem")), [])

    def test_ensure_valid_raises_first_message(self):
        with self.assertRaises(ValidationFailed) as ctx:
            ensure_valid(validate_job_option(JobOptionFormData()))

        self.assertEqual(str(ctx.exception), REQUIRED_FIELDS_MESSAGE)
        self.assertEqual(len(ctx.exception.errors), 2)

    def test_ensure_valid_passes(self):
        ensure_valid([])

    def test_vendor_and_vehicle_registration(self):
        self.assertEqual(len(validate_vendor(VendorDto(name="Bosch"))), 1)
        self.assertEqual(validate_vendor(VendorDto(name="Bosch", mobile_number="98450")), [])
        self.assertEqual(
            [e.field for e in validate_vehicle_registration({"vehicle_number": "KA01"})],
            ["customer_name", "customer_mobile_number"],
        )

    def test_validate_record_collects_all(self):
        errors = validate_record(
            {"name": "", "mobile_number": ""},
            [validate_vendor, lambda values: []],
        )

        self.assertEqual(len(errors), 2)


class TestServiceForm(unittest.TestCase):

    def test_rate_must_be_positive(self):
        self.assertEqual(len(validate_service(ServiceFormData(service_name="Wash", service_rate=0))), 1)

    def test_gst_may_be_zero(self):
        self.assertEqual(validate_service(ServiceFormData(service_name="Wash", service_rate=300)), [])

    def test_negative_gst(self):
        errors = validate_service(ServiceFormData(service_name="Wash", service_rate=300, total_gst=-1))

        self.assertEqual(errors[0].message, "Please enter a valid service name, rate and GST.")

    def test_blank_name(self):
        self.assertEqual(len(validate_service({"service_name": " ", "service_rate": 1, "total_gst": 0})), 1)


class TestTransactionForm(unittest.TestCase):

    def test_quantity_at_least_one(self):
        errors = validate_transaction(CreateTransaction(part_number="P-1", part_name="Filter", quantity=0))

        self.assertEqual([e.message for e in errors], ["Quantity must be at least 1"])

    def test_valid(self):
        self.assertEqual(validate_transaction(CreateTransaction(part_number="P-1", part_name="Filter")), [])

    def test_fractional_quantity(self):
        form = CreateTransaction(part_number="P-1", part_name="Filter", quantity="2.5")

        self.assertEqual(form.quantity, "2.5")
        self.assertEqual([e.field for e in validate_transaction(form)], ["quantity"])

    def test_unparseable_numbers_are_reported(self):
        form = CreateTransaction(part_number="P-1", part_name="Filter", amount="abc", bill_no="x")

        self.assertEqual(
            [e.message for e in validate_transaction(form)],
            ["Amounts must be numbers of zero or more", "Vehicle and bill numbers must be whole numbers"],
        )

    def test_unknown_transaction_type(self):
        form = CreateTransaction(part_number="P-1", part_name="Filter", transaction_type="REFUND")

        self.assertEqual([e.field for e in validate_transaction(form)], ["transaction_type"])


class TestSparePartForm(unittest.TestCase):

    def test_required_fields(self):
        errors = validate_spare_part(SparePart(part_name="Oil filter"))

        self.assertEqual([e.field for e in errors], ["description", "manufacturer", "part_number"])

    def test_negative_price(self):
        part = SparePart(part_name="Oil filter", description="10W", manufacturer="Bosch", part_number=4411, price=-5)

        self.assertEqual(
            [e.message for e in validate_spare_part(part)],
            ["Prices and GST must be numbers of zero or more"],
        )

    def test_valid(self):
        part = SparePart(part_name="Oil filter", description="10W", manufacturer="Bosch", part_number=4411, price=250)

        self.assertEqual(validate_spare_part(part), [])


class TestQuotationLineForm(unittest.TestCase):

    def test_part_line_needs_part_name(self):
        errors = validate_quotation_line(PartLine(quantity=1, unit_price=100))

        self.assertEqual([e.field for e in errors], ["part_name"])

    def test_labour_line_needs_name(self):
        self.assertEqual([e.field for e in validate_quotation_line(LabourLine(quantity=1))], ["name"])

    def test_quantity_and_price(self):
        errors = validate_quotation_line(LabourLine(name="Wash", quantity="abc", unit_price=100))

        self.assertEqual([e.message for e in errors], ["Please enter a valid quantity and unit price."])

    def test_discount_range(self):
        errors = validate_quotation_line(LabourLine(name="Wash", quantity=1, unit_price=100, discount_percent=150))

        self.assertEqual([e.field for e in errors], ["discount_percent"])


class TestUserForms(unittest.TestCase):

    def test_user(self):
        self.assertEqual(validate_user({"email": "ravi@example.com", "password": "password1"}), [])
        messages = [e.message for e in validate_user({"email": "ravi", "password": "short", "name": " "})]
        self.assertEqual(messages, ["Email is invalid", "Password must be at least 8 characters", "Name cannot be empty"])

    def test_user_required(self):
        messages = [e.message for e in validate_user({})]

        self.assertEqual(messages, ["Email is required", "Password is required"])

    def test_sign_up(self):
        form = {
            "fname": "Ravi", "lname": "Kumar", "email": "ravi@example.com", "password": "password1",
            "mobile_number": "9845012345", "address": "Bengaluru",
        }

        self.assertEqual(validate_sign_up(form), [])
        self.assertEqual(
            [e.message for e in validate_sign_up(dict(form, mobile_number="98450"))],
            ["Please enter a valid 10-digit mobile number"],
        )
        self.assertEqual([e.field for e in validate_sign_up(dict(form, fname=" "))], ["fname"])


if __name__ == "__main__":
    unittest.main()
