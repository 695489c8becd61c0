import unittest
from unittest.mock import MagicMock

from autocare_console.api_client import ApiClient, ApiError, SessionExpired
from autocare_console.errors import ServiceError
from autocare_console.schemas import (
    CreateTransaction, ForgetPassword, JobOptionFormData, LabourLine, PartLine, QuotationUpdate,
    Quotation, ServiceFormData, SignInData, SignUpData, SparePart, TransactionFilter, UpdatePasswordData,
    Vehicle, VehicleCreate, VehicleFilter, VehicleUpdate, VendorDto, VerifyEmail,
)
from autocare_console.services import (
    as_list, garage_services, invoices, job_cards, parse_row, parse_rows, quotations, stock, users, vehicles,
    vendors,
)


class ServiceTestCase(unittest.TestCase):

    def setUp(self):
        self.client = MagicMock(spec=ApiClient)


class TestVehicleService(ServiceTestCase):

    def test_list_vehicles(self):
        self.client.get.return_value = [{"vehicleRegId": 1}]

        self.assertEqual(vehicles.list_vehicles(self.client), [{"vehicleRegId": 1}])
        self.client.get.assert_called_once_with("/vehicle-reg/getAll")

    def test_add_vehicle_posts_camel_case_payload(self):
        vehicle = VehicleCreate(vehicle_number="KA01AB1234", customer_name="Ravi", customer_mobile_number="98450")

        vehicles.add_vehicle(self.client, vehicle)

        path = self.client.post.call_args.args[0]
        payload = self.client.post.call_args.kwargs["json"]
        self.assertEqual(path, "/vehicle-reg/add")
        self.assertEqual(payload["vehicleNumber"], "KA01AB1234")
        self.assertEqual(payload["status"], "Waiting")
        self.assertNotIn("vehicle_number", payload)

    def test_get_vehicle_unwraps_data(self):
        self.client.get.return_value = {"data": {"vehicleRegId": 7}}

        self.assertEqual(vehicles.get_vehicle(self.client, 7), {"vehicleRegId": 7})
        self.client.get.assert_called_once_with("/vehicle-reg/getById", params={"vehicleRegId": 7})

    def test_update_vehicle_passes_id_as_query(self):
        vehicle = VehicleUpdate(vehicle_reg_id=7, vehicle_number="KA01")

        vehicles.update_vehicle(self.client, vehicle)

        self.assertEqual(self.client.patch.call_args.kwargs["params"], {"vehicleRegId": 7})

    def test_delete_vehicle_uses_put(self):
        vehicles.delete_vehicle(self.client, 7)

        self.client.put.assert_called_once_with("/vehicle-reg/delete", params={"vehicleRegId": 7})

    def test_delete_vehicle_spare_part(self):
        vehicles.delete_vehicle_spare_part(self.client, 11)

        self.client.delete.assert_called_once_with(
            "/sparePartTransactions/delete", params={"transactionId": 11}
        )

    def test_failure_raises_fixed_message_and_keeps_cause(self):
        cause = ApiError("boom", status_code=500, data={"message": "db down"})
        self.client.get.side_effect = cause

        with self.assertRaises(ServiceError) as ctx:
            vehicles.list_vehicles(self.client)

        self.assertEqual(str(ctx.exception), "Failed to fetch vehicles")
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertIs(ctx.exception.__cause__, cause)

    def test_session_expired_passes_through(self):
        self.client.get.side_effect = SessionExpired("expired", status_code=401)

        with self.assertRaises(SessionExpired):
            vehicles.list_vehicles(self.client)

    def test_filter_prefers_appointment(self):
        self.client.get.return_value = {"vehicleRegId": 3}

        rows = vehicles.filter_vehicles(self.client, VehicleFilter(appointment_id="A1", status="Waiting"))

        self.assertEqual(rows, [{"vehicleRegId": 3}])
        self.client.get.assert_called_once_with(
            "/vehicle-reg/getByAppointmentId", params={"appointmentId": "A1"}
        )

    def test_filter_by_date_range(self):
        self.client.get.return_value = []

        vehicles.filter_vehicles(self.client, VehicleFilter(start_date="2024-01-01", end_date="2024-01-31"))

        self.client.get.assert_called_once_with(
            "/vehicle-reg/date-range", params={"startDate": "2024-01-01", "endDate": "2024-01-31"}
        )

    def test_filter_by_status(self):
        self.client.get.return_value = []

        vehicles.filter_vehicles(self.client, VehicleFilter(status="Complete"))

        self.client.get.assert_called_once_with("/vehicle-reg/GetStatus", params={"status": "Complete"})

    def test_filter_without_values_lists_all(self):
        self.client.get.return_value = []

        vehicles.filter_vehicles(self.client, VehicleFilter(start_date="2024-01-01"))

        self.client.get.assert_called_once_with("/vehicle-reg/getAll")


class TestOtherServices(ServiceTestCase):

    def test_add_transaction(self):
        stock.add_transaction(self.client, CreateTransaction(part_number="P-1", part_name="Filter"))

        payload = self.client.post.call_args.kwargs["json"]
        self.assertEqual(payload["transactionType"], "DEBIT")
        self.assertEqual(payload["billNo"], 1)

    def test_add_job_card(self):
        job_cards.add_job_card(self.client, JobOptionFormData(job_name="Brake check", job_type="Inspection"))

        self.client.post.assert_called_once_with(
            "/registerJobCard/add", json={"jobName": "Brake check", "jobType": "Inspection"}
        )

    def test_job_card_failure_message(self):
        self.client.post.side_effect = ApiError("bad", status_code=400)

        with self.assertRaisesRegex(ServiceError, "Error saving job card"):
            job_cards.add_job_card(self.client, JobOptionFormData(job_name="x", job_type="Problem"))

    def test_update_job_card_path(self):
        job_cards.update_job_card(self.client, 5, JobOptionFormData(job_name="x", job_type="Problem"))

        self.assertEqual(self.client.patch.call_args.args[0], "/registerJobCard/update/5")

    def test_get_vendor_reads_wrapped_body(self):
        self.client.get.return_value = {"body": {"vendorId": 2, "name": "Bosch", "gstno": "29AB", "mobileNumber": 98450}}

        vendor = vendors.get_vendor(self.client, 2)

        self.assertEqual(vendor.name, "Bosch")
        self.assertEqual(vendor.mobile_number, "98450")
        self.assertEqual(vendor.spare_brand, "")
        self.client.get.assert_called_once_with("/vendor/findById", params={"vendorId": 2})

    def test_update_vendor(self):
        vendors.update_vendor(self.client, 2, VendorDto(name="Bosch", gstno="29AB", pan_no="ABCDE"))

        payload = self.client.patch.call_args.kwargs["json"]
        self.assertEqual(self.client.patch.call_args.args[0], "/vendor/update/2")
        self.assertEqual(payload["gstno"], "29AB")
        self.assertEqual(payload["panNo"], "ABCDE")

    def test_list_quotations_parses_records(self):
        self.client.get.return_value = [
            {"id": 1, "customerName": "Ravi", "customerMobile": None, "partLines": [{"finalAmount": 100}],
             "labourLines": [{"finalAmount": 50}]},
        ]

        rows = quotations.list_quotations(self.client)

        self.assertEqual(rows[0].customer_name, "Ravi")
        self.assertIsNone(rows[0].customer_mobile)
        self.assertEqual(rows[0].total, 150)

    def test_delete_quotation(self):
        quotations.delete_quotation(self.client, 9)

        self.client.delete.assert_called_once_with("/api/quotations/9")

    def test_add_service(self):
        garage_services.add_service(self.client, ServiceFormData(service_name="Wash", service_rate=300, total_gst=18))

        self.client.post.assert_called_once_with(
            "/services/AddService", json={"serviceName": "Wash", "serviceRate": 300.0, "totalGst": 18.0}
        )

    def test_get_and_update_service(self):
        garage_services.get_service(self.client, 4)
        garage_services.update_service(self.client, 4, ServiceFormData(service_name="Wash", service_rate=350))

        self.client.get.assert_called_once_with("/services/getById/4")
        self.client.patch.assert_called_once_with(
            "/services/update/4", json={"serviceName": "Wash", "serviceRate": 350.0, "totalGst": 0}
        )

    def test_update_quotation_sends_customer_details(self):
        quotations.update_quotation(self.client, 9, QuotationUpdate(customer_name="Asha", customer_mobile=9845012345))

        self.client.patch.assert_called_once_with(
            "/api/quotations/9",
            json={"quotationDate": "", "customerName": "Asha", "customerAddress": "", "customerMobile": "9845012345"},
        )

    def test_add_part_and_labour_lines(self):
        part = PartLine(part_name="Oil filter", part_number=4411, quantity=2, unit_price=250, discount_percent=10)
        labour = LabourLine(name="Wheel alignment", quantity=1, unit_price=600)

        quotations.add_part_lines(self.client, 12, [part.priced(1)])
        quotations.add_labour_lines(self.client, 12, [labour.priced(1)])

        parts_call, labour_call = self.client.post.call_args_list
        self.assertEqual(parts_call.args[0], "/api/quotations/12/parts")
        self.assertEqual(parts_call.kwargs["json"][0]["discountAmt"], 50.0)
        self.assertEqual(parts_call.kwargs["json"][0]["finalAmount"], 450.0)
        self.assertEqual(parts_call.kwargs["json"][0]["partNumber"], 4411)
        self.assertEqual(labour_call.args[0], "/api/quotations/12/labours")
        self.assertEqual(labour_call.kwargs["json"][0]["name"], "Wheel alignment")
        self.assertEqual(labour_call.kwargs["json"][0]["lineNo"], 1)

    def test_malformed_quotation_becomes_service_error(self):
        self.client.get.return_value = [{"customerName": "No id"}]

        with self.assertRaisesRegex(ServiceError, "Failed to fetch quotations"):
            quotations.list_quotations(self.client)

    def test_spare_part_endpoints(self):
        self.client.get.return_value = [{"sparePartId": 3}]

        self.assertEqual(stock.list_spare_parts(self.client), [{"sparePartId": 3}])
        stock.search_spare_parts(self.client, "filter")
        stock.add_spare_part(self.client, SparePart(part_name="Oil filter", part_number=4411, price=250))
        stock.delete_spare_part(self.client, 3)

        self.assertEqual(
            [c.args for c in self.client.get.call_args_list],
            [("/sparePartManagement/getAll",), ("/Filter/searchBarFilter",)],
        )
        self.assertEqual(self.client.get.call_args.kwargs["params"], {"searchBarInput": "filter"})
        self.assertEqual(self.client.post.call_args.args[0], "/sparePartManagement/addPart")
        payload = self.client.post.call_args.kwargs["json"]
        self.assertEqual(payload["partNumber"], 4411)
        self.assertEqual(payload["sGST"], 0)
        self.client.delete.assert_called_once_with("/sparePartManagement/delete/3")

    def test_transactions_by_type_and_date(self):
        self.client.get.return_value = {"content": [{"sparePartTransactionId": 1}]}
        filters = TransactionFilter(transaction_type="CREDIT", start_date="2024-01-01", end_date="2024-01-31")

        rows = stock.transactions_by_type_and_date(self.client, filters)

        self.assertEqual(rows, [{"sparePartTransactionId": 1}])
        self.client.get.assert_called_once_with(
            "/sparePartTransactions/byTransactionTypeAndDateRange",
            params={"transactionType": "CREDIT", "startDate": "2024-01-01", "endDate": "2024-01-31"},
        )

    def test_transactions_for_vehicle(self):
        stock.transactions_for_vehicle(self.client, 5)

        self.client.get.assert_called_once_with("/sparePartTransactions/vehicleRegId", params={"vehicleRegId": 5})

    def test_invoice_lookups(self):
        self.client.get.return_value = [
            {"id": 1, "invoiceNumber": 1001, "customerMobile": 9845012345, "adharNo": None, "totalAmount": 1180,
             "items": [{"sNo": 1, "spareNo": 4411, "spareName": "Oil filter", "quantity": 2, "total": 590}]},
        ]

        rows = invoices.invoices_for_vehicle(self.client, 5)
        invoices.invoices_by_date_range(self.client, "2024-01-01", "2024-01-31")

        self.assertEqual(rows[0].invoice_number, "1001")
        self.assertEqual(rows[0].customer_mobile, "9845012345")
        self.assertEqual(rows[0].items[0].spare_no, "4411")
        self.assertEqual(
            [c.args[0] for c in self.client.get.call_args_list],
            ["/api/vehicle-invoices/search/vehicle-reg/5", "/api/vehicle-invoices/search/date-range"],
        )
        self.assertEqual(self.client.get.call_args.kwargs["params"], {"startDate": "2024-01-01", "endDate": "2024-01-31"})

    def test_invoice_by_number(self):
        self.client.get.return_value = {"id": 2, "invoiceNumber": "INV-2"}

        self.assertEqual(invoices.invoice_by_number(self.client, "INV-2").id, 2)
        self.client.get.assert_called_once_with("/api/vehicle-invoices/number/INV-2")


class TestUserService(ServiceTestCase):

    def test_sign_up(self):
        user = SignUpData(
            fname="Ravi", lname="Kumar", email="ravi@example.com", password="password1",
            mobile_number="9845012345", address="Bengaluru",
        )

        users.sign_up(self.client, user)

        self.client.post.assert_called_once_with(
            "/user/registerUser",
            json={
                "fname": "Ravi", "lname": "Kumar", "email": "ravi@example.com", "password": "password1",
                "mobileNumber": "9845012345", "address": "Bengaluru", "role": "USER",
            },
        )

    def test_sign_in(self):
        users.sign_in(self.client, SignInData(username="admin", password="secret"))

        self.client.post.assert_called_once_with("/jwt/login", json={"username": "admin", "password": "secret"})

    def test_send_and_verify_otp(self):
        users.send_otp(self.client, ForgetPassword(email="ravi@example.com"))
        users.verify_otp(self.client, VerifyEmail(email="ravi@example.com", otp="123456"))

        send, verify = self.client.post.call_args_list
        self.assertEqual(send.args[0], "/emailVerification/send-otp")
        self.assertEqual(send.kwargs["json"], {"email": "ravi@example.com"})
        self.assertEqual(verify.args[0], "/emailVerification/verify-otp")
        self.assertEqual(verify.kwargs["json"], {"email": "ravi@example.com", "otp": "123456"})

    def test_forgot_password_sends_email_as_query(self):
        users.forgot_password(self.client, ForgetPassword(email="ravi@example.com"))

        self.client.post.assert_called_once_with("/user/forgot-password", params={"email": "ravi@example.com"})

    def test_reset_password(self):
        users.reset_password(self.client, UpdatePasswordData(email="ravi@example.com", new_password="password2"))

        self.client.post.assert_called_once_with(
            "/user/update-password", json={"email": "ravi@example.com", "newPassword": "password2"}
        )

    def test_otp_failure_message(self):
        self.client.post.side_effect = ApiError("bad", status_code=400)

        with self.assertRaisesRegex(ServiceError, "Send OTP Error"):
            users.send_otp(self.client, ForgetPassword(email="ravi@example.com"))


class TestAsList(unittest.TestCase):

    def test_as_list_variants(self):
        self.assertEqual(as_list(None), [])
        self.assertEqual(as_list([1]), [1])
        self.assertEqual(as_list({"content": [1, 2]}), [1, 2])
        self.assertEqual(as_list({"list": [3]}), [3])
        self.assertEqual(as_list({"message": "nothing"}), [])


class TestParseRows(unittest.TestCase):

    def test_backend_numbers_and_statuses_are_accepted(self):
        rows = parse_rows(
            Vehicle,
            [{"vehicleRegId": 5, "appointmentId": 17, "customerId": 3, "userId": 1, "status": "Completed",
              "customerMobileNumber": 9845012345, "kmsDriven": 42000, "insuredFrom": None}],
            "Failed to fetch vehicles",
        )

        self.assertEqual(rows[0].status, "Completed")
        self.assertEqual(rows[0].appointment_id, 17)
        self.assertEqual(rows[0].customer_mobile_number, "9845012345")
        self.assertEqual(rows[0].insurance_from, "")

    def test_malformed_row_raises_service_error(self):
        with self.assertRaisesRegex(ServiceError, "Failed to fetch quotations"):
            parse_row(Quotation, {"customerName": "No id"}, "Failed to fetch quotations")


if __name__ == "__main__":
    unittest.main()
