import unittest

from api.errors import ApiErrorCode, http_error_from_service, status_to_error_code
from services.exceptions import InsufficientSeatsError, NotFoundError, ServiceError


class TestStatusToErrorCode(unittest.TestCase):
    def test_known_statuses(self):
        self.assertEqual(status_to_error_code(401), ApiErrorCode.UNAUTHORIZED)
        self.assertEqual(status_to_error_code(403), ApiErrorCode.FORBIDDEN)
        self.assertEqual(status_to_error_code(404), ApiErrorCode.NOT_FOUND)
        self.assertEqual(status_to_error_code(400), ApiErrorCode.VALIDATION_ERROR)
        self.assertEqual(status_to_error_code(422), ApiErrorCode.VALIDATION_ERROR)
        self.assertEqual(status_to_error_code(429), ApiErrorCode.RATE_LIMITED)
        for status in (500, 502, 503):
            self.assertEqual(status_to_error_code(status), ApiErrorCode.SERVER_ERROR)

    def test_unknown_status(self):
        self.assertEqual(status_to_error_code(418), ApiErrorCode.UNKNOWN)


class TestServiceErrorMapping(unittest.TestCase):
    def test_not_found(self):
        exc = http_error_from_service(NotFoundError("Package", "pkg-1"))
        self.assertEqual(exc.status_code, 404)
        self.assertEqual(exc.detail, "Package not found")

    def test_insufficient_seats(self):
        exc = http_error_from_service(InsufficientSeatsError(available=2, requested=5))
        self.assertEqual(exc.status_code, 400)
        self.assertEqual(exc.detail, "Only 2 seats available")

    def test_other_service_errors(self):
        self.assertEqual(http_error_from_service(ServiceError("boom")).status_code, 500)


if __name__ == "__main__":
    unittest.main()
