"""
Tests for the snake_case <-> camelCase key converters.
Run from project root: python -m pytest tests/test_case.py -v
"""
import copy
import unittest
from datetime import date, datetime, timezone
from decimal import Decimal

from utils.case import dict_keys_to_camel, dict_keys_to_snake, to_camel_key, to_snake_key


class TestKeyRules(unittest.TestCase):
    def test_to_camel_key(self):
        self.assertEqual(to_camel_key("total_seats"), "totalSeats")
        self.assertEqual(to_camel_key("created_at"), "createdAt")
        self.assertEqual(to_camel_key("price_per_child_seat"), "pricePerChildSeat")
        self.assertEqual(to_camel_key("id"), "id")

    def test_to_camel_key_only_underscore_before_lowercase(self):
        """Digits, capitals and trailing underscores are left alone."""
        self.assertEqual(to_camel_key("price_child_6_10"), "priceChild_6_10")
        self.assertEqual(to_camel_key("total_Seats"), "total_Seats")
        self.assertEqual(to_camel_key("_private"), "Private")
        self.assertEqual(to_camel_key("trailing_"), "trailing_")

    def test_to_snake_key(self):
        self.assertEqual(to_snake_key("totalSeats"), "total_seats")
        self.assertEqual(to_snake_key("isFeatured"), "is_featured")
        self.assertEqual(to_snake_key("already_snake"), "already_snake")
        self.assertEqual(to_snake_key("URL"), "_u_r_l")


class TestDictKeysToCamel(unittest.TestCase):
    def test_flat_mapping(self):
        data = {"total_seats": 10, "is_featured": True, "category_id": "x"}
        self.assertEqual(
            dict_keys_to_camel(data),
            {"totalSeats": 10, "isFeatured": True, "categoryId": "x"},
        )

    def test_nested_object_and_array(self):
        """Only dict keys are renamed; string elements of lists stay as they are."""
        data = {"user_info": {"first_name": "Ana", "tags": ["a_b", {"sub_key": 1}]}}
        self.assertEqual(
            dict_keys_to_camel(data),
            {"userInfo": {"firstName": "Ana", "tags": ["a_b", {"subKey": 1}]}},
        )

    def test_scalars_returned_unchanged(self):
        for value in ("snake_value", 42, 3.5, True, False, None, Decimal("9.99"), b"raw_bytes"):
            self.assertIs(dict_keys_to_camel(value), value)
            self.assertIs(dict_keys_to_snake(value), value)

    def test_dates_passed_through(self):
        created_at = datetime(2025, 12, 15, 6, 0, tzinfo=timezone.utc)
        departure = date(2025, 12, 15)
        self.assertIs(dict_keys_to_camel(created_at), created_at)
        self.assertIs(dict_keys_to_snake(departure), departure)
        out = dict_keys_to_camel({"created_at": created_at})
        self.assertIs(out["createdAt"], created_at)

    def test_unknown_objects_passed_through(self):
        class Opaque:
            some_attr = 1

        obj = Opaque()
        self.assertIs(dict_keys_to_camel(obj), obj)
        self.assertIs(dict_keys_to_camel(len), len)

    def test_sequence_shape_preserved(self):
        data = [{"a_b": 1}, "c_d", 3, None, [{"e_f": 2}]]
        out = dict_keys_to_camel(data)
        self.assertIsInstance(out, list)
        self.assertEqual(len(out), len(data))
        self.assertEqual(out, [{"aB": 1}, "c_d", 3, None, [{"eF": 2}]])

    def test_tuple_stays_tuple(self):
        out = dict_keys_to_camel(({"a_b": 1}, "x"))
        self.assertEqual(out, ({"aB": 1}, "x"))

    def test_empty_containers(self):
        self.assertEqual(dict_keys_to_camel({}), {})
        self.assertEqual(dict_keys_to_camel([]), [])
        self.assertEqual(dict_keys_to_snake({}), {})
        self.assertEqual(dict_keys_to_snake([]), [])

    def test_no_key_loss(self):
        data = {"a_b": 1, "c_d": 2, "e": 3, "f_g_h": 4}
        self.assertEqual(len(dict_keys_to_camel(data)), 4)

    def test_non_string_keys_kept(self):
        self.assertEqual(dict_keys_to_camel({1: {"a_b": 2}}), {1: {"aB": 2}})

    def test_collision_last_key_wins(self):
        data = {"total_seats": 1, "totalSeats": 2}
        self.assertEqual(dict_keys_to_camel(data), {"totalSeats": 2})
        reordered = {"totalSeats": 2, "total_seats": 1}
        self.assertEqual(dict_keys_to_camel(reordered), {"totalSeats": 1})

    def test_input_not_mutated(self):
        data = {"user_info": {"first_name": "Ana", "tags": ["a_b", {"sub_key": 1}]}}
        snapshot = copy.deepcopy(data)
        out = dict_keys_to_camel(data)
        self.assertEqual(data, snapshot)
        self.assertIsNot(out["userInfo"]["tags"], data["user_info"]["tags"])


class TestDictKeysToSnake(unittest.TestCase):
    def test_flat_mapping(self):
        self.assertEqual(
            dict_keys_to_snake({"totalSeats": 10, "isFeatured": True}),
            {"total_seats": 10, "is_featured": True},
        )

    def test_nested(self):
        data = {"bookingInfo": {"numPassengers": 2, "items": [{"unitPrice": 5}]}}
        self.assertEqual(
            dict_keys_to_snake(data),
            {"booking_info": {"num_passengers": 2, "items": [{"unit_price": 5}]}},
        )

    def test_collision_last_key_wins(self):
        self.assertEqual(dict_keys_to_snake({"total_seats": 1, "totalSeats": 2}), {"total_seats": 2})

    def test_input_not_mutated(self):
        data = {"outerKey": [{"innerKey": 1}]}
        snapshot = copy.deepcopy(data)
        dict_keys_to_snake(data)
        self.assertEqual(data, snapshot)

    def test_round_trip_is_not_guaranteed(self):
        data = {"price_child_6_10": 100, "total_seats": 3}
        back = dict_keys_to_snake(dict_keys_to_camel(data))
        self.assertEqual(back, data)
        mixed = {"total_Seats": 1}
        self.assertEqual(dict_keys_to_snake(dict_keys_to_camel(mixed)), {"total__seats": 1})


if __name__ == "__main__":
    unittest.main()
