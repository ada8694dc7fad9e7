"""Tests for formkit.encode."""

from datetime import date, datetime, timezone
from enum import Enum

from starlette.datastructures import MultiDict

from formkit.encode import convert_mapping_to_form_data
from formkit.extract import extract_data_from_form_data


class Color(Enum):
    RED = "red"


class TestConvertMappingToFormData:
    """Encoding rules for each value kind."""

    def test_returns_multidict(self):
        assert isinstance(convert_mapping_to_form_data({}), MultiDict)

    def test_primitives_are_stringified(self):
        form = convert_mapping_to_form_data({"name": "Ada", "age": 36, "score": 1.5})
        assert form.multi_items() == [("name", "Ada"), ("age", "36"), ("score", "1.5")]

    def test_booleans_lowercase(self):
        form = convert_mapping_to_form_data({"yes": True, "no": False})
        assert form["yes"] == "true"
        assert form["no"] == "false"

    def test_none_becomes_empty_string(self):
        assert convert_mapping_to_form_data({"middle_name": None})["middle_name"] == ""

    def test_dates_use_iso_format(self):
        form = convert_mapping_to_form_data(
            {
                "birthday": date(1990, 1, 1),
                "created": datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
            }
        )
        assert form["birthday"] == "1990-01-01"
        assert form["created"] == "2024-05-01T12:30:00+00:00"

    def test_enum_uses_value(self):
        assert convert_mapping_to_form_data({"color": Color.RED})["color"] == "red"

    def test_primitive_list_repeats_key(self):
        form = convert_mapping_to_form_data({"tags": ["a", "b", 3]})
        assert form.getlist("tags") == ["a", "b", "3"]

    def test_nested_mapping_uses_brackets(self):
        form = convert_mapping_to_form_data({"user": {"name": "Ada", "address": {"city": "London"}}})
        assert form["user[name]"] == "Ada"
        assert form["user[address][city]"] == "London"

    def test_list_of_mappings_uses_index(self):
        form = convert_mapping_to_form_data({"rows": [{"n": 1}, {"n": 2}]})
        assert form["rows[0][n]"] == "1"
        assert form["rows[1][n]"] == "2"

    def test_nested_lists_use_index(self):
        form = convert_mapping_to_form_data({"matrix": [[1, 2], [3]]})
        assert form.getlist("matrix[0]") == ["1", "2"]
        assert form.getlist("matrix[1]") == ["3"]

    def test_upload_keeps_filename_and_type(self, text_file):
        form = convert_mapping_to_form_data({"file": text_file})
        stored = form["file"]
        assert stored is text_file
        assert stored.filename == "test.txt"
        assert stored.content_type == "text/plain"

    def test_raw_bytes_kept_as_blob(self):
        assert convert_mapping_to_form_data({"blob": b"\x00\x01"})["blob"] == b"\x00\x01"

    def test_empty_list_adds_nothing(self):
        assert "tags" not in convert_mapping_to_form_data({"tags": []})

    def test_round_trip_through_extraction(self):
        """Encoding then extracting yields the stringified, flattened mapping."""
        mapping = {
            "name": "Ada",
            "age": 36,
            "admin": True,
            "address": {"city": "London"},
            "tags": ["a", "b"],
        }
        assert extract_data_from_form_data(convert_mapping_to_form_data(mapping)) == {
            "name": "Ada",
            "age": "36",
            "admin": "true",
            "address[city]": "London",
            "tags": ["a", "b"],
        }
