"""Tests for the JSON validator and its typed/generic fallback."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from demo_tools.errors import DataFileError, JSONParseError
from demo_tools.validator import (
    GenericReport,
    UserArrayReport,
    decode_users,
    validate,
    validate_text,
)


def _write(tmp_path: Path, text: str, name: str = "data.json") -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


# =====================================================================
# Typed user arrays
# =====================================================================


class TestUserArrays:
    def test_counts_and_previews_first_three(self, users_file: Path):
        report = validate(users_file)
        assert isinstance(report, UserArrayReport)
        assert report.kind == "users"
        assert report.count == 5
        assert [u.name for u in report.preview] == ["Person1", "Person2", "Person3"]
        assert [u.email for u in report.preview][0] == "user1@example.com"
        assert report.remaining == 2

    def test_three_or_fewer_has_no_remaining(self, tmp_path: Path, user_dicts):
        report = validate(_write(tmp_path, json.dumps(user_dicts[:3])))
        assert isinstance(report, UserArrayReport)
        assert len(report.preview) == 3
        assert report.remaining == 0

    def test_empty_array_is_user_array(self, tmp_path: Path):
        report = validate(_write(tmp_path, "[]"))
        assert isinstance(report, UserArrayReport)
        assert report.count == 0
        assert report.preview == []

    def test_extra_fields_are_ignored(self, user_dicts):
        rows = [dict(row, role="admin") for row in user_dicts]
        assert isinstance(validate_text(json.dumps(rows)), UserArrayReport)


# =====================================================================
# Generic fallback
# =====================================================================


class TestGenericFallback:
    def test_object_lists_its_keys(self, tmp_path: Path):
        report = validate(_write(tmp_path, '{"a":1,"b":2}'))
        assert isinstance(report, GenericReport)
        assert report.is_mapping is True
        assert report.keys == ["a", "b"]

    def test_keys_capped_at_five_in_document_order(self):
        doc = {k: i for i, k in enumerate(["z", "y", "x", "w", "v", "u", "t"])}
        report = validate_text(json.dumps(doc))
        assert isinstance(report, GenericReport)
        assert report.keys == ["z", "y", "x", "w", "v"]

    def test_array_of_non_users_is_generic(self):
        report = validate_text('[{"id": 1, "name": "no email"}]')
        assert isinstance(report, GenericReport)
        assert report.is_mapping is False
        assert report.keys == []

    def test_scalar_is_generic(self):
        report = validate_text("42")
        assert isinstance(report, GenericReport)
        assert report.is_mapping is False

    @pytest.mark.parametrize(
        "field, value",
        [
            ("id", "7"),
            ("created_at", 1700000000),
            ("email", "Bob <Bob@EXAMPLE.COM>"),
        ],
    )
    def test_values_needing_coercion_fall_back(self, user_dicts, field, value):
        user_dicts[0][field] = value
        assert isinstance(validate_text(json.dumps(user_dicts)), GenericReport)

    def test_email_reported_as_written(self, user_dicts):
        user_dicts[0]["email"] = "Mixed.Case@EXAMPLE.COM"
        report = validate_text(json.dumps(user_dicts))
        assert isinstance(report, UserArrayReport)
        assert report.preview[0].email == "Mixed.Case@EXAMPLE.COM"

    def test_record_with_bad_email_falls_back(self, user_dicts):
        user_dicts[0]["email"] = "not-an-email"
        assert isinstance(validate_text(json.dumps(user_dicts)), GenericReport)


# =====================================================================
# Errors
# =====================================================================


class TestErrors:
    def test_malformed_json_raises_parse_error(self, tmp_path: Path):
        path = _write(tmp_path, "{not json")
        with pytest.raises(JSONParseError) as exc_info:
            validate(path)
        assert exc_info.value.path == path

    def test_missing_file_raises_data_file_error(self, tmp_path: Path):
        with pytest.raises(DataFileError):
            validate(tmp_path / "nope.json")

    def test_deeply_nested_json_raises_parse_error(self, tmp_path: Path):
        path = _write(tmp_path, "[" * 100_000 + "]" * 100_000)
        with pytest.raises(JSONParseError, match="nesting too deep"):
            validate(path)

    def test_directory_raises_data_file_error(self, tmp_path: Path):
        with pytest.raises(DataFileError):
            validate(tmp_path)


class TestDecodeUsers:
    def test_mismatch_returns_none(self):
        assert decode_users('{"a": 1}') is None

    def test_match_returns_records(self, user_dicts):
        users = decode_users(json.dumps(user_dicts))
        assert users is not None
        assert len(users) == 5
