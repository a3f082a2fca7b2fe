from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.errors import ValidationError
from core.models import GenerationRequest, Kind


def test_defaults_for_empty_payload():
    request = GenerationRequest.from_payload({})
    assert request.kind == "poem"
    assert request.target_name == "Shrabani"
    assert request.sender_name == "Tarunjit"
    assert request.secret is None


def test_blank_and_null_fields_use_defaults():
    request = GenerationRequest.from_payload(
        {"kind": None, "targetName": "  ", "senderName": ""},
        default_target_name="Ava",
        default_sender_name="Bo",
    )
    assert (request.kind, request.target_name, request.sender_name) == ("poem", "Ava", "Bo")


def test_kind_is_normalized_when_recognized():
    request = GenerationRequest.from_payload({"kind": " Compliment "})
    assert request.kind == Kind.COMPLIMENT.value


def test_unrecognized_kind_is_preserved():
    request = GenerationRequest.from_payload({"kind": "haiku"})
    assert request.kind == "haiku"
    assert Kind.parse(request.kind) is None


def test_names_are_stripped():
    request = GenerationRequest.from_payload({"targetName": " Ava ", "senderName": "Bo\n"})
    assert request.target_name == "Ava"
    assert request.sender_name == "Bo"


def test_non_string_secret_is_ignored():
    assert GenerationRequest.from_payload({"secret": 1234}).secret is None


def test_non_string_name_is_rejected():
    with pytest.raises(ValidationError):
        GenerationRequest.from_payload({"senderName": {"first": "Bo"}})
