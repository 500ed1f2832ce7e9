"""
Tests for plant validation.
"""

import pytest

from plantcare.validation import is_validation_error, validate_partial_plant, validate_plant


def test_valid_plant():
    result = validate_plant({"plant_name": "My Ficus", "plant_type_id": 1, "photo": "ficus.jpg"})
    assert not is_validation_error(result)
    assert result.value.plant_name == "My Ficus"
    assert result.value.plant_type_id == 1
    assert result.value.photo == "ficus.jpg"


def test_photo_is_optional():
    result = validate_plant({"plant_name": "My Ficus", "plant_type_id": "2"})
    assert result.value.photo is None
    assert result.value.plant_type_id == 2


@pytest.mark.parametrize("body,message", [
    ({"plant_type_id": 1, "photo": "ficus.jpg"}, "Missing required fields: plant_name"),
    ({"plant_name": "My Ficus"}, "Missing required fields: plant_type_id"),
    ({"plant_name": 12345, "plant_type_id": 1}, "Plant name must be a string"),
    ({"plant_name": "", "plant_type_id": 1}, "Plant name cannot be empty"),
    ({"plant_name": "F" * 101, "plant_type_id": 1}, "Plant name cannot exceed 100 characters"),
    ({"plant_name": "My Ficus", "plant_type_id": "not-a-number"}, "Plant type ID must be a number"),
    ({"plant_name": "My Ficus", "plant_type_id": 0}, "Plant type ID must be a positive integer"),
    ({"plant_name": "My Ficus", "plant_type_id": 1, "photo": 12345}, "Photo must be a string"),
])
def test_invalid_plant(body, message):
    result = validate_plant(body)
    assert is_validation_error(result)
    assert result.error == message
    assert result.status == 400


def test_name_at_length_limit():
    result = validate_plant({"plant_name": "F" * 100, "plant_type_id": 1})
    assert not is_validation_error(result)


def test_partial_photo_only():
    result = validate_partial_plant({"photo": "newphoto.jpg"})
    assert result.value.model_dump(exclude_unset=True) == {"photo": "newphoto.jpg"}


def test_partial_ignores_unknown_and_null_fields():
    result = validate_partial_plant({"colour": "green", "photo": None})
    assert result.value.model_dump(exclude_unset=True) == {}


@pytest.mark.parametrize("body,pattern", [
    ({"plant_name": ""}, "Plant name"),
    ({"plant_type_id": "not-a-number"}, "Plant type ID"),
    ({"photo": 3}, "Photo"),
])
def test_partial_rejects_invalid_fields(body, pattern):
    result = validate_partial_plant(body)
    assert is_validation_error(result)
    assert pattern in result.error


def test_partial_coerces_type_id():
    result = validate_partial_plant({"plant_type_id": "7.5"})
    assert result.value.plant_type_id == 7
