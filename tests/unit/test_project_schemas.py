"""Property-based tests for project and guest validation using hypothesis."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from src.party_planner.schemas import GuestCreate, ProjectCreate, ProjectUpdate

pytestmark = pytest.mark.unit

# Printable, no surrounding whitespace, 5-30 characters
valid_name = st.text(
    alphabet=st.characters(min_codepoint=33, max_codepoint=126), min_size=5, max_size=30
)


@given(name=valid_name)
@settings(max_examples=100)
def test_valid_names_accepted(name: str):
    assert ProjectCreate(name=name).name == name


@given(name=valid_name, padding=st.text(alphabet=" \t", max_size=5))
def test_names_are_trimmed(name: str, padding: str):
    assert ProjectCreate(name=f"{padding}{name}{padding}").name == name


@given(name=st.text(alphabet=st.characters(min_codepoint=33, max_codepoint=126), max_size=4))
def test_short_names_rejected(name: str):
    with pytest.raises(ValidationError) as exc_info:
        ProjectCreate(name=name)
    assert any(error["loc"] == ("name",) for error in exc_info.value.errors())


@given(name=st.text(alphabet=st.characters(min_codepoint=33, max_codepoint=126), min_size=31, max_size=60))
def test_long_names_rejected_not_truncated(name: str):
    with pytest.raises(ValidationError):
        ProjectCreate(name=name)


def test_blank_due_date_falls_back_to_default():
    assert ProjectCreate(name="Birthday Bash", due_date="   ").due_date is None


def test_update_tracks_only_supplied_fields():
    update = ProjectUpdate(due_date="2024-05-01")

    assert update.model_dump(exclude_unset=True) == {"due_date": "2024-05-01"}


def test_guest_accepts_alias_and_numeric_phone():
    guest = GuestCreate.model_validate({"guestName": " Sam ", "phone": 5551234})

    assert guest.guest_name == "Sam"
    assert guest.phone == "5551234"


def test_guest_requires_name():
    with pytest.raises(ValidationError):
        GuestCreate.model_validate({"guestName": "  ", "phone": "5551234"})
