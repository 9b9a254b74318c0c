"""Tests for the Contact entity and id assignment."""

import pytest

from agenda.domain import Contact, next_contact_id


def test_next_id_for_empty_collection_is_one() -> None:
    assert next_contact_id([]) == 1


def test_next_id_is_max_plus_one() -> None:
    contacts = [Contact(id=3), Contact(id=7), Contact(id=2)]
    new_id = next_contact_id(contacts)
    assert new_id == 8
    assert new_id not in {c.id for c in contacts}


def test_next_id_ignores_gaps_and_order() -> None:
    assert next_contact_id([Contact(id=10), Contact(id=1)]) == 11


def test_text_fields_default_to_empty_and_are_not_normalized() -> None:
    c = Contact(id=1, name="  Ana ", phone="+34 600")
    assert c.name == "  Ana "
    assert c.email == ""
    assert c.phone == "+34 600"


@pytest.mark.parametrize("bad_id", [0, -1, "1", 1.0, True, None])
def test_invalid_id_rejected(bad_id) -> None:
    with pytest.raises(ValueError):
        Contact(id=bad_id)
