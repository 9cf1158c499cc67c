"""Domain types — User identity and immutability."""

import dataclasses
from uuid import UUID

import pytest

from users_api.core.domain_types import User, new_user_id


def test_new_user_id_is_unique_uuid():
    first, second = new_user_id(), new_user_id()

    assert isinstance(first, UUID)
    assert first != second


def test_user_is_immutable():
    user = User(id=new_user_id(), full_name="Jane Doe")

    with pytest.raises(dataclasses.FrozenInstanceError):
        user.id = new_user_id()
