from typing import ClassVar

import pytest
from pydantic import ValidationError

from iface.internal.models import Model


class Abstract(Model):
    _abstract_: ClassVar[bool] = True


class Concrete(Abstract):
    i: int = 1


def test_Model() -> None:
    obj = Concrete()
    assert str(obj) == repr(obj) == "Concrete()"
    obj = Concrete(i=5)
    assert str(obj) == repr(obj) == "Concrete(i=5)"

    for model in (Model, Abstract):
        with pytest.raises(TypeError, match="cannot be instantiated directly"):
            model()


def test_Model_no_extras() -> None:
    with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
        Concrete(junk=1)  # type: ignore[call-arg]


def test_Model_strict() -> None:
    with pytest.raises(ValidationError, match="Input should be a valid integer"):
        Concrete(i="5")  # type: ignore[arg-type]


def test_Model_immutable() -> None:
    obj = Concrete()
    with pytest.raises(ValidationError, match="Instance is frozen"):
        obj.i = 5
    assert hash(obj) == hash(Concrete())


def test_Model_unhashable() -> None:
    class Holder(Model):
        value: object

    with pytest.raises(TypeError, match="unhashable"):
        Holder(value=[1, 2])

    class Unchecked(Model):
        _hashable_: ClassVar[bool] = False

        value: object

    assert Unchecked(value=[1, 2]).value == [1, 2]
