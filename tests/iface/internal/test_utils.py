import copy

import pytest

from iface.internal.utils import NoCopyDict, class_name, ordinal


def test_class_name() -> None:
    class Test:
        key = class_name()

    assert Test.key == "Test"
    assert Test().key == "Test"


def test_NoCopyDict() -> None:
    d = NoCopyDict[str, list[int]](a=[1])
    assert copy.copy(d) is d
    assert copy.deepcopy(d) is d


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (0, "0th"),
        (1, "1st"),
        (2, "2nd"),
        (3, "3rd"),
        (4, "4th"),
        (11, "11th"),
        (12, "12th"),
        (13, "13th"),
        (21, "21st"),
        (111, "111th"),
    ],
)
def test_ordinal(n: int, expected: str) -> None:
    assert ordinal(n) == expected
