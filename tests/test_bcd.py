import pytest

from ipmibmc.bcd import decode


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0x00, 0),
        (0x01, 1),
        (0x02, 2),
        (0x10, 10),
        (0x11, 11),
        (0x99, 99),
    ],
)
def test_decode(raw, expected):
    assert decode(raw) == expected