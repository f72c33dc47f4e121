import re

import pytest

from src.service.ticketing.domain.value_object.booking_reference import (
    BOOKING_REFERENCE_PREFIX,
    RANDOM_PART_LENGTH,
    generate_booking_reference,
    to_base36,
)


REFERENCE_PATTERN = re.compile(rf'^{BOOKING_REFERENCE_PREFIX}[0-9A-Z]+[0-9A-Z]{{{RANDOM_PART_LENGTH}}}$')


@pytest.mark.unit
class TestBookingReference:
    @pytest.mark.parametrize(
        'value,expected',
        [(0, '0'), (9, '9'), (10, 'A'), (35, 'Z'), (36, '10'), (1295, 'ZZ')],
    )
    def test_to_base36(self, value: int, expected: str) -> None:
        assert to_base36(value) == expected

    def test_to_base36_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match='non-negative'):
            to_base36(-1)

    def test_format(self) -> None:
        reference = generate_booking_reference()

        assert REFERENCE_PATTERN.match(reference)

    def test_time_part_is_base36_millis(self) -> None:
        reference = generate_booking_reference(now_ms=1_700_000_000_000)

        time_part = reference[len(BOOKING_REFERENCE_PREFIX) : -RANDOM_PART_LENGTH]
        assert int(time_part, 36) == 1_700_000_000_000

    def test_ten_thousand_references_are_unique(self) -> None:
        references = {generate_booking_reference() for _ in range(10_000)}

        assert len(references) == 10_000

    def test_same_millisecond_references_differ(self) -> None:
        references = {generate_booking_reference(now_ms=1_700_000_000_000) for _ in range(10_000)}

        assert len(references) == 10_000
