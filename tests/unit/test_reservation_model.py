# =============================================================================
# tests/unit/test_reservation_model.py
# Unit Tests for the Reservation entity and field mapping
# =============================================================================

import pytest

from fuego_core.data.reservation import (
    PAX_OPTIONS,
    TIME_SLOTS,
    ReservationInput,
    ReservationStatus,
    format_phone,
    from_local_dict,
    from_remote_row,
    int_to_pax,
    pax_to_int,
    sort_newest_first,
    to_local_dict,
    to_remote_row,
    validate_reservation_input,
)
from fuego_core.errors import ValidationFailedError


class TestReservationConstants:
    """Test the enumerated form options"""

    def test_time_slots_are_half_hours_from_noon_to_eleven(self):
        assert TIME_SLOTS[0] == "12:00"
        assert TIME_SLOTS[-1] == "23:00"
        assert len(TIME_SLOTS) == 23
        assert all(slot.endswith((":00", ":30")) for slot in TIME_SLOTS)

    def test_status_terminality(self):
        assert not ReservationStatus.PENDING.is_terminal
        assert ReservationStatus.CONFIRMED.is_terminal
        assert ReservationStatus.CANCELLED.is_terminal


class TestPaxNormalization:
    """Test pax string <-> integer conversion"""

    def test_every_option_round_trips(self):
        for option in PAX_OPTIONS:
            assert int_to_pax(pax_to_int(option)) == option

    def test_two_people(self):
        assert pax_to_int("2 Pessoas") == 2
        assert int_to_pax(2) == "2 Pessoas"

    def test_missing_digits_default_to_two(self):
        assert pax_to_int("") == 2
        assert pax_to_int(None) == 2
        assert pax_to_int("Pessoas") == 2

    def test_integer_passes_through(self):
        assert pax_to_int(5) == 5


class TestValidation:
    """Test required field validation"""

    def test_valid_input_passes(self, sample_input):
        validate_reservation_input(sample_input)

    def test_empty_name_fails(self):
        data = ReservationInput(client_name="", date="2025-01-01", phone="11999999999")
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_reservation_input(data)
        assert exc_info.value.fields == ["client_name"]

    def test_whitespace_counts_as_empty(self):
        data = ReservationInput(client_name="  ", date="", phone=" ")
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_reservation_input(data)
        assert exc_info.value.fields == ["client_name", "date", "phone"]
        assert exc_info.value.code == "VALID_001"


class TestPhoneMask:
    """Test the phone input mask"""

    def test_full_mobile_number(self):
        assert format_phone("11999998888") == "(11) 99999-8888"

    def test_strips_non_digits_and_truncates(self):
        assert format_phone("+55 (11) 99999-8888 ramal") == "(55) 11999-9988"

    def test_short_input(self):
        assert format_phone("11") == "11"
        assert format_phone("119") == "(11) 9"


class TestFieldMapping:
    """Test conversion between application, local and remote shapes"""

    def test_remote_row_uses_integer_pax_and_pending(self, sample_input):
        row = to_remote_row(sample_input)

        assert row == {
            "client_name": "Maria Silva",
            "phone": "(11) 99999-9999",
            "pax": 4,
            "date": "2025-01-01",
            "time": "20:30",
            "table_type": "Varanda",
            "status": "pending",
        }

    def test_from_remote_row(self, remote_row):
        reservation = from_remote_row(remote_row)

        assert reservation.id == remote_row["id"]
        assert reservation.client_name == "Maria Silva"
        assert reservation.pax == "4 Pessoas"
        assert reservation.table_type == "Varanda"
        assert reservation.status is ReservationStatus.PENDING
        assert reservation.created_at == 1735756200123

    def test_from_remote_row_defaults(self, remote_row):
        remote_row.update({"phone": None, "table_type": None})
        reservation = from_remote_row(remote_row)

        assert reservation.phone == ""
        assert reservation.table_type == "Salão Principal"

    def test_from_remote_row_accepts_long_fractions_and_z(self, remote_row):
        remote_row["created_at"] = "2025-01-01T18:30:00.1234567Z"
        assert from_remote_row(remote_row).created_at == 1735756200123

    def test_local_dict_uses_application_names(self, sample_reservations):
        data = to_local_dict(sample_reservations[0])

        assert set(data) == {
            "id", "clientName", "phone", "pax", "date",
            "time", "tableType", "status", "createdAt",
        }
        assert data["pax"] == "2 Pessoas"
        assert data["status"] == "pending"

    def test_local_dict_round_trip(self, sample_reservations):
        for reservation in sample_reservations:
            assert from_local_dict(to_local_dict(reservation)) == reservation

    def test_from_local_dict_rejects_missing_fields(self):
        with pytest.raises(KeyError):
            from_local_dict({"id": "x"})

    def test_with_status_returns_copy(self, sample_reservations):
        original = sample_reservations[0]
        confirmed = original.with_status(ReservationStatus.CONFIRMED)

        assert confirmed.status is ReservationStatus.CONFIRMED
        assert original.status is ReservationStatus.PENDING
        assert confirmed.id == original.id

    def test_sort_newest_first(self, sample_reservations):
        ordered = sort_newest_first(sample_reservations)
        assert [r.created_at for r in ordered] == [3_000, 2_000, 1_000]

    def test_from_remote_row_accepts_trimmed_fractions(self, remote_row):
        remote_row["created_at"] = "2025-01-01T18:30:00.12345+00:00"
        assert from_remote_row(remote_row).created_at == 1735756200123

    def test_from_remote_row_naive_timestamp_is_utc(self, remote_row):
        remote_row["created_at"] = "2025-01-01T18:30:00"
        assert from_remote_row(remote_row).created_at == 1735756200000

    def test_from_remote_row_normalizes_status_case(self, remote_row):
        remote_row["status"] = " Confirmed "
        assert from_remote_row(remote_row).status is ReservationStatus.CONFIRMED

    def test_from_remote_row_rejects_unknown_status(self, remote_row):
        remote_row["status"] = "no_show"
        with pytest.raises(ValueError):
            from_remote_row(remote_row)
