# =============================================================================
# tests/integration/test_reservation_workflow.py
# Integration Tests for the reservation workflow across an outage
# =============================================================================

from fuego_core.data.reservation import ReservationInput, ReservationStatus
from fuego_core.offline.reservation_repository import BackendHealth
from fuego_core.state.reservation_state import ReservationViewModel


class TestReservationWorkflow:
    """Public form -> manager dashboard, with the remote store going down"""

    def test_online_then_outage(self, repository, prober, remote, local_store):
        guest = ReservationViewModel(repository, prober, store={})
        manager = ReservationViewModel(repository, prober, store={})

        # Online: the guest books, the manager sees it and confirms
        guest.activate()
        booked = guest.submit(ReservationInput(
            client_name="João Souza",
            phone="(21) 98888-7777",
            date="2025-03-10",
            time="21:00",
            pax="6 Pessoas",
            table_type="Booth Privativo",
        ))
        manager.activate()
        assert manager.is_online
        assert [r.id for r in manager.reservations] == [booked.id]
        assert manager.update_status(booked.id, ReservationStatus.CONFIRMED)
        assert remote.rows[0]["status"] == "confirmed"

        # Outage: new bookings land in the local store only
        remote.fail = True
        offline_booking = guest.submit(ReservationInput(
            client_name="Paula Lima",
            phone="(11) 97777-6666",
            date="2025-03-11",
        ))
        assert offline_booking.id.startswith("local-")
        assert local_store.load() == [offline_booking]

        manager.activate()
        assert not manager.is_online
        assert manager.last_health is BackendHealth.LOCAL
        assert [r.id for r in manager.reservations] == [offline_booking.id]

        assert manager.update_status(offline_booking.id, ReservationStatus.CANCELLED)
        assert local_store.load()[0].status is ReservationStatus.CANCELLED

        # Recovery: the remote store is authoritative again, nothing is merged
        remote.fail = False
        manager.activate()
        assert manager.is_online
        assert [r.id for r in manager.reservations] == [booked.id]
        assert manager.reservations[0].status is ReservationStatus.CONFIRMED
        assert len(local_store.load()) == 1

    def test_missing_table_runs_on_local_store(self, repository, prober, remote, local_store, sample_input):
        remote.schema_missing = True
        view_model = ReservationViewModel(repository, prober, store={})

        view_model.activate()
        created = view_model.submit(sample_input)

        assert view_model.schema_missing
        assert view_model.reservations == [created]
        assert local_store.load() == [created]
        assert prober.get_status_display()["status"] == "schema_missing"
