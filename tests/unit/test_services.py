"""
Service layer unit tests
"""

import pytest

from tapp.database.store import create_store
from tapp.services.base_service import CONFLICT_ERROR, NOT_FOUND, VALIDATION_ERROR, is_blank
from tapp.services.instructors_service import InstructorsService
from tapp.services.position_templates_service import PositionTemplatesService
from tapp.services.positions_service import PositionsService
from tapp.services.sessions_service import SessionsService


@pytest.fixture
def store():
    return create_store(seed=False, available_templates=["Standard.html", "OTO.html"])


@pytest.fixture
def session(store):
    return store.insert("sessions", {"name": "2019 Fall", "start_date": None, "end_date": None, "rate1": 50.0, "rate2": None})


@pytest.mark.parametrize("value,expected", [
    (None, True),
    ("", True),
    ("   ", True),
    ("x", False),
    (0, False),
])
def test_is_blank(value, expected):
    assert is_blank(value) is expected


class TestSessionsService:

    async def test_create_fills_missing_fields(self, store):
        result = await SessionsService(store).save_session({"name": "2020 Winter"})

        assert result.success
        assert result.data[0] == {
            "id": 1, "name": "2020 Winter", "start_date": None, "end_date": None, "rate1": None, "rate2": None
        }

    @pytest.mark.parametrize("data", [{}, {"name": ""}, {"name": None}, {"name": "  "}])
    async def test_create_requires_name(self, store, data):
        result = await SessionsService(store).save_session(data)

        assert not result.success
        assert result.error_type == VALIDATION_ERROR

    async def test_duplicate_name(self, store, session):
        result = await SessionsService(store).save_session({"name": session["name"]})

        assert result.error_type == CONFLICT_ERROR

    async def test_update_keeps_own_name(self, store, session):
        result = await SessionsService(store).save_session({"id": session["id"], "name": session["name"], "rate1": 60.0})

        assert result.success
        assert result.data[0]["rate1"] == 60.0

    async def test_update_unknown_session(self, store):
        result = await SessionsService(store).save_session({"id": 7, "name": "Ghost"})

        assert result.error_type == NOT_FOUND

    async def test_delete_cascades(self, store, session):
        positions = PositionsService(store)
        templates = PositionTemplatesService(store)
        await positions.create_position(session["id"], {"position_code": "CSC108F"})
        await templates.save_template(session["id"], {"offer_template": "OTO.html", "position_type": "OTO"})

        result = await SessionsService(store).delete_session(session["id"])

        assert result.success
        assert store.all("positions") == []
        assert store.all("position_templates") == []

    @pytest.mark.parametrize("session_id,error_type", [(None, VALIDATION_ERROR), (99, NOT_FOUND)])
    async def test_delete_invalid_id(self, store, session_id, error_type):
        result = await SessionsService(store).delete_session(session_id)

        assert result.error_type == error_type


class TestPositionTemplatesService:

    async def test_list_available(self, store):
        result = await PositionTemplatesService(store).list_available()

        assert result.data == [{"offer_template": "Standard.html"}, {"offer_template": "OTO.html"}]

    async def test_matching_key_updates_in_place(self, store, session):
        service = PositionTemplatesService(store)
        data = {"offer_template": "OTO.html", "position_type": "OTO"}

        first = await service.save_template(session["id"], data)
        second = await service.save_template(session["id"], dict(data))

        assert first.count == second.count == 1
        assert first.data == second.data

    async def test_update_by_id(self, store, session):
        service = PositionTemplatesService(store)
        created = (await service.save_template(session["id"], {"offer_template": "OTO.html", "position_type": "OTO"})).data[0]

        result = await service.save_template(session["id"], {"id": created["id"], "position_type": "Standard"})

        assert result.success
        assert result.data == [{**created, "position_type": "Standard"}]

    async def test_update_into_existing_key_conflicts(self, store, session):
        service = PositionTemplatesService(store)
        await service.save_template(session["id"], {"offer_template": "OTO.html", "position_type": "OTO"})
        other = (await service.save_template(session["id"], {"offer_template": "OTO.html", "position_type": "Standard"})).data[1]

        result = await service.save_template(session["id"], {"id": other["id"], "position_type": "OTO"})

        assert result.error_type == CONFLICT_ERROR

    async def test_template_of_another_session_is_not_found(self, store, session):
        service = PositionTemplatesService(store)
        other = store.insert("sessions", {"name": "Other"})
        created = (await service.save_template(other["id"], {"offer_template": "OTO.html", "position_type": "OTO"})).data[0]

        result = await service.save_template(session["id"], {"id": created["id"], "position_type": "Standard"})

        assert result.error_type == NOT_FOUND

    @pytest.mark.parametrize("data", [
        {"offer_template": "", "position_type": "Standard"},
        {"offer_template": "OTO.html", "position_type": ""},
        {"offer_template": "OTO.html"},
    ])
    async def test_empty_fields_rejected(self, store, session, data):
        result = await PositionTemplatesService(store).save_template(session["id"], data)

        assert result.error_type == VALIDATION_ERROR
        assert store.all("position_templates") == []


class TestPositionsService:

    async def test_code_unique_per_session(self, store, session):
        service = PositionsService(store)
        other = store.insert("sessions", {"name": "Other"})

        first = await service.create_position(session["id"], {"position_code": "MAT135F"})
        again = await service.create_position(session["id"], {"position_code": "MAT135F"})
        elsewhere = await service.create_position(other["id"], {"position_code": "MAT135F"})

        assert first.success
        assert again.error_type == CONFLICT_ERROR
        assert elsewhere.success

    async def test_create_in_unknown_session(self, store):
        result = await PositionsService(store).create_position(42, {"position_code": "MAT135F"})

        assert result.error_type == NOT_FOUND

    async def test_update_to_taken_code(self, store, session):
        service = PositionsService(store)
        await service.create_position(session["id"], {"position_code": "A"})
        b = (await service.create_position(session["id"], {"position_code": "B"})).data[0]

        result = await service.update_position({"id": b["id"], "position_code": "A"})

        assert result.error_type == CONFLICT_ERROR

    async def test_add_instructor_is_idempotent(self, store, session):
        service = PositionsService(store)
        position = (await service.create_position(session["id"], {"position_code": "A"})).data[0]
        instructor = store.insert("instructors", {"utorid": "abc"})

        await service.add_instructor(position["id"], instructor["id"])
        result = await service.add_instructor(position["id"], instructor["id"])

        assert result.data == [instructor]
        assert store.get("positions", position["id"])["instructor_ids"] == [instructor["id"]]

    async def test_add_unknown_instructor(self, store, session):
        service = PositionsService(store)
        position = (await service.create_position(session["id"], {"position_code": "A"})).data[0]

        assert (await service.add_instructor(position["id"], 5)).error_type == NOT_FOUND
        assert (await service.add_instructor(position["id"], None)).error_type == VALIDATION_ERROR
        assert (await service.add_instructor(999, 5)).error_type == NOT_FOUND


class TestInstructorsService:

    async def test_utorid_required_and_unique(self, store):
        service = InstructorsService(store)

        assert (await service.save_instructor({"first_name": "No"})).error_type == VALIDATION_ERROR
        assert (await service.save_instructor({"utorid": "abc"})).success
        assert (await service.save_instructor({"utorid": "abc"})).error_type == CONFLICT_ERROR

    async def test_remove_from_session_only_detaches_that_session(self, store, session):
        positions = PositionsService(store)
        instructors = InstructorsService(store)
        other = store.insert("sessions", {"name": "Other"})
        instructor = (await instructors.save_instructor({"utorid": "abc"})).data[0]
        here = (await positions.create_position(session["id"], {"position_code": "A"})).data[0]
        there = (await positions.create_position(other["id"], {"position_code": "A"})).data[0]
        await positions.add_instructor(here["id"], instructor["id"])
        await positions.add_instructor(there["id"], instructor["id"])

        result = await instructors.remove_from_session(session["id"], instructor["id"])

        assert result.success
        assert (await instructors.list_for_session(session["id"])).data == []
        assert (await instructors.list_for_session(other["id"])).data == [instructor]

    async def test_delete_detaches_everywhere(self, store, session):
        positions = PositionsService(store)
        instructors = InstructorsService(store)
        instructor = (await instructors.save_instructor({"utorid": "abc"})).data[0]
        position = (await positions.create_position(session["id"], {"position_code": "A"})).data[0]
        await positions.add_instructor(position["id"], instructor["id"])

        result = await instructors.delete_instructor(instructor["id"])

        assert result.success
        assert store.get("positions", position["id"])["instructor_ids"] == []
        assert (await instructors.delete_instructor(instructor["id"])).error_type == NOT_FOUND
