import uuid
from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError

from barbershop.core.config import settings
from barbershop.services.db_service import db_service


class FakeQuery:
    """Just enough of the postgrest query builder for the bookings table."""

    def __init__(self, rows, fail=False):
        self.rows = rows
        self.fail = fail
        self.op = "select"
        self.payload = None
        self.filters = []
        self.ordering = None

    def select(self, *columns):
        self.op = "select"
        return self

    def insert(self, row):
        self.op = "insert"
        self.payload = row
        return self

    def update(self, values):
        self.op = "update"
        self.payload = values
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def _check_uuid_filters(self):
        # Postgres refuses to compare a uuid column with a malformed literal
        for column, value in self.filters:
            if column == "id":
                try:
                    uuid.UUID(str(value))
                except ValueError:
                    raise APIError({"code": "22P02", "message": f"invalid input syntax for type uuid: \"{value}\""})

    def _matches(self, row):
        return all(str(row.get(c)) == str(v) for c, v in self.filters)

    async def execute(self):
        if self.fail:
            raise ConnectionError("supabase unreachable")

        self._check_uuid_filters()

        if self.op == "insert":
            row = {"id": str(uuid.uuid4()), **self.payload}
            self.rows.append(row)
            return SimpleNamespace(data=[dict(row)])

        if self.op == "update":
            updated = []
            for row in self.rows:
                if self._matches(row):
                    row.update(self.payload)
                    updated.append(dict(row))
            return SimpleNamespace(data=updated)

        result = [dict(r) for r in self.rows if self._matches(r)]
        if self.ordering:
            column, desc = self.ordering
            result.sort(key=lambda r: r[column], reverse=desc)
        return SimpleNamespace(data=result)


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.fail = False

    def table(self, name):
        return FakeQuery(self.tables.setdefault(name, []), fail=self.fail)

    def rows(self, name=None):
        return self.tables.setdefault(name or settings.SUPABASE_BOOKINGS_TABLE, [])


@pytest.fixture
def fake_db():
    fake = FakeSupabase()
    db_service._client = fake
    yield fake
    db_service._client = None


@pytest.fixture
def no_twilio(monkeypatch):
    monkeypatch.setattr(settings, "TWILIO_ACCOUNT_SID", "")
    monkeypatch.setattr(settings, "TWILIO_AUTH_TOKEN", "")


@pytest.fixture
def booking_payload():
    return {
        "serviceName": "Corte e Barba",
        "barberName": "Carlos",
        "date": "2024-05-01",
        "time": "10:00",
        "clientName": "Ana",
        "clientPhone": "559999999999",
    }
