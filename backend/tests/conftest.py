import os

# The app module builds its default engine at import time; keep it off disk.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.database import Store, get_db, init_db, make_engine
from app.main import app


@pytest.fixture()
def engine(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'procurement_test.db'}")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def store(session_factory):
    session = session_factory()
    yield Store(session)
    session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # 500s are asserted as responses, not re-raised into the test.
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def register(client, name="Ada", email="ada@example.com", password="s3cret!"):
    return client.post("/api/auth/register", json={"name": name, "email": email, "password": password})


def create_rfp(client, title="Office chairs", description="120 ergonomic chairs"):
    r = client.post("/api/rfps", json={"title": title, "description": description})
    assert r.status_code == 201
    return r.json()["rfpId"]


def onboard(client, name="Acme Ltd", registration_number="REG-001", address="1 Main St"):
    r = client.post(
        "/api/suppliers/onboard",
        json={"name": name, "registrationNumber": registration_number, "address": address},
    )
    assert r.status_code == 201
    return r.json()["supplierId"]


def submit_bid(client, rfp_id, supplier_id, amount, documents="quote.pdf"):
    r = client.post(
        "/api/bids",
        json={"rfpId": rfp_id, "supplierId": supplier_id, "amount": amount, "documents": documents},
    )
    assert r.status_code == 201
    return r.json()["bidId"]
