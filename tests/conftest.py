"""Shared fixtures: a throwaway SQLite database, stores, accounts, API client."""
import pytest
from httpx import ASGITransport, AsyncClient

from vaultkeep.app.db.session import Database
from vaultkeep.app.main import create_app
from vaultkeep.app.security.jwt import create_access_token
from vaultkeep.app.services.accounts import AccountStore
from vaultkeep.app.services.master_key import MasterKeyGate
from vaultkeep.app.services.vault_store import VaultStore

ALICE_MASTER_KEY = "correct horse battery staple"
BOB_MASTER_KEY = "tr0ub4dor&3"


def auth_headers(account_id) -> dict:
    token = create_access_token({"sub": str(account_id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'vault.db'}")
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
async def session(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def store(session):
    return VaultStore(session)


@pytest.fixture
def accounts(session):
    return AccountStore(session)


@pytest.fixture
def gate(accounts):
    return MasterKeyGate(accounts)


@pytest.fixture
async def alice(accounts):
    return await accounts.create("alice", "alice-login-password", master_key=ALICE_MASTER_KEY)


@pytest.fixture
async def bob(accounts):
    return await accounts.create("bob", "bob-login-password", master_key=BOB_MASTER_KEY)


@pytest.fixture
async def client(database):
    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def master_keys():
    return {"alice": ALICE_MASTER_KEY, "bob": BOB_MASTER_KEY}


@pytest.fixture(name="auth_headers")
def auth_headers_fixture():
    return auth_headers
