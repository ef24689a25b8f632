"""Tests for VaultService: caller binding and delegation."""
import pytest

from vaultkeep.app.core.errors import NotFound, Unauthorized
from vaultkeep.app.schemas.user import CallerIdentity
from vaultkeep.app.services.vault_service import VaultService


class RecordingStore:
    """Stands in for VaultStore and records every call."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        async def call(*args):
            self.calls.append((name, args))
            return []
        return call


class RecordingGate:
    def __init__(self):
        self.calls = []

    async def verify(self, account_id, presented_key):
        self.calls.append((account_id, presented_key))
        return True


@pytest.fixture
def recording_store():
    return RecordingStore()


@pytest.fixture
def recording_gate():
    return RecordingGate()


OPERATIONS = [
    ("list", ()),
    ("create", ("bank", "cAfe01", "000102", ["finance"])),
    ("update", (1, "bank", "cAfe01", "000102", None)),
    ("delete", (1,)),
    ("search", ("bank",)),
]


class TestWithoutCaller:

    @pytest.mark.parametrize("operation,args", OPERATIONS)
    async def test_store_is_never_reached(self, recording_store, recording_gate, operation, args):
        service = VaultService(recording_store, recording_gate, caller=None)

        with pytest.raises(Unauthorized):
            await getattr(service, operation)(*args)

        assert recording_store.calls == []

    async def test_master_key_gate_is_never_reached(self, recording_store, recording_gate):
        service = VaultService(recording_store, recording_gate, caller=None)

        with pytest.raises(Unauthorized):
            await service.verify_master_key("secret")

        assert recording_gate.calls == []


class TestWithCaller:

    @pytest.mark.parametrize("operation,args", OPERATIONS)
    async def test_owner_is_the_caller(self, recording_store, recording_gate, operation, args):
        service = VaultService(recording_store, recording_gate, CallerIdentity(account_id=7))

        await getattr(service, operation)(*args)

        assert recording_store.calls == [(operation, (7,) + args)]

    async def test_master_key_checked_for_caller(self, recording_store, recording_gate):
        service = VaultService(recording_store, recording_gate, CallerIdentity(account_id=7))

        assert await service.verify_master_key("secret") is True
        assert recording_gate.calls == [(7, "secret")]


async def test_cross_owner_access_through_real_store(store, gate, alice, bob):
    as_alice = VaultService(store, gate, CallerIdentity(account_id=alice.id))
    as_bob = VaultService(store, gate, CallerIdentity(account_id=bob.id))

    item = await as_alice.create("bank", "cAfe01", "000102", ["finance"])

    assert await as_bob.list() == []
    assert await as_bob.search("bank") == []
    with pytest.raises(NotFound):
        await as_bob.update(item.id, "bank", "x", "y")
    with pytest.raises(NotFound):
        await as_bob.delete(item.id)

    assert [i.id for i in await as_alice.list()] == [item.id]
