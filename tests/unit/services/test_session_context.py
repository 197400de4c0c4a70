"""Tests for the durable / volatile session slots."""

import json

from app.schemas.user import SessionUser
from app.services.session_context import (
    SESSION_KEY,
    FileSessionStore,
    MemorySessionStore,
    SessionContext,
    get_session_context,
)

ALICE = SessionUser(id="u-1", email="alice@univ.ac.kr", name="Alice")
BOB = SessionUser(id="u-2", email="bob@univ.ac.kr", name="Bob", profile_picture="https://cdn/bob.png")


class TestFileSessionStore:

    def test_missing_file_reads_none(self, tmp_path):
        assert FileSessionStore(tmp_path / "nope.json").read() is None

    def test_write_uses_current_user_key(self, session_file):
        FileSessionStore(session_file).write("payload")
        assert json.loads(session_file.read_text(encoding="utf-8")) == {SESSION_KEY: "payload"}

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "session.json"
        FileSessionStore(path).write("x")
        assert FileSessionStore(path).read() == "x"

    def test_garbage_reads_none(self, session_file):
        session_file.write_text("{not json", encoding="utf-8")
        assert FileSessionStore(session_file).read() is None

    def test_wrong_shape_reads_none(self, session_file):
        session_file.write_text(json.dumps(["current_user"]), encoding="utf-8")
        assert FileSessionStore(session_file).read() is None
        session_file.write_text(json.dumps({SESSION_KEY: 42}), encoding="utf-8")
        assert FileSessionStore(session_file).read() is None

    def test_clear_twice(self, session_file):
        store = FileSessionStore(session_file)
        store.write("x")
        store.clear()
        store.clear()
        assert not session_file.exists()


class TestSessionContext:

    def test_empty(self, session_context):
        assert session_context.get_session() is None

    def test_volatile_session(self, session_file):
        context = SessionContext(durable=FileSessionStore(session_file))
        context.set_session(ALICE, remember=False)
        assert context.get_session() == ALICE
        assert not session_file.exists()

    def test_durable_session_survives_new_context(self, session_file):
        SessionContext(durable=FileSessionStore(session_file)).set_session(ALICE, remember=True)
        assert SessionContext(durable=FileSessionStore(session_file)).get_session() == ALICE

    def test_set_replaces_other_slot(self, session_file):
        volatile = MemorySessionStore()
        context = SessionContext(durable=FileSessionStore(session_file), volatile=volatile)

        context.set_session(ALICE, remember=True)
        context.set_session(BOB, remember=False)

        assert context.get_session() == BOB
        assert not session_file.exists()

        context.set_session(ALICE, remember=True)
        assert volatile.read() is None
        assert context.get_session() == ALICE

    def test_clear_is_idempotent(self, session_context):
        session_context.set_session(ALICE, remember=True)
        session_context.clear_session()
        session_context.clear_session()
        assert session_context.get_session() is None

    def test_corrupt_snapshot_reads_as_no_session(self, session_file):
        FileSessionStore(session_file).write('{"email": "missing-id@univ.ac.kr"}')
        assert SessionContext(durable=FileSessionStore(session_file)).get_session() is None

    def test_corrupt_volatile_falls_back_to_durable(self, session_file):
        volatile = MemorySessionStore()
        volatile.write("not json at all")
        FileSessionStore(session_file).write(ALICE.model_dump_json())

        context = SessionContext(durable=FileSessionStore(session_file), volatile=volatile)
        assert context.get_session() == ALICE

    def test_refresh_keeps_slot(self, session_file):
        volatile = MemorySessionStore()
        context = SessionContext(durable=FileSessionStore(session_file), volatile=volatile)
        updated = ALICE.model_copy(update={"name": "Alice Kim"})

        context.set_session(ALICE, remember=True)
        context.refresh_session(updated)
        assert volatile.read() is None
        assert SessionContext(durable=FileSessionStore(session_file)).get_session() == updated

    def test_refresh_without_session_is_noop(self, session_context):
        session_context.refresh_session(ALICE)
        assert session_context.get_session() is None


class TestGetSessionContext:

    def test_uses_configured_session_file(self, tmp_path, monkeypatch):
        path = tmp_path / "configured" / "session.json"
        monkeypatch.setattr("app.services.session_context.settings.SESSION_FILE", path)

        get_session_context().set_session(ALICE, remember=True)

        assert json.loads(path.read_text(encoding="utf-8"))[SESSION_KEY]
        assert get_session_context().get_session() == ALICE
