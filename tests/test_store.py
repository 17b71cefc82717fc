"""ConfigStore stories: mapping access, lifecycle and persistence integrity."""

from __future__ import annotations

import orjson
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from bland.adapters.memory import InMemoryBackend
from bland.application.store import ConfigStore, frame, unframe
from bland.composition import create_store
from bland.domain.enums import StoreState, TransformKind
from bland.domain.errors import (
    AuthenticationError,
    BackendIOError,
    DecompressionError,
    MalformedCiphertextError,
    SerializationError,
    TransformMismatchError,
)
from bland.domain.models import Capabilities

KEY = bytes(range(32))
OTHER_KEY = bytes(32)

PLAIN = Capabilities()
COMPRESSED = Capabilities(compression=True)
ENCRYPTED = Capabilities(crypto=True)


def _store(caps: Capabilities, key: bytes | None = None) -> ConfigStore:
    if caps.crypto and key is None:
        key = KEY
    return create_store(caps, key)


# ======================== Mapping access ========================


@pytest.mark.os_agnostic
def test_fresh_store_is_empty_and_uninitialized() -> None:
    store = _store(PLAIN)

    assert len(store) == 0
    assert store.keys() == []
    assert store.dirty is False
    assert store.state is StoreState.UNINITIALIZED


@pytest.mark.os_agnostic
def test_set_then_get_returns_value_and_marks_dirty() -> None:
    store = _store(PLAIN)

    store.set("port", 8080)

    assert store.get("port") == 8080
    assert "port" in store
    assert store.dirty is True
    assert store.state is StoreState.MUTATED


@pytest.mark.os_agnostic
def test_get_missing_key_returns_default() -> None:
    store = _store(PLAIN)

    assert store.get("missing") is None
    assert store.get("missing", "fallback") == "fallback"


@pytest.mark.os_agnostic
def test_remove_missing_key_keeps_store_clean() -> None:
    store = _store(PLAIN)

    assert store.remove("missing") is False
    assert store.dirty is False
    assert store.state is StoreState.UNINITIALIZED


@pytest.mark.os_agnostic
def test_remove_existing_key_marks_dirty() -> None:
    backend = InMemoryBackend()
    store = _store(PLAIN)
    store.set("a", 1)
    store.save(backend)

    assert store.remove("a") is True
    assert store.dirty is True
    assert "a" not in store


@pytest.mark.os_agnostic
def test_clear_on_empty_store_is_not_a_mutation() -> None:
    store = _store(PLAIN)

    store.clear()

    assert store.dirty is False


@pytest.mark.os_agnostic
def test_clear_drops_every_key() -> None:
    store = _store(PLAIN)
    store.set("a", 1)
    store.set("b", 2)

    store.clear()

    assert len(store) == 0
    assert store.dirty is True


@pytest.mark.os_agnostic
def test_keys_preserve_insertion_order() -> None:
    store = _store(PLAIN)
    for key in ("zeta", "alpha", "mid"):
        store.set(key, True)

    assert store.keys() == ["zeta", "alpha", "mid"]
    assert list(store) == ["zeta", "alpha", "mid"]


@pytest.mark.os_agnostic
def test_as_dict_returns_an_independent_copy() -> None:
    store = _store(PLAIN)
    store.set("server", {"port": 1})

    snapshot = store.as_dict()
    snapshot["server"]["port"] = 2  # type: ignore[index]

    assert store.get_path("server.port") == 1


@pytest.mark.os_agnostic
def test_values_are_copied_in_and_out() -> None:
    store = _store(PLAIN)
    hosts = ["a"]
    store.set("hosts", hosts)
    store.set_path("server.tls", {"enabled": False})
    store.save(InMemoryBackend())

    hosts.append("b")
    store.get("hosts").append("c")  # type: ignore[union-attr]
    store.get_path("server.tls")["enabled"] = True  # type: ignore[index]

    assert store.as_dict() == {"hosts": ["a"], "server": {"tls": {"enabled": False}}}
    assert store.dirty is False


@pytest.mark.os_agnostic
def test_dotted_path_helpers_mark_dirty_only_on_change() -> None:
    store = _store(PLAIN)
    store.set_path("server.http.port", 8080)
    store.save(InMemoryBackend())

    assert store.has_path("server.http.port")
    assert store.remove_path("server.http.missing") is False
    assert store.dirty is False
    assert store.remove_path("server.http.port") is True
    assert store.dirty is True


@pytest.mark.os_agnostic
def test_repr_shows_kind_and_state_but_not_values() -> None:
    store = _store(ENCRYPTED)
    store.set("password", "hunter2")

    text = repr(store)

    assert "encrypt" in text
    assert "mutated" in text
    assert "hunter2" not in text


# ======================== Round trips ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("caps", [PLAIN, COMPRESSED, ENCRYPTED, Capabilities(compression=True, crypto=True)])
def test_save_then_load_restores_the_mapping(caps: Capabilities) -> None:
    backend = InMemoryBackend()
    writer = _store(caps)
    writer.set("name", "bland")
    writer.set("nested", {"list": [1, 2.5, None, True], "empty": {}})
    writer.save(backend)

    reader = _store(caps)
    reader.load(backend)

    assert reader.as_dict() == writer.as_dict()
    assert reader.state is StoreState.LOADED
    assert reader.dirty is False


@pytest.mark.os_agnostic
@pytest.mark.parametrize("caps", [PLAIN, COMPRESSED, ENCRYPTED])
def test_loading_an_empty_backend_yields_an_empty_mapping(caps: Capabilities) -> None:
    store = _store(caps)

    store.load(InMemoryBackend())

    assert store.as_dict() == {}
    assert store.state is StoreState.LOADED


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("caps", "header"),
    [(PLAIN, 0x00), (COMPRESSED, 0x01), (ENCRYPTED, 0x02)],
)
def test_saved_blob_starts_with_the_format_header(caps: Capabilities, header: int) -> None:
    backend = InMemoryBackend()
    store = _store(caps)

    store.save(backend)

    assert backend.data[0] == header


@pytest.mark.os_agnostic
def test_plain_blob_is_header_plus_compact_json() -> None:
    backend = InMemoryBackend()
    store = _store(PLAIN)
    store.set("a", 1)

    store.save(backend)

    assert backend.data == b'\x00{"a":1}'


@pytest.mark.os_agnostic
def test_save_clears_dirty_and_enters_saved_state() -> None:
    backend = InMemoryBackend()
    store = _store(PLAIN)
    store.set("a", 1)

    store.save(backend)

    assert store.dirty is False
    assert store.state is StoreState.SAVED
    assert backend.writes == 1


@pytest.mark.os_agnostic
def test_encrypting_the_same_mapping_twice_gives_different_blobs() -> None:
    first, second = InMemoryBackend(), InMemoryBackend()
    store = _store(ENCRYPTED)
    store.set("a", 1)

    store.save(first)
    store.save(second)

    assert first.data != second.data


@pytest.mark.os_agnostic
@settings(max_examples=40, deadline=None)
@given(
    mapping=st.dictionaries(
        st.text(max_size=8),
        st.none()
        | st.booleans()
        | st.integers(-(2**53), 2**53)
        | st.floats(allow_nan=False, allow_infinity=False)
        | st.text(max_size=16),
        max_size=8,
    ),
    caps=st.sampled_from([PLAIN, COMPRESSED, ENCRYPTED]),
)
def test_any_scalar_mapping_survives_persistence(mapping: dict[str, object], caps: Capabilities) -> None:
    backend = InMemoryBackend()
    writer = _store(caps)
    for key, value in mapping.items():
        writer.set(key, value)  # type: ignore[arg-type]
    writer.save(backend)

    reader = _store(caps)
    reader.load(backend)

    assert reader.as_dict() == mapping


# ======================== Failure atomicity ========================


@pytest.mark.os_agnostic
def test_failed_save_keeps_dirty_and_previous_blob() -> None:
    backend = InMemoryBackend()
    store = _store(PLAIN)
    store.set("a", 1)
    store.save(backend)
    store.set("a", 2)
    backend.fail_writes = True

    with pytest.raises(BackendIOError):
        store.save(backend)

    assert store.dirty is True
    assert store.state is StoreState.MUTATED
    assert backend.data == b'\x00{"a":1}'


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), 2**70])
def test_unrepresentable_value_fails_save_and_keeps_dirty(value: object) -> None:
    backend = InMemoryBackend()
    store = _store(PLAIN)
    store.set("x", 1.5)
    store.save(backend)
    store.set("x", value)  # type: ignore[arg-type]

    with pytest.raises(SerializationError):
        store.save(backend)

    assert store.dirty is True
    assert store.state is StoreState.MUTATED
    assert backend.data == b'\x00{"x":1.5}'


@pytest.mark.os_agnostic
def test_failed_read_keeps_previous_mapping() -> None:
    backend = InMemoryBackend(fail_reads=True)
    store = _store(PLAIN)
    store.set("keep", "me")

    with pytest.raises(BackendIOError):
        store.load(backend)

    assert store.get("keep") == "me"
    assert store.dirty is True


@pytest.mark.os_agnostic
def test_failed_decode_keeps_previous_mapping() -> None:
    backend = InMemoryBackend(data=b"\x00not json")
    store = _store(PLAIN)
    store.set("keep", "me")

    with pytest.raises(SerializationError):
        store.load(backend)

    assert store.as_dict() == {"keep": "me"}
    assert store.state is StoreState.MUTATED


# ======================== Integrity ========================


@pytest.mark.os_agnostic
def test_every_tampered_byte_of_an_encrypted_blob_is_detected() -> None:
    backend = InMemoryBackend()
    store = _store(ENCRYPTED)
    store.set("secret", "value")
    store.save(backend)
    original = backend.data

    for position in range(len(original)):
        tampered = bytearray(original)
        tampered[position] ^= 0x01
        backend.data = bytes(tampered)

        with pytest.raises(AuthenticationError):
            _store(ENCRYPTED).load(backend)


@pytest.mark.os_agnostic
def test_wrong_key_fails_authentication() -> None:
    backend = InMemoryBackend()
    writer = _store(ENCRYPTED, KEY)
    writer.set("a", 1)
    writer.save(backend)

    with pytest.raises(AuthenticationError):
        _store(ENCRYPTED, OTHER_KEY).load(backend)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("foreign", [PLAIN, COMPRESSED])
def test_encrypting_store_rejects_unencrypted_blobs_as_unauthenticated(foreign: Capabilities) -> None:
    backend = InMemoryBackend()
    writer = _store(foreign)
    writer.set("a", 1)
    writer.save(backend)

    with pytest.raises(AuthenticationError):
        _store(ENCRYPTED).load(backend)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("writer_caps", "reader_caps"),
    [(COMPRESSED, PLAIN), (PLAIN, COMPRESSED), (ENCRYPTED, PLAIN), (ENCRYPTED, COMPRESSED)],
)
def test_reading_with_a_different_transform_is_a_mismatch(writer_caps: Capabilities, reader_caps: Capabilities) -> None:
    backend = InMemoryBackend()
    writer = _store(writer_caps)
    writer.set("a", 1)
    writer.save(backend)

    with pytest.raises(TransformMismatchError):
        _store(reader_caps).load(backend)


@pytest.mark.os_agnostic
def test_unknown_format_header_is_a_mismatch() -> None:
    with pytest.raises(TransformMismatchError, match="0x7f"):
        _store(PLAIN).load(InMemoryBackend(data=b"\x7f{}"))


@pytest.mark.os_agnostic
def test_truncated_encrypted_blob_is_malformed() -> None:
    backend = InMemoryBackend(data=b"\x02" + bytes(10))

    with pytest.raises(MalformedCiphertextError):
        _store(ENCRYPTED).load(backend)


@pytest.mark.os_agnostic
def test_corrupt_compressed_blob_fails_decompression() -> None:
    backend = InMemoryBackend(data=b"\x01garbage")

    with pytest.raises(DecompressionError):
        _store(COMPRESSED).load(backend)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("payload", [[1, 2], "text", 42, None])
def test_non_object_payload_is_a_serialization_error(payload: object) -> None:
    backend = InMemoryBackend(data=b"\x00" + orjson.dumps(payload))

    with pytest.raises(SerializationError, match="JSON object"):
        _store(PLAIN).load(backend)


# ======================== frame / unframe ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("kind", list(TransformKind))
def test_unframe_strips_the_header_written_by_frame(kind: TransformKind) -> None:
    assert unframe(kind, frame(kind, b"payload")) == b"payload"


@pytest.mark.os_agnostic
def test_frame_of_empty_payload_is_just_the_header() -> None:
    assert frame(TransformKind.COMPRESS, b"") == b"\x01"
