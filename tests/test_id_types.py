import re
import uuid

import pytest
from acton_ern import IdGenerationError, IdType, TypeSafeId
from acton_ern import id_types

CROCKFORD_SUFFIX = r"[0-9abcdefghjkmnpqrstvwxyz]{26}"


def test_id_type_versions():
    assert IdType.UNIX_TIME.generate_uuid().version == 7
    assert IdType.TIMESTAMP.generate_uuid().version == 6
    assert IdType.RANDOM.generate_uuid().version == 4


def test_id_type_from_name():
    assert IdType.from_name("UNIX_TIME") == IdType.UNIX_TIME
    assert IdType.from_name("timestamp") == IdType.TIMESTAMP
    assert IdType.from_name(" Random ") == IdType.RANDOM

    with pytest.raises(IdGenerationError):
        IdType.from_name("uuid9")


def test_generate_type_safe_id():
    tsid = TypeSafeId.generate("user")
    assert tsid.tag == "user"
    assert re.fullmatch(rf"user_{CROCKFORD_SUFFIX}", str(tsid))


def test_generated_ids_differ():
    assert TypeSafeId.generate("user") != TypeSafeId.generate("user")


def test_tag_rules():
    assert TypeSafeId.generate("custom_root").tag == "custom_root"
    assert TypeSafeId.generate("a" * 63).tag == "a" * 63

    for bad in ("", "User", "_user", "user_", "user1", "a" * 64, "with space"):
        with pytest.raises(IdGenerationError):
            TypeSafeId.generate(bad)


def test_type_safe_id_from_string():
    tsid = TypeSafeId.generate("custom_root", IdType.RANDOM)
    decoded = TypeSafeId.from_string(str(tsid))
    assert decoded == tsid
    assert decoded.tag == "custom_root"
    assert decoded.uuid.version == 4


def test_type_safe_id_known_value():
    tsid = TypeSafeId("acton", uuid.UUID(int=0))
    assert str(tsid) == "acton_" + "0" * 26
    assert TypeSafeId.from_string(str(tsid)).uuid == uuid.UUID(int=0)


def test_type_safe_id_from_string_rejects_garbage():
    for bad in ("nounderscore", "_" + "0" * 26, "user_short", "user_" + "0" * 25 + "U", "User_" + "0" * 26):
        with pytest.raises(IdGenerationError):
            TypeSafeId.from_string(bad)


def test_generator_failure_is_wrapped(monkeypatch):
    def broken():
        raise RuntimeError("clock went backwards")

    monkeypatch.setitem(id_types._GENERATORS, IdType.RANDOM, broken)
    with pytest.raises(IdGenerationError) as exc_info:
        TypeSafeId.generate("user", IdType.RANDOM)
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert "clock went backwards" in str(exc_info.value)


def test_id_type_resolve():
    assert IdType.resolve(IdType.TIMESTAMP) is IdType.TIMESTAMP
    assert IdType.resolve("Unix_Time") is IdType.UNIX_TIME

    for bad in ("bogus", 7, None):
        with pytest.raises(IdGenerationError):
            IdType.resolve(bad)

    with pytest.raises(IdGenerationError):
        TypeSafeId.generate("user", "bogus")
