import pytest

from .. import graph
from . import OBJECT_KINDS, Blob, deserialize, serialize


def test_every_kind_has_a_class() -> None:

    assert set(OBJECT_KINDS) == set(graph.ObjectKind)
    for kind, cls in OBJECT_KINDS.items():
        assert cls.kind is kind


def test_blob_digest_matches_git() -> None:

    blob = Blob(b"hello\n")
    assert blob.frame() == b"blob 6\x00hello\n"
    assert blob.digest().str() == "ce013625030ba8dba906f756967f9e9ca394464a"


def test_empty_blob_digest_matches_git() -> None:

    assert Blob().digest().str() == "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"


def test_blob_payload_is_verbatim() -> None:

    data = bytes(range(256))
    blob = deserialize("blob", data)
    assert isinstance(blob, Blob)
    assert blob.data == data
    assert serialize(blob) == data


def test_deserialize_unknown_kind() -> None:

    with pytest.raises(ValueError):
        deserialize("widget", b"")
