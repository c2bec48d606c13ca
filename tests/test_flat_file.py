"""Tests for the flat-file codec: format, round trip, bad header, skipped records."""

from pathlib import Path

from addrbook.application import (
    FileUnavailable,
    Loaded,
    MalformedHeader,
    MalformedRecord,
    Saved,
)
from addrbook.domain import Contact
from addrbook.infrastructure import FlatFileCodec, InMemoryContactStore
from addrbook.infrastructure.flat_file import (
    format_record,
    parse_decimal,
    parse_header,
    parse_record,
)


def _populated_store() -> InMemoryContactStore:
    store = InMemoryContactStore()
    store.create("Alice", "2025551111", "alice@example.com")
    store.create("Bob Jones", "2025552222", "bob@example.com")
    store.create("Carol", "2025553333", "carol@example.com")
    store.delete(2)
    store.create("Dave", "2025554444", "dave@example.com")
    return store


def test_save_writes_count_then_records(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    result = FlatFileCodec().save(_populated_store(), path)

    assert result == Saved(path=path, count=3)
    assert path.read_text(encoding="utf-8") == (
        "3\n"
        "1,Alice,2025551111,alice@example.com\n"
        "3,Carol,2025553333,carol@example.com\n"
        "4,Dave,2025554444,dave@example.com\n"
    )
    assert not (tmp_path / "contacts.csv.tmp").exists()


def test_save_empty_store(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    assert FlatFileCodec().save([], path) == Saved(path=path, count=0)
    assert path.read_text(encoding="utf-8") == "0\n"


def test_round_trip_preserves_order_and_ids(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    original = _populated_store()
    codec = FlatFileCodec()
    codec.save(original, path)

    fresh = InMemoryContactStore()
    result = codec.load(fresh, path)

    assert isinstance(result, Loaded)
    assert result.count == 3
    assert result.skipped == ()
    assert fresh.list_all() == original.list_all()


def test_load_recomputes_next_id(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text("2\n5,Eve,2025555555,eve@example.com\n2,Bo,2025552222,bo@example.com\n")
    store = InMemoryContactStore()
    FlatFileCodec().load(store, path)
    assert store.next_id == 6
    assert store.create("Fay", "2025556666", "fay@example.com") == 6


def test_load_non_numeric_header_leaves_store_unchanged(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text("many\n1,Alice,2025551111,alice@example.com\n")
    store = InMemoryContactStore()
    store.create("Zed", "2025550000", "zed@example.com")

    result = FlatFileCodec().load(store, path)

    assert result == MalformedHeader(path=path, line="many")
    assert [c.name for c in store] == ["Zed"]
    assert store.next_id == 2


def test_load_empty_file_is_malformed_header(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text("")
    store = InMemoryContactStore()
    assert isinstance(FlatFileCodec().load(store, path), MalformedHeader)
    assert len(store) == 0


def test_load_negative_header_is_malformed(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text("-1\n")
    assert isinstance(FlatFileCodec().load(InMemoryContactStore(), path), MalformedHeader)


def test_load_skips_malformed_and_missing_lines(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text(
        "5\n"
        "1,Alice,2025551111,alice@example.com\n"
        "not a record\n"
        "2,Bob,2025552222,bob@example.com\n"
        "3,Carol,2025553333,carol@example.com\n"
    )
    store = InMemoryContactStore()

    result = FlatFileCodec().load(store, path)

    assert isinstance(result, Loaded)
    assert result.count == 3
    assert [c.id for c in store] == [1, 2, 3]
    assert [r.line_number for r in result.skipped] == [3, 6]
    assert result.skipped[0] == MalformedRecord(line_number=3, text="not a record")


def test_load_reads_only_announced_count(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text(
        "1\n"
        "1,Alice,2025551111,alice@example.com\n"
        "2,Bob,2025552222,bob@example.com\n"
    )
    store = InMemoryContactStore()
    result = FlatFileCodec().load(store, path)
    assert result.count == 1
    assert [c.name for c in store] == ["Alice"]


def test_load_appends_to_existing_contacts(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text("1\n9,Ivy,2025559999,ivy@example.com\n")
    store = InMemoryContactStore()
    store.create("Ann", "2025550001", "ann@example.com")
    FlatFileCodec().load(store, path)
    assert [c.id for c in store] == [1, 9]


def test_load_does_not_revalidate(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text("2\n1,R2D2,12,NOT-AN-EMAIL\n2,Copy,12,NOT-AN-EMAIL\n")
    store = InMemoryContactStore()
    result = FlatFileCodec().load(store, path)
    assert result.count == 2
    assert store.get(1).name == "R2D2"


def test_load_handles_crlf(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_bytes(b"1\r\n1,Alice,2025551111,alice@example.com\r\n")
    store = InMemoryContactStore()
    result = FlatFileCodec().load(store, path)
    assert result.count == 1
    assert store.get(1).email == "alice@example.com"


def test_load_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "missing.csv"
    store = InMemoryContactStore()
    result = FlatFileCodec().load(store, path)
    assert isinstance(result, FileUnavailable)
    assert result.path == path
    assert len(store) == 0


def test_save_to_missing_directory(tmp_path: Path) -> None:
    path = tmp_path / "no" / "such" / "dir" / "contacts.csv"
    result = FlatFileCodec().save(_populated_store(), path)
    assert isinstance(result, FileUnavailable)
    assert not path.exists()


def test_parse_record() -> None:
    assert parse_record("3,Carol,2025553333,carol@example.com") == Contact(
        id=3, name="Carol", phone="2025553333", email="carol@example.com"
    )
    assert parse_record("") is None
    assert parse_record("x,Carol,2025553333,carol@example.com") is None
    assert parse_record("0,Carol,2025553333,carol@example.com") is None
    assert parse_record("3,Carol,2025553333") is None
    assert parse_record("3,Carol,2025553333,a,b@c.d").email == "a,b@c.d"
    assert parse_record("3,,2025553333,carol@example.com") is None


def test_parse_header() -> None:
    assert parse_header("12") == 12
    assert parse_header(" 0 ") == 0
    assert parse_header("") is None
    assert parse_header("1.5") is None
    assert parse_header("1_0") is None
    assert parse_header("+1") is None
    assert parse_header("٣") is None


def test_format_record() -> None:
    contact = Contact(id=8, name="Hal", phone="2025558888", email="hal@example.com")
    assert format_record(contact) == "8,Hal,2025558888,hal@example.com"


def test_round_trip_email_with_commas(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    store = InMemoryContactStore()
    store.create("Al", "2025551111", "a,b@c.d")
    store.create("Bea", "2025552222", "x,y,z@w.v")
    codec = FlatFileCodec()
    codec.save(store, path)

    fresh = InMemoryContactStore()
    result = codec.load(fresh, path)

    assert isinstance(result, Loaded)
    assert result.skipped == ()
    assert fresh.list_all() == store.list_all()


def test_save_unencodable_text_reports_file_unavailable(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text("0\n", encoding="utf-8")
    store = InMemoryContactStore()
    store.create("Al", "2025551111", "\udcffa@b.c")

    result = FlatFileCodec().save(store, path)

    assert isinstance(result, FileUnavailable)
    assert not (tmp_path / "contacts.csv.tmp").exists()
    # The previous file is left as it was.
    assert path.read_text(encoding="utf-8") == "0\n"


def test_parse_decimal_accepts_only_ascii_digits() -> None:
    assert parse_decimal("10") == 10
    assert parse_decimal(" 7 ") == 7
    assert parse_decimal("1_0") is None
    assert parse_decimal("+3") is None
    assert parse_decimal("-3") is None
    assert parse_decimal("٣") is None
    assert parse_decimal("") is None


def test_load_rejects_python_only_number_forms(tmp_path: Path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text("1_0\n", encoding="utf-8")
    assert isinstance(FlatFileCodec().load(InMemoryContactStore(), path), MalformedHeader)

    path.write_text("1\n1_0,Al,2025551111,al@example.com\n", encoding="utf-8")
    store = InMemoryContactStore()
    result = FlatFileCodec().load(store, path)
    assert result.count == 0
    assert [r.line_number for r in result.skipped] == [2]
    assert len(store) == 0
