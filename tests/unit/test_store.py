from __future__ import annotations

from pathlib import Path

from hop.core.config import HopConfig
from hop.core.result import Err, LoadError, Ok, SaveError
from hop.core.store import ShortcutStore


def test_missing_file_is_empty_store(tmp_path: Path) -> None:
    store = ShortcutStore(tmp_path / "nope" / "paths.csv")
    assert store.load() == Ok({})


def test_save_creates_parent_and_writes_sorted_rows(tmp_path: Path) -> None:
    path = tmp_path / "deep" / "hop" / "paths.csv"
    store = ShortcutStore(path)

    result = store.save({"web": "/srv/www", "api": "~/code/api"})

    assert result == Ok(None)
    assert path.read_text(encoding="utf-8") == "api,~/code/api\nweb,/srv/www\n"


def test_save_then_load_round_trips(tmp_path: Path) -> None:
    store = ShortcutStore(tmp_path / "paths.csv")
    shortcuts = {"proj": "~/code/proj", "tmp": "/tmp", "home": "~"}

    store.save(shortcuts)

    assert store.load() == Ok(shortcuts)


def test_csv_special_characters_are_escaped(tmp_path: Path) -> None:
    path = tmp_path / "paths.csv"
    store = ShortcutStore(path)
    shortcuts = {"my,proj": '/data/a "quoted" dir'}

    store.save(shortcuts)

    assert path.read_text(encoding="utf-8") == '"my,proj","/data/a ""quoted"" dir"\n'
    assert store.load() == Ok(shortcuts)


def test_save_replaces_previous_content(tmp_path: Path) -> None:
    path = tmp_path / "paths.csv"
    store = ShortcutStore(path)
    store.save({"old": "/old", "keep": "/keep"})

    store.save({"keep": "/keep"})

    assert path.read_text(encoding="utf-8") == "keep,/keep\n"
    assert not list(tmp_path.glob("*.tmp"))


def test_blank_lines_are_skipped(tmp_path: Path) -> None:
    path = tmp_path / "paths.csv"
    path.write_text("a,/a\n\nb,/b\n", encoding="utf-8")

    assert ShortcutStore(path).load() == Ok({"a": "/a", "b": "/b"})


def test_later_duplicate_rows_win(tmp_path: Path) -> None:
    path = tmp_path / "paths.csv"
    path.write_text("a,/first\na,/second\n", encoding="utf-8")

    assert ShortcutStore(path).load() == Ok({"a": "/second"})


def test_wrong_field_count_is_load_error(tmp_path: Path) -> None:
    path = tmp_path / "paths.csv"
    original = "a,/a\nbroken,/b,extra\n"
    path.write_text(original, encoding="utf-8")

    result = ShortcutStore(path).load()

    assert isinstance(result, Err)
    assert isinstance(result.error, LoadError)
    assert result.error.context["line"] == 2
    assert path.read_text(encoding="utf-8") == original


def test_single_field_row_is_load_error(tmp_path: Path) -> None:
    path = tmp_path / "paths.csv"
    path.write_text("lonely\n", encoding="utf-8")

    result = ShortcutStore(path).load()

    assert result.is_err()


def test_bad_quoting_is_load_error(tmp_path: Path) -> None:
    path = tmp_path / "paths.csv"
    path.write_text('"a"x,/a\n', encoding="utf-8")

    result = ShortcutStore(path).load()

    assert isinstance(result, Err)
    assert isinstance(result.error, LoadError)


def test_non_utf8_bytes_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "paths.csv"
    path.write_bytes(b"cafe,/data/caf\xe9\n")

    shortcuts = ShortcutStore(path).load().unwrap()

    assert shortcuts == {"cafe": "/data/caf\udce9"}
    ShortcutStore(path).save(shortcuts)
    assert path.read_bytes() == b"cafe,/data/caf\xe9\n"


def test_unencodable_path_is_save_error_and_leaves_no_temp_file(tmp_path: Path) -> None:
    path = tmp_path / "paths.csv"
    store = ShortcutStore(path)
    store.save({"keep": "/keep"})

    result = store.save({"keep": "/keep", "bad": "/data/\ud800"})

    assert isinstance(result, Err)
    assert isinstance(result.error, SaveError)
    assert not (tmp_path / ".paths.csv.tmp").exists()
    assert path.read_text(encoding="utf-8") == "keep,/keep\n"


def test_unwritable_location_is_save_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = ShortcutStore(blocker / "paths.csv")

    result = store.save({"a": "/a"})

    assert isinstance(result, Err)
    assert isinstance(result.error, SaveError)
    assert "blocker" in str(result.error)


def test_default_store_uses_platform_config_dir(config_root: Path) -> None:
    store = ShortcutStore.default(HopConfig())
    assert store.path == config_root / "hop" / "paths.csv"


def test_default_store_honors_store_dir(tmp_path: Path) -> None:
    store = ShortcutStore.default(HopConfig(store_dir=tmp_path / "elsewhere"))
    assert store.path == tmp_path / "elsewhere" / "paths.csv"
