from pathlib import Path

import pytest

from gurapy.parser import LocalFileSystem, MappingEnvironment, MemoryFileSystem, ProcessEnvironment


def test_memory_file_system_normalizes_paths() -> None:
    file_system = MemoryFileSystem({"conf\\app.ura": "a: 1\n"})

    assert file_system.exists("./conf/app.ura")
    assert file_system.read_text("conf/sub/../app.ura") == "a: 1\n"
    assert file_system.join("conf/sub", "../app.ura") == "conf/app.ura"
    assert file_system.join("", "app.ura") == "app.ura"
    assert file_system.dirname("conf/app.ura") == "conf"


def test_memory_file_system_missing_file() -> None:
    file_system = MemoryFileSystem()

    assert not file_system.exists("nope.ura")
    with pytest.raises(FileNotFoundError):
        file_system.read_text("nope.ura")


def test_local_file_system(tmp_path: Path) -> None:
    file_system = LocalFileSystem()
    target = tmp_path / "a.ura"
    target.write_text("a: 1\n", encoding="utf-8")

    assert file_system.exists(str(target))
    assert not file_system.exists(str(tmp_path))
    assert file_system.read_text(str(target)) == "a: 1\n"
    assert file_system.join(str(tmp_path / "sub"), "../a.ura") == str(target)
    assert file_system.join(str(tmp_path), str(target)) == str(target)
    assert file_system.dirname(str(target)) == str(tmp_path)


def test_environments(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GURAPY_TEST_VALUE", "from-env")

    assert ProcessEnvironment().get("GURAPY_TEST_VALUE") == "from-env"
    assert MappingEnvironment({"x": "1"}).get("x") == "1"
    assert MappingEnvironment().get("GURAPY_TEST_VALUE") is None
