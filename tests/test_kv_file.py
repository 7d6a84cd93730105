"""Tests for the File backend."""

import threading

import pytest

from filekv.kv.file import File


@pytest.fixture
def file_backend(tmpdir_path):
    path = tmpdir_path / "nested" / "dir" / "db.json"
    return File(path), path


class TestFileRead:
    def test_missing_file_returns_none(self, file_backend):
        backend, _ = file_backend
        assert backend.read() is None

    def test_read_creates_parent_directory(self, file_backend):
        backend, path = file_backend
        backend.read()
        assert path.parent.is_dir()
        assert not path.exists()

    def test_read_existing(self, file_backend):
        backend, path = file_backend
        path.parent.mkdir(parents=True)
        path.write_text('{"a": 1}', encoding="utf-8")
        assert backend.read() == '{"a": 1}'

    def test_read_directory_raises(self, tmpdir_path):
        backend = File(tmpdir_path)
        with pytest.raises(OSError):
            backend.read()


class TestFileWrite:
    def test_write_then_read(self, file_backend):
        backend, _ = file_backend
        backend.read()
        backend.write("hello")
        assert backend.read() == "hello"

    def test_write_overwrites_whole_file(self, file_backend):
        backend, path = file_backend
        backend.read()
        backend.write("a much longer first version")
        backend.write("short")
        assert path.read_text(encoding="utf-8") == "short"

    def test_no_temporary_file_left(self, file_backend):
        backend, path = file_backend
        backend.read()
        backend.write("x")
        assert [p.name for p in path.parent.iterdir()] == ["db.json"]

    def test_unicode_round_trip(self, file_backend):
        backend, _ = file_backend
        backend.read()
        backend.write("héllo ✓")
        assert backend.read() == "héllo ✓"

    def test_location(self, file_backend):
        backend, path = file_backend
        assert backend.location == str(path)


class TestFileWriteFailures:
    def test_unencodable_text_raises_and_cleans_up(self, file_backend):
        backend, path = file_backend
        backend.read()
        backend.write("ok")
        with pytest.raises(UnicodeEncodeError):
            backend.write("\ud800")
        assert [p.name for p in path.parent.iterdir()] == ["db.json"]
        assert path.read_text(encoding="utf-8") == "ok"

    def test_concurrent_writes_use_separate_temp_files(self, file_backend):
        backend, path = file_backend
        backend.read()
        errors = []

        def writer(n: int) -> None:
            try:
                for _ in range(20):
                    backend.write(f"writer-{n}-" + "x" * 20000)
            except OSError as e:
                errors.append(e)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert errors == []
        assert path.read_text(encoding="utf-8").startswith("writer-")
        assert [p.name for p in path.parent.iterdir()] == ["db.json"]
