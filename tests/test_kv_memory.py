"""Tests for the Memory backend."""

import threading

from filekv.kv.memory import Memory


class TestMemoryBasic:
    def test_empty(self):
        m = Memory()
        assert m.read() is None

    def test_initial_text(self):
        m = Memory('{"a": 1}')
        assert m.read() == '{"a": 1}'

    def test_write_read(self):
        m = Memory()
        m.write("v")
        assert m.read() == "v"

    def test_overwrite(self):
        m = Memory()
        m.write("old")
        m.write("new")
        assert m.read() == "new"
        assert m.writes == 2

    def test_locations_are_distinct(self):
        assert Memory().location != Memory().location


class TestMemoryThreadSafety:
    def test_concurrent_writes_are_counted(self):
        m = Memory()

        def writer(n: int) -> None:
            for i in range(100):
                m.write(f"{n}-{i}")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert m.writes == 400
