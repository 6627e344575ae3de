"""Tests for logging context management."""

import threading

from fxtx.logging.context import clear_context, get_extra_context, set_extra_context


class TestExtraContext:
    def test_default_empty(self):
        clear_context()
        assert get_extra_context() == {}

    def test_set_and_get(self):
        set_extra_context(generator="truck-01")
        assert get_extra_context()["generator"] == "truck-01"
        clear_context()

    def test_values_accumulate(self):
        set_extra_context(generator="truck-01")
        set_extra_context(index=3)
        assert get_extra_context() == {"generator": "truck-01", "index": 3}
        clear_context()

    def test_returns_copy(self):
        set_extra_context(generator="truck-01")
        context = get_extra_context()
        context["generator"] = "changed"
        assert get_extra_context()["generator"] == "truck-01"
        clear_context()

    def test_threads_do_not_share_context(self):
        set_extra_context(generator="main")

        def worker():
            set_extra_context(generator="worker", index=1)

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert get_extra_context() == {"generator": "main"}
        clear_context()
