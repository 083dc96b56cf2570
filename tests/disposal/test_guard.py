#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: 0BSD

import copy
import gc
import importlib
import pickle
import warnings

import pytest

import disposal

from disposal import _config


class TestResourceGuard:
    factory = disposal.ResourceGuard

    def test_base(self, /):
        guard = self.factory()

        assert guard.name == "resource"
        with self.factory("socket") as socket:
            assert socket.name == "socket"
        with self.factory(name="socket") as socket:
            assert socket.name == "socket"

        assert not guard.released

        cls_repr = "disposal.ResourceGuard"
        assert repr(guard).startswith(f"<{cls_repr}('resource') at 0x")
        assert repr(guard).endswith("[live]>")

        guard.release()

        assert guard.released
        assert repr(guard).endswith("[released]>")

        with pytest.raises(TypeError):
            self.factory(42)

    def test_attrs(self, /):
        with self.factory() as guard:
            with pytest.raises(AttributeError):
                guard.nonexistent_attribute  # noqa: B018
            with pytest.raises(AttributeError):
                guard.nonexistent_attribute = 42
            with pytest.raises(AttributeError):
                del guard.nonexistent_attribute
            with pytest.raises(AttributeError):
                guard.released = False

    def test_use(self, /, notifications):
        guard = self.factory()

        guard.use()

        assert notifications("using") == ["using resource"]

        guard.release()

        with pytest.raises(disposal.ResourceReleasedError) as excinfo:
            guard.use()

        assert "'resource' has already been released" in str(excinfo.value)
        assert isinstance(excinfo.value, RuntimeError)
        assert notifications("using") == ["using resource"]

    @pytest.mark.parametrize("n", [1, 2, 5])
    def test_release(self, /, notifications, n):
        guard = self.factory("buffer")

        for _ in range(n):
            guard.release()

        assert guard.released
        assert notifications("releasing") == ["releasing buffer"]

    def test_monotonicity(self, /):
        guard = self.factory()
        guard.release()

        for _ in range(3):
            guard.release()
            guard.try_use()

            with pytest.raises(disposal.ResourceReleasedError):
                guard.use()

            with guard:
                pass

            assert guard.released

    def test_try_use(self, /, notifications):
        guard = self.factory()

        assert guard.try_use() == disposal.Ok(None)

        guard.release()
        result = guard.try_use()

        assert result.is_err()
        assert isinstance(result.error, disposal.ResourceReleasedError)
        assert notifications("using") == ["using resource"]

        with pytest.raises(disposal.ResourceReleasedError):
            result.unwrap()

    def test_happy_path(self, /, notifications):
        guard = self.factory()

        guard.use()
        guard.release()

        assert notifications() == ["using resource", "releasing resource"]

    def test_misuse(self, /, notifications):
        guard = self.factory()

        guard.release()

        with pytest.raises(disposal.ResourceReleasedError):
            guard.use()

        assert notifications() == ["releasing resource"]

    def test_double_release(self, /, notifications):
        guard = self.factory()

        guard.release()
        guard.release()

        assert notifications() == ["releasing resource"]

    def test_scope(self, /, notifications):
        with self.factory() as guard:
            assert not guard.released

            guard.use()

        assert guard.released

        with pytest.raises(ValueError):
            with self.factory("failing") as failing:
                raise ValueError

        assert failing.released

        def early_return():
            with self.factory("early") as early:
                return early

            raise AssertionError

        assert early_return().released

        with self.factory("twice") as twice:
            twice.release()

        assert notifications("releasing") == [
            "releasing resource",
            "releasing failing",
            "releasing early",
            "releasing twice",
        ]

    def test_hooks(self, /):
        calls = []

        class Connection(self.factory):
            def _use(self, /):
                calls.append("use")

            def _release(self, /):
                calls.append("release")

                self.release()  # reentrant

        with Connection() as connection:
            connection.use()
            connection.use()

        connection.release()

        assert calls == ["use", "use", "release"]

    def test_failing_release(self, /, caplog):
        calls = []

        class Broken(self.factory):
            def _release(self, /):
                calls.append("release")

                raise OSError("disk gone")

        broken = Broken("disk")

        broken.release()
        broken.release()

        assert broken.released
        assert calls == ["release"]

        errors = [r for r in caplog.records if r.levelname == "ERROR"]

        assert len(errors) == 1
        assert "exception releasing" in errors[0].getMessage()
        assert isinstance(errors[0].exc_info[1], OSError)

    def test_failing_release_keeps_original_error(self, /):
        class Broken(self.factory):
            def _release(self, /):
                raise OSError

        with pytest.raises(ValueError):
            with Broken() as broken:
                raise ValueError

        assert broken.released

        broken.release()

    def test_pickling(self, /):
        orig = self.factory("socket")
        orig.release()

        restored = pickle.loads(pickle.dumps(orig))

        assert type(restored) is self.factory
        assert restored.name == "socket"
        assert not restored.released

        restored.release()

    def test_copying(self, /):
        orig = self.factory("socket")
        orig.release()

        for copy_func in (copy.copy, copy.deepcopy):
            copied = copy_func(orig)

            assert copied is not orig
            assert copied.name == "socket"
            assert not copied.released

            copied.release()


class TestUnreleasedWarnings:
    factory = disposal.ResourceGuard

    def test_live(self, /):
        guard = self.factory("leaked")

        assert guard.warn_unreleased

        with pytest.warns(ResourceWarning, match="unreleased"):
            del guard
            gc.collect()

    def test_released(self, /):
        guard = self.factory()
        guard.release()

        with warnings.catch_warnings():
            warnings.simplefilter("error", ResourceWarning)

            del guard
            gc.collect()

    def test_disabled(self, /):
        guard = self.factory()
        guard.warn_unreleased = False

        with warnings.catch_warnings():
            warnings.simplefilter("error", ResourceWarning)

            del guard
            gc.collect()

    def test_default(self, /, monkeypatch):
        monkeypatch.setattr(
            _config,
            "UNRELEASED_WARNINGS_ENABLED_BY_DEFAULT",
            False,
        )

        assert not self.factory().warn_unreleased

    def test_environment(self, /, monkeypatch):
        try:
            monkeypatch.setenv("DISPOSAL_UNRELEASED_WARNINGS", "")
            importlib.reload(_config)

            assert not _config.UNRELEASED_WARNINGS_ENABLED_BY_DEFAULT
            assert not self.factory().warn_unreleased

            monkeypatch.setenv("DISPOSAL_UNRELEASED_WARNINGS", "1")
            importlib.reload(_config)

            assert _config.UNRELEASED_WARNINGS_ENABLED_BY_DEFAULT
        finally:
            monkeypatch.undo()
            importlib.reload(_config)
