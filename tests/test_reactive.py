"""Tests for the observable Ref container."""

from __future__ import annotations

from virtualview.reactive import Ref


class TestRef:
    """Tests for Ref."""

    def test_get_and_set(self) -> None:
        ref = Ref([1, 2])

        ref.set([3])

        assert ref.get() == [3]

    def test_watchers_receive_new_and_old(self) -> None:
        ref = Ref("a")
        seen: list[tuple[str, str]] = []
        ref.watch(lambda new, old: seen.append((new, old)))

        ref.set("b")
        ref.set("c")

        assert seen == [("b", "a"), ("c", "b")]

    def test_same_value_still_notifies(self) -> None:
        items = [1]
        ref = Ref(items)
        calls: list[int] = []
        ref.watch(lambda new, old: calls.append(1))

        ref.set(items)

        assert calls == [1]

    def test_watchers_run_in_order(self) -> None:
        ref = Ref(0)
        order: list[str] = []
        ref.watch(lambda new, old: order.append("first"))
        ref.watch(lambda new, old: order.append("second"))

        ref.set(1)

        assert order == ["first", "second"]

    def test_unwatch(self) -> None:
        ref = Ref(0)
        calls: list[int] = []
        unwatch = ref.watch(lambda new, old: calls.append(new))

        unwatch()
        unwatch()
        ref.set(1)

        assert calls == []
        assert ref.watcher_count == 0

    def test_watcher_may_unwatch_during_set(self) -> None:
        ref = Ref(0)
        calls: list[str] = []
        holder: dict[str, object] = {}

        def once(new: int, old: int) -> None:
            calls.append("once")
            holder["unwatch"]()

        holder["unwatch"] = ref.watch(once)
        ref.watch(lambda new, old: calls.append("always"))

        ref.set(1)
        ref.set(2)

        assert calls == ["once", "always", "always"]

    def test_repr(self) -> None:
        assert repr(Ref([1])) == "Ref([1])"
