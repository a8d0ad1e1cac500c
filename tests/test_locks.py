import threading
import pytest
from core.locks import DoctorLocks


class TestDoctorLocks:
    def test_entries_released_after_hold(self):
        locks = DoctorLocks()
        with locks.hold(["doc2", "doc1", "doc1"]):
            assert len(locks) == 2
        assert len(locks) == 0

    def test_entries_released_on_error(self):
        locks = DoctorLocks()
        with pytest.raises(RuntimeError):
            with locks.hold(["doc1"]):
                raise RuntimeError("boom")
        assert len(locks) == 0

    def test_same_doctor_is_exclusive(self):
        locks = DoctorLocks()
        entered, release = threading.Event(), threading.Event()
        order = []

        def first():
            with locks.hold(["doc1"]):
                entered.set()
                release.wait(timeout=5)
                order.append("first")

        def second():
            with locks.hold(["doc1"]):
                order.append("second")

        t1 = threading.Thread(target=first)
        t1.start()
        assert entered.wait(timeout=5)
        t2 = threading.Thread(target=second)
        t2.start()
        t2.join(timeout=0.2)
        assert order == []
        release.set()
        t1.join(timeout=5)
        t2.join(timeout=5)
        assert order == ["first", "second"]
        assert len(locks) == 0

    def test_other_doctors_do_not_wait(self):
        locks = DoctorLocks()
        with locks.hold(["doc1"]):
            done = threading.Event()

            def other():
                with locks.hold(["doc2"]):
                    done.set()

            threading.Thread(target=other).start()
            assert done.wait(timeout=5)
