import pytest

from xv6kit.uthread import NoRunnableThreads, Scheduler, ThreadState


def worker(log, name, rounds):
    def body():
        for i in range(rounds):
            log.append(f"{name}{i}")
            yield
    return body


def joining_parent(sched, log, names):
    def body():
        tids = [sched.create(worker(log, name, 2)) for name in names]
        for tid in tids:
            yield from sched.join(tid)
        log.append("parent done")
    return body


def self_suspending(sched, log):
    def body():
        log.append("before")
        sched.suspend(sched.current_tid)
        yield
        log.append("after")
    return body


def test_two_threads_alternate():
    sched = Scheduler()
    log = []
    sched.create(worker(log, "a", 3))
    sched.create(worker(log, "b", 3))
    sched.run()
    assert log == ["a0", "b0", "a1", "b1", "a2", "b2"]


def test_first_runnable_slot_is_preferred():
    sched = Scheduler()
    log = []
    for name in "abc":
        sched.create(worker(log, name, 2))
    sched.run()
    assert log == ["a0", "b0", "a1", "b1", "c0", "c1"]


def test_tids_increase_and_threads_end_free():
    sched = Scheduler()
    first = sched.create(worker([], "a", 1))
    second = sched.create(worker([], "b", 1))
    assert second == first + 1
    assert sched.state(first) is ThreadState.RUNNABLE
    sched.run()
    assert sched.state(first) is ThreadState.FREE
    assert sched.state(second) is ThreadState.FREE
    assert sched.create(worker([], "c", 1)) == second + 1


def test_plain_function_runs_once():
    sched = Scheduler()
    log = []
    tid = sched.create(lambda: log.append("ran"))
    sched.run()
    assert log == ["ran"]
    assert sched.state(tid) is ThreadState.FREE


def test_suspended_thread_is_not_scheduled():
    sched = Scheduler()
    log = []
    t1 = sched.create(worker(log, "a", 2))
    sched.create(worker(log, "b", 2))
    assert sched.suspend(t1)
    assert sched.state(t1) is ThreadState.WAIT
    with pytest.raises(NoRunnableThreads):
        sched.run()
    assert log == ["b0", "b1"]
    assert sched.resume(t1)
    sched.run()
    assert log == ["b0", "b1", "a0", "a1"]


def test_resume_of_runnable_thread_does_nothing():
    sched = Scheduler()
    tid = sched.create(worker([], "a", 1))
    assert not sched.resume(tid)
    assert sched.state(tid) is ThreadState.RUNNABLE


def test_join_waits_for_children():
    sched = Scheduler()
    log = []
    parent_tid = sched.create(joining_parent(sched, log, "xy"))
    sched.run()
    assert log[-1] == "parent done"
    assert sorted(log[:-1]) == ["x0", "x1", "y0", "y1"]
    assert sched.state(parent_tid) is ThreadState.FREE


def test_join_unknown_thread_fails():
    sched = Scheduler()
    with pytest.raises(LookupError):
        next(sched.join(42))


def test_state_of_unknown_thread_fails():
    sched = Scheduler()
    with pytest.raises(LookupError):
        sched.state(5)


def test_table_full():
    sched = Scheduler(max_threads=3)
    sched.create(worker([], "a", 1))
    sched.create(worker([], "b", 1))
    with pytest.raises(RuntimeError):
        sched.create(worker([], "c", 1))


def test_exception_in_thread_propagates_and_frees_it():
    sched = Scheduler()

    def bad():
        raise KeyError("boom")

    tid = sched.create(bad)
    with pytest.raises(KeyError):
        sched.run()
    assert sched.state(tid) is ThreadState.FREE


def test_thread_can_suspend_itself():
    sched = Scheduler()
    log = []
    tid = sched.create(self_suspending(sched, log))
    with pytest.raises(NoRunnableThreads):
        sched.run()
    assert log == ["before"]
    assert sched.state(tid) is ThreadState.WAIT
    sched.resume(tid)
    sched.run()
    assert log == ["before", "after"]