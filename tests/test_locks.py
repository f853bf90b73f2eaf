import threading

import pytest

from xv6kit.locks import LockError, SleepLock, SpinLock


def test_spinlock_acquire_and_release():
    lock = SpinLock("ptable")
    lock.acquire(0)
    assert lock.holding(0)
    assert not lock.holding(1)
    assert lock.cpu == 0
    lock.release(0)
    assert not lock.locked
    assert lock.cpu is None


def test_spinlock_double_acquire_raises():
    lock = SpinLock("ptable")
    lock.acquire(0)
    with pytest.raises(LockError):
        lock.acquire(0)


def test_spinlock_release_without_holding_raises():
    lock = SpinLock()
    with pytest.raises(LockError):
        lock.release(0)


def test_spinlock_release_by_other_cpu_raises():
    lock = SpinLock()
    lock.acquire(0)
    with pytest.raises(LockError):
        lock.release(1)
    assert lock.holding(0)


def test_spinlock_blocks_other_cpu():
    lock = SpinLock("t")
    lock.acquire(0)
    acquired = threading.Event()

    def other():
        lock.acquire(1)
        acquired.set()
        lock.release(1)

    worker = threading.Thread(target=other)
    worker.start()
    assert not acquired.wait(0.05)
    lock.release(0)
    worker.join(2)
    assert acquired.is_set()
    assert not lock.locked


def test_sleeplock_records_pid():
    lock = SleepLock("buf")
    assert not lock.holding()
    lock.acquire(7)
    assert lock.holding()
    assert lock.pid == 7
    lock.release()
    assert not lock.holding()
    assert lock.pid == 0


def test_sleeplock_waiter_wakes_on_release():
    lock = SleepLock()
    lock.acquire(1)
    got = threading.Event()
    owners = []

    def waiter():
        lock.acquire(2)
        owners.append(lock.pid)
        got.set()

    worker = threading.Thread(target=waiter)
    worker.start()
    assert not got.wait(0.05)
    lock.release()
    worker.join(2)
    assert owners == [2]
    assert lock.holding()