import pytest

from xv6kit.proc import PGSIZE, KernelPanic, ProcessTable, ProcState


@pytest.fixture
def table():
    return ProcessTable(nproc=8, mem_limit=1 << 20)


def test_userinit(table):
    init = table.userinit()
    assert init.pid == 1
    assert init.state is ProcState.RUNNABLE
    assert init.sz == PGSIZE
    assert init.name == "initcode"
    assert table.initproc is init


def test_fork_copies_parent(table):
    init = table.userinit()
    init.files.append("console")
    child = table.fork(init)
    assert child.pid == init.pid + 1
    assert child.parent is init
    assert child.sz == init.sz
    assert child.files == init.files
    assert child.files is not init.files
    assert child.state is ProcState.RUNNABLE


def test_fork_fails_when_table_full():
    table = ProcessTable(nproc=2)
    init = table.userinit()
    table.fork(init)
    with pytest.raises(OSError):
        table.fork(init)


def test_init_cannot_exit(table):
    init = table.userinit()
    with pytest.raises(KernelPanic):
        table.exit(init)


def test_exit_then_wait_reaps_child(table):
    init = table.userinit()
    child = table.fork(init)
    pid = child.pid
    table.exit(child)
    assert child.state is ProcState.ZOMBIE
    assert table.wait(init) == pid
    assert child.state is ProcState.UNUSED
    assert child.pid == 0


def test_wait_without_children_raises(table):
    init = table.userinit()
    with pytest.raises(ChildProcessError):
        table.wait(init)


def test_kill_wakes_sleeper(table):
    init = table.userinit()
    child = table.fork(init)
    table.sleep(child, "chan")
    table.kill(child.pid)
    assert child.killed
    assert child.state is ProcState.RUNNABLE


def test_kill_unknown_pid(table):
    table.userinit()
    with pytest.raises(ProcessLookupError):
        table.kill(999)


def test_killed_waiter_gives_up(table):
    init = table.userinit()
    table.fork(init)
    init.killed = True
    with pytest.raises(ChildProcessError):
        table.wait(init)


def test_sleep_requires_process(table):
    with pytest.raises(KernelPanic):
        table.sleep(None, "chan")


def test_wakeup_only_matching_channel(table):
    init = table.userinit()
    a = table.fork(init)
    b = table.fork(init)
    table.sleep(a, "x")
    table.sleep(b, "y")
    assert table.wakeup("x") == 1
    assert a.state is ProcState.RUNNABLE
    assert b.state is ProcState.SLEEPING


def test_schedule_runs_runnable_in_table_order(table):
    init = table.userinit()
    child = table.fork(init)
    ran = []
    for p in table.schedule():
        assert p.state is ProcState.RUNNING
        assert table.current is p
        ran.append(p)
        table.yield_cpu(p)
    assert ran == [init, child]
    assert table.current is None


def test_schedule_panics_if_still_running(table):
    init = table.userinit()
    passes = table.schedule()
    first = next(passes)
    assert first is init
    assert first.state is ProcState.RUNNING
    with pytest.raises(KernelPanic):
        next(passes)


def test_growproc(table):
    init = table.userinit()
    before = init.sz
    table.growproc(init, 100)
    assert init.sz == before + 100
    table.growproc(init, -100)
    assert init.sz == before
    with pytest.raises(MemoryError):
        table.growproc(init, 1 << 20)
    assert init.sz == before
    with pytest.raises(ValueError):
        table.growproc(init, -before)


def test_procdump(table):
    init = table.userinit()
    assert table.procdump() == ["1 runble initcode"]
    table.sleep(init, "chan")
    assert table.procdump() == ["1 sleep  initcode"]