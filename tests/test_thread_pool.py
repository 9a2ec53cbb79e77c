import functools
import threading

from ecfmp.thread_pool import ThreadPool


def _record(results, lock, finished, value):
    with lock:
        results.append(value)
    finished.release()


def _record_thread_name(names, done):
    names.append(threading.current_thread().name)
    done.set()


def _meet(barrier, passed):
    barrier.wait()
    passed.append(True)


def test_scheduled_task_runs():
    done = threading.Event()
    with ThreadPool() as pool:
        pool.schedule(done.set)
        assert done.wait(5) is True


def test_all_tasks_run():
    results = []
    lock = threading.Lock()
    finished = threading.Semaphore(0)

    with ThreadPool() as pool:
        for n in range(20):
            pool.schedule(functools.partial(_record, results, lock, finished, n))
        assert all(finished.acquire(timeout=5) for _ in range(20))
    assert sorted(results) == list(range(20))


def test_tasks_run_on_worker_threads():
    names = []
    done = threading.Event()

    with ThreadPool() as pool:
        pool.schedule(functools.partial(_record_thread_name, names, done))
        assert done.wait(5) is True
    assert len(names) == 1
    assert names[0] != threading.current_thread().name


def test_tasks_after_shutdown_never_run():
    ran = threading.Event()
    pool = ThreadPool()
    pool.shutdown()
    pool.schedule(ran.set)
    assert ran.wait(0.2) is False


def test_shutdown_is_repeatable():
    pool = ThreadPool()
    pool.shutdown()
    pool.shutdown()
    ran = threading.Event()
    pool.schedule(ran.set)
    assert ran.is_set() is False