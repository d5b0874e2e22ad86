import threading
import time

import pytest

from patternbook.domain.catalog import Transcript
from patternbook.patterns.creational.singleton import AppSettings, Singleton, demo


@pytest.fixture(autouse=True)
def reset_settings():
    AppSettings.reset_instance()
    Counter.reset_instance()
    Counter.created = 0
    yield
    AppSettings.reset_instance()
    Counter.reset_instance()


class Counter(Singleton):
    created = 0

    def __init__(self):
        # Widen the window in which a racing thread could construct a second instance
        time.sleep(0.01)
        Counter.created += 1


def test_same_instance_returned():
    assert AppSettings() is AppSettings()


def test_init_runs_once():
    first = AppSettings({"theme": "light"})
    second = AppSettings({"theme": "dark"})
    assert second.get("theme") == "light"
    assert first is second


def test_subclasses_have_separate_instances():
    assert AppSettings() is not Counter()


def test_reset_instance_creates_new_object():
    first = AppSettings()
    AppSettings.reset_instance()
    assert AppSettings() is not first


def test_concurrent_first_access_creates_one_instance():
    barrier = threading.Barrier(8)
    instances = []

    def worker():
        barrier.wait()
        instances.append(Counter())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert Counter.created == 1
    assert len({id(i) for i in instances}) == 1


def test_demo_output():
    out = Transcript()
    demo(out)
    assert out.lines == [
        "settings are the same object: True",
        "theme read through second reference: dark",
        "registry-held flags: ['beta']",
    ]
