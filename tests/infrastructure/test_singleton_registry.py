import threading

from patternbook.infrastructure.patterns import (
    SingletonRegistry,
    get_singleton,
    reset_singleton,
)


class Service:
    instances = 0

    def __init__(self, name="default"):
        Service.instances += 1
        self.name = name


def setup_function():
    reset_singleton(Service)
    Service.instances = 0


def teardown_function():
    reset_singleton(Service)


def test_get_instance_returns_same_registry():
    assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()


def test_get_singleton_creates_lazily_once():
    registry = SingletonRegistry.get_instance()
    assert not registry.has(Service)

    first = get_singleton(Service, name="first")
    second = get_singleton(Service, name="second")

    assert first is second
    assert first.name == "first"
    assert Service.instances == 1
    assert registry.has(Service)


def test_reset_singleton_recreates():
    first = get_singleton(Service)
    reset_singleton(Service)
    assert get_singleton(Service) is not first


def test_register_installs_prebuilt_instance():
    prebuilt = Service("prebuilt")
    SingletonRegistry.get_instance().register(Service, prebuilt)
    assert get_singleton(Service) is prebuilt


def test_independent_registry_reset_all():
    registry = SingletonRegistry()
    registry.get(Service)
    registry.reset()
    assert not registry.has(Service)


def test_concurrent_access_creates_one_instance():
    barrier = threading.Barrier(10)
    results = []

    def worker():
        barrier.wait()
        results.append(get_singleton(Service))

    threads = [threading.Thread(target=worker) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert Service.instances == 1
    assert len({id(r) for r in results}) == 1
