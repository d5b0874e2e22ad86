"""Process-wide registry of lazily created singleton instances."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry that hands out one instance per class.

    Instances are created on first request, under a lock, with the arguments of
    that first request. Later requests return the same instance and ignore their
    arguments. ``reset`` gives singletons an explicit end of life, which tests
    use to start from a clean state.
    """

    _instance: Optional["SingletonRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._instances: Dict[type, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the registry itself."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """Get the instance of ``singleton_class``, creating it if needed."""
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return cast(T, instance)

        with self._lock:
            if singleton_class not in self._instances:
                self._instances[singleton_class] = singleton_class(*args, **kwargs)
            return cast(T, self._instances[singleton_class])

    def has(self, singleton_class: type) -> bool:
        return singleton_class in self._instances

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Install a pre-built instance, replacing any existing one."""
        with self._lock:
            self._instances[singleton_class] = instance

    def reset(self, singleton_class: Optional[type] = None) -> None:
        """Forget one instance, or all of them when no class is given."""
        with self._lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
