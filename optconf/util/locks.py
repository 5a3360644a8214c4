"""
Per-key mutual exclusion.
"""

from collections import defaultdict
import threading


class KeyedLocks(object):
    """Hands out one lock per key, creating it on first use.

    A lock is kept until its key is discarded, which is to be done once the
    keyed object is gone for good.

    >>> locks = KeyedLocks()
    >>> with locks['foo']:
    ...     locks['foo'] is locks['foo']
    True
    >>> locks.discard('foo')
    >>> len(locks)
    0
    """

    def __init__(self, lock_factory=threading.RLock):
        super(KeyedLocks, self).__init__()
        self._lock = threading.Lock()
        self._locks = defaultdict(lock_factory)

    def __getitem__(self, key):
        with self._lock:
            return self._locks[key]

    def discard(self, key):
        with self._lock:
            self._locks.pop(key, None)

    def __len__(self):
        with self._lock:
            return len(self._locks)

    def __contains__(self, key):
        with self._lock:
            return key in self._locks
