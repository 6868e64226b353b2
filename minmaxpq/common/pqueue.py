from dataclasses import dataclass, field
import logging
import numbers
from typing import Any

from .minmaxheap import MinMaxHeap

logger = logging.getLogger(__name__)

@dataclass(order=True, frozen=True)
class PQueueItem:
    """Wrapper for priority queue items

    Items should only be compared based on their priority, not data.

    Attributes:
        priority (int):
            The priority of the item
        data (Any):
            The associated data
    """
    priority: int
    data: Any = field(compare=False)

    def unwrapped(self):
        """Return the underlying (data, priority) tuple"""
        return self.data, self.priority

def _check_priority(priority):
    if isinstance(priority, bool) or not isinstance(priority, numbers.Integral):
        raise TypeError('Expected priority to be an integer, got {}'.format(type(priority).__name__))
    return priority

class PriorityQueue():
    """Double-ended priority queue backed by a min-max heap

    Removing or peeking at an empty queue is not an error: those calls return
    a (value, found) pair with found=False instead of raising.

    Args:
        items (list, optional):
            An initial list of (value, priority) tuples
        maxlen (int, optional):
            The maximum number of items
        mode (str, ['min', 'max'])
            When maxlen is reached, which priority items should continue to be saved
    """
    def __init__(self, items=None, maxlen=None, mode='min'):
        if mode not in ['min', 'max']:
            raise ValueError("mode must be either 'min' or 'max'")
        self.mode = mode
        if maxlen is not None:
            if isinstance(maxlen, bool) or not isinstance(maxlen, numbers.Integral):
                raise TypeError('Expected maxlen to be of type int')
            if maxlen < 0:
                raise ValueError('maxlen must be non-negative')
        self.maxlen = maxlen
        if items is not None:
            items = list(items)
            if not all(isinstance(item, tuple) and len(item) == 2 for item in items):
                raise TypeError('PriorityQueue expects a list of (value, priority) tuples')
            items = [PQueueItem(_check_priority(priority), value) for value, priority in items]
            self.heap = MinMaxHeap.from_items(items)
        else:
            self.heap = MinMaxHeap()

        if self.maxlen is not None:
            while len(self.heap) > self.maxlen:
                self._eject_one()

    def __len__(self):
        return len(self.heap)

    def count(self):
        return len(self.heap)

    def is_empty(self):
        return not self.heap

    def insert(self, value, priority):
        """Add a new value with the given integer priority

        In bounded mode a full queue first ejects its worst item, or drops the
        new one if it would not outrank that item.
        """
        item = PQueueItem(_check_priority(priority), value)
        if self.maxlen is not None and len(self) >= self.maxlen:
            if not self._outranks_worst(item):
                logger.debug('Queue full (maxlen=%d); dropping item with priority %d',
                             self.maxlen, item.priority)
                return
            self._eject_one()
        self.heap.push(item)

    def peek_min(self):
        """Return (value, found) for the lowest priority item without removing it"""
        if not self.heap:
            return None, False
        return self.heap.peek_min().data, True

    def peek_max(self):
        """Return (value, found) for the highest priority item without removing it"""
        if not self.heap:
            return None, False
        return self.heap.peek_max().data, True

    def remove_min(self):
        """Remove the lowest priority item and return (value, found)"""
        if not self.heap:
            return None, False
        return self.heap.pop_min().data, True

    def remove_max(self):
        """Remove the highest priority item and return (value, found)"""
        if not self.heap:
            return None, False
        return self.heap.pop_max().data, True

    def _outranks_worst(self, item):
        if not self.heap:
            return False
        if self.mode == 'min':
            return item < self.heap.peek_max()
        return item > self.heap.peek_min()

    def _eject_one(self):
        if self.mode == 'min':
            item = self.heap.pop_max()
        else:
            item = self.heap.pop_min()
        logger.debug('Ejected item with priority %d (mode=%s)', item.priority, self.mode)
        return item
