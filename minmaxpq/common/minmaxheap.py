class MinMaxHeap:
    """Min-max heap stored in a flat list

    Slot 0 of the list is an unused sentinel, so the node at position i has its
    parent at i//2, children at 2i and 2i+1, and grandchildren at 4i..4i+3.
    Levels alternate between min-levels (even depth, starting at the root) and
    max-levels (odd depth). Every node on a min-level is <= all its descendants
    and every node on a max-level is >= all its descendants.

    Items only need to support < and > against each other.
    """
    def __init__(self):
        self.heap = [None] # sentinel

    def __len__(self):
        return len(self.heap) - 1

    def __iter__(self):
        return iter(self.heap[1:])

    @classmethod
    def from_items(cls, items):
        heap = cls()
        heap.heap.extend(items)
        last_internal = reversed(range(1, len(heap)//2 + 1))
        for i in last_internal:
            heap._push_down(i)
        return heap

    def push(self, item):
        self.heap.append(item)
        self._push_up(len(self))

    def peek_min(self):
        return self.heap[self._find_min()]

    def peek_max(self):
        return self.heap[self._find_max()]

    def pop_min(self):
        min_index = self._find_min()
        return self._pop(min_index)

    def pop_max(self):
        max_index = self._find_max()
        return self._pop(max_index)

    def _pop(self, i):
        item = self.heap[i]
        last = self.heap.pop()
        if i <= len(self):
            # the removed slot was not the last leaf; refill it from the end
            self.heap[i] = last
            self._push_down(i)
        return item

    def _swap(self, a, b):
        self.heap[a], self.heap[b] = self.heap[b], self.heap[a]

    def _find_min(self):
        if self:
            return 1
        raise KeyError('find_min called on heap with no elements')

    def _find_max(self):
        if len(self) > 2:
            return 3 if self.heap[3] > self.heap[2] else 2
        if self:
            # with one or two elements the max is always the last one
            return len(self)
        raise KeyError('find_max called on heap with no elements')

    @staticmethod
    def _is_on_min_level(i):
        level = i.bit_length() - 1
        return level % 2 == 0

    @staticmethod
    def _is_root(i):
        return i == 1

    @staticmethod
    def _is_grandchild_of(i, grandparent):
        return 4*grandparent <= i <= 4*grandparent+3

    @staticmethod
    def _get_parent(i):
        return i//2

    @staticmethod
    def _has_grandparent(i):
        return i > 3

    @staticmethod
    def _get_grandparent(i):
        return i//4

    def _has_children(self, i):
        return len(self) >= 2*i

    def _get_children(self, i):
        return list(range(2*i, min(2*i+2, len(self)+1)))

    def _get_grandchildren(self, i):
        return list(range(4*i, min(4*i+4, len(self)+1)))

    def _push_down(self, i):
        if self._is_on_min_level(i):
            self._push_down_min(i)
        else:
            self._push_down_max(i)

    def _push_down_min(self, m):
        self._push_down_iter(m, swap_idx=min, swap_cond=lambda a, b: a < b)

    def _push_down_max(self, m):
        self._push_down_iter(m, swap_idx=max, swap_cond=lambda a, b: a > b)

    def _push_down_iter(self, m, swap_idx, swap_cond):
        while self._has_children(m):
            i = m
            successors = self._get_children(i) + self._get_grandchildren(i)
            m = swap_idx(successors, key=self.heap.__getitem__)
            if swap_cond(self.heap[m], self.heap[i]):
                self._swap(i, m)
                if self._is_grandchild_of(m, grandparent=i):
                    # the item moved down two levels and skipped over p,
                    # which sits on a level of the opposite kind
                    p = self._get_parent(m)
                    if swap_cond(self.heap[p], self.heap[m]):
                        self._swap(m, p)
                    continue
            break

    def _push_up(self, i):
        if self._is_root(i):
            return
        p = self._get_parent(i)
        if self._is_on_min_level(i):
            if self.heap[i] > self.heap[p]:
                self._swap(i, p)
                self._push_up_max(p)
            else:
                self._push_up_min(i)
        else:
            if self.heap[i] < self.heap[p]:
                self._swap(i, p)
                self._push_up_min(p)
            else:
                self._push_up_max(i)

    def _push_up_min(self, i):
        self._push_up_iter(i, swap_cond=lambda a, b: a < b)

    def _push_up_max(self, i):
        self._push_up_iter(i, swap_cond=lambda a, b: a > b)

    def _push_up_iter(self, i, swap_cond):
        while self._has_grandparent(i):
            gp = self._get_grandparent(i)
            if swap_cond(self.heap[i], self.heap[gp]):
                self._swap(i, gp)
                i = gp
            else:
                break

    def _is_valid(self):
        """Check the min-max property against every descendant of every node"""
        for position in range(1, len(self)+1):
            item = self.heap[position]
            on_min_level = self._is_on_min_level(position)
            descendants = self._get_children(position)
            while descendants:
                descendant = descendants.pop()
                if on_min_level and self.heap[descendant] < item:
                    return False
                if not on_min_level and self.heap[descendant] > item:
                    return False
                descendants += self._get_children(descendant)
        return True
