from .common.minmaxheap import MinMaxHeap
from .common.pqueue import PQueueItem, PriorityQueue
