import logging
from typing import Iterator, Optional

import mergesort
import queueutils

logger = logging.getLogger(__name__)


class QueueError(Exception):
    pass


class AllocationFailure(QueueError, MemoryError):
    pass


class InvalidArgument(QueueError, ValueError):
    pass


class Empty(QueueError, IndexError):
    pass


class Node:
    __slots__ = ('value', 'next')

    def __init__(self, value: str):
        self.value: str = value
        self.next: Optional[Node] = None


class Queue:
    ''' FIFO queue of strings backed by a singly linked list '''

    def __init__(self):
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self.size: int = 0

    def is_empty(self) -> bool:
        return self.head is None and self.tail is None

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[str]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f'Queue({list(self)!r})'

    def first(self) -> str:
        if self.is_empty():
            raise Empty('first from empty queue')
        return self.head.value

    def last(self) -> str:
        if self.is_empty():
            raise Empty('last from empty queue')
        return self.tail.value

    def insert_head(self, s: str) -> bool:
        ''' link a new node holding s before the current head '''

        if not isinstance(s, str) or not queueutils.encodable(s):
            logger.warning(f'insert_head:rejected value {s!r}')
            return False

        try:
            node = Node(s)
        except MemoryError:
            logger.warning('insert_head:node allocation failed')
            return False

        node.next = self.head
        self.head = node
        if self.tail is None:
            self.tail = node
        self.size += 1
        return True

    def insert_tail(self, s: str) -> bool:
        ''' append a new node holding s after the current tail, empty s is rejected '''

        if not isinstance(s, str) or not s or not queueutils.encodable(s):
            logger.warning(f'insert_tail:rejected value {s!r}')
            return False

        try:
            node = Node(s)
        except MemoryError:
            logger.warning('insert_tail:node allocation failed')
            return False

        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node
        self.size += 1
        return True

    def _unlink_head(self) -> Node:
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        node.next = None
        self.size -= 1
        return node

    def remove_head(self, out_buffer: Optional[bytearray] = None,
                    buffer_capacity: Optional[int] = None) -> bool:
        '''
        remove the head node, optionally copying its value into out_buffer

        at most buffer_capacity-1 bytes of the utf-8 encoded value are copied,
        followed by a terminating zero byte. buffer_capacity defaults to the
        buffer length.
        the copy is a zero terminated byte string: a value holding a zero
        character reads back only up to that character
        '''

        if buffer_capacity is None and out_buffer is not None:
            buffer_capacity = len(out_buffer)

        if buffer_capacity is not None and buffer_capacity < 1:
            logger.warning(f'remove_head:invalid buffer capacity {buffer_capacity}')
            return False
        if out_buffer is not None and buffer_capacity > len(out_buffer):
            raise InvalidArgument(
                f'buffer capacity {buffer_capacity} exceeds buffer length {len(out_buffer)}')
        if self.is_empty():
            logger.debug('remove_head:queue is empty')
            return False

        if out_buffer is not None:
            queueutils.copy_out(self.head.value, out_buffer, buffer_capacity)

        node = self._unlink_head()
        node.value = None
        return True

    def pop(self) -> str:
        ''' remove the head node and return its value '''

        if self.is_empty():
            raise Empty('pop from empty queue')
        return self._unlink_head().value

    def reverse(self):
        ''' reverse the links in place, swapping head and tail '''

        if self.size < 2:
            return

        prev = None
        current = self.head
        while current is not None:
            lookahead = current.next
            current.next = prev
            prev = current
            current = lookahead

        self.head, self.tail = self.tail, self.head
        logger.debug(f'reverse:{self.size} nodes')

    def sort(self):
        ''' stable ascending sort of the nodes in place '''

        if self.size < 2:
            return

        self.head, self.tail = mergesort.sort_chain(self.head, self.size)

    def free(self):
        ''' unlink every node and leave the queue empty '''

        freed = 0
        while self.head is not None:
            node = self.head
            self.head = node.next
            node.value = None
            node.next = None
            freed += 1

        self.tail = None
        self.size = 0
        if freed:
            logger.debug(f'free:{freed} nodes released')


def new() -> Queue:
    try:
        return Queue()
    except MemoryError as e:
        raise AllocationFailure('could not allocate queue') from e


def destroy(q: Optional[Queue]):
    if q is not None:
        q.free()


def insert_head(q: Optional[Queue], s: str) -> bool:
    if q is None:
        logger.warning('insert_head:no queue')
        return False
    return q.insert_head(s)


def insert_tail(q: Optional[Queue], s: str) -> bool:
    if q is None:
        logger.warning('insert_tail:no queue')
        return False
    return q.insert_tail(s)


def remove_head(q: Optional[Queue], out_buffer: Optional[bytearray] = None,
                buffer_capacity: Optional[int] = None) -> bool:
    if q is None:
        logger.warning('remove_head:no queue')
        return False
    return q.remove_head(out_buffer, buffer_capacity)


def size(q: Optional[Queue]) -> int:
    if q is None:
        return 0
    return q.size


def reverse(q: Optional[Queue]):
    if q is not None:
        q.reverse()


def sort(q: Optional[Queue]):
    if q is not None:
        q.sort()
