import logging

logger = logging.getLogger(__name__)


def split(node, gap: int):
    '''
    detach a run of at most gap nodes starting at node

    return the last node of the run and the first node after it
    '''

    assert node is not None and gap > 0

    for _ in range(gap - 1):
        if node.next is None:
            break
        node = node.next

    rest = node.next
    node.next = None
    return node, rest


def merge(left, right):
    '''
    stable merge of two sorted, detached runs by relinking their nodes

    on ties the node from the left run comes first.
    return head and tail of the merged run
    '''

    assert left is not None and right is not None

    if right.value < left.value:
        head, right = right, right.next
    else:
        head, left = left, left.next

    tail = head
    while left is not None and right is not None:
        if right.value < left.value:
            tail.next = right
            right = right.next
        else:
            tail.next = left
            left = left.next
        tail = tail.next

    tail.next = left if left is not None else right
    while tail.next is not None:
        tail = tail.next
    return head, tail


def sort_chain(head, size: int):
    '''
    iterative bottom-up merge sort of a chain of size nodes

    return head and tail of the sorted chain
    '''

    if size < 2:
        return head, head

    tail = None
    gap = 1
    passes = 0
    while gap < size:
        current = head
        head = tail = None

        while current is not None:
            left = current
            left_tail, right = split(left, gap)
            if right is None:
                # odd run out, relinked as is
                run_head, run_tail = left, left_tail
                current = None
            else:
                _, current = split(right, gap)
                run_head, run_tail = merge(left, right)

            if tail is None:
                head = run_head
            else:
                tail.next = run_head
            tail = run_tail

        gap *= 2
        passes += 1

    logger.debug(f'sort_chain:{size} nodes sorted in {passes} passes')
    return head, tail
