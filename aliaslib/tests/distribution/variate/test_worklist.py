"""Testing the worklists of the alias table construction"""

from aliaslib.distribution.variate.worklist import LargeWorklist, SmallWorklist


def test_small_worklist_pops_the_smallest_first():
    worklist = SmallWorklist()
    for index, probability in enumerate([0.7, 0.1, 0.9, 0.4]):
        worklist.push(index, probability)

    assert len(worklist) == 4
    popped = []
    while not worklist.empty():
        popped.append(worklist.pop())
    assert popped == [1, 3, 0, 2]


def test_large_worklist_pops_the_largest_first():
    worklist = LargeWorklist()
    for index, probability in enumerate([1.2, 3.5, 1.0, 2.1]):
        worklist.push(index, probability)

    popped = []
    while not worklist.empty():
        popped.append(worklist.pop())
    assert popped == [1, 3, 0, 2]


def test_worklist_reinsertion():
    worklist = LargeWorklist()
    worklist.push(0, 1.8)
    worklist.push(1, 1.5)
    top = worklist.pop()
    worklist.push(top, 1.1)

    assert worklist.pop() == 1
    assert worklist.pop() == 0
    assert worklist.empty()
