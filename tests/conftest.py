import pytest


@pytest.fixture
def solved_9x9():
    return [[(i * 3 + i // 3 + j) % 9 + 1 for j in range(9)] for i in range(9)]


@pytest.fixture
def solved_4x4():
    return [
        [1, 2, 3, 4],
        [3, 4, 1, 2],
        [2, 1, 4, 3],
        [4, 3, 2, 1],
    ]


@pytest.fixture
def empty_9x9():
    return [[0] * 9 for _ in range(9)]
