import pytest

from helpers import make_pipe


@pytest.fixture
def equator_pipes():
    """Two short pipes along the equator with a ~111 m gap between them."""
    return [
        make_pipe(1, (0, 0), (0, 0.001), tags=["water", "main"]),
        make_pipe(2, (0, 0.002), (0, 0.003), tags=["gas"]),
    ]


@pytest.fixture
def tagged_pipes():
    return [
        make_pipe(1, (32.0853, 34.7818), (32.0860, 34.7825), tags=["water", "main"]),
        make_pipe(2, (32.0860, 34.7825), (32.0870, 34.7830), tags=["gas", "primary"]),
        make_pipe(3, (32.0870, 34.7830), (32.0880, 34.7840), tags=["water"]),
        make_pipe(4, (32.1000, 34.8000), (32.1010, 34.8010), tags=[]),
    ]
