"""
Pytest fixtures for booking gateway tests
"""

import heapq
import itertools
from typing import Callable, List, Tuple

import pytest
from fastapi.testclient import TestClient

from booking_gateway.config import Settings
from booking_gateway.main import create_app

BACKEND_URL = "http://backend.test:3000"


class VirtualTimer:
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class VirtualScheduler:
    """Scheduler whose clock only moves when a test advances it"""

    def __init__(self):
        self.now = 0.0
        self._queue: List[Tuple[float, int, VirtualTimer, Callable[[], None]]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> VirtualTimer:
        timer = VirtualTimer()
        heapq.heappush(self._queue, (self.now + delay, next(self._seq), timer, callback))
        return timer

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while self._queue and self._queue[0][0] <= target:
            when, _, timer, callback = heapq.heappop(self._queue)
            self.now = when
            if not timer.cancelled:
                callback()
        self.now = target

    @property
    def pending(self) -> int:
        return sum(1 for _, _, timer, _ in self._queue if not timer.cancelled)


@pytest.fixture
def scheduler() -> VirtualScheduler:
    return VirtualScheduler()


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file"""
    return Settings(
        _env_file=None,
        private_api_base=BACKEND_URL,
        notification_ttl_ms=3000,
        log_level="DEBUG",
    )


@pytest.fixture
def client(test_settings):
    """Test client with the lifespan running (backend client started)"""
    app = create_app(test_settings)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def sample_clientes():
    return [
        {"id": 1, "nome": "Ana Souza", "telefone": "11999990000", "email": None},
        {"id": 2, "nome": "Bruno Lima", "telefone": "11988887777", "email": "bruno@example.com"},
    ]


@pytest.fixture
def sample_servicos():
    return [
        {"id": 10, "nome": "Corte", "preco": 40.0, "duracao_min": 30},
        {"id": 11, "nome": "Barba", "preco": 25.0},
    ]


@pytest.fixture
def sample_agendamentos():
    return [
        {
            "id": 100,
            "cliente_id": 1,
            "data_hora": "2025-03-10T14:00:00",
            "preco": 65.0,
            "concluido": False,
            "servicos_ids": [10, 11],
        }
    ]
