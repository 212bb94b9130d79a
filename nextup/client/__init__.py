from nextup.client.api_client import NextUpClient, ApiError
from nextup.client.timer import PresentationTimer, Phase, TimerStateError
