import logging
import random

from paygate.config import Settings
from paygate.models.payment import ProcessorKind, ProcessorProfile
from paygate.processors.profiled_processor import ProfiledProcessor
from paygate.processors.profiles import PROFILES


class ProcessorRegistry:
    """
    Holds one ProfiledProcessor per ProcessorKind.
    Created once at startup; every processor shares the same log sink but
    owns its own random generator.
    """

    def __init__(
        self,
        logger: logging.Logger,
        settings: Settings,
        profiles: dict[ProcessorKind, ProcessorProfile] | None = None,
    ):
        self._processors: dict[ProcessorKind, ProfiledProcessor] = {}
        for kind, profile in (profiles or PROFILES).items():
            self._processors[kind] = ProfiledProcessor(
                profile=profile,
                logger=logger,
                rng=self._make_rng(settings.RANDOM_SEED, kind),
                latency_unit=settings.LATENCY_UNIT_SECONDS,
            )

    @staticmethod
    def _make_rng(seed: int | None, kind: ProcessorKind) -> random.Random:
        if seed is None:
            return random.Random()
        # Distinct, reproducible stream per processor kind
        return random.Random(f"{seed}:{kind.value}")

    def get(self, kind: ProcessorKind) -> ProfiledProcessor:
        return self._processors[kind]

    def all(self) -> list[ProfiledProcessor]:
        return list(self._processors.values())

    def profiles(self) -> list[ProcessorProfile]:
        return [p.profile for p in self._processors.values()]
