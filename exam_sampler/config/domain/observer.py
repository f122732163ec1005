"""Events raised while loading and validating sampler configuration."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, questions_path: str) -> None: ...

    def config_threshold_at_floor_warning(self, threshold: float) -> None: ...
