from dataclasses import dataclass, field

from chirpy_app.metrics.hit_counter import HitCounter

DEV_PLATFORM = "dev"
DEFAULT_MAX_CHIRP_LENGTH = 140


@dataclass
class ApiConfig:
    """
    Per-application state shared by every request.

    Built once by create_app() from its Settings and stored on
    app.state.api_config.
    """
    platform: str = ""
    max_chirp_length: int = DEFAULT_MAX_CHIRP_LENGTH
    file_server_hits: HitCounter = field(default_factory=HitCounter)

    @property
    def is_dev(self) -> bool:
        return self.platform == DEV_PLATFORM
