from dataclasses import dataclass, field
from typing import Any, List, Optional

from omegaconf import MISSING

__all__ = ["ParseConfig", "register_configs"]


@dataclass
class ParseConfig:
    defaults: List[Any] = field(
        default_factory=lambda: [
            "_self_",
            {"override hydra/job_logging": "colorlog"},
            {"override hydra/hydra_logging": "colorlog"},
        ]
    )

    input_file: str = MISSING
    output_file: Optional[str] = None
    print_config: bool = True
    print_options: bool = False


def register_configs():
    from hydra.core.config_store import ConfigStore

    cs = ConfigStore.instance()

    cs.store(name="parse", node=ParseConfig)
