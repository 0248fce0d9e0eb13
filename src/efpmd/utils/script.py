from typing import Dict, Sequence, Union

import rich
import yaml
from omegaconf import DictConfig, OmegaConf
from rich.syntax import Syntax
from rich.tree import Tree

from efpmd.configuration import Configuration

__all__ = ["todict", "print_config", "save_config"]


def todict(config: Union[Configuration, DictConfig, Dict]) -> Dict:
    if isinstance(config, Configuration):
        config = config.to_dict()
    config_dict = yaml.safe_load(OmegaConf.to_yaml(OmegaConf.create(config), resolve=True))
    return config_dict


def print_config(
    config: Union[Configuration, DictConfig],
    fields: Sequence[str] = (
        "run_type",
        "coord_type",
        "units_factor",
        "terms",
        "elec_damp",
        "disp_damp",
        "pol_damp",
        "hess_delta",
        "max_steps",
        "print_step",
        "target_temperature",
        "time_step",
        "ensemble_type",
        "thermostat_tau",
        "opt_tol",
        "fraglib_path",
        "userlib_path",
        "frags",
    ),
    resolve: bool = True,
) -> None:
    """Prints content of a configuration using Rich library and its tree structure.

    Args:
        config (Configuration, DictConfig): Config.
        fields (Sequence[str], optional): Determines which main fields from config will be printed
        and in what order.
        resolve (bool, optional): Whether to resolve reference fields of DictConfig.
    """
    if isinstance(config, Configuration):
        config = OmegaConf.create(config.to_dict())

    style = "dim"
    tree = Tree(
        ":gear: Loaded configuration:", style=style, guide_style=style
    )

    for field in fields:
        branch = tree.add(field, style=style, guide_style=style)

        config_section = config.get(field)
        branch_content = str(config_section)
        if OmegaConf.is_config(config_section):
            branch_content = OmegaConf.to_yaml(config_section, resolve=resolve)

        branch.add(Syntax(branch_content, "yaml"))

    rich.print(tree)


def save_config(config: Configuration, path: str):
    """
    Save a loaded configuration to a yaml file.

    Args:
        config (efpmd.configuration.Configuration): Loaded configuration.
        path (str): Target file.
    """
    with open(path, "w") as yf:
        yaml.dump(todict(config), yf, default_flow_style=False, sort_keys=False)
