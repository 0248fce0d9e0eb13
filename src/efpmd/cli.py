import logging
import sys
from typing import Optional

import hydra
from omegaconf import DictConfig, OmegaConf

from efpmd.config import register_configs
from efpmd.configuration import Configuration
from efpmd.parsers import InputError, parse_config, print_options
from efpmd.utils.script import print_config, save_config

log = logging.getLogger(__name__)

register_configs()

header = """
   ___________ ___                __
  / __/ __/ _ \\/ _ \\___ ________ / /__ __
 / _// _// ___/ ___/ _ `/ __(_-</ -_) __/
/___/_/ /_/  /_/   \\_,_/_/ /___/\\__/_/
"""


def run(config: DictConfig) -> Optional[Configuration]:
    """
    Load the input file given in the config and report the result.

    Args:
        config (DictConfig): Command line configuration, see :obj:`efpmd.config.ParseConfig`.

    Returns:
        Configuration: The loaded configuration or None if loading failed.
    """
    if config.get("print_options"):
        print_options()

    if OmegaConf.is_missing(config, "input_file"):
        log.error("Config incomplete! You need to specify the input file `input_file`.")
        return None

    input_file = hydra.utils.to_absolute_path(config.input_file)

    try:
        efp_config = parse_config(input_file)
    except InputError as e:
        log.error("Could not load {:s}: {:s}".format(input_file, str(e)))
        return None

    if config.print_config:
        print_config(efp_config)

    if config.output_file is not None:
        output_file = hydra.utils.to_absolute_path(config.output_file)
        save_config(efp_config, output_file)
        log.info("Configuration written to {:s}".format(output_file))

    return efp_config


@hydra.main(config_path=None, config_name="parse", version_base="1.2")
def parse(config: DictConfig):
    """
    Check an EFP input file and print the resulting run configuration.
    """
    print(header)

    if run(config) is None:
        sys.exit(1)
