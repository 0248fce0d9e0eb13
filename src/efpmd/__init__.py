from efpmd import definitions
from efpmd import units
from efpmd.configuration import *
from efpmd import parsers
from efpmd.parsers import InputError, ErrorKind, parse_config, load_config, loads
